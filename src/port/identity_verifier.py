from typing import Protocol

from domain.model.identity import FederatedIdentity


class IdentityVerifier(Protocol):
    """Protocol for verifying a federated identity assertion."""
    def verify(self, assertion: str) -> FederatedIdentity:
        """Verify the assertion and return the identity it carries.

        Raises:
            InvalidAssertionError: signature, issuer, audience or expiry check failed
            IdentityProviderError: the provider could not be consulted
        """
        ...
