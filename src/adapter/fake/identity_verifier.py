"""In-memory IdentityVerifier for testing.

Assertions are registered up front as claim dicts; verify() applies the
same audience and email checks the Google adapter relies on.
"""

from domain.model.errors import InvalidAssertionError
from domain.model.identity import FederatedIdentity


class FakeIdentityVerifier:
    def __init__(self, client_id: str = 'test-client-id'):
        self.client_id = client_id
        self.assertions: dict[str, dict] = {}

    def register(self, assertion: str, email: str, name: str | None = None, aud: str | None = None):
        self.assertions[assertion] = {
            'aud': aud or self.client_id,
            'email': email,
            'name': name,
        }

    def verify(self, assertion: str) -> FederatedIdentity:
        claims = self.assertions.get(assertion)
        if claims is None:
            raise InvalidAssertionError("Unknown assertion")
        if claims['aud'] != self.client_id:
            raise InvalidAssertionError("Token has wrong audience")
        email = claims['email']
        return FederatedIdentity(email=email, name=claims['name'] or email.split('@')[0])
