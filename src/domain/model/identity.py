from dataclasses import dataclass


@dataclass(frozen=True)
class FederatedIdentity:
    """Verified identity extracted from a federated provider assertion."""
    email: str
    name: str
