from typing import Protocol

from domain.model.user import Provider, User


class UserRepository(Protocol):
    """Protocol defining the interface for user identity data access.

    Implementations raise StorageError when the store fails and
    DuplicateError when (provider, email) is already taken.
    """
    def create(
        self,
        name: str,
        email: str,
        provider: Provider,
        password_hash: str | None = None,
    ) -> User:
        """Create a new user identity and return it."""
        ...

    def get_by_email(self, email: str, provider: Provider) -> User | None:
        """Find a user by email within one provider scope. Return None if not found."""
        ...
