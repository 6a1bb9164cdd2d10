"""Domain-level exceptions.

Services and adapters raise these errors to express business rule violations
and storage failures. Route handlers catch them and map to HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist or is not owned by the caller."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class AuthenticationError(DomainError):
    """Credentials could not be verified."""


class InvalidTokenError(AuthenticationError):
    """Session token is malformed, expired or carries a bad signature."""


class InvalidAssertionError(AuthenticationError):
    """Federated identity assertion failed signature, audience or expiry checks."""


class StorageError(DomainError):
    """The backing store failed to complete an operation."""


class IdentityProviderError(DomainError):
    """The federated identity provider could not be reached or is not configured."""
