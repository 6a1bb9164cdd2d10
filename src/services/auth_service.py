"""Auth service — registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

import bcrypt

from domain.model.errors import AuthenticationError, DomainError, DuplicateError, ValidationError
from domain.model.user import Provider, User
from port.identity_verifier import IdentityVerifier
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

INVALID_CREDENTIALS = "Invalid email or password"


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh bcrypt salt.

    Raises:
        DomainError: bcrypt refused the input (e.g. longer than 72 bytes)
    """
    try:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except ValueError as e:
        raise DomainError("Failed to hash password") from e


def verify_password(plain: str, hashed: str | None) -> bool:
    """Constant-time comparison of a plaintext password against a bcrypt hash."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("Password could not be checked against the stored hash")
        return False


def register(repo: UserRepository, name: str | None, email: str | None, password: str | None) -> User:
    """Register a new local user.

    Raises:
        ValidationError: a required field is missing
        DuplicateError: a local account with this email exists
        StorageError: the store failed
    """
    if not name or not email or not password:
        raise ValidationError("Name, email and password are required")

    if repo.get_by_email(email, Provider.LOCAL):
        raise DuplicateError("Email already in use")

    password_hash = hash_password(password)
    return repo.create(name=name, email=email, provider=Provider.LOCAL, password_hash=password_hash)


def authenticate(repo: UserRepository, email: str | None, password: str | None) -> User:
    """Authenticate a local user by email and password.

    Unknown email and wrong password raise the same error so the
    response never reveals whether an account exists.

    Raises:
        ValidationError: a required field is missing
        AuthenticationError: invalid credentials
        StorageError: the store failed
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = repo.get_by_email(email, Provider.LOCAL)
    if not user or not verify_password(password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user


def login_with_google(repo: UserRepository, verifier: IdentityVerifier, id_token: str | None) -> User:
    """Resolve a Google ID token to a user, creating the account on first login.

    Raises:
        ValidationError: no token supplied
        InvalidAssertionError: the token failed verification
        IdentityProviderError: Google could not be consulted
        StorageError: the store failed
    """
    if not id_token:
        raise ValidationError("No Google token provided")

    identity = verifier.verify(id_token)

    user = repo.get_by_email(identity.email, Provider.GOOGLE)
    if user:
        return user

    try:
        user = repo.create(name=identity.name, email=identity.email, provider=Provider.GOOGLE)
    except DuplicateError:
        # Concurrent first login created the account between lookup and insert
        user = repo.get_by_email(identity.email, Provider.GOOGLE)
        if not user:
            raise
    logger.info("Google user created", extra={"userId": user.id})
    return user
