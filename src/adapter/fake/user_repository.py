"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.errors import DuplicateError
from domain.model.user import Provider, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        name: str,
        email: str,
        provider: Provider,
        password_hash: str | None = None,
    ) -> User:
        if self.get_by_email(email, provider):
            raise DuplicateError("Email already in use")

        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            created_at=now,
            updated_at=now,
            provider=Provider(provider),
            password_hash=password_hash or None,
        )
        self.store[user.id] = user
        return user

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str, provider: Provider) -> User | None:
        for user in self.store.values():
            if user.email == email and user.provider == provider:
                return user
        return None
