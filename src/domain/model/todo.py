"""Todo domain model."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class Todo:
    """A single task owned by exactly one user."""
    id: str
    text: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    done: bool = False

    @staticmethod
    def create(text: str, owner_id: str) -> 'Todo':
        """Build a new, not yet persisted, Todo for the given owner."""
        now = datetime.now(timezone.utc)
        return Todo(
            id=uuid.uuid4().hex,
            text=text,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id
