from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Provider(str, Enum):
    """Identity provider that owns a user's credentials."""
    LOCAL = 'local'
    GOOGLE = 'google'


@dataclass
class User:
    """Domain model representing a user identity."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    provider: Provider = Provider.LOCAL
    password_hash: str | None = None
