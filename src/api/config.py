"""Process configuration, read once at startup."""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEV_JWT_SECRET = "dev_secret_change_me"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    """Immutable application settings passed to every component that needs them."""
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expiration_days: int = 7
    mongo_url: str | None = None
    database_name: str = "todo_app"
    google_client_id: str | None = None
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    port: int = 5000


def _parse_origins(value: str | None) -> tuple[str, ...]:
    if not value:
        return DEFAULT_CORS_ORIGINS
    # Strip whitespace to handle "origin1, origin2" format
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def load_settings() -> Settings:
    """Build Settings from the environment (and a .env file if present)."""
    load_dotenv()

    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        logger.warning(
            "JWT_SECRET is not set, falling back to an insecure development secret. "
            "Generate a secure key with: openssl rand -hex 32"
        )
        jwt_secret = DEV_JWT_SECRET

    return Settings(
        jwt_secret=jwt_secret,
        mongo_url=os.getenv("MONGO_URI"),
        database_name=os.getenv("MONGODB_DATABASE", "todo_app"),
        google_client_id=os.getenv("GOOGLE_CLIENT_ID") or None,
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        port=int(os.getenv("PORT", 5000)),
    )
