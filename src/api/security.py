"""JWT session tokens and the bearer-token access gate."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from api.config import Settings
from api.dependencies import get_settings
from domain.model.errors import InvalidTokenError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, settings: Settings) -> str:
    """Create a signed JWT binding user_id, valid for settings.jwt_expiration_days."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "exp": now + timedelta(days=settings.jwt_expiration_days),
        "iat": now,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> str:
    """Verify JWT signature and expiry and return the embedded user_id.

    Raises:
        InvalidTokenError: malformed, expired, bad signature or no subject
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise InvalidTokenError("Token has no subject")
    return user_id


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str:
    """Require a valid bearer token and return the caller's user id.

    Does not look the user up; a valid signature is sufficient.
    The scheme must be exactly "Bearer"; HTTPBearer alone accepts any casing.
    """
    if not credentials or credentials.scheme != "Bearer":
        logger.info("Request rejected: no bearer token", extra={"path": request.url.path})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = verify_token(credentials.credentials, settings)
    except InvalidTokenError:
        logger.info("Request rejected: invalid bearer token", extra={"path": request.url.path})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user_id
