"""Authentication routes (register, login, Google sign-in)."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from api.config import Settings
from api.dependencies import get_identity_verifier, get_settings, get_user_repo
from api.models import AuthResponse, GoogleLoginRequest, LoginRequest, RegisterRequest, UserResponse
from api.security import create_access_token
from domain.model.errors import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    InvalidAssertionError,
    ValidationError,
)
from domain.model.user import User
from port.identity_verifier import IdentityVerifier
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(user: User, settings: Settings) -> AuthResponse:
    return AuthResponse(
        token=create_access_token(user.id, settings),
        user=UserResponse(id=user.id, name=user.name, email=user.email),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: Optional[RegisterRequest] = None,
    repo: UserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
):
    """Register a new local user and return a session token."""
    # A missing body is treated like an empty JSON object
    request = request or RegisterRequest()
    try:
        user = auth_service.register(repo, request.name, request.email, request.password)
    except (ValidationError, DuplicateError) as e:
        logger.info("Registration rejected", extra={"email": request.email, "reason": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DomainError as e:
        logger.error("Register error", extra={"email": request.email, "error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user",
        )

    logger.info("User registered", extra={"userId": user.id})
    return _auth_response(user, settings)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: Optional[LoginRequest] = None,
    repo: UserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
):
    """Login with email and password and return a session token."""
    request = request or LoginRequest()
    try:
        user = auth_service.authenticate(repo, request.email, request.password)
    except (ValidationError, AuthenticationError) as e:
        logger.info("Login rejected", extra={"email": request.email, "reason": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DomainError as e:
        logger.error("Login error", extra={"email": request.email, "error": str(e)})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to login")

    logger.info("User logged in", extra={"userId": user.id})
    return _auth_response(user, settings)


@router.post("/google", response_model=AuthResponse)
async def google_login(
    request: Optional[GoogleLoginRequest] = None,
    repo: UserRepository = Depends(get_user_repo),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
    settings: Settings = Depends(get_settings),
):
    """Login with a Google ID token, creating the account on first use."""
    request = request or GoogleLoginRequest()
    try:
        user = auth_service.login_with_google(repo, verifier, request.id_token)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidAssertionError as e:
        logger.warning("Google login rejected", extra={"reason": str(e)})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Google token",
        )
    except DomainError as e:
        logger.error("Google auth error", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to login with Google",
        )

    logger.info("User logged in with Google", extra={"userId": user.id})
    return _auth_response(user, settings)
