"""Pydantic models for API request/response.

Request fields are optional at the schema level so that missing values are
reported by the services with endpoint-specific messages instead of a
generic validation error.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class GoogleLoginRequest(BaseModel):
    """Request model for Google sign-in."""
    model_config = ConfigDict(populate_by_name=True)

    id_token: Optional[str] = Field(None, alias="idToken", description="Google ID token")


class UserResponse(BaseModel):
    """Public view of a user identity."""
    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """Response model for authentication."""
    token: str
    user: UserResponse


class TodoRequest(BaseModel):
    """Request model for creating a todo."""
    text: Optional[str] = None


class TodoResponse(BaseModel):
    """Response model for todo."""
    id: str = Field(..., description="Todo ID")
    text: str
    done: bool = False
    owner_id: str = Field(..., description="Owning user ID")
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    success: bool = True
