"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /sign-up      - Create user
    POST /sign-in      - Open a session, issue tokens
    POST /refresh      - Rotate the session, issue new tokens
    GET  /logout       - End the session
    GET  /users/me     - Current user
    GET  /users/       - List users (admin, moderator)
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from authgate.domain.entities import User
from authgate.domain.enums import UserRole


# =============================================================================
# Registration
# =============================================================================


class SignUpRequest(BaseModel):
    """Request schema for user registration.

    POST /sign-up
    Returns: 201 Created
    """

    name: str = Field(..., min_length=1, max_length=100, examples=["Ada Lovelace"])
    email: EmailStr = Field(..., examples=["ada@example.com"])
    password: str = Field(..., min_length=8, max_length=72, examples=["SecurePass123!"])
    password_confirm: str = Field(
        ...,
        validation_alias=AliasChoices("password_confirm", "passwordConfirm"),
        examples=["SecurePass123!"],
    )
    role: UserRole = Field(
        default=UserRole.USER,
        description="Only 'user' is accepted for self registration",
    )


# =============================================================================
# Sign-in / refresh
# =============================================================================


class SignInRequest(BaseModel):
    """Request schema for sign-in.

    POST /sign-in
    Accepts "email" or "login" for the login key.
    """

    email: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("email", "login"),
        examples=["ada@example.com"],
    )
    password: str = Field(..., min_length=1, examples=["SecurePass123!"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "ada@example.com", "password": "SecurePass123!"}
        }
    )


class TokenResponse(BaseModel):
    """Response schema for sign-in and refresh.

    The session identifier is delivered only in its HTTP-only cookie.
    """

    status: Literal["success"] = "success"
    access_token: str = Field(..., description="JWT access token (short-lived)")
    refresh_token: str = Field(..., description="JWT refresh token (long-lived)")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class StatusResponse(BaseModel):
    """Bare success acknowledgement (logout)."""

    status: Literal["success"] = "success"


# =============================================================================
# Users
# =============================================================================


class UserResponse(BaseModel):
    """Filtered user representation (never includes the password hash)."""

    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserEnvelope(BaseModel):
    status: Literal["success"] = "success"
    user: UserResponse


class UserListResponse(BaseModel):
    status: Literal["success"] = "success"
    results: int = Field(..., description="Number of users in this page")
    users: list[UserResponse]


class HealthResponse(BaseModel):
    status: str
    cache: str
