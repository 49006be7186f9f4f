"""
Auth schemas.

Request/response schemas for registration, login and identity lookups.

Dependencies: pydantic
System role: Auth API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Request schema for registering a user."""

    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=8, max_length=72)
    company_id: int = Field(gt=0)


class RegisterResponse(BaseModel):
    """Registration confirmation."""

    message: str = "User registered"
    user_id: int


class LoginRequest(BaseModel):
    """Request schema for login."""

    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Issued session token."""

    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token lifetime in seconds")


class ClaimResponse(BaseModel):
    """Decoded claim of the presented token."""

    id: int
    company_id: int
    role: str
    exp: int


class ValidateTokenResponse(BaseModel):
    """Response for GET /validate-token."""

    user: ClaimResponse


class UserResponse(BaseModel):
    """Current user record (never includes the password verifier)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    company_id: int
    role: str
