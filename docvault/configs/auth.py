"""
Authentication configuration settings.

Signing secret and token lifetime for session tokens, plus the bcrypt
cost factor for stored password verifiers.

Dependencies: pydantic_settings
System role: Auth configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """JWT and password hashing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JWT_",
        case_sensitive=False,
        extra="ignore",
    )

    secret: str | None = Field(
        default=None,
        description="HMAC signing secret; the service refuses to start without it",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expiration_seconds: int = Field(
        default=3600,
        description="Session token lifetime in seconds",
    )
    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt cost factor for new password verifiers",
    )
