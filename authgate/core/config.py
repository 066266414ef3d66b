"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables (and an
optional .env file). Settings are constructed ONCE by the application factory
and passed explicitly into the container; nothing in the codebase reads a
module-level settings instance.

Usage:
    from authgate.core.config import Settings

    settings = Settings()
    settings.access_token_ttl      # timedelta
    settings.refresh_token_ttl     # timedelta, also the session store TTL
"""

from datetime import timedelta

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authgate.core.enums import Environment

MIN_SECRET_LENGTH = 32


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of colored console output",
    )

    # Application metadata
    app_name: str = Field(default="authgate", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    api_prefix: str = Field(
        default="",
        description="Prefix for all auth and user routes (e.g. /api/v1)",
    )
    problem_base_url: str = Field(
        default="https://errors.authgate.local",
        description="Base URL used for RFC 7807 problem 'type' URIs",
    )

    # Credential store (Redis)
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (e.g., redis://host:port/db)",
    )
    cache_key_prefix: str = Field(
        default="auth",
        description="Prefix for every credential store key",
    )
    cache_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Upper bound for every credential store operation",
    )

    # Token signing
    access_token_secret: str = Field(
        description="HMAC secret for access tokens (>= 32 chars)",
    )
    refresh_token_secret: str = Field(
        description="HMAC secret for refresh tokens (>= 32 chars, differs from access)",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    access_token_expire_minutes: int = Field(
        default=15,
        gt=0,
        description="Access token lifetime in minutes",
    )
    refresh_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        gt=0,
        description="Refresh token lifetime in minutes (also session store TTL)",
    )

    # Password hashing
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt work factor (4-31, 12 = ~250ms)",
    )

    # Cookie transport
    access_cookie_name: str = Field(default="access_token")
    session_cookie_name: str = Field(default="session_id")
    cookie_secure: bool = Field(
        default=False,
        description="Mark auth cookies Secure (HTTPS only)",
    )
    cookie_samesite: str = Field(default="lax")

    # Bootstrap admin (optional)
    bootstrap_admin_email: str | None = Field(default=None)
    bootstrap_admin_password: str | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the range bcrypt accepts.

        Raises:
            ValueError: If rounds are not between 4 and 31.
        """
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("access_token_secret", "refresh_token_secret")
    @classmethod
    def validate_secret_length(cls, v: str) -> str:
        """
        Require 256-bit HMAC secrets.

        Raises:
            ValueError: If the secret is shorter than 32 characters.
        """
        if len(v) < MIN_SECRET_LENGTH:
            raise ValueError(
                f"token secrets must be at least {MIN_SECRET_LENGTH} characters"
            )
        return v

    @field_validator("cookie_samesite")
    @classmethod
    def validate_samesite(cls, v: str) -> str:
        value = v.lower()
        if value not in {"lax", "strict", "none"}:
            raise ValueError("cookie_samesite must be one of: lax, strict, none")
        return value

    @field_validator("api_prefix", "problem_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_disjoint_secrets(self) -> "Settings":
        """Refresh tokens must never verify as access tokens, and vice versa."""
        if self.access_token_secret == self.refresh_token_secret:
            raise ValueError("access_token_secret and refresh_token_secret must differ")
        return self

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.refresh_token_expire_minutes)

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION
