"""Security adapters: bcrypt password hashing and JWT token codec."""

from authgate.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from authgate.infrastructure.security.jwt_service import JWTService

__all__ = ["BcryptPasswordService", "JWTService"]
