"""Application services."""

from authgate.application.services.access_guard import AccessGuard
from authgate.application.services.session_engine import (
    SessionEngine,
    new_session_id,
)
from authgate.application.services.user_directory import UserDirectory

__all__ = ["AccessGuard", "SessionEngine", "UserDirectory", "new_session_id"]
