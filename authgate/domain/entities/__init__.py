"""Domain entities."""

from authgate.domain.entities.session_record import SessionRecord
from authgate.domain.entities.user import User

__all__ = ["SessionRecord", "User"]
