"""Session record value object.

One live refresh-eligible session: the opaque session identifier, the
subject it was issued to and the refresh token minted with it. Stored in the
credential store with a TTL equal to the refresh token lifetime, replaced on
every rotation and removed on logout.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionRecord:
    """Refresh session bound to a user.

    Attributes:
        session_id: Opaque, unguessable, single-use identifier.
        user_id: Subject the tokens were issued to.
        refresh_token: Refresh token minted alongside this session.
        created_at: When the session was created (informational).
    """

    session_id: str
    user_id: UUID
    refresh_token: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "user_id": str(self.user_id),
            "refresh_token": self.refresh_token,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionRecord":
        """Rebuild a record from its stored form.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If user_id or created_at do not parse.
        """
        return cls(
            session_id=str(data["session_id"]),
            user_id=UUID(str(data["user_id"])),
            refresh_token=str(data["refresh_token"]),
            created_at=datetime.fromisoformat(str(data["created_at"])),
        )
