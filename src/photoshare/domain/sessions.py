"""Domain models for login sessions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted login session."""

    token: str
    user_id: UUID
    expires_at: datetime
