"""Supabase-backed login session store."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from photoshare.adapters.supabase_errors import execute
from photoshare.domain.errors import PersistenceFailure
from photoshare.domain.sessions import SessionRecord
from photoshare.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for login sessions."""

    client: Client

    def create_session(
        self, token: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        """Insert a session row and return it."""
        response = execute(
            self.client.table("sessions").insert(
                {
                    "token": token,
                    "user_id": str(user_id),
                    "expires_at": expires_at.isoformat(),
                }
            ),
            "create session",
        )
        if not response.data:
            raise PersistenceFailure("Failed to create session")
        return _to_session(response.data[0])

    def get_session(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""
        response = execute(
            self.client.table("sessions")
            .select("token, user_id, expires_at")
            .eq("token", token)
            .limit(1),
            "load session",
        )
        if not response.data:
            return None
        return _to_session(response.data[0])

    def delete_session(self, token: str) -> None:
        """Delete a session row. Deleting a missing row is a no-op."""
        execute(
            self.client.table("sessions").delete().eq("token", token),
            "delete session",
        )


def _to_session(row: dict[str, object]) -> SessionRecord:
    expires_at = datetime.fromisoformat(str(row["expires_at"]))
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    return SessionRecord(
        token=str(row["token"]),
        user_id=UUID(str(row["user_id"])),
        expires_at=expires_at,
    )
