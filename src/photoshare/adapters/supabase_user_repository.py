"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photoshare.adapters.supabase_errors import execute, is_unique_violation
from photoshare.domain.errors import DuplicateUsername, PersistenceFailure
from photoshare.domain.models import UserRecord
from photoshare.services.users import UserRepository

_COLUMNS = "id, username, email, password_hash, github_id"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        return self._get_one("id", str(user_id))

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        return self._get_one("username", username)

    def get_by_github_id(self, github_id: str) -> UserRecord | None:
        """Return the user linked to a GitHub account, if present."""
        return self._get_one("github_id", github_id)

    def create_user(
        self,
        username: str,
        email: str,
        password_hash: str | None,
        github_id: str | None = None,
    ) -> UserRecord:
        """Insert a user row and return it."""
        query = self.client.table("users").insert(
            {
                "username": username,
                "email": email,
                "password_hash": password_hash,
                "github_id": github_id,
            }
        )
        try:
            response = execute(query, "create user")
        except PersistenceFailure as exc:
            if is_unique_violation(exc.__cause__):
                raise DuplicateUsername(username) from exc.__cause__
            raise
        if not response.data:
            raise PersistenceFailure("Failed to create user in Supabase")
        return _to_user(response.data[0])

    def _get_one(self, column: str, value: str) -> UserRecord | None:
        response = execute(
            self.client.table("users").select(_COLUMNS).eq(column, value).limit(1),
            "load user",
        )
        if response.data:
            return _to_user(response.data[0])
        return None


def _to_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        email=str(row.get("email") or ""),
        password_hash=row.get("password_hash"),  # type: ignore[arg-type]
        github_id=row.get("github_id"),  # type: ignore[arg-type]
    )
