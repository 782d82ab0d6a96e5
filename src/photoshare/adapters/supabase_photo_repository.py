"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photoshare.adapters.supabase_errors import execute
from photoshare.domain.errors import PersistenceFailure
from photoshare.domain.photos import PhotoRecord, PhotoUpdate
from photoshare.services.photos import PhotoRepository

_COLUMNS = "id, user_id, title, description, tags, image_url, created_at"
_COLUMNS_WITH_OWNER = f"{_COLUMNS}, users(username)"
_SEARCH_COLUMNS = ("title", "description", "tags_text")


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence.

    ``tags_text`` mirrors ``tags`` as a space-joined string so tag content can
    be matched with ``ilike`` alongside title and description.
    """

    client: Client

    def create_photo(  # noqa: PLR0913
        self,
        owner_id: UUID,
        title: str,
        description: str,
        tags: list[str],
        image_url: str,
    ) -> PhotoRecord:
        """Insert a photo row and return it."""
        response = execute(
            self.client.table("photos").insert(
                {
                    "user_id": str(owner_id),
                    "title": title,
                    "description": description,
                    "tags": tags,
                    "tags_text": " ".join(tags),
                    "image_url": image_url,
                }
            ),
            "create photo",
        )
        if not response.data:
            raise PersistenceFailure("Failed to create photo")
        return _to_photo(response.data[0])

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""
        response = execute(
            self.client.table("photos")
            .select(_COLUMNS_WITH_OWNER)
            .eq("id", str(photo_id))
            .limit(1),
            "load photo",
        )
        if not response.data:
            return None
        return _to_photo(response.data[0])

    def list_by_owner(self, owner_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos, oldest first."""
        response = execute(
            self.client.table("photos")
            .select(_COLUMNS)
            .eq("user_id", str(owner_id))
            .order("created_at"),
            "list photos",
        )
        return [_to_photo(row) for row in response.data or []]

    def list_all(self) -> list[PhotoRecord]:
        """Return every photo with its owner's username."""
        response = execute(
            self.client.table("photos")
            .select(_COLUMNS_WITH_OWNER)
            .order("created_at"),
            "list gallery",
        )
        return [_to_photo(row) for row in response.data or []]

    def search(self, terms: list[str]) -> list[PhotoRecord]:
        """Return photos where any term appears in title, description or tags."""
        filters = _search_filter(terms)
        if not filters:
            return []
        response = execute(
            self.client.table("photos")
            .select(_COLUMNS_WITH_OWNER)
            .or_(filters)
            .order("created_at"),
            "search photos",
        )
        return [_to_photo(row) for row in response.data or []]

    def update_photo(self, photo_id: UUID, update: PhotoUpdate) -> PhotoRecord | None:
        """Update title, description and tags of a photo."""
        response = execute(
            self.client.table("photos")
            .update(
                {
                    "title": update.title,
                    "description": update.description,
                    "tags": update.tags,
                    "tags_text": " ".join(update.tags),
                }
            )
            .eq("id", str(photo_id)),
            "update photo",
        )
        if not response.data:
            return None
        return _to_photo(response.data[0])

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo row."""
        execute(
            self.client.table("photos").delete().eq("id", str(photo_id)),
            "delete photo",
        )


def _search_filter(terms: list[str]) -> str:
    """Build a PostgREST ``or`` filter matching any term in any search column."""
    clauses = []
    for term in terms:
        cleaned = term.replace("\\", "").replace('"', "")
        if not cleaned:
            continue
        for column in _SEARCH_COLUMNS:
            clauses.append(f'{column}.ilike."*{cleaned}*"')
    return ",".join(clauses)


def _to_photo(row: dict[str, object]) -> PhotoRecord:
    owner = row.get("users")
    owner_username = owner.get("username") if isinstance(owner, dict) else None
    created_at = row.get("created_at")
    return PhotoRecord(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        tags=list(row.get("tags") or []),  # type: ignore[call-overload]
        image_url=str(row["image_url"]),
        created_at=datetime.fromisoformat(str(created_at)) if created_at else None,
        owner_username=owner_username,
    )
