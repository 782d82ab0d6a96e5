"""Photo catalogue logic with ownership checks."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photoshare.domain.errors import Forbidden, NotFound
from photoshare.domain.models import UserRecord
from photoshare.domain.photos import PhotoRecord, PhotoUpdate
from photoshare.services.authorization import ensure_owner

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo records.

    Implementations do not check ownership; callers must do that first.
    """

    def create_photo(  # noqa: PLR0913
        self,
        owner_id: UUID,
        title: str,
        description: str,
        tags: list[str],
        image_url: str,
    ) -> PhotoRecord:
        """Create a photo record and return it."""

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def list_by_owner(self, owner_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos in creation order."""

    def list_all(self) -> list[PhotoRecord]:
        """Return every photo with the owner's username resolved."""

    def search(self, terms: list[str]) -> list[PhotoRecord]:
        """Return photos whose title, description or tags contain any term."""

    def update_photo(self, photo_id: UUID, update: PhotoUpdate) -> PhotoRecord | None:
        """Update the editable fields of a photo."""

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo record."""


@dataclass
class PhotoService:
    """Application service for browsing and managing photos."""

    repository: PhotoRepository

    def create(  # noqa: PLR0913
        self,
        owner: UserRecord,
        title: str,
        description: str,
        tags: list[str],
        image_url: str,
    ) -> PhotoRecord:
        """Create a photo owned by the given user."""
        photo = self.repository.create_photo(
            owner_id=owner.id,
            title=title,
            description=description,
            tags=tags,
            image_url=image_url,
        )
        logger.info("User %s uploaded photo %s", owner.username, photo.id)
        return photo

    def get(self, photo_id: UUID) -> PhotoRecord:
        """Return a photo or raise NotFound."""
        photo = self.repository.get_photo(photo_id)
        if photo is None:
            raise NotFound(f"Photo {photo_id} not found")
        return photo

    def get_owned_photo(self, user: UserRecord, photo_id: UUID) -> PhotoRecord:
        """Fetch a photo and ensure the user owns it."""
        photo = self.get(photo_id)
        try:
            ensure_owner(user, photo.owner_id)
        except Forbidden:
            logger.warning(
                "User %s denied access to photo %s", user.username, photo_id
            )
            raise
        return photo

    def list_for_owner(self, owner: UserRecord) -> list[PhotoRecord]:
        """Return the photos owned by a user."""
        return self.repository.list_by_owner(owner.id)

    def list_gallery(self) -> list[PhotoRecord]:
        """Return all photos for the public gallery."""
        return self.repository.list_all()

    def search(self, query: str | None) -> list[PhotoRecord]:
        """Search photos by title, description and tags."""
        terms = _search_terms(query)
        if not terms:
            return []
        return self.repository.search(terms)

    def edit(
        self, user: UserRecord, photo_id: UUID, update: PhotoUpdate
    ) -> PhotoRecord:
        """Update a photo owned by the user."""
        self.get_owned_photo(user, photo_id)
        updated = self.repository.update_photo(photo_id, update)
        if updated is None:
            raise NotFound(f"Photo {photo_id} not found")
        logger.info("User %s edited photo %s", user.username, photo_id)
        return updated

    def delete(self, user: UserRecord, photo_id: UUID) -> PhotoRecord:
        """Delete a photo owned by the user and return the removed record."""
        photo = self.get_owned_photo(user, photo_id)
        self.repository.delete_photo(photo_id)
        logger.info("User %s deleted photo %s", user.username, photo_id)
        return photo


def _search_terms(query: str | None) -> list[str]:
    if not query:
        return []
    return [term.lower() for term in query.split() if term]


def photo_matches(photo: PhotoRecord, terms: list[str]) -> bool:
    """Return True if any term is a case-insensitive substring of the photo text."""
    haystacks = [photo.title.lower(), photo.description.lower()]
    haystacks.extend(tag.lower() for tag in photo.tags)
    return any(term in haystack for term in terms for haystack in haystacks)
