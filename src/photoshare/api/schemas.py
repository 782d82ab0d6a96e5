"""View models returned by the HTTP routes."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from photoshare.domain.models import UserRecord
from photoshare.domain.photos import PhotoRecord


class UserView(BaseModel):
    """Public view of the signed-in user. Never includes the password hash."""

    id: UUID
    username: str
    email: str

    @classmethod
    def from_record(cls, user: UserRecord | None) -> "UserView | None":
        if user is None:
            return None
        return cls(id=user.id, username=user.username, email=user.email)


class PhotoView(BaseModel):
    """Photo as shown in galleries and forms."""

    id: UUID
    title: str
    description: str
    tags: list[str]
    image_url: str
    owner_id: UUID
    owner_username: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, photo: PhotoRecord) -> "PhotoView":
        return cls(
            id=photo.id,
            title=photo.title,
            description=photo.description,
            tags=list(photo.tags),
            image_url=photo.image_url,
            owner_id=photo.owner_id,
            owner_username=photo.owner_username,
            created_at=photo.created_at,
        )


class PageView(BaseModel):
    """Base view carrying the current user and an optional form error."""

    view: str
    user: UserView | None = None
    error: str | None = None


class GalleryView(PageView):
    """List of photos, optionally the result of a search."""

    photos: list[PhotoView]
    query: str | None = None


class PhotoFormView(PageView):
    """Edit form for a single photo."""

    photo: PhotoView
