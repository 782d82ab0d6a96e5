"""Domain models for photos."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a photo and its metadata."""

    id: UUID
    owner_id: UUID
    title: str
    description: str
    tags: list[str]
    image_url: str
    created_at: datetime | None = None
    owner_username: str | None = None


@dataclass(frozen=True)
class PhotoUpdate:
    """Editable photo fields. The owner is fixed at creation."""

    title: str
    description: str
    tags: list[str]


@dataclass(frozen=True)
class StoredFile:
    """Reference to an uploaded file persisted by the upload intake."""

    filename: str
    path: str
    url: str


def parse_tags(raw: str | None) -> list[str]:
    """Split a comma-separated tag string into trimmed, non-empty tags."""
    if raw is None:
        return []
    tags: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value:
            tags.append(value)
    return tags
