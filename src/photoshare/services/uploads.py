"""Upload intake: validate incoming image files and persist them."""

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import BinaryIO, Protocol

from photoshare.domain.errors import UnsupportedMediaType
from photoshare.domain.photos import StoredFile

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = frozenset({"jpeg", "jpg", "png", "gif"})


class FileStorage(Protocol):
    """Durable storage for uploaded files."""

    def save(self, stream: BinaryIO, field_name: str, extension: str) -> StoredFile:
        """Persist a stream under a new unique name and return its reference."""

    def delete(self, url: str) -> None:
        """Remove a stored file by its public URL. Missing files are ignored."""


def is_allowed_image(content_type: str | None, filename: str | None) -> bool:
    """Check both the file extension and the declared MIME type."""
    if not content_type or not filename:
        return False
    extension = PurePath(filename).suffix.lower().lstrip(".")
    mime = content_type.split(";", 1)[0].strip().lower()
    media_type, _, subtype = mime.partition("/")
    return (
        extension in ALLOWED_IMAGE_TYPES
        and media_type == "image"
        and subtype in ALLOWED_IMAGE_TYPES
    )


@dataclass
class UploadService:
    """Validates uploads and hands accepted files to storage.

    Only the filename extension and declared content type are inspected; the
    bytes themselves are not sniffed.
    """

    storage: FileStorage

    def accept(
        self,
        stream: BinaryIO,
        content_type: str | None,
        filename: str | None,
        field_name: str = "photo",
    ) -> StoredFile:
        """Validate and store an uploaded file.

        Raises UnsupportedMediaType if the extension or MIME type is not an
        allowed image type. Nothing is written in that case.
        """
        if not is_allowed_image(content_type, filename):
            logger.info(
                "Rejected upload %r with content type %r", filename, content_type
            )
            raise UnsupportedMediaType
        extension = PurePath(filename or "").suffix
        stored = self.storage.save(stream, field_name=field_name, extension=extension)
        logger.info("Stored upload %s", stored.filename)
        return stored

    def discard(self, url: str) -> None:
        """Remove a previously stored file."""
        self.storage.delete(url)
