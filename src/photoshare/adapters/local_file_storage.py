"""Filesystem-backed upload storage."""

import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from photoshare.domain.errors import PersistenceFailure
from photoshare.domain.photos import StoredFile
from photoshare.services.uploads import FileStorage


@dataclass
class LocalFileStorage(FileStorage):
    """Stores uploads in a local directory served under a URL prefix."""

    root: Path
    url_prefix: str = "/uploads"

    @classmethod
    def create(cls, root: str | Path, url_prefix: str) -> "LocalFileStorage":
        """Create storage rooted at a directory, creating it if needed."""
        path = Path(root)
        path.mkdir(parents=True, exist_ok=True)
        return cls(root=path, url_prefix=url_prefix.rstrip("/"))

    def save(self, stream: BinaryIO, field_name: str, extension: str) -> StoredFile:
        """Write the stream to a new file named field-timestamp.ext."""
        stamp = time.time_ns()
        while True:
            filename = f"{field_name}-{stamp}{extension}"
            path = self.root / filename
            try:
                with path.open("xb") as target:
                    shutil.copyfileobj(stream, target)
            except FileExistsError:
                stamp += 1
                continue
            except OSError as exc:
                path.unlink(missing_ok=True)
                raise PersistenceFailure(f"Failed to store upload {filename}") from exc
            return StoredFile(
                filename=filename,
                path=str(path),
                url=f"{self.url_prefix}/{filename}",
            )

    def delete(self, url: str) -> None:
        """Delete a stored file by URL."""
        filename = url.rsplit("/", 1)[-1]
        if not filename:
            return
        try:
            (self.root / filename).unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceFailure(f"Failed to delete upload {filename}") from exc
