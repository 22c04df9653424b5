"""Local disk storage for uploaded photos."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path, PurePath

from national_connect.domain.errors import ValidationError
from national_connect.domain.models import StoredFile
from national_connect.services.ids import IdGenerator
from national_connect.services.photos import PhotoStorage

ALLOWED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png|gif")
PUBLIC_PREFIX = "/uploads"

_logger = logging.getLogger(__name__)


@dataclass
class LocalPhotoStorage(PhotoStorage):
    """Writes uploads under ``upload_dir`` with collision-free names."""

    upload_dir: Path
    id_generator: IdGenerator
    max_bytes: int

    def save(
        self, filename: str, content_type: str | None, content: bytes
    ) -> StoredFile:
        """Check the upload is a small image and write it to disk."""
        original_name = PurePath(filename or "").name
        extension = PurePath(original_name).suffix.lower()
        if not (
            ALLOWED_IMAGE_TYPES.search(extension)
            and ALLOWED_IMAGE_TYPES.search(content_type or "")
        ):
            raise ValidationError("Images only!")
        if len(content) > self.max_bytes:
            raise ValidationError("File too large")

        stored_name = f"{self.id_generator.next_id()}-{original_name}"
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / stored_name).write_bytes(content)
        _logger.info("Stored upload: filename=%s bytes=%s", stored_name, len(content))
        return StoredFile(filename=stored_name, path=f"{PUBLIC_PREFIX}/{stored_name}")

    def discard(self, stored: StoredFile) -> None:
        """Delete a stored file, ignoring files that are already gone."""
        (self.upload_dir / stored.filename).unlink(missing_ok=True)
