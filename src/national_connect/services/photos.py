"""Photo sharing: uploads, the feed and likes."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from national_connect.domain.errors import NotFoundError, ValidationError
from national_connect.domain.models import Photo, StoredFile
from national_connect.services.ids import IdGenerator
from national_connect.services.operations import store_operation
from national_connect.services.users import UserRepository, require_user

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo metadata."""

    def add_photo(self, photo: Photo) -> Photo:
        """Append a photo record and return it."""

    def list_photos(self) -> list[Photo]:
        """Return a snapshot of all photos in insertion order."""

    def increment_likes(self, photo_id: str) -> Photo | None:
        """Add one like and return the updated photo, if present."""


class PhotoStorage(Protocol):
    """Interface for persisting uploaded image bytes."""

    def save(
        self, filename: str, content_type: str | None, content: bytes
    ) -> StoredFile:
        """Validate and write an uploaded image, returning where it lives."""

    def discard(self, stored: StoredFile) -> None:
        """Remove a stored file that was never attached to a photo."""


@dataclass
class PhotoService:
    """Application service for the photo feed."""

    photo_repository: PhotoRepository
    user_repository: UserRepository
    id_generator: IdGenerator

    @store_operation
    def upload(
        self,
        stored_file: StoredFile | None,
        user_id: str | None,
        caption: str | None = None,
    ) -> Photo:
        """Attach an ingested file to a user as a new photo."""
        if stored_file is None:
            raise ValidationError("No photo uploaded")
        if not user_id:
            raise ValidationError("userId is required")
        owner = require_user(self.user_repository, user_id)

        photo = Photo(
            id=self.id_generator.next_id(),
            user_id=owner.id,
            user_name=owner.name,
            filename=stored_file.filename,
            path=stored_file.path,
            caption=caption or "",
            likes=0,
            created_at=datetime.now(tz=UTC),
        )
        self.photo_repository.add_photo(photo)
        _logger.info("Photo uploaded: id=%s user_id=%s", photo.id, owner.id)
        return photo

    @store_operation
    def list_photos(self, user_id: str | None = None) -> list[Photo]:
        """Return photos newest first, optionally for a single owner."""
        photos = self.photo_repository.list_photos()
        if user_id:
            photos = [photo for photo in photos if photo.user_id == user_id]
        return list(reversed(photos))

    @store_operation
    def like(self, photo_id: str) -> Photo:
        """Add one like to a photo."""
        photo = self.photo_repository.increment_likes(photo_id)
        if photo is None:
            raise NotFoundError("Photo not found")
        return photo
