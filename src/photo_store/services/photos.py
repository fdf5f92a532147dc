"""Photo lifecycle: upload, frame fill, sharing and deletion."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from photo_store.adapters.s3_photo_storage import PhotoStorage
from photo_store.adapters.session_scheduler_client import SessionScheduler
from photo_store.domain.errors import (
    FileDeleteError,
    InvalidFileError,
    InvalidOperationError,
    PhotoNotFoundError,
    PhotoUploadError,
    SessionSchedulingError,
    StorageDeleteError,
    StorageUploadError,
    UnauthorizedError,
    UserNotFoundError,
)
from photo_store.domain.models import UserRecord
from photo_store.domain.photos import (
    FRAME_LOCATION,
    FRAME_PHOTO_PATH,
    FRAME_STORAGE_KEY,
    PhotoRecord,
    PhotoUploadRequest,
    UploadedFile,
)
from photo_store.services.users import UserService

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo metadata."""

    def create_photo(self, user_id: int, payload: dict[str, object]) -> PhotoRecord:
        """Create a photo row and return it."""

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def update_photo(self, photo_id: int, payload: dict[str, object]) -> PhotoRecord:
        """Update a photo row and return it."""

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo row."""

    def list_user_photos(self, user_id: int) -> list[PhotoRecord]:
        """Return photos owned by a user, newest first."""


@dataclass
class PhotoService:
    """Owns the rules for creating, filling, sharing and deleting photos.

    Frame photos are placeholders created without any stored bytes. They are
    filled exactly once by ``upload_frame_photo`` and cannot change their
    shared flag until then. Each step persists independently: a failure in a
    later step never rolls back an earlier one.
    """

    photo_repository: PhotoRepository
    user_service: UserService
    storage: PhotoStorage
    scheduler: SessionScheduler
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    async def upload_photo(
        self, file: UploadedFile, request: PhotoUploadRequest
    ) -> PhotoRecord:
        """Create a photo, or a frame placeholder when ``frame_active`` is set.

        Rejected files and unknown users are raised as ``PhotoUploadError``
        wrapping the cause. A scheduler failure after the row is saved is
        raised as ``SessionSchedulingError``; the row stays persisted.
        """
        try:
            validate_image_file(file, self.max_upload_bytes)
            user = self.user_service.require_user(request.user_id)
        except (InvalidFileError, UserNotFoundError) as exc:
            _logger.warning("Photo upload rejected: %s", exc)
            raise PhotoUploadError("Photo upload failed", cause=exc) from exc

        if request.frame_active:
            return self._create_frame_placeholder(user, request)

        key, path = self._store(file)
        photo = self.photo_repository.create_photo(
            user.id,
            {
                "photo_path": path,
                "storage_key": key,
                "lat": request.lat,
                "lng": request.lng,
                "location": request.location,
                "tag": request.tag,
                "likes": 0,
                "views": 0,
                "upload_datetime": _now_millis(),
                "frame_active": False,
                "shared_active": request.shared_active,
            },
        )
        if photo.shared_active:
            await self._schedule(photo)
        return photo

    async def upload_frame_photo(
        self, photo_id: int, file: UploadedFile, request: PhotoUploadRequest
    ) -> PhotoRecord:
        """Fill a frame placeholder with its real image.

        Scheduler failures here are logged and ignored.
        """
        photo = self.get_photo(photo_id)
        if not photo.frame_active:
            raise InvalidOperationError(f"Photo {photo_id} is not a frame photo")
        validate_image_file(file, self.max_upload_bytes)

        key, path = self._store(file)
        updated = self.photo_repository.update_photo(
            photo.id,
            {
                "photo_path": path,
                "storage_key": key,
                "lat": request.lat,
                "lng": request.lng,
                "location": request.location,
                "tag": request.tag,
                "frame_active": False,
                "shared_active": request.shared_active,
            },
        )
        if updated.shared_active:
            try:
                await self._schedule(updated)
            except SessionSchedulingError as exc:
                _logger.warning("Session scheduler is not available: %s", exc)
        return updated

    async def update_share_status(self, photo_id: int, shared: bool) -> PhotoRecord:
        """Set the shared flag and notify the scheduler when sharing."""
        photo = self.get_photo(photo_id)
        if photo.frame_active:
            raise InvalidOperationError(
                "Share status of a frame photo cannot be changed"
            )
        updated = self.photo_repository.update_photo(
            photo.id, {"shared_active": shared}
        )
        if shared:
            await self._schedule(updated)
        return updated

    def delete_photo(self, photo_id: int, requesting_user_id: int) -> None:
        """Delete the stored object, then the metadata row."""
        photo = self.get_photo(photo_id)
        if photo.user_id != requesting_user_id:
            raise UnauthorizedError(
                f"User {requesting_user_id} cannot delete photo {photo_id}"
            )
        if not photo.frame_active and photo.storage_key:
            try:
                self.storage.delete(photo.storage_key)
            except StorageDeleteError as exc:
                _logger.exception("Failed to delete stored photo %s", photo_id)
                raise FileDeleteError(f"Failed to delete photo {photo_id}") from exc
        self.photo_repository.delete_photo(photo.id)

    def get_photo(self, photo_id: int) -> PhotoRecord:
        """Return a photo or raise when it does not exist."""
        photo = self.photo_repository.get_photo(photo_id)
        if photo is None:
            raise PhotoNotFoundError(f"Photo {photo_id} not found")
        return photo

    def download_photo(self, photo_id: int) -> tuple[PhotoRecord, bytes]:
        """Return a photo together with its stored bytes."""
        photo = self.get_photo(photo_id)
        if photo.frame_active or not photo.storage_key:
            raise InvalidOperationError(f"Photo {photo_id} has no stored image yet")
        return photo, self.storage.get(photo.storage_key)

    def list_user_photos(self, user_id: int) -> list[PhotoRecord]:
        """Return every photo owned by a user."""
        user = self.user_service.require_user(user_id)
        return self.photo_repository.list_user_photos(user.id)

    def _create_frame_placeholder(
        self, user: UserRecord, request: PhotoUploadRequest
    ) -> PhotoRecord:
        return self.photo_repository.create_photo(
            user.id,
            {
                "photo_path": FRAME_PHOTO_PATH,
                "storage_key": FRAME_STORAGE_KEY,
                "lat": 0.0,
                "lng": 0.0,
                "location": FRAME_LOCATION,
                "tag": request.tag,
                "likes": 0,
                "views": 0,
                "upload_datetime": _now_millis(),
                "frame_active": True,
                "shared_active": False,
            },
        )

    def _store(self, file: UploadedFile) -> tuple[str, str]:
        try:
            key = self.storage.put(file)
            return key, self.storage.url_for(key)
        except (StorageUploadError, ValueError) as exc:
            _logger.exception("Photo upload failed: filename=%s", file.filename)
            raise PhotoUploadError("Photo upload failed", cause=exc) from exc

    async def _schedule(self, photo: PhotoRecord) -> None:
        await self.scheduler.schedule_session(
            photo_id=photo.id,
            user_id=photo.user_id,
            lng=photo.lng,
            lat=photo.lat,
        )


def validate_image_file(file: UploadedFile, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Reject empty, non-image or oversized uploads."""
    if file.size == 0:
        raise InvalidFileError("File is empty")
    if not file.content_type or not file.content_type.startswith("image/"):
        raise InvalidFileError("Only image files can be uploaded")
    if file.size > max_bytes:
        raise InvalidFileError(
            f"File size must not exceed {max_bytes // (1024 * 1024)}MB"
        )


def _now_millis() -> int:
    return int(datetime.now(tz=UTC).timestamp() * 1000)
