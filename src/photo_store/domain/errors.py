"""Error types raised by the photo store."""


class PhotoStoreError(Exception):
    """Base class for photo store failures."""

    error_code = "PHOTO_STORE_ERROR"
    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Serialize the error for API responses."""
        return {"error": self.error_code, "message": self.message}


class UserNotFoundError(PhotoStoreError):
    """Raised when the referenced user does not exist."""

    error_code = "USER_NOT_FOUND"
    status_code = 404


class PhotoNotFoundError(PhotoStoreError):
    """Raised when the referenced photo does not exist."""

    error_code = "PHOTO_NOT_FOUND"
    status_code = 404


class InvalidOperationError(PhotoStoreError):
    """Raised when a frame/share state forbids the requested change."""

    error_code = "INVALID_OPERATION"
    status_code = 409


class InvalidFileError(PhotoStoreError):
    """Raised for empty, non-image or oversized uploads."""

    error_code = "INVALID_FILE"
    status_code = 400


class UnauthorizedError(PhotoStoreError):
    """Raised when a user acts on a photo they do not own."""

    error_code = "UNAUTHORIZED"
    status_code = 403


class PhotoUploadError(PhotoStoreError):
    """Wraps validation and storage failures while creating a photo."""

    error_code = "PHOTO_UPLOAD_FAILED"

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        if isinstance(cause, PhotoStoreError):
            self.status_code = cause.status_code


class FileDeleteError(PhotoStoreError):
    """Raised when a stored object could not be removed."""

    error_code = "FILE_DELETE_FAILED"


class StorageUploadError(PhotoStoreError):
    """Raised when the object store rejects an upload."""

    error_code = "STORAGE_UPLOAD_FAILED"
    status_code = 502


class StorageDownloadError(PhotoStoreError):
    """Raised when an object is missing or cannot be read."""

    error_code = "STORAGE_DOWNLOAD_FAILED"
    status_code = 502


class StorageDeleteError(PhotoStoreError):
    """Raised when the object store rejects a delete."""

    error_code = "STORAGE_DELETE_FAILED"
    status_code = 502


class SessionSchedulingError(PhotoStoreError):
    """Raised when the session scheduler could not be notified."""

    error_code = "SESSION_SCHEDULING_FAILED"
    status_code = 502
