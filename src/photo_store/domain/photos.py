"""Domain models for photos and uploads."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

FRAME_PHOTO_PATH = "temp_path"
FRAME_STORAGE_KEY = "temp_file"
FRAME_LOCATION = "temp_location"


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a persisted photo row."""

    id: int
    user_id: int
    photo_path: str | None
    storage_key: str | None
    tag: str | None
    lat: float
    lng: float
    location: str | None
    likes: int
    views: int
    upload_time: int
    frame_active: bool
    shared_active: bool


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file buffered in memory."""

    filename: str
    content_type: str | None
    content: bytes

    @property
    def size(self) -> int:
        """Number of buffered bytes."""
        return len(self.content)


class PhotoUploadRequest(BaseModel):
    """Metadata part sent alongside an uploaded photo."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    lat: float = 0.0
    lng: float = 0.0
    location: str | None = None
    tag: str | None = None
    frame_active: bool = Field(default=False, alias="frameActive")
    shared_active: bool = Field(default=False, alias="sharedActive")


def file_extension(storage_key: str | None) -> str:
    """Return the lower-cased extension of a storage key, if any."""
    if not storage_key or "." not in storage_key:
        return ""
    return storage_key.rsplit(".", 1)[1].lower()


def summary_content_type(storage_key: str | None) -> str:
    """Content type reported in photo summaries."""
    extension = file_extension(storage_key)
    if extension == "png":
        return "image/png"
    if extension == "gif":
        return "image/gif"
    if extension in {"jpg", "jpeg"}:
        return "image/jpeg"
    return "application/octet-stream"


def download_content_type(storage_key: str | None) -> str:
    """Content type used when serving raw photo bytes."""
    extension = file_extension(storage_key)
    if extension == "png":
        return "image/png"
    if extension == "gif":
        return "image/gif"
    return "image/jpeg"
