"""Pydantic response models for the photo API."""

from pydantic import BaseModel, ConfigDict, Field

from photo_store.domain.photos import PhotoRecord, summary_content_type


class PhotoResponse(BaseModel):
    """Photo summary returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    photo_id: int = Field(alias="photoId")
    photo_path: str | None = Field(alias="photoPath")
    content_type: str = Field(alias="contentType")
    lat: float
    lng: float
    location: str | None = None
    tag: str | None = None
    likes: int
    views: int
    upload_time: int = Field(alias="uploadTime")
    frame_active: bool = Field(alias="frameActive")
    shared_active: bool = Field(alias="sharedActive")

    @classmethod
    def from_record(cls, photo: PhotoRecord) -> "PhotoResponse":
        """Build a summary from a stored photo."""
        return cls(
            photo_id=photo.id,
            photo_path=photo.photo_path,
            content_type=summary_content_type(photo.storage_key),
            lat=photo.lat,
            lng=photo.lng,
            location=photo.location,
            tag=photo.tag,
            likes=photo.likes,
            views=photo.views,
            upload_time=photo.upload_time,
            frame_active=photo.frame_active,
            shared_active=photo.shared_active,
        )
