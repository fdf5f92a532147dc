"""Supabase-backed photo repository."""

from dataclasses import dataclass

from supabase import Client

from photo_store.domain.photos import PhotoRecord
from photo_store.services.photos import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo metadata persistence."""

    client: Client

    def create_photo(self, user_id: int, payload: dict[str, object]) -> PhotoRecord:
        """Create a photo metadata row and return it."""
        response = (
            self.client.table("photos")
            .insert({"user_id": user_id, **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create photo metadata")
        return _parse_photo(response.data[0])

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo by id, if present."""
        response = (
            self.client.table("photos")
            .select("*")
            .eq("photo_id", photo_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def update_photo(self, photo_id: int, payload: dict[str, object]) -> PhotoRecord:
        """Update a photo metadata row and return it."""
        response = (
            self.client.table("photos")
            .update(payload)
            .eq("photo_id", photo_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update photo metadata")
        return _parse_photo(response.data[0])

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo metadata row."""
        self.client.table("photos").delete().eq("photo_id", photo_id).execute()

    def list_user_photos(self, user_id: int) -> list[PhotoRecord]:
        """Return a user's photos, newest first."""
        response = (
            self.client.table("photos")
            .select("*")
            .eq("user_id", user_id)
            .order("upload_datetime", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    """Parse a photos row into a domain model."""
    return PhotoRecord(
        id=int(row["photo_id"]),
        user_id=int(row["user_id"]),
        photo_path=row.get("photo_path"),
        storage_key=row.get("storage_key"),
        tag=row.get("tag"),
        lat=float(row.get("lat", 0.0)),
        lng=float(row.get("lng", 0.0)),
        location=row.get("location"),
        likes=int(row.get("likes", 0)),
        views=int(row.get("views", 0)),
        upload_time=int(row.get("upload_datetime", 0)),
        frame_active=bool(row.get("frame_active", False)),
        shared_active=bool(row.get("shared_active", False)),
    )
