"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from photo_store.domain.models import UserRecord
from photo_store.services.users import UserRepository

_USER_COLUMNS = (
    "user_id, name, email, account_name, profile_active, profile_photo_path, intro"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserRecord(
            id=int(row["user_id"]),
            name=str(row.get("name", "")),
            email=str(row.get("email", "")),
            account_name=str(row.get("account_name", "")),
            profile_active=bool(row.get("profile_active", False)),
            profile_photo_path=row.get("profile_photo_path"),
            intro=str(row.get("intro") or ""),
        )
