"""Domain models for the photo store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """Read-only view of a user account; credentials are not loaded."""

    id: int
    name: str
    email: str
    account_name: str
    profile_active: bool = False
    profile_photo_path: str | None = None
    intro: str = ""
