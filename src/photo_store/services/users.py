"""User lookups for photo ownership."""

from dataclasses import dataclass
from typing import Protocol

from photo_store.domain.errors import UserNotFoundError
from photo_store.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""


@dataclass
class UserService:
    """Application service for resolving photo owners."""

    repository: UserRepository

    def require_user(self, user_id: int) -> UserRecord:
        """Return the user or raise when it does not exist."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user
