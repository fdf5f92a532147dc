"""Session scheduler notification client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from photo_store.domain.errors import SessionSchedulingError

_logger = logging.getLogger(__name__)

SHARE_MESSAGE_TYPE = "SHARE"


class SessionScheduler(Protocol):
    """Interface for announcing shared photos."""

    async def schedule_session(
        self, photo_id: int, user_id: int, lng: float, lat: float
    ) -> None:
        """Notify the scheduler that a photo was shared."""


@dataclass
class HttpxSessionSchedulerClient(SessionScheduler):
    """Session scheduler client using httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    enabled: bool = True
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, enabled: bool = True, timeout_seconds: float = 10.0
    ) -> "HttpxSessionSchedulerClient":
        """Create a scheduler client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            enabled=enabled,
            timeout_seconds=timeout_seconds,
        )

    async def schedule_session(
        self, photo_id: int, user_id: int, lng: float, lat: float
    ) -> None:
        """POST a SHARE message for the photo."""
        if not self.enabled:
            _logger.warning(
                "Session scheduler disabled; skipping photo_id=%s user_id=%s",
                photo_id,
                user_id,
            )
            return

        url = f"{self.base_url.rstrip('/')}/session-scheduler/shared"
        payload: dict[str, object] = {
            "messageType": SHARE_MESSAGE_TYPE,
            "senderId": user_id,
            "photoId": photo_id,
            "lng": lng,
            "lat": lat,
        }
        try:
            _logger.info("Session scheduler request: %s", payload)
            response = await self.http_client.post(
                url, json=payload, timeout=self.timeout_seconds
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            _logger.exception("Session scheduling failed for photo_id=%s", photo_id)
            raise SessionSchedulingError("Session scheduling failed") from exc
        _logger.info("Session scheduler response status: %s", response.status_code)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
