"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from photo_store.adapters.s3_photo_storage import PhotoStorage, S3PhotoStorage
from photo_store.adapters.session_scheduler_client import (
    HttpxSessionSchedulerClient,
    SessionScheduler,
)
from photo_store.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_store.adapters.supabase_user_repository import SupabaseUserRepository
from photo_store.config import Settings
from photo_store.services.photos import PhotoService
from photo_store.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: PhotoStorage
    scheduler: SessionScheduler
    user_service: UserService
    photo_service: PhotoService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    storage = S3PhotoStorage.create(
        bucket=resolved_settings.s3_bucket,
        region=resolved_settings.aws_region,
        key_prefix=resolved_settings.storage_key_prefix,
        endpoint_url=resolved_settings.s3_endpoint_url,
    )
    scheduler = HttpxSessionSchedulerClient.create(
        base_url=resolved_settings.session_scheduler_base_url,
        enabled=resolved_settings.session_scheduler_enabled,
        timeout_seconds=resolved_settings.session_scheduler_timeout_seconds,
    )
    photo_service = PhotoService(
        photo_repository=SupabasePhotoRepository(supabase_client),
        user_service=user_service,
        storage=storage,
        scheduler=scheduler,
        max_upload_bytes=resolved_settings.max_upload_bytes,
    )

    async def close_resources() -> None:
        await scheduler.close()

    return AppContainer(
        settings=resolved_settings,
        storage=storage,
        scheduler=scheduler,
        user_service=user_service,
        photo_service=photo_service,
        close_resources=close_resources,
    )
