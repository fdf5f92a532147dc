"""Photo API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from fastapi import APIRouter, File, Form, HTTPException, Query, Request, UploadFile
from fastapi.responses import Response
from pydantic import ValidationError

from photo_store.api.schemas import PhotoResponse
from photo_store.domain.photos import (
    PhotoUploadRequest,
    UploadedFile,
    download_content_type,
)

if TYPE_CHECKING:
    from photo_store.containers import AppContainer

router = APIRouter(prefix="/photos", tags=["photos"])


@router.post("")
async def upload_photo(
    request: Request,
    file: UploadFile = File(...),
    metadata: str = Form(..., alias="request"),
) -> PhotoResponse:
    """Upload a photo or create a frame placeholder."""
    container: AppContainer = request.app.state.container
    photo = await container.photo_service.upload_photo(
        await _read_upload(file), _parse_metadata(metadata)
    )
    return PhotoResponse.from_record(photo)


@router.post("/frame/{photo_id}")
async def upload_frame_photo(
    photo_id: int,
    request: Request,
    file: UploadFile = File(...),
    metadata: str = Form(..., alias="request"),
) -> PhotoResponse:
    """Fill a frame placeholder with its image."""
    container: AppContainer = request.app.state.container
    photo = await container.photo_service.upload_frame_photo(
        photo_id, await _read_upload(file), _parse_metadata(metadata)
    )
    return PhotoResponse.from_record(photo)


@router.get("")
async def list_photos(
    request: Request, user_id: int = Query(alias="userId")
) -> list[PhotoResponse]:
    """List the photos owned by a user."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_user_photos(user_id)
    return [PhotoResponse.from_record(photo) for photo in photos]


@router.get("/download/{photo_id}")
async def download_photo(photo_id: int, request: Request) -> Response:
    """Return the raw image bytes as an attachment."""
    container: AppContainer = request.app.state.container
    photo, content = container.photo_service.download_photo(photo_id)
    return Response(
        content=content,
        media_type=download_content_type(photo.storage_key),
        headers={"Content-Disposition": _attachment_header(photo.storage_key or "")},
    )


@router.get("/{photo_id}")
async def get_photo(photo_id: int, request: Request) -> PhotoResponse:
    """Return a photo summary."""
    container: AppContainer = request.app.state.container
    return PhotoResponse.from_record(container.photo_service.get_photo(photo_id))


@router.patch("/{photo_id}/share")
async def update_share_status(
    photo_id: int, request: Request, shared: bool = Query(...)
) -> PhotoResponse:
    """Toggle whether a photo is shared."""
    container: AppContainer = request.app.state.container
    photo = await container.photo_service.update_share_status(photo_id, shared)
    return PhotoResponse.from_record(photo)


@router.delete("/{photo_id}")
async def delete_photo(
    photo_id: int, request: Request, user_id: int = Query(alias="userId")
) -> Response:
    """Delete a photo owned by the requesting user."""
    container: AppContainer = request.app.state.container
    container.photo_service.delete_photo(photo_id, user_id)
    return Response(status_code=200)


async def _read_upload(file: UploadFile) -> UploadedFile:
    content = await file.read()
    return UploadedFile(
        filename=file.filename or "upload",
        content_type=file.content_type,
        content=content,
    )


def _attachment_header(filename: str) -> str:
    """Build an RFC 6266 attachment header safe for non-ASCII names."""
    fallback = (
        filename.encode("ascii", "replace")
        .decode("ascii")
        .replace("\"", "_")
        .replace("\\", "_")
    )
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


def _parse_metadata(raw: str) -> PhotoUploadRequest:
    try:
        return PhotoUploadRequest.model_validate_json(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc
