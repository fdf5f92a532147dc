"""S3-backed object storage for photo bytes."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote
from uuid import uuid4

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from photo_store.domain.errors import (
    StorageDeleteError,
    StorageDownloadError,
    StorageUploadError,
)
from photo_store.domain.photos import UploadedFile

_logger = logging.getLogger(__name__)


class PhotoStorage(Protocol):
    """Interface for storing opaque photo blobs."""

    def put(self, file: UploadedFile) -> str:
        """Store the file and return its storage key."""

    def get(self, key: str) -> bytes:
        """Return the bytes stored under a key."""

    def delete(self, key: str) -> None:
        """Delete the object stored under a key."""

    def url_for(self, key: str) -> str:
        """Return the access URL for a key."""


@dataclass
class S3PhotoStorage(PhotoStorage):
    """Photo storage implemented with boto3."""

    bucket: str
    region: str
    s3_client: Any
    key_prefix: str = "picto-photos/"
    endpoint_url: str | None = None

    @classmethod
    def create(
        cls,
        bucket: str,
        region: str,
        key_prefix: str = "picto-photos/",
        endpoint_url: str | None = None,
    ) -> "S3PhotoStorage":
        """Create a storage gateway with its own boto3 client."""
        client = boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            config=Config(connect_timeout=5, read_timeout=30),
        )
        return cls(
            bucket=bucket,
            region=region,
            s3_client=client,
            key_prefix=key_prefix,
            endpoint_url=endpoint_url,
        )

    def put(self, file: UploadedFile) -> str:
        """Upload bytes under a freshly generated key."""
        key = self._create_key(file.filename)
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=file.content,
                ContentLength=file.size,
                ContentType=file.content_type or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as exc:
            _logger.error("S3 upload failed: key=%s error=%s", key, exc)
            raise StorageUploadError("Failed to upload file to storage") from exc
        return key

    def get(self, key: str) -> bytes:
        """Download and fully buffer an object."""
        try:
            response = self.s3_client.get_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            _logger.error("S3 download failed: key=%s error=%s", key, exc)
            raise StorageDownloadError(f"Failed to download {key}") from exc

        body = response["Body"]
        try:
            return body.read()
        except (BotoCoreError, OSError) as exc:
            _logger.error("S3 stream read failed: key=%s error=%s", key, exc)
            raise StorageDownloadError(f"Failed to read {key}") from exc
        finally:
            try:
                body.close()
            except (BotoCoreError, OSError) as exc:
                _logger.warning("Failed to close S3 stream: key=%s error=%s", key, exc)

    def delete(self, key: str) -> None:
        """Delete an object."""
        try:
            self.s3_client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            _logger.error("S3 delete failed: key=%s error=%s", key, exc)
            raise StorageDeleteError(f"Failed to delete {key}") from exc

    def url_for(self, key: str) -> str:
        """Build the public URL of an object."""
        if not key or not key.strip():
            raise ValueError("Storage key must not be blank")
        quoted = quote(key, safe="/")
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{quoted}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{quoted}"

    def _create_key(self, original_name: str) -> str:
        return f"{self.key_prefix}{uuid4()}_{original_name}"
