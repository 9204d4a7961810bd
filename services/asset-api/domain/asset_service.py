"""Persistence path shared by direct uploads and assembled chunked uploads."""

import io
import re
import secrets
import time

from portfolio_common.logging import setup_logging

from domain.models import MediaKind, PersistedAsset
from exceptions import EmptyFileError, FileTooLargeError
from infrastructure.interfaces import StorageClient

logger = setup_logging()

_UNSAFE_CHARS = re.compile(r"[^a-z0-9.]", re.IGNORECASE)


def sanitize_file_name(file_name: str) -> str:
    """Replaces everything but letters, digits and dots with '_' and lowercases."""
    return _UNSAFE_CHARS.sub("_", file_name).lower()


class AssetService:
    """Validates uploaded content and stores it under a generated key."""

    def __init__(
        self,
        storage: StorageClient,
        bucket_name: str,
        max_file_size_bytes: int,
        public_prefix: str,
    ):
        self._storage = storage
        self._bucket_name = bucket_name
        self._max_file_size_bytes = max_file_size_bytes
        self._public_prefix = public_prefix.rstrip("/")

    @property
    def max_file_size_bytes(self) -> int:
        return self._max_file_size_bytes

    def url_for(self, storage_key: str) -> str:
        """Returns the public delivery URL for a storage key."""
        return f"{self._public_prefix}/{storage_key}"

    def persist(
        self,
        content: bytes,
        file_name: str,
        content_type: str,
        media_kind: MediaKind | None = None,
    ) -> PersistedAsset:
        """
        Validates and stores a complete file.

        Args:
            content: The full file bytes.
            file_name: The file name declared by the client.
            content_type: The MIME type declared by the client.
            media_kind: The kind already resolved for content_type, if any.

        Returns:
            PersistedAsset with the storage key and public URL.

        Raises:
            UnsupportedMediaTypeError: If the type is not an accepted media kind.
            EmptyFileError: If content is empty.
            FileTooLargeError: If content exceeds the configured maximum.
            StorageUploadError: If writing to storage fails.
        """
        if media_kind is None:
            media_kind = MediaKind.from_content_type(content_type)

        size = len(content)
        if size == 0:
            raise EmptyFileError(file_name)
        if size > self._max_file_size_bytes:
            raise FileTooLargeError(file_name, size, self._max_file_size_bytes)

        storage_key = (
            f"{int(time.time() * 1000)}_{secrets.token_hex(3)}_"
            f"{sanitize_file_name(file_name)}"
        )

        self._storage.upload(
            bucket_name=self._bucket_name,
            object_name=storage_key,
            data=io.BytesIO(content),
            size=size,
            content_type=content_type,
        )

        logger.info(
            "Asset persisted",
            extra={
                "storage_key": storage_key,
                "media_kind": media_kind.value,
                "size": size,
            },
        )

        return PersistedAsset(
            storage_key=storage_key,
            file_name=file_name,
            content_type=content_type,
            media_kind=media_kind,
            size=size,
            url=self.url_for(storage_key),
        )
