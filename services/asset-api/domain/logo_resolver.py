"""Core logic for resolving organization names to locally stored logos."""

import io
import secrets

from portfolio_common.logging import setup_logging

from domain.logo_naming import extension_from_url, slugify
from domain.models import LogoCandidate, LogoResolution
from exceptions import (
    InvalidLogoQueryError,
    LogoNotFoundError,
    LogoProviderError,
    LogoServiceUnavailableError,
)
from infrastructure.interfaces import (
    ImageDownloader,
    LogoCache,
    LogoProvider,
    StorageClient,
)

logger = setup_logging()

_EXTENSION_CONTENT_TYPES = {
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
}


class LogoResolver:
    """
    Cache-first logo lookup backed by external providers.

    Names are used verbatim as cache keys: "Docker" and "docker" are separate
    entries. Concurrent misses for one name may both resolve and both write the
    cache; the last write wins.
    """

    def __init__(
        self,
        cache: LogoCache,
        providers: list[LogoProvider],
        downloader: ImageDownloader,
        storage: StorageClient,
        bucket_name: str,
        object_prefix: str,
        public_prefix: str,
    ):
        self._cache = cache
        self._providers = providers
        self._downloader = downloader
        self._storage = storage
        self._bucket_name = bucket_name
        self._object_prefix = object_prefix.strip("/")
        self._public_prefix = public_prefix.rstrip("/")

    def resolve(self, name: str) -> LogoResolution:
        """
        Returns a local logo URL for a name, resolving and storing it on a cache miss.

        Args:
            name: Trimmed organization or technology name.

        Returns:
            LogoResolution; cached is True when no external call was made.

        Raises:
            InvalidLogoQueryError: If the name is empty.
            LogoNotFoundError: If no provider has a logo for the name.
            LogoServiceUnavailableError: If nothing was found and a provider failed.
            LogoDownloadError: If the candidate image cannot be downloaded.
            StorageUploadError: If the image cannot be stored.
            CacheServiceError: If the cache backend fails.
        """
        if not name:
            raise InvalidLogoQueryError()

        storage_key = self._cache.get(name)
        if storage_key:
            return LogoResolution(url=self._url_for(storage_key), cached=True)

        candidate = self._find_candidate(name)
        storage_key = self._materialize(name, candidate)

        self._cache.set(name, storage_key)

        logger.info(
            "Logo resolved",
            extra={
                "org": name,
                "source": candidate.source.value,
                "storage_key": storage_key,
            },
        )
        return LogoResolution(
            url=self._url_for(storage_key), cached=False, source=candidate.source
        )

    def _find_candidate(self, name: str) -> LogoCandidate:
        """Asks each available provider in order; the first candidate wins."""
        errors: list[LogoProviderError] = []
        for provider in self._providers:
            if not provider.available:
                continue
            try:
                candidate = provider.find(name)
            except LogoProviderError as e:
                logger.warning(
                    "Logo provider failed, trying next",
                    extra={"org": name, "source": e.source, "error": e.message},
                )
                errors.append(e)
                continue
            if candidate is not None:
                return candidate

        if errors:
            raise LogoServiceUnavailableError(name, errors)
        raise LogoNotFoundError(name)

    def _materialize(self, name: str, candidate: LogoCandidate) -> str:
        """Downloads the candidate and writes it to storage, returning its key."""
        image = self._downloader.download(candidate.url)

        extension = extension_from_url(candidate.url)
        file_name = f"{slugify(name)}-{secrets.token_hex(3)}{extension}"
        storage_key = f"{self._object_prefix}/{file_name}"
        content_type = image.content_type or _EXTENSION_CONTENT_TYPES[extension]

        self._storage.upload(
            bucket_name=self._bucket_name,
            object_name=storage_key,
            data=io.BytesIO(image.content),
            size=len(image.content),
            content_type=content_type,
        )
        return storage_key

    def _url_for(self, storage_key: str) -> str:
        return f"{self._public_prefix}/{storage_key}"
