"""Infrastructure layer exports."""

from infrastructure.clearbit import ClearbitLogoProvider
from infrastructure.google_search import GoogleImageSearchProvider
from infrastructure.http_downloader import HttpImageDownloader
from infrastructure.memory_session_store import InMemoryUploadSessionStore
from infrastructure.minio_storage import MinioStorageClient
from infrastructure.redis_logo_cache import RedisLogoCache
from infrastructure.simple_icons import SimpleIconsProvider

__all__ = [
    "ClearbitLogoProvider",
    "GoogleImageSearchProvider",
    "HttpImageDownloader",
    "InMemoryUploadSessionStore",
    "MinioStorageClient",
    "RedisLogoCache",
    "SimpleIconsProvider",
]
