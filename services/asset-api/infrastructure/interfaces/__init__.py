"""Infrastructure interface exports."""

from portfolio_common.infrastructure import StorageClient

from infrastructure.interfaces.image_downloader import ImageDownloader
from infrastructure.interfaces.logo_cache import LogoCache
from infrastructure.interfaces.logo_provider import LogoProvider
from infrastructure.interfaces.upload_session_store import UploadSessionStore

__all__ = [
    "ImageDownloader",
    "LogoCache",
    "LogoProvider",
    "StorageClient",
    "UploadSessionStore",
]
