"""Abstract interface for fetching remote images."""

from abc import ABC, abstractmethod

from domain.models import DownloadedImage


class ImageDownloader(ABC):
    @abstractmethod
    def download(self, url: str) -> DownloadedImage:
        """
        Downloads the bytes behind an image URL.

        Raises:
            LogoDownloadError: On network failure, a non-2xx status or an empty body.
        """
        pass
