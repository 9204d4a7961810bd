"""httpx implementation of the ImageDownloader interface."""

import httpx
from portfolio_common.logging import setup_logging

from domain.models import DownloadedImage
from exceptions import LogoDownloadError
from infrastructure.interfaces import ImageDownloader

logger = setup_logging()


class HttpImageDownloader(ImageDownloader):
    """Fetches image bytes synchronously with a shared httpx client."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def download(self, url: str) -> DownloadedImage:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.exception("Image download failed", extra={"url": url})
            raise LogoDownloadError(url, e) from e

        if not response.content:
            logger.error("Image download returned no content", extra={"url": url})
            raise LogoDownloadError(url, reason="empty response body")

        content_type = response.headers.get("content-type")
        if content_type:
            content_type = content_type.split(";")[0].strip().lower()
            if not content_type.startswith("image/"):
                logger.error(
                    "Downloaded logo is not an image",
                    extra={"url": url, "content_type": content_type},
                )
                raise LogoDownloadError(
                    url, reason=f"unexpected content type '{content_type}'"
                )

        logger.info(
            "Image downloaded",
            extra={"url": url, "size": len(response.content)},
        )
        return DownloadedImage(content=response.content, content_type=content_type)
