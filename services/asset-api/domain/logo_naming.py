"""Helpers for picking logo candidates and naming stored logo files."""

import os
import re
from urllib.parse import urlparse

PREFERRED_EXTENSIONS = (".png", ".svg", ".jpg", ".jpeg")
IMAGE_EXTENSIONS = PREFERRED_EXTENSIONS + (".gif", ".webp", ".ico")
DEFAULT_EXTENSION = ".png"

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def _url_extension(url: str) -> str:
    return os.path.splitext(urlparse(url).path)[1].lower()


def select_candidate(urls: list[str]) -> str | None:
    """
    Picks the best image URL from search results.

    The first URL whose path ends in a preferred image extension wins;
    otherwise the first URL is taken as is.
    """
    if not urls:
        return None
    for url in urls:
        if _url_extension(url) in PREFERRED_EXTENSIONS:
            return url
    return urls[0]


def extension_from_url(url: str) -> str:
    """Returns the image extension of a URL path, or .png when it has none."""
    extension = _url_extension(url)
    if extension in IMAGE_EXTENSIONS:
        return extension
    return DEFAULT_EXTENSION


def slugify(name: str) -> str:
    slug = _NON_SLUG.sub("-", name.lower()).strip("-")
    return slug or "logo"
