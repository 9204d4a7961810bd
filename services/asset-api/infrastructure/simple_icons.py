"""Simple Icons implementation of the LogoProvider interface."""

import re

import httpx
from portfolio_common.logging import setup_logging

from domain.models import LogoCandidate, LogoSource
from exceptions import LogoProviderError
from infrastructure.interfaces import LogoProvider

logger = setup_logging()

ICON_URL = "https://cdn.simpleicons.org/{slug}"

# Display names whose Simple Icons slug differs from the name itself.
SLUG_ALIASES = {
    "java": "openjdk",
    "c++": "cplusplus",
    "c#": "csharp",
    "vue": "vuedotjs",
    "vue.js": "vuedotjs",
    "next.js": "nextdotjs",
    "nextjs": "nextdotjs",
    "nuxt": "nuxtdotjs",
    "spring boot": "springboot",
    "rails": "rubyonrails",
    ".net": "dotnet",
    "node": "nodedotjs",
    "node.js": "nodedotjs",
    "nodejs": "nodedotjs",
    "tailwind": "tailwindcss",
    "postgres": "postgresql",
    "aws": "amazonaws",
    "amazon": "amazonaws",
    "azure": "microsoftazure",
    "gcp": "googlecloud",
    "google cloud": "googlecloud",
    "k8s": "kubernetes",
    "burp suite": "burpsuite",
    "kali linux": "kalilinux",
    "kali": "kalilinux",
    "parrot": "parrotsecurity",
    "arch linux": "archlinux",
    "vscode": "visualstudiocode",
    "visual studio code": "visualstudiocode",
    "palo alto": "paloaltonetworks",
    "red hat": "redhat",
    "bash": "gnubash",
    "html": "html5",
    "css": "css3",
    "sql": "sqlite",
}


def find_slug(name: str) -> str | None:
    """Maps a display name to a Simple Icons slug, falling back to its alphanumerics."""
    normalized = name.lower().strip()
    if normalized in SLUG_ALIASES:
        return SLUG_ALIASES[normalized]

    cleaned = re.sub(r"[^a-z0-9]", "", normalized)
    for alias, slug in SLUG_ALIASES.items():
        if re.sub(r"[^a-z0-9]", "", alias) == cleaned:
            return slug
    return cleaned or None


class SimpleIconsProvider(LogoProvider):
    """Probes the Simple Icons CDN, which covers most technology brands."""

    source = LogoSource.SIMPLE_ICONS

    def __init__(self, client: httpx.Client):
        self._client = client

    def find(self, name: str) -> LogoCandidate | None:
        slug = find_slug(name)
        if slug is None:
            return None

        url = ICON_URL.format(slug=slug)
        try:
            response = self._client.head(url)
        except httpx.HTTPError as e:
            logger.warning("Simple Icons probe failed", extra={"url": url})
            raise LogoProviderError(self.source.value, str(e), cause=e) from e

        if not response.is_success:
            return None

        logger.info("Simple Icons logo found", extra={"org": name, "url": url})
        return LogoCandidate(url=url, source=self.source)
