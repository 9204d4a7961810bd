"""Clearbit implementation of the LogoProvider interface."""

import re

import httpx
from portfolio_common.logging import setup_logging

from domain.models import LogoCandidate, LogoSource
from exceptions import LogoProviderError
from infrastructure.interfaces import LogoProvider

logger = setup_logging()

LOGO_URL = "https://logo.clearbit.com/{domain}"
DOMAIN_SUFFIXES = (".com", ".io", ".org", ".co")


class ClearbitLogoProvider(LogoProvider):
    """Guesses the organization's domain and probes Clearbit's keyless logo API."""

    source = LogoSource.CLEARBIT

    def __init__(self, client: httpx.Client):
        self._client = client

    def find(self, name: str) -> LogoCandidate | None:
        slug = re.sub(r"[^a-z0-9]", "", name.lower())
        if not slug:
            return None

        failures: list[Exception] = []
        for suffix in DOMAIN_SUFFIXES:
            url = LOGO_URL.format(domain=f"{slug}{suffix}")
            try:
                response = self._client.head(url)
            except httpx.HTTPError as e:
                logger.warning(
                    "Clearbit probe failed", extra={"url": url, "error": str(e)}
                )
                failures.append(e)
                continue
            if response.is_success:
                logger.info("Clearbit logo found", extra={"org": name, "url": url})
                return LogoCandidate(url=url, source=self.source)

        if len(failures) == len(DOMAIN_SUFFIXES):
            raise LogoProviderError(
                self.source.value, str(failures[-1]), cause=failures[-1]
            )
        return None
