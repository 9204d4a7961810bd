"""Google Custom Search implementation of the LogoProvider interface."""

import httpx
from portfolio_common.logging import setup_logging

from domain.logo_naming import select_candidate
from domain.models import LogoCandidate, LogoSource
from exceptions import LogoProviderError
from infrastructure.interfaces import LogoProvider

logger = setup_logging()

SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


class GoogleImageSearchProvider(LogoProvider):
    """Searches Google images for '<name> logo png transparent'."""

    source = LogoSource.GOOGLE

    def __init__(self, client: httpx.Client, api_key: str, search_engine_id: str):
        self._client = client
        self._api_key = api_key
        self._search_engine_id = search_engine_id

    @property
    def available(self) -> bool:
        return bool(self._api_key and self._search_engine_id)

    def find(self, name: str) -> LogoCandidate | None:
        params = {
            "key": self._api_key,
            "cx": self._search_engine_id,
            "q": f"{name} logo png transparent",
            "searchType": "image",
            "num": 5,
            "imgSize": "medium",
        }
        try:
            response = self._client.get(SEARCH_URL, params=params)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception("Google search request failed", extra={"org": name})
            raise LogoProviderError(self.source.value, str(e), cause=e) from e

        if "error" in data:
            message = data["error"].get("message", "unknown error")
            logger.error(
                "Google API error", extra={"org": name, "error_message": message}
            )
            raise LogoProviderError(self.source.value, f"Google API Error: {message}")

        if response.is_error:
            raise LogoProviderError(
                self.source.value, f"HTTP {response.status_code} from Google search"
            )

        links = [item["link"] for item in data.get("items") or [] if item.get("link")]
        url = select_candidate(links)
        if url is None:
            logger.info("Google search returned no images", extra={"org": name})
            return None

        logger.info(
            "Google search candidate selected",
            extra={"org": name, "url": url, "result_count": len(links)},
        )
        return LogoCandidate(url=url, source=self.source)
