"""Abstract interface for external logo providers."""

from abc import ABC, abstractmethod

from domain.models import LogoCandidate, LogoSource


class LogoProvider(ABC):
    """Finds a candidate logo image URL for a name."""

    source: LogoSource

    @property
    def available(self) -> bool:
        """Whether the provider is configured well enough to be queried."""
        return True

    @abstractmethod
    def find(self, name: str) -> LogoCandidate | None:
        """
        Searches for a logo image.

        Args:
            name: The organization or technology name.

        Returns:
            A candidate image URL, or None if the provider has nothing for the name.

        Raises:
            LogoProviderError: If the provider call fails.
        """
        pass
