"""Abstract interface for the logo name cache."""

from abc import ABC, abstractmethod


class LogoCache(ABC):
    """Persistent mapping from an exact organization name to a stored logo key."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """
        Looks up the stored logo for a name.

        Args:
            name: The organization name, used verbatim as the key.

        Returns:
            The storage key of the logo, or None on a miss.

        Raises:
            CacheServiceError: If the cache backend fails.
        """
        pass

    @abstractmethod
    def set(self, name: str, storage_key: str) -> None:
        """
        Records the logo for a name, replacing any previous entry.

        Args:
            name: The organization name, used verbatim as the key.
            storage_key: The storage key of the persisted logo.

        Raises:
            CacheServiceError: If the cache backend fails.
        """
        pass
