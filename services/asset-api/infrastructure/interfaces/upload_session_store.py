"""Abstract interface for chunked upload session state."""

from abc import ABC, abstractmethod

from domain.models import UploadSession, UploadState


class UploadSessionStore(ABC):
    """Holds upload sessions and their retained chunks, keyed by upload id."""

    @abstractmethod
    def get(self, upload_id: str) -> UploadSession | None:
        """Returns the session for an id, or None if none exists."""
        pass

    @abstractmethod
    def create(self, session: UploadSession) -> UploadSession:
        """
        Stores a new session unless one already exists for its id.

        Returns:
            The stored session (the existing one if another request created it first).
        """
        pass

    @abstractmethod
    def add_chunk(
        self, upload_id: str, chunk_index: int, data: bytes, now: float
    ) -> int:
        """
        Retains chunk bytes under (upload_id, chunk_index), replacing any earlier copy.

        Args:
            now: Current time in epoch seconds, recorded as the session's last activity.

        Returns:
            Total bytes now retained for the session.

        Raises:
            UploadSessionExpiredError: If the session no longer exists.
        """
        pass

    @abstractmethod
    def set_state(self, upload_id: str, state: UploadState) -> None:
        """
        Moves a session to a new state; COMPLETE and FAILED drop its chunks.

        Raises:
            UploadSessionExpiredError: If the session no longer exists.
        """
        pass

    @abstractmethod
    def is_expired(self, upload_id: str) -> bool:
        """Whether the id belonged to a session removed by expiry."""
        pass

    @abstractmethod
    def expire(self, now: float, ttl_seconds: float) -> list[str]:
        """
        Removes sessions idle for longer than the TTL and remembers their ids.

        Sessions being assembled are never removed.

        Args:
            now: Current time in epoch seconds.
            ttl_seconds: Maximum time since a session's last chunk. Expired-id records older than this
                are forgotten in the same sweep.

        Returns:
            The ids of the removed sessions.
        """
        pass
