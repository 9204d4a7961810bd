"""In-process implementation of the UploadSessionStore interface."""

import threading

from portfolio_common.logging import setup_logging

from domain.models import UploadSession, UploadState
from exceptions import UploadSessionExpiredError
from infrastructure.interfaces import UploadSessionStore

logger = setup_logging()


class InMemoryUploadSessionStore(UploadSessionStore):
    """
    Keeps upload sessions in a dict for the lifetime of the process.

    Sessions do not survive a restart. A lock guards the maps because request
    threads and the reaper thread touch them concurrently.
    """

    def __init__(self):
        self._sessions: dict[str, UploadSession] = {}
        self._expired: dict[str, float] = {}
        self._lock = threading.Lock()

    def get(self, upload_id: str) -> UploadSession | None:
        with self._lock:
            return self._sessions.get(upload_id)

    def create(self, session: UploadSession) -> UploadSession:
        with self._lock:
            return self._sessions.setdefault(session.upload_id, session)

    def add_chunk(
        self, upload_id: str, chunk_index: int, data: bytes, now: float
    ) -> int:
        with self._lock:
            session = self._require(upload_id)
            session.chunks[chunk_index] = data
            session.last_activity_at = now
            return session.size

    def set_state(self, upload_id: str, state: UploadState) -> None:
        with self._lock:
            session = self._require(upload_id)
            session.state = state
            if state in (UploadState.COMPLETE, UploadState.FAILED):
                session.chunks = {}

    def is_expired(self, upload_id: str) -> bool:
        with self._lock:
            return upload_id in self._expired

    def expire(self, now: float, ttl_seconds: float) -> list[str]:
        cutoff = now - ttl_seconds
        with self._lock:
            stale = [
                upload_id
                for upload_id, session in self._sessions.items()
                if session.last_activity_at < cutoff
                and session.state != UploadState.ASSEMBLING
            ]
            for upload_id in stale:
                del self._sessions[upload_id]
                self._expired[upload_id] = now
            forgotten = [
                upload_id
                for upload_id, expired_at in self._expired.items()
                if expired_at < cutoff
            ]
            for upload_id in forgotten:
                del self._expired[upload_id]

        if stale:
            logger.info("Upload sessions expired", extra={"upload_ids": stale})
        return stale

    def _require(self, upload_id: str) -> UploadSession:
        # Caller holds the lock.
        session = self._sessions.get(upload_id)
        if session is None:
            raise UploadSessionExpiredError(upload_id)
        return session
