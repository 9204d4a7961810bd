"""Background thread that expires abandoned chunked upload sessions."""

import threading

from portfolio_common.logging import setup_logging

from domain.chunk_assembler import ChunkAssembler

logger = setup_logging()


class SessionReaper:
    """Periodically discards upload sessions older than the assembler's TTL."""

    def __init__(self, assembler: ChunkAssembler, interval_seconds: float):
        self._assembler = assembler
        self._interval_seconds = interval_seconds
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Starts the sweep loop on a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="upload-session-reaper", daemon=True
        )
        self._thread.start()
        logger.info(
            "Upload session reaper started",
            extra={"interval_seconds": self._interval_seconds},
        )

    def stop(self, timeout: float = 5.0) -> None:
        """Signals the loop to exit and waits for the thread."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Upload session reaper stopped")

    def sweep(self) -> list[str]:
        """Runs one expiry pass; failures are logged and the loop keeps going."""
        try:
            return self._assembler.reap()
        except Exception:
            logger.exception("Upload session sweep failed")
            return []

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval_seconds):
            self.sweep()
