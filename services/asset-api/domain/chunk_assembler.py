"""Core logic for assembling files uploaded as sequential chunks."""

import time
from collections.abc import Callable

from portfolio_common.logging import setup_logging

from domain.asset_service import AssetService
from domain.models import (
    ChunkResult,
    ChunkUpload,
    MediaKind,
    UploadSession,
    UploadState,
)
from exceptions import (
    FileTooLargeError,
    InvalidChunkError,
    MissingChunksError,
    UploadSessionClosedError,
    UploadSessionExpiredError,
)
from infrastructure.interfaces import UploadSessionStore

logger = setup_logging()


class ChunkAssembler:
    """
    Collects chunks per upload id and persists the file when the last index arrives.

    Chunks may arrive in any order and are joined by ascending index. The
    arrival of index total_chunks - 1 triggers assembly exactly once: the
    session then ends COMPLETE or FAILED and refuses further chunks.
    """

    def __init__(
        self,
        store: UploadSessionStore,
        asset_service: AssetService,
        session_ttl_seconds: float,
        clock: Callable[[], float] = time.time,
    ):
        self._store = store
        self._asset_service = asset_service
        self._session_ttl_seconds = session_ttl_seconds
        self._clock = clock

    def receive(self, chunk: ChunkUpload) -> ChunkResult:
        """
        Retains one chunk, assembling and persisting the file on the final index.

        The declared content type is resolved when the session starts and the
        retained size is checked on every chunk, so bad uploads stop early.

        Args:
            chunk: The chunk and the session metadata declared with it.

        Returns:
            ChunkResult; its asset is set only for the final chunk.

        Raises:
            InvalidChunkError: If the index or chunk count is inconsistent.
            UnsupportedMediaTypeError: If the first chunk declares an unaccepted type.
            FileTooLargeError: If the retained chunks exceed the maximum file size.
            UploadSessionExpiredError: If the session was reaped.
            UploadSessionClosedError: If the session already completed or failed.
            MissingChunksError: If the final chunk arrives with gaps before it.
            EmptyFileError, StorageUploadError: If persisting the assembled file fails.
        """
        self._validate(chunk)

        if self._store.is_expired(chunk.upload_id):
            raise UploadSessionExpiredError(chunk.upload_id)

        session = self._store.get(chunk.upload_id)
        if session is None:
            media_kind = MediaKind.from_content_type(chunk.content_type)
            now = self._clock()
            session = self._store.create(
                UploadSession(
                    upload_id=chunk.upload_id,
                    file_name=chunk.file_name,
                    content_type=chunk.content_type,
                    total_chunks=chunk.total_chunks,
                    media_kind=media_kind,
                    created_at=now,
                    last_activity_at=now,
                )
            )
            logger.info(
                "Upload session started",
                extra={
                    "upload_id": chunk.upload_id,
                    "file_name": chunk.file_name,
                    "media_kind": media_kind.value,
                    "total_chunks": chunk.total_chunks,
                },
            )

        if session.state != UploadState.COLLECTING:
            raise UploadSessionClosedError(chunk.upload_id, session.state.value)
        if session.total_chunks != chunk.total_chunks:
            raise InvalidChunkError(
                chunk.upload_id,
                f"totalChunks changed from {session.total_chunks} to {chunk.total_chunks}",
            )

        retained = self._store.add_chunk(
            chunk.upload_id, chunk.chunk_index, chunk.data, self._clock()
        )
        max_size = self._asset_service.max_file_size_bytes
        if retained > max_size:
            self._store.set_state(chunk.upload_id, UploadState.FAILED)
            logger.warning(
                "Chunked upload exceeded the size limit",
                extra={
                    "upload_id": chunk.upload_id,
                    "size": retained,
                    "max_size": max_size,
                },
            )
            raise FileTooLargeError(session.file_name, retained, max_size)

        if chunk.chunk_index != session.total_chunks - 1:
            logger.debug(
                "Chunk retained",
                extra={
                    "upload_id": chunk.upload_id,
                    "chunk_index": chunk.chunk_index,
                    "size": len(chunk.data),
                },
            )
            return ChunkResult(upload_id=chunk.upload_id, chunk_index=chunk.chunk_index)

        return self._assemble(chunk.upload_id, chunk.chunk_index)

    def reap(self) -> list[str]:
        """Discards sessions idle past the TTL; their late chunks get an expiry error."""
        return self._store.expire(self._clock(), self._session_ttl_seconds)

    def _validate(self, chunk: ChunkUpload) -> None:
        if not chunk.upload_id:
            raise InvalidChunkError(chunk.upload_id, "uploadId is required")
        if chunk.total_chunks < 1:
            raise InvalidChunkError(chunk.upload_id, "totalChunks must be at least 1")
        if not 0 <= chunk.chunk_index < chunk.total_chunks:
            raise InvalidChunkError(
                chunk.upload_id,
                f"chunkIndex {chunk.chunk_index} outside [0, {chunk.total_chunks})",
            )

    def _assemble(self, upload_id: str, chunk_index: int) -> ChunkResult:
        self._store.set_state(upload_id, UploadState.ASSEMBLING)
        session = self._store.get(upload_id)

        missing = session.missing_indexes()
        if missing:
            self._store.set_state(upload_id, UploadState.FAILED)
            logger.error(
                "Upload assembly failed, chunks missing",
                extra={"upload_id": upload_id, "missing": missing},
            )
            raise MissingChunksError(upload_id, missing)

        content = session.assemble()
        try:
            asset = self._asset_service.persist(
                content,
                session.file_name,
                session.content_type,
                media_kind=session.media_kind,
            )
        except Exception:
            self._store.set_state(upload_id, UploadState.FAILED)
            logger.exception(
                "Assembled upload could not be persisted",
                extra={"upload_id": upload_id},
            )
            raise

        self._store.set_state(upload_id, UploadState.COMPLETE)
        logger.info(
            "Upload assembled",
            extra={
                "upload_id": upload_id,
                "total_chunks": session.total_chunks,
                "size": asset.size,
                "url": asset.url,
            },
        )
        return ChunkResult(upload_id=upload_id, chunk_index=chunk_index, asset=asset)
