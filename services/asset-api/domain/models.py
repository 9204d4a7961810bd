"""Domain models for the asset service."""

from enum import Enum

from pydantic import BaseModel, Field

from exceptions import UnsupportedMediaTypeError

_DOCUMENT_TYPES = frozenset(
    {
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "application/msword",
        "application/vnd.ms-powerpoint",
    }
)


class MediaKind(str, Enum):
    """Category of an uploaded file, resolved once from its declared type."""

    IMAGE = "image"
    PDF = "pdf"
    DOCUMENT = "document"

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "MediaKind":
        """
        Resolves the media kind for a declared MIME type.

        Raises:
            UnsupportedMediaTypeError: If the type is not an image, PDF or office document.
        """
        normalized = (content_type or "").split(";")[0].strip().lower()
        if normalized.startswith("image/"):
            return cls.IMAGE
        if normalized == "application/pdf":
            return cls.PDF
        if normalized in _DOCUMENT_TYPES:
            return cls.DOCUMENT
        raise UnsupportedMediaTypeError(content_type or "")


class PersistedAsset(BaseModel, frozen=True):
    """A stored file and the public URL that resolves to it."""

    storage_key: str
    file_name: str
    content_type: str
    media_kind: MediaKind
    size: int
    url: str


class UploadState(str, Enum):
    COLLECTING = "collecting"
    ASSEMBLING = "assembling"
    COMPLETE = "complete"
    FAILED = "failed"


class ChunkUpload(BaseModel, frozen=True):
    """One chunk request as declared by the client."""

    upload_id: str
    chunk_index: int
    total_chunks: int
    file_name: str
    content_type: str
    data: bytes


class UploadSession(BaseModel):
    """Server-side accumulation state for all chunks sharing one upload id."""

    upload_id: str
    file_name: str
    content_type: str
    total_chunks: int
    media_kind: MediaKind
    created_at: float
    last_activity_at: float
    state: UploadState = UploadState.COLLECTING
    chunks: dict[int, bytes] = Field(default_factory=dict)

    @property
    def size(self) -> int:
        return sum(len(data) for data in self.chunks.values())

    def missing_indexes(self) -> list[int]:
        return [i for i in range(self.total_chunks) if i not in self.chunks]

    def assemble(self) -> bytes:
        """Joins the retained chunks in ascending index order."""
        return b"".join(self.chunks[i] for i in range(self.total_chunks))


class ChunkResult(BaseModel, frozen=True):
    """Outcome of receiving a chunk; only the final chunk carries an asset."""

    upload_id: str
    chunk_index: int
    asset: PersistedAsset | None = None

    @property
    def complete(self) -> bool:
        return self.asset is not None


class LogoSource(str, Enum):
    GOOGLE = "google"
    CLEARBIT = "clearbit"
    SIMPLE_ICONS = "simple-icons"


class LogoCandidate(BaseModel, frozen=True):
    """An external image URL proposed by a provider."""

    url: str
    source: LogoSource


class DownloadedImage(BaseModel, frozen=True):
    content: bytes
    content_type: str | None = None


class LogoResolution(BaseModel, frozen=True):
    """Result of resolving a name to a locally stored logo."""

    url: str
    cached: bool = False
    source: LogoSource | None = None
