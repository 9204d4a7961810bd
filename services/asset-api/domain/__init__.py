"""Domain layer exports."""

from .logo_naming import extension_from_url, select_candidate, slugify
from .models import (
    ChunkResult,
    ChunkUpload,
    DownloadedImage,
    LogoCandidate,
    LogoResolution,
    LogoSource,
    MediaKind,
    PersistedAsset,
    UploadSession,
    UploadState,
)

__all__ = [
    "ChunkResult",
    "ChunkUpload",
    "DownloadedImage",
    "LogoCandidate",
    "LogoResolution",
    "LogoSource",
    "MediaKind",
    "PersistedAsset",
    "UploadSession",
    "UploadState",
    "extension_from_url",
    "select_candidate",
    "slugify",
]
