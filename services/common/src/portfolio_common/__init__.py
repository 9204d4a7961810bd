from portfolio_common.config import MinioConfig, RedisConfig
from portfolio_common.exceptions import (
    StorageDownloadError,
    StorageObjectNotFoundError,
    StorageUploadError,
)
from portfolio_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "StorageDownloadError",
    "StorageObjectNotFoundError",
    "StorageUploadError",
    "MinioConfig",
    "RedisConfig",
]
