"""Application configuration loaded from environment variables."""

import os

from portfolio_common import MinioConfig, RedisConfig
from pydantic import BaseModel


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class UploadConfig(BaseModel, frozen=True):
    """Upload pipeline limits and chunk session lifetime."""

    max_file_size_bytes: int = 100 * 1024 * 1024
    session_ttl_seconds: int = 3600
    reaper_interval_seconds: int = 60
    public_asset_prefix: str = "/api/images"


class LogoConfig(BaseModel, frozen=True):
    """Logo resolution providers and cache settings."""

    google_api_key: str = ""
    google_search_engine_id: str = ""
    request_timeout_seconds: float = 8.0
    cache_key: str = "logo_cache"
    object_prefix: str = "logos"


class AdminConfig(BaseModel, frozen=True):
    """Single-admin session settings."""

    jwt_secret: str
    username: str
    password: str
    session_ttl_seconds: int = 7200
    cookie_name: str = "admin_session"
    cookie_secure: bool = False


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    redis: RedisConfig
    upload: UploadConfig
    logo: LogoConfig
    admin: AdminConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "portfolio-assets"),
            secure=_env_flag("MINIO_SECURE"),
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=int(os.getenv("REDIS_PORT", "6379")),
        ),
        upload=UploadConfig(
            max_file_size_bytes=int(
                os.getenv("UPLOAD_MAX_FILE_SIZE_BYTES", str(100 * 1024 * 1024))
            ),
            session_ttl_seconds=int(os.getenv("UPLOAD_SESSION_TTL_SECONDS", "3600")),
            reaper_interval_seconds=int(
                os.getenv("UPLOAD_REAPER_INTERVAL_SECONDS", "60")
            ),
            public_asset_prefix=os.getenv("PUBLIC_ASSET_PREFIX", "/api/images"),
        ),
        logo=LogoConfig(
            google_api_key=os.getenv("GOOGLE_SEARCH_API_KEY", ""),
            google_search_engine_id=os.getenv("GOOGLE_SEARCH_ENGINE_ID", ""),
            request_timeout_seconds=float(
                os.getenv("LOGO_REQUEST_TIMEOUT_SECONDS", "8")
            ),
            cache_key=os.getenv("LOGO_CACHE_KEY", "logo_cache"),
        ),
        admin=AdminConfig(
            jwt_secret=os.getenv("JWT_SECRET", ""),
            username=os.getenv("ADMIN_USERNAME", "admin"),
            password=os.getenv("ADMIN_PASSWORD", ""),
            session_ttl_seconds=int(os.getenv("ADMIN_SESSION_TTL_SECONDS", "7200")),
            cookie_secure=_env_flag("ADMIN_COOKIE_SECURE"),
        ),
    )
