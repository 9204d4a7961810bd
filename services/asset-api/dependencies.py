"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated

import httpx
import jwt
import redis
from fastapi import Depends, HTTPException, Request, status
from portfolio_common.logging import setup_logging
from portfolio_common.minio import get_minio_client

from admin_session import decode_session_token
from config import AdminConfig, AppConfig, load_config
from domain.asset_service import AssetService
from domain.chunk_assembler import ChunkAssembler
from domain.logo_resolver import LogoResolver
from infrastructure import (
    ClearbitLogoProvider,
    GoogleImageSearchProvider,
    HttpImageDownloader,
    InMemoryUploadSessionStore,
    MinioStorageClient,
    RedisLogoCache,
    SimpleIconsProvider,
)
from infrastructure.interfaces import StorageClient

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the application configuration, loaded once."""
    return load_config()


@lru_cache
def get_storage() -> StorageClient:
    """Returns the MinIO storage client, creating the bucket on first use."""
    config = get_config()
    storage = MinioStorageClient(get_minio_client(config.minio))
    storage.ensure_bucket_exists(config.minio.bucket_name)
    return storage


@lru_cache
def get_http_client() -> httpx.Client:
    """Returns the shared HTTP client used for logo providers and downloads."""
    return httpx.Client(
        timeout=get_config().logo.request_timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": "portfolio-asset-service"},
    )


@lru_cache
def get_redis_client() -> redis.Redis:
    config = get_config()
    return redis.Redis(
        host=config.redis.host,
        port=config.redis.port,
        decode_responses=True,
    )


@lru_cache
def get_asset_service() -> AssetService:
    """Returns the asset service shared by direct and chunked uploads."""
    config = get_config()
    return AssetService(
        storage=get_storage(),
        bucket_name=config.minio.bucket_name,
        max_file_size_bytes=config.upload.max_file_size_bytes,
        public_prefix=config.upload.public_asset_prefix,
    )


@lru_cache
def get_chunk_assembler() -> ChunkAssembler:
    """Returns the process-wide chunk assembler and its session store."""
    return ChunkAssembler(
        store=InMemoryUploadSessionStore(),
        asset_service=get_asset_service(),
        session_ttl_seconds=get_config().upload.session_ttl_seconds,
    )


@lru_cache
def get_logo_resolver() -> LogoResolver:
    """Returns the logo resolver with providers in preference order."""
    config = get_config()
    client = get_http_client()
    providers = [
        GoogleImageSearchProvider(
            client,
            api_key=config.logo.google_api_key,
            search_engine_id=config.logo.google_search_engine_id,
        ),
        ClearbitLogoProvider(client),
        SimpleIconsProvider(client),
    ]
    return LogoResolver(
        cache=RedisLogoCache(get_redis_client(), config.logo.cache_key),
        providers=providers,
        downloader=HttpImageDownloader(client),
        storage=get_storage(),
        bucket_name=config.minio.bucket_name,
        object_prefix=config.logo.object_prefix,
        public_prefix=config.upload.public_asset_prefix,
    )


def get_admin_config() -> AdminConfig:
    return get_config().admin


def require_admin(
    request: Request,
    admin_config: Annotated[AdminConfig, Depends(get_admin_config)],
) -> dict:
    """Rejects requests without a valid admin session cookie."""
    token = request.cookies.get(admin_config.cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    try:
        return decode_session_token(token, admin_config)
    except jwt.PyJWTError as e:
        logger.warning("Session validation failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )


def close_clients() -> None:
    """Closes the network clients that were created."""
    if get_http_client.cache_info().currsize:
        get_http_client().close()
    if get_redis_client.cache_info().currsize:
        get_redis_client().close()
