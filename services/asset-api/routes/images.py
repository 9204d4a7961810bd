"""Asset delivery endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response
from portfolio_common import StorageDownloadError, StorageObjectNotFoundError
from portfolio_common.logging import setup_logging

from config import AppConfig
from dependencies import get_config, get_storage
from infrastructure.interfaces import StorageClient

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["assets"])

StorageDep = Annotated[StorageClient, Depends(get_storage)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]

CACHE_CONTROL = "public, max-age=31536000, immutable"


@router.get("/images/{storage_key:path}")
def get_asset(storage_key: str, storage: StorageDep, config: ConfigDep) -> Response:
    """Streams a stored asset back with its recorded content type."""
    try:
        stored = storage.download(config.minio.bucket_name, storage_key)
    except StorageObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Image not found")
    except StorageDownloadError:
        raise HTTPException(status_code=500, detail="Internal server error")

    return Response(
        content=stored.data,
        media_type=stored.content_type,
        headers={"Cache-Control": CACHE_CONTROL},
    )
