"""Logo lookup endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from portfolio_common import StorageUploadError
from portfolio_common.logging import setup_logging

from dependencies import get_logo_resolver, require_admin
from domain.logo_resolver import LogoResolver
from exceptions import (
    CacheServiceError,
    InvalidLogoQueryError,
    LogoDownloadError,
    LogoNotFoundError,
    LogoServiceUnavailableError,
)
from response_models import LogoErrorResponse, LogoResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["logos"])

ResolverDep = Annotated[LogoResolver, Depends(get_logo_resolver)]
AdminDep = Annotated[dict, Depends(require_admin)]


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=LogoErrorResponse(error=error, details=details).model_dump(
            exclude_none=True
        ),
    )


@router.get(
    "/fetch-logo", response_model=LogoResponse, response_model_exclude_none=True
)
def fetch_logo(
    resolver: ResolverDep,
    _admin: AdminDep,
    org: Annotated[str | None, Query()] = None,
) -> LogoResponse | JSONResponse:
    """Returns a stored logo for an organization, resolving it on a cache miss."""
    name = (org or "").strip()

    try:
        resolution = resolver.resolve(name)
    except InvalidLogoQueryError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except LogoNotFoundError as e:
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except LogoServiceUnavailableError as e:
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, str(e), e.details)
    except LogoDownloadError as e:
        return _error(
            status.HTTP_502_BAD_GATEWAY,
            "Failed to download logo",
            str(e.cause) if e.cause else str(e),
        )
    except StorageUploadError as e:
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to store logo", str(e)
        )
    except CacheServiceError as e:
        return _error(
            status.HTTP_503_SERVICE_UNAVAILABLE, "Logo cache unavailable", str(e)
        )

    if resolution.cached:
        return LogoResponse(url=resolution.url, cached=True)
    return LogoResponse(url=resolution.url, source=resolution.source)
