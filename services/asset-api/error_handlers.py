"""Maps framework-level errors onto each endpoint's failure body."""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from portfolio_common.logging import setup_logging
from starlette.exceptions import HTTPException as StarletteHTTPException

from response_models import LogoErrorResponse, UploadResponse

logger = setup_logging()

UPLOAD_PATH = "/api/upload"
LOGO_PATH = "/api/fetch-logo"


def _failure_body(path: str, message: str) -> dict | None:
    """Returns the endpoint's own failure body, or None for default handling."""
    if path == UPLOAD_PATH:
        return UploadResponse(success=False, message=message).model_dump(
            exclude_none=True
        )
    if path == LOGO_PATH:
        return LogoErrorResponse(error=message).model_dump(exclude_none=True)
    return None


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    body = _failure_body(request.url.path, str(exc.detail))
    if body is None:
        return await http_exception_handler(request, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=body,
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:])}: {error['msg']}"
        for error in exc.errors()
    )
    body = _failure_body(request.url.path, message)
    if body is None:
        return await request_validation_exception_handler(request, exc)

    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "reason": message},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Installs the handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
