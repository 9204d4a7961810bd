"""Admin login and logout endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from portfolio_common.logging import setup_logging

from admin_session import create_session_token, credentials_match
from config import AdminConfig
from dependencies import get_admin_config
from response_models import AuthResponse, LoginRequest

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["auth"])

AdminConfigDep = Annotated[AdminConfig, Depends(get_admin_config)]


@router.post("/auth", response_model=AuthResponse)
def login(
    credentials: LoginRequest, response: Response, config: AdminConfigDep
) -> AuthResponse | JSONResponse:
    """Issues the admin session cookie for valid credentials."""
    if not credentials_match(credentials.username, credentials.password, config):
        logger.warning("Admin login rejected", extra={"username": credentials.username})
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=AuthResponse(
                success=False, message="Access Denied: Invalid credentials"
            ).model_dump(),
        )

    token, expires_at = create_session_token(credentials.username, config)
    response.set_cookie(
        key=config.cookie_name,
        value=token,
        httponly=True,
        secure=config.cookie_secure,
        expires=expires_at,
        samesite="lax",
        path="/",
    )
    logger.info("Admin logged in", extra={"username": credentials.username})
    return AuthResponse(success=True, message="Access Granted")


@router.delete("/auth", response_model=AuthResponse)
def logout(response: Response, config: AdminConfigDep) -> AuthResponse:
    """Clears the admin session cookie."""
    response.delete_cookie(key=config.cookie_name, path="/")
    return AuthResponse(success=True, message="Logged out")
