"""Request and response models for the asset API."""

from pydantic import BaseModel

from domain.models import LogoSource


class UploadResponse(BaseModel):
    """Upload outcome; url is present only once a file is fully persisted."""

    success: bool
    url: str | None = None
    message: str | None = None


class LogoResponse(BaseModel):
    url: str
    cached: bool | None = None
    source: LogoSource | None = None


class LogoErrorResponse(BaseModel):
    error: str
    details: str | None = None


class LoginRequest(BaseModel):
    username: str
    password: str


class AuthResponse(BaseModel):
    success: bool
    message: str
