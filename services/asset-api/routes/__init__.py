"""API routers."""

from .auth import router as auth_router
from .images import router as images_router
from .logos import router as logos_router
from .upload import router as upload_router

__all__ = ["auth_router", "images_router", "logos_router", "upload_router"]
