"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI

from dependencies import close_clients, get_chunk_assembler, get_config
from error_handlers import register_error_handlers
from reaper import SessionReaper
from routes import auth_router, images_router, logos_router, upload_router

patch_all()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs the upload session reaper for the lifetime of the app."""
    reaper = SessionReaper(
        get_chunk_assembler(), get_config().upload.reaper_interval_seconds
    )
    reaper.start()
    try:
        yield
    finally:
        reaper.stop()
        close_clients()


app = FastAPI(title="Portfolio Asset Service", lifespan=lifespan)
register_error_handlers(app)
app.include_router(auth_router)
app.include_router(upload_router)
app.include_router(logos_router)
app.include_router(images_router)
