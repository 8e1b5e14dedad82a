"""Albums API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AlbumsError → envelope JSON responses
    - AlbumStore created on startup via lifespan and held on app.state
      for the process lifetime; nothing is persisted on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Store on app.state over a module global: one owner, injectable in tests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from albums_api.api.error_handlers import register_error_handlers
from albums_api.api.routes import albums
from albums_api.config import get_settings
from albums_api.core.album_store import AlbumStore
from albums_api.infrastructure.observability import setup_logging
from albums_api.infrastructure.request_logging import register_request_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.album_store = (
        AlbumStore.seeded() if settings.seed_albums else AlbumStore()
    )
    logger.info(
        f"Albums API started with {len(app.state.album_store)} albums",
    )
    yield
    logger.info("Albums API shutting down, in-memory albums discarded")


app = FastAPI(title="Albums API", version="1.0.0", lifespan=lifespan)

register_request_logging(app)
app.include_router(albums.router)
register_error_handlers(app)
