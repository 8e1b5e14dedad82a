"""Error Handlers — global exception handlers producing the failure envelope.

Invariants:
    - AlbumsError → {success: false, data: null, error: message} at its http_status
    - RequestValidationError → AlbumDecodeError envelope (400), message built
      from the decoder's own error text
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (AlbumsError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from albums_api.core.errors import AlbumDecodeError, AlbumsError, ErrorSeverity
from albums_api.schemas.album import ErrorEnvelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_albums_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_albums_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AlbumsError)
    async def albums_error_handler(request: Request, exc: AlbumsError):
        """Handle all domain errors raised by handlers and the store."""
        level = (
            logging.INFO if exc.severity == ErrorSeverity.INFO
            else logging.WARNING
        )
        logger.log(
            level, f"AlbumsError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Request body did not decode into the expected shape."""
        error = AlbumDecodeError(format_decode_errors(exc.errors()))
        logger.warning(
            f"Decode error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorEnvelope(error=INTERNAL_ERROR_MESSAGE).model_dump(),
        )


def format_decode_errors(errors) -> str:
    """Join pydantic errors as '<field>: <msg>', dropping the 'body' prefix."""
    parts = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ())]
        if len(loc) > 1 and loc[0] == "body":
            loc = loc[1:]
        field = ".".join(loc)
        parts.append(f"{field}: {e['msg']}" if field else e["msg"])
    return "; ".join(parts) or "Invalid request body"
