"""Error Hierarchy — typed, categorized exceptions for all Albums API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the {success, data, error} envelope
    - Only two domain errors exist: not-found (404) and decode (400)

Design Decisions:
    - Single hierarchy with AlbumsError base: FastAPI global handler catches all
    - NOT_FOUND_MESSAGE is a fixed wire string, clients may match on it
"""

from enum import Enum


NOT_FOUND_MESSAGE = "Album not found"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class AlbumsError(Exception):
    """Base exception for all Albums API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard failure envelope."""
        return {"success": False, "data": None, "error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AlbumNotFoundError(AlbumsError):
    """No album with the requested id is held."""
    def __init__(self, album_id: str):
        super().__init__(
            NOT_FOUND_MESSAGE, "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, 404,
        )
        self.album_id = album_id


class AlbumDecodeError(AlbumsError):
    """Request body could not be decoded into an Album."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
