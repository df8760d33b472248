"""
Application Exception Handling

AppException carries every HTTP-facing error with FastAPI integration.
CatalogLoadError and BundleError cover the file-based catalog tooling.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for API error scenarios.

    Provides consistent error response format across the API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)

    Error Codes:
        Catalog:
            - PRODUCT_NOT_FOUND (404)
            - CATALOG_NOT_LOADED (503)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class CatalogLoadError(Exception):
    """Raised when a catalog file is missing, unparsable or malformed."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load catalog file {path}: {reason}")


class BundleError(Exception):
    """Raised when a page template or bundled page lacks the expected block."""


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(box_code: str) -> AppException:
    """Create product not found exception."""
    return AppException(
        f"Product '{box_code}' not found",
        "PRODUCT_NOT_FOUND",
        404,
        {"box_code": box_code}
    )


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException("Product catalog is not loaded", "CATALOG_NOT_LOADED", 503)

