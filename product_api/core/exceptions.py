"""
Application Exception Handling

AppException base class for all application errors with FastAPI integration,
plus the product error types raised by the catalog.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)
        raise AppException("Bad payload", "INVALID_PAYLOAD", 400, {"reason": "..."})

    Error Codes:
        Product:
            - PRODUCT_NOT_FOUND (404)
            - INVALID_PAYLOAD (400)
            - VALIDATION_ERROR (422)
            - ENCODE_ERROR (500)

        Routing:
            - NOT_FOUND (404)
            - HTTP_ERROR (other statuses)
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


class ProductNotFoundError(AppException):
    """Raised when no product carries the requested id."""

    def __init__(self, product_id: Optional[int] = None):
        details = {"product_id": product_id} if product_id is not None else {}
        super().__init__("Product not found", "PRODUCT_NOT_FOUND", 404, details)
        self.product_id = product_id


class ProductDecodeError(AppException):
    """Raised when a request body cannot be read as a product."""

    def __init__(self, reason: str, errors: Optional[List[Dict[str, Any]]] = None):
        details: Dict[str, Any] = {"reason": reason}
        if errors:
            details["errors"] = errors
        super().__init__("Unable to decode product", "INVALID_PAYLOAD", 400, details)


class ProductValidationError(AppException):
    """
    Raised when a product violates one or more field constraints.

    Attributes:
        violations: One entry per failed field with keys field, rule, message
    """

    def __init__(self, violations: List[Dict[str, str]]):
        self.violations = violations
        fields = ", ".join(v["field"] for v in violations)
        super().__init__(
            f"Product validation failed: {fields}",
            "VALIDATION_ERROR",
            422,
            {"violations": violations}
        )

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation."""
        return [v["field"] for v in self.violations]

    def rule_for(self, field: str) -> Optional[str]:
        """Return the failed rule tag for a field, if it failed."""
        for violation in self.violations:
            if violation["field"] == field:
                return violation["rule"]
        return None


class ProductEncodeError(AppException):
    """Raised when products cannot be written as JSON."""

    def __init__(self, reason: str):
        super().__init__("Unable to encode product", "ENCODE_ERROR", 500, {"reason": reason})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    FastAPI exception handler for routing errors (unknown path, wrong method).

    Renders them in the same envelope as AppException.
    """
    code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    error = AppException(str(exc.detail), code, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=error.to_dict(),
        headers=getattr(exc, "headers", None)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Call this in main.py after creating the FastAPI instance.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(product_id: Optional[int] = None) -> ProductNotFoundError:
    """Create product not found exception."""
    return ProductNotFoundError(product_id)


def invalid_payload(reason: str) -> ProductDecodeError:
    """Create undecodable payload exception."""
    return ProductDecodeError(reason)
