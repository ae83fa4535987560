# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries a human-readable detail and a machine-readable
# code; validation errors additionally list every failed rule.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ProductsApiException(Exception):
    """
    Base exception for the Products API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PRODUCTS_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class RequestValidationFailed(ProductsApiException):
    """Raised when request input breaks one or more validation rules."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            message="Request validation failed",
            code="VALIDATION_ERROR",
            status_code=400,
        )
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = self.errors
        return result


# =============================================================================
# Product Exceptions
# =============================================================================

class ProductNotFoundError(ProductsApiException):
    """Raised when a product ID doesn't exist."""

    def __init__(self, product_id: int | str):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the product id is correct and the product hasn't been deleted",
            details={"product_id": product_id}
        )


# =============================================================================
# Database Exceptions
# =============================================================================

class DatabaseError(ProductsApiException):
    """Raised when a query against the product store fails."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Database error while trying to {operation}",
            code="DATABASE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation, "error": error}
        )


class DatabaseConnectionError(ProductsApiException):
    """Raised at startup when the database is unreachable and DB_FAIL_FAST is on."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Could not connect to the database: {error}",
            code="DATABASE_CONNECTION_ERROR",
            status_code=500,
            suggestion="Check DATABASE_URL and that the database server is running",
            details={"error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def products_api_exception_handler(
    request: Request,
    exc: ProductsApiException
) -> JSONResponse:
    """
    Convert ProductsApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    - errors: Failed validation rules (validation errors only)
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI's own request validation errors.

    Rendered with the same 400 shape as the rule engine's errors.
    """
    errors = [
        {
            "location": error["loc"][0] if error.get("loc") else "request",
            "field": ".".join(str(part) for part in error.get("loc", ())[1:]),
            "value": None,
            "msg": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Request validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
