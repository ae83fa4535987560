# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Products API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings
from app.exceptions import (
    ProductsApiException,
    products_api_exception_handler,
    validation_exception_handler,
)
from app.middleware import OriginPolicyMiddleware, RequestLoggingMiddleware
from app.routers import health, products
from lib.database import Database

# Configure logging
logging.basicConfig(
    stream=sys.stdout,
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


DESCRIPTION = """
## Products API

CRUD operations for a single **Product** resource.

| Method | Path | Description |
|--------|------|-------------|
| GET | `/api/products` | List products |
| GET | `/api/products/{id}` | Get one product |
| POST | `/api/products` | Create a product |
| PUT | `/api/products/{id}` | Replace a product |
| PATCH | `/api/products/{id}` | Toggle or set availability |
| DELETE | `/api/products/{id}` | Delete a product |

Invalid input is rejected with **400** and the list of failed rules.
"""


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment settings)

    Returns:
        Configured FastAPI app; its database handle lives on app.state.database
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: open the database handle and create missing tables
        - Shutdown: close pooled connections
        """
        logger.info(f"Starting Products API in {app_settings.ENVIRONMENT} mode")
        logger.info(f"CORS origin: {app_settings.allowed_origin}")

        database = Database(app_settings.DATABASE_URL, echo=app_settings.DB_ECHO)
        app.state.database = database

        # Without DB_FAIL_FAST a failed connection is only logged
        await database.connect(fail_fast=app_settings.DB_FAIL_FAST)

        yield

        logger.info("Shutting down Products API")
        await database.dispose()

    app = FastAPI(
        title="Products API",
        description=DESCRIPTION,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Products",
                "description": "Create, read, update and delete products",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    # =========================================================================
    # Middleware
    # =========================================================================
    # Added innermost first: logging wraps the origin policy, which wraps CORS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.allowed_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        OriginPolicyMiddleware,
        allowed_origin=app_settings.allowed_origin,
        require_origin=app_settings.CORS_REQUIRE_ORIGIN,
    )
    app.add_middleware(RequestLoggingMiddleware)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(ProductsApiException)
    async def handle_products_api_exception(request: Request, exc: ProductsApiException):
        """Handle custom Products API exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.details}")
        return await products_api_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Render FastAPI's own validation errors as 400."""
        return await validation_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        products.router,
        prefix="/api/products",
        tags=["Products"]
    )

    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Products API",
            "version": __version__,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
