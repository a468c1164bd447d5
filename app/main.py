"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app with its own BookStore
   - Each test can build a fresh app (clean in-memory data)

2. Lifespan Events
   - startup/shutdown logging around the running server

3. Exception Handlers
   - Every error leaves the API as {"error": "<message>"}
   - BookNotFoundError -> 404
   - Request validation (bad JSON, bad fields) -> 400
   - Unknown routes and wrong methods -> 404 "Route not found"
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.routers import books_router
from app.schemas import BOOK_NOT_FOUND, ROUTE_NOT_FOUND, describe_validation_error
from app.services.book_store import BookNotFoundError, BookStore

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ENDPOINTS = {
    "GET /api/books": "Get all books",
    "GET /api/books/:id": "Get a specific book by ID",
    "POST /api/books": "Create a new book",
    "PUT /api/books/:id": "Update a book",
    "DELETE /api/books/:id": "Delete a book",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform {"error": message} response."""
    return JSONResponse(status_code=status_code, content={"error": message})


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.app_name} ({app_settings.environment})...")
    logger.info(f"Books loaded: {len(app.state.book_store)}")

    yield  # Application runs here

    logger.info(f"Shutting down {app_settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app(app_settings: Settings | None = None, store: BookStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the cached get_settings())
        store: Book store to serve (defaults to a freshly seeded one)

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or get_settings()

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Library Books API

A small REST API over an in-memory collection of books.

- **List** and **fetch** books
- **Create** books (title and author required)
- **Update** any subset of a book's fields
- **Delete** books

Data lives in memory and is reseeded on every start.
        """,
        version=app_settings.api_version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url="/redoc" if app_settings.docs_enabled else None,
        openapi_url="/openapi.json" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # The store lives on the app, not in a module global
    app.state.settings = app_settings
    if store is None:
        store = BookStore() if app_settings.seed_books else BookStore(seed=())
    app.state.book_store = store

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookNotFoundError)
    async def book_not_found_handler(
        request: Request,
        exc: BookNotFoundError,
    ) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path}: {exc}")
        return error_response(status.HTTP_404_NOT_FOUND, BOOK_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Convert request validation failures to 400 {"error": ...}."""
        message = describe_validation_error(exc.errors())
        logger.warning(f"{request.method} {request.url.path}: rejected payload: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unmatched paths and unsupported methods both read as an unknown route."""
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if app_settings.debug:
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "An internal error occurred.")

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router, prefix="/api")

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and the list of available endpoints.",
    )
    def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": "Welcome to the Library Books API",
            "endpoints": ENDPOINTS,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m app.main

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Books API server running at http://localhost:{settings.port}")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
