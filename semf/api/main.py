"""Main FastAPI application module for the SEMF scoring service.

This module creates and configures the FastAPI application instance with
middleware, exception handlers and routers.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from semf.api.middleware.logging_middleware import LoggingMiddleware
from semf.api.middleware.request_id import RequestIDMiddleware, get_request_id
from semf.core.config import get_settings
from semf.schemas.base import create_error_content
from semf.utils.constants import ErrorCodes
from semf.utils.exceptions import ResourceNotFoundError, SemfError, ValidationError
from semf.utils.logger import get_logger

# Initialize settings and logger
settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events.

    Args:
        app: FastAPI application instance
    """
    logger.info(
        "Starting SEMF scoring API",
        extra={
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
        }
    )

    yield

    logger.info("SEMF scoring API shut down")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Scoring engine for the SEMF English core skills test",
        version=settings.APP_VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs" if settings.ENABLE_API_DOCS else None,
        redoc_url=f"{settings.API_V1_PREFIX}/redoc" if settings.ENABLE_API_DOCS else None,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json" if settings.ENABLE_API_DOCS else None,
        lifespan=lifespan,
    )

    app = register_exception_handlers(app)
    app = register_middleware(app)
    app = register_routers(app)

    return app


def status_code_for(error: SemfError) -> int:
    """HTTP status code for an application exception."""
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, ResourceNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Register custom exception handlers.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with exception handlers registered
    """

    @app.exception_handler(SemfError)
    async def application_exception_handler(
        request: Request, exc: SemfError
    ) -> JSONResponse:
        """Handle application exceptions."""
        request_id = get_request_id()
        status_code = status_code_for(exc)

        logger.warning(
            f"Application error: {exc.message}",
            extra={
                "request_id": request_id,
                "error_code": exc.error_code,
                "error_type": exc.__class__.__name__,
                "status_code": status_code,
                "path": request.url.path,
                "details": exc.details,
            }
        )

        return JSONResponse(
            status_code=status_code,
            content=create_error_content(
                code=exc.error_code or exc.__class__.__name__,
                message=exc.message,
                request_id=request_id,
                details=jsonable_encoder(exc.details) or None,
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions."""
        request_id = get_request_id()

        logger.warning(
            f"HTTP exception: {exc.detail}",
            extra={
                "request_id": request_id,
                "status_code": exc.status_code,
                "path": request.url.path,
            }
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=create_error_content(
                code=exc.status_code,
                message=str(exc.detail),
                request_id=request_id,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        request_id = get_request_id()
        errors = jsonable_encoder(exc.errors())

        logger.warning(
            "Validation error",
            extra={
                "request_id": request_id,
                "errors": errors,
                "path": request.url.path,
            }
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=create_error_content(
                code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                message="Validation error",
                request_id=request_id,
                details=errors,
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle uncaught exceptions."""
        request_id = get_request_id()

        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "request_id": request_id,
                "exception_type": type(exc).__name__,
                "path": request.url.path,
            },
            exc_info=True,
        )

        # Don't expose internal errors in production
        if settings.is_production():
            message = "An internal error occurred"
        else:
            message = str(exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=create_error_content(
                code=ErrorCodes.INTERNAL_ERROR,
                message=message,
                request_id=request_id,
            ),
        )

    return app


def register_middleware(app: FastAPI) -> FastAPI:
    """Register application middleware.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with middleware registered
    """
    # Added last runs first: request id wraps logging.
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time to response headers."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        return response

    return app


def register_routers(app: FastAPI) -> FastAPI:
    """Register API routers.

    Args:
        app: FastAPI application instance

    Returns:
        FastAPI: Application with routers registered
    """
    from semf.routers import health, scoring

    api_prefix = settings.API_V1_PREFIX

    app.include_router(health.router, prefix=api_prefix, tags=["Health"])
    app.include_router(scoring.router, prefix=api_prefix, tags=["Scoring"])

    return app


app = create_application()
