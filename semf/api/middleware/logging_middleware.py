"""Logging middleware for the SEMF API.

Logs every incoming request and its response with timing information.
"""

import time
from typing import Callable, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from semf.utils.logger import get_api_logger, log_api_request, log_api_response

logger = get_api_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses."""

    def __init__(
        self,
        app: ASGIApp,
        exclude_paths: Optional[List[str]] = None,
    ):
        """Initialize logging middleware.

        Args:
            app: The ASGI application
            exclude_paths: Path fragments to exclude from logging
        """
        super().__init__(app)
        self.exclude_paths = exclude_paths or ["/health", "/docs", "/redoc", "/openapi.json"]

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and log details.

        Args:
            request: The incoming request
            call_next: The next middleware/endpoint

        Returns:
            Response: The response
        """
        path = request.url.path
        if any(excluded in path for excluded in self.exclude_paths):
            return await call_next(request)

        start_time = time.time()
        log_api_request(request.method, path, logger)

        response = await call_next(request)

        duration_ms = round((time.time() - start_time) * 1000, 2)
        log_api_response(request.method, path, response.status_code, duration_ms, logger)

        return response
