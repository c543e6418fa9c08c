"""
HTTP middleware for HC.

Request logging for API calls, and an origin check that only lets the
locally served UI call the API.
"""

import logging
import time
from urllib.parse import urlsplit

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .exceptions import ErrorResponse

logger = logging.getLogger(__name__)


def is_api_route(path: str) -> bool:
    """True for ``/api`` and every path below ``/api/``."""
    return path == "/api" or path.startswith("/api/")


def is_allowed_origin(origin: str, port: int) -> bool:
    """True only for the loopback origins of the local server on ``port``."""
    allowed_origins = (
        f"http://localhost:{port}",
        f"http://127.0.0.1:{port}",
        f"http://[::1]:{port}",
    )
    return origin in allowed_origins


def request_origin(request: Request) -> str:
    """Origin header, falling back to the scheme and host of Referer."""
    origin = request.headers.get("origin", "")
    if origin:
        return origin

    referer = request.headers.get("referer", "")
    if referer:
        parts = urlsplit(referer)
        if parts.scheme and parts.netloc:
            return f"{parts.scheme}://{parts.netloc}"

    return ""


class OriginValidatorMiddleware(BaseHTTPMiddleware):
    """Reject API calls whose declared origin is not the local server."""

    def __init__(self, app, port: int):
        super().__init__(app)
        self.port = port

    async def dispatch(self, request: Request, call_next):
        if not is_api_route(request.url.path):
            return await call_next(request)

        origin = request_origin(request)

        # Direct API use (curl, scripts) sends neither header
        if not origin:
            logger.warning(
                "No Origin or Referer header found: %s %s",
                request.method,
                request.url.path,
            )
            return await call_next(request)

        if not is_allowed_origin(origin, self.port):
            logger.error(
                "Origin validation failed: %s for %s %s",
                origin,
                request.method,
                request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content=ErrorResponse.from_message("Forbidden: Invalid origin").model_dump(),
            )

        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging API requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Log an API request and its response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        if not is_api_route(request.url.path):
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info(
            "request_started %s %s from %s",
            method,
            path,
            request.client.host if request.client else "-",
        )

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "request_error %s %s after %.2f ms",
                method,
                path,
                (time.perf_counter() - start_time) * 1000,
            )
            raise

        level = logging.ERROR if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "request_completed %s %s - %d in %.2f ms",
            method,
            path,
            response.status_code,
            (time.perf_counter() - start_time) * 1000,
        )
        return response
