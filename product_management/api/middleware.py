"""HTTP middleware: request correlation, API key check and a last-resort
error body for anything the routers did not handle.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from product_management.infrastructure.config import settings

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Reachable without an API key
PUBLIC_PATHS = {
    "/health",
    "/ready",
    "/docs",
    "/redoc",
    "/openapi.json",
}


def error_body(
    error_code: str,
    message: str,
    request_id: str | None = None,
    details: list[dict] | None = None,
) -> dict:
    """Build the standard error response body."""
    return {
        "error_code": error_code,
        "message": message,
        "details": details or [],
        "request_id": request_id,
    }


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID and log its completion.

    Takes the request ID from the ``X-Request-ID`` header or generates one,
    stores it on ``request.state``, binds it into the structlog context and
    echoes it back in the response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
        finally:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests without the configured bearer API key.

    Expects ``Authorization: Bearer <api_key>`` on every non-public path.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path.rstrip("/")
        if path in PUBLIC_PATHS or path.startswith(("/docs", "/redoc")):
            return await call_next(request)

        scheme, _, api_key = (request.headers.get("Authorization") or "").partition(" ")

        if not scheme:
            return self._unauthorized(request, "UNAUTHORIZED", "Missing Authorization header")

        if scheme.lower() != "bearer" or not api_key:
            return self._unauthorized(
                request,
                "UNAUTHORIZED",
                "Invalid Authorization header format. Use 'Bearer <api_key>'",
            )

        if api_key != settings.api_key:
            return self._unauthorized(request, "INVALID_API_KEY", "Invalid API key")

        return await call_next(request)

    def _unauthorized(self, request: Request, error_code: str, message: str) -> JSONResponse:
        logger.warning(
            "Authentication failed",
            error_code=error_code,
            path=request.url.path,
            method=request.method,
        )
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=error_body(error_code, message, getattr(request.state, "request_id", None)),
            headers={"WWW-Authenticate": "Bearer"},
        )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware that turns unhandled exceptions into a 500 error body."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(
                    "INTERNAL_ERROR",
                    "An internal error occurred",
                    getattr(request.state, "request_id", None),
                ),
            )


def setup_middleware(app: FastAPI) -> None:
    """Install the middleware stack; the request ID one runs first."""
    for middleware in (ErrorHandlerMiddleware, ApiKeyMiddleware, RequestIdMiddleware):
        app.add_middleware(middleware)
