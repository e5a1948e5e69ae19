"""ASGI entry point of the product management API.

Run with ``uvicorn product_management.main:app``.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from product_management.api import attributes_router, health_router, product_forms_router
from product_management.api.middleware import error_body, setup_middleware
from product_management.infrastructure.config import settings
from product_management.infrastructure.database import engine
from product_management.infrastructure.logging import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and release database connections on shutdown."""
    logger.info(
        "Starting product management API",
        version=settings.api_version,
        debug=settings.debug,
    )

    yield

    logger.info("Shutting down product management API")
    await engine.dispose()


app = FastAPI(
    title="Product Management API",
    description="Back-office product form and attribute value suggestions",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(attributes_router)
app.include_router(product_forms_router)

# error_code for HTTP errors raised outside the routers (routing, methods)
HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render router and routing HTTP errors in the standard error body."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        content = error_body(
            detail.get("error_code", "ERROR"),
            detail.get("message", str(detail)),
            request_id,
            detail.get("details", []),
        )
    else:
        content = error_body(
            HTTP_ERROR_CODES.get(exc.status_code, "ERROR"), str(detail), request_id
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed path, query or body parameters as a 422 error body."""
    details = []
    for error in exc.errors():
        # loc starts with the parameter source ("query", "path", "body")
        loc = [str(part) for part in error.get("loc", ())]
        details.append({"field": ".".join(loc[1:]) or ".".join(loc), "message": error["msg"]})
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            getattr(request.state, "request_id", None),
            details,
        ),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any other exception as a 500 error body."""
    logger.exception(
        "Request failed",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content=error_body(
            "INTERNAL_ERROR",
            "An internal error occurred",
            getattr(request.state, "request_id", None),
        ),
    )
