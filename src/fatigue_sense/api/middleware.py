"""Middleware — CORS, request logging, error handling."""

from __future__ import annotations

import time
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from fatigue_sense.config import get_settings

logger = structlog.get_logger(__name__)


# ── CORS ──────────────────────────────────────────────────────


def add_cors(app: FastAPI) -> None:
    """Configure CORS from application settings.

    ``settings.cors_origins`` is a comma-separated string of allowed
    origins (or ``"*"`` to allow all).
    """
    origins_raw = get_settings().cors_origins.strip()

    if origins_raw == "*":
        origins = ["*"]
    else:
        origins = [o.strip() for o in origins_raw.split(",") if o.strip()]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# ── Request logging ───────────────────────────────────────────


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request method, path, status, and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000, 1)

        if request.url.path != "/health":
            logger.info(
                "http.request",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=duration_ms,
            )
        return response


# ── Global error handler ─────────────────────────────────────


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catch unhandled exceptions and return a clean 500 response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("http.unhandled_error", path=request.url.path, error=str(exc))
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error."},
            )


# ── Setup helper ──────────────────────────────────────────────


def setup_middleware(app: FastAPI) -> None:
    """Wire all middleware into the FastAPI application.

    Outermost runs first: error handler, request logging, then CORS.
    """
    add_cors(app)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
