"""FastAPI application — scoring, analysis and time-series chart endpoints.

The service is stateless: every request carries the samples it is about
and nothing is persisted.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from fatigue_sense.api.middleware import setup_middleware
from fatigue_sense.api.routes.analysis import router as analysis_router
from fatigue_sense.api.routes.scores import router as scores_router
from fatigue_sense.api.routes.timeseries import router as timeseries_router
from fatigue_sense.config import get_settings

logger = structlog.get_logger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle hooks."""
    settings = get_settings()
    logger.info("server.started", port=settings.api_port, min_analyze_samples=settings.min_analyze_samples)
    yield
    logger.info("server.stopped")


app = FastAPI(
    title="FatigueSense API",
    description="Fatigue scores and chart series from motor-task IMU recordings.",
    version=VERSION,
    lifespan=lifespan,
)

# ── Middleware ────────────────────────────────────────────────
setup_middleware(app)

# ── Routers ───────────────────────────────────────────────────
app.include_router(analysis_router)
app.include_router(scores_router)
app.include_router(timeseries_router)


# ── Health ────────────────────────────────────────────────────

@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok", "version": VERSION}
