"""Centralised application settings loaded from environment / .env file."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Runtime configuration for the fatigue-sense service.

    Values are read from environment variables first, then from a *.env* file
    located at the project root.  Every variable lives in the flat
    ``FATIGUE_SENSE_`` namespace (stripped automatically by
    *pydantic-settings*).

    Calibration bounds are deliberately absent: they are compiled into
    :mod:`fatigue_sense.calibration` and change only with a deploy.
    """

    model_config = SettingsConfigDict(
        env_prefix="FATIGUE_SENSE_",
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── API server ────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = int(os.getenv("PORT", "8000"))

    # ── CORS ──────────────────────────────────────────────────
    cors_origins: str = "*"  # comma-separated origins, or "*" for all

    # ── Logging ───────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ── Analysis ──────────────────────────────────────────────
    min_analyze_samples: int = 10  # /analyze rejects smaller uploads


@lru_cache
def get_settings() -> Settings:
    """Return a cached :class:`Settings` singleton."""
    return Settings()
