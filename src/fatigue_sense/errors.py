"""Exception hierarchy."""

from __future__ import annotations


class FatigueSenseError(Exception):
    """Base class for errors raised by fatigue-sense."""


class InsufficientDataError(FatigueSenseError, ValueError):
    """Input holds too few samples for the requested computation."""

    def __init__(self, message: str, *, required: int | None = None, received: int | None = None) -> None:
        super().__init__(message)
        self.required = required
        self.received = received
