"""Map a raw metric onto the bounded 0-100 score scale."""

from __future__ import annotations

import math

from fatigue_sense.calibration import NORMALIZE_EPSILON, CalibrationBounds


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for scores.

    Scores are never negative, so this is ``floor(value + 0.5)``; Python's
    built-in :func:`round` would send ``72.5`` to ``72``.
    """
    return int(math.floor(value + 0.5))


def round_half_up_tenths(value: float) -> float:
    """One-decimal counterpart of :func:`round_half_up` (``72.25`` -> ``72.3``)."""
    return math.floor(value * 10 + 0.5) / 10


def normalize(value: float, low: float, high: float, invert: bool = False) -> int:
    """Return *value* as an integer score in ``[0, 100]``.

    Out-of-range inputs are clamped, never reported: a value below *low*
    saturates at 0 (100 when inverted) and one above *high* at 100 (0 when
    inverted).  A zero-width range is guarded by ``NORMALIZE_EPSILON``.
    """
    clamped = max(low, min(high, value))
    n = (clamped - low) / max(high - low, NORMALIZE_EPSILON)
    if invert:
        n = 1 - n
    return round_half_up(n * 100)


def normalize_with(value: float, bounds: CalibrationBounds) -> int:
    """:func:`normalize` driven by a :class:`CalibrationBounds` constant."""
    return normalize(value, bounds.min, bounds.max, bounds.invert)
