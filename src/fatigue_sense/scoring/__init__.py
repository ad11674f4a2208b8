"""Fatigue scoring — normalization and the per-test and composite scorers.

Every scorer is a pure function of one finite buffer collected during a
single test run.  Nothing is cached between calls, so independent buffers
can be scored concurrently without coordination.

Scorers
-------
- **Tapping** (`tapping.py`) — tap rate and interval jitter.
- **Sway** (`sway.py`) — variance of acceleration magnitude.
- **Movement** (`movement.py`) — distance of magnitude std-dev from an
  ideal gait smoothness.
- **Composite** (`composite.py`) — RMS, jerk, per-axis sway and entropy of
  one uploaded stream.
- **Session** (`session.py`) — overall score from the latest test results.
"""

from fatigue_sense.scoring.composite import check_composite_input, compute_fatigue_score
from fatigue_sense.scoring.movement import compute_movement_score
from fatigue_sense.scoring.normalize import normalize
from fatigue_sense.scoring.session import build_test_result, interpret_score, session_fatigue_score
from fatigue_sense.scoring.sway import compute_sway_score
from fatigue_sense.scoring.tapping import compute_tapping_score

__all__ = [
    "build_test_result",
    "check_composite_input",
    "compute_fatigue_score",
    "compute_movement_score",
    "compute_sway_score",
    "compute_tapping_score",
    "interpret_score",
    "normalize",
    "session_fatigue_score",
]
