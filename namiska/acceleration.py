"""
Cursor acceleration curve.
"""

import math
import sys

from .config import Tuning

# Bound on the growth term so int() never sees an infinity
_STEP_LIMIT = float(sys.maxsize)


def distance(elapsed_ms: int, tuning: Tuning) -> int:
    """
    Pixels to move per tick after the direction set has been held unchanged
    for elapsed_ms milliseconds.

    Grows linearly from base_distance and is capped at max_distance. The
    growth term saturates like an integer cast: NaN counts as 0 and
    overflow clamps, so extreme factors hit the cap instead of raising.
    """
    step = elapsed_ms * tuning.acceleration_factor
    if math.isnan(step):
        step = 0.0
    step = int(max(-_STEP_LIMIT, min(step, _STEP_LIMIT)))
    return min(tuning.base_distance + step, tuning.max_distance)
