"""
Stroke-Cap Compensator

Round and square caps extend past the logical end of an arc by half the stroke
width. The compensator trims that margin from both ends so the drawn arc covers
exactly the logical sweep.
"""

import math
from enum import Enum

from circular_progress.constants import FULL_CIRCLE, MIN_SWEEP_ANGLE
from circular_progress.core.errors import InvalidConfigurationError


class StrokeCap(str, Enum):
    """Shape of a stroke's endpoint."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    @classmethod
    def from_index(cls, value: int) -> "StrokeCap":
        """Map the integer attribute form (0 butt, 1 round, 2 square); unknown values fall back to butt."""
        if value == 2:
            return cls.SQUARE
        if value == 1:
            return cls.ROUND
        return cls.BUTT


def validate_stroke_width(width: float) -> float:
    if width < 0:
        raise InvalidConfigurationError(f"Width can't be negative, got {width}")
    return width


def compute_cap_angle(cap: StrokeCap, stroke_width: float, radius: float) -> float:
    """Angle subtended by half the stroke thickness at the arc radius.

    Args:
        cap: Foreground stroke cap
        stroke_width: Foreground stroke width in pixels
        radius: Arc radius in pixels

    Returns:
        Cap angle in degrees; zero for butt caps or a non-positive radius
    """
    validate_stroke_width(stroke_width)
    if cap is StrokeCap.BUTT or radius <= 0:
        return 0.0
    return 90.0 * stroke_width / math.pi / radius


def apply_cap_compensation(start: float, sweep: float, cap_angle: float) -> tuple[float, float]:
    """Shrink an arc by the cap angle at each end without flipping its direction.

    Full circles and zero cap angles pass through unchanged.

    Returns:
        (start, sweep) in degrees
    """
    if cap_angle == 0 or abs(sweep) == FULL_CIRCLE:
        return start, sweep
    if sweep > 0:
        start += cap_angle
        sweep = max(sweep - cap_angle * 2.0, MIN_SWEEP_ANGLE)
    elif sweep < 0:
        start -= cap_angle
        sweep = min(sweep + cap_angle * 2.0, -MIN_SWEEP_ANGLE)
    return start, sweep
