"""
Progress computation core.

Pure angle computation and time-driven animation state, with no dependency on
a rendering toolkit.
"""

from .errors import InvalidConfigurationError
from .easing import decelerate, get_easing, linear, make_decelerate
from .animator import ValueRamp
from .progress import ProgressAngleResolver, resolve_progress_angles
from .indeterminate import (
    IndeterminateAnimationEngine,
    IndeterminateState,
    compose_indeterminate_angles,
)
from .stroke_cap import StrokeCap, apply_cap_compensation, compute_cap_angle
from .geometry import DrawRect, compute_draw_rect
from .controller import CircularProgressController

__all__ = [
    "CircularProgressController",
    "DrawRect",
    "IndeterminateAnimationEngine",
    "IndeterminateState",
    "InvalidConfigurationError",
    "ProgressAngleResolver",
    "StrokeCap",
    "ValueRamp",
    "apply_cap_compensation",
    "compose_indeterminate_angles",
    "compute_cap_angle",
    "compute_draw_rect",
    "decelerate",
    "get_easing",
    "linear",
    "make_decelerate",
    "resolve_progress_angles",
]
