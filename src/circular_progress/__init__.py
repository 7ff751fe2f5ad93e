"""
Circular Progress - angle computation and animation for circular progress indicators.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("circular-progress")
except PackageNotFoundError:
    __version__ = "unknown"

from circular_progress.core import (
    CircularProgressController,
    DrawRect,
    IndeterminateAnimationEngine,
    IndeterminateState,
    InvalidConfigurationError,
    ProgressAngleResolver,
    StrokeCap,
    apply_cap_compensation,
    compose_indeterminate_angles,
    compute_cap_angle,
    compute_draw_rect,
    resolve_progress_angles,
)

__all__ = [
    "CircularProgressController",
    "DrawRect",
    "IndeterminateAnimationEngine",
    "IndeterminateState",
    "InvalidConfigurationError",
    "ProgressAngleResolver",
    "StrokeCap",
    "apply_cap_compensation",
    "compose_indeterminate_angles",
    "compute_cap_angle",
    "compute_draw_rect",
    "resolve_progress_angles",
]
