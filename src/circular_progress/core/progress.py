"""
Progress Angle Resolver

Converts (progress, maximum, start angle) into the start/sweep pair of a
determinate arc, with an optional eased transition between progress values.
"""

import logging

from circular_progress.constants import (
    DEFAULT_MAXIMUM,
    DEFAULT_PROGRESS,
    DEFAULT_PROGRESS_ANIMATION_DURATION_MS,
    DEFAULT_START_ANGLE,
    FULL_CIRCLE,
    START_ANGLE_LIMIT,
)
from circular_progress.core.animator import ValueRamp, validate_duration
from circular_progress.core.easing import Easing, decelerate, validate_easing
from circular_progress.core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


def validate_maximum(maximum: float) -> float:
    if maximum == 0:
        raise InvalidConfigurationError("Maximum can't be zero")
    return maximum


def validate_start_angle(angle: float) -> float:
    if angle < -START_ANGLE_LIMIT or angle > START_ANGLE_LIMIT:
        raise InvalidConfigurationError(
            f"Start angle value should be between -360 and 360 degrees (inclusive), got {angle}"
        )
    return angle


def resolve_progress_angles(
    progress: float, maximum: float, start_angle: float
) -> tuple[float, float]:
    """Resolve the determinate arc.

    Progress at or beyond the maximum (by magnitude) saturates at a full circle
    rather than wrapping.

    Args:
        progress: Current progress value
        maximum: Value that corresponds to a full circle, must be non-zero
        start_angle: Angle where the arc begins

    Returns:
        (start, sweep) in degrees

    Raises:
        InvalidConfigurationError: If maximum is zero
    """
    validate_maximum(maximum)
    if abs(progress) < abs(maximum):
        sweep = progress / maximum * FULL_CIRCLE
    else:
        sweep = FULL_CIRCLE
    return start_angle, sweep


class ProgressAngleResolver:
    """Determinate progress state with last-write-wins animated transitions.

    ``progress`` is the value currently displayed (interpolated while a
    transition runs); ``target_progress`` is the last value written.
    """

    def __init__(
        self,
        maximum: float = DEFAULT_MAXIMUM,
        progress: float = DEFAULT_PROGRESS,
        start_angle: float = DEFAULT_START_ANGLE,
        animation_duration_ms: float = DEFAULT_PROGRESS_ANIMATION_DURATION_MS,
        easing: Easing = decelerate,
    ):
        self._maximum = validate_maximum(maximum)
        self._start_angle = validate_start_angle(start_angle)
        self._progress = progress
        self._target_progress = progress
        self._transition = ValueRamp(
            progress, progress, duration_ms=animation_duration_ms, easing=easing
        )

    # ── Configuration ─────────────────────────────────────────────────────────

    @property
    def maximum(self) -> float:
        return self._maximum

    @maximum.setter
    def maximum(self, value: float) -> None:
        self._maximum = validate_maximum(value)

    @property
    def start_angle(self) -> float:
        return self._start_angle

    @start_angle.setter
    def start_angle(self, value: float) -> None:
        self._start_angle = validate_start_angle(value)

    @property
    def animation_duration_ms(self) -> float:
        return self._transition.duration_ms

    @animation_duration_ms.setter
    def animation_duration_ms(self, value: float) -> None:
        validate_duration(value)
        self.end_transition()
        self._transition.duration_ms = value

    @property
    def easing(self) -> Easing:
        return self._transition.easing

    @easing.setter
    def easing(self, value: Easing) -> None:
        validate_easing(value)
        self.end_transition()
        self._transition.easing = value

    # ── Progress ──────────────────────────────────────────────────────────────

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def target_progress(self) -> float:
        return self._target_progress

    @property
    def animating(self) -> bool:
        return self._transition.running

    def set_progress(self, value: float, animate: bool = False) -> None:
        """Write a new progress value.

        Any in-flight transition is cancelled; an animated write starts from the
        currently displayed value.
        """
        self._transition.cancel()
        self._target_progress = value
        if animate and self._transition.duration_ms > 0 and value != self._progress:
            self._transition.set_values(self._progress, value)
            self._transition.start()
            logger.debug(f"Progress transition {self._progress} -> {value}")
        else:
            self._progress = value

    def advance(self, elapsed_ms: float) -> bool:
        """Step the transition; returns True while it is still running."""
        if not self._transition.running:
            return False
        self._transition.advance(elapsed_ms)
        self._progress = self._transition.value
        return self._transition.running

    def end_transition(self) -> None:
        """Finish any transition immediately at its target."""
        if self._transition.running:
            self._transition.end()
            self._progress = self._target_progress

    def cancel_transition(self) -> None:
        """Freeze any transition at the currently displayed value."""
        if self._transition.running:
            self._transition.cancel()
            self._target_progress = self._progress

    def angles(self) -> tuple[float, float]:
        """Start/sweep pair for the displayed progress."""
        return resolve_progress_angles(self._progress, self._maximum, self._start_angle)
