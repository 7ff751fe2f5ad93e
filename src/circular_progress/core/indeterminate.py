"""
Indeterminate Animation Engine

Produces the "chasing arc": a rotation ramp turns the whole arc at constant
speed while a sweep ramp alternately grows the arc from ``minimum_angle`` up to
``360 - minimum_angle`` and shrinks it back. Every completed sweep pass flips
``grow_mode``; entering grow mode advances ``offset_angle`` by
``2 * minimum_angle`` so the shrunk tail becomes the head of the next pass.
"""

import dataclasses
import logging
from dataclasses import dataclass

from circular_progress.constants import (
    DEFAULT_INDETERMINATE_MINIMUM_ANGLE,
    DEFAULT_INDETERMINATE_ROTATION_DURATION_MS,
    DEFAULT_INDETERMINATE_SWEEP_DURATION_MS,
    FULL_CIRCLE,
    MAX_MINIMUM_ANGLE,
)
from circular_progress.core.animator import ValueRamp, validate_duration
from circular_progress.core.easing import Easing, decelerate, linear, validate_easing
from circular_progress.core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


def validate_minimum_angle(angle: float) -> float:
    if angle < 0 or angle > MAX_MINIMUM_ANGLE:
        raise InvalidConfigurationError(
            f"Indeterminate minimum angle value should be between 0 and 180 degrees (inclusive), got {angle}"
        )
    return angle


@dataclass(frozen=True)
class IndeterminateState:
    """Snapshot of the engine, read once per frame by the renderer."""

    rotation_angle: float = 0.0
    sweep_angle: float = 0.0
    offset_angle: float = 0.0
    grow_mode: bool = False
    minimum_angle: float = DEFAULT_INDETERMINATE_MINIMUM_ANGLE


def compose_indeterminate_angles(state: IndeterminateState) -> tuple[float, float]:
    """Compose the drawn arc from an engine snapshot.

    The visible sweep stays within ``[minimum_angle, 360 - minimum_angle]`` and the
    two half-cycles mirror each other, so the arc is continuous when the mode flips.

    Returns:
        (start, sweep) in degrees
    """
    if state.grow_mode:
        start = state.rotation_angle - state.offset_angle
        sweep = state.sweep_angle + state.minimum_angle
    else:
        start = state.rotation_angle + state.sweep_angle - state.offset_angle
        sweep = FULL_CIRCLE - state.sweep_angle - state.minimum_angle
    return start, sweep


class IndeterminateAnimationEngine:
    """Rotation and sweep oscillators plus the grow/shrink toggle.

    Example:
        engine = IndeterminateAnimationEngine(minimum_angle=60)
        engine.start()
        state = engine.advance(16)
        start, sweep = compose_indeterminate_angles(state)
    """

    def __init__(
        self,
        minimum_angle: float = DEFAULT_INDETERMINATE_MINIMUM_ANGLE,
        rotation_duration_ms: float = DEFAULT_INDETERMINATE_ROTATION_DURATION_MS,
        sweep_duration_ms: float = DEFAULT_INDETERMINATE_SWEEP_DURATION_MS,
        rotation_easing: Easing = linear,
        sweep_easing: Easing = decelerate,
    ):
        """Initialize engine.

        Args:
            minimum_angle: Shortest visible arc in degrees, within [0, 180]
            rotation_duration_ms: Time for one full 360 degree turn
            sweep_duration_ms: Time for one grow or shrink half-cycle
            rotation_easing: Curve of the rotation ramp
            sweep_easing: Curve of the sweep ramp
        """
        validate_minimum_angle(minimum_angle)
        self._rotation = ValueRamp(
            0.0, FULL_CIRCLE, duration_ms=rotation_duration_ms, easing=rotation_easing, repeat=True
        )
        self._sweep = ValueRamp(
            0.0, self._sweep_target(minimum_angle), duration_ms=sweep_duration_ms, easing=sweep_easing
        )
        self._state = IndeterminateState(minimum_angle=minimum_angle)

    @staticmethod
    def _sweep_target(minimum_angle: float) -> float:
        return FULL_CIRCLE - minimum_angle * 2.0

    # ── Properties ────────────────────────────────────────────────────────────

    @property
    def state(self) -> IndeterminateState:
        return self._state

    @property
    def running(self) -> bool:
        return self._rotation.running or self._sweep.running

    @property
    def minimum_angle(self) -> float:
        return self._state.minimum_angle

    @property
    def rotation_duration_ms(self) -> float:
        return self._rotation.duration_ms

    @property
    def sweep_duration_ms(self) -> float:
        return self._sweep.duration_ms

    @property
    def rotation_easing(self) -> Easing:
        return self._rotation.easing

    @property
    def sweep_easing(self) -> Easing:
        return self._sweep.easing

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Start whichever oscillator is not already running. Idempotent."""
        started = False
        if not self._rotation.running:
            self._rotation.start()
            started = True
        if not self._sweep.running:
            self._sweep.start()
            started = True
        if started:
            self._publish()
            logger.debug("Indeterminate animation started")

    def stop(self) -> None:
        """Cancel both oscillators. Idempotent; the last state is kept."""
        if not self.running:
            return
        self._rotation.cancel()
        self._sweep.cancel()
        logger.debug("Indeterminate animation stopped")

    def reset(self) -> None:
        """Stop and return to the neutral baseline."""
        self.stop()
        self._state = IndeterminateState(minimum_angle=self._state.minimum_angle)

    def reconfigure(
        self,
        minimum_angle: float | None = None,
        rotation_duration_ms: float | None = None,
        sweep_duration_ms: float | None = None,
        rotation_easing: Easing | None = None,
        sweep_easing: Easing | None = None,
    ) -> None:
        """Change animation parameters.

        Every argument is validated before anything changes. Values equal to the
        current ones are ignored, so a call that changes nothing keeps the running
        animation untouched. Otherwise the oscillators are restarted if they were
        running; a new minimum angle also resets the state because the sweep
        target depends on it.
        """
        if minimum_angle is not None:
            validate_minimum_angle(minimum_angle)
        if rotation_duration_ms is not None:
            validate_duration(rotation_duration_ms)
        if sweep_duration_ms is not None:
            validate_duration(sweep_duration_ms)
        if rotation_easing is not None:
            validate_easing(rotation_easing)
        if sweep_easing is not None:
            validate_easing(sweep_easing)

        if minimum_angle == self._state.minimum_angle:
            minimum_angle = None
        if rotation_duration_ms == self._rotation.duration_ms:
            rotation_duration_ms = None
        if sweep_duration_ms == self._sweep.duration_ms:
            sweep_duration_ms = None
        if rotation_easing is self._rotation.easing:
            rotation_easing = None
        if sweep_easing is self._sweep.easing:
            sweep_easing = None
        changes = (
            minimum_angle,
            rotation_duration_ms,
            sweep_duration_ms,
            rotation_easing,
            sweep_easing,
        )
        if all(change is None for change in changes):
            return

        was_running = self.running
        self.stop()

        if minimum_angle is not None:
            self._sweep.set_values(0.0, self._sweep_target(minimum_angle))
            self._state = IndeterminateState(minimum_angle=minimum_angle)
        if rotation_duration_ms is not None:
            self._rotation.duration_ms = rotation_duration_ms
        if sweep_duration_ms is not None:
            self._sweep.duration_ms = sweep_duration_ms
        if rotation_easing is not None:
            self._rotation.easing = rotation_easing
        if sweep_easing is not None:
            self._sweep.easing = sweep_easing

        if was_running:
            self.start()

    # ── Frame update ──────────────────────────────────────────────────────────

    def advance(self, elapsed_ms: float) -> IndeterminateState:
        """Advance both oscillators and publish one consistent snapshot.

        A completed sweep pass toggles the mode and restarts the sweep within
        this same call.
        """
        if not self.running:
            return self._state

        self._rotation.advance(elapsed_ms)
        completed = self._sweep.advance(elapsed_ms)

        grow_mode = self._state.grow_mode
        offset_angle = self._state.offset_angle
        if completed:
            grow_mode = not grow_mode
            if grow_mode:
                offset_angle = (offset_angle + self._state.minimum_angle * 2.0) % FULL_CIRCLE
            self._sweep.start()

        self._publish(grow_mode=grow_mode, offset_angle=offset_angle)
        return self._state

    def composed_angles(self) -> tuple[float, float]:
        return compose_indeterminate_angles(self._state)

    def _publish(self, **changes) -> None:
        self._state = dataclasses.replace(
            self._state,
            rotation_angle=self._rotation.value,
            sweep_angle=self._sweep.value,
            **changes,
        )
