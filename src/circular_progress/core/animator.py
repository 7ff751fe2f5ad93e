"""
Time-driven value ramp.

ValueRamp is the oscillator behind every animation in the package. It owns no
timer: the host advances it with the elapsed milliseconds of each frame, so
cancellation is immediate and nothing can update the ramp after it stops.
"""

from circular_progress.core.easing import Easing, linear, validate_easing
from circular_progress.core.errors import InvalidConfigurationError


def validate_duration(duration_ms: float) -> float:
    """Reject negative animation durations."""
    if duration_ms < 0:
        raise InvalidConfigurationError(f"Animation duration can't be negative, got {duration_ms}")
    return duration_ms


class ValueRamp:
    """Animates a float from ``start_value`` to ``end_value`` over a duration.

    Example:
        ramp = ValueRamp(0.0, 360.0, duration_ms=1200, repeat=True)
        ramp.start()
        ramp.advance(16)  # ramp.value is now 4.8
    """

    def __init__(
        self,
        start_value: float = 0.0,
        end_value: float = 1.0,
        duration_ms: float = 300,
        easing: Easing = linear,
        repeat: bool = False,
    ):
        """Initialize ramp.

        Args:
            start_value: Value at fraction 0
            end_value: Value at fraction 1
            duration_ms: Length of one pass in milliseconds
            easing: Curve applied to the time fraction
            repeat: Restart from ``start_value`` forever instead of finishing
        """
        self.start_value = start_value
        self.end_value = end_value
        self.duration_ms = validate_duration(duration_ms)
        self.easing = validate_easing(easing)
        self.repeat = repeat
        self._elapsed_ms = 0.0
        self._running = False
        self._value = start_value

    @property
    def running(self) -> bool:
        return self._running

    @property
    def value(self) -> float:
        return self._value

    def set_values(self, start_value: float, end_value: float) -> None:
        self.start_value = start_value
        self.end_value = end_value

    def start(self) -> None:
        """Start a fresh pass from ``start_value``."""
        self._elapsed_ms = 0.0
        self._running = True
        self._value = self.start_value

    def cancel(self) -> None:
        """Stop where the ramp is; ``value`` keeps its last update."""
        self._running = False

    def end(self) -> None:
        """Stop and jump to ``end_value``."""
        if not self._running:
            return
        self._running = False
        self._value = self.end_value

    def advance(self, elapsed_ms: float) -> bool:
        """Move the ramp forward.

        Args:
            elapsed_ms: Milliseconds since the previous advance

        Returns:
            True if a non-repeating pass completed during this step
        """
        if not self._running:
            return False
        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time can't be negative, got {elapsed_ms}")

        if self.duration_ms <= 0:
            if self.repeat:
                self._value = self.start_value
                return False
            self._value = self.end_value
            self._running = False
            return True

        self._elapsed_ms += elapsed_ms
        if self._elapsed_ms >= self.duration_ms:
            if self.repeat:
                self._elapsed_ms %= self.duration_ms
            else:
                self._value = self.end_value
                self._running = False
                return True

        self._value = self._interpolate(self._elapsed_ms / self.duration_ms)
        return False

    def _interpolate(self, fraction: float) -> float:
        return self.start_value + (self.end_value - self.start_value) * self.easing(fraction)
