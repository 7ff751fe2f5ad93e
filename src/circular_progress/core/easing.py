"""
Easing curves for time-driven animations.

An easing maps a linear time fraction in [0, 1] to an eased fraction in [0, 1].
Any callable with that signature works, including ``QEasingCurve.valueForProgress``.
"""

from collections.abc import Callable

from circular_progress.core.errors import InvalidConfigurationError

Easing = Callable[[float], float]


def linear(fraction: float) -> float:
    """Constant speed."""
    return fraction


def decelerate(fraction: float) -> float:
    """Fast start, slow settle (quadratic ease-out)."""
    inverse = 1.0 - fraction
    return 1.0 - inverse * inverse


def make_decelerate(factor: float = 1.0) -> Easing:
    """Build a decelerating curve; larger factors settle more abruptly.

    Args:
        factor: Deceleration strength, ``1.0`` matches :func:`decelerate`

    Returns:
        Easing callable
    """
    if factor <= 0:
        raise InvalidConfigurationError(f"Deceleration factor must be positive, got {factor}")
    if factor == 1.0:
        return decelerate
    exponent = 2.0 * factor

    def _decelerate(fraction: float) -> float:
        return 1.0 - (1.0 - fraction) ** exponent

    return _decelerate


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "decelerate": decelerate,
}


def get_easing(name: str) -> Easing:
    """Look up a named easing curve."""
    try:
        return EASINGS[name]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown easing '{name}'. Available: {sorted(EASINGS)}"
        ) from None


def validate_easing(easing: Easing | None) -> Easing:
    """Reject a missing or non-callable easing."""
    if easing is None or not callable(easing):
        raise InvalidConfigurationError(f"Easing must be a callable, got {easing!r}")
    return easing
