"""
Host-agnostic circular progress controller.

Holds everything a rendering host needs to draw one indicator: determinate
progress, the indeterminate engine, stroke configuration, the draw rect and the
cap angle. The host forwards lifecycle signals (attach, visibility, size), calls
``advance`` from its frame source while ``needs_frames`` is true, and reads
``frame_angles`` and ``draw_rect`` when painting.
"""

import logging
from collections.abc import Callable

from circular_progress.config.schemas import HEX_COLOR_PATTERN, CircularProgressConfig
from circular_progress.core.easing import Easing, get_easing
from circular_progress.core.errors import InvalidConfigurationError
from circular_progress.core.geometry import DrawRect, compute_draw_rect
from circular_progress.core.indeterminate import IndeterminateAnimationEngine
from circular_progress.core.progress import ProgressAngleResolver
from circular_progress.core.stroke_cap import (
    StrokeCap,
    apply_cap_compensation,
    compute_cap_angle,
    validate_stroke_width,
)

logger = logging.getLogger(__name__)


def _coerce_easing(easing: Easing | str) -> Easing:
    if isinstance(easing, str):
        return get_easing(easing)
    return easing


def _validate_color(color: str) -> str:
    if not isinstance(color, str) or not HEX_COLOR_PATTERN.match(color):
        raise InvalidConfigurationError(
            f"Invalid color {color!r}, expected #rgb, #rrggbb or #aarrggbb"
        )
    return color


class CircularProgressController:
    """State of one circular progress indicator.

    The indeterminate engine runs only while the indicator is indeterminate,
    attached and visible. Every visible change calls the ``invalidate`` callback
    so the host can schedule a repaint.
    """

    def __init__(
        self,
        config: CircularProgressConfig | None = None,
        invalidate: Callable[[], None] | None = None,
    ):
        """
        Initialize controller.

        Args:
            config: Validated configuration (defaults used when None)
            invalidate: Called whenever the drawn output changes
        """
        config = config or CircularProgressConfig()
        self._invalidate_callback = invalidate

        self._attached = False
        self._visible = False
        self._indeterminate = False
        self._width = 0.0
        self._height = 0.0
        self._draw_rect = DrawRect()
        self._cap_angle = 0.0

        self._resolver = ProgressAngleResolver(
            maximum=config.maximum,
            progress=config.progress,
            start_angle=config.start_angle,
            animation_duration_ms=config.progress_animation_duration_ms,
            easing=get_easing(config.progress_easing),
        )
        self._engine = IndeterminateAnimationEngine(
            minimum_angle=config.indeterminate_minimum_angle,
            rotation_duration_ms=config.indeterminate_rotation_duration_ms,
            sweep_duration_ms=config.indeterminate_sweep_duration_ms,
            rotation_easing=get_easing(config.indeterminate_rotation_easing),
            sweep_easing=get_easing(config.indeterminate_sweep_easing),
        )
        self.animate_progress = config.animate_progress

        self._foreground_stroke_width = config.foreground_stroke_width
        self._foreground_stroke_cap = config.foreground_stroke_cap
        self._foreground_stroke_color = config.foreground_stroke_color
        self._background_stroke_width = config.background_stroke_width
        self._background_stroke_color = config.background_stroke_color
        self._draw_background_stroke = config.draw_background_stroke

        # Not live yet, so the engine stays idle until attached and shown
        self._indeterminate = config.indeterminate

    @classmethod
    def from_config(cls, data: dict, invalidate: Callable[[], None] | None = None):
        """Build a controller from a plain dict, validated by CircularProgressConfig."""
        return cls(CircularProgressConfig.model_validate(data), invalidate=invalidate)

    def apply_config(self, config: CircularProgressConfig) -> None:
        """Apply every field of ``config`` through the validating setters."""
        self.set_maximum(config.maximum)
        self.set_start_angle(config.start_angle)
        self.animate_progress = config.animate_progress
        self.set_progress_animation_duration(config.progress_animation_duration_ms)
        self.set_progress_easing(config.progress_easing)
        self._engine.reconfigure(
            minimum_angle=config.indeterminate_minimum_angle,
            rotation_duration_ms=config.indeterminate_rotation_duration_ms,
            sweep_duration_ms=config.indeterminate_sweep_duration_ms,
            rotation_easing=get_easing(config.indeterminate_rotation_easing),
            sweep_easing=get_easing(config.indeterminate_sweep_easing),
        )
        self._foreground_stroke_cap = config.foreground_stroke_cap
        self._foreground_stroke_color = config.foreground_stroke_color
        self._background_stroke_color = config.background_stroke_color
        self._foreground_stroke_width = config.foreground_stroke_width
        self._background_stroke_width = config.background_stroke_width
        self._draw_background_stroke = config.draw_background_stroke
        self._update_draw_rect()
        self.set_indeterminate(config.indeterminate)
        self.set_progress(config.progress)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def live(self) -> bool:
        """Attached to a rendering host and visible."""
        return self._attached and self._visible

    def set_attached(self, attached: bool) -> None:
        if attached == self._attached:
            return
        self._attached = attached
        logger.debug(f"Indicator {'attached' if attached else 'detached'}")
        if attached:
            self._update_engine()
        else:
            self._engine.reset()
            self._resolver.end_transition()
        self.invalidate()

    def set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        logger.debug(f"Indicator {'shown' if visible else 'hidden'}")
        if not visible:
            self._resolver.end_transition()
        self._update_engine(reset=not visible)
        self.invalidate()

    def _update_engine(self, reset: bool = False) -> None:
        if self._indeterminate and self.live:
            self._engine.start()
        elif reset:
            self._engine.reset()
        else:
            self._engine.stop()

    # ── Mode ──────────────────────────────────────────────────────────────────

    @property
    def indeterminate(self) -> bool:
        return self._indeterminate

    def set_indeterminate(self, indeterminate: bool) -> None:
        """Switch modes; the engine phase is kept so re-enabling resumes it."""
        if indeterminate == self._indeterminate:
            return
        self._engine.stop()
        self._indeterminate = indeterminate
        if indeterminate and self.live:
            self._resolver.end_transition()
            self._engine.start()
        self.invalidate()

    @property
    def engine(self) -> IndeterminateAnimationEngine:
        return self._engine

    # ── Determinate progress ──────────────────────────────────────────────────

    @property
    def progress(self) -> float:
        """Last progress value written."""
        return self._resolver.target_progress

    @property
    def displayed_progress(self) -> float:
        """Progress currently drawn, interpolated while a transition runs."""
        return self._resolver.progress

    def set_progress(self, progress: float) -> None:
        if self._indeterminate:
            self._resolver.set_progress(progress)
            return
        self._resolver.set_progress(progress, animate=self.live and self.animate_progress)
        self.invalidate()

    @property
    def maximum(self) -> float:
        return self._resolver.maximum

    def set_maximum(self, maximum: float) -> None:
        self._resolver.maximum = maximum
        self.invalidate()

    @property
    def start_angle(self) -> float:
        return self._resolver.start_angle

    def set_start_angle(self, angle: float) -> None:
        self._resolver.start_angle = angle
        self.invalidate()

    @property
    def progress_animation_duration_ms(self) -> float:
        return self._resolver.animation_duration_ms

    def set_progress_animation_duration(self, duration_ms: float) -> None:
        self._resolver.animation_duration_ms = duration_ms

    def set_progress_easing(self, easing: Easing | str) -> None:
        self._resolver.easing = _coerce_easing(easing)

    # ── Indeterminate configuration ───────────────────────────────────────────

    @property
    def indeterminate_minimum_angle(self) -> float:
        return self._engine.minimum_angle

    def set_indeterminate_minimum_angle(self, angle: float) -> None:
        self._engine.reconfigure(minimum_angle=angle)
        self.invalidate()

    def set_indeterminate_rotation_duration(self, duration_ms: float) -> None:
        self._engine.reconfigure(rotation_duration_ms=duration_ms)
        self.invalidate()

    def set_indeterminate_sweep_duration(self, duration_ms: float) -> None:
        self._engine.reconfigure(sweep_duration_ms=duration_ms)
        self.invalidate()

    def set_indeterminate_rotation_easing(self, easing: Easing | str) -> None:
        self._engine.reconfigure(rotation_easing=_coerce_easing(easing))
        self.invalidate()

    def set_indeterminate_sweep_easing(self, easing: Easing | str) -> None:
        self._engine.reconfigure(sweep_easing=_coerce_easing(easing))
        self.invalidate()

    # ── Strokes and geometry ──────────────────────────────────────────────────

    @property
    def foreground_stroke_width(self) -> float:
        return self._foreground_stroke_width

    def set_foreground_stroke_width(self, width: float) -> None:
        self._foreground_stroke_width = validate_stroke_width(width)
        self._update_draw_rect()
        self.invalidate()

    @property
    def background_stroke_width(self) -> float:
        return self._background_stroke_width

    def set_background_stroke_width(self, width: float) -> None:
        self._background_stroke_width = validate_stroke_width(width)
        self._update_draw_rect()
        self.invalidate()

    @property
    def foreground_stroke_cap(self) -> StrokeCap:
        return self._foreground_stroke_cap

    def set_foreground_stroke_cap(self, cap: StrokeCap | str) -> None:
        try:
            self._foreground_stroke_cap = StrokeCap(cap)
        except ValueError:
            raise InvalidConfigurationError(f"Unknown stroke cap {cap!r}") from None
        self._update_cap_angle()
        self.invalidate()

    @property
    def foreground_stroke_color(self) -> str:
        return self._foreground_stroke_color

    def set_foreground_stroke_color(self, color: str) -> None:
        self._foreground_stroke_color = _validate_color(color)
        self.invalidate()

    @property
    def background_stroke_color(self) -> str:
        return self._background_stroke_color

    def set_background_stroke_color(self, color: str) -> None:
        self._background_stroke_color = _validate_color(color)
        self.invalidate()

    @property
    def draw_background_stroke(self) -> bool:
        return self._draw_background_stroke

    def set_draw_background_stroke(self, draw: bool) -> None:
        self._draw_background_stroke = draw
        self._update_draw_rect()
        self.invalidate()

    @property
    def draw_rect(self) -> DrawRect:
        return self._draw_rect

    @property
    def cap_angle(self) -> float:
        return self._cap_angle

    def set_size(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._update_draw_rect()

    def _update_draw_rect(self) -> None:
        self._draw_rect = compute_draw_rect(
            self._width,
            self._height,
            self._foreground_stroke_width,
            self._background_stroke_width,
            self._draw_background_stroke,
        )
        self._update_cap_angle()

    def _update_cap_angle(self) -> None:
        self._cap_angle = compute_cap_angle(
            self._foreground_stroke_cap, self._foreground_stroke_width, self._draw_rect.radius
        )

    # ── Frames ────────────────────────────────────────────────────────────────

    @property
    def needs_frames(self) -> bool:
        """True while an animation is running and the host should keep ticking."""
        return self._resolver.animating or self._engine.running

    def advance(self, elapsed_ms: float) -> bool:
        """Advance running animations by ``elapsed_ms``.

        Returns:
            True if animations are still running afterwards
        """
        changed = False
        if self._resolver.animating:
            self._resolver.advance(elapsed_ms)
            changed = True
        if self._engine.running:
            self._engine.advance(elapsed_ms)
            changed = True
        if changed:
            self.invalidate()
        return self.needs_frames

    def frame_angles(self) -> tuple[float, float]:
        """Cap-compensated (start, sweep) of the foreground arc for this frame."""
        if self._indeterminate:
            start, sweep = self._engine.composed_angles()
        else:
            start, sweep = self._resolver.angles()
        return apply_cap_compensation(start, sweep, self._cap_angle)

    def invalidate(self) -> None:
        if self._invalidate_callback is not None:
            self._invalidate_callback()
