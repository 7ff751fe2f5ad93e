"""
Draw-rect layout.

The arc is drawn inside a square centered in the widget and inset by half the
stroke thickness (plus a one pixel margin) so strokes never clip at the bounds.
"""

from dataclasses import dataclass

from circular_progress.constants import DRAW_RECT_PADDING
from circular_progress.core.stroke_cap import validate_stroke_width


@dataclass(frozen=True)
class DrawRect:
    """Axis-aligned rectangle in widget coordinates."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def radius(self) -> float:
        return self.width / 2.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


def compute_draw_rect(
    width: float,
    height: float,
    foreground_stroke_width: float,
    background_stroke_width: float = 0.0,
    draw_background_stroke: bool = False,
) -> DrawRect:
    """Compute the square draw rect for a widget of the given size.

    Args:
        width: Widget width in pixels
        height: Widget height in pixels
        foreground_stroke_width: Width of the progress arc stroke
        background_stroke_width: Width of the background ring stroke
        draw_background_stroke: Whether the background ring is drawn (and so counts toward the inset)

    Returns:
        DrawRect, empty if the widget has no area
    """
    validate_stroke_width(foreground_stroke_width)
    validate_stroke_width(background_stroke_width)
    if width <= 0 or height <= 0:
        return DrawRect()

    if draw_background_stroke:
        thickness = max(foreground_stroke_width, background_stroke_width)
    else:
        thickness = foreground_stroke_width
    inset = thickness / 2.0 + DRAW_RECT_PADDING

    offset_x = (width - height) / 2.0 if width > height else 0.0
    offset_y = (height - width) / 2.0 if height > width else 0.0
    return DrawRect(
        left=offset_x + inset,
        top=offset_y + inset,
        right=width - offset_x - inset,
        bottom=height - offset_y - inset,
    )
