"""
Pydantic configuration schemas for the circular progress indicator.

CircularProgressConfig: every configurable attribute of the indicator with its
documented range. Defaults are the single source of truth for widget defaults.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from circular_progress.constants import (
    DEFAULT_ANIMATE_PROGRESS,
    DEFAULT_BACKGROUND_STROKE_WIDTH,
    DEFAULT_DRAW_BACKGROUND_STROKE,
    DEFAULT_FOREGROUND_STROKE_WIDTH,
    DEFAULT_INDETERMINATE,
    DEFAULT_INDETERMINATE_MINIMUM_ANGLE,
    DEFAULT_INDETERMINATE_ROTATION_DURATION_MS,
    DEFAULT_INDETERMINATE_SWEEP_DURATION_MS,
    DEFAULT_MAXIMUM,
    DEFAULT_PROGRESS,
    DEFAULT_PROGRESS_ANIMATION_DURATION_MS,
    DEFAULT_START_ANGLE,
)
from circular_progress.core.easing import EASINGS
from circular_progress.core.stroke_cap import StrokeCap
from circular_progress.gui.styles.design_tokens import ARC_BACKGROUND, ARC_FOREGROUND

# "#rgb", "#rrggbb" or "#aarrggbb"
HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class CircularProgressConfig(BaseModel):
    """
    Complete configuration of one circular progress indicator.

    Validates:
    - maximum: non-zero (sign may differ from progress)
    - start_angle: within [-360, 360]
    - indeterminate_minimum_angle: within [0, 180]
    - durations and stroke widths: non-negative
    - colors: hex strings
    - easings: registered easing names
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    maximum: float = Field(DEFAULT_MAXIMUM, description="Progress value of a full circle")
    progress: float = Field(DEFAULT_PROGRESS, description="Current progress value")
    start_angle: float = Field(
        DEFAULT_START_ANGLE, ge=-360.0, le=360.0, description="Arc start angle in degrees"
    )
    animate_progress: bool = Field(
        DEFAULT_ANIMATE_PROGRESS, description="Ease between progress values"
    )
    progress_animation_duration_ms: float = Field(
        DEFAULT_PROGRESS_ANIMATION_DURATION_MS, ge=0, description="Progress transition duration"
    )
    progress_easing: str = Field("decelerate", description="Progress transition easing")

    indeterminate: bool = Field(DEFAULT_INDETERMINATE, description="Show the indeterminate animation")
    indeterminate_minimum_angle: float = Field(
        DEFAULT_INDETERMINATE_MINIMUM_ANGLE,
        ge=0.0,
        le=180.0,
        description="Shortest visible indeterminate arc in degrees",
    )
    indeterminate_rotation_duration_ms: float = Field(
        DEFAULT_INDETERMINATE_ROTATION_DURATION_MS, ge=0, description="Time for one full turn"
    )
    indeterminate_sweep_duration_ms: float = Field(
        DEFAULT_INDETERMINATE_SWEEP_DURATION_MS, ge=0, description="Time for one grow or shrink pass"
    )
    indeterminate_rotation_easing: str = Field("linear", description="Rotation ramp easing")
    indeterminate_sweep_easing: str = Field("decelerate", description="Sweep ramp easing")

    foreground_stroke_width: float = Field(DEFAULT_FOREGROUND_STROKE_WIDTH, ge=0.0)
    foreground_stroke_cap: StrokeCap = Field(StrokeCap.BUTT)
    foreground_stroke_color: str = Field(ARC_FOREGROUND)
    background_stroke_width: float = Field(DEFAULT_BACKGROUND_STROKE_WIDTH, ge=0.0)
    background_stroke_color: str = Field(ARC_BACKGROUND)
    draw_background_stroke: bool = Field(DEFAULT_DRAW_BACKGROUND_STROKE)

    @field_validator("maximum")
    @classmethod
    def validate_maximum(cls, v: float) -> float:
        """Reject a zero maximum (division by zero when resolving angles)."""
        if v == 0:
            raise ValueError("Maximum can't be zero")
        return v

    @field_validator("foreground_stroke_cap", mode="before")
    @classmethod
    def validate_stroke_cap(cls, v):
        """Accept the integer attribute form (0 butt, 1 round, 2 square)."""
        if isinstance(v, int) and not isinstance(v, bool):
            return StrokeCap.from_index(v)
        return v

    @field_validator("foreground_stroke_color", "background_stroke_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not HEX_COLOR_PATTERN.match(v):
            raise ValueError(f"Invalid color '{v}', expected #rgb, #rrggbb or #aarrggbb")
        return v

    @field_validator(
        "progress_easing", "indeterminate_rotation_easing", "indeterminate_sweep_easing"
    )
    @classmethod
    def validate_easing_name(cls, v: str) -> str:
        if v not in EASINGS:
            raise ValueError(f"Unknown easing '{v}'. Available: {sorted(EASINGS)}")
        return v
