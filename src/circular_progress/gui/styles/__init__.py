"""Circular Progress GUI Styles - design tokens shared by widgets and the demo."""

from .design_tokens import (
    ACCENT,
    ARC_BACKGROUND,
    ARC_FOREGROUND,
    BG_MAIN,
    FONT_SIZE,
    SPACING,
    TEXT_LABEL,
)

__all__ = [
    "ACCENT",
    "ARC_BACKGROUND",
    "ARC_FOREGROUND",
    "BG_MAIN",
    "FONT_SIZE",
    "SPACING",
    "TEXT_LABEL",
]
