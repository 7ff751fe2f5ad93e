#!/usr/bin/env python3
"""Design tokens for the circular progress visual language. Modify here, not in widgets."""

# Neutral Colors
BG_MAIN = "#151515"  # Main window background (dark base)
TEXT_LABEL = "#cccccc"  # Secondary text (labels, captions)

# Brand Colors
ACCENT = "#2a8be8"  # Primary brand color (arcs, selection)

# Arc Colors
ARC_FOREGROUND = ACCENT  # Progress arc stroke
ARC_BACKGROUND = "#4a4a4a"  # Background ring stroke

SPACING = {
    # Base spacing units (8pt grid)
    "sm": 6,  # 0.75x - Compact spacing (form labels, small gaps)
    "xl": 12,  # 1.5x - Generous spacing (section separators)
    "2xl": 16,  # 2x - Large spacing (window margins)
}

FONT_SIZE = {
    "md": 11,  # DEFAULT - Body text, standard labels
}

#
# Color Usage:
#   BG_MAIN: Main window background (dark base)
#   ACCENT / ARC_FOREGROUND: Progress arc
#   ARC_BACKGROUND: Optional ring behind the arc
#   TEXT_LABEL: Demo labels
