"""
Circular Progress GUI Package

For widgets, import from submodules:
- `from circular_progress.gui.widgets import CircularProgressBar`
- `from circular_progress.gui.styles import ACCENT`
"""

from . import styles

__all__ = ["styles"]
