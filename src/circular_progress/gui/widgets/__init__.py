"""
Custom widgets for the Circular Progress GUI.
"""

from .circular_progress_bar import CircularProgressBar

__all__ = ["CircularProgressBar"]
