"""Configuration schemas for the circular progress indicator."""

from .schemas import CircularProgressConfig

__all__ = ["CircularProgressConfig"]
