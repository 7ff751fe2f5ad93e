"""
Pytest configuration and fixtures for the circular progress test suite.

This file provides common fixtures used across all test modules.
"""

import os

import pytest

from circular_progress.config import CircularProgressConfig
from circular_progress.core.controller import CircularProgressController


class InvalidateCounter:
    """Callable that counts invalidation requests."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def invalidate():
    """Invalidate callback that records how often it was called."""
    return InvalidateCounter()


@pytest.fixture
def live_controller(invalidate):
    """Controller attached to a visible 100x100 host."""
    controller = CircularProgressController(CircularProgressConfig(), invalidate=invalidate)
    controller.set_size(100, 100)
    controller.set_attached(True)
    controller.set_visible(True)
    return controller


@pytest.fixture(scope="session")
def qapp():
    """QApplication on the offscreen platform, shared by all widget tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
