"""Tests for the PyQt6 CircularProgressBar host widget (offscreen platform)."""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6 import QtCore  # noqa: E402

from circular_progress.config import CircularProgressConfig  # noqa: E402
from circular_progress.core.geometry import DrawRect  # noqa: E402
from circular_progress.core.indeterminate import IndeterminateState  # noqa: E402
from circular_progress.core.stroke_cap import StrokeCap  # noqa: E402
from circular_progress.gui.widgets import CircularProgressBar  # noqa: E402

pytestmark = pytest.mark.gui


@pytest.fixture
def bar(qapp):
    widget = CircularProgressBar()
    yield widget
    widget.close()
    widget.deleteLater()


class TestCircularProgressBar:
    """Lifecycle wiring, frame source and painting."""

    def test_size_hint(self, bar):
        assert bar.sizeHint() == QtCore.QSize(48, 48)
        assert bar.minimumSizeHint() == QtCore.QSize(24, 24)

    def test_not_live_until_shown(self, bar):
        assert not bar.controller.live
        bar.show()
        assert bar.controller.live

    def test_indeterminate_runs_timer_only_while_shown(self, qapp):
        bar = CircularProgressBar(CircularProgressConfig(indeterminate=True))
        assert not bar.animating

        bar.show()
        assert bar.controller.engine.running
        assert bar.animating

        bar.hide()
        assert not bar.animating
        assert bar.controller.engine.state == IndeterminateState(minimum_angle=60)
        bar.close()

    def test_toggle_indeterminate(self, bar):
        bar.show()
        bar.set_indeterminate(True)
        assert bar.is_indeterminate()
        assert bar.animating
        bar.set_indeterminate(False)
        assert not bar.animating

    def test_progress_changed_signal(self, bar):
        received = []
        bar.progressChanged.connect(received.append)
        bar.set_progress(42)
        assert received == [42.0]
        assert bar.progress() == 42

    def test_animated_progress_uses_frame_timer(self, bar):
        bar.show()
        bar.set_progress(60)
        assert bar.animating
        bar.controller.advance(100)
        assert bar.controller.displayed_progress == 60

    def test_qeasingcurve_accepted(self, bar):
        bar.set_progress_easing(QtCore.QEasingCurve(QtCore.QEasingCurve.Type.OutQuad))
        bar.show()
        bar.set_progress(100)
        bar.controller.advance(50)
        assert bar.controller.displayed_progress == pytest.approx(75.0)

    def test_resize_updates_draw_rect(self, bar):
        bar.set_foreground_stroke_width(10)
        bar.resize(200, 100)
        bar.show()
        assert bar.controller.draw_rect == DrawRect(56, 6, 144, 94)

    def test_setters_delegate(self, bar):
        bar.set_maximum(50)
        bar.set_start_angle(0)
        bar.set_foreground_stroke_cap(StrokeCap.ROUND)
        bar.set_draw_background_stroke(True)
        assert bar.maximum() == 50
        assert bar.start_angle() == 0
        assert bar.controller.foreground_stroke_cap is StrokeCap.ROUND
        assert bar.controller.draw_background_stroke

    def test_grab_paints(self, bar):
        bar.set_draw_background_stroke(True)
        bar.set_foreground_stroke_cap("round")
        bar.resize(64, 64)
        bar.set_progress(30)
        bar.show()
        pixmap = bar.grab()
        assert not pixmap.isNull()
        assert pixmap.width() > 0

    def test_close_detaches(self, bar):
        bar.show()
        bar.close()
        assert not bar.controller.attached
        assert not bar.controller.live
