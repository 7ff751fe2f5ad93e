"""
Circular Progress Bar Widget

PyQt6 host for CircularProgressController: drives its animations from a frame
timer and paints the arc it computes.
"""

from PyQt6 import QtCore, QtGui, QtWidgets

from circular_progress.config.schemas import CircularProgressConfig
from circular_progress.constants import DEFAULT_SIZE, FRAME_INTERVAL_MS
from circular_progress.core.controller import CircularProgressController
from circular_progress.core.easing import Easing
from circular_progress.core.stroke_cap import StrokeCap

_PEN_CAPS = {
    StrokeCap.BUTT: QtCore.Qt.PenCapStyle.FlatCap,
    StrokeCap.ROUND: QtCore.Qt.PenCapStyle.RoundCap,
    StrokeCap.SQUARE: QtCore.Qt.PenCapStyle.SquareCap,
}


def _to_easing(easing: Easing | str | QtCore.QEasingCurve) -> Easing | str:
    """Accept QEasingCurve objects wherever an easing is expected."""
    if isinstance(easing, QtCore.QEasingCurve):
        return easing.valueForProgress
    return easing


def _arc_span(degrees: float) -> int:
    """Clockwise degrees to QPainter's counter-clockwise 1/16 degree units."""
    return round(-degrees * 16)


class CircularProgressBar(QtWidgets.QWidget):
    """
    Circular progress indicator with determinate and indeterminate modes.

    Visual Design:
        - Determinate: arc from the start angle (default 270, 12 o'clock) sweeping
          clockwise in proportion to progress / maximum
        - Indeterminate: rotating arc that grows and shrinks continuously
        - Optional background ring behind the arc
        - Default size: 48x48px

    Usage:
        bar = CircularProgressBar()
        bar.set_progress(40)

        spinner = CircularProgressBar(CircularProgressConfig(indeterminate=True))
        spinner.set_foreground_stroke_cap(StrokeCap.ROUND)
    """

    # Emitted with the new target value whenever progress is written
    progressChanged = QtCore.pyqtSignal(float)

    def __init__(self, config: CircularProgressConfig | None = None, parent=None):
        """
        Initialize progress bar.

        Args:
            config: Indicator configuration (defaults used when None)
            parent: Parent widget
        """
        super().__init__(parent)

        # Frame source (runs only while an animation needs frames)
        self._clock = QtCore.QElapsedTimer()
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_frame)

        self._controller = CircularProgressController(config, invalidate=self._on_invalidated)

        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Preferred, QtWidgets.QSizePolicy.Policy.Preferred
        )

    @property
    def controller(self) -> CircularProgressController:
        return self._controller

    @property
    def animating(self) -> bool:
        """True while the frame timer is running."""
        return self._timer.isActive()

    # ── Progress ──────────────────────────────────────────────────────────────

    def progress(self) -> float:
        return self._controller.progress

    def set_progress(self, progress: float) -> None:
        self._controller.set_progress(progress)
        self.progressChanged.emit(float(progress))

    def maximum(self) -> float:
        return self._controller.maximum

    def set_maximum(self, maximum: float) -> None:
        self._controller.set_maximum(maximum)

    def start_angle(self) -> float:
        return self._controller.start_angle

    def set_start_angle(self, angle: float) -> None:
        self._controller.set_start_angle(angle)

    def set_animate_progress(self, animate: bool) -> None:
        self._controller.animate_progress = animate

    def set_progress_animation_duration(self, duration_ms: float) -> None:
        self._controller.set_progress_animation_duration(duration_ms)

    def set_progress_easing(self, easing: Easing | str | QtCore.QEasingCurve) -> None:
        self._controller.set_progress_easing(_to_easing(easing))

    # ── Indeterminate ─────────────────────────────────────────────────────────

    def is_indeterminate(self) -> bool:
        return self._controller.indeterminate

    def set_indeterminate(self, indeterminate: bool) -> None:
        self._controller.set_indeterminate(indeterminate)

    def set_indeterminate_minimum_angle(self, angle: float) -> None:
        self._controller.set_indeterminate_minimum_angle(angle)

    def set_indeterminate_rotation_duration(self, duration_ms: float) -> None:
        self._controller.set_indeterminate_rotation_duration(duration_ms)

    def set_indeterminate_sweep_duration(self, duration_ms: float) -> None:
        self._controller.set_indeterminate_sweep_duration(duration_ms)

    def set_indeterminate_rotation_easing(self, easing: Easing | str | QtCore.QEasingCurve) -> None:
        self._controller.set_indeterminate_rotation_easing(_to_easing(easing))

    def set_indeterminate_sweep_easing(self, easing: Easing | str | QtCore.QEasingCurve) -> None:
        self._controller.set_indeterminate_sweep_easing(_to_easing(easing))

    # ── Strokes ───────────────────────────────────────────────────────────────

    def set_foreground_stroke_width(self, width: float) -> None:
        self._controller.set_foreground_stroke_width(width)

    def set_foreground_stroke_cap(self, cap: StrokeCap | str) -> None:
        self._controller.set_foreground_stroke_cap(cap)

    def set_foreground_stroke_color(self, color: str) -> None:
        self._controller.set_foreground_stroke_color(color)

    def set_background_stroke_width(self, width: float) -> None:
        self._controller.set_background_stroke_width(width)

    def set_background_stroke_color(self, color: str) -> None:
        self._controller.set_background_stroke_color(color)

    def set_draw_background_stroke(self, draw: bool) -> None:
        self._controller.set_draw_background_stroke(draw)

    # ── Frame source ──────────────────────────────────────────────────────────

    def _on_invalidated(self) -> None:
        self.update()
        self._sync_timer()

    def _sync_timer(self) -> None:
        """Run the frame timer exactly while the controller needs frames."""
        if self._controller.needs_frames:
            if not self._timer.isActive():
                self._clock.start()
                self._timer.start()
        elif self._timer.isActive():
            self._timer.stop()

    def _on_frame(self) -> None:
        elapsed_ms = self._clock.restart()
        self._controller.advance(elapsed_ms)
        self._sync_timer()

    # ── Qt events ─────────────────────────────────────────────────────────────

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(DEFAULT_SIZE, DEFAULT_SIZE)

    def minimumSizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(DEFAULT_SIZE // 2, DEFAULT_SIZE // 2)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._controller.set_attached(True)
        self._controller.set_visible(True)

    def hideEvent(self, event) -> None:
        self._controller.set_visible(False)
        super().hideEvent(event)

    def closeEvent(self, event) -> None:
        self._controller.set_attached(False)
        super().closeEvent(event)

    def resizeEvent(self, event) -> None:
        self._controller.set_size(self.width(), self.height())
        super().resizeEvent(event)

    def paintEvent(self, event) -> None:
        """Draw the optional background ring and the foreground arc."""
        controller = self._controller
        rect = controller.draw_rect
        if rect.empty:
            return

        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        arc_rect = QtCore.QRectF(rect.left, rect.top, rect.width, rect.height)

        if controller.draw_background_stroke:
            pen = QtGui.QPen(QtGui.QColor(controller.background_stroke_color))
            pen.setWidthF(controller.background_stroke_width)
            painter.setPen(pen)
            painter.drawEllipse(arc_rect)

        start, sweep = controller.frame_angles()
        pen = QtGui.QPen(QtGui.QColor(controller.foreground_stroke_color))
        pen.setWidthF(controller.foreground_stroke_width)
        pen.setCapStyle(_PEN_CAPS[controller.foreground_stroke_cap])
        painter.setPen(pen)
        painter.drawArc(arc_rect, _arc_span(start), _arc_span(sweep))

        painter.end()
