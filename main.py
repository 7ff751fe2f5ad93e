"""
Demo window for the circular progress indicator.

Shows a determinate bar driven by a slider next to an indeterminate spinner, with
controls for stroke cap, minimum angle and the background ring.
"""

import logging
import signal
import sys

from PyQt6 import QtCore, QtWidgets

from circular_progress.config import CircularProgressConfig
from circular_progress.constants import (
    APPLICATION_TITLE,
    DEFAULT_INDETERMINATE_MINIMUM_ANGLE,
    DEFAULT_MAXIMUM,
    DEFAULT_WINDOW_POSITION,
    DEFAULT_WINDOW_SIZE,
    VERSION,
)
from circular_progress.core.stroke_cap import StrokeCap
from circular_progress.gui.styles.design_tokens import BG_MAIN, FONT_SIZE, SPACING, TEXT_LABEL
from circular_progress.gui.widgets import CircularProgressBar
from circular_progress.utils.logger_central import setup_logger

INDICATOR_SIZE = 120
INDICATOR_STROKE_WIDTH = 8


class MainWindow(QtWidgets.QMainWindow):
    """
    Demo window.

    Manages:
    - Determinate indicator bound to a progress slider
    - Indeterminate indicator with a mode toggle
    - Shared stroke cap, minimum angle and background ring controls
    """

    def __init__(self):
        super(MainWindow, self).__init__()
        self.logger = setup_logger("Demo", level=logging.INFO)
        self.logger.info(f"{APPLICATION_TITLE} v{VERSION} starting up")
        self.init_ui()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(f"{APPLICATION_TITLE} - v{VERSION}")
        self.setGeometry(*DEFAULT_WINDOW_POSITION, *DEFAULT_WINDOW_SIZE)

        central_widget = QtWidgets.QWidget()
        central_widget.setStyleSheet(
            f"background-color: {BG_MAIN}; color: {TEXT_LABEL}; font-size: {FONT_SIZE['md']}px;"
        )
        self.setCentralWidget(central_widget)
        main_layout = QtWidgets.QVBoxLayout(central_widget)
        main_layout.setContentsMargins(*(SPACING["2xl"],) * 4)
        main_layout.setSpacing(SPACING["xl"])

        # Indicators
        indicators_layout = QtWidgets.QHBoxLayout()
        indicators_layout.setSpacing(SPACING["2xl"])

        self.determinate_bar = CircularProgressBar(
            CircularProgressConfig(
                foreground_stroke_width=INDICATOR_STROKE_WIDTH,
                background_stroke_width=INDICATOR_STROKE_WIDTH,
                progress_animation_duration_ms=250,
            )
        )
        self.determinate_bar.setFixedSize(INDICATOR_SIZE, INDICATOR_SIZE)
        indicators_layout.addWidget(self.determinate_bar)

        self.indeterminate_bar = CircularProgressBar(
            CircularProgressConfig(
                indeterminate=True,
                foreground_stroke_width=INDICATOR_STROKE_WIDTH,
                background_stroke_width=INDICATOR_STROKE_WIDTH,
            )
        )
        self.indeterminate_bar.setFixedSize(INDICATOR_SIZE, INDICATOR_SIZE)
        indicators_layout.addWidget(self.indeterminate_bar)
        main_layout.addLayout(indicators_layout)

        self.bars = [self.determinate_bar, self.indeterminate_bar]

        # Controls
        form = QtWidgets.QFormLayout()
        form.setSpacing(SPACING["sm"])

        self.progress_slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.progress_slider.setRange(0, int(DEFAULT_MAXIMUM))
        self.progress_slider.valueChanged.connect(self.determinate_bar.set_progress)
        self.progress_label = QtWidgets.QLabel("0")
        self.determinate_bar.progressChanged.connect(
            lambda value: self.progress_label.setText(f"{value:.0f}")
        )
        progress_row = QtWidgets.QHBoxLayout()
        progress_row.addWidget(self.progress_slider, 1)
        progress_row.addWidget(self.progress_label)
        form.addRow("Progress", progress_row)

        self.cap_combo = QtWidgets.QComboBox()
        self.cap_combo.addItems([cap.value for cap in StrokeCap])
        self.cap_combo.currentTextChanged.connect(self.on_cap_changed)
        form.addRow("Stroke cap", self.cap_combo)

        self.minimum_angle_spin = QtWidgets.QDoubleSpinBox()
        self.minimum_angle_spin.setRange(0.0, 180.0)
        self.minimum_angle_spin.setValue(DEFAULT_INDETERMINATE_MINIMUM_ANGLE)
        self.minimum_angle_spin.valueChanged.connect(
            self.indeterminate_bar.set_indeterminate_minimum_angle
        )
        form.addRow("Minimum angle", self.minimum_angle_spin)

        self.indeterminate_check = QtWidgets.QCheckBox("Animate")
        self.indeterminate_check.setChecked(True)
        self.indeterminate_check.toggled.connect(self.indeterminate_bar.set_indeterminate)
        form.addRow("Indeterminate", self.indeterminate_check)

        self.background_check = QtWidgets.QCheckBox("Draw")
        self.background_check.toggled.connect(self.on_background_toggled)
        form.addRow("Background ring", self.background_check)

        main_layout.addLayout(form)
        main_layout.addStretch()

    def on_cap_changed(self, cap: str):
        self.logger.info(f"Stroke cap changed to {cap}")
        for bar in self.bars:
            bar.set_foreground_stroke_cap(cap)

    def on_background_toggled(self, draw: bool):
        for bar in self.bars:
            bar.set_draw_background_stroke(draw)


def main():
    """Main application entry point."""
    app = QtWidgets.QApplication(sys.argv)

    window = MainWindow()
    window.show()

    def _handle_sigint(signum, frame):
        """Handle Ctrl+C by triggering Qt's close event for clean shutdown."""
        QtCore.QMetaObject.invokeMethod(
            window, "close", QtCore.Qt.ConnectionType.QueuedConnection
        )

    signal.signal(signal.SIGINT, _handle_sigint)
    signal.signal(signal.SIGTERM, _handle_sigint)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
