"""
Circular Progress Constants

"""

from circular_progress import __version__

# --- Version & Identity ---
VERSION = __version__
APP_NAME = "Circular Progress"

# --- Angles (degrees) ---
FULL_CIRCLE = 360.0
START_ANGLE_LIMIT = 360.0  # Start angle must be within [-360, 360]
MAX_MINIMUM_ANGLE = 180.0  # Indeterminate minimum angle must be within [0, 180]
MIN_SWEEP_ANGLE = 0.0001  # Floor for cap-compensated sweeps, keeps the arc non-degenerate

# --- Determinate Defaults ---
DEFAULT_MAXIMUM = 100.0
DEFAULT_PROGRESS = 0.0
DEFAULT_START_ANGLE = 270.0  # 12 o'clock in the clockwise convention
DEFAULT_ANIMATE_PROGRESS = True
DEFAULT_PROGRESS_ANIMATION_DURATION_MS = 100

# --- Indeterminate Defaults ---
DEFAULT_INDETERMINATE = False
DEFAULT_INDETERMINATE_MINIMUM_ANGLE = 60.0
DEFAULT_INDETERMINATE_ROTATION_DURATION_MS = 1200
DEFAULT_INDETERMINATE_SWEEP_DURATION_MS = 600

# --- Strokes ---
DEFAULT_FOREGROUND_STROKE_WIDTH = 3.0
DEFAULT_BACKGROUND_STROKE_WIDTH = 1.0
DEFAULT_DRAW_BACKGROUND_STROKE = False
DRAW_RECT_PADDING = 1.0  # Extra inset so antialiased strokes never touch the bounds

# --- GUI ---
DEFAULT_SIZE = 48  # Preferred widget size in logical pixels
FRAME_INTERVAL_MS = 16  # ~60 fps animation tick
APPLICATION_TITLE = f"{APP_NAME} Demo"
DEFAULT_WINDOW_SIZE = (420, 320)
DEFAULT_WINDOW_POSITION = (100, 100)
