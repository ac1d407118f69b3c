"""Tuning constants for the blob animation."""

# Timing (milliseconds)
SCALE_DURATION = 750
REACTIVE_SPEED_DURATION = 750
REACTIVE_POLL_INTERVAL = 16.66
RESIZE_DEBOUNCE = 200

# Resize commits are ignored below this viewport width
WIDTH_BREAKPOINT = 768

# Geometry
BASE_RADIUS_FACTOR = 0.4  # of the surface diagonal
BUMP_RADIUS_DIVISOR = 7
THETA_RAMP_DEST = 12.0
RAMP_DAMP = 25.0
RAMP_SETTLED = 0.99  # fraction of THETA_RAMP_DEST

# Energy
ENERGY_THRESHOLD = 0.001  # of the diagonal, per poll interval
BASE_THETA_SCALE = 2500.0
BASE_THETA_DELTA = 0.02
MAX_THETA_MULTIPLIER = 6
MAX_THETA_DELTA = 0.12

# Fill
FILL_COLOR = "#41ffc9"
SHADOW_BLUR = 20
SHADOW_COLOR = "black"

# Default construction
DEFAULT_SEGMENTS = 10
DEFAULT_SECTOR_ANGLE = 1.5707963267948966  # pi / 2
DEFAULT_MIN_DEVIATION = 1.5707963267948966  # pi / 2
