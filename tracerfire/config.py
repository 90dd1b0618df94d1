import logging

logger = logging.getLogger(__name__)

# Screen settings
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60

# Bullet settings
# Speed multiplier applied every tick; 1.0 keeps bullets at constant speed
BULLET_ACCELERATION = 1.05
# Bullet brightness range (HSL lightness, percent)
BULLET_BRIGHTNESS_MIN = 50
BULLET_BRIGHTNESS_MAX = 70
# Base speed of bullets (pixels per tick)
BULLET_SPEED = 1
# Number of past positions kept for the bullet trail
BULLET_TRAIL_LENGTH = 3
# Draw the pulsing reticle around each bullet's target
BULLET_TARGET_INDICATOR_ENABLED = True
# Reticle radius pulse: grows by STEP per tick up to MAX, then resets to MIN
BULLET_TARGET_RADIUS_MIN = 1
BULLET_TARGET_RADIUS_MAX = 8
BULLET_TARGET_RADIUS_STEP = 0.3
# Base height of the arc control point above the higher endpoint (pixels)
BULLET_ARC_HEIGHT = 50
# Additional arc height per pixel travelled
BULLET_ARC_LIFT = 0.1
# Downward nudge added to the curve position every tick (pixels)
BULLET_GRAVITY = 0.5

# Impact settings
# Impact brightness range (HSL lightness, percent)
IMPACT_BRIGHTNESS_MIN = 50
IMPACT_BRIGHTNESS_MAX = 80
# Impacts created per detonation
IMPACT_COUNT = 20
# Per-tick transparency decay range
IMPACT_DECAY_MIN = 0.1
IMPACT_DECAY_MAX = 0.5
# Speed multiplier applied every tick
IMPACT_FRICTION = 0.95
# Downward drift added every tick (pixels)
IMPACT_GRAVITY = 0.7
# Maximum hue offset from the current global hue (degrees)
IMPACT_HUE_VARIANCE = 20
# Starting alpha of a fresh impact
IMPACT_TRANSPARENCY = 1
# Initial impact speed range (pixels per tick)
IMPACT_SPEED_MIN = 1
IMPACT_SPEED_MAX = 10
# Number of past positions kept for the impact trail
IMPACT_TRAIL_LENGTH = 3

# Canvas settings
# Alpha of the black fill that erodes old strokes each frame; lower is longer trails
CANVAS_CLEANUP_ALPHA = 0.01
# Starting hue (degrees)
HUE_INITIAL = 120
# Hue change per tick
HUE_STEP_INCREASE = 0.5

# Spawn settings
# Minimum ticks between manual launches while the pointer is held
TICKS_PER_BULLET_MIN = 5
# Tick range between automated launches; a fresh threshold is drawn every check
TICKS_PER_BULLET_AUTOMATED_MIN = 20
TICKS_PER_BULLET_AUTOMATED_MAX = 50
# Number of edge launch points generated before they are reused
EDGE_POINT_CACHE_SIZE = 10
# Fraction of the bottom edge reserved for the manual launch origin
EDGE_POINT_EXCLUDED_BAND = (0.4, 0.6)
# Resample limit when a bottom-edge point lands in the reserved band
EDGE_POINT_MAX_ATTEMPTS = 100

# Rendering settings
# Stroke width in pixels
LINE_WIDTH = 1.0
# Segments used to tessellate the reticle circle
CIRCLE_SEGMENTS = 32

# Seed for reproducible runs; None seeds from system entropy
RANDOM_SEED = None

# Logging settings
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Ticks between registry size reports (DEBUG)
LOG_THROTTLE_TICKS = 300

_RANGES = (
    ("BULLET_BRIGHTNESS_MIN", "BULLET_BRIGHTNESS_MAX"),
    ("BULLET_TARGET_RADIUS_MIN", "BULLET_TARGET_RADIUS_MAX"),
    ("IMPACT_BRIGHTNESS_MIN", "IMPACT_BRIGHTNESS_MAX"),
    ("IMPACT_DECAY_MIN", "IMPACT_DECAY_MAX"),
    ("IMPACT_SPEED_MIN", "IMPACT_SPEED_MAX"),
    ("TICKS_PER_BULLET_AUTOMATED_MIN", "TICKS_PER_BULLET_AUTOMATED_MAX"),
)

_POSITIVE = (
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "FPS",
    "BULLET_SPEED",
    "BULLET_TRAIL_LENGTH",
    "IMPACT_COUNT",
    "IMPACT_DECAY_MIN",
    "IMPACT_TRAIL_LENGTH",
    "EDGE_POINT_CACHE_SIZE",
    "EDGE_POINT_MAX_ATTEMPTS",
    "CIRCLE_SEGMENTS",
    "LOG_THROTTLE_TICKS",
)


def _fail(message: str) -> None:
    logger.error("Invalid configuration: %s", message)
    raise ValueError(message)


def validate() -> None:
    """
    Check the constants in this module for values the animation cannot run with.
    Raises ValueError naming the first offending setting.
    """
    values = globals()
    for low_name, high_name in _RANGES:
        if values[low_name] > values[high_name]:
            _fail(f"{low_name} must not exceed {high_name}")
    for name in _POSITIVE:
        if values[name] <= 0:
            _fail(f"{name} must be positive")
    if BULLET_ACCELERATION < 1.0:
        _fail("BULLET_ACCELERATION must be >= 1.0")
    if not 0.0 < IMPACT_FRICTION <= 1.0:
        _fail("IMPACT_FRICTION must be in (0, 1]")
    if not 0.0 <= CANVAS_CLEANUP_ALPHA <= 1.0:
        _fail("CANVAS_CLEANUP_ALPHA must be in [0, 1]")
    low, high = EDGE_POINT_EXCLUDED_BAND
    if not 0.0 <= low <= high <= 1.0:
        _fail("EDGE_POINT_EXCLUDED_BAND must be an ordered pair within [0, 1]")
