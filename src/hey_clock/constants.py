"""Global constants for the application."""

# Animation settings
DEFAULT_FPS = 20  # Default frames per second for exported animations
MIN_FRAME_INTERVAL = 1 / 20  # Seconds; redraws never happen faster than this
MAX_FPS = round(1 / MIN_FRAME_INTERVAL)  # Fastest redraw rate allowed by the interval floor
DEFAULT_SIZE = 256  # Default surface edge in pixels
DEFAULT_DURATION = 5.0  # Seconds of animation exported by default
DEFAULT_SUPERSAMPLE = 4  # Render at Nx size, then downsample

# Angles
HALF_TURN_SENTINEL = 3.14158  # Radians used in place of an exact pi rotation
HOUR_DEGREES = 30  # Degrees per hour on the dial
MINUTE_DEGREES = 6  # Degrees per minute (and per second)
REFERENCE_OFFSET_DEGREES = 180  # Hands are authored pointing down from the hub

# Dial proportions, all relative to the dial radius
BORDER_RATIO = 1 / 25  # Outer ring stroke width
INNER_RING_RATIO = 1 / 6  # Inner ring diameter
RING_WIDTH_RATIO = 1 / 40  # Inner ring stroke width
NUMERAL_SIZE_RATIO = 1 / 4  # Hour numeral font size
NUMERAL_OFFSET_RATIO = 0.75  # Distance from hub to numeral center

# Hand proportions, all relative to the dial radius
HAND_WIDTH_RATIO = 1 / 30  # Hour/minute stalk width
HOUR_LENGTH_RATIO = 1 / 2.5
MINUTE_LENGTH_RATIO = 1 / 1.5
HAND_HEAD_OFFSET_RATIO = 1 / 5  # Capsule head starts this far out along the hand
SECOND_LENGTH_RATIO = 1.1
SECOND_WIDTH_RATIO = 1 / 25
SECOND_OFFSET_RATIO = -1 / 6  # Second hand starts behind the hub (counterweight tail)

CAPSULE_CAP_SEGMENTS = 12  # Polygon segments per semicircular capsule cap

# Colors
ACCENT_COLOR = (255, 149, 0)  # Orange second hand and hub ring, theme independent
LIGHT_PRIMARY_COLOR = (0, 0, 0)
DARK_PRIMARY_COLOR = (255, 255, 255)
LIGHT_BACKGROUND_COLOR = (255, 255, 255)
DARK_BACKGROUND_COLOR = (0, 0, 0)
