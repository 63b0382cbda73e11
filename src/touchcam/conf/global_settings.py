"""Default settings for touchcam.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from touchcam.conf import global_settings

    # Override defaults
    BOUND_CAMERA = True
    BOUNDS_SIZE = (40.0, 25.0)
    ALLOW_ZOOMING = True
"""

# Pan settings
PANNING_SPEED = 1
"""Multiplier applied to the world-space drag direction."""

PAN_THRESHOLD = 0.2
"""Accumulated drag distance in world units before panning starts."""

BOUND_CAMERA = False
"""Whether the camera is kept inside a rectangular world-space area."""

BOUNDS_SIZE = (0.0, 0.0)
"""Bounds width and height in world units."""

BOUNDS_CENTER = (0.0, 0.0)
"""Center of the bounds rectangle in world units."""

INSIDE_OFFSET = 0.0
"""How many world units the visible area is shrunk by on each side."""

# Zoom settings
ALLOW_ZOOMING = False
"""Whether two-finger pinch changes the zoom."""

ZOOMING_SPEED = 1
"""Multiplier applied to the pinch distance change."""

ZOOM_THRESHOLD = 0.2
"""Accumulated pinch distance in pixels before zooming starts."""

DEFAULT_ZOOM = 7.0
"""Orthographic half-height applied at session start when zooming is allowed."""

MAX_ZOOM_IN = 4.5
"""Smallest orthographic half-height reachable by pinching."""

MAX_ZOOM_OUT = 15.0
"""Largest orthographic half-height reachable by pinching."""

# Logging
LOG_LEVEL = "INFO"
"""Level passed to touchcam.helpers.setup_logging()."""
