"""Motion constants shared by the camera systems."""

INERTIA_SPEED_DIVISOR = 500.0
"""Scales the release speed (pixels per second) down to world units per tick."""

INERTIA_DECELERATION = 8000.0
"""Speed lost per second while the camera eases after release."""

ZOOM_SCALE = 0.01
"""Converts a pinch distance change in pixels to orthographic half-height."""
