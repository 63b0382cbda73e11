"""Per-session controller configuration.

TouchCameraConfig is an immutable snapshot of the tuning values the gesture
and motion systems need. Build it explicitly or from the global settings
object:

    from touchcam.config import TouchCameraConfig

    config = TouchCameraConfig.from_settings()
    config = TouchCameraConfig(bound_camera=True, bounds_size=(10.0, 10.0))

Values are not validated here; callers are expected to pass sensible numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from touchcam.conf import settings

if TYPE_CHECKING:
    from touchcam.types import Vec2


@dataclass(frozen=True)
class TouchCameraConfig:
    """Tuning values for a touch camera session.

    Attributes:
        panning_speed: Multiplier applied to the drag direction.
        pan_threshold: Accumulated drag distance before the camera pans.
        bound_camera: Whether positions are clamped to the bounds rectangle.
        bounds_size: Bounds width and height in world units.
        bounds_center: Bounds center in world units.
        inside_offset: Units the visible area is shrunk by on each side.
        allow_zooming: Whether two fingers pinch-zoom.
        zooming_speed: Multiplier applied to the pinch distance change.
        zoom_threshold: Accumulated pinch change before the camera zooms.
        default_zoom: Half-height applied at session start when zooming.
        max_zoom_in: Smallest reachable half-height.
        max_zoom_out: Largest reachable half-height.
    """

    panning_speed: float = 1.0
    pan_threshold: float = 0.2
    bound_camera: bool = False
    bounds_size: Vec2 = (0.0, 0.0)
    bounds_center: Vec2 = (0.0, 0.0)
    inside_offset: float = 0.0
    allow_zooming: bool = False
    zooming_speed: float = 1.0
    zoom_threshold: float = 0.2
    default_zoom: float = 7.0
    max_zoom_in: float = 4.5
    max_zoom_out: float = 15.0

    @classmethod
    def from_settings(cls) -> Self:
        """Create a config from the touchcam settings object."""
        return cls(
            panning_speed=settings.PANNING_SPEED,
            pan_threshold=settings.PAN_THRESHOLD,
            bound_camera=settings.BOUND_CAMERA,
            bounds_size=tuple(settings.BOUNDS_SIZE),
            bounds_center=tuple(settings.BOUNDS_CENTER),
            inside_offset=settings.INSIDE_OFFSET,
            allow_zooming=settings.ALLOW_ZOOMING,
            zooming_speed=settings.ZOOMING_SPEED,
            zoom_threshold=settings.ZOOM_THRESHOLD,
            default_zoom=settings.DEFAULT_ZOOM,
            max_zoom_in=settings.MAX_ZOOM_IN,
            max_zoom_out=settings.MAX_ZOOM_OUT,
        )
