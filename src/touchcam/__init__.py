"""touchcam - Touch-gesture driven 2D camera control for Arcade and other hosts.

This package turns multi-touch input into camera motion:
- One-finger pan with a threshold dead-zone
- Two-finger pinch-zoom within a zoom range
- Inertial easing after the finger is released
- Optional clamping to a rectangular world-space area

Quick start:
    from touchcam import ArcadeCameraAdapter, MouseTouchEmulator, create_touch_camera, settings

    settings.configure(ALLOW_ZOOMING=True, BOUND_CAMERA=True, BOUNDS_SIZE=(64.0, 36.0))

    touch_camera = create_touch_camera(ArcadeCameraAdapter(arcade.camera.Camera2D()))
    touch_source = MouseTouchEmulator()

    # Each frame
    touch_camera.update(delta_time, touch_source.poll(delta_time))
"""

__version__ = "0.1.0"

from touchcam.conf import settings
from touchcam.config import TouchCameraConfig
from touchcam.events import EventBus
from touchcam.exceptions import MissingCameraError
from touchcam.helpers import create_touch_camera, setup_logging
from touchcam.systems import (
    ArcadeCameraAdapter,
    CameraMotionController,
    GestureClassifier,
    MouseTouchEmulator,
    SimpleOrthographicCamera,
    TouchCameraManager,
)
from touchcam.types import GestureMode, TouchPhase, TouchPoint

__all__ = [
    "ArcadeCameraAdapter",
    "CameraMotionController",
    "EventBus",
    "GestureClassifier",
    "GestureMode",
    "MissingCameraError",
    "MouseTouchEmulator",
    "SimpleOrthographicCamera",
    "TouchCameraConfig",
    "TouchCameraManager",
    "TouchPhase",
    "TouchPoint",
    "__version__",
    "create_touch_camera",
    "setup_logging",
    "settings",
]
