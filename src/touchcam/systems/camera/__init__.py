"""Camera system for touch-driven pan, zoom and easing.

This package provides:
- TouchCameraManager: Per-tick session entry point
- CameraMotionController: Pan, zoom, inertia and bounds clamping
- CameraBounds / BoundsConfig: Rectangular world-space bounds
- InertiaTask: Decaying motion after release
- SimpleOrthographicCamera / ArcadeCameraAdapter: Camera collaborators
"""

from touchcam.systems.camera.arcade_camera import ArcadeCameraAdapter
from touchcam.systems.camera.bounds import BoundsConfig, CameraBounds
from touchcam.systems.camera.inertia import InertiaTask
from touchcam.systems.camera.manager import TouchCameraManager
from touchcam.systems.camera.motion import CameraMotionController, release_speed
from touchcam.systems.camera.orthographic import SimpleOrthographicCamera

__all__ = [
    "ArcadeCameraAdapter",
    "BoundsConfig",
    "CameraBounds",
    "CameraMotionController",
    "InertiaTask",
    "SimpleOrthographicCamera",
    "TouchCameraManager",
    "release_speed",
]
