"""Tick-driven systems for touch camera control."""

from touchcam.systems.base import BaseSystem
from touchcam.systems.camera import (
    ArcadeCameraAdapter,
    BoundsConfig,
    CameraBounds,
    CameraMotionController,
    InertiaTask,
    SimpleOrthographicCamera,
    TouchCameraManager,
)
from touchcam.systems.gesture import Classification, GestureClassifier, GestureState
from touchcam.systems.input import MouseTouchEmulator

__all__ = [
    "ArcadeCameraAdapter",
    "BaseSystem",
    "BoundsConfig",
    "CameraBounds",
    "CameraMotionController",
    "Classification",
    "GestureClassifier",
    "GestureState",
    "InertiaTask",
    "MouseTouchEmulator",
    "SimpleOrthographicCamera",
    "TouchCameraManager",
]
