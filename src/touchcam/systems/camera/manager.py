"""Touch camera session management.

This module provides the TouchCameraManager, the single per-tick entry point
of a touch camera session. It wires the GestureClassifier to the
CameraMotionController and runs them in a fixed order each tick:

1. Classify the reported touches.
2. On gesture start, cancel any running inertia.
3. Apply pan or pinch-zoom for the forwarded touches.
4. Advance the inertia task (including one started this tick).

Position writes are clamped to the bounds when bounding is enabled.

Session start:
    setup() reads the camera once. When bounding is enabled the visible
    extent is derived from the camera's zoom at that moment and the camera is
    clamped into the bounds. When zooming is allowed the half-height is then
    set to ``default_zoom``. The bounds extent is not derived again after
    that, even when the zoom changes.

Usage Example:
    camera = SimpleOrthographicCamera(viewport_width=1280, viewport_height=720)
    manager = TouchCameraManager(camera, TouchCameraConfig(allow_zooming=True))
    manager.setup()

    # Each frame
    manager.update(delta_time, touches)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from touchcam.config import TouchCameraConfig
from touchcam.events import GestureStartedEvent, InertiaStopReason
from touchcam.exceptions import MissingCameraError
from touchcam.systems.base import BaseSystem
from touchcam.systems.camera.bounds import BoundsConfig, CameraBounds
from touchcam.systems.camera.motion import CameraMotionController
from touchcam.systems.gesture import GestureClassifier
from touchcam.types import GestureMode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from touchcam.events import EventBus
    from touchcam.types import CameraStateDict, OrthographicCamera, TouchPoint

logger = logging.getLogger(__name__)


class TouchCameraManager(BaseSystem):
    """Drives one camera from touch input, one tick at a time.

    Attributes:
        camera: The injected camera collaborator.
        config: Session tuning values.
        event_bus: Optional bus receiving gesture and motion events.
        classifier: Gesture classifier holding the gesture state.
        motion: Motion controller, created by setup().
    """

    name: ClassVar[str] = "touch_camera"

    def __init__(
        self,
        camera: OrthographicCamera | None,
        config: TouchCameraConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize the touch camera manager.

        Args:
            camera: Camera to drive. Required.
            config: Tuning values. Defaults to TouchCameraConfig.from_settings().
            event_bus: Optional bus for gesture and motion events.

        Raises:
            MissingCameraError: If ``camera`` is None.
        """
        if camera is None:
            raise MissingCameraError
        self.camera = camera
        self.config = config if config is not None else TouchCameraConfig.from_settings()
        self.event_bus = event_bus
        self.classifier = GestureClassifier(camera, allow_zooming=self.config.allow_zooming)
        self.motion: CameraMotionController | None = None

    @property
    def gesture(self) -> GestureMode:
        """Gesture mode last resolved by the classifier."""
        return self.classifier.state.mode

    def setup(self) -> None:
        """Start the session: fix the bounds extent and apply the default zoom."""
        bounds_config = BoundsConfig.from_config(self.config)
        half_extent = (0.0, 0.0)
        if bounds_config.enabled:
            half_extent = bounds_config.visible_half_extent(self.camera.orthographic_half_height, self.camera.aspect)
        self.motion = CameraMotionController(
            self.camera,
            self.config,
            CameraBounds(bounds_config, half_extent),
            self.event_bus,
        )

        if bounds_config.enabled:
            self.motion.move_to(self.camera.position)
            logger.debug("Camera bounds enabled: %s, visible half extent %s", bounds_config, half_extent)

        if self.config.allow_zooming:
            self.camera.orthographic_half_height = self.config.default_zoom

        logger.debug("TouchCameraManager setup complete")

    def update(self, delta_time: float, touches: Sequence[TouchPoint]) -> None:
        """Advance the session by one tick.

        Args:
            delta_time: Seconds since the previous tick.
            touches: Active touches in the host's reporting order.
        """
        if self.motion is None:
            self.setup()
        motion = self.motion
        if motion is None:
            return

        classification = self.classifier.classify(touches)
        if classification.ignored:
            return

        gesture = self.classifier.state
        if classification.gesture_started:
            motion.cancel_inertia(InertiaStopReason.NEW_GESTURE)
            self._publish_gesture_started(classification.mode)

        forwarded = classification.touches
        if classification.mode is GestureMode.PANNING and forwarded:
            motion.apply_pan(forwarded[0], gesture)
        elif classification.mode is GestureMode.ZOOMING and len(forwarded) == 2:  # noqa: PLR2004
            motion.apply_zoom(forwarded[0], forwarded[1], gesture)

        motion.apply_inertia(delta_time)

    def stop_all_motion(self) -> None:
        """Cancel easing and suspend the gesture until the next touch."""
        if self.motion is not None:
            self.motion.stop_all_motion()
        self.classifier.state.mode = GestureMode.SUSPENDED
        logger.debug("All camera motion stopped")

    def cleanup(self) -> None:
        """End the session and forget gesture and motion state."""
        if self.motion is not None:
            self.motion.stop_all_motion()
        self.motion = None
        self.classifier.state.reset()
        logger.debug("TouchCameraManager cleanup complete")

    def get_state(self) -> dict[str, Any]:
        """Return the camera position and zoom for saving."""
        state: CameraStateDict = {
            "position": list(self.camera.position),
            "orthographic_half_height": self.camera.orthographic_half_height,
        }
        return dict(state)

    def restore_state(self, state: dict[str, Any]) -> None:
        """Restore camera position and zoom from save data.

        The position is clamped to the bounds and the zoom to the zoom range.
        """
        if self.motion is None:
            self.setup()
        if self.motion is None:
            return

        if "orthographic_half_height" in state:
            self.motion.set_zoom(float(state["orthographic_half_height"]))
        if "position" in state:
            x, y, z = (float(value) for value in state["position"])
            self.motion.move_to((x, y, z))

    def _publish_gesture_started(self, mode: GestureMode) -> None:
        if self.event_bus is None:
            return
        gesture = self.classifier.state
        if gesture.tracked_finger_id is None:
            return
        self.event_bus.publish(GestureStartedEvent(gesture.tracked_finger_id, mode, gesture.initial_world_position))
