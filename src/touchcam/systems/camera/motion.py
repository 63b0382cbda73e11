"""Camera motion driven by classified gestures.

This module provides the CameraMotionController, which turns forwarded
touches into camera motion:

Pan:
    The world point under the finger at gesture start is the anchor. Each
    MOVED tick the drag direction is ``anchor - world point under finger``.
    Its length is added to the shared threshold accumulator and, once the
    accumulator reaches ``pan_threshold``, the camera moves by
    ``direction * panning_speed``. The accumulator is never reset after it
    crosses the threshold, so it acts as a one-time gate per gesture rather
    than a repeating dead-zone.

Zoom:
    The change in distance between two fingers since the previous tick is
    accumulated the same way. Past ``zoom_threshold`` the orthographic
    half-height changes by ``diff * 0.01 * zooming_speed`` and is clamped to
    ``[max_zoom_in, max_zoom_out]``. Pinching inward makes ``diff`` positive
    and zooms out.

Inertia:
    Releasing a pan starts an InertiaTask from the last drag direction and
    speed. The task advances once per tick through apply_inertia() and is
    cancelled by a new gesture, by touching the bounds, or by
    stop_all_motion().

Every position write goes through clamp_to_bounds().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from touchcam.constants import ZOOM_SCALE
from touchcam.events import BoundsReachedEvent, InertiaStartedEvent, InertiaStoppedEvent, InertiaStopReason
from touchcam.systems.camera.inertia import InertiaTask
from touchcam.types import TouchPhase, magnitude, normalize, subtract

if TYPE_CHECKING:
    from touchcam.config import TouchCameraConfig
    from touchcam.events import Event, EventBus
    from touchcam.systems.camera.bounds import CameraBounds
    from touchcam.systems.gesture import GestureState
    from touchcam.types import OrthographicCamera, TouchPoint, Vec2, Vec3

logger = logging.getLogger(__name__)


def release_speed(touch: TouchPoint) -> float:
    """Instantaneous screen speed of a touch in pixels per second.

    A non-positive delta_time yields 0 instead of a non-finite value.
    """
    if touch.delta_time <= 0:
        logger.debug("Touch %d reported delta_time=%s, using zero speed", touch.finger_id, touch.delta_time)
        return 0.0
    return magnitude(touch.delta_position) / touch.delta_time


class CameraMotionController:
    """Applies pan, zoom and inertia to an injected camera.

    Attributes:
        camera: Camera whose position and half-height are written.
        config: Session tuning values.
        bounds: Bounds with the visible extent fixed at session start.
        inertia: The single easing task of this controller.
        last_direction: Unit drag direction from the last MOVED tick.
        last_speed: Screen speed from the last MOVED tick.
        reached_bounds: Whether the last position write was clamped.
    """

    def __init__(
        self,
        camera: OrthographicCamera,
        config: TouchCameraConfig,
        bounds: CameraBounds,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize the motion controller.

        Args:
            camera: Camera to drive.
            config: Session tuning values.
            bounds: Bounds used by clamp_to_bounds().
            event_bus: Optional bus for motion events.
        """
        self.camera = camera
        self.config = config
        self.bounds = bounds
        self.event_bus = event_bus
        self.inertia = InertiaTask()
        self.last_direction: Vec2 = (0.0, 0.0)
        self.last_speed = 0.0
        self.reached_bounds = False

    def clamp_to_bounds(self, position: Vec3) -> Vec3:
        """Clamp ``position`` and remember whether the bounds were touched.

        Identity when bounds are disabled.
        """
        clamped, self.reached_bounds = self.bounds.clamp(position)
        if self.reached_bounds:
            self._publish(BoundsReachedEvent(clamped))
        return clamped

    def move_to(self, position: Vec3) -> None:
        """Write a camera position through the bounds clamp."""
        self.camera.position = self.clamp_to_bounds(position)

    def move_by(self, offset: Vec2) -> None:
        """Translate the camera on x and y, keeping z."""
        x, y, z = self.camera.position
        self.move_to((x + offset[0], y + offset[1], z))

    def set_zoom(self, orthographic_half_height: float) -> None:
        """Write the half-height clamped to the configured zoom range."""
        self.camera.orthographic_half_height = min(
            max(orthographic_half_height, self.config.max_zoom_in),
            self.config.max_zoom_out,
        )

    def apply_pan(self, touch: TouchPoint, gesture: GestureState) -> None:
        """Pan the camera with a single forwarded touch.

        Args:
            touch: The tracked finger for this tick.
            gesture: Shared gesture state holding the anchor and accumulator.
        """
        current = self.camera.screen_to_world(*touch.position)
        direction = subtract(gesture.initial_world_position, current)

        if touch.phase is TouchPhase.MOVED:
            gesture.threshold_accumulator += magnitude(direction)
            if abs(gesture.threshold_accumulator) >= self.config.pan_threshold:
                speed = self.config.panning_speed
                self.move_by((direction[0] * speed, direction[1] * speed))
            self.last_direction = normalize(direction)
            self.last_speed = release_speed(touch)

        if touch.phase in (TouchPhase.ENDED, TouchPhase.CANCELED):
            self.start_inertia(self.last_speed, self.last_direction)

    def apply_zoom(self, touch1: TouchPoint, touch2: TouchPoint, gesture: GestureState) -> None:
        """Zoom the camera with two forwarded touches."""
        previous1 = subtract(touch1.position, touch1.delta_position)
        previous2 = subtract(touch2.position, touch2.delta_position)
        previous_distance = magnitude(subtract(previous1, previous2))
        current_distance = magnitude(subtract(touch1.position, touch2.position))
        diff = previous_distance - current_distance

        gesture.threshold_accumulator += diff
        if abs(gesture.threshold_accumulator) >= self.config.zoom_threshold:
            half_height = self.camera.orthographic_half_height
            self.set_zoom(half_height + diff * ZOOM_SCALE * self.config.zooming_speed)

    def start_inertia(self, speed: float, direction: Vec2) -> None:
        """Start easing, replacing any running inertia task."""
        self.inertia.start(speed, direction)
        if self.inertia.active:
            logger.debug("Inertia started: speed=%.2f direction=%s", speed, direction)
            self._publish(InertiaStartedEvent(speed, direction))

    def cancel_inertia(self, reason: InertiaStopReason) -> None:
        """Cancel the running inertia task, if any."""
        if self.inertia.cancel():
            logger.debug("Inertia cancelled: %s", reason.value)
            self._publish(InertiaStoppedEvent(reason))

    def apply_inertia(self, delta_time: float) -> None:
        """Advance the inertia task by one tick.

        The offset is written through the clamp. Touching the bounds cancels
        the task instead of letting it slide along the edge.
        """
        if not self.inertia.active:
            return

        self.move_by(self.inertia.step(delta_time))

        if self.reached_bounds and self.inertia.active:
            self.cancel_inertia(InertiaStopReason.BOUNDS)
        elif not self.inertia.active:
            logger.debug("Inertia finished")
            self._publish(InertiaStoppedEvent(InertiaStopReason.FINISHED))

    def stop_all_motion(self) -> None:
        """Cancel any easing motion immediately."""
        self.cancel_inertia(InertiaStopReason.STOPPED)

    def _publish(self, event: Event) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)
