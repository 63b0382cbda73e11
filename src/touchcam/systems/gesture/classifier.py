"""Touch gesture classification.

The GestureClassifier looks at the touches reported for one tick and decides
what the tick means for the camera:

- No touches: the mode stays as last resolved and nothing is forwarded.
- One touch: panning with that touch.
- Two touches with zooming allowed: pinch-zoom with both touches, in the
  order the host reported them.
- Two touches with zooming disallowed: the previous mode is kept and only
  the first touch is forwarded.
- Three or more touches: the tick is ignored entirely.

It also tracks finger identity. When the first forwarded touch belongs to a
different finger than the one being tracked, or its phase is BEGAN, a new
gesture starts: the world point under the finger is snapshotted and the
shared threshold accumulator is reset.

The threshold accumulator is shared between pan and zoom and is only reset
when a gesture starts, never on a mode switch within a continuous touch
sequence. A pan that turns into a pinch keeps the distance it accumulated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from touchcam.types import GestureMode, TouchPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from touchcam.types import OrthographicCamera, TouchPoint, Vec2

logger = logging.getLogger(__name__)

MAX_GESTURE_TOUCHES = 2


@dataclass
class GestureState:
    """Gesture bookkeeping carried from tick to tick.

    Attributes:
        mode: Gesture mode last resolved. Never PANNING and ZOOMING at once.
        tracked_finger_id: Finger that started the current gesture, or None
            before the first touch.
        initial_world_position: World point under the finger at gesture start.
        threshold_accumulator: Dead-zone counter shared by pan and zoom.
    """

    mode: GestureMode = GestureMode.IDLE
    tracked_finger_id: int | None = None
    initial_world_position: Vec2 = (0.0, 0.0)
    threshold_accumulator: float = 0.0

    def begin(self, finger_id: int, world_position: Vec2) -> None:
        """Start a new gesture for ``finger_id``."""
        self.tracked_finger_id = finger_id
        self.initial_world_position = world_position
        self.threshold_accumulator = 0.0

    def reset(self) -> None:
        """Forget the current gesture."""
        self.mode = GestureMode.IDLE
        self.tracked_finger_id = None
        self.initial_world_position = (0.0, 0.0)
        self.threshold_accumulator = 0.0


@dataclass(frozen=True)
class Classification:
    """Result of classifying one tick.

    Attributes:
        mode: Mode to act on this tick.
        touches: Touches forwarded to the motion controller.
        gesture_started: Whether this tick started a new gesture.
        ignored: Whether the tick must not move the camera at all.
    """

    mode: GestureMode
    touches: tuple[TouchPoint, ...] = ()
    gesture_started: bool = False
    ignored: bool = False


class GestureClassifier:
    """Resolves per-tick touches into a gesture mode and forwarded touches."""

    def __init__(self, camera: OrthographicCamera, *, allow_zooming: bool = False) -> None:
        """Initialize the classifier.

        Args:
            camera: Camera used to project the touch that starts a gesture.
            allow_zooming: Whether two touches resolve to pinch-zoom.
        """
        self.camera = camera
        self.allow_zooming = allow_zooming
        self.state = GestureState()

    def classify(self, touches: Sequence[TouchPoint]) -> Classification:
        """Classify the touches reported for this tick.

        Args:
            touches: Active touches in the host's reporting order.

        Returns:
            The resolved classification. The gesture state is updated in place.
        """
        touch_count = len(touches)

        if touch_count == 0:
            return Classification(mode=self.state.mode)

        if touch_count > MAX_GESTURE_TOUCHES:
            logger.debug("Ignoring tick with %d touches", touch_count)
            return Classification(mode=GestureMode.IDLE, ignored=True)

        if touch_count == 1:
            self.state.mode = GestureMode.PANNING
        elif self.allow_zooming:
            self.state.mode = GestureMode.ZOOMING

        if self.state.mode is GestureMode.ZOOMING:
            forwarded = (touches[0], touches[1])
        else:
            forwarded = (touches[0],)

        gesture_started = self._track(forwarded[0])
        return Classification(mode=self.state.mode, touches=forwarded, gesture_started=gesture_started)

    def _track(self, touch: TouchPoint) -> bool:
        if touch.phase is not TouchPhase.BEGAN and touch.finger_id == self.state.tracked_finger_id:
            return False

        world_position = self.camera.screen_to_world(*touch.position)
        self.state.begin(touch.finger_id, world_position)
        logger.debug("Gesture started by finger %d at %s", touch.finger_id, world_position)
        return True
