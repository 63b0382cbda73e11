"""Mouse-driven touch emulation for desktop hosts.

Arcade delivers mouse callbacks on the window or view. MouseTouchEmulator
receives those callbacks and, once per tick, reports the resulting touches
the way a touch screen would:

- Pressing the mouse button puts finger 0 down (BEGAN).
- Dragging moves it (MOVED); holding still reports STATIONARY.
- Releasing lifts it (ENDED) for exactly one tick.
- Holding Ctrl when pressing adds finger 1, mirrored around the press point,
  so dragging away from or toward the press point pinches.

Usage Example:
    class MapView(arcade.View):
        def on_mouse_press(self, x, y, button, modifiers):
            self.touch_source.on_mouse_press(x, y, button, modifiers)

        def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
            self.touch_source.on_mouse_drag(x, y, dx, dy, buttons, modifiers)

        def on_mouse_release(self, x, y, button, modifiers):
            self.touch_source.on_mouse_release(x, y, button, modifiers)

        def on_update(self, delta_time):
            self.touch_camera.update(delta_time, self.touch_source.poll(delta_time))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from touchcam.types import TouchPhase, TouchPoint

if TYPE_CHECKING:
    from touchcam.types import Vec2

logger = logging.getLogger(__name__)

PRIMARY_FINGER_ID = 0
MIRROR_FINGER_ID = 1


class MouseTouchEmulator:
    """Converts Arcade mouse callbacks into per-tick touch snapshots."""

    def __init__(
        self,
        button: int = arcade.MOUSE_BUTTON_LEFT,
        pinch_modifier: int = arcade.key.MOD_CTRL,
    ) -> None:
        """Initialize the emulator.

        Args:
            button: Mouse button that acts as the finger.
            pinch_modifier: Modifier mask that adds a mirrored second finger.
        """
        self.button = button
        self.pinch_modifier = pinch_modifier
        self._phase: TouchPhase | None = None
        self._position: Vec2 = (0.0, 0.0)
        self._anchor: Vec2 = (0.0, 0.0)
        self._delta: Vec2 = (0.0, 0.0)
        self._pinch = False

    @property
    def is_down(self) -> bool:
        """Whether the emulated finger is currently on the screen."""
        return self._phase is not None and self._phase is not TouchPhase.ENDED

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        """Put the emulated finger down."""
        if button != self.button:
            return
        self._phase = TouchPhase.BEGAN
        self._position = (x, y)
        self._anchor = (x, y)
        self._delta = (0.0, 0.0)
        self._pinch = bool(modifiers & self.pinch_modifier)
        logger.debug("Emulated touch down at (%s, %s), pinch=%s", x, y, self._pinch)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int) -> None:
        """Move the emulated finger."""
        if not self.is_down or not buttons & self.button:
            return
        self._position = (x, y)
        self._delta = (self._delta[0] + dx, self._delta[1] + dy)
        if self._phase is not TouchPhase.BEGAN:
            self._phase = TouchPhase.MOVED

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        """Lift the emulated finger."""
        if button != self.button or not self.is_down:
            return
        self._delta = (self._delta[0] + x - self._position[0], self._delta[1] + y - self._position[1])
        self._position = (x, y)
        self._phase = TouchPhase.ENDED

    def poll(self, delta_time: float) -> list[TouchPoint]:
        """Return the touches for this tick and advance the emulated phases.

        Args:
            delta_time: Seconds since the previous poll, reported on each touch.
        """
        if self._phase is None:
            return []

        touches = [TouchPoint(PRIMARY_FINGER_ID, self._position, self._delta, delta_time, self._phase)]
        if self._pinch:
            mirrored = (2 * self._anchor[0] - self._position[0], 2 * self._anchor[1] - self._position[1])
            touches.append(
                TouchPoint(MIRROR_FINGER_ID, mirrored, (-self._delta[0], -self._delta[1]), delta_time, self._phase)
            )

        self._delta = (0.0, 0.0)
        if self._phase is TouchPhase.ENDED:
            self._phase = None
            self._pinch = False
        else:
            self._phase = TouchPhase.STATIONARY
        return touches
