"""Post-release easing motion.

An InertiaTask is plain state advanced once per tick by the camera motion
controller. Starting it, advancing it and cancelling it are ordinary method
calls; nothing is scheduled behind the caller's back.

Each tick while active the task yields a velocity of
``direction * remaining_speed * delta_time / 500`` and then loses
``delta_time * 8000`` speed. It retires once the speed reaches zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from touchcam.constants import INERTIA_DECELERATION, INERTIA_SPEED_DIVISOR

if TYPE_CHECKING:
    from touchcam.types import Vec2


@dataclass
class InertiaTask:
    """Decaying single-direction motion after the finger is released.

    Attributes:
        active: Whether the task still produces motion.
        remaining_speed: Current speed in pixels per second.
        direction: Unit direction of the motion in world space.
    """

    active: bool = False
    remaining_speed: float = 0.0
    direction: Vec2 = (0.0, 0.0)

    def start(self, speed: float, direction: Vec2) -> None:
        """Replace any running motion with a new one.

        A non-positive speed leaves the task inactive.
        """
        self.remaining_speed = speed
        self.direction = direction
        self.active = speed > 0

    def cancel(self) -> bool:
        """Stop the task immediately.

        Returns:
            True if the task was running.
        """
        was_active = self.active
        self.active = False
        self.remaining_speed = 0.0
        return was_active

    def step(self, delta_time: float) -> Vec2:
        """Advance one tick and return the offset to apply this tick."""
        if not self.active:
            return (0.0, 0.0)

        scale = self.remaining_speed * delta_time / INERTIA_SPEED_DIVISOR
        velocity = (self.direction[0] * scale, self.direction[1] * scale)

        self.remaining_speed -= delta_time * INERTIA_DECELERATION
        if self.remaining_speed <= 0:
            self.active = False

        return velocity
