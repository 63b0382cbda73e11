"""Plain orthographic camera for hosts that manage their own rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from touchcam.types import Vec2, Vec3


@dataclass
class SimpleOrthographicCamera:
    """Orthographic camera centered on ``position``.

    Screen coordinates have their origin at the bottom-left corner of the
    viewport with y pointing up, matching Arcade's convention.

    Attributes:
        position: Camera position in world units.
        orthographic_half_height: Half of the visible height in world units.
        viewport_width: Viewport width in pixels.
        viewport_height: Viewport height in pixels.
    """

    position: Vec3 = (0.0, 0.0, -10.0)
    orthographic_half_height: float = 5.0
    viewport_width: float = 1280.0
    viewport_height: float = 720.0

    @property
    def aspect(self) -> float:
        """Viewport width divided by viewport height."""
        return self.viewport_width / self.viewport_height

    @property
    def units_per_pixel(self) -> float:
        """World units covered by one screen pixel."""
        return self.orthographic_half_height * 2 / self.viewport_height

    def screen_to_world(self, x: float, y: float) -> Vec2:
        """Project a screen point to world coordinates."""
        scale = self.units_per_pixel
        return (
            self.position[0] + (x - self.viewport_width / 2) * scale,
            self.position[1] + (y - self.viewport_height / 2) * scale,
        )
