"""Rectangular world-space bounds for the camera position.

The visible extent of the camera is derived once, from the camera's zoom at
session start, and is not recomputed when the zoom changes afterwards. After
zooming out past the starting zoom the camera can therefore show area
outside the bounds.

Example:
    config = BoundsConfig(center=(0.0, 0.0), size=(10.0, 10.0), enabled=True)
    bounds = CameraBounds(config, half_extent=(2.0, 2.0))

    bounds.clamp((6.0, 0.0, -10.0))  # ((3.0, 0.0, -10.0), True)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from touchcam.config import TouchCameraConfig
    from touchcam.types import Vec2, Vec3


@dataclass(frozen=True)
class BoundsConfig:
    """Immutable bounds description for one session.

    Attributes:
        center: Center of the bounds rectangle in world units.
        size: Width and height of the bounds rectangle in world units.
        inside_offset: Units the visible area is shrunk by on each side, which
            lets the camera show that much area past the bounds edge.
        enabled: When False clamping is the identity.
    """

    center: Vec2 = (0.0, 0.0)
    size: Vec2 = (0.0, 0.0)
    inside_offset: float = 0.0
    enabled: bool = False

    @classmethod
    def from_config(cls, config: TouchCameraConfig) -> Self:
        """Build the bounds description from a session config."""
        return cls(
            center=config.bounds_center,
            size=config.bounds_size,
            inside_offset=config.inside_offset,
            enabled=config.bound_camera,
        )

    @property
    def minimum(self) -> Vec2:
        """Bottom-left corner of the bounds."""
        return (self.center[0] - self.size[0] / 2, self.center[1] - self.size[1] / 2)

    @property
    def maximum(self) -> Vec2:
        """Top-right corner of the bounds."""
        return (self.center[0] + self.size[0] / 2, self.center[1] + self.size[1] / 2)

    def visible_half_extent(self, orthographic_half_height: float, aspect: float) -> Vec2:
        """Half of the visible extent used for clamping, per axis.

        The full visible extent is the viewport size in world units
        (``half_height * 2 * aspect`` by ``half_height * 2``) minus
        ``inside_offset`` on each side.
        """
        visible_width = orthographic_half_height * 2 * aspect - self.inside_offset * 2
        visible_height = orthographic_half_height * 2 - self.inside_offset * 2
        return (visible_width / 2, visible_height / 2)


@dataclass(frozen=True)
class CameraBounds:
    """Bounds config paired with the visible half-extent fixed at session start."""

    config: BoundsConfig
    half_extent: Vec2 = (0.0, 0.0)

    @property
    def enabled(self) -> bool:
        """Whether clamping changes positions at all."""
        return self.config.enabled

    def clamp(self, position: Vec3) -> tuple[Vec3, bool]:
        """Clamp a candidate camera position into the bounds.

        Each axis is handled on its own: the maximum side is checked first,
        then the minimum side. When the visible extent is larger than the
        bounds the minimum side wins. The z component is passed through.

        Args:
            position: Candidate camera position.

        Returns:
            Tuple of the clamped position and whether any axis was changed.
            Disabled bounds return the input unchanged and False.
        """
        if not self.config.enabled:
            return position, False

        x, y, z = position
        half_x, half_y = self.half_extent
        min_x, min_y = self.config.minimum
        max_x, max_y = self.config.maximum
        hit = False

        if x + half_x > max_x:
            x = max_x - half_x
            hit = True
        if x - half_x < min_x:
            x = min_x + half_x
            hit = True
        if y + half_y > max_y:
            y = max_y - half_y
            hit = True
        if y - half_y < min_y:
            y = min_y + half_y
            hit = True

        return (x, y, z), hit
