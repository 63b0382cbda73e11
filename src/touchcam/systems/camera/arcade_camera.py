"""Adapter exposing an Arcade Camera2D as an orthographic touch camera.

Arcade cameras describe the visible world area as a projection rectangle
scaled down by a zoom factor. The touch controller works in orthographic
half-heights, so the adapter converts between the two using the projection
height:

    half_height = projection.height / (2 * zoom)

Usage Example:
    camera = arcade.camera.Camera2D()
    touch_camera = TouchCameraManager(ArcadeCameraAdapter(camera))

    def on_draw(self):
        self.clear()
        touch_camera.camera.use()
        self.scene.draw()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import arcade

    from touchcam.types import Vec2, Vec3


class ArcadeCameraAdapter:
    """Wraps an ``arcade.camera.Camera2D`` for the touch camera systems.

    Arcade cameras are two-dimensional; the z component of ``position`` is
    kept on the adapter so callers can round-trip a 3D position.
    """

    def __init__(self, camera: arcade.camera.Camera2D, depth: float = 0.0) -> None:
        """Initialize the adapter.

        Args:
            camera: The Arcade camera to drive.
            depth: Value reported as the z component of ``position``.
        """
        self.camera = camera
        self.depth = depth

    @property
    def position(self) -> Vec3:
        """Camera center in world coordinates."""
        x, y = self.camera.position
        return (x, y, self.depth)

    @position.setter
    def position(self, value: Vec3) -> None:
        self.camera.position = (value[0], value[1])
        self.depth = value[2]

    @property
    def orthographic_half_height(self) -> float:
        """Half of the visible height in world units."""
        return self.camera.projection.height / (2 * self.camera.zoom)

    @orthographic_half_height.setter
    def orthographic_half_height(self, value: float) -> None:
        self.camera.zoom = self.camera.projection.height / (2 * value)

    @property
    def aspect(self) -> float:
        """Projection width divided by projection height."""
        projection = self.camera.projection
        return projection.width / projection.height

    def screen_to_world(self, x: float, y: float) -> Vec2:
        """Project a screen point to world coordinates using the camera."""
        world = self.camera.unproject((x, y))
        return (world[0], world[1])

    def use(self) -> None:
        """Activate the wrapped camera for rendering."""
        self.camera.use()
