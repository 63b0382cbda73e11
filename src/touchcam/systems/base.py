"""Base class for tick-driven systems.

A system owns one aspect of the camera session and is advanced by the host
once per frame. Systems are created with their collaborators injected, set
up once before the first tick, and cleaned up when the session ends.

Example:
    Driving a system from an Arcade view::

        class MapView(arcade.View):
            def on_update(self, delta_time):
                touches = self.touch_source.poll(delta_time)
                self.touch_camera.update(delta_time, touches)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from touchcam.types import TouchPoint


class BaseSystem(ABC):
    """Base class for all tick-driven systems.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
    """

    name: ClassVar[str]

    @abstractmethod
    def setup(self) -> None:
        """Initialize the system before the first tick.

        Read collaborators once here and derive anything that stays fixed for
        the session.
        """

    def update(self, delta_time: float, touches: Sequence[TouchPoint]) -> None:  # noqa: B027
        """Called every frame with the touches active for that frame.

        Args:
            delta_time: Time elapsed since the last frame, in seconds.
            touches: Active touches in the host's reporting order.
        """

    def cleanup(self) -> None:  # noqa: B027
        """Called when the session ends to release state."""

    def get_state(self) -> dict[str, Any]:
        """Return JSON-serializable state for saving."""
        return {}

    def restore_state(self, state: dict[str, Any]) -> None:  # noqa: B027
        """Restore state previously returned by get_state()."""
