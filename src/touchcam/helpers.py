"""Helper functions for setting up a touch camera session.

This module provides high-level functions that wire logging, settings and
the camera systems together for a host application.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from touchcam.conf import settings
from touchcam.config import TouchCameraConfig
from touchcam.systems.camera import TouchCameraManager

if TYPE_CHECKING:
    from touchcam.events import EventBus
    from touchcam.types import OrthographicCamera


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the host application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_touch_camera(
    camera: OrthographicCamera | None,
    event_bus: EventBus | None = None,
) -> TouchCameraManager:
    """Create a touch camera session from the global settings.

    The returned manager is already set up and ready for update() calls.

    Args:
        camera: Camera to drive.
        event_bus: Optional bus for gesture and motion events.

    Raises:
        MissingCameraError: If ``camera`` is None.

    Example:
        from touchcam import create_touch_camera, settings

        settings.configure(ALLOW_ZOOMING=True)
        touch_camera = create_touch_camera(ArcadeCameraAdapter(arcade.camera.Camera2D()))
    """
    manager = TouchCameraManager(camera, TouchCameraConfig.from_settings(), event_bus)
    manager.setup()
    return manager
