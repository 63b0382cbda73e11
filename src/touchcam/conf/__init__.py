"""Django-like settings system for touchcam.

Usage:
    # In your project's settings.py
    BOUND_CAMERA = True
    BOUNDS_SIZE = (40.0, 25.0)
    ALLOW_ZOOMING = True

    # In your code
    from touchcam.conf import settings

    print(settings.BOUNDS_SIZE)  # (40.0, 25.0)
"""

import importlib
import logging
import os
from typing import Any

from touchcam.conf import global_settings

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "TOUCHCAM_SETTINGS_MODULE"


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Settings are layered in this order:
    1. global_settings (package defaults)
    2. The user's settings module (overrides)

    The settings module is named by the TOUCHCAM_SETTINGS_MODULE environment
    variable, or "settings" in the current import path by convention.
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and the user's settings module."""
        settings_module = os.environ.get(SETTINGS_MODULE_ENV, "settings")

        self._wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            logger.debug("No settings module '%s' found, using defaults", settings_module)
            return

        for setting in dir(mod):
            if setting.isupper():
                setattr(self._wrapped, setting, getattr(mod, setting))

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
            return
        if self._wrapped is None:
            self._setup()
        setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                BOUND_CAMERA=True,
                BOUNDS_SIZE=(10.0, 10.0),
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
