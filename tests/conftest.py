"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from touchcam.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        PANNING_SPEED=1,
        PAN_THRESHOLD=0.2,
        BOUND_CAMERA=False,
        BOUNDS_SIZE=(0.0, 0.0),
        BOUNDS_CENTER=(0.0, 0.0),
        INSIDE_OFFSET=0.0,
        ALLOW_ZOOMING=False,
        ZOOMING_SPEED=1,
        ZOOM_THRESHOLD=0.2,
        DEFAULT_ZOOM=7.0,
        MAX_ZOOM_IN=4.5,
        MAX_ZOOM_OUT=15.0,
        LOG_LEVEL="INFO",
    )
    yield
    settings._wrapped = None
