"""Module for events."""

from touchcam.events.base import (
    BoundsReachedEvent,
    Event,
    EventBus,
    GestureStartedEvent,
    InertiaStartedEvent,
    InertiaStopReason,
    InertiaStoppedEvent,
)

__all__ = [
    "BoundsReachedEvent",
    "Event",
    "EventBus",
    "GestureStartedEvent",
    "InertiaStartedEvent",
    "InertiaStopReason",
    "InertiaStoppedEvent",
]
