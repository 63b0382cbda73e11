"""Event system for decoupled camera event handling.

The controller publishes events when a gesture starts, when easing starts or
stops, and when the camera touches the bounds. Hosts subscribe to react, for
example to play a bump sound or show an edge glow.

Example usage:
    event_bus = EventBus()

    def on_bounds(event: BoundsReachedEvent) -> None:
        print(f"Camera hit the bounds at {event.position}")

    event_bus.subscribe(BoundsReachedEvent, on_bounds)
    event_bus.publish(BoundsReachedEvent((3.0, 0.0, -10.0)))
    event_bus.clear()
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from touchcam.types import GestureMode, Vec2, Vec3


@dataclass
class Event:
    """Base event class."""


@dataclass
class GestureStartedEvent(Event):
    """Fired when a new finger takes over the gesture.

    Attributes:
        finger_id: Id of the finger now being tracked.
        mode: Gesture mode resolved for the tick the gesture started.
        world_position: World point under the finger at gesture start.
    """

    finger_id: int
    mode: GestureMode
    world_position: Vec2


@dataclass
class InertiaStartedEvent(Event):
    """Fired when the camera starts easing after the finger is released."""

    speed: float
    direction: Vec2


class InertiaStopReason(Enum):
    """Why a running inertia task stopped."""

    FINISHED = "finished"
    NEW_GESTURE = "new_gesture"
    BOUNDS = "bounds"
    STOPPED = "stopped"


@dataclass
class InertiaStoppedEvent(Event):
    """Fired when a running inertia task retires or is cancelled."""

    reason: InertiaStopReason


@dataclass
class BoundsReachedEvent(Event):
    """Fired when a position write was clamped against the bounds.

    Attributes:
        position: Camera position after clamping.
    """

    position: Vec3


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Handlers are called synchronously in subscription order. A handler that
    raises stops the dispatch and the exception propagates to the publisher.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The type of event to listen for.
            handler: Callback invoked with the published event.
        """
        self.listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Remove every subscription of ``handler`` for ``event_type``."""
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all handlers subscribed to its exact type."""
        for handler in self.listeners.get(type(event), []):
            handler(event)

    def clear(self) -> None:
        """Clear all event listeners."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Unregister all bound-method handlers that belong to ``subscriber``."""
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if getattr(h, "__self__", None) is not subscriber
            ]
