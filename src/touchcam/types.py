"""Custom types, enumerations and small vector helpers.

Positions are plain tuples: screen and world points are ``(x, y)`` and the
camera position is ``(x, y, z)``. The helpers below keep the arithmetic on
those tuples in one place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, TypedDict

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class TouchPhase(Enum):
    """Lifecycle phase of a single finger on the screen."""

    BEGAN = auto()
    MOVED = auto()
    STATIONARY = auto()
    ENDED = auto()
    CANCELED = auto()


class GestureMode(Enum):
    """Gesture resolved for the current touch sequence."""

    IDLE = auto()
    PANNING = auto()
    ZOOMING = auto()
    SUSPENDED = auto()


@dataclass(frozen=True)
class TouchPoint:
    """One finger as reported by the host for a single tick.

    Attributes:
        finger_id: Identifier that stays stable while the finger is down.
        position: Screen position in pixels.
        delta_position: Screen movement since the previous tick.
        delta_time: Seconds elapsed since the previous report of this finger.
        phase: Lifecycle phase for this tick.
    """

    finger_id: int
    position: Vec2
    delta_position: Vec2 = (0.0, 0.0)
    delta_time: float = 0.0
    phase: TouchPhase = TouchPhase.MOVED


class OrthographicCamera(Protocol):
    """Camera collaborator driven by the controller.

    The controller reads and writes ``position`` and
    ``orthographic_half_height`` only. ``aspect`` is read once at session
    start to derive the bounds extent.
    """

    position: Vec3
    orthographic_half_height: float

    @property
    def aspect(self) -> float:
        """Viewport width divided by viewport height."""
        ...

    def screen_to_world(self, x: float, y: float) -> Vec2:
        """Project a screen point to world coordinates."""
        ...


class CameraStateDict(TypedDict):
    """TypedDict for camera state serialization."""

    position: list[float]
    orthographic_half_height: float


def magnitude(vector: Vec2) -> float:
    """Return the Euclidean length of a 2D vector."""
    return math.hypot(vector[0], vector[1])


def normalize(vector: Vec2) -> Vec2:
    """Return the unit vector of ``vector``, or ``(0, 0)`` for a zero vector."""
    length = magnitude(vector)
    if length == 0:
        return (0.0, 0.0)
    return (vector[0] / length, vector[1] / length)


def subtract(a: Vec2, b: Vec2) -> Vec2:
    """Return ``a - b``."""
    return (a[0] - b[0], a[1] - b[1])
