"""Unit tests for TouchCameraManager."""

import unittest

import pytest

from touchcam.config import TouchCameraConfig
from touchcam.events import (
    BoundsReachedEvent,
    EventBus,
    GestureStartedEvent,
    InertiaStartedEvent,
    InertiaStoppedEvent,
    InertiaStopReason,
)
from touchcam.exceptions import MissingCameraError
from touchcam.systems.camera.manager import TouchCameraManager
from touchcam.systems.camera.orthographic import SimpleOrthographicCamera
from touchcam.types import GestureMode, TouchPhase, TouchPoint


def make_camera(position: tuple[float, float, float] = (0.0, 0.0, -10.0)) -> SimpleOrthographicCamera:
    """Create a 100x100 pixel camera showing 10x10 world units."""
    return SimpleOrthographicCamera(
        position=position,
        orthographic_half_height=5.0,
        viewport_width=100.0,
        viewport_height=100.0,
    )


class EventRecorder:
    """Collects every event published on a bus."""

    def __init__(self, event_bus: EventBus) -> None:
        """Subscribe to all touch camera events."""
        self.events: list = []
        for event_type in (
            BoundsReachedEvent,
            GestureStartedEvent,
            InertiaStartedEvent,
            InertiaStoppedEvent,
        ):
            event_bus.subscribe(event_type, self.events.append)

    def of_type(self, event_type: type) -> list:
        """Return recorded events of one type."""
        return [event for event in self.events if isinstance(event, event_type)]


class TestSetup(unittest.TestCase):
    """Test session start."""

    def test_missing_camera_is_fatal(self) -> None:
        """Test that a session cannot start without a camera."""
        with pytest.raises(MissingCameraError):
            TouchCameraManager(None, TouchCameraConfig())

    def test_setup_clamps_initial_position(self) -> None:
        """Test the camera is moved into the bounds at session start."""
        camera = make_camera((100.0, 0.0, -10.0))
        camera.orthographic_half_height = 2.0
        manager = TouchCameraManager(camera, TouchCameraConfig(bound_camera=True, bounds_size=(10.0, 10.0)))

        manager.setup()

        assert camera.position == (3.0, 0.0, -10.0)

    def test_setup_applies_default_zoom_after_fixing_extent(self) -> None:
        """Test the bounds extent comes from the starting zoom, not the default zoom."""
        camera = make_camera()
        camera.orthographic_half_height = 2.0
        config = TouchCameraConfig(
            bound_camera=True,
            bounds_size=(10.0, 10.0),
            allow_zooming=True,
            default_zoom=7.0,
        )
        manager = TouchCameraManager(camera, config)

        manager.setup()

        assert camera.orthographic_half_height == 7.0
        assert manager.motion is not None
        assert manager.motion.bounds.half_extent == (2.0, 2.0)

    def test_setup_without_zooming_keeps_zoom(self) -> None:
        """Test the default zoom only applies when zooming is allowed."""
        camera = make_camera()
        TouchCameraManager(camera, TouchCameraConfig(default_zoom=7.0)).setup()

        assert camera.orthographic_half_height == 5.0

    def test_config_defaults_to_settings(self) -> None:
        """Test the config is read from settings when none is given."""
        manager = TouchCameraManager(make_camera())

        assert manager.config == TouchCameraConfig.from_settings()

    def test_update_sets_up_lazily(self) -> None:
        """Test the first tick starts the session when setup() was not called."""
        manager = TouchCameraManager(make_camera(), TouchCameraConfig())

        manager.update(0.016, [])

        assert manager.motion is not None


class TestUpdate(unittest.TestCase):
    """Test per-tick behavior."""

    def setUp(self) -> None:
        """Create a zoom-enabled, unbounded session."""
        self.camera = make_camera()
        self.event_bus = EventBus()
        self.recorder = EventRecorder(self.event_bus)
        self.config = TouchCameraConfig(
            panning_speed=1.0,
            pan_threshold=0.2,
            allow_zooming=True,
            zoom_threshold=0.2,
            zooming_speed=1.0,
            default_zoom=5.0,
        )
        self.manager = TouchCameraManager(self.camera, self.config, self.event_bus)
        self.manager.setup()

    def drag_and_release(self) -> None:
        """Drag finger 0 one unit to the right and lift it."""
        self.manager.update(0.01, [TouchPoint(0, (50.0, 50.0), (0.0, 0.0), 0.01, TouchPhase.BEGAN)])
        self.manager.update(0.01, [TouchPoint(0, (60.0, 50.0), (10.0, 0.0), 0.01, TouchPhase.MOVED)])
        self.manager.update(0.01, [TouchPoint(0, (60.0, 50.0), (0.0, 0.0), 0.01, TouchPhase.ENDED)])

    def test_pan_threshold_scenario(self) -> None:
        """Test a small drag is absorbed and a longer one pans."""
        self.manager.update(0.016, [TouchPoint(0, (50.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN)])
        self.manager.update(0.016, [TouchPoint(0, (50.5, 50.0), (0.5, 0.0), 0.016, TouchPhase.MOVED)])

        assert self.camera.position == (0.0, 0.0, -10.0)
        assert self.manager.gesture is GestureMode.PANNING

        self.manager.update(0.016, [TouchPoint(0, (52.0, 50.0), (1.5, 0.0), 0.016, TouchPhase.MOVED)])

        assert self.camera.position[0] == pytest.approx(-0.2)
        assert self.camera.position[1] == pytest.approx(0.0)

    def test_release_eases_in_same_tick(self) -> None:
        """Test the inertia started on release already moves the camera that tick."""
        self.drag_and_release()

        motion = self.manager.motion
        assert motion is not None
        assert motion.inertia.active is True
        assert self.camera.position[0] == pytest.approx(-1.02)
        assert len(self.recorder.of_type(InertiaStartedEvent)) == 1

    def test_inertia_continues_without_touches(self) -> None:
        """Test easing keeps moving the camera on empty ticks until it retires."""
        self.drag_and_release()
        previous_x = self.camera.position[0]

        self.manager.update(0.01, [])

        assert self.camera.position[0] < previous_x

        for _ in range(20):
            self.manager.update(0.01, [])

        motion = self.manager.motion
        assert motion is not None
        assert motion.inertia.active is False
        assert self.recorder.of_type(InertiaStoppedEvent) == [InertiaStoppedEvent(InertiaStopReason.FINISHED)]

    def test_new_pan_cancels_inertia(self) -> None:
        """Test a new gesture cancels easing immediately."""
        self.drag_and_release()

        self.manager.update(0.01, [TouchPoint(1, (30.0, 30.0), (0.0, 0.0), 0.01, TouchPhase.BEGAN)])

        motion = self.manager.motion
        assert motion is not None
        assert motion.inertia.active is False
        assert self.recorder.of_type(InertiaStoppedEvent) == [InertiaStoppedEvent(InertiaStopReason.NEW_GESTURE)]

    def test_gesture_started_event(self) -> None:
        """Test gesture start is published with the finger and anchor."""
        self.manager.update(0.016, [TouchPoint(7, (60.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN)])

        events = self.recorder.of_type(GestureStartedEvent)
        assert len(events) == 1
        assert events[0].finger_id == 7
        assert events[0].mode is GestureMode.PANNING
        assert events[0].world_position == pytest.approx((1.0, 0.0))

    def test_pinch_scenario(self) -> None:
        """Test pinching together by 1.0 raises the half-height by 0.01."""
        self.manager.update(
            0.016,
            [
                TouchPoint(0, (40.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN),
                TouchPoint(1, (61.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN),
            ],
        )
        self.manager.update(
            0.016,
            [
                TouchPoint(0, (40.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.STATIONARY),
                TouchPoint(1, (60.0, 50.0), (-1.0, 0.0), 0.016, TouchPhase.MOVED),
            ],
        )

        assert self.manager.gesture is GestureMode.ZOOMING
        assert self.camera.orthographic_half_height == pytest.approx(5.01)
        assert self.camera.position == (0.0, 0.0, -10.0)

    def test_three_touches_change_nothing(self) -> None:
        """Test a three-finger tick leaves position and zoom alone."""
        self.manager.update(0.016, [TouchPoint(0, (50.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN)])

        self.manager.update(
            0.016,
            [
                TouchPoint(0, (95.0, 5.0), (45.0, -45.0), 0.016, TouchPhase.MOVED),
                TouchPoint(1, (5.0, 95.0), (-30.0, 30.0), 0.016, TouchPhase.MOVED),
                TouchPoint(2, (50.0, 90.0), (0.0, 40.0), 0.016, TouchPhase.MOVED),
            ],
        )

        assert self.camera.position == (0.0, 0.0, -10.0)
        assert self.camera.orthographic_half_height == 5.0

    def test_stop_all_motion(self) -> None:
        """Test stopping cancels easing and suspends the gesture."""
        self.drag_and_release()

        self.manager.stop_all_motion()

        motion = self.manager.motion
        assert motion is not None
        assert motion.inertia.active is False
        assert self.manager.gesture is GestureMode.SUSPENDED

        self.manager.update(0.016, [TouchPoint(2, (50.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN)])

        assert self.manager.gesture is GestureMode.PANNING

    def test_cleanup_resets_session(self) -> None:
        """Test cleanup forgets gesture and motion state."""
        self.drag_and_release()

        self.manager.cleanup()

        assert self.manager.motion is None
        assert self.manager.gesture is GestureMode.IDLE
        assert self.manager.classifier.state.tracked_finger_id is None


class TestBoundedSession(unittest.TestCase):
    """Test a session with bounds enabled."""

    def setUp(self) -> None:
        """Create a session bounded to 10x10 units around the origin."""
        self.camera = make_camera()
        self.camera.orthographic_half_height = 2.0
        self.event_bus = EventBus()
        self.recorder = EventRecorder(self.event_bus)
        config = TouchCameraConfig(bound_camera=True, bounds_size=(10.0, 10.0), pan_threshold=0.0)
        self.manager = TouchCameraManager(self.camera, config, self.event_bus)
        self.manager.setup()

    def test_pan_is_clamped(self) -> None:
        """Test dragging far never moves the camera past the bounds."""
        self.manager.update(0.016, [TouchPoint(0, (50.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN)])
        self.manager.update(0.016, [TouchPoint(0, (0.0, 50.0), (-50.0, 0.0), 0.016, TouchPhase.MOVED)])

        assert self.camera.position == (3.0, 0.0, -10.0)
        assert self.recorder.of_type(BoundsReachedEvent) == [BoundsReachedEvent((3.0, 0.0, -10.0))]

    def test_release_at_bounds_stops_easing(self) -> None:
        """Test easing that pushes into the bounds is interrupted."""
        self.manager.update(0.016, [TouchPoint(0, (50.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.BEGAN)])
        self.manager.update(0.016, [TouchPoint(0, (0.0, 50.0), (-50.0, 0.0), 0.016, TouchPhase.MOVED)])
        self.manager.update(0.016, [TouchPoint(0, (0.0, 50.0), (0.0, 0.0), 0.016, TouchPhase.ENDED)])

        motion = self.manager.motion
        assert motion is not None
        assert motion.inertia.active is False
        assert self.camera.position == (3.0, 0.0, -10.0)
        assert InertiaStoppedEvent(InertiaStopReason.BOUNDS) in self.recorder.events


class TestState(unittest.TestCase):
    """Test get_state and restore_state."""

    def test_get_state(self) -> None:
        """Test the saved state holds position and zoom."""
        manager = TouchCameraManager(make_camera((1.0, 2.0, -10.0)), TouchCameraConfig())

        assert manager.get_state() == {"position": [1.0, 2.0, -10.0], "orthographic_half_height": 5.0}

    def test_restore_state_clamps(self) -> None:
        """Test restored values respect bounds and zoom range."""
        camera = make_camera()
        camera.orthographic_half_height = 2.0
        config = TouchCameraConfig(bound_camera=True, bounds_size=(10.0, 10.0), max_zoom_out=15.0)
        manager = TouchCameraManager(camera, config)
        manager.setup()

        manager.restore_state({"position": [9.0, -1.0, -10.0], "orthographic_half_height": 40.0})

        assert camera.position == (3.0, -1.0, -10.0)
        assert camera.orthographic_half_height == 15.0
