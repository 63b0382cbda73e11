"""Input system.

This package provides the MouseTouchEmulator, which turns Arcade mouse
callbacks into touch snapshots for desktop hosts.
"""

from touchcam.systems.input.mouse import MouseTouchEmulator

__all__ = ["MouseTouchEmulator"]
