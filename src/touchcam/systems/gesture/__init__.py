"""Gesture system.

This package provides the GestureClassifier, which turns raw touches into
pan and pinch-zoom gestures while tracking finger identity.
"""

from touchcam.systems.gesture.classifier import Classification, GestureClassifier, GestureState

__all__ = ["Classification", "GestureClassifier", "GestureState"]
