"""Hand tracking and gesture overlay module."""

from .hand_tracker import HandTracker, handedness_label
from .visualization import GestureDisplay, draw_hand_skeleton, draw_gesture_label, draw_gesture_list

__all__ = [
    "HandTracker",
    "handedness_label",
    "GestureDisplay",
    "draw_hand_skeleton",
    "draw_gesture_label",
    "draw_gesture_list",
]
