"""Hand gesture recognition and tracking package.

The classifier core lives in `hand_gestures` and has no camera or MediaPipe
dependency; `hand_tracks` wraps MediaPipe Hands and OpenCV drawing and is
imported explicitly by callers that need it.
"""

from .hand_gestures import (
    NO_GESTURE,
    Hand,
    Landmark,
    FingerState,
    CustomGesture,
    BuiltInGesture,
    GestureSet,
    GestureRecognizer,
    create_custom_gesture,
    hand_from_landmarks,
)

__version__ = "0.1.0"

__all__ = [
    "NO_GESTURE",
    "Hand",
    "Landmark",
    "FingerState",
    "CustomGesture",
    "BuiltInGesture",
    "GestureSet",
    "GestureRecognizer",
    "create_custom_gesture",
    "hand_from_landmarks",
]
