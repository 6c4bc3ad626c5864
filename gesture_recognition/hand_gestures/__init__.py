"""Hand gesture recognition module."""

from .config import FingerStateMethod, NUM_LANDMARKS, SIMILARITY_THRESHOLD
from .landmarks import LM, Landmark, Hand, hand_from_landmarks, is_complete
from .features import FingerState, FingerCurls, finger_state, finger_curl, finger_curls
from .similarity import normalize, cosine_similarity
from .gestures import (
    NO_GESTURE,
    BuiltInGesture,
    CustomGesture,
    FingerStateRule,
    SampleSetRule,
    create_custom_gesture,
    default_built_in_gestures,
    match_built_in,
    match_custom,
)
from .gesture_set import GestureSet, timestamp
from .recognizer import GestureRecognizer

__all__ = [
    "FingerStateMethod",
    "NUM_LANDMARKS",
    "SIMILARITY_THRESHOLD",
    "LM",
    "Landmark",
    "Hand",
    "hand_from_landmarks",
    "is_complete",
    "FingerState",
    "FingerCurls",
    "finger_state",
    "finger_curl",
    "finger_curls",
    "normalize",
    "cosine_similarity",
    "NO_GESTURE",
    "BuiltInGesture",
    "CustomGesture",
    "FingerStateRule",
    "SampleSetRule",
    "create_custom_gesture",
    "default_built_in_gestures",
    "match_built_in",
    "match_custom",
    "GestureSet",
    "timestamp",
    "GestureRecognizer",
]
