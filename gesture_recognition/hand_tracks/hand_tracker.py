"""MediaPipe hand tracking wrapper."""

import cv2
import mediapipe as mp
import numpy as np
from numpy.typing import NDArray

from ..hand_gestures.config import (
    MAX_NUM_HANDS,
    MIN_DETECTION_CONFIDENCE,
    MIN_TRACKING_CONFIDENCE,
    INVERT_HANDEDNESS,
)
from ..hand_gestures.landmarks import Hand, hand_from_landmarks


def handedness_label(handedness, invert: bool = INVERT_HANDEDNESS) -> str:
    """Extract "Left"/"Right" from a MediaPipe handedness entry, optionally swapped."""
    try:
        lbl = handedness.classification[0].label
    except (AttributeError, IndexError):
        return "Right"

    lbl = "Left" if lbl == "Left" else "Right"
    if invert:
        return {"Left": "Right", "Right": "Left"}[lbl]
    return lbl


class HandTracker:
    """Wrapper for MediaPipe hand tracking that yields Hand values."""

    def __init__(
        self,
        max_num_hands: int = MAX_NUM_HANDS,
        min_detection_confidence: float = MIN_DETECTION_CONFIDENCE,
        min_tracking_confidence: float = MIN_TRACKING_CONFIDENCE,
        invert_handedness: bool = INVERT_HANDEDNESS,
    ):
        self._mp_hands = mp.solutions.hands
        self._hands = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=1,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._invert_handedness = invert_handedness
        self._last_results = None

    def process(self, frame: NDArray[np.uint8]) -> None:
        """Process frame for hand detection."""
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        self._last_results = self._hands.process(rgb)

    def detect(self, frame: NDArray[np.uint8]) -> list[Hand]:
        """Detect hands in a BGR frame, in MediaPipe's detection order."""
        self.process(frame)

        if not self._last_results or not self._last_results.multi_hand_landmarks:
            return []

        handedness_list = self._last_results.multi_handedness or []
        hands = []
        for i, hand_landmarks in enumerate(self._last_results.multi_hand_landmarks):
            label = "Right"
            if i < len(handedness_list):
                label = handedness_label(handedness_list[i], self._invert_handedness)
            hands.append(hand_from_landmarks(hand_landmarks.landmark, label))
        return hands

    @property
    def detection_confidence(self) -> float:
        """Handedness score of the first detected hand in the last frame, 0 if none."""
        if not self._last_results or not self._last_results.multi_handedness:
            return 0.0
        try:
            return float(self._last_results.multi_handedness[0].classification[0].score)
        except (AttributeError, IndexError):
            return 0.0

    def close(self) -> None:
        """Release resources."""
        self._hands.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
