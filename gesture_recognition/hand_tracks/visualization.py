"""Visualization utilities for gesture recognition."""

import cv2
import numpy as np
from numpy.typing import NDArray

from ..hand_gestures.gesture_set import GestureSet
from ..hand_gestures.gestures import NO_GESTURE
from ..hand_gestures.landmarks import FINGERTIPS, HAND_CONNECTIONS, Hand


FONT = cv2.FONT_HERSHEY_SIMPLEX
COLOR_BONE = (184, 163, 148)
COLOR_JOINT = (233, 165, 14)
COLOR_TIP = (212, 182, 6)
COLOR_GREEN = (0, 255, 0)
COLOR_GRAY = (150, 150, 150)
COLOR_WHITE = (255, 255, 255)


def draw_hand_skeleton(frame: NDArray[np.uint8], hand: Hand) -> None:
    """Draw bones and joints of one hand, fingertips larger."""
    h, w = frame.shape[:2]
    pts = [(int(lm.x * w), int(lm.y * h)) for lm in hand.landmarks]

    for a, b in HAND_CONNECTIONS:
        if a < len(pts) and b < len(pts):
            cv2.line(frame, pts[a], pts[b], COLOR_BONE, 2, cv2.LINE_AA)

    for i, pt in enumerate(pts):
        if i in FINGERTIPS:
            cv2.circle(frame, pt, 6, COLOR_TIP, -1, lineType=cv2.LINE_AA)
        else:
            cv2.circle(frame, pt, 4, COLOR_JOINT, -1, lineType=cv2.LINE_AA)


def draw_gesture_label(frame: NDArray[np.uint8], label: str, confidence: float) -> None:
    """Draw the current gesture and the detector's confidence."""
    if label == NO_GESTURE:
        cv2.putText(frame, "No gesture", (10, 30), FONT, 0.8, COLOR_GRAY, 2)
    else:
        cv2.putText(frame, label, (10, 30), FONT, 0.9, COLOR_GREEN, 2)
    cv2.putText(frame, f"Confidence: {confidence:.2f}", (10, 60), FONT, 0.6, COLOR_GRAY, 2)


def draw_gesture_list(
    frame: NDArray[np.uint8],
    gestures: GestureSet,
    active: str,
    y_start: int = 95,
) -> None:
    """List built-in (numbered, with enabled state) and custom gestures, highlighting the active one."""
    y = y_start
    for i, gesture in enumerate(gestures.built_in_gestures, start=1):
        status = "on" if gesture.enabled else "off"
        color = COLOR_GREEN if gesture.id == active else (COLOR_WHITE if gesture.enabled else COLOR_GRAY)
        cv2.putText(frame, f"{i} {gesture.display_name} [{status}]", (10, y), FONT, 0.5, color, 1)
        y += 20

    for gesture in gestures.custom_gestures:
        color = COLOR_GREEN if gesture.name == active else COLOR_WHITE
        detail = "fingers" if gesture.target_finger_state is not None else f"{len(gesture.samples)} samples"
        cv2.putText(frame, f"* {gesture.name} ({detail})", (10, y), FONT, 0.5, color, 1)
        y += 20


class GestureDisplay:
    """Manages OpenCV window and visualization."""

    def __init__(self, window_name: str = "Hand Gesture Recognition"):
        self.window_name = window_name
        cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)

    def render(
        self,
        frame: NDArray[np.uint8],
        hands: list[Hand],
        label: str,
        confidence: float,
        gestures: GestureSet,
    ) -> None:
        """Draw all visualizations on frame."""
        for hand in hands:
            draw_hand_skeleton(frame, hand)
        draw_gesture_label(frame, label, confidence)
        draw_gesture_list(frame, gestures, label)

    def show(self, frame: NDArray[np.uint8]) -> int:
        """Display frame and return key press."""
        cv2.imshow(self.window_name, frame)
        return cv2.waitKey(1) & 0xFF

    def close(self) -> None:
        """Close display window."""
        cv2.destroyWindow(self.window_name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
