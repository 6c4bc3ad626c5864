"""Hand skeleton topology and landmark containers."""

from dataclasses import dataclass
from typing import Any, NamedTuple, Sequence

from .config import NUM_LANDMARKS


# MediaPipe landmark indices
class LM:
    WRIST = 0
    THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
    INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
    MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
    RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
    PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20


FINGER_NAMES = ("thumb", "index", "middle", "ring", "pinky")

# Base -> tip chain per finger
FINGER_CHAINS: dict[str, tuple[int, int, int, int]] = {
    "thumb": (LM.THUMB_CMC, LM.THUMB_MCP, LM.THUMB_IP, LM.THUMB_TIP),
    "index": (LM.INDEX_MCP, LM.INDEX_PIP, LM.INDEX_DIP, LM.INDEX_TIP),
    "middle": (LM.MIDDLE_MCP, LM.MIDDLE_PIP, LM.MIDDLE_DIP, LM.MIDDLE_TIP),
    "ring": (LM.RING_MCP, LM.RING_PIP, LM.RING_DIP, LM.RING_TIP),
    "pinky": (LM.PINKY_MCP, LM.PINKY_PIP, LM.PINKY_DIP, LM.PINKY_TIP),
}

FINGERTIPS = tuple(chain[-1] for chain in FINGER_CHAINS.values())

HAND_CONNECTIONS: list[tuple[int, int]] = [
    # thumb
    (0, 1), (1, 2), (2, 3), (3, 4),
    # index
    (0, 5), (5, 6), (6, 7), (7, 8),
    # middle
    (5, 9), (9, 10), (10, 11), (11, 12),
    # ring
    (9, 13), (13, 14), (14, 15), (15, 16),
    # pinky
    (13, 17), (17, 18), (18, 19), (19, 20),
    # palm base
    (0, 17),
]


class Landmark(NamedTuple):
    """A single hand keypoint in normalized image coordinates (z = relative depth)."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class Hand:
    """Landmarks for one detected hand in a single frame."""
    landmarks: tuple[Landmark, ...]
    handedness: str = "Right"

    def __len__(self) -> int:
        return len(self.landmarks)

    def __getitem__(self, idx: int) -> Landmark:
        return self.landmarks[idx]


def is_complete(hand: Hand | None) -> bool:
    """True if the hand carries exactly the full 21-point skeleton."""
    return hand is not None and len(hand.landmarks) == NUM_LANDMARKS


def _to_landmark(point: Any) -> Landmark:
    if hasattr(point, "x"):
        return Landmark(float(point.x), float(point.y), float(getattr(point, "z", 0.0)))
    if len(point) == 2:
        return Landmark(float(point[0]), float(point[1]))
    return Landmark(float(point[0]), float(point[1]), float(point[2]))


def hand_from_landmarks(points: Sequence[Any], handedness: str = "Right") -> Hand:
    """
    Build a Hand from raw landmark points.

    Args:
        points: Objects exposing .x/.y/.z (e.g. MediaPipe NormalizedLandmark)
            or plain (x, y) / (x, y, z) tuples
        handedness: "Left" or "Right"

    Returns:
        Hand with float coordinates; the point count is not validated here
    """
    return Hand(landmarks=tuple(_to_landmark(p) for p in points), handedness=handedness)
