"""Synthetic 21-point hands with each finger posed straight or curled, for tests and demos."""

import math

from .landmarks import FINGER_CHAINS, LM, Hand, Landmark
from .math_utils import Point3


WRIST: Point3 = (0.5, 0.8, 0.0)
BONE = 0.05

# Thumb runs sideways from its CMC joint; the other fingers point up the image (-y)
THUMB_BASE: Point3 = (0.45, 0.78, 0.0)
FINGER_BASE_X = {"index": 0.44, "middle": 0.48, "ring": 0.52, "pinky": 0.56}
FINGER_BASE_Y = 0.70


def _thumb_chain(extended: bool) -> list[Point3]:
    x, y, z = THUMB_BASE
    chain = [(x - k * BONE, y, z) for k in range(3)]
    if extended:
        chain.append((x - 3 * BONE, y, z))
    else:
        # Tip bends 90 degrees toward the camera at the IP joint
        chain.append((x - 2 * BONE, y, z - BONE))
    return chain


def _finger_chain(name: str, extended: bool) -> list[Point3]:
    x, y = FINGER_BASE_X[name], FINGER_BASE_Y
    if extended:
        return [(x, y - k * BONE, 0.0) for k in range(4)]
    # Folded back over the palm, tip close to the wrist
    return [(x, y, 0.0), (x, y - BONE, 0.0), (x, 0.68, -0.04), (x, 0.78, -0.02)]


def make_hand(
    thumb: bool = False,
    index: bool = False,
    middle: bool = False,
    ring: bool = False,
    pinky: bool = False,
    handedness: str = "Right",
    offset: Point3 = (0.0, 0.0, 0.0),
    scale: float = 1.0,
    rotate_deg: float = 0.0,
) -> Hand:
    """
    Build a hand with the requested fingers extended.

    The whole hand can be rotated in the image plane and scaled about the
    wrist, then translated by `offset`.
    """
    points: list[Point3] = [WRIST] * 21
    flags = {"thumb": thumb, "index": index, "middle": middle, "ring": ring, "pinky": pinky}
    for name, chain_idx in FINGER_CHAINS.items():
        chain = _thumb_chain(flags[name]) if name == "thumb" else _finger_chain(name, flags[name])
        for idx, p in zip(chain_idx, chain):
            points[idx] = p

    cos_a = math.cos(math.radians(rotate_deg))
    sin_a = math.sin(math.radians(rotate_deg))
    wx, wy, wz = points[LM.WRIST]

    landmarks = []
    for x, y, z in points:
        dx, dy, dz = x - wx, y - wy, z - wz
        rx = dx * cos_a - dy * sin_a
        ry = dx * sin_a + dy * cos_a
        landmarks.append(Landmark(
            wx + rx * scale + offset[0],
            wy + ry * scale + offset[1],
            wz + dz * scale + offset[2],
        ))
    return Hand(landmarks=tuple(landmarks), handedness=handedness)


def with_landmarks(hand: Hand, moved: dict[int, Point3]) -> Hand:
    """Copy of `hand` with selected landmark indices moved."""
    landmarks = list(hand.landmarks)
    for idx, p in moved.items():
        landmarks[idx] = Landmark(*p)
    return Hand(landmarks=tuple(landmarks), handedness=hand.handedness)
