"""Finger state and curl extraction from hand landmarks."""

from dataclasses import astuple, dataclass

from .math_utils import bend_angle_deg, clamp, dist3
from .landmarks import FINGER_CHAINS, FINGER_NAMES, LM, Hand, is_complete
from .config import (
    FingerStateMethod,
    FINGER_STATE_METHOD,
    FINGER_STRAIGHT_MAX_ANGLE_DEG,
    FINGER_EXT_TIP_BASE_RATIO,
    CURL_HAND_SIZE_SCALE,
)


# (MCP, PIP, TIP) joints used for the bend angle; the thumb uses MCP, IP, TIP
BEND_JOINTS: dict[str, tuple[int, int, int]] = {
    "thumb": (LM.THUMB_MCP, LM.THUMB_IP, LM.THUMB_TIP),
    "index": (LM.INDEX_MCP, LM.INDEX_PIP, LM.INDEX_TIP),
    "middle": (LM.MIDDLE_MCP, LM.MIDDLE_PIP, LM.MIDDLE_TIP),
    "ring": (LM.RING_MCP, LM.RING_PIP, LM.RING_TIP),
    "pinky": (LM.PINKY_MCP, LM.PINKY_PIP, LM.PINKY_TIP),
}


@dataclass(frozen=True)
class FingerState:
    """Extended (True) / curled (False) flag per finger."""
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool

    @property
    def extended_count(self) -> int:
        return sum(astuple(self))

    def as_dict(self) -> dict[str, bool]:
        return dict(zip(FINGER_NAMES, astuple(self)))


@dataclass(frozen=True)
class FingerCurls:
    """Tip-to-wrist distance per finger relative to hand size, 0 (on the palm) .. 1 (far)."""
    thumb: float
    index: float
    middle: float
    ring: float
    pinky: float


def finger_bend_angles(hand: Hand) -> dict[str, float]:
    """Bend angle per finger in degrees (0 = perfectly straight)."""
    lm = hand.landmarks
    return {
        name: bend_angle_deg(lm[mcp], lm[pip], lm[tip])
        for name, (mcp, pip, tip) in BEND_JOINTS.items()
    }


def _is_extended_by_angle(hand: Hand) -> dict[str, bool]:
    return {
        name: angle < FINGER_STRAIGHT_MAX_ANGLE_DEG
        for name, angle in finger_bend_angles(hand).items()
    }


def _is_extended_by_distance(hand: Hand) -> dict[str, bool]:
    lm = hand.landmarks
    wrist = lm[LM.WRIST]
    states = {}
    for name, chain in FINGER_CHAINS.items():
        base, tip = lm[chain[0]], lm[chain[-1]]
        states[name] = dist3(tip, base) > dist3(base, wrist) * FINGER_EXT_TIP_BASE_RATIO
    return states


def finger_state(hand: Hand, method: FingerStateMethod | None = None) -> FingerState:
    """
    Classify each finger as extended or curled.

    Args:
        hand: Hand with the full 21-point skeleton
        method: Extraction method, defaults to FINGER_STATE_METHOD

    Returns:
        FingerState with one flag per finger

    Raises:
        ValueError: if the hand does not carry exactly 21 landmarks
    """
    if not is_complete(hand):
        raise ValueError("finger_state needs a hand with the full 21-point skeleton")

    method = method or FINGER_STATE_METHOD
    if method == FingerStateMethod.DISTANCE_RATIO:
        states = _is_extended_by_distance(hand)
    else:
        states = _is_extended_by_angle(hand)
    return FingerState(**states)


def finger_curl(hand: Hand, tip_idx: int) -> float:
    """Curl magnitude of one fingertip, clamped to [0, 1]."""
    lm = hand.landmarks
    hand_size = dist3(lm[LM.WRIST], lm[LM.MIDDLE_MCP])
    dist_to_palm = dist3(lm[tip_idx], lm[LM.WRIST])
    return clamp(dist_to_palm / (hand_size * CURL_HAND_SIZE_SCALE + 1e-9), 0.0, 1.0)


def finger_curls(hand: Hand) -> FingerCurls:
    return FingerCurls(**{
        name: finger_curl(hand, chain[-1]) for name, chain in FINGER_CHAINS.items()
    })
