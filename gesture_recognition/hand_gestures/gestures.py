"""Built-in and custom gesture definitions and their matchers."""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Iterable, Sequence

import numpy as np

from .config import (
    SIMILARITY_THRESHOLD,
    FIST_MAX_FINGER_CURL,
    THUMBS_UP_MIN_THUMB_CURL,
)
from .features import FingerCurls, FingerState, finger_state
from .landmarks import Hand, is_complete
from .similarity import cosine_similarity, normalize


NO_GESTURE = "none"


# =============================================================================
# BUILT-IN GESTURES
# =============================================================================

@dataclass(frozen=True)
class BuiltInGesture:
    """One of the fixed rule-based gestures; only `enabled` ever changes."""
    id: str
    display_name: str
    enabled: bool = True


@dataclass(frozen=True)
class BuiltInRule:
    gesture_id: str
    condition: Callable[[FingerState], bool]
    curl_gate: Callable[[FingerCurls], bool] | None = None


# Evaluated top to bottom, first satisfied rule wins
BUILT_IN_RULES: tuple[BuiltInRule, ...] = (
    BuiltInRule(
        "open_hand",
        lambda s: s.index and s.middle and s.ring and s.pinky,
    ),
    BuiltInRule(
        "closed_fist",
        lambda s: not (s.index or s.middle or s.ring or s.pinky or s.thumb),
        lambda c: max(c.index, c.middle, c.ring, c.pinky) < FIST_MAX_FINGER_CURL,
    ),
    BuiltInRule(
        "pointing",
        lambda s: s.index and not (s.middle or s.ring or s.pinky),
    ),
    BuiltInRule(
        "victory",
        lambda s: s.index and s.middle and not (s.ring or s.pinky),
    ),
    BuiltInRule(
        "thumbs_up",
        lambda s: s.thumb and not (s.index or s.middle or s.ring or s.pinky),
        lambda c: c.thumb > THUMBS_UP_MIN_THUMB_CURL,
    ),
)

BUILT_IN_DISPLAY_NAMES = {
    "open_hand": "Open Hand",
    "closed_fist": "Closed Fist",
    "pointing": "Pointing",
    "victory": "Victory Sign",
    "thumbs_up": "Thumbs Up",
}


def default_built_in_gestures() -> tuple[BuiltInGesture, ...]:
    """The five built-in gestures, all enabled, in priority order."""
    return tuple(
        BuiltInGesture(id=rule.gesture_id, display_name=BUILT_IN_DISPLAY_NAMES[rule.gesture_id])
        for rule in BUILT_IN_RULES
    )


def match_built_in(
    state: FingerState | None,
    enabled_ids: Iterable[str],
    curls: FingerCurls | None = None,
) -> str:
    """
    Run the built-in priority table.

    Args:
        state: Finger state of the live hand (None if there is no hand)
        enabled_ids: Ids of the built-ins currently enabled
        curls: Optional curl magnitudes; when given, rules with a curl gate
            must also pass it

    Returns:
        Id of the first enabled rule that fires, or NO_GESTURE
    """
    if state is None:
        return NO_GESTURE

    enabled = set(enabled_ids)
    for rule in BUILT_IN_RULES:
        if rule.gesture_id not in enabled or not rule.condition(state):
            continue
        if curls is not None and rule.curl_gate is not None and not rule.curl_gate(curls):
            continue
        return rule.gesture_id
    return NO_GESTURE


# =============================================================================
# CUSTOM GESTURES
# =============================================================================

@dataclass(frozen=True)
class FingerStateRule:
    """Matches when the live finger state equals the target exactly."""
    target: FingerState

    def matches(self, state: FingerState) -> bool:
        return state == self.target


@dataclass(frozen=True)
class SampleSetRule:
    """Matches when any stored exemplar is similar enough to the live hand."""
    samples: tuple[Hand, ...] = ()
    features: tuple[np.ndarray, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "features", tuple(normalize(s) for s in self.samples))

    def with_sample(self, hand: Hand) -> "SampleSetRule":
        return SampleSetRule(self.samples + (hand,))

    def matches(self, live: np.ndarray) -> bool:
        """First-match scan over exemplars in stored order."""
        return any(cosine_similarity(live, f) > SIMILARITY_THRESHOLD for f in self.features)


GestureRule = FingerStateRule | SampleSetRule


@dataclass(frozen=True)
class CustomGesture:
    """A user-defined gesture, matched by finger state or by exemplar similarity."""
    id: str
    name: str
    rule: GestureRule
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    @property
    def target_finger_state(self) -> FingerState | None:
        return self.rule.target if isinstance(self.rule, FingerStateRule) else None

    @property
    def samples(self) -> tuple[Hand, ...]:
        return self.rule.samples if isinstance(self.rule, SampleSetRule) else ()

    def with_sample(self, hand: Hand) -> "CustomGesture":
        """Copy with `hand` appended to the exemplars; finger-state gestures are returned as is."""
        if not isinstance(self.rule, SampleSetRule):
            return self
        return replace(self, rule=self.rule.with_sample(hand))


def create_custom_gesture(
    name: str,
    target_finger_state: FingerState | None = None,
    samples: Sequence[Hand] | None = None,
) -> CustomGesture:
    """
    Define a new custom gesture with a freshly generated id.

    A target finger state takes precedence; otherwise the gesture matches by
    samples. A gesture with neither never matches.

    Raises:
        ValueError: if name is blank
    """
    name = name.strip()
    if not name:
        raise ValueError("Custom gesture name must not be empty")

    rule: GestureRule
    if target_finger_state is not None:
        rule = FingerStateRule(target_finger_state)
    else:
        rule = SampleSetRule(tuple(samples or ()))
    return CustomGesture(id=uuid.uuid4().hex, name=name, rule=rule)


def match_custom(
    hand: Hand,
    gestures: Iterable[CustomGesture],
    state: FingerState | None = None,
    live: np.ndarray | None = None,
) -> str | None:
    """
    Find the first custom gesture (in definition order) that the hand matches.

    Args:
        hand: Live hand with the full skeleton
        gestures: Custom gestures in stored order
        state: Precomputed finger state of `hand`, computed lazily if omitted
        live: Precomputed normalized vector of `hand`, computed lazily if omitted

    Returns:
        Name of the matching gesture, or None (always None for an incomplete hand)
    """
    if not is_complete(hand):
        return None

    for gesture in gestures:
        rule = gesture.rule
        if isinstance(rule, FingerStateRule):
            if state is None:
                state = finger_state(hand)
            if rule.matches(state):
                return gesture.name
        elif rule.features:
            if live is None:
                live = normalize(hand)
            if rule.matches(live):
                return gesture.name
    return None
