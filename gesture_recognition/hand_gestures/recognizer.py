"""Per-frame gesture recognition over an atomically swapped gesture configuration."""

import threading
from typing import Callable, Iterable

from .config import USE_CURL_GATING
from .features import finger_curls, finger_state
from .gesture_set import GestureSet
from .gestures import NO_GESTURE, CustomGesture, match_built_in, match_custom
from .landmarks import Hand, is_complete
from .similarity import normalize


class GestureRecognizer:
    """
    Classifies one hand per call into a gesture label.

    The recognizer holds a single GestureSet reference. Updates build a new
    snapshot and replace the reference in one assignment, so a classification
    in flight sees either the old or the new configuration, never a mix.
    Writers are serialized; readers never lock.
    """

    def __init__(self, gestures: GestureSet | None = None, use_curl_gating: bool = USE_CURL_GATING):
        self._gestures = gestures if gestures is not None else GestureSet()
        self._use_curl_gating = use_curl_gating
        self._write_lock = threading.Lock()

    @property
    def gestures(self) -> GestureSet:
        return self._gestures

    def set_gestures(self, gestures: GestureSet) -> None:
        """Replace the whole configuration."""
        with self._write_lock:
            self._gestures = gestures

    def _update(self, change: Callable[[GestureSet], GestureSet]) -> GestureSet:
        with self._write_lock:
            self._gestures = change(self._gestures)
            return self._gestures

    # -------------------------------------------------------------------------
    # Configuration actions
    # -------------------------------------------------------------------------

    def add_custom_gesture(self, gesture: CustomGesture) -> GestureSet:
        return self._update(lambda gs: gs.add_custom_gesture(gesture))

    def remove_custom_gesture(self, gesture_id: str) -> GestureSet:
        return self._update(lambda gs: gs.remove_custom_gesture(gesture_id))

    def toggle_built_in_gesture(self, gesture_id: str) -> GestureSet:
        return self._update(lambda gs: gs.toggle_built_in_gesture(gesture_id))

    def append_sample(self, gesture_id: str, hand: Hand) -> GestureSet:
        return self._update(lambda gs: gs.append_sample(gesture_id, hand))

    def capture_sample(self, name: str, hand: Hand) -> GestureSet:
        return self._update(lambda gs: gs.capture_sample(name, hand))

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def recognize(self, hand: Hand | None) -> str:
        """
        Classify a single hand.

        Custom gestures are tried first, in definition order; built-ins only
        run when no custom gesture matches.

        Returns:
            Custom gesture name, built-in id, or "none"
        """
        return self._recognize(hand, self._gestures)

    def recognize_all(self, hands: Iterable[Hand]) -> list[str]:
        """Classify every detected hand independently against one snapshot."""
        gestures = self._gestures
        return [self._recognize(hand, gestures) for hand in hands]

    def _recognize(self, hand: Hand | None, gestures: GestureSet) -> str:
        if not is_complete(hand):
            return NO_GESTURE

        # All landmarks on one point: no geometry to classify
        live = normalize(hand)
        if not live.any():
            return NO_GESTURE

        state = finger_state(hand)
        custom = match_custom(hand, gestures.custom_gestures, state, live)
        if custom is not None:
            return custom

        curls = finger_curls(hand) if self._use_curl_gating else None
        return match_built_in(state, gestures.enabled_built_in_ids(), curls)
