"""Immutable snapshot of the gesture configuration."""

import time
from dataclasses import dataclass, field, replace

from .config import LOG_GESTURE_EVENTS
from .gestures import (
    BuiltInGesture,
    CustomGesture,
    FingerStateRule,
    create_custom_gesture,
    default_built_in_gestures,
)
from .landmarks import Hand, is_complete


def timestamp() -> str:
    """Wall-clock time as HH:MM:SS for event prints."""
    return time.strftime('%H:%M:%S')


def _log(message: str) -> None:
    if LOG_GESTURE_EVENTS:
        print(f"[{timestamp()}] {message}")


@dataclass(frozen=True)
class GestureSet:
    """
    Built-in and custom gesture definitions at one point in time.

    Every change returns a new GestureSet; a no-op change (unknown id,
    unusable input) returns the same object.
    """
    built_in_gestures: tuple[BuiltInGesture, ...] = field(default_factory=default_built_in_gestures)
    custom_gestures: tuple[CustomGesture, ...] = ()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def enabled_built_in_ids(self) -> frozenset[str]:
        return frozenset(g.id for g in self.built_in_gestures if g.enabled)

    def get_custom_gesture(self, gesture_id: str) -> CustomGesture | None:
        for gesture in self.custom_gestures:
            if gesture.id == gesture_id:
                return gesture
        return None

    def find_custom_gesture(self, name: str) -> CustomGesture | None:
        """First custom gesture (in definition order) with this name."""
        for gesture in self.custom_gestures:
            if gesture.name == name:
                return gesture
        return None

    # -------------------------------------------------------------------------
    # Built-in gestures
    # -------------------------------------------------------------------------

    def set_built_in_enabled(self, gesture_id: str, enabled: bool) -> "GestureSet":
        changed = False
        updated = []
        for gesture in self.built_in_gestures:
            if gesture.id == gesture_id and gesture.enabled != enabled:
                gesture = replace(gesture, enabled=enabled)
                changed = True
            updated.append(gesture)

        if not changed:
            return self
        _log(f"Built-in {gesture_id}: {'ENABLED' if enabled else 'DISABLED'}")
        return replace(self, built_in_gestures=tuple(updated))

    def toggle_built_in_gesture(self, gesture_id: str) -> "GestureSet":
        for gesture in self.built_in_gestures:
            if gesture.id == gesture_id:
                return self.set_built_in_enabled(gesture_id, not gesture.enabled)
        return self

    # -------------------------------------------------------------------------
    # Custom gestures
    # -------------------------------------------------------------------------

    def add_custom_gesture(self, gesture: CustomGesture) -> "GestureSet":
        if self.get_custom_gesture(gesture.id) is not None:
            return self
        kind = "finger states" if isinstance(gesture.rule, FingerStateRule) else f"{len(gesture.samples)} samples"
        _log(f"Custom gesture added: {gesture.name!r} ({kind})")
        return replace(self, custom_gestures=self.custom_gestures + (gesture,))

    def remove_custom_gesture(self, gesture_id: str) -> "GestureSet":
        remaining = tuple(g for g in self.custom_gestures if g.id != gesture_id)
        if len(remaining) == len(self.custom_gestures):
            return self
        _log(f"Custom gesture removed: {gesture_id}")
        return replace(self, custom_gestures=remaining)

    def append_sample(self, gesture_id: str, hand: Hand) -> "GestureSet":
        """Add an exemplar to a sample-based gesture, keeping its position in the list."""
        target = self.get_custom_gesture(gesture_id)
        if target is None or not is_complete(hand):
            return self

        updated = target.with_sample(hand)
        if updated is target:
            return self

        _log(f"Sample added: {target.name!r} now has {len(updated.samples)} samples")
        return replace(self, custom_gestures=tuple(
            updated if g.id == gesture_id else g for g in self.custom_gestures
        ))

    def capture_sample(self, name: str, hand: Hand) -> "GestureSet":
        """
        Record the live hand as an exemplar of the gesture called `name`.

        Appends to the first sample-based gesture with that name, or creates a
        new one-sample gesture when none exists.
        """
        name = name.strip()
        if not name or not is_complete(hand):
            return self

        for gesture in self.custom_gestures:
            if gesture.name == name and not isinstance(gesture.rule, FingerStateRule):
                return self.append_sample(gesture.id, hand)
        return self.add_custom_gesture(create_custom_gesture(name, samples=[hand]))
