"""Tests for finger state and curl extraction."""

import unittest

from gesture_recognition.hand_gestures.config import FingerStateMethod
from gesture_recognition.hand_gestures.features import (
    FingerState,
    finger_bend_angles,
    finger_curl,
    finger_curls,
    finger_state,
)
from gesture_recognition.hand_gestures.landmarks import LM, Hand, Landmark
from gesture_recognition.hand_gestures.math_utils import angle_between_deg, bend_angle_deg
from gesture_recognition.hand_gestures.synthetic_hands import make_hand, with_landmarks


ALL_POSES = [
    dict(),
    dict(thumb=True),
    dict(index=True),
    dict(index=True, middle=True),
    dict(index=True, middle=True, ring=True, pinky=True),
    dict(thumb=True, index=True, middle=True, ring=True, pinky=True),
    dict(thumb=True, pinky=True),
    dict(middle=True, ring=True),
]


class TestMathUtils(unittest.TestCase):
    """Test the angle helpers the extractor relies on."""

    def test_angle_between(self):
        self.assertAlmostEqual(angle_between_deg((1, 0, 0), (1, 0, 0)), 0.0, places=3)
        self.assertAlmostEqual(angle_between_deg((1, 0, 0), (0, 1, 0)), 90.0, places=3)
        self.assertAlmostEqual(angle_between_deg((1, 0, 0), (-1, 0, 0)), 180.0, places=3)

    def test_bend_of_straight_chain_is_zero(self):
        self.assertAlmostEqual(bend_angle_deg((0, 0, 0), (0, 1, 0), (0, 3, 0)), 0.0, places=3)

    def test_parallel_vectors_are_exactly_zero(self):
        self.assertEqual(angle_between_deg((0.0, -0.05, 0.0), (0.0, -0.1, 0.0)), 0.0)

    def test_zero_vector_scores_right_angle(self):
        self.assertEqual(angle_between_deg((0, 0, 0), (1, 0, 0)), 90.0)
        self.assertEqual(angle_between_deg((0, 0, 0), (0, 0, 0)), 90.0)

    def test_zero_length_bone_does_not_raise(self):
        self.assertAlmostEqual(bend_angle_deg((0, 0, 0), (0, 0, 0), (0, 1, 0)), 90.0, places=3)


class TestFingerStateAngle(unittest.TestCase):
    """Test the bone-angle extension test."""

    def test_poses(self):
        """Every synthetic pose is read back exactly."""
        for pose in ALL_POSES:
            with self.subTest(pose=pose):
                expected = FingerState(**{n: pose.get(n, False) for n in ("thumb", "index", "middle", "ring", "pinky")})
                self.assertEqual(finger_state(make_hand(**pose)), expected)

    def test_bend_angles(self):
        angles = finger_bend_angles(make_hand(index=True))
        self.assertLess(angles["index"], 1.0)
        self.assertAlmostEqual(angles["thumb"], 90.0, places=2)
        self.assertGreater(angles["middle"], 150.0)

    def test_translation_scale_rotation_invariance(self):
        """The angle test does not depend on where, how big or how rotated the hand is."""
        pose = dict(thumb=True, index=True, middle=True)
        expected = finger_state(make_hand(**pose))
        for kwargs in (
            dict(offset=(0.2, -0.3, 0.1)),
            dict(scale=0.4),
            dict(scale=2.5),
            dict(rotate_deg=90.0),
            dict(rotate_deg=-135.0, scale=0.7, offset=(-0.1, 0.1, 0.0)),
        ):
            with self.subTest(**kwargs):
                self.assertEqual(finger_state(make_hand(**pose, **kwargs)), expected)

    def test_threshold_is_strict(self):
        """A finger bent by more than 30 degrees at the PIP is curled."""
        hand = make_hand(index=True)
        pip = hand[LM.INDEX_PIP]
        # Tip 0.1 away from PIP at 45 degrees off the MCP->PIP direction
        bent = with_landmarks(hand, {LM.INDEX_TIP: (pip.x + 0.0707, pip.y - 0.0707, 0.0)})
        self.assertFalse(finger_state(bent).index)

        slight = with_landmarks(hand, {LM.INDEX_TIP: (pip.x + 0.0259, pip.y - 0.0966, 0.0)})
        self.assertTrue(finger_state(slight).index)

    def test_degenerate_hand(self):
        """All landmarks on one point reads as fully curled rather than failing."""
        hand = Hand(tuple(Landmark(0.5, 0.5, 0.0) for _ in range(21)))
        self.assertEqual(finger_state(hand).extended_count, 0)

    def test_incomplete_hand_raises(self):
        full = make_hand()
        for hand in (Hand(full.landmarks[:20]), Hand(())):
            with self.subTest(landmarks=len(hand)):
                with self.assertRaises(ValueError):
                    finger_state(hand)

    def test_helpers(self):
        state = finger_state(make_hand(thumb=True, index=True))
        self.assertEqual(state.extended_count, 2)
        self.assertEqual(
            state.as_dict(),
            {"thumb": True, "index": True, "middle": False, "ring": False, "pinky": False},
        )


class TestFingerStateDistanceRatio(unittest.TestCase):
    """Test the legacy tip-to-base distance heuristic."""

    def test_fingers(self):
        for pose in ALL_POSES:
            with self.subTest(pose=pose):
                state = finger_state(make_hand(**pose), method=FingerStateMethod.DISTANCE_RATIO)
                for name in ("index", "middle", "ring", "pinky"):
                    self.assertEqual(getattr(state, name), pose.get(name, False))

    def test_not_rotation_sensitive_for_straight_fingers(self):
        state = finger_state(
            make_hand(index=True, middle=True, rotate_deg=60.0),
            method=FingerStateMethod.DISTANCE_RATIO,
        )
        self.assertTrue(state.index and state.middle)
        self.assertFalse(state.ring or state.pinky)


class TestFingerCurl(unittest.TestCase):
    """Test the curl magnitude measure."""

    def test_extended_fingers_saturate(self):
        curls = finger_curls(make_hand(thumb=True, index=True, middle=True, ring=True, pinky=True))
        for value in (curls.thumb, curls.index, curls.middle, curls.ring, curls.pinky):
            self.assertAlmostEqual(value, 1.0)

    def test_fist_tips_near_palm(self):
        curls = finger_curls(make_hand())
        for value in (curls.index, curls.middle, curls.ring, curls.pinky):
            self.assertLess(value, 0.5)
            self.assertGreaterEqual(value, 0.0)

    def test_scale_invariant(self):
        small = finger_curl(make_hand(), LM.INDEX_TIP)
        large = finger_curl(make_hand(scale=3.0), LM.INDEX_TIP)
        self.assertAlmostEqual(small, large, places=6)

    def test_zero_hand_size(self):
        hand = Hand(tuple(Landmark(0.5, 0.5, 0.0) for _ in range(21)))
        self.assertEqual(finger_curl(hand, LM.INDEX_TIP), 0.0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
