"""Configuration constants for hand gesture recognition."""

from enum import Enum


class FingerStateMethod(Enum):
    ANGLE = "ANGLE"
    DISTANCE_RATIO = "DISTANCE_RATIO"


# =============================================================================
# HAND TOPOLOGY
# =============================================================================
NUM_LANDMARKS = 21
FEATURE_DIM = NUM_LANDMARKS * 3


# =============================================================================
# FINGER EXTENSION / CURL
# =============================================================================
FINGER_STATE_METHOD = FingerStateMethod.ANGLE

# Max angle between MCP->PIP and PIP->TIP bones for a finger to count as extended
FINGER_STRAIGHT_MAX_ANGLE_DEG = 30.0

# Legacy test: |tip - base| > |base - wrist| * ratio
FINGER_EXT_TIP_BASE_RATIO = 0.85

# Curl magnitude = |tip - wrist| / (|wrist - middle_mcp| * scale), clamped to [0, 1]
CURL_HAND_SIZE_SCALE = 1.5


# =============================================================================
# SIMILARITY
# =============================================================================
SIMILARITY_THRESHOLD = 0.85


# =============================================================================
# BUILT-IN GESTURES
# =============================================================================
USE_CURL_GATING = False
FIST_MAX_FINGER_CURL = 0.5
THUMBS_UP_MIN_THUMB_CURL = 0.7


# =============================================================================
# TRACKING
# =============================================================================
MAX_NUM_HANDS = 2
MIN_DETECTION_CONFIDENCE = 0.8
MIN_TRACKING_CONFIDENCE = 0.7
INVERT_HANDEDNESS = False


# =============================================================================
# LOGGING
# =============================================================================
LOG_GESTURE_EVENTS = True
