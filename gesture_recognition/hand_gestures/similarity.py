"""Scale- and translation-invariant hand feature vectors and cosine scoring."""

import numpy as np
from numpy.typing import NDArray

from .config import FEATURE_DIM
from .landmarks import LM, Hand, is_complete


def normalize(hand: Hand) -> NDArray[np.float64]:
    """
    Convert a hand into its 63-dim feature vector.

    Landmarks are translated so the wrist sits at the origin, flattened in
    index order and divided by the vector's Euclidean norm. Rotation is kept,
    so the same pose at a different palm orientation scores as a different
    gesture.

    Returns:
        Unit-length vector, or the zero vector for degenerate or incomplete hands
    """
    if not is_complete(hand):
        return np.zeros(FEATURE_DIM)

    points = np.asarray(hand.landmarks, dtype=np.float64)
    flat = (points - points[LM.WRIST]).ravel()

    norm = float(np.linalg.norm(flat))
    if norm == 0.0:
        norm = 1.0
    return flat / norm


def cosine_similarity(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Cosine of the angle between two feature vectors; 0 if either is zero or shapes differ."""
    if a.shape != b.shape:
        return 0.0
    na = float(np.linalg.norm(a))
    nb = float(np.linalg.norm(b))
    if na == 0.0 or nb == 0.0:
        return 0.0
    return float(np.dot(a, b) / (na * nb))
