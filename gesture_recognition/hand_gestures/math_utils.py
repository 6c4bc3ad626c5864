"""Vector and geometry utility functions."""

import math

Point3 = tuple[float, float, float]
Vec3 = tuple[float, float, float]


def dist3(a: Point3, b: Point3) -> float:
    """Euclidean distance between 3D points."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value to range [lo, hi]."""
    return max(lo, min(hi, v))


def sub3(a: Vec3, b: Vec3) -> Vec3:
    """Vector subtraction: a - b."""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def dot3(a: Vec3, b: Vec3) -> float:
    """Dot product of 3D vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def norm3(a: Vec3) -> float:
    """Magnitude of 3D vector."""
    return math.sqrt(dot3(a, a))


def angle_between_deg(u: Vec3, v: Vec3) -> float:
    """
    Angle between two direction vectors, in degrees (0 = same direction).

    A zero-length vector has no direction and scores 90 degrees.
    """
    nu, nv = norm3(u), norm3(v)
    if nu == 0.0 or nv == 0.0:
        return 90.0
    cos_ang = clamp(dot3(u, v) / (nu * nv), -1.0, 1.0)
    return math.degrees(math.acos(cos_ang))


def bend_angle_deg(a: Point3, b: Point3, c: Point3) -> float:
    """Bend at B of the chain A-B-C: angle between bones A->B and B->C, in degrees."""
    return angle_between_deg(sub3(b, a), sub3(c, b))
