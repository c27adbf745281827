"""
Angle helpers for libepoch.
"""

import math

TAU = 2.0 * math.pi


def normalize_degrees(angle: float) -> float:
    """
    Reduce an angle in degrees to [0, 360).

    Uses a floored modulo, so negative angles wrap to positive values.

    Examples:
        >>> normalize_degrees(370.0)
        10.0
        >>> normalize_degrees(-90.0)
        270.0
    """
    angle = angle % 360.0
    # -1e-20 % 360.0 rounds up to 360.0
    if angle >= 360.0:
        angle -= 360.0
    return angle


def normalize_radians(angle: float) -> float:
    """Reduce an angle in radians to [0, 2*pi)."""
    angle = angle % TAU
    if angle >= TAU:
        angle -= TAU
    return angle


def difdeg2n(p1: float, p2: float) -> float:
    """
    Calculate distance in degrees p1 - p2 normalized to [-180;180].

    Compatible with pyswisseph's swe.difdeg2n() function.

    Examples:
        >>> difdeg2n(350, 10)
        -20.0
        >>> difdeg2n(10, 350)
        20.0
    """
    diff = (p1 - p2) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff
