import math
from typing import Tuple

from .constants import RAD_TO_DEG


def lab_to_lch(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert Cartesian LAB to cylindrical LCH.

    Hue comes from ``atan2(b, a)`` in degrees; a negative angle is shifted
    up by 360 so the result lies in [0, 360).

    Args:
        l: Lightness, copied through
        a, b: Opponent axes

    Returns:
        (l, c, h)
    """
    c = math.sqrt(a * a + b * b)
    angle = math.atan2(b, a) * RAD_TO_DEG
    h = angle + 360 if angle < 0 else angle
    return l, c, h
