import math
from typing import Tuple

from .companding import lab_compand
from .constants import RAD_TO_DEG, WHITE_X, WHITE_Y, WHITE_Z


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to CIE LAB.

    Args:
        x, y, z: Tristimulus values

    Returns:
        (l, a, b)
    """
    fx = lab_compand(x / WHITE_X)
    fy = lab_compand(y / WHITE_Y)
    fz = lab_compand(z / WHITE_Z)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lch_to_lab(l: float, c: float, h: float) -> Tuple[float, float, float]:
    """
    Convert cylindrical LCH back to Cartesian LAB.

    Args:
        l: Lightness, copied through
        c: Chroma
        h: Hue in degrees

    Returns:
        (l, a, b)
    """
    rad = h / RAD_TO_DEG
    return l, math.cos(rad) * c, math.sin(rad) * c
