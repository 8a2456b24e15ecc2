from typing import Tuple

from ._matrix import apply_matrix
from .companding import srgb_decompand, lab_decompand
from .constants import SRGB_TO_XYZ, WHITE_X, WHITE_Y, WHITE_Z


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert encoded sRGB (unit range) to CIE XYZ under D65.

    Each channel is decompanded to linear light before the matrix is
    applied. Inputs outside [0, 1] are accepted.

    Args:
        r, g, b: Encoded sRGB channels

    Returns:
        (x, y, z) tristimulus values
    """
    return apply_matrix(
        SRGB_TO_XYZ,
        srgb_decompand(r),
        srgb_decompand(g),
        srgb_decompand(b),
    )


def lab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert CIE LAB to CIE XYZ under D65.

    Args:
        l: Lightness (0-100)
        a: Green-red axis
        b: Blue-yellow axis

    Returns:
        (x, y, z) tristimulus values
    """
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return (
        lab_decompand(fx) * WHITE_X,
        lab_decompand(fy) * WHITE_Y,
        lab_decompand(fz) * WHITE_Z,
    )
