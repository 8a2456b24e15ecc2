from typing import Tuple

from ._matrix import apply_matrix
from .companding import srgb_compand
from .constants import XYZ_TO_SRGB


def xyz_to_unit_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to encoded sRGB in the unit range.

    Results are not clamped; out-of-gamut colors come back with channels
    below 0 or above 1.

    Args:
        x, y, z: Tristimulus values

    Returns:
        (r, g, b) encoded sRGB channels
    """
    r, g, b = apply_matrix(XYZ_TO_SRGB, x, y, z)
    return srgb_compand(r), srgb_compand(g), srgb_compand(b)
