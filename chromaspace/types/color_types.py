from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Channels4 = Tuple[float, float, float, float]
ColorElement = Union[Tuple[float, float, float], Channels4]
ColorSpace = Literal["rgb", "xyz", "lab", "lch"]
COLOR_SPACES: Tuple[str, ...] = ("rgb", "xyz", "lab", "lch")
HUE_SPACES = {"lch"}


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space stores a hue channel (LCH).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
