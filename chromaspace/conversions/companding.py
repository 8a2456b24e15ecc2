"""
Transfer functions used on the way in and out of linear space.

The sRGB pair works on the magnitude and puts the sign back afterwards, so
values outside [0, 1] (extrapolated lerps, out-of-gamut matrix results)
pass through without clamping.
"""
from .constants import (
    LAB_E,
    LAB_K_116,
    LAB_16_116,
    SRGB_COMPAND_THRESHOLD,
    SRGB_DECOMPAND_THRESHOLD,
    SRGB_GAMMA,
)


def srgb_decompand(v: float) -> float:
    """Encoded sRGB channel -> linear intensity."""
    abs_v = abs(v)
    if abs_v > SRGB_DECOMPAND_THRESHOLD:
        out = ((abs_v + 0.055) / 1.055) ** SRGB_GAMMA
    else:
        out = abs_v / 12.92
    return out if v > 0 else -out


def srgb_compand(v: float) -> float:
    """Linear intensity -> encoded sRGB channel."""
    abs_v = abs(v)
    if abs_v > SRGB_COMPAND_THRESHOLD:
        out = 1.055 * abs_v ** (1 / SRGB_GAMMA) - 0.055
    else:
        out = abs_v * 12.92
    return out if v > 0 else -out


def lab_compand(v: float) -> float:
    """White-normalized tristimulus ratio -> LAB f(v)."""
    if v > LAB_E:
        return v ** (1.0 / 3.0)
    return LAB_K_116 * v + LAB_16_116


def lab_decompand(v: float) -> float:
    """Inverse of :func:`lab_compand`."""
    v3 = v * v * v
    if v3 > LAB_E:
        return v3
    return (v - LAB_16_116) / LAB_K_116
