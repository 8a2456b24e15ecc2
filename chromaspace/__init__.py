"""Chromaspace: sRGB, XYZ, LAB and LCH colors with perceptual interpolation."""

from .colors import (
    ColorBase,
    RGBColor,
    XYZColor,
    LABColor,
    LCHColor,
    color_convert,
    convert_color,
    get_color_class,
)
from .conversions import (
    unit_rgb_to_xyz,
    xyz_to_unit_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    convert,
    conversion_path,
    ColorSpace,
    FormatType,
)
from .utils import hue_lerp, lerp

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "RGBColor",
    "XYZColor",
    "LABColor",
    "LCHColor",
    "color_convert",
    "convert_color",
    "get_color_class",
    # conversions
    "unit_rgb_to_xyz",
    "xyz_to_unit_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
    "convert",
    "conversion_path",
    "ColorSpace",
    "FormatType",
    # interpolation
    "hue_lerp",
    "lerp",
]
