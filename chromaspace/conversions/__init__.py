"""
Chromaspace Color Space Conversions
===================================

Scalar conversion functions between sRGB, CIE XYZ, CIE LAB and CIE LCH
(D65 reference white).

Conversion Graph
----------------
    rgb <-> xyz <-> lab <-> lch

Only neighbouring spaces are converted directly; everything else is a
composition through XYZ and/or LAB.

Direct Conversions
------------------
    unit_rgb_to_xyz(r, g, b)
    xyz_to_unit_rgb(x, y, z)
    xyz_to_lab(x, y, z)
    lab_to_xyz(l, a, b)
    lab_to_lch(l, a, b)
    lch_to_lab(l, c, h)

High-Level API
--------------
    convert(color, from_space, to_space)
        Route a 3- or 4-tuple (alpha last) between any two spaces
    conversion_path(from_space, to_space)
        Spaces visited by ``convert``

Examples
--------
>>> from chromaspace.conversions import convert
>>> convert((1.0, 1.0, 1.0, 1.0), "rgb", "lab")  # doctest: +SKIP
(100.0, 0.0, 0.0, 1.0)
"""

from .to_xyz import unit_rgb_to_xyz, lab_to_xyz
from .to_rgb import xyz_to_unit_rgb
from .to_lab import xyz_to_lab, lch_to_lab
from .to_lch import lab_to_lch

from .companding import srgb_compand, srgb_decompand, lab_compand, lab_decompand

from .wrapper import convert, conversion_path, CONVERT_DIRECT

from ..types.color_types import ColorSpace
from ..types.format_type import FormatType

__all__ = [
    # Direct edges
    'unit_rgb_to_xyz',
    'xyz_to_unit_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',

    # Transfer functions
    'srgb_compand',
    'srgb_decompand',
    'lab_compand',
    'lab_decompand',

    # High-level API
    'convert',
    'conversion_path',
    'CONVERT_DIRECT',

    # Types
    'ColorSpace',
    'FormatType',
]
