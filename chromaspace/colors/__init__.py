"""
Chromaspace Color Classes
=========================

Immutable color values for the sRGB, CIE XYZ, CIE LAB and CIE LCH color
spaces (D65 white point).

Features
--------
- Immutable instances (frozen after initialization)
- Alpha carried as a fourth channel, defaulting to 1.0
- Conversion to any other space with ``to_<space>()`` or ``convert(space)``
- Same-space linear interpolation with ``lerp(other, t)``; LCH takes the
  shorter hue arc
- No clamping: out-of-gamut and extrapolated values are preserved

Usage
-----
>>> from chromaspace.colors import RGBColor, LCHColor
>>>
>>> red = RGBColor((1.0, 0.0, 0.0))
>>> red.alpha
1.0
>>> lch = red.to_lch()
>>> blue = RGBColor((0.0, 0.0, 1.0)).to_lch()
>>> midpoint = lch.lerp(blue, 0.5).to_rgb()
>>>
>>> # Convert by name
>>> lab = red.convert("lab")

Color Classes
-------------
    - RGBColor: encoded sRGB, r/g/b in [0, 1]
    - XYZColor: tristimulus values, the hub of the conversion graph
    - LABColor: perceptually uniform Cartesian space
    - LCHColor: polar LAB (lightness, chroma, hue)

Notes
-----
- Components are coerced to float; wrong arity raises ValueError
- lerp between different classes raises TypeError
"""

from .color_base import ColorBase
from .rgb import RGBColor
from .xyz import XYZColor
from .lab import LABColor
from .lch import LCHColor
from .color import color_convert, convert_color, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'RGBColor',
    'XYZColor',
    'LABColor',
    'LCHColor',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_space_to_class',
]
