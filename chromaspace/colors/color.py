from __future__ import annotations
from .color_base import ColorBase, build_registry
from .rgb import RGBColor
from .xyz import XYZColor
from .lab import LABColor
from .lch import LCHColor
from ..conversions import ColorSpace, convert

unified_space_to_class: dict[str, type[ColorBase]] = build_registry(
    RGBColor,
    XYZColor,
    LABColor,
    LCHColor,
)


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to a different color space.

    Routes through the direct conversions (rgb - xyz - lab - lch); alpha is
    carried over unchanged.

    Args:
        to_space: Target color space ("rgb", "xyz", "lab", "lch")

    Returns:
        New ColorBase instance in the target space, or ``self`` when the
        space does not change
    """
    cls = get_color_class(to_space)
    if cls is type(self):
        return self
    return cls(convert(self.value, self.mode, cls.mode))

ColorBase.convert = color_convert


def convert_color(value, color_space: str) -> ColorBase:
    """Coerce a tuple or any ColorBase into the class registered for ``color_space``."""
    if isinstance(value, ColorBase):
        return value.convert(color_space)  # type: ignore
    return get_color_class(color_space)(value)
