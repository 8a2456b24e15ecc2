from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING

from ..types.color_types import ColorSpace
from .color_base import ColorBase, _channel

if TYPE_CHECKING:
    from .rgb import RGBColor
    from .lab import LABColor
    from .lch import LCHColor


class XYZColor(ColorBase):
    """CIE 1931 XYZ tristimulus values relative to the D65 white."""
    mode:          ClassVar[ColorSpace] = "xyz"
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("x", "y", "z", "alpha")

    x = _channel(0, "X tristimulus value, nominally 0..0.95047.")
    y = _channel(1, "Y (luminance), nominally 0..1.")
    z = _channel(2, "Z tristimulus value, nominally 0..1.08883.")

    def to_rgb(self) -> RGBColor:
        return self.convert("rgb")  # type: ignore[return-value]

    def to_lab(self) -> LABColor:
        return self.convert("lab")  # type: ignore[return-value]

    def to_lch(self) -> LCHColor:
        return self.convert("lch")  # type: ignore[return-value]
