from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING

from ..types.color_types import ColorSpace, ScalarVector
from ..types.format_type import FormatType, format_classes, max_non_hue
from .color_base import ColorBase, _channel

if TYPE_CHECKING:
    from .xyz import XYZColor
    from .lab import LABColor
    from .lch import LCHColor


class RGBColor(ColorBase):
    """Encoded (gamma-companded) sRGB color, channels nominally in [0, 1]."""
    mode:          ClassVar[ColorSpace] = "rgb"
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("r", "g", "b", "alpha")

    r = _channel(0, "Red channel.")
    g = _channel(1, "Green channel.")
    b = _channel(2, "Blue channel.")

    def to_xyz(self) -> XYZColor:
        return self.convert("xyz")  # type: ignore[return-value]

    def to_lab(self) -> LABColor:
        return self.convert("lab")  # type: ignore[return-value]

    def to_lch(self) -> LCHColor:
        return self.convert("lch")  # type: ignore[return-value]

    @classmethod
    def from_format(cls, value: ScalarVector, format_type: FormatType) -> RGBColor:
        """
        Build a unit-range color from INT (0-255), FLOAT or PERCENTAGE (0-100)
        channels. Alpha, when given, uses the same format.
        """
        maxval = max_non_hue[FormatType(format_type)]
        return cls(tuple(v / maxval for v in value))

    def to_format(self, format_type: FormatType) -> ScalarVector:
        """Scale all four channels to ``format_type``; INT values are rounded."""
        format_type = FormatType(format_type)
        maxval = max_non_hue[format_type]
        scaled = tuple(v * maxval for v in self.value)
        if format_type == FormatType.INT:
            return tuple(int(round(v)) for v in scaled)
        return tuple(format_classes[format_type](v) for v in scaled)
