from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING

from ..types.color_types import ColorSpace
from .color_base import ColorBase, _channel

if TYPE_CHECKING:
    from .rgb import RGBColor
    from .xyz import XYZColor
    from .lch import LCHColor


class LABColor(ColorBase):
    mode:          ClassVar[ColorSpace] = "lab"
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("l", "a", "b", "alpha")

    l = _channel(0, "Lightness, 0..100.")
    a = _channel(1, "Green (-) to red (+) axis.")
    b = _channel(2, "Blue (-) to yellow (+) axis.")

    def to_xyz(self) -> XYZColor:
        return self.convert("xyz")  # type: ignore[return-value]

    def to_lch(self) -> LCHColor:
        return self.convert("lch")  # type: ignore[return-value]

    def to_rgb(self) -> RGBColor:
        return self.convert("rgb")  # type: ignore[return-value]
