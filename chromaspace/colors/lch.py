from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING

from ..types.color_types import ColorSpace
from ..utils import lerp, hue_lerp
from .color_base import ColorBase, _channel

if TYPE_CHECKING:
    from .rgb import RGBColor
    from .xyz import XYZColor
    from .lab import LABColor


class LCHColor(ColorBase):
    """Cylindrical LAB: lightness, chroma and hue in degrees."""
    mode:          ClassVar[ColorSpace] = "lch"
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("l", "c", "h", "alpha")

    l = _channel(0, "Lightness, 0..100.")
    c = _channel(1, "Chroma, distance from the neutral axis.")
    h = _channel(2, "Hue angle in degrees.")

    def to_lab(self) -> LABColor:
        return self.convert("lab")  # type: ignore[return-value]

    def to_xyz(self) -> XYZColor:
        return self.convert("xyz")  # type: ignore[return-value]

    def to_rgb(self) -> RGBColor:
        return self.convert("rgb")  # type: ignore[return-value]

    def lerp(self, other: LCHColor, t: float) -> LCHColor:
        """
        Interpolate towards ``other`` with the hue following the shorter arc.

        Lightness, chroma and alpha are linear. The hue is only wrapped into
        [0, 360) when the path crosses 0/360, see
        :func:`chromaspace.utils.interpolate_hue.hue_lerp`.
        """
        self._check_same_space(other)
        return LCHColor((
            lerp(self.l, other.l, t),
            lerp(self.c, other.c, t),
            hue_lerp(self.h, other.h, t),
            lerp(self.alpha, other.alpha, t),
        ))
