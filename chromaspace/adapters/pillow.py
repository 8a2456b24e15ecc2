"""
Pillow boundary adapter.

Turns Pillow pixels, images and color strings into :class:`RGBColor`.
Anything Pillow cannot express in the RGB model (grayscale, palette,
bilevel, CMYK, ...) yields ``None`` rather than an exception.
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageColor

from ..colors.rgb import RGBColor
from ..types.format_type import FormatType

RGB_MODES = {"RGB", "RGBX"}
RGBA_MODES = {"RGBA"}
PREMULTIPLIED_MODES = {"RGBa"}
SUPPORTED_MODES = RGB_MODES | RGBA_MODES | PREMULTIPLIED_MODES


def _unpremultiply(r: int, g: int, b: int, alpha: int) -> Tuple[float, float, float, int]:
    # fully transparent pixels carry no color
    if alpha == 0:
        return 0.0, 0.0, 0.0, 0
    return r * 255 / alpha, g * 255 / alpha, b * 255 / alpha, alpha


def rgb_color_from_pixel(pixel: Sequence[int] | int | float, mode: str) -> Optional[RGBColor]:
    """
    Convert a pixel value read from a Pillow image of the given mode.

    Premultiplied ("RGBa") pixels are divided back by their alpha.

    Args:
        pixel: Value returned by ``Image.getpixel``
        mode: Pillow image mode of the source image

    Returns:
        Unit-range RGBColor, or None if ``mode`` is not an RGB mode
    """
    if mode in RGBA_MODES:
        channels = tuple(pixel)[:4]  # type: ignore[arg-type]
    elif mode in PREMULTIPLIED_MODES:
        channels = _unpremultiply(*tuple(pixel)[:4])  # type: ignore[arg-type]
    elif mode in RGB_MODES:
        channels = tuple(pixel)[:3] + (255,)  # type: ignore[arg-type]
    else:
        return None
    return RGBColor.from_format(channels, FormatType.INT)


def rgb_color_from_image(image: Image.Image, xy: Tuple[int, int]) -> Optional[RGBColor]:
    """
    Read one pixel from ``image``.

    Palette ("P") and grayscale ("L", "LA", "1", "I", "F") images are not
    expanded; they return None like any other non-RGB mode.
    """
    if image.mode not in SUPPORTED_MODES:
        return None
    return rgb_color_from_pixel(image.getpixel(xy), image.mode)  # type: ignore[arg-type]


def rgb_color_from_string(color_string: str) -> Optional[RGBColor]:
    """
    Parse a color string understood by ``PIL.ImageColor`` ("#ff8000",
    "rgb(255, 128, 0)", "hsl(30, 100%, 50%)", ...).

    Returns:
        RGBColor, or None when Pillow cannot parse ``color_string``
    """
    try:
        channels = ImageColor.getrgb(color_string)
    except ValueError:
        return None
    if len(channels) == 3:
        channels = channels + (255,)
    return RGBColor.from_format(channels, FormatType.INT)
