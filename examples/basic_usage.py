"""Basic Chromaspace usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaspace import RGBColor, LCHColor, convert
from chromaspace.adapters import rgb_color_from_string
from chromaspace.types.format_type import FormatType


def demonstrate_colors() -> None:
    # Construct colors and convert between spaces.
    accent = RGBColor.from_format((255, 128, 64), FormatType.INT)
    print("RGB as floats:", accent.value)
    print("RGB -> XYZ:", accent.to_xyz())
    print("RGB -> LAB:", accent.to_lab())
    print("RGB -> LCH:", accent.to_lch())

    # Tuple-level conversion, alpha last.
    print("LCH -> RGB (tuple):", convert((60.0, 40.0, 200.0, 0.5), "lch", "rgb"))


def demonstrate_gradients() -> None:
    red = rgb_color_from_string("#ff0000")
    blue = rgb_color_from_string("#0000ff")
    steps = 8

    # Naive RGB interpolation goes through a dull purple.
    rgb_strip = [red.lerp(blue, i / (steps - 1)) for i in range(steps)]
    print("RGB gradient:", [c.to_format(FormatType.INT) for c in rgb_strip])

    # LCH keeps lightness and chroma moving smoothly and follows the hue circle.
    start, end = red.to_lch(), blue.to_lch()
    lch_strip = [start.lerp(end, i / (steps - 1)).to_rgb() for i in range(steps)]
    print("LCH gradient:", [c.to_format(FormatType.INT) for c in lch_strip])

    # Hue takes the short way round 0/360.
    mid = LCHColor((50.0, 50.0, 10.0)).lerp(LCHColor((50.0, 50.0, 350.0)), 0.5)
    print("Hue midpoint of 10 and 350:", mid.h)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
