"""Reference values for sRGB / D65 with the 7-digit Lindbloom matrices."""

# unit rgb -> (l, a, b)
samples_rgb_lab = {
    (1.0, 1.0, 1.0): (100.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 0.0, 0.0): (53.2408, 80.0925, 67.2032),
    (0.0, 1.0, 0.0): (87.7347, -86.1827, 83.1793),
    (0.0, 0.0, 1.0): (32.2970, 79.1875, -107.8602),
    (0.5, 0.5, 0.5): (53.3890, 0.0, 0.0),
}

# unit rgb -> (l, c, h)
samples_rgb_lch = {
    (1.0, 0.0, 0.0): (53.2408, 104.5518, 39.9990),
    (0.0, 0.0, 1.0): (32.2970, 133.8076, 306.2849),
}

# unit rgb -> (x, y, z); decompand(1) == 1 so primaries are matrix columns
samples_rgb_xyz = {
    (1.0, 1.0, 1.0): (0.95047, 1.0, 1.08883),
    (1.0, 0.0, 0.0): (0.4124564, 0.2126729, 0.0193339),
    (0.0, 1.0, 0.0): (0.3575761, 0.7151522, 0.1191920),
    (0.0, 0.0, 1.0): (0.1804375, 0.0721750, 0.9503041),
}

# Grid of in-gamut colors for round trips
round_trip_rgb = [
    (r / 4, g / 4, b / 4)
    for r in range(5)
    for g in range(5)
    for b in range(5)
] + [
    (0.01, 0.02, 0.03),
    (0.9, 0.1, 0.5),
    (0.2, 0.7, 0.3),
]
