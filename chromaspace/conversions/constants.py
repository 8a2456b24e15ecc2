"""Reference constants for the sRGB / D65 conversion chain."""
import math
import numpy as np

RAD_TO_DEG = 180 / math.pi

# Linear sRGB -> XYZ (D65)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# XYZ (D65) -> linear sRGB
XYZ_TO_SRGB = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252],
], dtype=np.float64)

# D65 reference white
WHITE_X = 0.95047
WHITE_Y = 1.0
WHITE_Z = 1.08883
REFERENCE_WHITE = (WHITE_X, WHITE_Y, WHITE_Z)

LAB_E = 0.008856
LAB_K_116 = 7.787036
LAB_16_116 = 0.1379310

SRGB_DECOMPAND_THRESHOLD = 0.04045
SRGB_COMPAND_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4
