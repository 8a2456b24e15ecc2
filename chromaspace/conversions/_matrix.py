from typing import Tuple
import numpy as np


def apply_matrix(matrix: np.ndarray, a: float, b: float, c: float) -> Tuple[float, float, float]:
    """Multiply a 3x3 matrix by the column vector (a, b, c)."""
    out = matrix @ np.array((a, b, c), dtype=np.float64)
    return float(out[0]), float(out[1]), float(out[2])
