from typing import Tuple


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation; ``t`` outside [0, 1] extrapolates."""
    return start + (end - start) * t


def lerp_values(starts: Tuple[float, ...], ends: Tuple[float, ...], t: float) -> Tuple[float, ...]:
    """Component-wise :func:`lerp` over two equally sized tuples."""
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have same length")
    return tuple(lerp(s, e, t) for s, e in zip(starts, ends))
