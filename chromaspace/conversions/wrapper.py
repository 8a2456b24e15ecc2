from typing import Callable, Dict, List, Tuple, cast

from .to_xyz import unit_rgb_to_xyz, lab_to_xyz
from .to_rgb import xyz_to_unit_rgb
from .to_lab import xyz_to_lab, lch_to_lab
from .to_lch import lab_to_lch

from ..types.color_types import ColorElement, ColorSpace, COLOR_SPACES
from ..utils.dimension import get_dimension

Triple = Tuple[float, float, float]

# Direct edges of the conversion graph
CONVERT_DIRECT: Dict[Tuple[str, str], Callable[[float, float, float], Triple]] = {
    ("rgb", "xyz"): unit_rgb_to_xyz,
    ("xyz", "rgb"): xyz_to_unit_rgb,
    ("xyz", "lab"): xyz_to_lab,
    ("lab", "xyz"): lab_to_xyz,
    ("lab", "lch"): lab_to_lch,
    ("lch", "lab"): lch_to_lab,
}

# Spaces are laid out on a line: rgb - xyz - lab - lch
_CHAIN_INDEX = {space: i for i, space in enumerate(COLOR_SPACES)}


def _check_space(space: str) -> str:
    key = space.lower()
    if key not in _CHAIN_INDEX:
        raise ValueError(f"Unknown space: {space}")
    return key


def conversion_path(from_space: ColorSpace, to_space: ColorSpace) -> List[str]:
    """
    Return the spaces visited when converting ``from_space`` to ``to_space``,
    endpoints included.

    >>> conversion_path("rgb", "lch")
    ['rgb', 'xyz', 'lab', 'lch']
    """
    start = _CHAIN_INDEX[_check_space(from_space)]
    stop = _CHAIN_INDEX[_check_space(to_space)]
    step = 1 if stop >= start else -1
    return [COLOR_SPACES[i] for i in range(start, stop + step, step)]


def _convert_core(base: Triple, path: List[str]) -> Triple:
    for src, dst in zip(path, path[1:]):
        base = CONVERT_DIRECT[(src, dst)](*base)
    return base


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert a 3- or 4-tuple between any two supported color spaces.

    The fourth element, when present, is alpha and is passed through
    untouched.

    Args:
        color: (c0, c1, c2) or (c0, c1, c2, alpha)
        from_space: Source space ("rgb", "xyz", "lab", "lch")
        to_space: Target space

    Returns:
        Converted tuple with the same number of elements as ``color``
    """
    path = conversion_path(from_space, to_space)
    if len(path) == 1:
        return color  # No conversion needed

    dim = get_dimension(color)
    if dim not in (3, 4):
        raise ValueError(f"Expected 3 or 4 components, got {dim}")

    values = tuple(float(v) for v in color)
    converted = _convert_core(cast(Triple, values[:3]), path)
    if dim == 4:
        return converted + (values[3],)
    return converted
