from .dimension import get_dimension
from .interpolate import lerp, lerp_values
from .interpolate_hue import hue_lerp

__all__ = ["get_dimension", "lerp", "lerp_values", "hue_lerp"]
