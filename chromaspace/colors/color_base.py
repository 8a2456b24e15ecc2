from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, Self, cast
from numbers import Real

from ..conversions import convert
from ..types.color_types import ColorElement, ColorSpace, Channels4, is_hue_space
from ..utils import get_dimension, lerp_values


def _channel(index: int, doc: str) -> property:
    return property(lambda self: self._value[index], doc=doc)


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, str, str, str]]
    default_alpha: ClassVar[float] = 1.0
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = cast(ColorElement, convert(value.value, value.mode, self.mode))

        value_dim = get_dimension(value)
        if value_dim not in (self.num_channels - 1, self.num_channels):
            raise ValueError(
                f"{self.mode} expects {self.num_channels - 1} or {self.num_channels} components, "
                f"got {value!r}"
            )

        components = cast(Tuple[Any, ...], value)
        for v in components:
            if isinstance(v, bool) or not isinstance(v, Real):
                raise TypeError(
                    f"{self.mode} components must be real numbers, got {type(v).__name__}"
                )

        # no clamping: extrapolated and out-of-gamut values are kept as-is
        floats = tuple(float(v) for v in components)
        if value_dim == self.num_channels - 1:
            floats = floats + (self.default_alpha,)

        # safe assignment; __setattr__ still allows it during init
        self._value = floats

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Channels4:
        return cast(Channels4, self._value)

    @property
    def components(self) -> Tuple[float, float, float]:
        """The three color channels without alpha."""
        return cast(Tuple[float, float, float], self._value[:3])

    alpha = _channel(3, "Alpha channel, untouched by color-space math.")

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def isclose(self, other: ColorBase, tol: float = 1e-9) -> bool:
        """Per-channel absolute comparison against a color of the same class."""
        if type(self) is not type(other):
            return False
        return all(abs(a - b) <= tol for a, b in zip(self._value, other._value))

    # ------------------ DERIVED VALUES ------------------
    def _check_same_space(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot interpolate {self.__class__.__name__} with {type(other).__name__}"
            )

    def lerp(self, other: Self, t: float) -> Self:
        """
        Component-wise linear interpolation towards ``other``.

        Alpha is interpolated like any other channel. ``t`` is not clamped,
        values outside [0, 1] extrapolate.
        """
        self._check_same_space(other)
        return self.__class__(lerp_values(self._value, other._value, t))  # type: ignore[arg-type]

    def with_alpha(self, alpha: float) -> Self:
        """Return a new instance with only the alpha channel replaced."""
        return self.__class__(self.components + (alpha,))


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
