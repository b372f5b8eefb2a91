"""
RGB color values for shading and canvas storage.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Union

import numpy as np

from raytracer.config import EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class Color:
    """
    An RGB triple of channel intensities.

    Channels are not clamped: values outside [0, 1] are valid intermediates
    (e.g. the sum of two bright lights) until an exporter maps them to a
    concrete pixel format.
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "g", float(self.g))
        object.__setattr__(self, "b", float(self.b))

    @staticmethod
    def black() -> Color:
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> Color:
        return Color(1.0, 1.0, 1.0)

    @staticmethod
    def red() -> Color:
        return Color(1.0, 0.0, 0.0)

    @staticmethod
    def green() -> Color:
        return Color(0.0, 1.0, 0.0)

    @staticmethod
    def blue() -> Color:
        return Color(0.0, 0.0, 1.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (abs(self.r - other.r) < EPSILON and
                abs(self.g - other.g) < EPSILON and
                abs(self.b - other.b) < EPSILON)

    # Tolerant equality is not transitive
    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Color) -> Color:
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        raise TypeError("Can only add a Color to a Color.")

    def __sub__(self, other: Color) -> Color:
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        raise TypeError("Can only subtract a Color from a Color.")

    def __mul__(self, other: Union[Color, float]) -> Color:
        # Color * Color = Hadamard product (surface color under a light)
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        # Color * scalar = intensity scaling
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        raise TypeError("Can only multiply a Color by a Color or a scalar.")

    def __rmul__(self, other: float) -> Color:
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        raise TypeError("Can only multiply a Color by a Color or a scalar.")

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.r, self.g, self.b], dtype=np.float64)
