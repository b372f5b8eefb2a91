"""
Affine Primitives (Points and Vectors)
======================================
Points are locations, Vectors are displacements. Both are 3-D coordinate
triples that differ by their homogeneous coordinate ``w``: 1 for a Point and
0 for a Vector. Adding the ``w`` values of the operands predicts the kind of
the result, which is why only these combinations are allowed:

    Vector + Point  -> Point     (displace a point)
    Point  + Vector -> Point
    Vector + Vector -> Vector    (compose displacements)
    Point  - Point  -> Vector    (displacement between two locations)
    Point  - Vector -> Vector
    Vector - Vector -> Vector

Every other combination raises TypeError.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Sequence, Type, TypeVar, Union

import numpy as np

from raytracer.config import EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt

T = TypeVar("T", bound="Tuple")


@dataclass(frozen=True, eq=False)
class Tuple(ABC):
    """
    Shared capability of Point and Vector.

    The homogeneous coordinate is not a field: each concrete type returns a
    constant from ``w``, so it can never be set or changed.
    """
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @property
    @abstractmethod
    def w(self) -> float:
        """Homogeneous coordinate (1 for locations, 0 for displacements)."""

    @classmethod
    def zero(cls: Type[T]) -> T:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls: Type[T], values: Union[Sequence[float], npt.NDArray[np.float64]]) -> T:
        """
        Builds a tuple from the first three entries of ``values``.

        A fourth entry, if present, must match the homogeneous coordinate of
        the requested type.
        """
        if len(values) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 values. Got {len(values)}.")
        result = cls(values[0], values[1], values[2])
        if len(values) == 4 and float(values[3]) != result.w:
            raise ValueError(
                f"{cls.__name__} requires w={result.w}. Got w={float(values[3])}.")
        return result

    def __eq__(self, other: object) -> bool:
        # A Point is never equal to a Vector, whatever the coordinates
        if type(other) is not type(self):
            return NotImplemented
        return (abs(self.x - other.x) < EPSILON and
                abs(self.y - other.y) < EPSILON and
                abs(self.z - other.z) < EPSILON)

    # Tolerant equality is not transitive
    __hash__ = None  # type: ignore[assignment]

    def __neg__(self: T) -> T:
        return type(self)(-self.x, -self.y, -self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_homogeneous(self) -> npt.NDArray[np.float64]:
        """Returns [x, y, z, w], ready to be multiplied by a 4x4 transform."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)


class Point(Tuple):
    """A fixed location in 3-D space."""

    @property
    def w(self) -> float:
        return 1.0

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Point, Vector]) -> Vector:
        # Point - Point = Vector (Direction)
        # Point - Vector = Vector (kept as the established behaviour)
        if isinstance(other, (Point, Vector)):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Point or a Vector from a Point.")


class Vector(Tuple):
    """
    A direction and magnitude with no fixed location.
    """

    @property
    def w(self) -> float:
        return 0.0

    def __add__(self, other: Union[Point, Vector]) -> Union[Point, Vector]:
        # Vector + Point = Point (Translation)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        # Vector + Vector = Vector (Composition)
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Point or a Vector to a Vector.")

    def __sub__(self, other: Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Vector from a Vector.")

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            raise TypeError("Can only multiply a Vector by a scalar. Use dot() or cross() for two Vectors.")
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            raise TypeError("Can only divide a Vector by a scalar.")
        if scalar == 0.0: raise ZeroDivisionError("Cannot divide a Vector by zero.")
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalise(self) -> Vector:
        """
        Returns the unit vector pointing the same way.

        Raises:
            ZeroDivisionError: For the zero vector, which has no direction.
                Callers must guard against it.
        """
        mag = self.magnitude
        if mag == 0.0: raise ZeroDivisionError("Cannot normalise the zero Vector.")
        return self / mag

    def dot(self, other: Vector) -> float:
        if not isinstance(other, Vector):
            raise TypeError("Dot product is only defined between two Vectors.")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Right-handed cross product; ``a.cross(b) == -b.cross(a)``."""
        if not isinstance(other, Vector):
            raise TypeError("Cross product is only defined between two Vectors.")
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )
