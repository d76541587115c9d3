"""Three-component vector value type.

Vec3 is an immutable value: every operator returns a new vector and never
mutates its operands. Components are stored as Python floats (IEEE-754
binary64).

Arithmetic with another Vec3 is component-wise. Arithmetic with a real
scalar broadcasts the scalar across all three components, in either operand
order. Scalar-first subtraction and division follow the vector-first form,
so ``2.0 - v == v - 2.0`` and ``2.0 / v == v / 2.0``.

Division never raises: dividing by a zero component yields ``inf`` or
``nan`` as IEEE-754 defines.

Example:
    >>> from rtweekend.core.vec3 import Vec3
    >>> v = Vec3(3, 4, 0)
    >>> v.length()
    5.0
    >>> v[1]
    4.0
    >>> Vec3(2, 3, 4).cross(Vec3(5, 6, 7))
    Vec3(x=-3.0, y=6.0, z=-3.0)
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vec3:
    """A 3D vector of floats.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float
    y: float
    z: float

    # NumPy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise TypeError(f"Vec3 components must be real numbers, got {name}={value!r}")
            object.__setattr__(self, name, float(value))

    # -------------------------------------------------------------------------
    # Component access
    # -------------------------------------------------------------------------

    def __getitem__(self, index: int) -> float:
        """Return the component at index 0, 1 or 2.

        Raises:
            IndexError: If the index is not 0, 1 or 2.
            TypeError: If the index is not an integer.
        """
        i = operator.index(index)
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"Expect index between 0 and 2, got {i}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _combine(self, other: object, op: Callable[[float, float], float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, numbers.Real):
            s = float(other)
            return Vec3(op(self.x, s), op(self.y, s), op(self.z, s))
        return NotImplemented

    def __add__(self, other: object) -> Vec3:
        return self._combine(other, operator.add)

    def __sub__(self, other: object) -> Vec3:
        return self._combine(other, operator.sub)

    def __mul__(self, other: object) -> Vec3:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: object) -> Vec3:
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._combine(other, _ieee_divide)

    def __radd__(self, other: object) -> Vec3:
        return self.__add__(other)

    def __rmul__(self, other: object) -> Vec3:
        return self.__mul__(other)

    def __rsub__(self, other: object) -> Vec3:
        # Same operand order as v - s
        return self.__sub__(other)

    def __rtruediv__(self, other: object) -> Vec3:
        # Same operand order as v / s
        return self.__truediv__(other)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    # -------------------------------------------------------------------------
    # Products and norms
    # -------------------------------------------------------------------------

    def dot(self, other: Vec3) -> float:
        """Dot product of this vector and another."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product, perpendicular to both vectors."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared length, cheaper than length() for comparisons."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction.

        The zero vector has no direction; it normalizes to the zero vector
        instead of a vector of NaNs.
        """
        length = self.length()
        if length == 0.0:
            logger.debug("Normalizing a zero-length vector, returning zero")
            return Vec3(0.0, 0.0, 0.0)
        return self / length


def _ieee_divide(a: float, b: float) -> float:
    return float(np.float64(a) / np.float64(b))


# Role aliases, same type
Point3 = Vec3
Color = Vec3
