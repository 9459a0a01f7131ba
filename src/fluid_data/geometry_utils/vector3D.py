# ------------------------------------------------------------------------------
#  fluid-data
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of fluid-data, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""
Three-component vector used for positions, directions, velocities and normals.

Operators and queries return new instances, while the restriction family
(`floor`, `round`, `min`, `max`, `clamp`) together with `normalize` and
`negate` overwrite the receiver in place and return None.

Degenerate inputs are never rejected: dividing by zero or normalizing a
zero-length vector yields inf/nan components following IEEE-754, so numeric
code can check for non-finite values later. `normalize(strict=True)` is the
opt-in variant that raises instead.
"""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Iterator, Sequence

import numpy as np

logger = logging.getLogger("fluid.geometry.vector3d")

DEFAULT_TOLERANCE = 1e-9

class ZeroLengthVectorError(ValueError):
    """Raised by strict normalization of a vector whose length is zero."""

def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics (inf/nan instead of ZeroDivisionError)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))

def _lerp(value1: float, value2: float, amount: float) -> float:
    """Linear interpolation of two scalars."""
    return value1 + (value2 - value1) * amount

class _NamedVector:
    """Read-only class attribute that hands out a fresh copy on every access."""

    def __init__(self, x: float, y: float, z: float):
        """Initialize the instance."""
        self._components = (float(x), float(y), float(z))
        self._name = ""

    def __set_name__(self, owner, name):
        self._name = name

    def __get__(self, instance, owner):
        return owner(*self._components)

    def __set__(self, instance, value):
        raise AttributeError(f"{self._name} is a read-only vector constant")

    def __delete__(self, instance):
        raise AttributeError(f"{self._name} is a read-only vector constant")

class _VectorMeta(type):
    """Metaclass that keeps the named constants from being rebound on the class."""

    def _is_constant(cls, name):
        return any(isinstance(klass.__dict__.get(name), _NamedVector) for klass in cls.__mro__)

    def __setattr__(cls, name, value):
        if cls._is_constant(name):
            raise AttributeError(f"{name} is a read-only vector constant")
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        if cls._is_constant(name):
            raise AttributeError(f"{name} is a read-only vector constant")
        super().__delattr__(name)

class Vector3D(metaclass=_VectorMeta):
    """Vector 3 d."""

    __slots__ = ("x", "y", "z")

    ZERO = _NamedVector(0.0, 0.0, 0.0)
    ONE = _NamedVector(1.0, 1.0, 1.0)
    UP = _NamedVector(0.0, 1.0, 0.0)
    DOWN = _NamedVector(0.0, -1.0, 0.0)
    LEFT = _NamedVector(-1.0, 0.0, 0.0)
    RIGHT = _NamedVector(1.0, 0.0, 0.0)
    FORWARD = _NamedVector(0.0, 0.0, -1.0)
    BACKWARD = _NamedVector(0.0, 0.0, 1.0)

    def __init__(self, x: float = 0.0, y: float | None = None, z: float | None = None):
        """
        Initialize the instance.

        ``Vector3D(v)`` sets every component to ``v``; ``Vector3D(x, y)``
        leaves ``z`` at zero.
        """
        if y is None and z is None:
            y = z = x
        self.x = float(x)
        self.y = float(y) if y is not None else 0.0
        self.z = float(z) if z is not None else 0.0

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector3D":
        """Build a vector from a sequence or numpy array of three values."""
        flat = np.asarray(values, dtype=np.float64).ravel()
        if flat.shape != (3,):
            raise ValueError(f"Expected exactly 3 components, got {flat.size}")
        return cls(flat[0], flat[1], flat[2])

    def copy(self) -> "Vector3D":
        """Return an independent copy."""
        return type(self)(self.x, self.y, self.z)

    __copy__ = copy

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # comparison

    def __eq__(self, other):
        """Exact component-wise equality."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __gt__(self, other):
        """True when every component is strictly greater."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.x > other.x and self.y > other.y and self.z > other.z

    def __lt__(self, other):
        """True when every component is strictly smaller."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z

    def within(self, position_a: "Vector3D", position_b: "Vector3D") -> bool:
        """Strict containment in the open box from ``position_a`` (low) to ``position_b`` (high)."""
        return self > position_a and self < position_b

    def without(self, position_a: "Vector3D", position_b: "Vector3D") -> bool:
        """
        Mirror of `within` with the corners swapped: below ``position_a`` and
        above ``position_b`` on every axis. It is not the negation of `within`.
        """
        return self < position_a and self > position_b

    def is_zero(self) -> bool:
        """Return True for (0, 0, 0)."""
        return self == Vector3D.ZERO

    def is_one(self) -> bool:
        """Return True for (1, 1, 1)."""
        return self == Vector3D.ONE

    def is_close(self, other: "Vector3D", tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Approximate equality with an absolute per-component tolerance."""
        if not isinstance(other, Vector3D):
            raise TypeError(f"is_close expects a Vector3D, got {type(other).__name__}")
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) <= tolerance
            and abs(self.z - other.z) <= tolerance
        )

    # arithmetic

    def __add__(self, other):
        """Provide the add."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        """Provide the sub."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3D(0.0 - self.x, 0.0 - self.y, 0.0 - self.z)

    def __mul__(self, other):
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector3D):
            return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other):
        """
        Component-wise quotient with a vector, or division by a number.

        Scalar division multiplies by the reciprocal computed once, which can
        differ from direct division in the last bit.
        """
        if isinstance(other, Vector3D):
            return Vector3D(
                _divide(self.x, other.x),
                _divide(self.y, other.y),
                _divide(self.z, other.z),
            )
        if isinstance(other, Real):
            percent = _divide(1.0, other)
            return Vector3D(self.x * percent, self.y * percent, self.z * percent)
        return NotImplemented

    # restrictions (in place)

    def floor(self) -> None:
        """Floor every component."""
        self.x = float(np.floor(self.x))
        self.y = float(np.floor(self.y))
        self.z = float(np.floor(self.z))

    def round(self) -> None:
        """Round every component to the nearest integer, ties to even."""
        self.x = float(np.rint(self.x))
        self.y = float(np.rint(self.y))
        self.z = float(np.rint(self.z))

    def min(self, value: "Vector3D") -> None:
        """Keep the per-component minimum against ``value``."""
        self.x = float(np.minimum(self.x, value.x))
        self.y = float(np.minimum(self.y, value.y))
        self.z = float(np.minimum(self.z, value.z))

    def max(self, value: "Vector3D") -> None:
        """Keep the per-component maximum against ``value``."""
        self.x = float(np.maximum(self.x, value.x))
        self.y = float(np.maximum(self.y, value.y))
        self.z = float(np.maximum(self.z, value.z))

    def clamp(self, minimum: "Vector3D", maximum: "Vector3D") -> None:
        """
        Clamp every component into ``[minimum, maximum]``.

        Bounds are not validated: where ``minimum > maximum`` on an axis the
        component ends up equal to ``maximum``.
        """
        self.x = float(np.minimum(np.maximum(self.x, minimum.x), maximum.x))
        self.y = float(np.minimum(np.maximum(self.y, minimum.y), maximum.y))
        self.z = float(np.minimum(np.maximum(self.z, minimum.z), maximum.z))

    # geometry

    def normalize(self, strict: bool = False) -> None:
        """
        Scale the vector in place to unit length.

        A zero-length vector becomes (nan, nan, nan) unless ``strict`` is set,
        in which case ZeroLengthVectorError is raised and the vector is left
        untouched.
        """
        length = self.length()
        if length == 0.0:
            if strict:
                raise ZeroLengthVectorError(f"Cannot normalize zero-length vector {self}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Normalizing zero-length vector %s; components become nan", self)
        number = _divide(1.0, length)
        self.x *= number
        self.y *= number
        self.z *= number

    def normalized(self, strict: bool = False) -> "Vector3D":
        """Return a unit-length copy, see `normalize`."""
        result = self.copy()
        result.normalize(strict=strict)
        return result

    def cross(self, value: "Vector3D") -> "Vector3D":
        """Provide the cross."""
        x = (self.y * value.z) - (value.y * self.z)
        y = 0.0 - ((self.x * value.z) - (value.x * self.z))
        z = (self.x * value.y) - (value.x * self.y)
        return Vector3D(x, y, z)

    def dot(self, value: "Vector3D") -> float:
        """Provide the dot."""
        return (self.x * value.x) + (self.y * value.y) + (self.z * value.z)

    @staticmethod
    def reflect(incident: "Vector3D", normal: "Vector3D") -> "Vector3D":
        """Reflect ``incident`` about ``normal`` (expected to be unit length)."""
        number = (incident.x * normal.x) + (incident.y * normal.y) + (incident.z * normal.z)
        return Vector3D(
            incident.x - 2.0 * normal.x * number,
            incident.y - 2.0 * normal.y * number,
            incident.z - 2.0 * normal.z * number,
        )

    def negate(self) -> None:
        """Flip the sign of every component in place."""
        self.x = 0.0 - self.x
        self.y = 0.0 - self.y
        self.z = 0.0 - self.z

    def interpolate(self, target: "Vector3D", amount: float) -> "Vector3D":
        """Linear interpolation towards ``target``; ``amount`` outside [0, 1] extrapolates."""
        return Vector3D(
            _lerp(self.x, target.x, amount),
            _lerp(self.y, target.y, amount),
            _lerp(self.z, target.z, amount),
        )

    def length(self) -> float:
        """Return the euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return (self.x * self.x) + (self.y * self.y) + (self.z * self.z)

    def distance(self, target: "Vector3D") -> float:
        """Return the euclidean distance to ``target``."""
        return math.sqrt(self.distance_squared(target))

    def distance_squared(self, target: "Vector3D") -> float:
        compare_x = self.x - target.x
        compare_y = self.y - target.y
        compare_z = self.z - target.z
        return (compare_x * compare_x) + (compare_y * compare_y) + (compare_z * compare_z)

    def __str__(self) -> str:
        return f"X:{self.x}, Y:{self.y}, Z:{self.z}"

    def __repr__(self) -> str:
        """Return the string representation."""
        return f"Vector3D({self.x}, {self.y}, {self.z})"

Vector3 = Vector3D
