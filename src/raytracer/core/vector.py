# core/vector.py
import math
from typing import Iterator, Tuple, Union

import numpy as np

Number = Union[int, float]


class Vector3:
    """
    A 3D vector used as a point, a direction or an RGB color.

    Supports scalar and component-wise arithmetic, dot and cross products,
    normalization and projection.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> "Vector3":
        return Vector3(1.0, 1.0, 1.0)

    @staticmethod
    def from_any(value) -> "Vector3":
        """
        Build a vector from a Vector3 or any 3-item sequence.
        """
        if isinstance(value, Vector3):
            return value
        x, y, z = value
        return Vector3(x, y, z)

    def __add__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other: Number) -> "Vector3":
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __rsub__(self, other: Number) -> "Vector3":
        return Vector3(other - self.x, other - self.y, other - self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: Number) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __rtruediv__(self, other: Number) -> "Vector3":
        return Vector3(other / self.x, other / self.y, other / self.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def length_squared(self) -> float:
        return self.dot(self)

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    unit = normalize

    def distance(self, other: "Vector3") -> float:
        return (self - other).length()

    def proj_to(self, other: "Vector3") -> "Vector3":
        """
        Projection of this vector onto the direction of `other`.
        """
        n = other.normalize()
        return n * self.dot(n)

    def is_parallel(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return abs(abs(self.normalize().dot(other.normalize())) - 1.0) <= tol

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """
        Component-wise blend: (1 - t) * self + t * other.
        """
        return self * (1.0 - t) + other * t

    def near_zero(self, s: float = 1e-8) -> bool:
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def isclose(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Colors are plain vectors; channels are linear and not clamped.
Color = Vector3
