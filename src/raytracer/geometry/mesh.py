# geometry/mesh.py
from typing import List, Optional

from raytracer.core.ray import Ray
from raytracer.core.utils import EPS, nearest
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitInfo, Shape


def _unit_axis(v, name: str) -> Vector3:
    v = Vector3.from_any(v)
    if v.near_zero():
        raise ValueError(f"{name} axis must not be a zero vector")
    return v.normalize()


class Triangle(Shape):
    """Represents a single triangle in 3D space."""
    def __init__(self, p0: Vector3, p1: Vector3, p2: Vector3):
        self.p0 = Vector3.from_any(p0)
        self.p1 = Vector3.from_any(p1)
        self.p2 = Vector3.from_any(p2)

    def normal(self) -> Vector3:
        return (self.p1 - self.p0).cross(self.p2 - self.p0).normalize()

    def is_in_plane(self, point: Vector3) -> bool:
        return abs((self.p0 - point).dot(self.normal())) < EPS

    def contain(self, point: Vector3) -> bool:
        """
        Whether a point lies in the triangle's plane and within its edges.
        """
        if not self.is_in_plane(point):
            return False
        pp0 = self.p0 - point
        pp1 = self.p1 - point
        pp2 = self.p2 - point
        t0 = pp0.cross(pp1)
        t1 = pp1.cross(pp2)
        t2 = pp2.cross(pp0)
        return t0.dot(t1) > -EPS and t1.dot(t2) > -EPS

    def hit(self, ray: Ray) -> Optional[HitInfo]:
        # Möller–Trumbore intersection algorithm
        edge1 = self.p1 - self.p0
        edge2 = self.p2 - self.p0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)

        # Ray is parallel to the triangle
        if -EPS < a < EPS:
            return None

        f = 1.0 / a
        s = ray.origin - self.p0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)
        if t <= EPS:
            return None
        return HitInfo(t, edge1.cross(edge2), ray.at(t), ray.direction)

    def __repr__(self) -> str:
        return f"Triangle({self.p0!r}, {self.p1!r}, {self.p2!r})"


class Square(Shape):
    """
    A square made of two triangles sharing a diagonal.

    `x` and `y` span the square's plane; `length` is the side length.
    """
    def __init__(self, center: Vector3, x: Vector3, y: Vector3, length: float):
        if length <= 0:
            raise ValueError(f"Square side length must be positive, got {length}")
        center = Vector3.from_any(center)
        x2 = _unit_axis(x, "x") * (length / 2.0)
        y2 = _unit_axis(y, "y") * (length / 2.0)
        p0 = center - x2 + y2
        p1 = center - x2 - y2
        p2 = center + x2 - y2
        p3 = center + x2 + y2
        self.tri0 = Triangle(p0, p1, p2)
        self.tri1 = Triangle(p2, p3, p0)

    @classmethod
    def from_points(cls, p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3) -> "Square":
        """
        Square from its four corners, given anti-clockwise.
        """
        square = cls.__new__(cls)
        square.tri0 = Triangle(p0, p1, p2)
        square.tri1 = Triangle(p2, p3, p0)
        return square

    def normal(self) -> Vector3:
        return self.tri0.normal()

    def contain(self, point: Vector3) -> bool:
        return self.tri0.contain(point) or self.tri1.contain(point)

    def is_in_plane(self, point: Vector3) -> bool:
        return self.tri0.is_in_plane(point)

    def corners(self) -> List[Vector3]:
        return [self.tri0.p0, self.tri0.p1, self.tri0.p2, self.tri1.p1]

    def hit(self, ray: Ray) -> Optional[HitInfo]:
        info = self.tri0.hit(ray)
        if info is None:
            info = self.tri1.hit(ray)
        return info

    def __repr__(self) -> str:
        return f"Square({self.corners()!r})"


class Cube(Shape):
    """
    A cube built from six squares.

    `x` and `y` give the cube's orientation (`y` is orthonormalized against
    `x`); `length` is the side length.
    """
    def __init__(self, center: Vector3, x: Vector3, y: Vector3, length: float):
        if length <= 0:
            raise ValueError(f"Cube side length must be positive, got {length}")
        self.center = Vector3.from_any(center)
        self.x = _unit_axis(x, "x")
        y = Vector3.from_any(y)
        self.y = _unit_axis(y - y.proj_to(self.x), "y")
        self.z = self.x.cross(self.y).normalize()
        self.length = float(length)
        self._squares = self._build_squares()

    def _build_squares(self) -> List[Square]:
        x, y, z = self.x, self.y, self.z
        c = self.center
        half = self.length / 2.0
        length = self.length
        return [
            Square(c + x * half, y, z, length),
            Square(c + y * half, -x, z, length),
            Square(c - x * half, -y, z, length),
            Square(c - y * half, x, z, length),
            Square(c + z * half, x, y, length),
            Square(c - z * half, x, -y, length),
        ]

    def squares(self) -> List[Square]:
        return list(self._squares)

    def hit(self, ray: Ray) -> Optional[HitInfo]:
        hits = (square.hit(ray) for square in self._squares)
        return nearest((info for info in hits if info is not None),
                       key=lambda info: info.distance)

    def __repr__(self) -> str:
        return f"Cube({self.center!r}, {self.x!r}, {self.y!r}, {self.length})"
