# geometry/hittable.py
import math
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.utils import EPS, reflect, schlick
from raytracer.core.vector import Vector3


class HitInfo:
    """
    Geometry of a single ray-surface intersection.

    The normal always faces the incoming ray; `is_to_outward` tells whether
    it had to be flipped, i.e. whether the ray is leaving the surface from
    its back side.
    """
    __slots__ = ("distance", "normal", "hit_point", "dir_in", "dir_out", "is_to_outward")

    def __init__(self, distance: float, normal: Vector3, hit_point: Vector3, dir_in: Vector3):
        normal = normal.normalize()
        dir_in = dir_in.normalize()
        if normal.dot(dir_in) > -EPS:
            normal = -normal
            self.is_to_outward = True
        else:
            self.is_to_outward = False
        self.distance = distance
        self.normal = normal
        self.hit_point = hit_point
        self.dir_in = dir_in
        self.dir_out = reflect(dir_in, normal).normalize()

    def translated(self, offset: Vector3) -> "HitInfo":
        """
        Same hit moved by `offset`; the orientation is kept as is.
        """
        moved = HitInfo.__new__(HitInfo)
        moved.distance = self.distance
        moved.normal = self.normal
        moved.hit_point = self.hit_point + offset
        moved.dir_in = self.dir_in
        moved.dir_out = self.dir_out
        moved.is_to_outward = self.is_to_outward
        return moved

    def pos(self) -> Vector3:
        """
        Hit point nudged along the mirror direction, used as the origin of
        secondary rays so they do not re-hit the same surface.
        """
        return self.hit_point + self.dir_out * EPS

    def reflect(self) -> Ray:
        return Ray(self.pos(), self.dir_out)

    def refract(self, ratio: float) -> Optional[Ray]:
        """
        Refracted ray for the given ratio of refractive indices
        (incident over transmitted), or None on total internal reflection.
        """
        cos_i = -self.dir_in.dot(self.normal)
        discriminant = 1.0 - ratio * ratio * (1.0 - cos_i * cos_i)
        if discriminant <= 0:
            return None
        direction = self.dir_in * ratio + self.normal * (ratio * cos_i - math.sqrt(discriminant))
        return Ray(self.hit_point - self.normal * EPS, direction)

    def reflect_prob(self, ior: float) -> float:
        """
        Schlick's estimate of the reflected fraction at this hit.
        """
        cos_i = min(-self.dir_in.dot(self.normal), 1.0)
        return schlick(cos_i, ior)

    def __repr__(self) -> str:
        return (f"HitInfo(distance={self.distance}, normal={self.normal!r}, "
                f"hit_point={self.hit_point!r}, is_to_outward={self.is_to_outward})")


class HitRecord:
    """
    A HitInfo together with the object that was struck.
    """
    __slots__ = ("info", "obj")

    def __init__(self, info: HitInfo, obj):
        self.info = info
        self.obj = obj

    @property
    def material(self):
        return self.obj.material

    @property
    def distance(self) -> float:
        return self.info.distance


class Shape:
    """
    Abstract class for geometry that can be hit by a ray.
    """
    def hit(self, ray: Ray) -> Optional[HitInfo]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
