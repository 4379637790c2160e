# geometry/sphere.py
import math
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import HitInfo, Shape


class Sphere(Shape):
    """
    Represents a sphere defined by its center and radius.
    """
    def __init__(self, center: Vector3, radius: float):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = Vector3.from_any(center)
        self.radius = float(radius)

    def hit(self, ray: Ray) -> Optional[HitInfo]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        b = 2.0 * oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        # Sphere is entirely behind the ray
        if t2 < 0:
            return None
        # Origin inside the sphere: take the far root
        t = t2 if t1 < 0 else t1

        point = ray.at(t)
        return HitInfo(t, point - self.center, point, ray.direction)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
