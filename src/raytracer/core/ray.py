# core/ray.py
from raytracer.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and a unit direction.

    Rays are values: transforms return new rays instead of mutating.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        direction = Vector3.from_any(direction)
        if direction.length_squared() == 0:
            raise ValueError("Ray direction must not be a zero vector")
        self.origin = Vector3.from_any(origin)
        self.direction = direction.normalize()

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def with_origin(self, origin: Vector3) -> "Ray":
        return Ray(origin, self.direction)

    def with_direction(self, direction: Vector3) -> "Ray":
        return Ray(self.origin, direction)

    def hit(self, world, rng=None):
        """
        Nearest intersection of this ray with the world's objects, as a
        HitRecord, or None.
        """
        return world.hit(self, rng)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
