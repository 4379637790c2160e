# lights/parallel.py
from raytracer.core.ray import Ray
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo
from raytracer.lights.light import LightSource


class ParallelLight(LightSource):
    """
    Directional light (sun-like): every point is lit from the same direction.
    """
    def __init__(self, direction: Vector3, color=(1.0, 1.0, 1.0)):
        direction = Vector3.from_any(direction)
        if direction.near_zero():
            raise ValueError("Light direction must not be a zero vector")
        self.direction = direction.normalize()
        self.light_color = Vector3.from_any(color)

    def with_color(self, color) -> "ParallelLight":
        return ParallelLight(self.direction, color)

    def intensity(self, hit: HitInfo) -> float:
        return 1.0

    def dir_at(self, hit: HitInfo) -> Vector3:
        return self.direction

    def is_in_shadow(self, hit: HitInfo, world) -> bool:
        return Ray(hit.pos(), -self.direction).hit(world) is not None

    def color(self, hit: HitInfo) -> Color:
        return self.light_color
