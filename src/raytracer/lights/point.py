# lights/point.py
from raytracer.core.ray import Ray
from raytracer.core.utils import EPS
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo
from raytracer.lights.light import LightSource


class PointLight(LightSource):
    """
    Light emitted from a single point; intensity falls off as 1 / distance².
    """
    def __init__(self, position: Vector3, color=(1.0, 1.0, 1.0)):
        self.position = Vector3.from_any(position)
        self.light_color = Vector3.from_any(color)

    def with_color(self, color) -> "PointLight":
        return PointLight(self.position, color)

    def intensity(self, hit: HitInfo) -> float:
        d2 = (self.position - hit.pos()).length_squared()
        if d2 == 0:
            return 0.0
        return 1.0 / d2

    def dir_at(self, hit: HitInfo) -> Vector3:
        return (hit.pos() - self.position).normalize()

    def is_in_shadow(self, hit: HitInfo, world) -> bool:
        point = hit.pos()
        to_light = self.position - point
        if to_light.near_zero():
            return False
        occluder = Ray(point, to_light).hit(world)
        if occluder is None:
            return False
        # Occluded only by something strictly in front of the light
        return occluder.distance + EPS < to_light.length()

    def color(self, hit: HitInfo) -> Color:
        return self.light_color
