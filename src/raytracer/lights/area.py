# lights/area.py
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo, HitRecord, Shape
from raytracer.lights.light import LightSource


class LightShape(LightSource):
    """
    Area light: a shape that glows with a constant color.

    The shape itself is not part of the world's objects; rays that reach it
    before any scene geometry see its color.
    """
    def __init__(self, shape: Shape, color=(1.0, 1.0, 1.0)):
        self.shape = shape
        self.light_color = Vector3.from_any(color)

    def with_color(self, color) -> "LightShape":
        return LightShape(self.shape, color)

    def intensity(self, hit: HitInfo) -> float:
        return 1.0

    def dir_at(self, hit: HitInfo) -> Vector3:
        return -hit.dir_out

    def is_in_shadow(self, hit: HitInfo, world) -> bool:
        return self.looked(hit.reflect(), world) is None

    def color(self, hit: HitInfo) -> Color:
        return self.light_color

    def seen(self, ray: Ray, scene_hit: Optional[HitRecord]) -> Optional[Color]:
        light_hit = self.shape.hit(ray)
        if light_hit is None:
            return None
        if scene_hit is not None and scene_hit.distance <= light_hit.distance:
            return None
        return self.light_color
