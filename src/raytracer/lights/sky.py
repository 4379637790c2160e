# lights/sky.py
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo, HitRecord
from raytracer.lights.light import LightSource

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_gradient(direction: Vector3) -> Color:
    """
    Background color for a direction: white at the nadir blending to blue
    at the zenith (z is up).
    """
    t = 0.5 * (direction.normalize().z + 1.0)
    return WHITE.lerp(SKY_BLUE, t)


class SkyLight(LightSource):
    """
    Environment light: a vertical gradient seen by rays leaving the scene.
    """
    def intensity(self, hit: HitInfo) -> float:
        return 1.0

    def dir_at(self, hit: HitInfo) -> Vector3:
        return -hit.dir_out

    def is_in_shadow(self, hit: HitInfo, world) -> bool:
        return hit.reflect().hit(world) is not None

    def color(self, hit: HitInfo) -> Color:
        return sky_gradient(hit.dir_out)

    def seen(self, ray: Ray, scene_hit: Optional[HitRecord]) -> Optional[Color]:
        if scene_hit is not None:
            return None
        return sky_gradient(ray.direction)
