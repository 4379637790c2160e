# lights/light.py
from typing import Optional

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo, HitRecord


class LightSource:
    """
    Abstract light source.

    Subclasses describe how strongly and from where a hit point is lit, and
    whether the light is blocked. `seen` and `looked` let a light color a
    ray directly, e.g. a sky seen by a ray that leaves the scene.
    """
    def intensity(self, hit: HitInfo) -> float:
        raise NotImplementedError("intensity() must be implemented by subclasses.")

    def dir_at(self, hit: HitInfo) -> Vector3:
        """
        Unit direction of the light's travel at the hit point.
        """
        raise NotImplementedError("dir_at() must be implemented by subclasses.")

    def is_in_shadow(self, hit: HitInfo, world) -> bool:
        raise NotImplementedError("is_in_shadow() must be implemented by subclasses.")

    def color(self, hit: HitInfo) -> Color:
        raise NotImplementedError("color() must be implemented by subclasses.")

    def seen(self, ray: Ray, scene_hit: Optional[HitRecord]) -> Optional[Color]:
        """
        Color this light gives `ray`, whose nearest scene intersection is
        `scene_hit` (None when it escapes), or None if the light does not
        claim the ray.
        """
        return None

    def looked(self, ray: Ray, world, rng=None) -> Optional[Color]:
        return self.seen(ray, ray.hit(world, rng))

    def illuminate(self, hit: HitInfo, world) -> Color:
        if self.is_in_shadow(hit, world):
            return Color(0, 0, 0)
        return self.color(hit) * self.intensity(hit)


class LightInfo:
    """
    One light evaluated at one hit point.
    """
    __slots__ = ("light", "hit", "world")

    def __init__(self, light: LightSource, hit: HitInfo, world):
        self.light = light
        self.hit = hit
        self.world = world

    def intensity(self) -> float:
        return self.light.intensity(self.hit)

    def dir(self) -> Vector3:
        return self.light.dir_at(self.hit)

    def is_in_shadow(self) -> bool:
        return self.light.is_in_shadow(self.hit, self.world)

    def color(self) -> Color:
        return self.light.color(self.hit)

    def illuminate(self) -> Color:
        return self.light.illuminate(self.hit, self.world)
