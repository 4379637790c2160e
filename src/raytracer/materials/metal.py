# materials/metal.py
from typing import List, Sequence, Union

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.utils import point_in_sphere
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo
from raytracer.materials.material import Material


class Specular(Material):
    """
    Perfect mirror: reflects `albedo` of whatever the mirror ray sees.
    """
    def __init__(self, albedo: float):
        self.albedo = float(albedo)

    def with_albedo(self, albedo: float) -> "Specular":
        return Specular(albedo)

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        if not traced:
            return Color(0, 0, 0)
        return traced[0] * self.albedo


class Metal(Material):
    """
    Metal material: a tinted mirror whose reflection is blurred by `fuzz`.
    """
    def __init__(self, fuzz: float = 0.0, albedo: float = 1.0,
                 color: Union[Vector3, tuple] = (1.0, 1.0, 1.0)):
        self.specular = Specular(albedo)
        self.fuzz = min(max(float(fuzz), 0.0), 1.0)
        self.color = Vector3.from_any(color)

    @property
    def albedo(self) -> float:
        return self.specular.albedo

    def with_fuzz(self, fuzz: float) -> "Metal":
        return Metal(fuzz, self.albedo, self.color)

    def with_albedo(self, albedo: float) -> "Metal":
        return Metal(self.fuzz, albedo, self.color)

    def with_color(self, color) -> "Metal":
        return Metal(self.fuzz, self.albedo, color)

    def scatter(self, hit: HitInfo, rng: np.random.Generator) -> List[Ray]:
        reflected = hit.reflect()
        if self.fuzz == 0:
            return [reflected]
        direction = reflected.direction + point_in_sphere(self.fuzz, rng)
        if direction.near_zero():
            return [reflected]
        return [reflected.with_direction(direction)]

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        return self.specular.render(hit, world, traced) * self.color

    def __repr__(self) -> str:
        return f"Metal(fuzz={self.fuzz}, albedo={self.albedo}, color={self.color!r})"
