# materials/lambertian.py
from typing import List, Sequence, Union

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.utils import point_in_sphere
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo
from raytracer.materials.material import Material
from raytracer.materials.metal import Specular


class LambertianModel(Material):
    """
    Diffuse material that gathers light from one randomly scattered ray.
    """

    def __init__(self, albedo: float, color: Union[Vector3, tuple] = (1.0, 1.0, 1.0)):
        self.specular = Specular(albedo)
        self.color = Vector3.from_any(color)

    @property
    def albedo(self) -> float:
        return self.specular.albedo

    def with_color(self, color) -> "LambertianModel":
        return LambertianModel(self.albedo, color)

    def with_albedo(self, albedo: float) -> "LambertianModel":
        return LambertianModel(albedo, self.color)

    def scatter(self, hit: HitInfo, rng: np.random.Generator) -> List[Ray]:
        reflected = hit.reflect()
        # Pick a random scatter direction around the mirror direction.
        direction = reflected.direction + point_in_sphere(1.0, rng)

        # If the direction is degenerate (very small), just use the normal.
        if direction.near_zero():
            direction = hit.normal
        return [reflected.with_direction(direction)]

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        return self.specular.render(hit, world, traced) * self.color

    def __repr__(self) -> str:
        return f"LambertianModel(albedo={self.albedo}, color={self.color!r})"
