# materials/dielectric.py
from typing import List, Sequence, Union

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo
from raytracer.materials.material import Material
from raytracer.materials.metal import Specular


class Transparent(Material):
    """
    Refracting material that lets `1 - opacity` of the light through.
    """
    def __init__(self, opacity: float, ior: float,
                 color: Union[Vector3, tuple] = (1.0, 1.0, 1.0)):
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Opacity must be within [0, 1], got {opacity}")
        if ior <= 0:
            raise ValueError(f"Index of refraction must be positive, got {ior}")
        self.opacity = float(opacity)
        self.ior = float(ior)
        self.color = Vector3.from_any(color)

    def with_ior(self, ior: float) -> "Transparent":
        return Transparent(self.opacity, ior, self.color)

    def with_opacity(self, opacity: float) -> "Transparent":
        return Transparent(opacity, self.ior, self.color)

    def with_color(self, color) -> "Transparent":
        return Transparent(self.opacity, self.ior, color)

    def ratio(self, hit: HitInfo) -> float:
        """
        Incident over transmitted index: leaving the medium uses `ior`,
        entering it uses `1 / ior`.
        """
        return self.ior if hit.is_to_outward else 1.0 / self.ior

    def scatter(self, hit: HitInfo, rng: np.random.Generator) -> List[Ray]:
        refracted = hit.refract(self.ratio(hit))
        if refracted is None:
            # Total internal reflection
            return [hit.reflect()]
        return [refracted]

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        if not traced:
            return Color(0, 0, 0)
        return self.color * (1.0 - self.opacity) * traced[0]


class Dielectric(Material):
    """
    Glass-like material: reflects or refracts each ray, choosing at random
    with Schlick's reflectance as the reflection probability.
    """
    def __init__(self, ior: float):
        self.specular = Specular(1.0)
        self.transparent = Transparent(0.0, ior)

    @property
    def ior(self) -> float:
        return self.transparent.ior

    def with_ior(self, ior: float) -> "Dielectric":
        return Dielectric(ior)

    def scatter(self, hit: HitInfo, rng: np.random.Generator) -> List[Ray]:
        if rng.random() < hit.reflect_prob(self.transparent.ratio(hit)):
            return self.specular.scatter(hit, rng)
        return self.transparent.scatter(hit, rng)

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        return self.transparent.render(hit, world, traced)

    def __repr__(self) -> str:
        return f"Dielectric(ior={self.ior})"
