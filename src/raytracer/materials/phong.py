# materials/phong.py
from typing import List, Sequence, Union

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitInfo
from raytracer.lights.light import LightInfo
from raytracer.materials.material import Material

# Ambient term added for every light, lit or in shadow.
AMBIENT = 0.1
SPECULAR_WEIGHT = 0.5
DIFFUSE_WEIGHT = 0.5


class PhongModel(Material):
    """
    Locally shaded diffuse material (Phong reflection model).

    Needs no secondary rays: the color is computed from the world's lights
    only. Builder methods return modified copies.
    """

    def __init__(self, shininess: float = 1.0, diffuse: float = 0.5,
                 color: Union[Vector3, tuple] = (1.0, 1.0, 1.0)):
        self.shininess = float(shininess)
        self.diffuse = float(diffuse)
        self.color = Vector3.from_any(color)

    def with_shininess(self, shininess: float) -> "PhongModel":
        return PhongModel(shininess, self.diffuse, self.color)

    def with_diffuse(self, kd: float) -> "PhongModel":
        return PhongModel(self.shininess, kd, self.color)

    def with_color(self, color) -> "PhongModel":
        return PhongModel(self.shininess, self.diffuse, color)

    def scatter(self, hit: HitInfo, rng: np.random.Generator) -> List[Ray]:
        return []

    def light_term(self, hit: HitInfo, world, light) -> Color:
        """
        Contribution of a single light at the hit.
        """
        looked = light.looked(hit.reflect(), world)
        if looked is not None:
            return looked

        info = LightInfo(light, hit, world)
        to_light = -info.dir()

        si = max(hit.dir_out.dot(to_light), 0.0) ** self.shininess
        si = min(si, 1.0)
        di = max(hit.normal.dot(to_light), 0.0)
        li = info.color() * info.intensity()

        if info.is_in_shadow():
            return li * AMBIENT
        return li * (si * SPECULAR_WEIGHT + di * DIFFUSE_WEIGHT + AMBIENT)

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        total = Color(0, 0, 0)
        for light in world.lights:
            total = total + self.light_term(hit, world, light)
        return total * self.color * self.diffuse

    def __repr__(self) -> str:
        return f"PhongModel(shininess={self.shininess}, diffuse={self.diffuse}, color={self.color!r})"
