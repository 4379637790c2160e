# geometry/world.py
import logging
from typing import List, Optional

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.utils import make_rng, nearest
from raytracer.core.vector import Color, Vector3
from raytracer.geometry.hittable import HitRecord, Shape

logger = logging.getLogger(__name__)


class Object:
    """
    A shape paired with the material it is rendered with.

    An optional `motion` vector moves the shape linearly during the exposure:
    each intersection test places it at `motion * u` with `u` drawn uniformly
    from [0, 1].
    """
    __slots__ = ("shape", "material", "motion")

    def __init__(self, shape: Shape, material, motion: Optional[Vector3] = None):
        self.shape = shape
        self.material = material
        self.motion = Vector3.from_any(motion) if motion is not None else None

    def hit_by(self, ray: Ray, rng: Optional[np.random.Generator] = None) -> Optional[HitRecord]:
        if self.motion is None or rng is None:
            info = self.shape.hit(ray)
            return HitRecord(info, self) if info is not None else None

        offset = self.motion * rng.random()
        info = self.shape.hit(ray.with_origin(ray.origin - offset))
        if info is None:
            return None
        # Back from the shape's displaced frame into world space
        return HitRecord(info.translated(offset), self)


class World:
    """
    Objects and lights of a scene, plus the recursive integrator.

    A world is only mutated while the scene is assembled; during a render it
    is shared read-only, so `trace` may run concurrently as long as every
    caller passes its own random generator.
    """
    def __init__(self):
        self.objects: List[Object] = []
        self.lights: list = []

    @classmethod
    def empty(cls) -> "World":
        return cls()

    def add_obj(self, shape: Shape, material, motion: Optional[Vector3] = None) -> Object:
        obj = Object(shape, material, motion)
        self.objects.append(obj)
        logger.debug("Added object %r with %s", shape, type(material).__name__)
        return obj

    def add_light(self, light) -> None:
        self.lights.append(light)
        logger.debug("Added light %s", type(light).__name__)

    def hit(self, ray: Ray, rng: Optional[np.random.Generator] = None) -> Optional[HitRecord]:
        """
        Nearest intersection among all objects, or None.
        """
        hits = (obj.hit_by(ray, rng) for obj in self.objects)
        return nearest((rec for rec in hits if rec is not None),
                       key=lambda rec: rec.distance)

    def trace(self, ray: Ray, depth: int, rng: Optional[np.random.Generator] = None) -> Color:
        """
        Radiance carried back along `ray`, following at most `depth` bounces.
        """
        if depth < 0:
            raise ValueError(f"Trace depth must be non-negative, got {depth}")
        if depth == 0:
            return Color(0, 0, 0)
        rng = make_rng(rng)

        # One motion draw per step: lights judge the ray against the same hit
        rec = self.hit(ray, rng)

        # Rays that escape the scene or look straight at an emitter
        claimed = [c for c in (light.seen(ray, rec) for light in self.lights) if c is not None]
        if claimed:
            return sum(claimed, Color(0, 0, 0))

        if rec is None:
            return Color(0, 0, 0)

        material = rec.material
        traced = [self.trace(r, depth - 1, rng) for r in material.scatter(rec.info, rng)]
        return material.render(rec.info, self, traced)
