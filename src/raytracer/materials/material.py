# materials/material.py
from typing import List, Sequence

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Color
from raytracer.geometry.hittable import HitInfo


class Material:
    """
    Abstract material class.

    A material decides which secondary rays it needs traced (`scatter`) and
    combines their colors with local lighting (`render`). The i-th ray
    returned by `scatter` corresponds to the i-th color passed to `render`.
    """
    def scatter(self, hit: HitInfo, rng: np.random.Generator) -> List[Ray]:
        """
        Secondary rays to trace. Defaults to the mirror reflection.
        """
        return [hit.reflect()]

    def render(self, hit: HitInfo, world, traced: Sequence[Color]) -> Color:
        """
        Final color at the hit given the traced colors of the scattered rays.
        """
        raise NotImplementedError("render() must be implemented by subclasses.")
