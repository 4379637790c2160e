from raytracer.core.vector import Color, Vector3
from raytracer.core.ray import Ray
from raytracer.core.utils import EPS, make_rng

__all__ = ["Color", "Vector3", "Ray", "EPS", "make_rng"]
