# core/utils.py
import math
from typing import Callable, Iterable, Optional, TypeVar

import numpy as np

from raytracer.core.vector import Vector3

# Minimum hit distance, degenerate-determinant threshold and secondary ray
# offset. Tied to scene scale: scenes much smaller than ~1 unit lose detail.
EPS = 1e-3

T = TypeVar("T")


def make_rng(seed=None) -> np.random.Generator:
    """
    Returns a numpy Generator. Passing an existing Generator returns it unchanged.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: np.random.Generator) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside the unit disk of the xy-plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1.0:
            return p


def point_in_sphere(radius: float, rng: np.random.Generator) -> Vector3:
    """
    Uniform random point inside a sphere of the given radius.
    """
    if radius <= 0:
        return Vector3(0, 0, 0)
    return random_in_unit_sphere(rng) * radius


def point_in_disk(radius: float, rng: np.random.Generator) -> Vector3:
    """
    Uniform random point inside a disk of the given radius (z = 0).
    """
    if radius <= 0:
        return Vector3(0, 0, 0)
    return random_in_unit_disk(rng) * radius


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)


def nearest(items: Iterable[T], key: Callable[[T], float]) -> Optional[T]:
    """
    Item with the smallest key, or None for an empty iterable.

    A NaN key never wins nor loses a comparison, so the first candidate is
    kept on ties and the reduction always terminates.
    """
    best = None
    best_key = math.inf
    for item in items:
        k = key(item)
        if best is None or k < best_key:
            best = item
            best_key = k
    return best
