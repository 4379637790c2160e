"""Pytest configuration for raytracer tests.

Provides seeded random generators and small reference scenes shared by the
test modules.
"""

import numpy as np
import pytest

from raytracer import PhongModel, SkyLight, Sphere, Vector3, World


class FixedRandom:
    """Stand-in for numpy.random.Generator whose random() is a constant."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        return low + (high - low) * self.value


@pytest.fixture
def rng():
    """A freshly seeded generator, identical for every test."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_rng():
    """Factory for generators returning a constant draw."""
    return FixedRandom


@pytest.fixture
def empty_world():
    return World.empty()


@pytest.fixture
def sky_world():
    """No geometry, only a sky light."""
    world = World.empty()
    world.add_light(SkyLight())
    return world


@pytest.fixture
def unit_sphere_world():
    """A white Phong sphere of radius 1 at the origin, no lights."""
    world = World.empty()
    world.add_obj(Sphere(Vector3(0, 0, 0), 1.0), PhongModel())
    return world
