"""Unit tests for the Vector3 type and sampling helpers.

Tests cover:
- Arithmetic with vectors and scalars on either side
- Dot and cross products
- Normalization, projection and blending helpers
- Random sampling inside spheres and disks
- NaN-safe nearest selection
"""

import math

import numpy as np
import pytest

from raytracer.core.utils import (
    nearest,
    point_in_disk,
    point_in_sphere,
    random_unit_vector,
    reflect,
    schlick,
)
from raytracer.core.vector import Color, Vector3


class TestVectorArithmetic:
    """Tests for operators."""

    def test_add_and_sub(self):
        """Vector and scalar addition/subtraction work from both sides."""
        assert Vector3(1, 2, 3) + Vector3(10, 100, 1000) == Vector3(11, 102, 1003)
        assert Vector3(1, 2, 3) + 10 == Vector3(11, 12, 13)
        assert 10 + Vector3(1, 2, 3) == Vector3(11, 12, 13)
        assert Vector3(1, 2, 3) - Vector3(10, 100, 1000) == Vector3(-9, -98, -997)
        assert Vector3(1, 2, 3) - 10 == Vector3(-9, -8, -7)
        assert 10 - Vector3(1, 2, 3) == Vector3(9, 8, 7)

    def test_mul_and_div(self):
        """Scalar and component-wise multiplication and division."""
        assert Vector3(5, 6, 9) * Vector3(1, 2, 3) == Vector3(5, 12, 27)
        assert Vector3(1, 2, 3) * 5 == Vector3(5, 10, 15)
        assert 5 * Vector3(1, 2, 3) == Vector3(5, 10, 15)
        assert Vector3(10, 20, 30) / 5 == Vector3(2, 4, 6)
        assert 24 / Vector3(1, 2, 3) == Vector3(24, 12, 8)
        v = Vector3(1, 1, 1) / Vector3(1, 2, 4)
        assert v == Vector3(1, 0.5, 0.25)

    def test_negation(self):
        assert -Vector3(1, -2, 3) == Vector3(-1, 2, -3)

    def test_components_are_floats(self):
        v = Vector3(1, 2, 3)
        assert isinstance(v.x, float)
        assert tuple(v) == (1.0, 2.0, 3.0)

    def test_color_alias(self):
        assert Color is Vector3


class TestVectorProducts:
    """Tests for dot and cross products."""

    def test_dot(self):
        assert Vector3(1, 2, 3).dot(Vector3(5, 40, 200)) == 685.0

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ((1, 0, 0), (0, 1, 0), (0, 0, 1)),
            ((0, 1, 0), (0, 0, 1), (1, 0, 0)),
            ((0, 0, 1), (1, 0, 0), (0, 1, 0)),
            ((0, 1, 0), (1, 0, 0), (0, 0, -1)),
            ((0, 0, 1), (0, 1, 0), (-1, 0, 0)),
            ((1, 0, 0), (0, 0, 1), (0, -1, 0)),
        ],
    )
    def test_cross(self, a, b, expected):
        assert Vector3(*a).cross(Vector3(*b)) == Vector3(*expected)


class TestVectorHelpers:
    """Tests for length, normalization and related helpers."""

    def test_length(self):
        assert Vector3(3, 4, 0).length() == 5.0
        assert Vector3(3, 4, 0).length_squared() == 25.0

    def test_normalize(self):
        v = Vector3(0, 3, 4).normalize()
        assert v.isclose(Vector3(0, 0.6, 0.8))
        assert v.unit().isclose(v)

    def test_normalize_zero_vector(self):
        """A zero vector stays zero instead of dividing by zero."""
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_projection(self):
        p = Vector3(2, 3, 4).proj_to(Vector3(0, 0, 10))
        assert p.isclose(Vector3(0, 0, 4))

    def test_distance(self):
        assert Vector3(1, 1, 1).distance(Vector3(1, 4, 5)) == 5.0

    def test_is_parallel(self):
        assert Vector3(0, 0, 2).is_parallel(Vector3(0, 0, -1))
        assert not Vector3(0, 1, 1).is_parallel(Vector3(0, 0, 1))

    def test_lerp(self):
        a = Vector3(1, 1, 1)
        b = Vector3(0.5, 0.7, 1.0)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0).isclose(b)
        assert a.lerp(b, 0.5).isclose(Vector3(0.75, 0.85, 1.0))

    def test_conversions(self):
        v = Vector3.from_any((1, 2, 3))
        assert v == Vector3(1, 2, 3)
        assert Vector3.from_any(v) is v
        assert v.to_tuple() == (1.0, 2.0, 3.0)
        np.testing.assert_array_equal(v.to_array(), np.array([1.0, 2.0, 3.0]))

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()

    def test_reflect(self):
        r = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert r == Vector3(1, 1, 0)


class TestSampling:
    """Tests for random point generation."""

    def test_point_in_sphere_within_radius(self, rng):
        for _ in range(200):
            assert point_in_sphere(0.3, rng).length() < 0.3

    def test_point_in_disk_is_planar(self, rng):
        for _ in range(200):
            p = point_in_disk(2.0, rng)
            assert p.z == 0.0
            assert p.length() < 2.0

    def test_zero_radius(self, rng):
        assert point_in_sphere(0.0, rng) == Vector3(0, 0, 0)
        assert point_in_disk(0.0, rng) == Vector3(0, 0, 0)

    def test_random_unit_vector(self, rng):
        assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_same_seed_same_points(self):
        a = [point_in_sphere(1.0, np.random.default_rng(3)) for _ in range(3)]
        b = [point_in_sphere(1.0, np.random.default_rng(3)) for _ in range(3)]
        assert a == b


class TestNearest:
    """Tests for the NaN-safe minimum."""

    def test_empty(self):
        assert nearest([], key=lambda x: x) is None

    def test_smallest_key(self):
        assert nearest([3.0, 1.0, 2.0], key=lambda x: x) == 1.0

    def test_nan_does_not_break_reduction(self):
        items = [("a", 2.0), ("b", math.nan), ("c", 1.0)]
        assert nearest(items, key=lambda item: item[1]) == ("c", 1.0)

    def test_all_nan_returns_an_item(self):
        items = [("a", math.nan), ("b", math.nan)]
        assert nearest(items, key=lambda item: item[1]) in items


class TestSchlick:
    def test_normal_incidence(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)

    def test_grazing_incidence(self):
        assert schlick(0.0, 1.5) == pytest.approx(1.0)
