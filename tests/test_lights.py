"""Tests for light sources.

Tests cover:
- Parallel light direction and shadowing
- Point light falloff and the occluder-before-light shadow rule
- Sky gradient and escaping rays
- Area lights seen directly and through reflections
"""

import pytest

from raytracer import (
    EPS,
    Color,
    HitInfo,
    LightShape,
    ParallelLight,
    PhongModel,
    PointLight,
    Ray,
    SkyLight,
    Sphere,
    Square,
    Vector3,
    World,
)
from raytracer.lights import LightInfo, sky_gradient
from raytracer.lights.sky import SKY_BLUE, WHITE


@pytest.fixture
def floor_hit():
    """A ray coming straight down onto the origin of the xy-plane."""
    return HitInfo(1.0, Vector3(0, 0, 1), Vector3(0, 0, 0), Vector3(0, 0, -1))


def world_with(*spheres):
    world = World.empty()
    for center, radius in spheres:
        world.add_obj(Sphere(Vector3(*center), radius), PhongModel())
    return world


class TestParallelLight:
    def test_direction_is_normalized(self):
        assert ParallelLight(Vector3(0, 0, -2)).direction == Vector3(0, 0, -1)

    def test_zero_direction_rejected(self):
        with pytest.raises(ValueError):
            ParallelLight(Vector3(0, 0, 0))

    def test_unblocked(self, floor_hit):
        light = ParallelLight(Vector3(0, 0, -1), (1.0, 0.5, 0.25))
        assert light.intensity(floor_hit) == 1.0
        assert not light.is_in_shadow(floor_hit, World.empty())
        assert light.illuminate(floor_hit, World.empty()) == Color(1.0, 0.5, 0.25)

    def test_blocked(self, floor_hit):
        light = ParallelLight(Vector3(0, 0, -1))
        world = world_with(((0, 0, 3), 0.5))
        assert light.is_in_shadow(floor_hit, world)
        assert light.illuminate(floor_hit, world) == Color(0, 0, 0)

    def test_not_seen_directly(self):
        light = ParallelLight(Vector3(0, 0, -1))
        assert light.looked(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), World.empty()) is None


class TestPointLight:
    def test_inverse_square_falloff(self, floor_hit):
        light = PointLight(Vector3(0, 0, 2))
        assert light.intensity(floor_hit) == pytest.approx(1.0 / (2.0 - EPS) ** 2)

    def test_direction_points_away_from_light(self, floor_hit):
        light = PointLight(Vector3(0, 0, 2))
        assert light.dir_at(floor_hit).isclose(Vector3(0, 0, -1))

    def test_occluder_between_hit_and_light(self, floor_hit):
        light = PointLight(Vector3(0, 0, 2))
        assert light.is_in_shadow(floor_hit, world_with(((0, 0, 1), 0.2)))

    def test_occluder_beyond_light_casts_no_shadow(self, floor_hit):
        light = PointLight(Vector3(0, 0, 2))
        assert not light.is_in_shadow(floor_hit, world_with(((0, 0, 5), 0.5)))
        assert not light.is_in_shadow(floor_hit, World.empty())

    def test_light_info(self, floor_hit):
        light = PointLight(Vector3(0, 0, 2), (0.5, 0.5, 0.5))
        info = LightInfo(light, floor_hit, World.empty())
        assert info.intensity() == light.intensity(floor_hit)
        assert info.dir() == light.dir_at(floor_hit)
        assert not info.is_in_shadow()
        assert info.color() == Color(0.5, 0.5, 0.5)
        assert info.illuminate().isclose(Color(0.5, 0.5, 0.5) * light.intensity(floor_hit))


class TestSky:
    @pytest.mark.parametrize(
        "direction, expected",
        [
            ((0, 0, 1), (0.5, 0.7, 1.0)),
            ((0, 0, -1), (1.0, 1.0, 1.0)),
            ((1, 0, 0), (0.75, 0.85, 1.0)),
            ((0, 0, 5), (0.5, 0.7, 1.0)),
        ],
    )
    def test_gradient(self, direction, expected):
        assert sky_gradient(Vector3(*direction)).isclose(Vector3(*expected))

    def test_escaping_ray_sees_sky(self, sky_world):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        assert SkyLight().looked(ray, sky_world).isclose(SKY_BLUE)

    def test_blocked_ray_does_not_see_sky(self, unit_sphere_world):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert SkyLight().looked(ray, unit_sphere_world) is None

    def test_seen_uses_the_given_hit(self, unit_sphere_world):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert SkyLight().seen(ray, None).isclose(WHITE)
        assert SkyLight().seen(ray, ray.hit(unit_sphere_world)) is None

    def test_lighting_follows_mirror_direction(self, floor_hit, unit_sphere_world):
        sky = SkyLight()
        assert sky.color(floor_hit).isclose(SKY_BLUE)
        assert sky.dir_at(floor_hit).isclose(Vector3(0, 0, -1))
        assert not sky.is_in_shadow(floor_hit, World.empty())

        below = HitInfo(1.0, Vector3(0, 0, 1), Vector3(0, 0, -3), Vector3(0, 0, -1))
        assert sky.is_in_shadow(below, unit_sphere_world)
        assert sky.color(HitInfo(1.0, Vector3(0, 0, 1), Vector3(0, 0, 0),
                                 Vector3(0, 0, 1))).isclose(WHITE)


class TestLightShape:
    """Tests for area lights."""

    @pytest.fixture
    def panel(self):
        square = Square(Vector3(0.1, 0.2, 2), Vector3(1, 0, 0), Vector3(0, 1, 0), 1.0)
        return LightShape(square, (4.0, 4.0, 4.0))

    def test_seen_directly(self, panel):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        assert panel.looked(ray, World.empty()) == Color(4, 4, 4)

    def test_missed(self, panel):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
        assert panel.looked(ray, World.empty()) is None

    def test_blocked_by_nearer_object(self, panel):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        assert panel.looked(ray, world_with(((0, 0, 1), 0.3))) is None
        assert panel.looked(ray, world_with(((0, 0, 5), 0.3))) == Color(4, 4, 4)

    def test_seen_compares_with_scene_hit(self, panel):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        nearer = ray.hit(world_with(((0, 0, 1), 0.3)))
        farther = ray.hit(world_with(((0, 0, 5), 0.3)))
        assert panel.seen(ray, None) == Color(4, 4, 4)
        assert panel.seen(ray, nearer) is None
        assert panel.seen(ray, farther) == Color(4, 4, 4)

    def test_shadow_follows_reflection(self, panel, floor_hit):
        assert not panel.is_in_shadow(floor_hit, World.empty())
        assert panel.is_in_shadow(floor_hit, world_with(((0, 0, 1), 0.3)))
        assert panel.intensity(floor_hit) == 1.0
        assert panel.dir_at(floor_hit).isclose(Vector3(0, 0, -1))
        assert panel.color(floor_hit) == Color(4, 4, 4)
