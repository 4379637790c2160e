from raytracer.lights.light import LightInfo, LightSource
from raytracer.lights.parallel import ParallelLight
from raytracer.lights.point import PointLight
from raytracer.lights.sky import SkyLight, sky_gradient
from raytracer.lights.area import LightShape

__all__ = [
    "LightInfo",
    "LightSource",
    "ParallelLight",
    "PointLight",
    "SkyLight",
    "sky_gradient",
    "LightShape",
]
