"""Recursive ray tracer: shapes, materials, lights, a camera and a renderer."""

from raytracer.core import EPS, Color, Ray, Vector3
from raytracer.geometry import Cube, HitInfo, HitRecord, Object, Shape, Sphere, Square, Triangle, World
from raytracer.materials import (
    Dielectric,
    LambertianModel,
    Material,
    Metal,
    PhongModel,
    Specular,
    Transparent,
)
from raytracer.lights import LightShape, LightSource, ParallelLight, PointLight, SkyLight
from raytracer.camera import Camera

__version__ = "0.1.0"

__all__ = [
    "EPS",
    "Color",
    "Ray",
    "Vector3",
    "HitInfo",
    "HitRecord",
    "Shape",
    "Sphere",
    "Triangle",
    "Square",
    "Cube",
    "Object",
    "World",
    "Material",
    "PhongModel",
    "Specular",
    "Metal",
    "Transparent",
    "Dielectric",
    "LambertianModel",
    "LightSource",
    "ParallelLight",
    "PointLight",
    "SkyLight",
    "LightShape",
    "Camera",
]
