from raytracer.geometry.hittable import HitInfo, HitRecord, Shape
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.mesh import Cube, Square, Triangle
from raytracer.geometry.world import Object, World

__all__ = [
    "HitInfo",
    "HitRecord",
    "Shape",
    "Sphere",
    "Triangle",
    "Square",
    "Cube",
    "Object",
    "World",
]
