from raytracer.materials.material import Material
from raytracer.materials.phong import PhongModel
from raytracer.materials.metal import Metal, Specular
from raytracer.materials.dielectric import Dielectric, Transparent
from raytracer.materials.lambertian import LambertianModel

__all__ = [
    "Material",
    "PhongModel",
    "Specular",
    "Metal",
    "Transparent",
    "Dielectric",
    "LambertianModel",
]
