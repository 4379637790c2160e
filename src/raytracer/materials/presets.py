# materials/presets.py
from raytracer.core.vector import Vector3
from raytracer.materials.dielectric import Dielectric, Transparent
from raytracer.materials.lambertian import LambertianModel
from raytracer.materials.metal import Metal
from raytracer.materials.phong import PhongModel


class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(fuzz=0.1, color=Vector3(1.0, 0.78, 0.34))

    @staticmethod
    def silver() -> Metal:
        return Metal(fuzz=0.05, color=Vector3(0.95, 0.93, 0.88))

    @staticmethod
    def copper() -> Metal:
        return Metal(fuzz=0.1, color=Vector3(0.95, 0.64, 0.54))

    @staticmethod
    def aluminum() -> Metal:
        return Metal(fuzz=0.08, color=Vector3(0.91, 0.92, 0.92))

    @staticmethod
    def chrome() -> Metal:
        return Metal(fuzz=0.05, color=Vector3(0.9, 0.9, 0.9))

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(fuzz=0.3, color=Vector3(0.8, 0.8, 0.8))

    @staticmethod
    def mirror() -> Metal:
        return Metal(fuzz=0.0, albedo=0.95)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.52)  # Common glass

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def tinted_glass(color: Vector3, opacity: float = 0.2) -> Transparent:
        return Transparent(opacity, 1.52, color)


class DiffusePresets:
    """Predefined diffuse materials."""

    @staticmethod
    def matte(color: Vector3 = Vector3(0.5, 0.5, 0.5)) -> LambertianModel:
        return LambertianModel(1.0, color)

    @staticmethod
    def clay() -> LambertianModel:
        return LambertianModel(0.8, Vector3(0.4, 0.2, 0.1))

    @staticmethod
    def plastic(color: Vector3 = Vector3(1.0, 1.0, 1.0)) -> PhongModel:
        return PhongModel(shininess=32.0, diffuse=0.8, color=color)
