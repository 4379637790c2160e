from raytracer.renderer.settings import MAX_DEPTH, QUALITY_LEVELS, RenderSettings
from raytracer.renderer.render import Renderer
from raytracer.renderer.tone_mapping import gamma_correct
from raytracer.renderer.output import save_image, to_image

__all__ = [
    "MAX_DEPTH",
    "QUALITY_LEVELS",
    "RenderSettings",
    "Renderer",
    "gamma_correct",
    "save_image",
    "to_image",
]
