# renderer/output.py
import logging
import os
from typing import Tuple

import numpy as np
from PIL import Image

from raytracer.core.vector import Color
from raytracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)


def color_to_rgb(color: Color, gamma: float = 2.0) -> Tuple[int, int, int]:
    """
    8-bit RGB triple for a single linear color.
    """
    r, g, b = gamma_correct(np.array([color.x, color.y, color.z]), gamma)
    return int(r), int(g), int(b)


def to_image(pixels: np.ndarray, gamma: float = 2.0) -> Image.Image:
    """
    Build an RGB image from linear colors (height x width x 3) or from
    already-mapped 8-bit pixels.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a height x width x 3 array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        pixels = gamma_correct(pixels, gamma)
    return Image.fromarray(np.ascontiguousarray(pixels))


def save_image(pixels: np.ndarray, path: str, gamma: float = 2.0) -> str:
    """
    Write the image to `path`; the format follows the file extension.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    to_image(pixels, gamma).save(path)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path
