# renderer/tone_mapping.py
import numpy as np


def gamma_correct(image: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Clamp linear colors to [0, 1], apply 1/gamma (a square root for the
    default gamma of 2) and convert to 8-bit.
    """
    clamped = np.clip(image, 0.0, 1.0)
    mapped = clamped ** (1.0 / gamma)
    return (255.99 * mapped).astype(np.uint8)

