# renderer/image_io.py
import logging
import os

import numpy as np
from PIL import Image

from pathtracer.renderer.tone_mapping import quantize

logger = logging.getLogger(__name__)


def _as_rgb8(image: np.ndarray) -> np.ndarray:
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {image.shape}")
    if image.dtype == np.uint8:
        return image
    return quantize(image)


def encode_ppm(image: np.ndarray) -> str:
    """
    Plain-text PPM: a P3 header with dimensions and max value, then one
    "r g b" triple per line in row-major order starting at the top-left.
    """
    rgb8 = _as_rgb8(image)
    height, width, _ = rgb8.shape
    lines = ["P3", f"{width} {height}", "255"]
    lines.extend(f"{r} {g} {b}" for r, g, b in rgb8.reshape(-1, 3).tolist())
    return "\n".join(lines) + "\n"


def write_ppm(path: str, image: np.ndarray) -> None:
    with open(path, "w", encoding="ascii") as f:
        f.write(encode_ppm(image))
    logger.info("Wrote %s", path)


def save_image(path: str, image: np.ndarray) -> None:
    """
    Save a render to disk. ".ppm" uses the plain-text writer, every other
    extension is handed to Pillow.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        write_ppm(path, image)
        return
    Image.fromarray(_as_rgb8(image)).save(path)
    logger.info("Wrote %s", path)
