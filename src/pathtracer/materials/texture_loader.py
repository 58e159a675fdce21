# materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def decode_image(image_path: str) -> np.ndarray:
    """
    Decode an image file into an RGB byte buffer of shape (height, width, 3).

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture. A missing or unreadable file does not
    stop the render: it is logged and the texture shows the fallback color.
    """
    try:
        data = decode_image(image_path)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("%s; using fallback texture color", e)
        return ImageTexture(None)
    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)


def create_image_material(image_path: str, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, Metal)
        **material_params: Additional parameters for the material (e.g., fuzz for Metal)
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
