# materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_image_data(image_path: str) -> np.ndarray:
    """
    Read an image file into a float (height, width, 3) array in [0, 1].

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image format is unsupported
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return data


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, with error handling and automatic format conversion.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object
    """
    return ImageTexture(load_image_data(image_path))
