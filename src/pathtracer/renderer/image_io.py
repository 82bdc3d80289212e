# renderer/image_io.py
import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def write_ppm(path: str, rgb: np.ndarray):
    """Write an (height, width, 3) uint8 image as plain-text PPM (P3)."""
    height, width = rgb.shape[:2]
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in rgb:
            for r, g, b in row[:, :3].tolist():
                f.write(f"{r} {g} {b}\n")


def save_image(path: str, rgb: np.ndarray):
    """
    Save an 8-bit RGB image. ``.ppm`` files are written as plain PPM, every
    other extension goes through Pillow.
    """
    rgb = np.asarray(rgb, dtype=np.uint8)
    if os.path.splitext(path)[1].lower() == ".ppm":
        write_ppm(path, rgb)
    else:
        Image.fromarray(rgb).save(path)
    logger.info("Image saved to %s", path)
