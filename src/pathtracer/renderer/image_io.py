# renderer/image_io.py
import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def save_png(buffer: np.ndarray, path: str) -> str:
    """Write a ``height x width x 4`` uint8 RGBA buffer to a PNG file."""
    if buffer.ndim != 3 or buffer.shape[2] != 4 or buffer.dtype != np.uint8:
        raise ValueError(f"Expected a height x width x 4 uint8 buffer, got {buffer.shape} {buffer.dtype}")
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(buffer).save(path, format="PNG")
    logger.info("Wrote %dx%d image to %s", buffer.shape[1], buffer.shape[0], path)
    return path
