# materials/texture_loader.py
import logging
import os
from typing import Optional
from PIL import Image, UnidentifiedImageError
import numpy as np

logger = logging.getLogger(__name__)


def load_image_data(image_path: str) -> Optional[np.ndarray]:
    """
    Decode an image file into an 8-bit RGB array of shape (height, width, 3).

    Missing or unreadable files are not fatal: a warning is logged and None
    is returned so the caller can substitute a placeholder.
    """
    if not os.path.exists(image_path):
        logger.warning("Texture file not found: %s", image_path)
        return None

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.uint8).copy()
    except (OSError, UnidentifiedImageError) as e:
        logger.warning("Could not load texture image file %s: %s", image_path, e)
        return None

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return data
