# renderer/image_writer.py
import logging
from pathlib import Path
from typing import TextIO, Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def write_ppm(pixels: np.ndarray, stream: TextIO):
    """
    Write an 8-bit (height, width, 3) array as a plain-text P3 image, rows
    top to bottom, one `R G B` triple per line.
    """
    height, width = pixels.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        for r, g, b in row:
            stream.write(f"{int(r)} {int(g)} {int(b)}\n")


def save_image(pixels: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Save pixels to `path`. `.ppm` files are written as plain-text P3; any
    other suffix is handed to Pillow.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with path.open("w", encoding="ascii") as f:
            write_ppm(pixels, f)
    else:
        Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path
