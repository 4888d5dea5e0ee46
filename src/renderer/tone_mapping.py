# renderer/tone_mapping.py
import numpy as np


def gamma_correct(linear_image: np.ndarray) -> np.ndarray:
    """
    Apply the gamma-2 (square root) tone curve to averaged linear colors and
    quantize to 8 bits per channel.
    """
    mapped = np.sqrt(np.maximum(linear_image, 0.0))
    # NaN samples (degenerate geometry) are written as black.
    mapped = np.nan_to_num(mapped, nan=0.0)
    output = (256 * np.clip(mapped, 0.0, 0.999)).astype(np.uint8)
    return output


def reinhard_tone_mapping(linear_image: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0) -> np.ndarray:
    """
    Compress high-dynamic-range radiance (bright emitters) into [0, 1)
    before gamma correction.
    """
    scaled = linear_image * exposure
    return scaled / (1.0 + scaled / white_point)
