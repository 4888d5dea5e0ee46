# materials/textures.py
import math
import random
from typing import Union
import numpy as np
from core.vector import Vector3, Color
from core.uv import UV
from core.utils import clamp
from materials.perlin import Perlin
from materials.texture_loader import load_image_data

# Returned by image textures whose file could not be decoded.
MISSING_TEXTURE_COLOR = Color(0.0, 1.0, 1.0)


class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, p: Vector3) -> Color:
        """Sample the texture at surface coordinates uv and hit point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


def as_texture(value: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; pass textures through."""
    if isinstance(value, Texture):
        return value
    return SolidTexture(value)


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, uv: UV, p: Vector3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of a product of sines over the hit point
    picks between the even and odd sub-textures.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.sample(uv, p)
        return self.even.sample(uv, p)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, rng: random.Random = None):
        self.noise = Perlin(rng if rng is not None else random.Random(0))
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Color:
        value = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Color(1, 1, 1) * value


class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        self.image_path = image_path
        data = load_image_data(image_path)
        if data is None:
            self.data = None
            self.width = self.height = 0
        else:
            # Normalize to [0,1]
            self.data = data.astype(np.float64) / 255.0
            self.height, self.width = data.shape[:2]

    def sample(self, uv: UV, p: Vector3) -> Color:
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        u = clamp(uv.u, 0.0, 1.0)
        v = 1.0 - clamp(uv.v, 0.0, 1.0)  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Color(float(color[0]), float(color[1]), float(color[2]))
