# materials/presets.py
import random
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture, NoiseTexture


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def polished(albedo: Color = None) -> Metal:
        return Metal(albedo if albedo is not None else Color(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class LightPresets:
    """Predefined white light sources of a given intensity."""

    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)


class ColorPresets:
    """Common colors used by the demo scenes."""

    CORNELL_RED = Color(0.65, 0.05, 0.05)
    CORNELL_WHITE = Color(0.73, 0.73, 0.73)
    CORNELL_GREEN = Color(0.12, 0.45, 0.15)
    CHECKER_GREEN = Color(0.2, 0.3, 0.1)
    CHECKER_WHITE = Color(0.9, 0.9, 0.9)
    SKY = Color(0.70, 0.80, 1.00)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)


class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.CHECKER_GREEN
        if color2 is None:
            color2 = ColorPresets.CHECKER_WHITE
        return CheckerTexture(color1, color2, scale)

    @staticmethod
    def marble(rng: random.Random, scale: float = 4.0) -> NoiseTexture:
        """Create a marble texture with the given stripe frequency."""
        return NoiseTexture(scale, rng)
