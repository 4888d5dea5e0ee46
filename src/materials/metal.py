# materials/metal.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    fuzz in [0, 1] perturbs the mirror direction; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected
        if self.fuzz > 0:
            direction = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, direction, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.texture.sample(rec.uv, rec.p)

        return None  # Absorb the ray if it does not scatter forward
