# materials/isotropic.py
import random
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly over the
    whole sphere of directions.
    """
    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Color]:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return scattered, self.texture.sample(rec.uv, rec.p)
