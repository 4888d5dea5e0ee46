# materials/diffuse_light.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.uv import UV
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Return the emitted radiance, independent of the incoming direction.
        """
        return self.texture.sample(uv, p)
