# materials/dielectric.py
import math
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract
from geometry.hittable import HitRecord
from materials.material import Material


def schlick(cos_theta: float, ref_idx: float) -> float:
    """Schlick's polynomial approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)


class Dielectric(Material):
    """
    Clear refractive material such as glass or water. Each interaction
    either reflects or refracts, chosen with Schlick probability.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    @staticmethod
    def reflectance(cosine: float, ref_idx: float) -> float:
        return schlick(cosine, ref_idx)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Ray(rec.p, direction, ray_in.time), attenuation
