# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3, Color
from core.uv import UV
from geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter(); emissive
    materials also override emitted().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Light emitted at the hit point. Non-emissive materials return black.
        """
        return Color(0, 0, 0)
