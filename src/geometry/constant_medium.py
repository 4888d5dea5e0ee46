# geometry/constant_medium.py
import math
import random
from typing import Optional, Union
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

# Offset past the entry hit when searching for the exit hit.
EXIT_SEARCH_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """
    Participating medium of uniform density filling a convex boundary.

    A ray crossing the boundary scatters at an exponentially distributed
    free-flight distance, or passes through untouched when that distance is
    longer than its path inside the volume.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        if rng is None:
            raise ValueError("ConstantMedium.hit needs a random generator to sample scattering distances")
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_SEARCH_EPSILON, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping the log finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
