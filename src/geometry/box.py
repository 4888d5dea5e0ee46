# geometry/box.py
import random
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.aarect import XYRect, XZRect, YZRect
from geometry.world import HittableList


class Box(Hittable):
    """
    Axis-aligned box made of six rectangles sharing one material.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        bounds = AABB(p0, p1)
        self.box_min = bounds.minimum
        self.box_max = bounds.maximum
        lo, hi = self.box_min, self.box_max

        self.sides = HittableList()
        self.sides.add(XYRect(lo.x, hi.x, lo.y, hi.y, hi.z, material))
        self.sides.add(XYRect(lo.x, hi.x, lo.y, hi.y, lo.z, material))
        self.sides.add(XZRect(lo.x, hi.x, lo.z, hi.z, hi.y, material))
        self.sides.add(XZRect(lo.x, hi.x, lo.z, hi.z, lo.y, material))
        self.sides.add(YZRect(lo.y, hi.y, lo.z, hi.z, hi.x, material))
        self.sides.add(YZRect(lo.y, hi.y, lo.z, hi.z, lo.x, material))

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The literal corners, not the union of the padded faces.
        return AABB(self.box_min, self.box_max)
