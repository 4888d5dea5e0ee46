# geometry/transform.py
import math
import random
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from core.utils import degrees_to_radians
from geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """
    Moves the wrapped object by a fixed offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None

        rec.p = rec.p + self.offset
        rec.set_face_normal(ray, rec.normal if rec.front_face else -rec.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        box = self.obj.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class RotateY(Hittable):
    """
    Rotates the wrapped object about the Y axis by `angle` degrees.

    The world-space bounding box is the box around the eight rotated corners
    of the object's own box, computed once over [0, 1].
    """
    def __init__(self, obj: Hittable, angle: float):
        self.obj = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = obj.bounding_box(0.0, 1.0)
        self.has_box = box is not None
        self.box = None
        if self.has_box:
            rotated = [self._to_world(corner) for corner in box.corners()]
            lo = Vector3(min(c.x for c in rotated), min(c.y for c in rotated), min(c.z for c in rotated))
            hi = Vector3(max(c.x for c in rotated), max(c.y for c in rotated), max(c.z for c in rotated))
            self.box = AABB(lo, hi)

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None

        # Recover the outward normal before rotating it back.
        outward = rec.normal if rec.front_face else -rec.normal
        rec.p = self._to_world(rec.p)
        rec.set_face_normal(ray, self._to_world(outward))
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        return self.box
