# geometry/aarect.py
import random
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half-thickness given to the fixed axis so the box keeps a positive volume.
RECT_PADDING = 0.0001


class AARect(Hittable):
    """
    Rectangle lying in the plane where axis `k_axis` equals `k`, spanning
    [a0, a1] on `a_axis` and [b0, b1] on `b_axis`. Subclasses fix the axes.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.a_axis] = a
        coords[self.b_axis] = b
        coords[self.k_axis] = k
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        dk = ray.direction[self.k_axis]
        if dk == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.k_axis]) / dk
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0),
                    (b - self.b0) / (self.b1 - self.b0))
        rec.set_face_normal(ray, self._point(0.0, 0.0, 1.0))
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(
            self._point(self.a0, self.b0, self.k - RECT_PADDING),
            self._point(self.a1, self.b1, self.k + RECT_PADDING),
        )


class XYRect(AARect):
    """Rectangle in the plane z = k."""
    a_axis, b_axis, k_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AARect):
    """Rectangle in the plane y = k."""
    a_axis, b_axis, k_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AARect):
    """Rectangle in the plane x = k."""
    a_axis, b_axis, k_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
