# geometry/sphere.py
import math
import random
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB


def get_sphere_uv(p: Vector3) -> UV:
    """
    Maps a point on the unit sphere to (u, v) in [0,1]^2.

    u is the angle around the Y axis starting at X=-1, v the angle from Y=-1
    to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)


def _solve_sphere(ray: Ray, center: Vector3, radius: float,
                  t_min: float, t_max: float) -> Optional[float]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root


def _make_record(ray: Ray, root: float, center: Vector3, radius: float, material) -> HitRecord:
    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.uv = get_sphere_uv(outward_normal)
    rec.material = material
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        root = _solve_sphere(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _make_record(ray, root, self.center, self.radius, self.material)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)


class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1 at
    time1. Rays sample the center at their own time, producing motion blur.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        if time0 == time1:
            raise ValueError("MovingSphere needs a non-empty time interval")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        return self.center0 + (self.center1 - self.center0) * (
            (time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = _solve_sphere(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _make_record(ray, root, center, self.radius, self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(time0)
        c1 = self.center(time1)
        box0 = AABB(c0 - offset, c0 + offset)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)
