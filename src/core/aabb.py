# src/core/aabb.py
import math
from core.vector import Vector3


def _inverse(d: float) -> float:
    # IEEE semantics: a zero component maps to a signed infinity instead of raising.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """
    Axis-aligned bounding box. The constructor canonicalizes its corners so
    that minimum <= maximum holds on every axis regardless of argument order.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, a: Vector3, b: Vector3):
        self.minimum = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
        self.maximum = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: narrow [t_min, t_max] axis by axis, bail out on the first empty interval.
        origin = ray.origin
        direction = ray.direction
        for a in range(3):
            inv_d = _inverse(direction[a])
            t0 = (self.minimum[a] - origin[a]) * inv_d
            t1 = (self.maximum[a] - origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        """True when other lies entirely inside this box."""
        return all(
            self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
            for a in range(3)
        )

    def corners(self):
        for x in (self.minimum.x, self.maximum.x):
            for y in (self.minimum.y, self.maximum.y):
                for z in (self.minimum.z, self.maximum.z):
                    yield Vector3(x, y, z)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)
