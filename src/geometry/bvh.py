# src/geometry/bvh.py
import random
from typing import List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class BVHBuildError(ValueError):
    """Raised when a hierarchy cannot be built over the given objects."""


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BVHBuildError(f"No bounding box for {obj!r} in BVHNode construction")
    return box


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Construction picks a random split axis per node, orders the span by the
    minimum corner of each child box on that axis and splits at the median.
    A span of one object stores that object as both children.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0,
                 rng: Optional[random.Random] = None):
        if rng is None:
            rng = random.Random(0)
        # One working copy for the whole tree, so the caller's list keeps its order.
        self._build(list(objects), start, end, time0, time1, rng)

    @classmethod
    def _subtree(cls, objects: List[Hittable], start: int, end: int,
                 time0: float, time1: float, rng: random.Random) -> "BVHNode":
        node = cls.__new__(cls)
        node._build(objects, start, end, time0, time1, rng)
        return node

    def _build(self, objects: List[Hittable], start: int, end: int,
               time0: float, time1: float, rng: random.Random):
        object_span = end - start
        if object_span <= 0:
            raise BVHBuildError("Cannot build a BVH node over an empty span")
        axis = rng.randint(0, 2)

        def key(obj):
            return _box_of(obj, time0, time1).minimum[axis]

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if key(first) < key(second):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = self._subtree(objects, start, mid, time0, time1, rng)
            self.right = self._subtree(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        # A left hit narrows the interval, so any right hit is strictly closer.
        if hit_left is not None:
            hit_right = self.right.hit(ray, t_min, hit_left.t, rng)
            return hit_right if hit_right is not None else hit_left
        return self.right.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def depth(self) -> int:
        """Height of the subtree rooted here; leaves count as one level."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
