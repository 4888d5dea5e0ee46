# src/geometry/world.py
import logging
import random
from typing import Optional, List
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

logger = logging.getLogger(__name__)


class HittableList(Hittable):
    """
    A list of Hittable objects. Queries scan every child linearly until
    build_bvh() installs a bounding volume hierarchy over them.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root: Optional[BVHNode] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        # Any previously built hierarchy no longer covers the full list.
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0,
                  rng: Optional[random.Random] = None):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        if rng is None:
            rng = random.Random(0)
        logger.info("Building BVH over %d objects", len(self.objects))
        self.bvh_root = BVHNode(self.objects, 0, len(self.objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float,
            rng: random.Random = None) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max, rng)

        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box
