# geometry/world.py
import logging
from typing import Iterable, List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode, bvh_stats
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class HittableList(Hittable):
    """
    An ordered list of Hittable objects. Once ``build_bvh`` has been called,
    queries go through the tree; otherwise every object is tested in turn.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []
        self.bvh_root: Optional[BVHNode] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def extend(self, objs: Iterable[Hittable]):
        self.objects.extend(objs)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng=None,
                  axis_mode: str = "random") -> Optional[BVHNode]:
        if len(self.objects) == 0:
            self.bvh_root = None
            return None
        self.bvh_root = BVHNode(self.objects, time0, time1, rng=rng, axis_mode=axis_mode)
        nodes, leaves, depth = bvh_stats(self.bvh_root)
        logger.debug("Built BVH over %d objects: %d nodes, %d leaves, depth %d",
                     len(self.objects), nodes, leaves, depth)
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
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

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(time0, time1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box
