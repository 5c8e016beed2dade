# geometry/bvh.py
from typing import List, Optional, Tuple

from pathtracer.core.aabb import AABB
from pathtracer.core.utils import resolve_rng
from pathtracer.geometry.hittable import Hittable, HitRecord


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r} in BVHNode constructor.")
    return box


class BVHNode(Hittable):
    """
    Bounding volume hierarchy node. Built once by median split: pick an axis,
    stable-sort the span by the minimum of each object's box on that axis,
    halve it and recurse. Children are either nodes or the objects themselves;
    a single object becomes a leaf with itself on both sides.

    ``axis_mode`` is ``"random"`` (axis drawn from ``rng``) or ``"cycle"``
    (x, y, z by depth). The input list is never modified.
    """
    def __init__(self, objects: List[Hittable], time0: float = 0.0, time1: float = 1.0,
                 rng=None, axis_mode: str = "random", start: int = 0, end: Optional[int] = None,
                 depth: int = 0):
        if end is None:
            objects = list(objects)
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode requires at least one object.")

        if axis_mode == "cycle":
            axis = "xyz"[depth % 3]
        elif axis_mode == "random":
            axis = "xyz"[resolve_rng(rng).randint(0, 2)]
        else:
            raise ValueError(f"Unknown BVH axis mode {axis_mode!r}")

        def key(obj):
            return getattr(_box_of(obj, time0, time1).minimum, axis)

        if object_span == 1:
            self.left = self.right = objects[start]
            self.is_leaf = True
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            # Ties keep input order.
            if key(second) < key(first):
                first, second = second, first
            self.left, self.right = first, second
            self.is_leaf = False
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, time0, time1, rng, axis_mode, start, mid, depth + 1)
            self.right = BVHNode(objects, time0, time1, rng, axis_mode, mid, end, depth + 1)
            self.is_leaf = False

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            return self.left.hit(ray, t_min, t_max, rng)

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        # The right branch only has to beat the left hit.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box


def bvh_stats(root: BVHNode) -> Tuple[int, int, int]:
    """
    Returns (node count, leaf object count, depth) of a tree.
    """
    nodes = leaves = depth = 0
    stack = [(root, 1)]
    while stack:
        node, level = stack.pop()
        if not isinstance(node, BVHNode):
            leaves += 1
            continue
        nodes += 1
        depth = max(depth, level)
        if node.is_leaf:
            leaves += 1
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return nodes, leaves, depth
