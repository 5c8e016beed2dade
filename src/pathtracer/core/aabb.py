# core/aabb.py
from typing import List

from pathtracer.core.vector import Vector3

# Direction components smaller than this are treated as parallel to a slab.
PARALLEL_EPSILON = 1e-12


class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        if minimum.x > maximum.x or minimum.y > maximum.y or minimum.z > maximum.z:
            raise ValueError(f"AABB minimum {minimum} exceeds maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow the [t_min, t_max] interval.
        for a in ('x', 'y', 'z'):
            d = getattr(ray.direction, a)
            o = getattr(ray.origin, a)
            lo = getattr(self.minimum, a)
            hi = getattr(self.maximum, a)
            if d == 0:
                # Exactly parallel: the origin coordinate never changes.
                if o < lo or o > hi:
                    return False
                continue
            if abs(d) < PARALLEL_EPSILON:
                # Nearly parallel: the slab can only be entered at an enormous t,
                # so this axis is accepted rather than dividing by d.
                continue
            invD = 1.0 / d
            t0 = (lo - o) * invD
            t1 = (hi - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, p: Vector3) -> bool:
        return (self.minimum.x <= p.x <= self.maximum.x and
                self.minimum.y <= p.y <= self.maximum.y and
                self.minimum.z <= p.z <= self.maximum.z)

    def corners(self) -> List[Vector3]:
        return [
            Vector3(x, y, z)
            for x in (self.minimum.x, self.maximum.x)
            for y in (self.minimum.y, self.maximum.y)
            for z in (self.minimum.z, self.maximum.z)
        ]

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

    @staticmethod
    def from_points(points) -> "AABB":
        """Smallest box enclosing every point in the iterable."""
        points = list(points)
        return AABB(
            Vector3(min(p.x for p in points), min(p.y for p in points), min(p.z for p in points)),
            Vector3(max(p.x for p in points), max(p.y for p in points), max(p.z for p in points))
        )

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
