# geometry/transform.py
"""
Structural decorators. Each wraps one child and forwards queries after a
change of coordinates. The child's front_face flag and ray-facing normal are
preserved: translating or rotating the ray and the normal together keeps
their dot product unchanged.
"""
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Axes completing a right-handed frame with the rotation axis.
_ROTATION_PLANES = {'x': ('y', 'z'), 'y': ('z', 'x'), 'z': ('x', 'y')}


class Translate(Hittable):
    """Moves the child by ``offset``."""
    def __init__(self, child: Hittable, offset: Vector3):
        self.child = child
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.child.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = self.child.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


def rotate_vector(v: Vector3, axis: str, sin_theta: float, cos_theta: float) -> Vector3:
    a, b = _ROTATION_PLANES[axis]
    va = getattr(v, a)
    vb = getattr(v, b)
    out = {
        axis: getattr(v, axis),
        a: cos_theta * va - sin_theta * vb,
        b: sin_theta * va + cos_theta * vb,
    }
    return Vector3(out['x'], out['y'], out['z'])


class Rotate(Hittable):
    """
    Rotates the child by ``angle`` degrees about the x, y or z axis through
    the origin. The bounding box is the envelope of the rotated corners of
    the child's box over [time0, time1], computed once here.
    """
    def __init__(self, child: Hittable, angle: float, axis: str = 'y',
                 time0: float = 0.0, time1: float = 1.0):
        if axis not in _ROTATION_PLANES:
            raise ValueError(f"Rotation axis must be 'x', 'y' or 'z', got {axis!r}")
        self.child = child
        self.axis = axis
        self.angle = angle
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = child.bounding_box(time0, time1)
        if box is None:
            self.box = None
        else:
            self.box = AABB.from_points(self._to_world(c) for c in box.corners())

    def _to_object(self, v: Vector3) -> Vector3:
        return rotate_vector(v, self.axis, -self.sin_theta, self.cos_theta)

    def _to_world(self, v: Vector3) -> Vector3:
        return rotate_vector(v, self.axis, self.sin_theta, self.cos_theta)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.child.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.box


class RotateY(Rotate):
    """Rotation about the y axis."""
    def __init__(self, child: Hittable, angle: float, time0: float = 0.0, time1: float = 1.0):
        super().__init__(child, angle, 'y', time0, time1)


class FlipFace(Hittable):
    """
    Reports hits on the child with the front/back flag inverted, so a one-sided
    surface can face into an enclosure.
    """
    def __init__(self, child: Hittable):
        self.child = child

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec = self.child.hit(ray, t_min, t_max, rng)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.child.bounding_box(time0, time1)
