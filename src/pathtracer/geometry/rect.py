# geometry/rect.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness of the box around an infinitely thin rectangle.
RECT_THICKNESS = 0.0001


def _axis_vector(axis: str, value: float) -> Vector3:
    return Vector3(*(value if a == axis else 0.0 for a in "xyz"))


class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane ``bound_axis = k``. The two free axes are
    bounded by [a0, a1] and [b0, b1]; (u, v) is the normalized position
    inside those ranges. The outward normal points along +bound_axis.
    """
    bound_axis = None
    free_axes = None

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if not (a0 < a1 and b0 < b1):
            raise ValueError(
                f"{type(self).__name__} ranges must be increasing, got "
                f"[{a0}, {a1}] x [{b0}, {b1}]")
        self.a0, self.a1 = a0, a1
        self.b0, self.b1 = b0, b1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        a_axis, b_axis = self.free_axes
        d = getattr(ray.direction, self.bound_axis)
        if d == 0:
            # Parallel to the plane.
            return None
        t = (self.k - getattr(ray.origin, self.bound_axis)) / d
        if t < t_min or t > t_max:
            return None
        a = getattr(ray.origin, a_axis) + t * getattr(ray.direction, a_axis)
        b = getattr(ray.origin, b_axis) + t * getattr(ray.direction, b_axis)
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0), (b - self.b0) / (self.b1 - self.b0))
        rec.set_face_normal(ray, _axis_vector(self.bound_axis, 1.0))
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        a_axis, b_axis = self.free_axes
        lo = {a_axis: self.a0, b_axis: self.b0, self.bound_axis: self.k - RECT_THICKNESS}
        hi = {a_axis: self.a1, b_axis: self.b1, self.bound_axis: self.k + RECT_THICKNESS}
        return AABB(Vector3(lo['x'], lo['y'], lo['z']), Vector3(hi['x'], hi['y'], hi['z']))


class XYRect(AxisAlignedRect):
    """Rectangle [x0, x1] x [y0, y1] in the plane z = k."""
    bound_axis = 'z'
    free_axes = ('x', 'y')

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AxisAlignedRect):
    """Rectangle [x0, x1] x [z0, z1] in the plane y = k."""
    bound_axis = 'y'
    free_axes = ('x', 'z')

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AxisAlignedRect):
    """Rectangle [y0, y1] x [z0, z1] in the plane x = k."""
    bound_axis = 'x'
    free_axes = ('y', 'z')

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
