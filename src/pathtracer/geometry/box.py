# geometry/box.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.transform import FlipFace
from pathtracer.geometry.world import HittableList


class Box(Hittable):
    """
    Axis-aligned box between two corners, made of six rectangles that share
    one material. Faces on the minimum side are flipped so every face reports
    front_face for rays arriving from outside.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = p0
        self.box_max = p1
        self.sides = HittableList([
            XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
            FlipFace(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material)),
            XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
            FlipFace(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material)),
            YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
            FlipFace(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material)),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return AABB(self.box_min, self.box_max)
