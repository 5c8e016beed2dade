# geometry/constant_medium.py
import math
from typing import Optional, Union

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import INFINITY, resolve_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (fog, smoke) filling a closed boundary.

    ``hit`` is a Monte Carlo draw: the ray scatters inside the volume after
    an exponentially distributed free-flight distance, or passes through.
    Repeated calls with the same ray can disagree; the draw comes from
    ``rng`` so a seeded caller gets reproducible results.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if not density > 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -INFINITY, INFINITY, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, INFINITY, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - U lies in (0, 1], so the log is finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - resolve_rng(rng).random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        # Scattering is isotropic; any normal facing the ray will do.
        rec.normal = -ray.direction.normalize()
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
