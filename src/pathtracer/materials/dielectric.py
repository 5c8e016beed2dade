# materials/dielectric.py
import math
from typing import Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, resolve_rng, schlick
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear refractive material (glass, water) with index of refraction
    ``ref_idx``. Each scatter either reflects or refracts; nothing is absorbed.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Tuple[Ray, Vector3]:
        # Glass doesn't absorb light
        attenuation = WHITE

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or resolve_rng(rng).random() < schlick(cos_theta, ni_over_nt):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Ray(rec.p, direction, ray_in.time), attenuation
