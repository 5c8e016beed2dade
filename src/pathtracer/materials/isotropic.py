# materials/isotropic.py
from typing import Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Isotropic(Material):
    """Phase function of a participating medium: scatter in any direction."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Tuple[Ray, Vector3]:
        scattered = Ray(rec.p, random_in_unit_sphere(rng), ray_in.time)
        return scattered, self.get_texture_color(rec.uv, rec.p)
