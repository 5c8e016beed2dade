# materials/metal.py
from typing import Optional, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import clamp, random_in_unit_sphere, reflect
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    ``fuzz`` in [0, 1] blurs the reflection; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.get_texture_color(rec.uv, rec.p)

        return None  # Absorb the ray if it does not scatter forward
