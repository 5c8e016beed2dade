# materials/material.py
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord

BLACK = Vector3(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter(); emissive
    materials also override emitted().
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation), or None when the ray is
        absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """Radiance emitted at the surface point; black for non-emitters."""
        return BLACK

    def get_texture_color(self, uv: UV, point: Vector3) -> Vector3:
        """Color of the material's texture at the given surface coordinate and point."""
        return self.texture.sample(uv, point)
