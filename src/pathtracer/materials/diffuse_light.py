# materials/diffuse_light.py
from typing import Union

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Area light. Radiance comes from a color or texture and is the same on
    both sides of the surface; paths end here.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in, rec, rng=None):
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.texture.sample(UV(u, v), p)
