# materials/textures.py
import logging
import math
from typing import Union

import numpy as np
from PIL import Image

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin

logger = logging.getLogger(__name__)


class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, point: Vector3) -> Vector3:
        """Sample the texture at the given surface coordinate and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)·sin(sy)·sin(sz) picks the odd
    or even texture, so the pattern is solid through the object.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        sines = (math.sin(self.scale * point.x) *
                 math.sin(self.scale * point.y) *
                 math.sin(self.scale * point.z))
        if sines < 0:
            return self.odd.sample(uv, point)
        return self.even.sample(uv, point)


class NoiseTexture(Texture):
    """Marble-like pattern: a sine along z phase-shifted by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, seed=None):
        self.scale = scale
        self.noise = Perlin(seed)

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        value = 0.5 * (1 + math.sin(self.scale * point.z + 10 * self.noise.turb(point)))
        return Vector3(value, value, value)


class ImageTexture(Texture):
    """
    Texture backed by a decoded ``height x width x channels`` pixel array.
    uint8 data is scaled to [0, 1]; float data is used as is. Lookup is
    nearest-texel with clamped addressing and v pointing up the image.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        if data.ndim != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"ImageTexture expects a height x width x channels array, got shape {data.shape}")
        if np.issubdtype(data.dtype, np.integer):
            data = data.astype(np.float64) / 255.0
        else:
            data = data.astype(np.float64)
        # Grayscale images are expanded to RGB.
        if data.shape[2] == 1:
            data = np.repeat(data, 3, axis=2)
        if data.shape[2] < 3:
            raise ValueError(f"ImageTexture needs 1, 3 or 4 channels, got {data.shape[2]}")
        self.data = data[:, :, :3]
        self.height, self.width = self.data.shape[:2]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.array(img)
        logger.info("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
        return cls(data)

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        u = min(max(uv.u, 0.0), 1.0)
        v = 1.0 - min(max(uv.v, 0.0), 1.0)  # Flip V to image row order

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
