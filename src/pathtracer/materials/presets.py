# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture, NoiseTexture


class ColorPresets:
    """Common color presets for materials."""

    # Cornell box walls
    RED = Vector3(0.65, 0.05, 0.05)
    WHITE = Vector3(0.73, 0.73, 0.73)
    GREEN = Vector3(0.12, 0.45, 0.15)

    # Checker cells
    MOSS = Vector3(0.2, 0.3, 0.1)
    CHALK = Vector3(0.9, 0.9, 0.9)

    # Backgrounds
    SKY = Vector3(0.70, 0.80, 1.00)
    NIGHT = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def bronze_mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_steel() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.9), fuzz=1.0)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)


class LightPresets:
    """Predefined white light sources of a given intensity."""

    @staticmethod
    def white_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)


class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.MOSS
        if color2 is None:
            color2 = ColorPresets.CHALK
        return CheckerTexture(color1, color2, scale)

    @staticmethod
    def marble(scale: float = 4.0, seed=None) -> NoiseTexture:
        """Create a Perlin marble texture with the given frequency."""
        return NoiseTexture(scale, seed)
