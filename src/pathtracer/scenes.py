# scenes.py
"""
Scene catalogue. Each builder takes a ``random.Random`` and returns a Scene:
the world plus the camera placement and background it is meant to be seen
with. Builders using the earth image take its path; a missing image is an
error, not a fallback.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import FlipFace, RotateY, Translate
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import (ColorPresets, DielectricPresets, LightPresets,
                                          MetalPresets, TexturePresets)
from pathtracer.materials.texture_loader import create_image_material

logger = logging.getLogger(__name__)

DEFAULT_EARTH_TEXTURE = "earthmap.jpg"


@dataclass
class Scene:
    world: HittableList
    lookfrom: Vector3
    lookat: Vector3
    vfov: float = 40.0
    background: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 1.0
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))

    def make_camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.lookfrom, self.lookat, self.vup, self.vfov, aspect_ratio,
                      self.aperture, self.focus_dist, self.time0, self.time1)


def _sky_view(world: HittableList) -> Scene:
    return Scene(world, lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0),
                 vfov=20.0, background=ColorPresets.SKY)


def _cornell_view(world: HittableList) -> Scene:
    return Scene(world, lookfrom=Vector3(278, 278, -800), lookat=Vector3(278, 278, 0),
                 vfov=40.0, background=ColorPresets.NIGHT)


def random_scene(rng: random.Random) -> Scene:
    """Ground, three large spheres and a field of small random ones."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = Vector3.random(rng) * Vector3.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3.random(rng, 0.5, 1)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.bronze_mirror()))

    return _sky_view(HittableList([BVHNode(world.objects, 0.0, 1.0, rng=rng)]))


def two_spheres(rng: random.Random) -> Scene:
    checker = Lambertian(TexturePresets.checkerboard())
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, checker),
        Sphere(Vector3(0, 10, 0), 10, checker),
    ])
    return _sky_view(world)


def two_perlin_spheres(rng: random.Random) -> Scene:
    marble = Lambertian(TexturePresets.marble(4, seed=rng.getrandbits(32)))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])
    return _sky_view(world)


def earth(rng: random.Random, image_path: str = DEFAULT_EARTH_TEXTURE) -> Scene:
    globe = Sphere(Vector3(0, 0, 0), 2, create_image_material(image_path, Lambertian))
    return Scene(HittableList([globe]), lookfrom=Vector3(0, 0, 12), lookat=Vector3(0, 0, 0),
                 vfov=20.0, background=ColorPresets.SKY)


def simple_light(rng: random.Random) -> Scene:
    marble = Lambertian(TexturePresets.marble(4, seed=rng.getrandbits(32)))
    light = LightPresets.white_light(4)
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
        Sphere(Vector3(0, 7, 0), 2, light),
        XYRect(3, 5, 1, 3, -2, light),
    ])
    return Scene(world, lookfrom=Vector3(26, 3, 6), lookat=Vector3(0, 2, 0),
                 vfov=20.0, background=ColorPresets.NIGHT)


def _cornell_walls(light_intensity: float, light_x=(213, 343), light_z=(227, 332)) -> HittableList:
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)
    light = LightPresets.white_light(light_intensity)
    return HittableList([
        FlipFace(YZRect(0, 555, 0, 555, 555, green)),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(light_x[0], light_x[1], light_z[0], light_z[1], 554, light),
        FlipFace(XZRect(0, 555, 0, 555, 555, white)),
        XZRect(0, 555, 0, 555, 0, white),
        FlipFace(XYRect(0, 555, 0, 555, 555, white)),
    ])


def _tall_box(material):
    box = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), material)
    return Translate(RotateY(box, 15), Vector3(265, 0, 295))


def _short_box(material):
    box = Box(Vector3(0, 0, 0), Vector3(165, 165, 165), material)
    return Translate(RotateY(box, -18), Vector3(130, 0, 65))


def cornell_box(rng: random.Random) -> Scene:
    world = _cornell_walls(15)
    white = ColorPresets.matte(ColorPresets.WHITE)
    world.add(_tall_box(white))
    world.add(_short_box(white))
    return _cornell_view(world)


def cornell_balls(rng: random.Random) -> Scene:
    world = _cornell_walls(5, light_x=(113, 443), light_z=(127, 432))
    boundary = Sphere(Vector3(160, 100, 145), 100, DielectricPresets.glass())
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.1, Vector3(1, 1, 1)))
    world.add(_tall_box(ColorPresets.matte(ColorPresets.WHITE)))
    return _cornell_view(world)


def cornell_smoke(rng: random.Random) -> Scene:
    world = _cornell_walls(7, light_x=(113, 443), light_z=(127, 432))
    white = ColorPresets.matte(ColorPresets.WHITE)
    world.add(ConstantMedium(_tall_box(white), 0.01, Vector3(0, 0, 0)))
    world.add(ConstantMedium(_short_box(white), 0.01, Vector3(1, 1, 1)))
    return _cornell_view(world)


def cornell_final(rng: random.Random) -> Scene:
    """Cornell box holding a glass block filled with thin white fog."""
    world = _cornell_walls(7, light_x=(123, 423), light_z=(147, 412))
    glass_block = _short_box(Dielectric(1.5))
    world.add(glass_block)
    world.add(ConstantMedium(glass_block, 0.2, Vector3(0.9, 0.9, 0.9)))
    return _cornell_view(world)


def final_scene(rng: random.Random, image_path: str = DEFAULT_EARTH_TEXTURE) -> Scene:
    """Every feature at once: box field, motion blur, glass, fog, textures, instancing."""
    ground = Lambertian(Vector3(0.48, 0.83, 0.53))
    boxes1 = []
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes1.append(Box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BVHNode(boxes1, 0.0, 1.0, rng=rng))
    world.add(XZRect(123, 423, 147, 412, 554, LightPresets.white_light(7)))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(MovingSphere(center1, center2, 0, 1, 50, Lambertian(Vector3(0.7, 0.3, 0.1))))

    world.add(Sphere(Vector3(260, 150, 45), 50, DielectricPresets.glass()))
    world.add(Sphere(Vector3(0, 150, 145), 50, MetalPresets.brushed_steel()))

    boundary = Sphere(Vector3(360, 150, 145), 70, DielectricPresets.glass())
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, DielectricPresets.glass())
    world.add(ConstantMedium(mist, 0.0001, Vector3(1, 1, 1)))

    world.add(Sphere(Vector3(400, 200, 400), 100, create_image_material(image_path, Lambertian)))
    world.add(Sphere(Vector3(220, 280, 300), 80,
                     Lambertian(TexturePresets.marble(0.1, seed=rng.getrandbits(32)))))

    white = ColorPresets.matte(ColorPresets.WHITE)
    cluster = [Sphere(Vector3.random(rng, 0, 165), 10, white) for _ in range(1000)]
    world.add(Translate(RotateY(BVHNode(cluster, 0.0, 1.0, rng=rng), 15),
                        Vector3(-100, 270, 395)))

    return Scene(world, lookfrom=Vector3(478, 278, -600), lookat=Vector3(278, 278, 0),
                 vfov=40.0, background=ColorPresets.NIGHT)


# name -> (builder, takes an image path)
SCENES: Dict[str, tuple] = {
    "random-spheres": (random_scene, False),
    "two-spheres": (two_spheres, False),
    "two-perlin-spheres": (two_perlin_spheres, False),
    "earth": (earth, True),
    "simple-light": (simple_light, False),
    "cornell-box": (cornell_box, False),
    "cornell-balls": (cornell_balls, False),
    "cornell-smoke": (cornell_smoke, False),
    "cornell-final": (cornell_final, False),
    "final": (final_scene, True),
}


def build_scene(name: str, rng: Optional[random.Random] = None,
                image_path: Optional[str] = None) -> Scene:
    """Build a catalogued scene by name."""
    if name not in SCENES:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}")
    builder, takes_image = SCENES[name]
    rng = rng if rng is not None else random.Random()
    if takes_image:
        scene = builder(rng, image_path or DEFAULT_EARTH_TEXTURE)
    else:
        scene = builder(rng)
    logger.info("Built scene %s with %d top-level objects", name, len(scene.world))
    return scene
