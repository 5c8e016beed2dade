"""Tests for the scene catalogue.

Tests cover:
- Every catalogued scene builds and yields a usable camera
- Scenes are reproducible from a seed
- Image-textured scenes load their texture and fail without it
- Tiny end-to-end renders of representative scenes
"""

import random

import numpy as np
import pytest

from pathtracer.core.settings import RenderSettings
from pathtracer.geometry.bvh import BVHNode
from pathtracer.main import render_scene
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.textures import ImageTexture
from pathtracer.scenes import SCENES, Scene, build_scene

PLAIN_SCENES = [name for name, (_, takes_image) in SCENES.items() if not takes_image]
IMAGE_SCENES = [name for name, (_, takes_image) in SCENES.items() if takes_image]


class TestCatalogue:
    """Tests for build_scene."""

    def test_expected_names(self):
        assert set(SCENES) == {
            "random-spheres", "two-spheres", "two-perlin-spheres", "earth", "simple-light",
            "cornell-box", "cornell-balls", "cornell-smoke", "cornell-final", "final",
        }

    @pytest.mark.parametrize("name", PLAIN_SCENES)
    def test_builds(self, name):
        scene = build_scene(name, random.Random(0))
        assert isinstance(scene, Scene)
        assert len(scene.world) > 0
        assert scene.world.bounding_box(scene.time0, scene.time1) is not None
        camera = scene.make_camera(1.0)
        assert camera.forward.length() == pytest.approx(1.0)

    @pytest.mark.parametrize("name", IMAGE_SCENES)
    def test_image_scenes_load_texture(self, name, quad_png):
        scene = build_scene(name, random.Random(0), quad_png)
        assert len(scene.world) > 0

    def test_earth_globe_is_image_textured(self, quad_png):
        globe = build_scene("earth", random.Random(0), quad_png).world.objects[0]
        assert isinstance(globe.material, Lambertian)
        assert isinstance(globe.material.texture, ImageTexture)

    @pytest.mark.parametrize("name", IMAGE_SCENES)
    def test_missing_texture_is_an_error(self, name, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_scene(name, random.Random(0), str(tmp_path / "missing.jpg"))

    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            build_scene("teapot")

    def test_random_scene_is_a_tree(self):
        scene = build_scene("random-spheres", random.Random(0))
        assert isinstance(scene.world.objects[0], BVHNode)

    def test_same_seed_same_layout(self):
        a = build_scene("random-spheres", random.Random(42)).world.bounding_box(0, 1)
        b = build_scene("random-spheres", random.Random(42)).world.bounding_box(0, 1)
        assert a.minimum == b.minimum
        assert a.maximum == b.maximum


class TestSceneRenders:
    """Tiny renders through the full pipeline."""

    @pytest.mark.parametrize("name", ["two-spheres", "cornell-box", "cornell-smoke"])
    def test_tiny_render(self, name):
        settings = RenderSettings(width=4, samples_per_pixel=2, max_depth=3, seed=1)
        image = render_scene(build_scene(name, random.Random(1)), settings)
        assert image.shape == (4, 4, 4)
        assert image.dtype == np.uint8
        assert (image[..., 3] == 255).all()

    def test_sky_scene_is_not_black(self):
        settings = RenderSettings(width=4, samples_per_pixel=2, max_depth=3, seed=1)
        image = render_scene(build_scene("two-spheres", random.Random(1)), settings)
        assert image[..., :3].max() > 0
