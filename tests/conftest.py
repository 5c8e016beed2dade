"""Pytest configuration for pathtracer tests.

Shared fixtures: a seeded random source, small render settings and a few
tiny worlds that render quickly.
"""

import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.settings import RenderSettings
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded random source so stochastic tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def tiny_settings():
    """A 4x4 render with a handful of samples."""
    return RenderSettings(width=4, aspect_ratio=1.0, samples_per_pixel=4, max_depth=5,
                          workers=1, seed=7)


@pytest.fixture
def red_sphere_world():
    """A unit red Lambertian sphere at the origin."""
    return HittableList([Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.8, 0.1, 0.1)))])


@pytest.fixture
def quad_png(tmp_path):
    """A 2x2 PNG: red, green on the top row; blue, white on the bottom."""
    pixels = np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [255, 255, 255]],
    ], dtype=np.uint8)
    path = tmp_path / "quad.png"
    Image.fromarray(pixels).save(path)
    return str(path)
