"""Unit tests for vectors, rays and the sampling helpers.

Tests cover:
- Vector arithmetic and products
- Normalization of the zero vector
- Ray evaluation
- Reflection, refraction and Schlick reflectance
- Random direction helpers staying in their domains
"""

import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import (clamp, random_in_unit_disk, random_in_unit_sphere,
                                   random_unit_vector, reflect, refract, schlick)
from pathtracer.core.vector import Vector3


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_componentwise_and_scalar_products(self):
        a = Vector3(1, 2, 3)
        b = Vector3(2, 0.5, -1)
        assert a * b == Vector3(2, 1, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a / 2 == Vector3(0.5, 1, 1.5)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_normalize(self):
        """Normalized vectors have unit length; zero stays zero."""
        v = Vector3(3, 4, 0).normalize()
        assert v.length() == pytest.approx(1.0)
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()


class TestRay:
    """Tests for Ray."""

    def test_at(self):
        ray = Ray(Vector3(1, 0, 0), Vector3(0, 2, 0), time=0.5)
        assert ray.at(1.5) == Vector3(1, 3, 0)
        assert ray.time == 0.5

    def test_default_time_is_zero(self):
        assert Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)).time == 0.0


class TestOptics:
    """Tests for reflect, refract and schlick."""

    def test_reflect_flips_normal_component(self):
        r = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert r == Vector3(1, 1, 0)

    def test_refract_normal_incidence_goes_straight(self):
        r = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
        assert r.x == pytest.approx(0.0)
        assert r.y == pytest.approx(-1.0)
        assert r.z == pytest.approx(0.0)

    def test_refract_obeys_snell(self):
        """sin(theta_t) = eta * sin(theta_i) for a 45 degree incident ray."""
        incident = Vector3(1, -1, 0).normalize()
        eta = 1 / 1.5
        r = refract(incident, Vector3(0, 1, 0), eta)
        sin_t = abs(r.x) / r.length()
        assert sin_t == pytest.approx(eta * math.sin(math.radians(45)), rel=1e-6)

    def test_schlick_head_on(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)

    def test_schlick_grazing_is_total(self):
        assert schlick(0.0, 1.5) == pytest.approx(1.0)

    def test_clamp(self):
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.3, 0, 1) == 0.3


class TestRandomDirections:
    """Tests for the random direction helpers."""

    def test_unit_sphere_points_inside(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vectors_have_unit_length(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_points_in_plane(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.x * p.x + p.y * p.y < 1.0

    def test_seeded_sources_repeat(self):
        assert random_unit_vector(random.Random(5)) == random_unit_vector(random.Random(5))
