"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- Slab intersection for hits and misses
- Rays parallel or nearly parallel to a slab
- Interval clipping by t_min / t_max
- Surrounding boxes and boxes from point sets
- Rejecting inverted boxes
"""

import math

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


class TestAABBHit:
    """Tests for the slab test."""

    def test_hit_head_on(self, unit_box):
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert unit_box.hit(ray, 0.001, 100.0)

    def test_miss_to_the_side(self, unit_box):
        ray = Ray(Vector3(2.0, 0.5, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.001, 100.0)

    def test_diagonal_hit(self, unit_box):
        ray = Ray(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        assert unit_box.hit(ray, 0.0, 100.0)

    def test_parallel_ray_inside_slab(self, unit_box):
        """Zero direction components do not reject rays already inside the slab."""
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert unit_box.hit(ray, 0.0, 100.0)

    def test_parallel_ray_outside_slab(self, unit_box):
        ray = Ray(Vector3(0.5, 3.0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.0, 100.0)

    def test_nearly_parallel_ray_reaches_distant_hit(self):
        """A tiny direction component must not prune a hit far along the ray."""
        box = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1e14))
        ray = Ray(Vector3(-0.5, 0.5, 0), Vector3(1e-13, 0, 1))
        # enters x = 0 at t = 5e12, well inside the box along z
        assert box.hit(ray, 0.0, math.inf)

    def test_interval_before_box(self, unit_box):
        """The box lies beyond t_max."""
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.0, 4.0)

    def test_box_behind_ray(self, unit_box):
        ray = Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.0, 100.0)

    def test_negative_direction(self, unit_box):
        ray = Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1))
        assert unit_box.hit(ray, 0.0, 100.0)


class TestAABBConstruction:
    """Tests for box construction helpers."""

    def test_inverted_box_rejected(self):
        with pytest.raises(ValueError):
            AABB(Vector3(1, 0, 0), Vector3(0, 1, 1))

    def test_surrounding_box(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 0.5), Vector3(0.5, 2, 0.5))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-1, 0, 0)
        assert box.maximum == Vector3(1, 2, 1)

    def test_from_points(self):
        box = AABB.from_points([Vector3(1, -2, 3), Vector3(-1, 2, 0), Vector3(0, 0, 5)])
        assert box.minimum == Vector3(-1, -2, 0)
        assert box.maximum == Vector3(1, 2, 5)

    def test_corners_and_contains(self, unit_box):
        corners = unit_box.corners()
        assert len(corners) == 8
        assert all(unit_box.contains(c) for c in corners)
        assert not unit_box.contains(Vector3(1.5, 0.5, 0.5))
