"""Unit tests for boxes and the structural decorators.

Tests cover:
- Box faces report front_face from outside and back faces from inside
- Translation of hits and bounding boxes
- Rotation of hits, normals and bounding boxes
- Face flipping
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.rect import XZRect
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import FlipFace, Rotate, RotateY, Translate, rotate_vector
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def unit_box(grey):
    return Box(Vector3(0, 0, 0), Vector3(1, 1, 1), grey)


class TestBox:
    """Tests for six-sided boxes."""

    @pytest.mark.parametrize("origin, direction", [
        (Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)),
        (Vector3(0.5, 0.5, -4), Vector3(0, 0, 1)),
        (Vector3(0.5, 5, 0.5), Vector3(0, -1, 0)),
        (Vector3(0.5, -4, 0.5), Vector3(0, 1, 0)),
        (Vector3(5, 0.5, 0.5), Vector3(-1, 0, 0)),
        (Vector3(-4, 0.5, 0.5), Vector3(1, 0, 0)),
    ])
    def test_every_face_is_front_from_outside(self, unit_box, origin, direction):
        rec = unit_box.hit(Ray(origin, direction), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.front_face
        assert rec.normal.dot(direction) < 0

    def test_back_face_from_inside(self, unit_box):
        rec = unit_box.hit(Ray(Vector3(0.5, 0.5, 0.5), Vector3(0, 1, 0)), 0.001, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert not rec.front_face

    def test_bounding_box(self, grey):
        box = Box(Vector3(-1, 0, 2), Vector3(1, 3, 4), grey).bounding_box(0, 1)
        assert box.minimum == Vector3(-1, 0, 2)
        assert box.maximum == Vector3(1, 3, 4)


class TestTranslate:
    """Tests for Translate."""

    def test_hit_point_is_moved(self, grey):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, grey), Vector3(0, 0, -3))
        rec = moved.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.p.z == pytest.approx(-2.0)
        assert rec.front_face

    def test_bounding_box_is_moved(self, unit_box):
        box = Translate(unit_box, Vector3(10, 0, -1)).bounding_box(0, 1)
        assert box.minimum == Vector3(10, 0, -1)
        assert box.maximum == Vector3(11, 1, 0)


class TestRotate:
    """Tests for rotations about a coordinate axis."""

    def test_rotate_vector_about_y(self):
        """A quarter turn about y maps +x to -z."""
        v = rotate_vector(Vector3(1, 0, 0), 'y', 1.0, 0.0)
        assert v == Vector3(0, 0, -1)

    def test_rotated_box_hit(self, unit_box):
        """A quarter turn about y moves the unit box to x in [0, 1], z in [-1, 0]."""
        rotated = RotateY(unit_box, 90)
        rec = rotated.hit(Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(5.0)
        assert rec.p.x == pytest.approx(0.5)
        assert rec.p.y == pytest.approx(0.5)
        assert rec.p.z == pytest.approx(0.0, abs=1e-9)
        assert rec.normal.z == pytest.approx(1.0)
        assert rec.front_face

    def test_rotated_bounding_box(self, unit_box):
        box = RotateY(unit_box, 90).bounding_box(0, 1)
        assert box.minimum.x == pytest.approx(0.0, abs=1e-9)
        assert box.maximum.x == pytest.approx(1.0)
        assert box.minimum.z == pytest.approx(-1.0)
        assert box.maximum.z == pytest.approx(0.0, abs=1e-9)

    def test_rotation_about_x(self, grey):
        """A quarter turn about x tips an upward-facing floor toward +z."""
        floor = XZRect(-1, 1, -1, 1, 0, grey)
        rotated = Rotate(floor, 90, axis='x')
        rec = rotated.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(5.0)
        assert rec.normal.z == pytest.approx(1.0)
        assert rec.front_face

    def test_bad_axis_rejected(self, unit_box):
        with pytest.raises(ValueError):
            Rotate(unit_box, 45, axis='w')


class TestFlipFace:
    """Tests for FlipFace."""

    def test_flag_inverted(self, grey):
        rect = XZRect(-1, 1, -1, 1, 0, grey)
        ray = Ray(Vector3(0, 3, 0), Vector3(0, -1, 0))
        assert rect.hit(ray, 0.001, math.inf).front_face
        assert not FlipFace(rect).hit(ray, 0.001, math.inf).front_face

    def test_bounding_box_passes_through(self, unit_box):
        box = FlipFace(unit_box).bounding_box(0, 1)
        assert box.maximum == Vector3(1, 1, 1)
