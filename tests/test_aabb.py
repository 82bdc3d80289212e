"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- Slab test hits and misses
- Rays exactly parallel to a slab, with the origin inside, outside and on
  the boundary
- Zero-thickness boxes
- surrounding_box containment
"""

import random

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


class TestAABBHit:
    """Tests for the slab intersection test."""

    def test_diagonal_hit(self, unit_box):
        ray = Ray(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        assert unit_box.hit(ray, 0.001, float("inf"))

    def test_miss(self, unit_box):
        ray = Ray(Vector3(-1, 2, -1), Vector3(1, 0.1, 1))
        assert not unit_box.hit(ray, 0.001, float("inf"))

    def test_behind_ray(self, unit_box):
        """The box lies behind the origin."""
        ray = Ray(Vector3(2, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.001, float("inf"))

    def test_interval_too_short(self, unit_box):
        ray = Ray(Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.001, 4.0)
        assert unit_box.hit(ray, 0.001, 5.5)

    def test_negative_direction(self, unit_box):
        ray = Ray(Vector3(3, 0.5, 0.5), Vector3(-1, 0, 0))
        assert unit_box.hit(ray, 0.001, float("inf"))


class TestAABBParallelRays:
    """Rays with zero direction components."""

    def test_parallel_origin_inside_slab(self, unit_box):
        ray = Ray(Vector3(-2, 0.5, 0.5), Vector3(1, 0, 0))
        assert unit_box.hit(ray, 0.001, float("inf"))

    def test_parallel_origin_outside_slab(self, unit_box):
        ray = Ray(Vector3(-2, 1.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.001, float("inf"))

    def test_parallel_origin_on_slab_boundary(self, unit_box):
        """A ray grazing a face counts as inside the closed slab."""
        ray = Ray(Vector3(-2, 1.0, 0.5), Vector3(1, 0, 0))
        assert unit_box.hit(ray, 0.001, float("inf"))

    def test_zero_thickness_box_parallel_ray(self):
        """A flat box is still hit by a ray travelling within its plane."""
        flat = AABB(Vector3(0, 0, 1), Vector3(1, 1, 1))
        ray = Ray(Vector3(-1, 0.5, 1), Vector3(1, 0, 0))
        assert flat.hit(ray, 0.001, float("inf"))

    def test_zero_thickness_box_crossing_ray(self):
        """A ray crossing a flat box gets an empty interval."""
        flat = AABB(Vector3(0, 0, 1), Vector3(1, 1, 1))
        ray = Ray(Vector3(0.5, 0.5, 0), Vector3(0, 0, 1))
        assert not flat.hit(ray, 0.001, float("inf"))


class TestSurroundingBox:
    """Tests for AABB.surrounding_box."""

    def test_union_values(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 2), Vector3(0.5, 3, 4))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-1, 0, 0)
        assert box.maximum == Vector3(1, 3, 4)

    def test_contains_both_inputs(self):
        rng = random.Random(7)
        for _ in range(200):
            boxes = []
            for _ in range(2):
                lo = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
                size = Vector3(rng.uniform(0, 5), rng.uniform(0, 5), rng.uniform(0, 5))
                boxes.append(AABB(lo, lo + size))
            union = AABB.surrounding_box(*boxes)
            assert union.contains(boxes[0])
            assert union.contains(boxes[1])
            for axis in range(3):
                assert union.minimum[axis] <= union.maximum[axis]
