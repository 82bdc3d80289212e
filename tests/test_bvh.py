"""Unit tests for the bounding volume hierarchy and hittable lists.

Tests cover:
- BVH traversal returns the same nearest hit as a linear scan
- Degenerate one- and two-element nodes
- Errors for empty input and unbounded primitives
"""

import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.aarect import XZRect
from pathtracer.geometry.block import Block
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import BoundingBoxError, Hittable
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList


class _Unbounded(Hittable):
    def hit(self, ray, t_min, t_max, rng=None):
        return None

    def bounding_box(self, time0, time1):
        return None


def _random_world(rng, count):
    world = HittableList()
    for i in range(count):
        center = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        if i % 3 == 0:
            world.add(Block(center, center + Vector3(1, 0.5, 2), None))
        elif i % 3 == 1:
            world.add(MovingSphere(center, center + Vector3(0, 1, 0), 0.0, 1.0, 0.7, None))
        else:
            world.add(Sphere(center, rng.uniform(0.2, 1.5), None))
    world.add(XZRect(-20, 20, -20, 20, -12, None))
    return world


def _test_rays(rng, count):
    rays = []
    for _ in range(count):
        origin = Vector3(rng.uniform(-15, 15), rng.uniform(-15, 15), rng.uniform(-15, 15))
        target = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        rays.append(Ray(origin, target - origin, rng.random()))
    # Axis-aligned rays exercise the zero-direction slab branch.
    for axis_dir in (Vector3(1, 0, 0), Vector3(0, -1, 0), Vector3(0, 0, 1)):
        rays.append(Ray(Vector3(0.3, 0.2, 0.1) - axis_dir * 30, axis_dir))
    # Pointing away from everything.
    rays.append(Ray(Vector3(0, 30, 0), Vector3(0, 1, 0)))
    return rays


class TestBVHMatchesLinearScan:
    """The tree must find exactly what a linear scan finds."""

    @pytest.mark.parametrize("seed,count", [(1, 3), (2, 17), (3, 120)])
    def test_nearest_hit_agrees(self, seed, count):
        rng = random.Random(seed)
        world = _random_world(rng, count)
        tree = world.build_bvh(0.0, 1.0, random.Random(seed))
        for ray in _test_rays(rng, 300):
            expected = world.hit(ray, 0.001, math.inf)
            actual = tree.hit(ray, 0.001, math.inf)
            assert (expected is None) == (actual is None)
            if expected is not None:
                assert abs(expected.t - actual.t) < 1e-9

    def test_build_does_not_reorder_list(self):
        rng = random.Random(5)
        world = _random_world(rng, 30)
        before = list(world.objects)
        world.build_bvh(rng=rng)
        assert world.objects == before

    def test_tree_box_encloses_all(self):
        rng = random.Random(9)
        world = _random_world(rng, 40)
        tree = world.build_bvh(rng=rng)
        root_box = tree.bounding_box(0, 1)
        for obj in world.objects:
            assert root_box.contains(obj.bounding_box(0, 1))


class TestBVHNodeShape:
    """Tests for small and degenerate nodes."""

    def test_single_object_aliases_children(self):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, None)
        node = BVHNode.from_list([sphere])
        assert node.left is sphere
        assert node.right is sphere
        rec = node.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert abs(rec.t - 4.0) < 1e-9

    def test_two_objects_ordered_by_box_minimum(self):
        far = Sphere(Vector3(5, 5, 5), 1.0, None)
        near = Sphere(Vector3(0, 0, 0), 1.0, None)
        node = BVHNode.from_list([far, near], rng=random.Random(0))
        assert node.left is near
        assert node.right is far

    def test_two_equal_objects_keep_order(self):
        first = Sphere(Vector3(0, 0, 0), 1.0, None)
        second = Sphere(Vector3(0, 0, 0), 1.0, None)
        node = BVHNode.from_list([first, second], rng=random.Random(0))
        assert node.left is first
        assert node.right is second

    def test_box_is_union_of_children(self):
        a = Sphere(Vector3(0, 0, 0), 1.0, None)
        b = Sphere(Vector3(4, 2, -3), 0.5, None)
        box = BVHNode.from_list([a, b]).bounding_box(0, 1)
        assert box.minimum == Vector3(-1, -1, -3.5)
        assert box.maximum == Vector3(4.5, 2.5, 1)

    def test_node_count_and_depth(self):
        spheres = [Sphere(Vector3(i, 0, 0), 0.25, None) for i in range(8)]
        node = BVHNode.from_list(spheres, rng=random.Random(4))
        assert node.node_count() == 7
        assert node.depth() == 3


class TestBVHErrors:
    """Construction failures."""

    def test_empty_list(self):
        with pytest.raises(ValueError):
            BVHNode.from_list([])
        with pytest.raises(ValueError):
            HittableList().build_bvh()

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_unbounded_primitive(self, count):
        objects = [Sphere(Vector3(i, 0, 0), 0.5, None) for i in range(count - 1)]
        objects.append(_Unbounded())
        with pytest.raises(BoundingBoxError, match="No bounding box"):
            BVHNode.from_list(objects)


class TestHittableList:
    """Tests for the linear-scan container."""

    def test_nearest_of_several(self):
        world = HittableList([Sphere(Vector3(0, 0, -z), 0.5, None) for z in (9, 3, 6)])
        rec = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert abs(rec.t - 2.5) < 1e-9

    def test_add_clear_len(self):
        world = HittableList()
        world.add(Sphere(Vector3(0, 0, 0), 1.0, None))
        assert len(world) == 1
        world.clear()
        assert len(world) == 0
        assert world.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_bounding_box(self):
        assert HittableList().bounding_box(0, 1) is None
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, None), _Unbounded()])
        assert world.bounding_box(0, 1) is None
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, None),
                              Sphere(Vector3(3, 0, 0), 1.0, None)])
        box = world.bounding_box(0, 1)
        assert box.minimum == Vector3(-1, -1, -1)
        assert box.maximum == Vector3(4, 1, 1)
