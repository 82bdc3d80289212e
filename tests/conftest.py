"""Pytest configuration for path tracer tests.

Shared fixtures: a seeded random source so sampling tests are
reproducible, and a few small materials and hit records.
"""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded random source; every test gets a fresh stream."""
    return random.Random(42)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def upward_hit():
    """Front-face hit at the origin on a surface facing +Y."""
    rec = HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 1, 0), t=1.0, front_face=True)
    rec.u, rec.v = 0.25, 0.75
    return rec


def assert_vec_close(actual, expected, tol=1e-6):
    """Component-wise comparison of two vectors."""
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual!r} != {expected!r}"
