"""Pytest configuration for path tracer tests.

Shared fixtures: seeded random generators, a stub generator that returns a
fixed value, and the small reference scene used by the renderer tests.
"""

import random

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian


class FixedRandom:
    """Stands in for random.Random where a test needs a known draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def single_sphere_scene_parts():
    """Camera looking down -z at a diffuse sphere of radius 0.5 at (0, 0, -1)."""
    camera = Camera(look_from=Point3(0, 0, 0), look_at=Point3(0, 0, -1), vfov=90.0,
                    aspect_ratio=1.0)
    sphere = Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.5, 0.5, 0.5)))
    return camera, [sphere]
