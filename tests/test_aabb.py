"""Unit tests for axis-aligned bounding boxes."""

import pytest

from pathtracer.core.aabb import AABB, PADDING
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


class TestAABBHit:
    """Tests for the slab intersection test."""

    def test_entry_distance(self, unit_box):
        """A ray along +x enters the unit box at t=1."""
        ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0))
        assert unit_box.entry_distance(ray, 0.001, float("inf")) == pytest.approx(1.0)
        assert unit_box.hit(ray, 0.001, float("inf"))

    def test_negative_direction(self, unit_box):
        """Slabs are swapped for negative direction components."""
        ray = Ray(Vector3(0.5, 0.5, 3), Vector3(0, 0, -1))
        assert unit_box.entry_distance(ray, 0.0, 10.0) == pytest.approx(2.0)

    def test_miss(self, unit_box):
        """A ray passing beside the box misses."""
        ray = Ray(Vector3(-1, 2, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_parallel_outside_slab(self, unit_box):
        """A zero direction component outside the slab is a miss, not a division error."""
        ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(0, 1, 0))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_parallel_inside_slab(self, unit_box):
        """A zero direction component inside the slab keeps testing the other axes."""
        ray = Ray(Vector3(0.5, -1, 0.5), Vector3(0, 1, 0))
        assert unit_box.entry_distance(ray, 0.0, float("inf")) == pytest.approx(1.0)

    def test_t_range_limits(self, unit_box):
        """Boxes beyond t_max or behind t_min are rejected."""
        ray = Ray(Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.0, 4.0)
        behind = Ray(Vector3(5, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(behind, 0.0, float("inf"))

    def test_origin_inside(self, unit_box):
        """From inside the box the entry distance is t_min."""
        ray = Ray(Vector3(0.5, 0.5, 0.5), Vector3(1, 1, 0))
        assert unit_box.entry_distance(ray, 0.01, 100.0) == pytest.approx(0.01)


class TestAABBConstruction:
    """Tests for construction, padding and union."""

    def test_flat_box_is_padded(self):
        """A zero-thickness box gets a thin slab so rays still hit it."""
        box = AABB(Vector3(0, 0, 0), Vector3(1, 1, 0))
        assert box.maximum.z - box.minimum.z == pytest.approx(PADDING)
        ray = Ray(Vector3(0.5, 0.5, 1), Vector3(0, 0, -1))
        assert box.hit(ray, 0.0, float("inf"))

    def test_inverted_box_rejected(self):
        """Minimum above maximum is an error."""
        with pytest.raises(ValueError):
            AABB(Vector3(1, 0, 0), Vector3(0, 1, 1))

    def test_surrounding_box(self):
        """The union covers both inputs."""
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-2, 0.5, 0.5), Vector3(0.5, 3, 0.7))
        u = AABB.surrounding_box(a, b)
        assert u.minimum == Vector3(-2, 0, 0)
        assert u.maximum == Vector3(1, 3, 1)

    def test_centroid(self):
        """Centroids are slab midpoints, the BVH sort key."""
        box = AABB(Vector3(0, 0, 0), Vector3(1, 5, 2))
        assert box.centroid(0) == 0.5
        assert box.centroid(1) == 2.5
