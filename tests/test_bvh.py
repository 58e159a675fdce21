"""Tests for the bounding volume hierarchy.

The BVH must return exactly the hit a brute-force scan finds, for any ray.
"""

import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian

INF = float("inf")


def random_spheres(rng: random.Random, count: int, moving: bool = False):
    objects = []
    for _ in range(count):
        center = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        radius = rng.uniform(0.2, 2.0)
        # One material per sphere so a hit identifies its object
        material = Lambertian(Color(rng.random(), rng.random(), rng.random()))
        if moving and rng.random() < 0.5:
            center1 = center + Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
            objects.append(MovingSphere(center, center1, 0.0, 1.0, radius, material))
        else:
            objects.append(Sphere(center, radius, material))
    return objects


def random_ray(rng: random.Random, time: float = 0.0) -> Ray:
    origin = Vector3(rng.uniform(-15, 15), rng.uniform(-15, 15), rng.uniform(-15, 15))
    target = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
    return Ray(origin, target - origin, time)


def assert_same_hit(expected, actual):
    if expected is None:
        assert actual is None
        return
    assert actual is not None
    assert actual.t == expected.t
    assert actual.material is expected.material
    assert actual.front_face == expected.front_face


class TestBVHBuild:
    """Tests for tree construction."""

    def test_empty_is_an_error(self):
        """A scene needs at least one primitive."""
        with pytest.raises(ValueError):
            BVHNode.build([])

    def test_single_object_is_leaf(self):
        """One object makes a single leaf."""
        sphere = Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Color(1, 1, 1)))
        root = BVHNode.build([sphere])
        assert root.is_leaf
        assert root.object is sphere

    def test_two_objects_ordered_along_axis(self):
        """Two objects become two leaves ordered along the split axis."""
        mat = Lambertian(Color(1, 1, 1))
        right = Sphere(Vector3(5, 0, 0), 1.0, mat)
        left = Sphere(Vector3(-5, 0, 0), 1.0, mat)
        root = BVHNode.build([right, left])
        assert not root.is_leaf
        assert root.left.object is left
        assert root.right.object is right

    def test_every_object_in_exactly_one_leaf(self):
        """The tree partitions the input."""
        objects = random_spheres(random.Random(11), 37)
        root = BVHNode.build(objects)
        leaves = list(root.leaves())
        assert len(leaves) == len(objects)
        assert {id(o) for o in leaves} == {id(o) for o in objects}
        assert root.node_count() == 2 * len(objects) - 1

    def test_node_boxes_enclose_children(self):
        """Every internal box is the union of its children's boxes."""
        root = BVHNode.build(random_spheres(random.Random(12), 20))
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                continue
            for child in (node.left, node.right):
                for axis in range(3):
                    assert node.box.minimum[axis] <= child.box.minimum[axis]
                    assert node.box.maximum[axis] >= child.box.maximum[axis]
                stack.append(child)

    def test_balanced_depth(self):
        """Median splits keep the tree logarithmic."""
        root = BVHNode.build(random_spheres(random.Random(13), 64))
        assert root.depth() == 7

    def test_input_list_not_modified(self):
        """Building sorts a copy, not the caller's list."""
        objects = random_spheres(random.Random(14), 10)
        before = list(objects)
        BVHNode.build(objects)
        assert objects == before


class TestBVHMatchesBruteForce:
    """Nearest-hit equivalence between BVH traversal and a linear scan."""

    @pytest.mark.parametrize("seed,count", [(1, 1), (2, 2), (3, 3), (4, 17), (5, 100)])
    def test_static_scenes(self, seed, count):
        """Static spheres, random rays."""
        rng = random.Random(seed)
        objects = random_spheres(rng, count)
        brute = HittableList(objects)
        bvh = BVHNode.build(objects)
        for _ in range(400):
            ray = random_ray(rng)
            assert_same_hit(brute.hit(ray, 0.001, INF), bvh.hit(ray, 0.001, INF))

    def test_limited_t_range(self):
        """Equivalence holds for finite t_max too."""
        rng = random.Random(21)
        objects = random_spheres(rng, 50)
        brute = HittableList(objects)
        bvh = brute.build_bvh()
        for _ in range(400):
            ray = random_ray(rng)
            t_max = rng.uniform(0.5, 20.0)
            assert_same_hit(brute.hit(ray, 0.001, t_max), bvh.hit(ray, 0.001, t_max))

    def test_moving_spheres(self):
        """Boxes built over the shutter interval contain every moving sphere."""
        rng = random.Random(31)
        objects = random_spheres(rng, 60, moving=True)
        brute = HittableList(objects)
        bvh = BVHNode.build(objects, 0.0, 1.0)
        for _ in range(400):
            ray = random_ray(rng, time=rng.random())
            assert_same_hit(brute.hit(ray, 0.001, INF), bvh.hit(ray, 0.001, INF))

    def test_axis_parallel_rays(self):
        """Rays with zero direction components traverse correctly."""
        rng = random.Random(41)
        objects = random_spheres(rng, 40)
        brute = HittableList(objects)
        bvh = BVHNode.build(objects)
        axes = [Vector3(1, 0, 0), Vector3(0, -1, 0), Vector3(0, 0, 1)]
        for _ in range(300):
            origin = Vector3(rng.uniform(-12, 12), rng.uniform(-12, 12), rng.uniform(-12, 12))
            ray = Ray(origin, rng.choice(axes))
            assert_same_hit(brute.hit(ray, 0.001, INF), bvh.hit(ray, 0.001, INF))
