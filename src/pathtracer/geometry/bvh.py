# geometry/bvh.py
import logging
from typing import List, Optional, Sequence

from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a set of hittables.

    A leaf holds exactly one object; an internal node owns two children and
    the union of their boxes. Splits use a median cut along the axis in which
    the object centroids spread the most. The tree is never modified after
    build(), so it can be shared by any number of render workers.
    """
    __slots__ = ("box", "left", "right", "object")

    def __init__(self, box: AABB, left: "BVHNode" = None, right: "BVHNode" = None,
                 obj: Hittable = None):
        self.box = box
        self.left = left
        self.right = right
        self.object = obj

    @property
    def is_leaf(self) -> bool:
        return self.object is not None

    @classmethod
    def build(cls, objects: Sequence[Hittable], time0: float = 0.0,
              time1: float = 0.0) -> "BVHNode":
        """
        Builds a tree over objects, whose boxes are taken over [time0, time1].

        Raises:
            ValueError: if objects is empty.
        """
        if len(objects) == 0:
            raise ValueError("Cannot build a BVH over an empty object list; "
                             "a scene needs at least one primitive")
        entries = [(obj, obj.bounding_box(time0, time1)) for obj in objects]
        root = cls._build(entries)
        logger.debug("Built BVH over %d objects: %d nodes, depth %d",
                     len(entries), root.node_count(), root.depth())
        return root

    @classmethod
    def _build(cls, entries: List[tuple]) -> "BVHNode":
        if len(entries) == 1:
            obj, box = entries[0]
            return cls(box, obj=obj)

        axis = _split_axis(entries)
        entries = sorted(entries, key=lambda entry: entry[1].centroid(axis))
        mid = len(entries) // 2
        left = cls._build(entries[:mid])
        right = cls._build(entries[mid:])
        return cls(AABB.surrounding_box(left.box, right.box), left, right)

    def hit(self, ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.box.entry_distance(ray, t_min, t_max) is None:
            return None
        return self._hit_inside(ray, t_min, t_max)

    def _hit_inside(self, ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Caller has already established that the ray enters this node's box.
        if self.object is not None:
            return self.object.hit(ray, t_min, t_max)

        near, far = self.left, self.right
        t_near = near.box.entry_distance(ray, t_min, t_max)
        t_far = far.box.entry_distance(ray, t_min, t_max)
        if t_near is None:
            if t_far is None:
                return None
            near, far, t_near, t_far = far, near, t_far, None
        elif t_far is not None and t_far < t_near:
            near, far, t_near, t_far = far, near, t_far, t_near

        rec = near._hit_inside(ray, t_min, t_max)
        if rec is not None:
            t_max = rec.t

        # A box hit only bounds the distance from below, so the far child can
        # still hold a closer surface than the one found so far.
        if t_far is not None and t_far <= t_max:
            far_rec = far._hit_inside(ray, t_min, t_max)
            if far_rec is not None:
                rec = far_rec
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def node_count(self) -> int:
        if self.object is not None:
            return 1
        return 1 + self.left.node_count() + self.right.node_count()

    def depth(self) -> int:
        if self.object is not None:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self):
        """Yields the leaf objects left to right."""
        if self.object is not None:
            yield self.object
            return
        yield from self.left.leaves()
        yield from self.right.leaves()


def _split_axis(entries: List[tuple]) -> int:
    lo = [float("inf")] * 3
    hi = [float("-inf")] * 3
    for _, box in entries:
        for axis in range(3):
            c = box.centroid(axis)
            if c < lo[axis]:
                lo[axis] = c
            if c > hi[axis]:
                hi[axis] = c
    extents = [hi[axis] - lo[axis] for axis in range(3)]
    return max(range(3), key=lambda axis: extents[axis])
