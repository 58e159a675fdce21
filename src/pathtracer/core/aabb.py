# core/aabb.py
from typing import Optional

from pathtracer.core.vector import Vector3

# Minimum thickness of a box along any axis. Flat boxes (e.g. around a
# zero-radius sphere or an axis-aligned quad) are widened to this size.
PADDING = 1e-4


class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        if minimum.x > maximum.x or minimum.y > maximum.y or minimum.z > maximum.z:
            raise ValueError(f"AABB minimum {minimum} exceeds maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self._pad()

    def _pad(self):
        lo = [self.minimum.x, self.minimum.y, self.minimum.z]
        hi = [self.maximum.x, self.maximum.y, self.maximum.z]
        padded = False
        for a in range(3):
            if hi[a] - lo[a] < PADDING:
                mid = (hi[a] + lo[a]) * 0.5
                lo[a] = mid - PADDING * 0.5
                hi[a] = mid + PADDING * 0.5
                padded = True
        if padded:
            self.minimum = Vector3(*lo)
            self.maximum = Vector3(*hi)

    def entry_distance(self, ray, t_min: float, t_max: float) -> Optional[float]:
        """
        Slab test returning the parametric distance at which the ray enters
        the box within [t_min, t_max], or None when it misses.
        """
        for a in range(3):
            origin = ray.origin[a]
            direction = ray.direction[a]
            lo = self.minimum[a]
            hi = self.maximum[a]
            if direction == 0.0:
                # Parallel to this slab: inside it or never.
                if origin < lo or origin > hi:
                    return None
                continue
            invD = 1.0 / direction
            t0 = (lo - origin) * invD
            t1 = (hi - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return None
        return t_min

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        return self.entry_distance(ray, t_min, t_max) is not None

    def centroid(self, axis: int) -> float:
        return (self.minimum[axis] + self.maximum[axis]) * 0.5

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
