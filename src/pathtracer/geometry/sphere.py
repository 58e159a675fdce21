# geometry/sphere.py
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


def sphere_uv(p: Vector3) -> UV:
    """
    Maps a point on the unit sphere to texture coordinates.
    u runs around the Y axis starting at -X, v from the south to the north pole.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)


def _nearest_root(oc: Vector3, direction: Vector3, radius: float,
                  t_min: float, t_max: float) -> Optional[float]:
    a = direction.dot(direction)
    if a == 0.0:
        return None
    half_b = oc.dot(direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None
    return root


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def center_at(self, time: float) -> Vector3:
        return self.center

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        root = _nearest_root(ray.origin - center, ray.direction, self.radius, t_min, t_max)
        if root is None:
            return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.uv = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"


class MovingSphere(Sphere):
    """
    A sphere whose center travels linearly from center0 at time0 to
    center1 at time1. Rays outside that window extrapolate the motion.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        super().__init__(center0, radius, material)
        if time1 < time0:
            raise ValueError(f"MovingSphere time1 ({time1}) precedes time0 ({time0})")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1

    def center_at(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        f = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * f

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center_at(time0)
        c1 = self.center_at(time1)
        box0 = AABB(c0 - offset, c0 + offset)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        return (f"MovingSphere({self.center0!r} -> {self.center1!r}, "
                f"[{self.time0}, {self.time1}], {self.radius})")
