# camera/camera.py
import math
import random
from typing import Optional

from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk
from pathtracer.core.vector import Point3, Vector3


class Camera:
    """
    Thin-lens camera looking from look_from towards look_at.

    Args:
        look_from: Eye position.
        look_at: Point the camera faces.
        vup: Approximate up direction; must not be parallel to the view.
        vfov: Vertical field of view in degrees, in (0, 180).
        aspect_ratio: Viewport width / height.
        aperture: Lens diameter; 0 gives a pinhole camera.
        focus_dist: Distance to the plane in perfect focus. None focuses on look_at.
        time0, time1: Shutter open and close times; each ray gets a time
            drawn uniformly from this interval.

    Raises:
        ValueError: for a degenerate basis or out-of-range parameters.
    """
    def __init__(self, look_from: Point3 = None, look_at: Point3 = None,
                 vup: Vector3 = None, vfov: float = 90.0,
                 aspect_ratio: float = 16.0 / 9.0, aperture: float = 0.0,
                 focus_dist: Optional[float] = None,
                 time0: float = 0.0, time1: float = 0.0):
        self.look_from = look_from if look_from is not None else Point3(0, 0, 0)
        self.look_at = look_at if look_at is not None else Point3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        view = self.look_from - self.look_at
        if view.near_zero():
            raise ValueError(f"Camera look_from and look_at coincide at {self.look_from}")
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"Vertical field of view must be in (0, 180) degrees, got {vfov}")
        if aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ValueError(f"Aperture must not be negative, got {aperture}")
        if time1 < time0:
            raise ValueError(f"Shutter closes ({time1}) before it opens ({time0})")

        self.focus_dist = view.length() if focus_dist is None else focus_dist
        if self.focus_dist <= 0:
            raise ValueError(f"Focus distance must be positive, got {self.focus_dist}")

        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # w points backwards, away from the scene
        self.w = (self.look_from - self.look_at).normalize()
        side = self.vup.cross(self.w)
        if side.length() < 1e-12:
            raise ValueError(f"Camera up vector {self.vup} is parallel to the view direction")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist

        self.lower_left_corner = (self.look_from -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """
        Ray through viewport coordinates (s, t), both in [0, 1] with (0, 0)
        at the bottom-left. The origin is jittered over the lens disk and the
        time is drawn from the shutter interval.
        """
        origin = self.look_from
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)

        if self.time1 > self.time0:
            time = rng.uniform(self.time0, self.time1)
        else:
            time = self.time0
        return Ray(origin, direction, time)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from!r}, look_at={self.look_at!r}, "
                f"vfov={self.vfov}, aspect_ratio={self.aspect_ratio}, "
                f"aperture={self.aperture}, focus_dist={self.focus_dist})")
