# materials/material.py
import random
from typing import Optional, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import SolidTexture, Texture


def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; textures pass through."""
    if isinstance(albedo, Texture):
        return albedo
    return SolidTexture(albedo)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials hold no mutable state, so one instance can be shared by many
    primitives and read by many render workers at once.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns (attenuation, scattered_ray), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, rec: HitRecord) -> Color:
        return Color(0.0, 0.0, 0.0)
