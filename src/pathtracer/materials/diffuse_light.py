# materials/diffuse_light.py
import random
from typing import Union

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, rec: HitRecord) -> Color:
        return self.texture.value(rec.uv, rec.p)
