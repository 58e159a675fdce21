from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    SolidTexture,
    Texture,
)

__all__ = [
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
    "Texture",
    "SolidTexture",
    "CheckerTexture",
    "NoiseTexture",
    "ImageTexture",
    "load_texture",
]
