from pathtracer.renderer.background import SkyGradient, SolidBackground
from pathtracer.renderer.config import QUALITY_LEVELS, RenderSettings
from pathtracer.renderer.image_io import save_image, write_ppm
from pathtracer.renderer.raytracer import Renderer, trace
from pathtracer.renderer.scene import Scene
from pathtracer.renderer.tone_mapping import gamma_correct, quantize

__all__ = [
    "Renderer",
    "RenderSettings",
    "QUALITY_LEVELS",
    "Scene",
    "SkyGradient",
    "SolidBackground",
    "trace",
    "gamma_correct",
    "quantize",
    "save_image",
    "write_ppm",
]
