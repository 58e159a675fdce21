"""CPU path tracer: spheres, BVH acceleration, textured materials and a
thin-lens camera with motion blur, rendered in parallel worker processes.

Subpackages:
    core: vectors, rays, bounding boxes and sampling helpers
    geometry: hittable primitives and the BVH
    materials: scattering models and textures
    camera: ray generation with depth of field and shutter time
    renderer: scene, integrator, tone mapping and image output
"""

from pathtracer.camera import Camera
from pathtracer.core import Color, Point3, Vector3
from pathtracer.renderer import Renderer, RenderSettings, Scene

__version__ = "0.1.0"

__all__ = ["Camera", "Color", "Point3", "Vector3", "Renderer", "RenderSettings", "Scene"]
