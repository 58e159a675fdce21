# examples/render_spheres.py
"""Render a small showcase scene to spheres.png (or the path given as argv[1])."""
import sys

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.presets import DielectricPresets, MetalPresets, TexturePresets
from pathtracer.renderer.config import RenderSettings
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.scene import Scene
from pathtracer.utils.logger import init_logger


def create_world() -> HittableList:
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))
    world.add(Sphere(Point3(-2.2, 1, 0), 1.0, Lambertian(TexturePresets.marble())))
    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(2.2, 1, 0), 1.0, MetalPresets.gold()))
    world.add(MovingSphere(Point3(0, 0.4, 2), Point3(0, 0.7, 2), 0.0, 1.0, 0.4,
                           Lambertian(Color(0.2, 0.3, 0.9))))
    return world


def main(argv):
    init_logger()
    output = argv[1] if len(argv) > 1 else "spheres.png"
    camera = Camera(look_from=Point3(0, 2, 8), look_at=Point3(0, 1, 0), vup=Vector3(0, 1, 0),
                    vfov=35.0, aspect_ratio=16.0 / 9.0, aperture=0.05, time0=0.0, time1=1.0)
    scene = Scene(camera, create_world())
    settings = RenderSettings.from_quality("balanced", height=180, workers=None)
    save_image(output, Renderer(settings).render(scene))


if __name__ == "__main__":
    main(sys.argv)
