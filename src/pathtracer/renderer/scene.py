# renderer/scene.py
import logging
from typing import Callable, Iterable, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.background import SkyGradient

logger = logging.getLogger(__name__)


class Scene:
    """
    Everything a render reads: the camera, a BVH over the primitives and the
    background seen by rays that escape. Built once, then only read.

    background is any callable mapping a ray to a color. Rendering with more
    than one worker pickles the scene, so it must then be a module-level
    object such as SkyGradient or SolidBackground, not a lambda.

    Raises:
        ValueError: if objects is empty.
    """
    def __init__(self, camera: Camera, objects: Iterable[Hittable],
                 background: Optional[Callable[[Ray], Color]] = None):
        objects = list(getattr(objects, "objects", objects))
        self.camera = camera
        self.background = background if background is not None else SkyGradient()
        # Boxes must cover every instant a camera ray can sample.
        self.world = BVHNode.build(objects, camera.time0, camera.time1)
        self.object_count = len(objects)
        logger.debug("Scene ready: %d objects, background %r", self.object_count, self.background)
