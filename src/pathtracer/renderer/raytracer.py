# renderer/raytracer.py
import logging
import math
import os
import pickle
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.renderer.config import DEFAULT_T_MIN, RenderSettings
from pathtracer.renderer.scene import Scene
from pathtracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

INFINITY = math.inf
BLACK = Color(0.0, 0.0, 0.0)

# Per-process state installed by _init_worker.
_worker_state = None


def trace(ray: Ray, scene: Scene, depth: int, rng: random.Random,
          t_min: float = DEFAULT_T_MIN) -> Color:
    """
    Radiance carried back along ray. depth is the remaining path budget;
    once it is used up the path contributes nothing.
    """
    if depth <= 0:
        return BLACK

    rec = scene.world.hit(ray, t_min, INFINITY)
    if rec is None:
        return scene.background(ray)

    emitted = rec.material.emitted(rec)
    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return emitted

    attenuation, scattered_ray = scattered
    # Degenerate directions cannot be traced; treat the path as absorbed.
    if scattered_ray.direction.near_zero() or not scattered_ray.direction.is_finite():
        return emitted

    return emitted + attenuation * trace(scattered_ray, scene, depth - 1, rng, t_min)


def row_rng(seed: int, row: int) -> random.Random:
    """Independent generator for one image row; same (seed, row) gives the same stream."""
    return random.Random(f"{seed}:{row}")


def render_row(scene: Scene, settings: RenderSettings, width: int, height: int,
               row: int) -> List[Tuple[float, float, float]]:
    """
    Mean linear color of every pixel of one row (row 0 is the top).
    """
    rng = row_rng(settings.seed, row)
    camera = scene.camera
    samples = settings.samples_per_pixel
    # The camera ray itself does not count against max_depth.
    depth = settings.max_depth + 1
    j = height - 1 - row
    pixels = []
    for i in range(width):
        r = g = b = 0.0
        # Running mean: identical samples reproduce their value exactly.
        for k in range(1, samples + 1):
            s = (i + rng.random()) / width
            t = (j + rng.random()) / height
            ray = camera.get_ray(s, t, rng)
            color = trace(ray, scene, depth, rng, settings.t_min)
            r += (_sanitize(color.x) - r) / k
            g += (_sanitize(color.y) - g) / k
            b += (_sanitize(color.z) - b) / k
        pixels.append((r, g, b))
    return pixels


def _sanitize(component: float) -> float:
    # Drops NaN and negative contributions from pathological samples.
    return component if component > 0.0 else 0.0


def _check_picklable(scene: Scene):
    try:
        pickle.dumps(scene)
    except (pickle.PicklingError, AttributeError, TypeError) as e:
        raise ValueError(f"Scene cannot be sent to worker processes (use workers=1 or "
                         f"module-level backgrounds and materials): {e}") from e


def _init_worker(scene: Scene, settings: RenderSettings, width: int, height: int):
    global _worker_state
    _worker_state = (scene, settings, width, height)


def _render_row_in_worker(row: int):
    scene, settings, width, height = _worker_state
    return row, render_row(scene, settings, width, height, row)


class Renderer:
    """
    Monte Carlo path tracer over a Scene.

    Rows are the unit of parallel work: each is rendered by exactly one
    worker with its own random generator, so the image only depends on the
    settings, never on the number of workers or their scheduling.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()

    def worker_count(self) -> int:
        if self.settings.workers is not None:
            return self.settings.workers
        return os.cpu_count() or 1

    def render_linear(self, scene: Scene) -> np.ndarray:
        """
        Per-pixel mean of the samples, shape (height, width, 3), before gamma.
        """
        settings = self.settings
        width = settings.resolved_width(scene.camera.aspect_ratio)
        height = settings.height
        workers = min(self.worker_count(), height)
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    width, height, settings.samples_per_pixel, settings.max_depth, workers)

        start = time.perf_counter()
        image = np.zeros((height, width, 3), dtype=np.float64)
        if workers <= 1:
            for row in range(height):
                image[row] = render_row(scene, settings, width, height, row)
                logger.debug("Row %d/%d done", row + 1, height)
        else:
            _check_picklable(scene)
            chunksize = max(1, height // (workers * 4))
            with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                     initargs=(scene, settings, width, height)) as executor:
                for row, pixels in executor.map(_render_row_in_worker, range(height),
                                                chunksize=chunksize):
                    image[row] = pixels
                    logger.debug("Row %d/%d done", row + 1, height)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def render(self, scene: Scene) -> np.ndarray:
        """
        Render the scene to a (height, width, 3) float image, gamma-corrected
        (gamma 2) and clamped to [0, 1], row 0 at the top.
        """
        return gamma_correct(self.render_linear(scene), gamma=2.0)
