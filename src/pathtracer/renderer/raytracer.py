# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Optional

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderConfig
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Ignore hits this close to the ray origin (shadow acne).
T_MIN = 0.001
MAX_BOUNCES = 50

BLACK = Vector3(0, 0, 0)
WHITE = Vector3(1, 1, 1)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_gradient(ray: Ray) -> Vector3:
    """Blend white to blue by the height of the ray direction."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, background: Optional[Vector3], world: Hittable,
              depth: int, rng: random.Random) -> Vector3:
    """
    Radiance arriving along ``ray``, estimated by following one scattered
    path for at most ``depth`` bounces.

    ``background`` is the radiance of rays that escape the scene; None
    selects the sky gradient.
    """
    # Exceeded the bounce limit: no more light is gathered.
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return background if background is not None else sky_gradient(ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    attenuation, scattered = scatter
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1, rng)


class RowRenderer:
    """
    Renders single image rows. Holds only read-only scene data, so one
    instance can be shipped to each worker process.
    """
    def __init__(self, world: Hittable, camera: Camera, background: Optional[Vector3],
                 width: int, height: int, samples_per_pixel: int, max_depth: int,
                 seed: Optional[int] = None):
        self.world = world
        self.camera = camera
        self.background = background
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        # One independent stream per row keeps results independent of scheduling.
        self.row_seeds = [int(s.generate_state(1)[0])
                          for s in np.random.SeedSequence(seed).spawn(height)]

    def __call__(self, row: int) -> np.ndarray:
        rng = random.Random(self.row_seeds[row])
        # Row 0 is the top of the image; camera t runs bottom to top.
        j = self.height - 1 - row
        u_scale = 1.0 / max(1, self.width - 1)
        v_scale = 1.0 / max(1, self.height - 1)
        pixels = np.zeros((self.width, 3), dtype=np.float32)

        for i in range(self.width):
            r = g = b = 0.0
            for _ in range(self.samples_per_pixel):
                s = (i + rng.random()) * u_scale
                t = (j + rng.random()) * v_scale
                ray = self.camera.get_ray(s, t, rng)
                color = ray_color(ray, self.background, self.world, self.max_depth, rng)
                r += color.x
                g += color.y
                b += color.z
            pixels[i] = (r, g, b)

        return pixels / self.samples_per_pixel


_worker_rows: Optional[RowRenderer] = None


def _init_worker(row_renderer: RowRenderer):
    global _worker_rows
    _worker_rows = row_renderer


def _render_row(row: int) -> np.ndarray:
    return _worker_rows(row)


class Renderer:
    """
    Offline renderer: averages ``samples_per_pixel`` jittered paths per
    pixel into a linear float image of shape (height, width, 3).
    """
    def __init__(self, config: RenderConfig):
        self.config = config
        self.width = config.width
        self.height = config.height

    def render(self, world: Hittable, camera: Camera,
               background: Optional[Vector3] = None) -> np.ndarray:
        cfg = self.config
        rows = RowRenderer(world, camera, background, self.width, self.height,
                           cfg.samples_per_pixel, cfg.max_depth, cfg.seed)
        image = np.zeros((self.height, self.width, 3), dtype=np.float32)

        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    self.width, self.height, cfg.samples_per_pixel, cfg.max_depth, cfg.workers)
        start = time.perf_counter()

        if cfg.workers == 1:
            for row in range(self.height):
                image[row] = rows(row)
                logger.debug("Scanlines remaining: %d", self.height - 1 - row)
        else:
            with ProcessPoolExecutor(max_workers=cfg.workers, initializer=_init_worker,
                                     initargs=(rows,)) as executor:
                for row, pixels in enumerate(executor.map(_render_row, range(self.height))):
                    image[row] = pixels
                    logger.debug("Scanlines remaining: %d", self.height - 1 - row)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image
