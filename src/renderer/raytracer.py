# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
import numpy as np
from camera.camera import Camera
from core.vector import Color
from geometry.hittable import Hittable
from renderer.integrator import normal_color, ray_color
from renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Spreads per-row seeds so neighbouring rows do not share generator state.
ROW_SEED_STRIDE = 1_000_003

# Read-only scene handed to each worker process once by its initializer.
_worker_scene = None


def row_rng(seed: int, row: int) -> random.Random:
    """Independent generator for one image row, stable across worker counts."""
    return random.Random(seed * ROW_SEED_STRIDE + row)


def render_row(camera: Camera, world: Hittable, settings: RenderSettings, j: int) -> np.ndarray:
    """
    Average colors of image row `j` (counted from the bottom) as a
    (width, 3) array.
    """
    width = settings.image_width
    height = settings.image_height
    rng = row_rng(settings.seed, j)
    samples = settings.samples_per_pixel
    row = np.zeros((width, 3), dtype=np.float64)
    # Single-pixel images have no span; sample the viewport center.
    u_scale = 1.0 / (width - 1) if width > 1 else 0.0
    v_scale = 1.0 / (height - 1) if height > 1 else 0.0
    u_center = 0.0 if width > 1 else 0.5
    v_center = 0.0 if height > 1 else 0.5

    for i in range(width):
        pixel_color = Color(0, 0, 0)
        for _ in range(samples):
            du = rng.random() if settings.jitter else 0.0
            dv = rng.random() if settings.jitter else 0.0
            s = (i + du) * u_scale + u_center
            t = (j + dv) * v_scale + v_center
            ray = camera.get_ray(s, t, rng)
            if settings.shading == "normals":
                pixel_color += normal_color(ray, world, rng)
            else:
                pixel_color += ray_color(ray, settings.background, world, settings.max_depth, rng)
        row[i] = pixel_color.to_tuple()
    return row / samples


def _init_worker(camera: Camera, world: Hittable, settings: RenderSettings):
    global _worker_scene
    _worker_scene = (camera, world, settings)


def _render_row_in_worker(j: int):
    camera, world, settings = _worker_scene
    return j, render_row(camera, world, settings, j)


class Renderer:
    """
    Monte Carlo renderer producing linear-space averaged pixel colors.

    The scene is never mutated while rendering, so rows can be traced in any
    order and in separate processes; each row draws from its own seeded
    generator so the image only depends on the settings.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.image_width
        self.height = settings.image_height
        self.samples = settings.samples_per_pixel

    def render(self, camera: Camera, world: Hittable) -> np.ndarray:
        """
        Returns a (height, width, 3) float array, rows ordered top to bottom,
        holding sum of samples / samples_per_pixel for every pixel.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        start = time.perf_counter()
        logger.info(
            "Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s)",
            self.width, self.height, self.samples, self.settings.max_depth,
            self.settings.workers,
        )

        rows = range(self.height - 1, -1, -1)
        if self.settings.workers <= 1:
            for j in rows:
                image[self.height - 1 - j] = render_row(camera, world, self.settings, j)
                self._log_progress(j, start)
        else:
            with ProcessPoolExecutor(max_workers=self.settings.workers,
                                     initializer=_init_worker,
                                     initargs=(camera, world, self.settings)) as pool:
                for j, row in pool.map(_render_row_in_worker, rows):
                    image[self.height - 1 - j] = row
                    self._log_progress(j, start)

        logger.info("Render finished in %.1fs", time.perf_counter() - start)
        return image

    def _log_progress(self, j: int, start: float):
        logger.debug("%d scanlines remaining; %.1fs elapsed", j, time.perf_counter() - start)
