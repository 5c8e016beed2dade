# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Iterator, List, Tuple

import numpy as np

from pathtracer.core.settings import RenderSettings
from pathtracer.core.utils import INFINITY, resolve_rng
from pathtracer.core.vector import Vector3
from pathtracer.renderer.tone_mapping import to_rgba8

logger = logging.getLogger(__name__)

# Lower bound on hit distance, keeps a scattered ray from re-hitting its own surface.
SHADOW_ACNE_EPSILON = 0.001


def ray_color(ray, background: Vector3, world, depth: int, rng=None) -> Vector3:
    """
    Radiance carried back along ``ray``: emission at the first hit plus the
    attenuated radiance of the scattered ray, up to ``depth`` bounces.
    """
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)

    rec = world.hit(ray, SHADOW_ACNE_EPSILON, INFINITY, rng)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec.uv.u, rec.uv.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1, rng)


def pixel_offsets(samples: int, rng=None) -> Iterator[Tuple[float, float]]:
    """
    Jittered sample positions inside the unit pixel. The first n*n samples
    (n = floor(sqrt(samples))) fall one per cell of an n x n grid; any
    remainder is uniform over the pixel.
    """
    rng = resolve_rng(rng)
    n = math.isqrt(samples)
    strata = n * n
    for s in range(samples):
        if s < strata:
            row, col = divmod(s, n)
            yield (col + rng.random()) / n, (row + rng.random()) / n
        else:
            yield rng.random(), rng.random()


def render_row(j: int, world, camera, background: Vector3, width: int, height: int,
               samples_per_pixel: int, max_depth: int, rng) -> np.ndarray:
    """
    Summed radiance of every pixel on scanline ``j`` (0 is the bottom row),
    as a ``width x 3`` array.
    """
    row = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for du, dv in pixel_offsets(samples_per_pixel, rng):
            ray = camera.get_ray((i + du) / width, (j + dv) / height, rng)
            color = ray_color(ray, background, world, max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        row[i] = (r, g, b)
    return row


# Per-process render state, installed once by the pool initializer.
_worker_state = {}


def _init_worker(world, camera, background, settings):
    _worker_state.update(world=world, camera=camera, background=background, settings=settings)


def _render_row_task(j: int, row_seed: int) -> Tuple[int, np.ndarray]:
    settings = _worker_state["settings"]
    row = render_row(j, _worker_state["world"], _worker_state["camera"],
                     _worker_state["background"], settings.width, settings.height,
                     settings.samples_per_pixel, settings.max_depth,
                     random.Random(row_seed))
    return j, row


class Renderer:
    """
    Path-traces a world through a camera. Scanlines are independent: each
    gets its own random stream derived from ``settings.seed`` and writes
    only its own slice of the output, so the result does not depend on the
    number of workers or on the order rows finish in.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height

    def row_seeds(self) -> List[int]:
        children = np.random.SeedSequence(self.settings.seed).spawn(self.height)
        return [int(child.generate_state(1)[0]) for child in children]

    def _store_row(self, accumulation: np.ndarray, j: int, row: np.ndarray):
        # Scanline j counts up from the bottom; image rows count down from the top.
        accumulation[self.height - 1 - j] = row

    def render_accumulated(self, world, camera, background: Vector3) -> np.ndarray:
        """Summed radiance per pixel, ``height x width x 3``, top row first."""
        settings = self.settings
        accumulation = np.zeros((self.height, self.width, 3), dtype=np.float64)
        seeds = self.row_seeds()
        report_every = max(1, self.height // 10)
        start = time.perf_counter()
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s)",
                    self.width, self.height, settings.samples_per_pixel,
                    settings.max_depth, settings.workers)

        if settings.workers == 1:
            for done, j in enumerate(range(self.height - 1, -1, -1), start=1):
                row = render_row(j, world, camera, background, self.width, self.height,
                                 settings.samples_per_pixel, settings.max_depth,
                                 random.Random(seeds[j]))
                self._store_row(accumulation, j, row)
                if done % report_every == 0:
                    logger.info("Scanlines remaining: %d", self.height - done)
        else:
            with ProcessPoolExecutor(max_workers=settings.workers,
                                     initializer=_init_worker,
                                     initargs=(world, camera, background, settings)) as pool:
                rows = range(self.height - 1, -1, -1)
                results = pool.map(_render_row_task, rows, [seeds[j] for j in rows])
                for done, (j, row) in enumerate(results, start=1):
                    self._store_row(accumulation, j, row)
                    if done % report_every == 0:
                        logger.info("Scanlines remaining: %d", self.height - done)

        logger.info("Render finished in %.1fs", time.perf_counter() - start)
        return accumulation

    def render(self, world, camera, background: Vector3) -> np.ndarray:
        """Rendered image as ``height x width x 4`` RGBA bytes, top row first."""
        accumulation = self.render_accumulated(world, camera, background)
        return to_rgba8(accumulation, self.settings.samples_per_pixel)
