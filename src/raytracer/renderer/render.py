# renderer/render.py
import logging
import time
from multiprocessing import Pool
from typing import List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from raytracer.camera.camera import Camera
from raytracer.geometry.world import World
from raytracer.renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Per-process scene, set by the pool initializer
_worker_data = {}


def _init_worker(world: World, camera: Camera, settings: RenderSettings) -> None:
    _worker_data["world"] = world
    _worker_data["camera"] = camera
    _worker_data["settings"] = settings


def trace_row(world: World, camera: Camera, settings: RenderSettings, h: int,
              seed: np.random.SeedSequence) -> Tuple[np.ndarray, np.ndarray]:
    """
    Traces every sample of image row `h`.

    Returns the summed color (width x 3) and sample count (width) per pixel.
    """
    rng = np.random.default_rng(seed)
    colors = np.zeros((settings.width, 3), dtype=np.float64)
    counts = np.zeros(settings.width, dtype=np.int64)
    for w in range(settings.width):
        for _ in range(camera.sample_rate):
            ray = camera.ray_for(w, h, settings.width, settings.height, rng)
            c = world.trace(ray, settings.depth, rng)
            colors[w] += (c.x, c.y, c.z)
            counts[w] += 1
    return colors, counts


def trace_chunk(rows: Sequence[int], seeds: Sequence[np.random.SeedSequence]):
    """
    Worker entry point: traces a batch of rows with the pool's scene.
    """
    world = _worker_data["world"]
    camera = _worker_data["camera"]
    settings = _worker_data["settings"]
    results = []
    for h, seed in zip(rows, seeds):
        colors, counts = trace_row(world, camera, settings, h, seed)
        results.append((h, colors, counts))
    return results


def _trace_chunk_args(args):
    return trace_chunk(*args)


class Renderer:
    """
    Drives a full render: farms rows of samples out, merges the per-pixel
    sums and returns the averaged linear image (height x width x 3).

    Every row gets its own random stream spawned from the settings' seed, so
    the image does not depend on the number of workers.
    """
    def __init__(self, world: World, camera: Camera, settings: RenderSettings,
                 chunk_size: int = 4):
        if chunk_size < 1:
            raise ValueError(f"Chunk size must be at least 1, got {chunk_size}")
        self.world = world
        self.camera = camera.with_sample_rate(settings.samples)
        self.settings = settings
        self.chunk_size = chunk_size
        self.accumulation_buffer = np.zeros((settings.height, settings.width, 3), dtype=np.float64)
        self.sample_count = np.zeros((settings.height, settings.width), dtype=np.int64)

    def reset_accumulation(self) -> None:
        self.accumulation_buffer.fill(0)
        self.sample_count.fill(0)

    def _chunks(self) -> List[Tuple[List[int], List[np.random.SeedSequence]]]:
        seeds = np.random.SeedSequence(self.settings.seed).spawn(self.settings.height)
        rows = list(range(self.settings.height))
        return [
            (rows[i:i + self.chunk_size], seeds[i:i + self.chunk_size])
            for i in range(0, len(rows), self.chunk_size)
        ]

    def _merge(self, results) -> None:
        for h, colors, counts in results:
            self.accumulation_buffer[h] += colors
            self.sample_count[h] += counts

    def render(self) -> np.ndarray:
        settings = self.settings
        self.reset_accumulation()
        chunks = self._chunks()
        logger.info("Rendering %dx%d, %d samples per pixel, depth %d, %d worker(s)",
                    settings.width, settings.height, self.camera.sample_rate,
                    settings.depth, settings.workers)
        start = time.time()

        if settings.workers == 1:
            _init_worker(self.world, self.camera, settings)
            try:
                for rows, seeds in tqdm(chunks, total=len(chunks), desc="Rendering"):
                    self._merge(trace_chunk(rows, seeds))
            finally:
                _worker_data.clear()
        else:
            with Pool(processes=settings.workers, initializer=_init_worker,
                      initargs=(self.world, self.camera, settings)) as pool:
                results = pool.imap_unordered(_trace_chunk_args, chunks)
                for result in tqdm(results, total=len(chunks), desc="Rendering"):
                    self._merge(result)

        logger.info("Render finished in %.2f seconds", time.time() - start)
        return self.image()

    def image(self) -> np.ndarray:
        """
        Averaged linear colors; pixels without samples stay black.
        """
        counts = np.maximum(self.sample_count, 1)[..., np.newaxis]
        return self.accumulation_buffer / counts
