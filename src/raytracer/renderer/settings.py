# renderer/settings.py
from typing import Optional

# Default recursion bound for World.trace.
MAX_DEPTH = 10

# Named quality levels: samples per pixel, trace depth and resolution scale.
QUALITY_LEVELS = {
    "preview": {"samples": 1, "depth": 3, "scale": 0.5},
    "balanced": {"samples": 16, "depth": 6, "scale": 0.75},
    "high_quality": {"samples": 100, "depth": MAX_DEPTH, "scale": 1.0},
}


class RenderSettings:
    """
    Parameters of a single render.

    `workers` is the number of processes used to trace; 1 traces in the
    calling process. `seed` makes a render reproducible.
    """
    def __init__(self, width: int, height: int, depth: int = MAX_DEPTH,
                 samples: int = 1, workers: int = 1, seed: Optional[int] = None,
                 gamma: float = 2.0):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if depth < 0:
            raise ValueError(f"Trace depth must be non-negative, got {depth}")
        if samples < 1:
            raise ValueError(f"Samples per pixel must be at least 1, got {samples}")
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}")
        if gamma <= 0:
            raise ValueError(f"Gamma must be positive, got {gamma}")
        self.width = int(width)
        self.height = int(height)
        self.depth = int(depth)
        self.samples = int(samples)
        self.workers = int(workers)
        self.seed = seed
        self.gamma = float(gamma)

    @classmethod
    def from_quality(cls, name: str, width: int, height: int, **overrides) -> "RenderSettings":
        """
        Settings for a named quality level; the level's scale shrinks the
        requested resolution.
        """
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        params = {
            "width": max(1, int(width * quality["scale"])),
            "height": max(1, int(height * quality["scale"])),
            "depth": quality["depth"],
            "samples": quality["samples"],
        }
        params.update(overrides)
        return cls(**params)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def __repr__(self) -> str:
        return (f"RenderSettings({self.width}x{self.height}, depth={self.depth}, "
                f"samples={self.samples}, workers={self.workers}, seed={self.seed})")
