# camera/camera.py
import math
from typing import Iterator, Optional, Tuple

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.utils import make_rng, point_in_disk
from raytracer.core.vector import Vector3

WORLD_UP = Vector3(0, 0, 1)


def _orthonormal_up(sight: Vector3, up: Vector3) -> Vector3:
    """Up vector perpendicular to `sight`, as close to `up` as possible."""
    if up.near_zero() or sight.is_parallel(up):
        up = Vector3(0, 1, 0) if not sight.is_parallel(Vector3(0, 1, 0)) else Vector3(1, 0, 0)
    right = sight.cross(up).normalize()
    return right.cross(sight).normalize()


class Camera:
    """
    A virtual sensor that turns pixel coordinates into sample rays.

    Cameras are immutable: `look` and the `with_*` builders return new
    cameras. `field_of_view` is the vertical angle in degrees; when
    `aspect_ratio` is None the image's width / height is used.
    """
    def __init__(self, position: Vector3, look_at: Vector3, up: Vector3 = WORLD_UP,
                 sample_rate: int = 1, focus_dist: float = 1.0, aperture: float = 0.0,
                 field_of_view: float = 90.0, aspect_ratio: Optional[float] = None,
                 jitter: bool = True):
        position = Vector3.from_any(position)
        sight = Vector3.from_any(look_at) - position
        if sight.near_zero():
            raise ValueError("Camera cannot look at its own position")
        if sample_rate < 1:
            raise ValueError(f"Sample rate must be at least 1, got {sample_rate}")
        if focus_dist <= 0:
            raise ValueError(f"Focus distance must be positive, got {focus_dist}")
        if aperture < 0:
            raise ValueError(f"Aperture must not be negative, got {aperture}")
        if not 0 < field_of_view < 180:
            raise ValueError(f"Field of view must be within (0, 180) degrees, got {field_of_view}")
        if aspect_ratio is not None and aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")

        self.position = position
        self.sight = sight.normalize()
        self.up = _orthonormal_up(self.sight, Vector3.from_any(up))
        self.sample_rate = int(sample_rate)
        self.focus_dist = float(focus_dist)
        self.aperture = float(aperture)
        self.field_of_view = float(field_of_view)
        self.aspect_ratio = aspect_ratio
        self.jitter = jitter

    def _replace(self, **changes) -> "Camera":
        params = dict(
            position=self.position,
            look_at=self.position + self.sight,
            up=self.up,
            sample_rate=self.sample_rate,
            focus_dist=self.focus_dist,
            aperture=self.aperture,
            field_of_view=self.field_of_view,
            aspect_ratio=self.aspect_ratio,
            jitter=self.jitter,
        )
        params.update(changes)
        return Camera(**params)

    def look(self, point: Vector3) -> "Camera":
        """Same camera aimed at `point`."""
        return self._replace(look_at=point)

    def right(self) -> Vector3:
        return self.sight.cross(self.up).normalize()

    def with_sample_rate(self, sample_rate: int) -> "Camera":
        return self._replace(sample_rate=sample_rate)

    def with_focus_dist(self, focus_dist: float) -> "Camera":
        return self._replace(focus_dist=focus_dist)

    def with_aperture(self, aperture: float) -> "Camera":
        return self._replace(aperture=aperture)

    def with_fov(self, field_of_view: float) -> "Camera":
        return self._replace(field_of_view=field_of_view)

    def with_aspect(self, aspect_ratio: float) -> "Camera":
        return self._replace(aspect_ratio=aspect_ratio)

    def with_jitter(self, jitter: bool) -> "Camera":
        return self._replace(jitter=jitter)

    def viewport(self, width: int, height: int) -> Tuple[float, float]:
        """Size of the focal plane as (width, height) in world units."""
        aspect = self.aspect_ratio if self.aspect_ratio is not None else width / height
        viewport_height = 2.0 * math.tan(math.radians(self.field_of_view) / 2) * self.focus_dist
        return aspect * viewport_height, viewport_height

    def ray_for(self, w: int, h: int, width: int, height: int,
                rng: Optional[np.random.Generator] = None) -> Ray:
        """
        One sample ray through pixel (w, h); row 0 is the top of the image.
        """
        dx = dy = 0.0
        if self.jitter:
            rng = make_rng(rng)
            dx = rng.uniform(-0.5, 0.5)
            dy = rng.uniform(-0.5, 0.5)
        s = (w + 0.5 + dx) / width - 0.5
        t = 0.5 - (h + 0.5 + dy) / height

        right = self.right()
        viewport_width, viewport_height = self.viewport(width, height)
        focal_point = (self.position +
                       self.sight * self.focus_dist +
                       right * (s * viewport_width) +
                       self.up * (t * viewport_height))

        origin = self.position
        if self.aperture > 0:
            # Random point on the lens for depth of field
            rd = point_in_disk(self.aperture / 2.0, make_rng(rng))
            origin = origin + right * rd.x + self.up * rd.y
        return Ray(origin, focal_point - origin)

    def emit_rays(self, width: int, height: int,
                  rng: Optional[np.random.Generator] = None) -> Iterator[Tuple[int, int, Ray]]:
        """
        Yields (w, h, ray) for every sample of every pixel.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        rng = make_rng(rng)
        for w in range(width):
            for h in range(height):
                for _ in range(self.sample_rate):
                    yield w, h, self.ray_for(w, h, width, height, rng)

    def sample_count(self, width: int, height: int) -> int:
        return width * height * self.sample_rate

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, sight={self.sight!r}, up={self.up!r}, "
                f"sample_rate={self.sample_rate}, fov={self.field_of_view})")
