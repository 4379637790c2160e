# examples/scene.py
"""Random spheres under a sky light, with depth of field."""
import argparse
import logging
import os

import numpy as np

from raytracer import Camera, Dielectric, LambertianModel, Metal, SkyLight, Sphere, Vector3, World
from raytracer.materials.presets import DielectricPresets
from raytracer.renderer import QUALITY_LEVELS, Renderer, RenderSettings, save_image


def create_world(seed: int = 0) -> World:
    rng = np.random.default_rng(seed)
    rd = rng.random

    world = World.empty()
    diffuse = LambertianModel(1.0)
    glass = DielectricPresets.glass()
    metal = Metal(fuzz=0.3, albedo=1.0)

    world.add_obj(Sphere(Vector3(0, 0, -1000), 1000), diffuse.with_color((0.5, 0.5, 0.5)))
    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Vector3(a + 0.9 * rd(), b + 0.9 * rd(), 0.2)
            choose_material = rd()
            if choose_material < 0.8:
                material = diffuse.with_color((rd() ** 2, rd() ** 2, rd() ** 2))
                # Some diffuse spheres bounce during the exposure
                motion = Vector3(0, 0, 0.5 * rd()) if rd() < 0.2 else None
                world.add_obj(Sphere(center, 0.2), material, motion)
            elif choose_material < 0.95:
                material = (metal.with_color(((1 + rd()) / 2, (1 + rd()) / 2, (1 + rd()) / 2))
                            .with_fuzz(rd() / 2))
                world.add_obj(Sphere(center, 0.2), material)
            else:
                world.add_obj(Sphere(center, 0.2), glass)

    world.add_obj(Sphere(Vector3(0, 0, 1), 1.0), Dielectric(1.5))
    world.add_obj(Sphere(Vector3(-4, 0, 1), 1.0), diffuse.with_color((0.4, 0.2, 0.1)))
    world.add_obj(Sphere(Vector3(4, 0, 1), 1.0), metal.with_color((0.7, 0.6, 0.5)).with_fuzz(0.0))
    world.add_light(SkyLight())
    return world


def create_camera(aspect_ratio: float) -> Camera:
    return (Camera(Vector3(13, -3, 2), Vector3(0, 0, 0))
            .with_focus_dist(10.0)
            .with_aperture(0.1)
            .with_fov(20.0)
            .with_aspect(aspect_ratio))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the random spheres scene")
    parser.add_argument("--output", default="examples/scene.png", help="Output image path")
    parser.add_argument("--width", type=int, default=1200, help="Image width")
    parser.add_argument("--height", type=int, default=800, help="Image height")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview",
                        help="Quality level (samples, depth and resolution scale)")
    parser.add_argument("--samples", type=int, help="Override samples per pixel")
    parser.add_argument("--depth", type=int, help="Override trace depth")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="Number of worker processes")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(asctime)s] [%(name)s] %(message)s")

    overrides = {"workers": args.workers, "seed": args.seed}
    if args.samples is not None:
        overrides["samples"] = args.samples
    if args.depth is not None:
        overrides["depth"] = args.depth
    settings = RenderSettings.from_quality(args.quality, args.width, args.height, **overrides)

    world = create_world(args.seed)
    camera = create_camera(settings.aspect_ratio)
    image = Renderer(world, camera, settings).render()
    save_image(image, args.output, settings.gamma)


if __name__ == "__main__":
    main()
