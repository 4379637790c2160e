# examples/cornell.py
"""A closed diffuse box lit by a square ceiling panel."""
import argparse
import logging
import os

from raytracer import Camera, Cube, LambertianModel, LightShape, Sphere, Square, Vector3, World
from raytracer.materials.presets import MetalPresets
from raytracer.renderer import Renderer, RenderSettings, save_image


def create_world() -> World:
    world = World.empty()
    walls = LambertianModel(0.8)

    world.add_obj(Cube(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), 2.0), walls)
    world.add_obj(Sphere(Vector3(-0.3, 0.4, -0.65), 0.35), MetalPresets.silver())
    world.add_obj(Sphere(Vector3(0.2, -0.4, -0.7), 0.3), walls.with_color((0.9, 0.3, 0.2)))
    world.add_light(LightShape(
        Square(Vector3(0, 0, 0.99), Vector3(1, 0, 0), Vector3(0, -1, 0), 0.9),
    ))
    return world


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the Cornell box scene")
    parser.add_argument("--output", default="examples/cornell.png", help="Output image path")
    parser.add_argument("--width", type=int, default=400, help="Image width")
    parser.add_argument("--height", type=int, default=300, help="Image height")
    parser.add_argument("--samples", type=int, default=5, help="Samples per pixel")
    parser.add_argument("--depth", type=int, default=10, help="Trace depth")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="Number of worker processes")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] [%(name)s] %(message)s")

    settings = RenderSettings(args.width, args.height, depth=args.depth, samples=args.samples,
                              workers=args.workers, seed=args.seed)
    camera = Camera(Vector3(0.8, 0, 0), Vector3(0, 0, 0)).with_aspect(settings.aspect_ratio)
    image = Renderer(create_world(), camera, settings).render()
    save_image(image, args.output, settings.gamma)


if __name__ == "__main__":
    main()
