# main.py
"""
Command line entry point: build a catalogued scene, path-trace it and write
a PNG.

    pathtracer cornell-box --preset preview --workers 4 --output cornell.png
"""
import argparse
import logging
import os
import random
import sys
from typing import List, Optional

from pathtracer.core.settings import AXIS_MODES, QUALITY_PRESETS, RenderSettings
from pathtracer.renderer.image_io import save_png
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, Scene, build_scene

logger = logging.getLogger("pathtracer")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a scene by stochastic path tracing.",
    )
    parser.add_argument("scene", nargs="?", default="cornell-box",
                        help="Scene to render (default: cornell-box)")
    parser.add_argument("--list-scenes", action="store_true",
                        help="Print the available scene names and exit")
    parser.add_argument("--preset", choices=sorted(QUALITY_PRESETS), default="balanced",
                        help="Quality preset the other options override (default: balanced)")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, help="Width / height (default: 1.0)")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum number of bounces per path")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="Worker processes rendering scanlines (default: CPU count)")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for scene construction and sampling (default: 0)")
    parser.add_argument("--bvh-axis", choices=AXIS_MODES,
                        help="How BVH split axes are chosen (default: random)")
    parser.add_argument("--texture", help="Earth image used by the earth and final scenes")
    parser.add_argument("--output", default="render.png",
                        help="Output file path (default: render.png)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False, quiet: bool = False):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def render_scene(scene: Scene, settings: RenderSettings):
    """Wrap the scene's world in its BVH and render it. Returns RGBA bytes."""
    scene.world.build_bvh(scene.time0, scene.time1, rng=random.Random(settings.seed),
                          axis_mode=settings.axis_mode)
    camera = scene.make_camera(settings.aspect_ratio)
    return Renderer(settings).render(scene.world, camera, scene.background)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    if args.list_scenes:
        for name in SCENES:
            print(name)
        return 0

    try:
        settings = RenderSettings.from_preset(
            args.preset,
            width=args.width,
            aspect_ratio=args.aspect_ratio,
            samples_per_pixel=args.samples,
            max_depth=args.max_depth,
            workers=args.workers,
            seed=args.seed,
            axis_mode=args.bvh_axis,
        )
        scene = build_scene(args.scene, random.Random(settings.seed), args.texture)
        image = render_scene(scene, settings)
        save_png(image, args.output)
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
