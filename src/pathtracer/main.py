# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtracer.config import TONE_MAPPINGS, RenderConfig, configure_logging
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import MAX_BOUNCES, Renderer
from pathtracer.renderer.tone_mapping import tone_map
from pathtracer.scenes.presets import SCENES, build_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monte Carlo path tracer")
    parser.add_argument("scene", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("-o", "--output", default="image.png",
                        help="Output image; .ppm is written as plain PPM, other formats via Pillow")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel (default: the scene's own setting)")
    parser.add_argument("--max-depth", type=int, default=MAX_BOUNCES,
                        help="Maximum number of bounces per path")
    parser.add_argument("--workers", type=int, default=1,
                        help="Number of worker processes")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for scene layout and sampling (default: random)")
    parser.add_argument("--tone-mapping", choices=TONE_MAPPINGS, default="gamma")
    parser.add_argument("--texture", default=None,
                        help="Image file for the earth texture")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-scanline progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        scene = build_scene(args.scene, random.Random(args.seed), args.texture)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not build scene %s: %s", args.scene, e)
        return 1

    try:
        config = RenderConfig(
            width=args.width,
            aspect_ratio=scene.aspect_ratio,
            samples_per_pixel=args.samples if args.samples is not None else scene.samples_per_pixel,
            max_depth=args.max_depth,
            workers=args.workers,
            seed=args.seed,
            tone_mapping=args.tone_mapping,
            output=args.output,
        )
    except ValueError as e:
        parser.error(str(e))

    image = Renderer(config).render(scene.world, scene.camera, scene.background)
    save_image(config.output, tone_map(image, config.tone_mapping))
    return 0


if __name__ == "__main__":
    sys.exit(main())
