# main.py
"""
Render one of the demo scenes to an image file.

Example:
    python src/main.py --scene cornell_box --quality preview --workers 8 --output cornell.ppm
"""
import argparse
import logging
import os
import random
import sys
from renderer.image_writer import save_image
from renderer.raytracer import Renderer
from renderer.settings import QUALITY_LEVELS, SHADING_MODES, RenderSettings
from renderer.tone_mapping import gamma_correct, reinhard_tone_mapping
from scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Monte Carlo path tracer for the built-in demo scenes.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="cornell_box",
                        help="Scene to render (default: cornell_box)")
    parser.add_argument("--width", type=int, default=None,
                        help="Image width in pixels (default: the scene's own width)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel (default: the scene's own count)")
    parser.add_argument("--max-depth", type=int, default=50,
                        help="Maximum number of bounces per path (default: 50)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Preset samples/depth trade-off; overrides --samples and --max-depth")
    parser.add_argument("--shading", choices=SHADING_MODES, default="path",
                        help="'path' for full light transport, 'normals' for a debug view")
    parser.add_argument("--tone-map", choices=("gamma", "reinhard"), default="gamma",
                        help="Tone curve applied before quantization (default: gamma)")
    parser.add_argument("--seed", type=int, default=42,
                        help="Seed for scene construction and sampling (default: 42)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes; 0 uses every CPU (default: 1)")
    parser.add_argument("--no-bvh", action="store_true",
                        help="Scan all objects linearly instead of building a BVH")
    parser.add_argument("--output", default="image.ppm",
                        help="Output path; .ppm writes plain-text P3, other suffixes use Pillow")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-scanline progress")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scene_rng = random.Random(args.seed)
    scene = build_scene(args.scene, scene_rng)
    if not args.no_bvh:
        scene.world.build_bvh(scene.time0, scene.time1, scene_rng)

    workers = args.workers if args.workers > 0 else (os.cpu_count() or 1)
    try:
        settings = RenderSettings(
            image_width=args.width if args.width is not None else scene.image_width,
            aspect_ratio=scene.aspect_ratio,
            samples_per_pixel=args.samples if args.samples is not None else scene.samples_per_pixel,
            max_depth=args.max_depth,
            background=scene.background,
            seed=args.seed,
            workers=workers,
            shading=args.shading,
        )
        if args.quality:
            settings = settings.with_quality(args.quality)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    image = Renderer(settings).render(scene.camera(), scene.world)
    if args.tone_map == "reinhard":
        image = reinhard_tone_mapping(image)
    save_image(gamma_correct(image), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
