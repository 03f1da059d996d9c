# main.py
import argparse
import logging
import sys
from geometry.mesh import load_obj
from renderer.canvas import Canvas
from renderer.raytracer import Renderer
from renderer.settings import QUALITY_PRESETS, RenderSettings
from renderer.tone_mapping import TONE_MAPS, apply_tone_map
from scenes.catalog import SCENES, build_scene

logger = logging.getLogger("raytracer")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Whitted-style CPU ray tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="first_demo",
                        help="Scene to render")
    parser.add_argument("--quality", choices=list(QUALITY_PRESETS), default="balanced",
                        help="Resolution and bounce preset")
    parser.add_argument("--width", "-W", type=int, default=None,
                        help="Image width (overrides the preset)")
    parser.add_argument("--height", "-H", type=int, default=None,
                        help="Image height (overrides the preset)")
    parser.add_argument("--bounces", "-b", type=int, default=None,
                        help="Reflection/refraction depth (overrides the preset)")
    parser.add_argument("--obj", default=None,
                        help="Wavefront OBJ file to add to the scene")
    parser.add_argument("--output", "-o", default="output.png",
                        help="Output file; .png or .ppm")
    parser.add_argument("--tone-map", choices=TONE_MAPS, default="clamp",
                        help="How PNG output maps linear color to bytes")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window (needs pygame)")
    return parser.parse_args(argv)


def show_preview(canvas: Canvas, tone_map: str = "clamp"):
    """
    Displays the canvas in a pygame window until it is closed.
    """
    import pygame

    pixels = apply_tone_map(canvas.to_numpy(), tone_map)

    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption("Ray Tracer Preview")
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(pixels.swapaxes(0, 1))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = RenderSettings.from_preset(args.quality, width=args.width, height=args.height,
                                          max_bounces=args.bounces, tone_map=args.tone_map)
    logger.info("Building scene: %s", args.scene)
    scene = build_scene(args.scene)
    if args.obj:
        load_obj(scene.world, args.obj)

    renderer = Renderer(settings)
    canvas = renderer.render(scene.world, scene.camera(settings.width, settings.height))
    renderer.save(canvas, args.output)
    logger.info("Image saved: %s", args.output)

    if args.preview:
        show_preview(canvas, settings.tone_map)
    return 0


if __name__ == "__main__":
    sys.exit(main())
