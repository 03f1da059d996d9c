# camera/camera.py
import logging
import math
import time
from typing import Optional
from core.matrix import Matrix
from core.ray import Ray
from core.tuple import point
from geometry.world import DEFAULT_BOUNCES
from renderer.canvas import Canvas

logger = logging.getLogger(__name__)


class Camera:
    """
    Pinhole camera looking down -z in its own space, with the canvas one unit
    in front of the eye. The transform orients the world relative to the
    camera; build it with core.matrix.view_transform.
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Matrix] = None):
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.set_transform(transform if transform is not None else Matrix.identity())
        self.update_camera()

    def set_transform(self, transform: Matrix):
        self.transform = transform
        self.inverse_transform = transform.inverse()

    def update_camera(self):
        """Recomputes the canvas extent from the field of view and aspect."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self.hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """
        Ray from the eye through the centre of pixel (px, py).
        """
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self.inverse_transform * point(world_x, world_y, -1)
        origin = self.inverse_transform * point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world, remaining: int = DEFAULT_BOUNCES) -> Canvas:
        """
        Traces one ray per pixel through the world.

        Args:
            world: The World to render. It must not change during rendering.
            remaining: Reflection/refraction bounce budget per primary ray.
        """
        start = time.perf_counter()
        image = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            for x in range(self.hsize):
                image.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y), remaining))
            logger.debug("Rendered row %d/%d", y + 1, self.vsize)
        elapsed = time.perf_counter() - start
        logger.info("Rendered %dx%d in %.2fs (%.1f px/s)", self.hsize, self.vsize, elapsed,
                    self.hsize * self.vsize / elapsed if elapsed > 0 else float("inf"))
        return image
