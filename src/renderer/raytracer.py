# renderer/raytracer.py
import logging
import os
from typing import Optional
from camera.camera import Camera
from core.matrix import view_transform
from core.tuple import point, vector
from renderer.canvas import Canvas
from renderer.settings import RenderSettings

logger = logging.getLogger(__name__)


class Renderer:
    """
    Drives a full-frame render: prepares the world, traces every pixel on the
    CPU and writes the result to disk.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()

    def default_camera(self) -> Camera:
        """Camera a little above the origin looking slightly down toward +z."""
        s = self.settings
        return Camera(s.width, s.height, s.field_of_view,
                      view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)))

    def render(self, world, camera: Optional[Camera] = None) -> Canvas:
        """
        Renders the world through the camera.

        Args:
            world: Fully built World; group bounding boxes are cached here.
            camera: Camera to use; when None one is built from the settings.

        Returns:
            Canvas: The linear-color image.
        """
        if camera is None:
            camera = self.default_camera()
        world.build_bounds()
        logger.info("Rendering %d shapes at %dx%d with %d bounces",
                    len(world.shapes), camera.hsize, camera.vsize, self.settings.max_bounces)
        return camera.render(world, self.settings.max_bounces)

    def save(self, canvas: Canvas, path: str):
        """
        Writes the canvas as PPM or PNG depending on the file suffix.
        """
        suffix = os.path.splitext(path)[1].lower()
        if suffix == ".ppm":
            canvas.save_ppm(path)
        elif suffix == ".png":
            canvas.save_png(path, tone_map=self.settings.tone_map)
        else:
            raise ValueError(f"Unsupported output format {suffix!r}; use .ppm or .png")
