# renderer/canvas.py
import logging
from typing import List, Optional
import numpy as np
from PIL import Image
from core.color import Color, black
from renderer.tone_mapping import apply_tone_map

logger = logging.getLogger(__name__)

PPM_MAX_LINE = 70
PPM_MAX_VALUE = 255


class Canvas:
    """
    A width x height grid of linear colors, addressed (x, y) with the origin
    at the top-left.
    """
    def __init__(self, width: int, height: int, fill: Optional[Color] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        fill = fill if fill is not None else black()
        self.pixels: List[List[Color]] = [[fill for _ in range(width)] for _ in range(height)]

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[y][x] = color

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return self.pixels[y][x]

    def to_ppm(self) -> str:
        """
        Serializes the canvas as plain-text PPM (P3). No line is longer than
        70 characters and the document ends with a newline.
        """
        lines = ["P3", f"{self.width} {self.height}", str(PPM_MAX_VALUE)]
        for row in self.pixels:
            current = ""
            for color in row:
                for value in color.clamped_bytes():
                    token = str(value)
                    if not current:
                        current = token
                    elif len(current) + 1 + len(token) > PPM_MAX_LINE:
                        lines.append(current)
                        current = token
                    else:
                        current += " " + token
            lines.append(current)
        return "\n".join(lines) + "\n"

    def save_ppm(self, path: str):
        with open(path, "w") as f:
            f.write(self.to_ppm())
        logger.info("Wrote %dx%d PPM to %s", self.width, self.height, path)

    def to_numpy(self) -> np.ndarray:
        """
        Returns the linear colors as a (height, width, 3) float64 array.
        """
        return np.array([[(c.red, c.green, c.blue) for c in row] for row in self.pixels],
                        dtype=np.float64)

    def save_png(self, path: str, tone_map: str = "clamp"):
        """
        Writes the canvas as a PNG through Pillow.

        Args:
            path: Destination file.
            tone_map: "clamp" to clip linear values, "reinhard" to compress
                highlights with Reinhard tone mapping, "auto" to pick the
                Reinhard exposure from the mean luminance.
        """
        pixels = apply_tone_map(self.to_numpy(), tone_map)
        Image.fromarray(pixels).save(path)
        logger.info("Wrote %dx%d PNG to %s", self.width, self.height, path)
