"""Unit tests for colors, the canvas and image output.

Tests cover:
- Color arithmetic and byte quantization
- Canvas construction, pixel access and bounds checks
- Plain-text PPM serialization (header, clamping, line wrapping)
- PNG output through Pillow and the tone mapping operators
"""

import numpy as np
import pytest
from PIL import Image

from core.color import Color, black, rgb, white
from renderer.canvas import PPM_MAX_LINE, Canvas
from renderer.tone_mapping import (TONE_MAPS, apply_tone_map, auto_exposure_tone_mapping,
                                   clamp_tone_mapping, reinhard_tone_mapping)


class TestColor:
    """Tests for linear RGB colors."""

    def test_components(self):
        c = Color(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)

    def test_add_and_subtract(self):
        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)
        assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)

    def test_scalar_multiplication(self):
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)

    @pytest.mark.parametrize("color,expected", [
        (Color(1.5, 0, 0), (255, 0, 0)),
        (Color(0, 0.5, 0), (0, 128, 0)),
        (Color(-0.5, 0, 1), (0, 0, 255)),
    ])
    def test_clamped_bytes(self, color, expected):
        assert color.clamped_bytes() == expected

    def test_helpers(self):
        assert black() == Color(0, 0, 0)
        assert white() == Color(1, 1, 1)
        assert rgb(255, 0, 51) == Color(1, 0, 0.2)


class TestCanvas:
    """Tests for the pixel grid."""

    def test_new_canvas_is_black(self):
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert all(canvas.pixel_at(x, y) == black() for y in range(20) for x in range(10))

    def test_fill_color(self):
        canvas = Canvas(2, 2, Color(0.1, 0.2, 0.3))
        assert canvas.pixel_at(1, 1) == Color(0.1, 0.2, 0.3)

    def test_write_pixel(self):
        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, Color(1, 0, 0))
        assert canvas.pixel_at(2, 3) == Color(1, 0, 0)
        assert canvas.pixel_at(3, 2) == black()

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 4)])
    def test_rejects_empty_size(self, width, height):
        with pytest.raises(ValueError):
            Canvas(width, height)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_range_pixels(self, x, y):
        canvas = Canvas(10, 20)
        with pytest.raises(IndexError):
            canvas.write_pixel(x, y, white())
        with pytest.raises(IndexError):
            canvas.pixel_at(x, y)

    def test_to_numpy(self):
        canvas = Canvas(3, 2)
        canvas.write_pixel(2, 1, Color(0.25, 0.5, 2.0))
        array = canvas.to_numpy()
        assert array.shape == (2, 3, 3)
        assert array[1, 2].tolist() == [0.25, 0.5, 2.0]


class TestPpm:
    """Tests for plain-text PPM output."""

    def test_header(self):
        lines = Canvas(5, 3).to_ppm().splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        canvas = Canvas(5, 3)
        canvas.write_pixel(0, 0, Color(1.5, 0, 0))
        canvas.write_pixel(2, 1, Color(0, 0.5, 0))
        canvas.write_pixel(4, 2, Color(-0.5, 0, 1))
        lines = canvas.to_ppm().splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        canvas = Canvas(10, 2, Color(1, 0.8, 0.6))
        lines = canvas.to_ppm().splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= PPM_MAX_LINE for line in lines)

    def test_ends_with_newline(self):
        assert Canvas(5, 3).to_ppm().endswith("\n")

    def test_save_ppm(self, tmp_path):
        path = tmp_path / "image.ppm"
        canvas = Canvas(2, 1, white())
        canvas.save_ppm(str(path))
        assert path.read_text() == canvas.to_ppm()


class TestPng:
    """Tests for PNG output and tone mapping."""

    def test_save_png(self, tmp_path):
        path = tmp_path / "image.png"
        canvas = Canvas(3, 2)
        canvas.write_pixel(0, 0, Color(1, 0, 0))
        canvas.write_pixel(2, 1, Color(0, 0.5, 2.0))
        canvas.save_png(str(path))

        with Image.open(path) as image:
            assert image.size == (3, 2)
            assert image.mode == "RGB"
            assert image.getpixel((0, 0)) == (255, 0, 0)
            assert image.getpixel((2, 1)) == (0, 128, 255)
            assert image.getpixel((1, 0)) == (0, 0, 0)

    def test_clamp_matches_ppm_quantization(self):
        linear = np.array([[[1.5, 0.5, -0.5]]])
        assert clamp_tone_mapping(linear).tolist() == [[[255, 128, 0]]]

    def test_reinhard_compresses_highlights(self):
        linear = np.array([[[0.0, 1.0, 100.0]]])
        mapped = reinhard_tone_mapping(linear)
        assert mapped.dtype == np.uint8
        assert mapped[0, 0, 0] == 0
        assert mapped[0, 0, 1] < mapped[0, 0, 2] < 255

    def test_auto_exposure_handles_black_image(self):
        mapped = auto_exposure_tone_mapping(np.zeros((2, 2, 3)))
        assert mapped.shape == (2, 2, 3)
        assert not mapped.any()

    @pytest.mark.parametrize("name", TONE_MAPS)
    def test_apply_tone_map(self, name):
        mapped = apply_tone_map(np.full((2, 3, 3), 0.5), name)
        assert mapped.shape == (2, 3, 3)
        assert mapped.dtype == np.uint8

    def test_unknown_tone_map(self):
        with pytest.raises(ValueError, match="Unknown tone map"):
            apply_tone_map(np.zeros((1, 1, 3)), "filmic")
