"""Tests for image export.

Tests cover:
- 8-bit quantization with the 255.99 scale and truncation
- Plain PPM header and pixel lines
- PPM and PNG files on disk
- Shape validation
"""

import io

import numpy as np
import pytest
from PIL import Image as PILImage

from rtweekend.preview.export import (
    image_to_uint8,
    ppm_header,
    save_image,
    save_png,
    save_ppm,
    write_ppm,
)


class TestImageToUint8:
    """Tests for quantization."""

    def test_known_levels(self):
        """Test 0, 0.25, 0.5 and 1.0."""
        image = np.array([[[0.0, 0.25, 0.5]], [[1.0, 1.0, 1.0]]])

        pixels = image_to_uint8(image)

        assert pixels.dtype == np.uint8
        np.testing.assert_array_equal(pixels[0, 0], [0, 63, 127])
        np.testing.assert_array_equal(pixels[1, 0], [255, 255, 255])

    def test_out_of_range_is_clamped(self):
        """Test that values outside [0, 1] do not wrap around."""
        image = np.array([[[-0.5, 2.0, 1.0000001]]])

        np.testing.assert_array_equal(image_to_uint8(image)[0, 0], [0, 255, 255])

    def test_wrong_shape_raises(self):
        """Test that non-RGB arrays are rejected."""
        with pytest.raises(ValueError, match=r"\(H, W, 3\)"):
            image_to_uint8(np.zeros((4, 4)))


class TestWritePpm:
    """Tests for the plain PPM writer."""

    def test_header(self):
        """Test the three-line header."""
        assert ppm_header(400, 225) == "P3\n400 225\n255\n"

    def test_pixel_lines(self):
        """Test one space-separated pixel per line, row major."""
        pixels = np.array(
            [
                [[1, 2, 3], [4, 5, 6]],
                [[7, 8, 9], [10, 11, 12]],
            ],
            dtype=np.uint8,
        )
        stream = io.StringIO()

        write_ppm(stream, pixels)

        assert stream.getvalue() == "P3\n2 2\n255\n1 2 3\n4 5 6\n7 8 9\n10 11 12\n"

    def test_gradient_image(self, gradient_256):
        """Test the full 256x256 gradient output, top row first."""
        stream = io.StringIO()

        write_ppm(stream, gradient_256)
        lines = stream.getvalue().splitlines()

        assert lines[:3] == ["P3", "256 256", "255"]
        assert len(lines) == 3 + 256 * 256
        # Top-left, top-right, bottom-left, bottom-right
        assert lines[3] == "0 255 63"
        assert lines[3 + 255] == "255 255 63"
        assert lines[3 + 255 * 256] == "0 0 63"
        assert lines[-1] == "255 0 63"

    def test_wrong_shape_raises(self):
        """Test that non-RGB arrays are rejected."""
        with pytest.raises(ValueError):
            write_ppm(io.StringIO(), np.zeros((2, 2, 4), dtype=np.uint8))


class TestSaveFiles:
    """Tests for writing images to disk."""

    @pytest.fixture
    def pixels(self):
        rng = np.random.default_rng(7)
        return rng.integers(0, 256, size=(6, 10, 3), dtype=np.uint8)

    def test_save_ppm(self, tmp_path, pixels):
        """Test that the file matches write_ppm output."""
        path = tmp_path / "out.ppm"

        save_ppm(pixels, path)

        stream = io.StringIO()
        write_ppm(stream, pixels)
        assert path.read_text(encoding="ascii") == stream.getvalue()

    def test_save_png(self, tmp_path, pixels):
        """Test that the PNG decodes back to the same pixels."""
        path = tmp_path / "out.png"

        save_png(pixels, path)

        with PILImage.open(path) as img:
            assert img.mode == "RGB"
            np.testing.assert_array_equal(np.asarray(img), pixels)

    def test_save_image_dispatches_on_suffix(self, tmp_path, pixels):
        """Test that .ppm is plain text and .png goes through Pillow."""
        ppm_path = tmp_path / "out.PPM"
        png_path = tmp_path / "out.png"

        save_image(pixels, ppm_path)
        save_image(pixels, png_path)

        assert ppm_path.read_text(encoding="ascii").startswith("P3\n10 6\n255\n")
        with PILImage.open(png_path) as img:
            assert img.format == "PNG"
