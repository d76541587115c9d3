"""Tests for the command-line entry point.

Taichi is initialized once by the session fixture, so tests that use the
taichi backend replace init_taichi instead of calling ti.init again.
"""

import numpy as np
import pytest
from PIL import Image as PILImage

from rtweekend import cli


@pytest.fixture
def no_taichi_init(monkeypatch):
    """Skip re-initializing Taichi inside main()."""
    calls = []
    monkeypatch.setattr(cli, "init_taichi", calls.append)
    return calls


class TestParser:
    """Tests for argument parsing."""

    def test_gradient_defaults(self):
        """Test the gradient subcommand defaults."""
        args = cli.build_parser().parse_args(["gradient"])

        assert args.width == 256
        assert args.height == 256
        assert args.output == "-"
        assert args.backend == "python"

    def test_sphere_defaults(self):
        """Test the sphere subcommand defaults."""
        args = cli.build_parser().parse_args(["sphere"])

        assert args.width == 400
        assert args.height is None

    def test_scene_is_required(self):
        """Test that a subcommand must be given."""
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestRenderScene:
    """Tests for render_scene."""

    def test_sphere_height_from_aspect_ratio(self):
        """Test that a missing height is derived from 16:9."""
        image = cli.render_scene("sphere", 32, None, quiet=True)

        assert image.shape == (18, 32, 3)

    def test_gradient_height_defaults_to_width(self):
        """Test that a missing gradient height makes a square image."""
        image = cli.render_scene("gradient", 8, None, quiet=True)

        assert image.shape == (8, 8, 3)

    def test_taichi_backend(self):
        """Test that the taichi backend returns the same layout."""
        image = cli.render_scene("sphere", 32, 18, backend="taichi", quiet=True)

        assert image.shape == (18, 32, 3)

    def test_progress_goes_to_stderr(self, capsys):
        """Test the scanline progress messages."""
        cli.render_scene("gradient", 4, 3)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "\rScanlines remaining: 2" in captured.err
        assert "\rScanlines remaining: 0" in captured.err
        assert captured.err.endswith("\nDone.\n")

    def test_taichi_backend_prints_done_without_blank_line(self, capsys):
        """Test that a render with no progress lines reports only Done."""
        cli.render_scene("gradient", 4, 4, backend="taichi")

        assert capsys.readouterr().err == "Done.\n"

    def test_explicit_height_sets_sphere_aspect_ratio(self):
        """Test that a square image shows a round, unstretched sphere."""
        image = cli.render_scene("sphere", 21, 21, quiet=True)

        red = (image[..., 0] == 1.0) & (image[..., 1] == 0.0)
        # Bottom-left origin so rows and columns both run along +x and +y
        red = np.flipud(red)
        assert red.any()
        np.testing.assert_array_equal(red, red.T)

    def test_zero_height_is_rejected_before_camera_setup(self):
        """Test that an explicit zero height reports the size error."""
        with pytest.raises(ValueError, match="at least 2x2"):
            cli.render_scene("sphere", 4, 0, quiet=True)

    @pytest.mark.parametrize(
        ("scene", "backend"),
        [("teapot", "python"), ("gradient", "opengl")],
    )
    def test_unknown_scene_or_backend_raises(self, scene, backend):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown"):
            cli.render_scene(scene, 4, 4, backend=backend, quiet=True)


class TestMain:
    """Tests for main()."""

    def test_gradient_ppm_to_stdout(self, capsys):
        """Test that stdout carries only the PPM image."""
        exit_code = cli.main(["gradient", "--width", "4", "--height", "3", "--quiet"])

        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert exit_code == 0
        assert lines[:3] == ["P3", "4 3", "255"]
        assert len(lines) == 3 + 4 * 3
        assert lines[3] == "0 255 63"
        assert captured.err == ""

    def test_sphere_png_output(self, tmp_path, capsys):
        """Test writing a PNG file."""
        path = tmp_path / "sphere.png"

        exit_code = cli.main(["sphere", "--width", "32", "--output", str(path)])

        assert exit_code == 0
        with PILImage.open(path) as img:
            assert img.size == (32, 18)
            center = np.asarray(img)[9, 16]
        np.testing.assert_array_equal(center, [255, 0, 0])
        assert "Saved to:" in capsys.readouterr().err

    def test_taichi_backend_ppm_file(self, tmp_path, no_taichi_init):
        """Test the taichi backend through main()."""
        path = tmp_path / "gradient.ppm"

        args = ["gradient", "--width", "4", "--height", "4", "--backend", "taichi"]
        exit_code = cli.main([*args, "--output", str(path), "--quiet"])

        assert exit_code == 0
        assert no_taichi_init == ["cpu"]
        assert path.read_text(encoding="ascii").startswith("P3\n4 4\n255\n")

    def test_show_calls_preview(self, monkeypatch, capsys):
        """Test that --show hands the image to show_preview."""
        shown = []
        monkeypatch.setattr(cli, "show_preview", lambda image, **kwargs: shown.append(image))

        exit_code = cli.main(["gradient", "--width", "4", "--height", "2", "--quiet", "--show"])

        assert exit_code == 0
        assert len(shown) == 1
        assert shown[0].shape == (2, 4, 3)

    def test_invalid_size_reports_error(self, capsys):
        """Test that errors are printed to stderr with exit code 1."""
        exit_code = cli.main(["gradient", "--width", "1", "--quiet"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.err.startswith("Error:")
        assert "at least 2x2" in captured.err

    def test_failed_render_ends_progress_line(self, monkeypatch, capsys):
        """Test that the error message starts on its own line after progress."""

        def failing_render(width, height, callback=None):
            callback(2)
            raise RuntimeError("render failed")

        monkeypatch.setattr(cli, "render_gradient", failing_render)

        exit_code = cli.main(["gradient", "--width", "4", "--height", "3"])

        err = capsys.readouterr().err
        assert exit_code == 1
        assert "\rScanlines remaining: 2\nError: render failed\n" in err
        assert "Done." not in err

    def test_init_taichi_uses_double_precision(self, monkeypatch):
        """Test that Taichi float literals default to f64."""
        calls = []
        monkeypatch.setattr(cli.ti, "init", lambda **kwargs: calls.append(kwargs))

        cli.init_taichi("cpu")

        assert calls == [{"arch": cli.ti.cpu, "default_fp": cli.ti.f64}]
