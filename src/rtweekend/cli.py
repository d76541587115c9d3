"""Command-line entry point.

Renders one of the two scenes and writes it as a plain PPM to stdout (so it
can be redirected into a file) or to a file whose suffix picks the format.
Progress goes to stderr so redirecting stdout captures only pixel data.

Usage:
    rtweekend gradient [options] > gradient.ppm
    rtweekend sphere [options] --output sphere.png

Options:
    --width WIDTH       Image width in pixels
    --height HEIGHT     Image height in pixels (sphere: derived from 16:9, or
                        sets the camera aspect ratio when given)
    --output OUTPUT     Output path, or - for PPM on stdout (default: -)
    --backend BACKEND   python (scanline loop) or taichi (parallel kernels)
    --arch ARCH         Taichi architecture, cpu or gpu (default: cpu)
    --show              Show the result in a Matplotlib window
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m rtweekend sphere --width 800 --backend taichi --output sphere.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt
import taichi as ti

from rtweekend.camera.viewport import ViewportCamera
from rtweekend.preview.display import show_preview
from rtweekend.preview.export import image_to_uint8, save_image, write_ppm
from rtweekend.render.parallel import render_gradient_parallel, render_sphere_parallel
from rtweekend.render.scanline import check_image_size, render_gradient, render_sphere

logger = logging.getLogger(__name__)

GRADIENT_SIZE = 256
SPHERE_WIDTH = 400


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with gradient and sphere subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--output",
        type=str,
        default="-",
        help="Output file path, or - for PPM on stdout (default: -)",
    )
    common.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="python",
        help="Renderer: scanline loop or Taichi kernels (default: python)",
    )
    common.add_argument(
        "--arch",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi architecture for the taichi backend (default: cpu)",
    )
    common.add_argument(
        "--show",
        action="store_true",
        help="Show the rendered image in a Matplotlib window",
    )
    common.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="rtweekend",
        description="Render the ray tracing in one weekend test scenes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="scene", required=True)

    gradient = subparsers.add_parser(
        "gradient",
        parents=[common],
        help="Red/green gradient test image",
    )
    gradient.add_argument(
        "--width",
        type=int,
        default=GRADIENT_SIZE,
        help=f"Image width in pixels (default: {GRADIENT_SIZE})",
    )
    gradient.add_argument(
        "--height",
        type=int,
        default=GRADIENT_SIZE,
        help=f"Image height in pixels (default: {GRADIENT_SIZE})",
    )

    sphere = subparsers.add_parser(
        "sphere",
        parents=[common],
        help="Single red sphere against a sky gradient",
    )
    sphere.add_argument(
        "--width",
        type=int,
        default=SPHERE_WIDTH,
        help=f"Image width in pixels (default: {SPHERE_WIDTH})",
    )
    sphere.add_argument(
        "--height",
        type=int,
        default=None,
        help="Image height in pixels (default: width / 16:9; sets the aspect ratio when given)",
    )

    return parser


def init_taichi(arch: str) -> None:
    """Initialize Taichi, falling back to CPU when no GPU is available."""
    if arch == "gpu":
        try:
            ti.init(arch=ti.gpu, default_fp=ti.f64)
            logger.info("Using GPU backend")
            return
        except Exception:
            logger.warning("GPU backend unavailable, falling back to CPU")
    ti.init(arch=ti.cpu, default_fp=ti.f64)
    logger.info("Using CPU backend")


def render_scene(
    scene: str,
    width: int,
    height: int | None,
    *,
    backend: str = "python",
    quiet: bool = False,
) -> npt.NDArray[np.float64]:
    """Render a scene with the chosen backend.

    Args:
        scene: "gradient" or "sphere".
        width: Image width in pixels.
        height: Image height in pixels. None derives it from the default
            16:9 camera (sphere) or uses the width (gradient). An explicit
            height sets the sphere camera's aspect ratio to width / height.
        backend: "python" for the scanline loop, "taichi" for kernels.
            Taichi must already be initialized for the taichi backend.
        quiet: If True, suppress progress output.

    Returns:
        Linear color array of shape (height, width, 3), top row first.

    Raises:
        ValueError: If the scene or backend is unknown, or the size invalid.
    """
    if height is None:
        camera = ViewportCamera()
        height = camera.image_height(width) if scene == "sphere" else width
    else:
        check_image_size(width, height)
        camera = ViewportCamera(aspect_ratio=width / height)

    progress_started = False

    def progress_callback(remaining: int) -> None:
        nonlocal progress_started
        progress_started = True
        print(f"\rScanlines remaining: {remaining}", end="", file=sys.stderr, flush=True)

    callback = None if quiet else progress_callback
    start_time = time.time()

    try:
        if backend == "python":
            if scene == "gradient":
                image = render_gradient(width, height, callback=callback)
            elif scene == "sphere":
                image = render_sphere(width, height, camera, callback=callback)
            else:
                raise ValueError(f"Unknown scene: {scene}")
        elif backend == "taichi":
            if scene == "gradient":
                image = render_gradient_parallel(width, height)
            elif scene == "sphere":
                image = render_sphere_parallel(width, height, camera)
            else:
                raise ValueError(f"Unknown scene: {scene}")
        else:
            raise ValueError(f"Unknown backend: {backend}")
    finally:
        # End the \r progress line, even when the render fails part way
        if progress_started:
            print(file=sys.stderr)

    if not quiet:
        print("Done.", file=sys.stderr)

    logger.debug("Rendered %s (%dx%d) in %.2fs", scene, width, height, time.time() - start_time)
    return image


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.backend == "taichi":
            init_taichi(args.arch)

        image = render_scene(
            args.scene,
            args.width,
            args.height,
            backend=args.backend,
            quiet=args.quiet,
        )
        pixels = image_to_uint8(image)

        if args.output == "-":
            write_ppm(sys.stdout, pixels)
            sys.stdout.flush()
        else:
            save_image(pixels, args.output)
            if not args.quiet:
                print(f"Saved to: {args.output}", file=sys.stderr)

        if args.show:
            show_preview(image, title=f"{args.scene} ({args.width}x{image.shape[0]})")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
