"""Sequential scanline renderer.

Walks the image one row at a time from the top row down, with columns left
to right. Rows are indexed from the bottom (``j = height - 1`` is the top
row), so the normalized coordinates are:

    u = i / (width - 1)
    v = j / (height - 1)

Each pixel's color comes from a pixel shader, a callable mapping (u, v) to a
Color. Before each row, an optional progress callback receives the number of
scanlines remaining.

Example:
    >>> from rtweekend.render.scanline import gradient_shader, render_image
    >>> image = render_image(256, 256, gradient_shader)
    >>> image.shape
    (256, 256, 3)
"""

import logging
from collections.abc import Callable, Generator

import numpy as np
import numpy.typing as npt

from rtweekend.camera.viewport import ViewportCamera
from rtweekend.core.vec3 import Color
from rtweekend.geometry.sphere import Sphere
from rtweekend.render.shading import UNIT_SPHERE, gradient_color, ray_color

logger = logging.getLogger(__name__)

# Maps normalized image coordinates (u, v) to a color
PixelShader = Callable[[float, float], Color]

# Receives the number of scanlines remaining before each row is rendered
ScanlineCallback = Callable[[int], None]


def check_image_size(width: int, height: int) -> None:
    """Raise ValueError unless the image is at least 2x2 pixels.

    The pixel coordinates divide by (width - 1) and (height - 1).
    """
    if width < 2 or height < 2:
        raise ValueError(f"Image dimensions must be at least 2x2, got {width}x{height}")


def gradient_shader(u: float, v: float) -> Color:
    """Pixel shader for the gradient test pattern."""
    return gradient_color(u, v)


def make_sphere_shader(
    camera: ViewportCamera | None = None,
    sphere: Sphere = UNIT_SPHERE,
) -> PixelShader:
    """Build a pixel shader that casts camera rays at a single sphere.

    Args:
        camera: The camera generating primary rays. Defaults to a 16:9
            ViewportCamera at the origin.
        sphere: The sphere in the scene.

    Returns:
        A pixel shader for render_image / iter_scanlines.
    """
    if camera is None:
        camera = ViewportCamera()

    def shade(u: float, v: float) -> Color:
        return ray_color(camera.get_ray(u, v), sphere)

    return shade


def iter_scanlines(
    width: int,
    height: int,
    shader: PixelShader,
    callback: ScanlineCallback | None = None,
) -> Generator[list[Color], None, None]:
    """Yield the image one row of colors at a time, top row first.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        shader: Pixel shader mapping (u, v) to a color.
        callback: Optional callback receiving the scanlines remaining.

    Yields:
        A list of ``width`` colors, left to right.

    Raises:
        ValueError: If the image is smaller than 2x2.
    """
    check_image_size(width, height)

    for j in reversed(range(height)):
        if callback is not None:
            callback(j)
        v = j / (height - 1)
        yield [shader(i / (width - 1), v) for i in range(width)]


def render_image(
    width: int,
    height: int,
    shader: PixelShader,
    callback: ScanlineCallback | None = None,
) -> npt.NDArray[np.float64]:
    """Render a full image with the scanline loop.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        shader: Pixel shader mapping (u, v) to a color.
        callback: Optional callback receiving the scanlines remaining.

    Returns:
        Linear color array of shape (height, width, 3), top row first.

    Raises:
        ValueError: If the image is smaller than 2x2.
    """
    check_image_size(width, height)
    logger.debug("Scanline render %dx%d", width, height)

    image = np.empty((height, width, 3), dtype=np.float64)
    for row, scanline in enumerate(iter_scanlines(width, height, shader, callback)):
        image[row] = [tuple(color) for color in scanline]
    return image


def render_gradient(
    width: int = 256,
    height: int = 256,
    callback: ScanlineCallback | None = None,
) -> npt.NDArray[np.float64]:
    """Render the gradient test pattern."""
    return render_image(width, height, gradient_shader, callback)


def render_sphere(
    width: int,
    height: int,
    camera: ViewportCamera | None = None,
    sphere: Sphere = UNIT_SPHERE,
    callback: ScanlineCallback | None = None,
) -> npt.NDArray[np.float64]:
    """Render the single-sphere scene."""
    return render_image(width, height, make_sphere_shader(camera, sphere), callback)
