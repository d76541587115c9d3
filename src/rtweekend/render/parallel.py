"""Taichi-parallel renderer.

Evaluates the same scenes as the scanline renderer, but hands the pixel loop
to a Taichi kernel so every pixel is shaded in parallel. Pixels do not depend
on each other, so no synchronization is needed.

The kernels write into a (width, height) f64 vector ndarray indexed with a
bottom-left origin, matching the scanline loop's (i, j). Ndarray arguments are
keyed by element type and rank, not shape, so each kernel compiles once for
all image sizes. The public functions convert the buffer to the usual image
layout: shape (height, width, 3), top row first, float64. Results agree with
the scanline renderer up to floating-point rounding.

Taichi must be initialized with ``default_fp=ti.f64`` before calling these
functions. Float literals in the shading functions take the default float
type, so a 32-bit default would round constants such as 0.7.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from rtweekend.render.parallel import render_sphere_parallel
    >>> image = render_sphere_parallel(400, 225)
"""

import logging

import numpy as np
import numpy.typing as npt
import taichi as ti

from rtweekend.camera.viewport import ViewportCamera
from rtweekend.core.ray import TiRay, vec3d
from rtweekend.geometry.sphere import Sphere
from rtweekend.render.scanline import check_image_size
from rtweekend.render.shading import UNIT_SPHERE, ti_gradient_color, ti_ray_color

logger = logging.getLogger(__name__)


# =============================================================================
# Render Target
# =============================================================================


def allocate_image_array(width: int, height: int) -> "ti.VectorNdarray":
    """Allocate a (width, height) ndarray of f64 RGB colors.

    Raises:
        ValueError: If the image is smaller than 2x2.
    """
    check_image_size(width, height)
    return ti.ndarray(dtype=vec3d, shape=(width, height))


def array_to_image(image: "ti.VectorNdarray") -> npt.NDArray[np.float64]:
    """Convert a (width, height) bottom-left-origin ndarray to a (height, width, 3) array."""
    data = image.to_numpy()

    # Transpose from (width, height, 3) to (height, width, 3) for standard image format
    data = np.transpose(data, (1, 0, 2))

    # Flip vertically (buffer uses bottom-left origin, images use top-left)
    data = np.flipud(data)

    return np.ascontiguousarray(data, dtype=np.float64)


# =============================================================================
# Rendering Kernels
# =============================================================================


@ti.kernel
def _render_gradient_kernel(
    image: ti.types.ndarray(dtype=vec3d, ndim=2),
    width: ti.i32,
    height: ti.i32,
):
    """Shade every pixel of the gradient test pattern."""
    for i, j in ti.ndrange(width, height):
        u = ti.cast(i, ti.f64) / ti.cast(width - 1, ti.f64)
        v = ti.cast(j, ti.f64) / ti.cast(height - 1, ti.f64)
        image[i, j] = ti_gradient_color(u, v)


@ti.kernel
def _render_sphere_kernel(
    image: ti.types.ndarray(dtype=vec3d, ndim=2),
    width: ti.i32,
    height: ti.i32,
    origin: vec3d,
    lower_left_corner: vec3d,
    horizontal: vec3d,
    vertical: vec3d,
    center: vec3d,
    radius: ti.f64,
):
    """Cast one camera ray per pixel at a single sphere."""
    for i, j in ti.ndrange(width, height):
        u = ti.cast(i, ti.f64) / ti.cast(width - 1, ti.f64)
        v = ti.cast(j, ti.f64) / ti.cast(height - 1, ti.f64)
        direction = lower_left_corner + u * horizontal + v * vertical - origin
        ray = TiRay(origin=origin, direction=direction)
        image[i, j] = ti_ray_color(ray, center, radius)


# =============================================================================
# Public Rendering API
# =============================================================================


def render_gradient_parallel(width: int = 256, height: int = 256) -> npt.NDArray[np.float64]:
    """Render the gradient test pattern with a Taichi kernel.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Linear color array of shape (height, width, 3), top row first.

    Raises:
        ValueError: If the image is smaller than 2x2.
    """
    logger.debug("Parallel gradient render %dx%d", width, height)

    image = allocate_image_array(width, height)
    _render_gradient_kernel(image, width, height)
    return array_to_image(image)


def render_sphere_parallel(
    width: int,
    height: int,
    camera: ViewportCamera | None = None,
    sphere: Sphere = UNIT_SPHERE,
) -> npt.NDArray[np.float64]:
    """Render the single-sphere scene with a Taichi kernel.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        camera: The camera generating primary rays. Defaults to a 16:9
            ViewportCamera at the origin.
        sphere: The sphere in the scene.

    Returns:
        Linear color array of shape (height, width, 3), top row first.

    Raises:
        ValueError: If the image is smaller than 2x2.
    """
    if camera is None:
        camera = ViewportCamera()

    logger.debug("Parallel sphere render %dx%d", width, height)

    image = allocate_image_array(width, height)
    _render_sphere_kernel(
        image,
        width,
        height,
        vec3d(*camera.origin),
        vec3d(*camera.lower_left_corner),
        vec3d(*camera.horizontal),
        vec3d(*camera.vertical),
        vec3d(*sphere.center),
        sphere.radius,
    )
    return array_to_image(image)
