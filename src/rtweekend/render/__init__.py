"""Rendering module.

Components:
    shading: Color resolution (ray_color, sky gradient, gradient test pattern)
    scanline: Sequential row-by-row renderer with a progress callback
    parallel: Taichi kernels shading every pixel in parallel

Both renderers return linear color arrays of shape (height, width, 3) with
the top row first. Quantize and write them with rtweekend.preview.export.
"""

from .parallel import render_gradient_parallel, render_sphere_parallel
from .scanline import (
    PixelShader,
    ScanlineCallback,
    gradient_shader,
    iter_scanlines,
    make_sphere_shader,
    render_gradient,
    render_image,
    render_sphere,
)
from .shading import (
    RED,
    SKY_BLUE,
    UNIT_SPHERE,
    WHITE,
    gradient_color,
    ray_color,
    sky_color,
)

__all__ = [
    # Shading
    "ray_color",
    "sky_color",
    "gradient_color",
    "WHITE",
    "SKY_BLUE",
    "RED",
    "UNIT_SPHERE",
    # Scanline renderer
    "PixelShader",
    "ScanlineCallback",
    "gradient_shader",
    "make_sphere_shader",
    "iter_scanlines",
    "render_image",
    "render_gradient",
    "render_sphere",
    # Parallel renderer
    "render_gradient_parallel",
    "render_sphere_parallel",
]
