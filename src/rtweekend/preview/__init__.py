"""Preview module for output and visualization.

Components:
    export: 8-bit quantization, plain PPM writer and Pillow-based PNG export
    display: Matplotlib-based static preview

Example:
    >>> from rtweekend.preview import image_to_uint8, save_image, show_preview
    >>> from rtweekend.render import render_sphere
    >>>
    >>> image = render_sphere(400, 225)
    >>> save_image(image_to_uint8(image), "sphere.png")
    >>> show_preview(image)
"""

from rtweekend.preview.display import prepare_for_display, show_preview
from rtweekend.preview.export import (
    QUANTIZE_SCALE,
    image_to_uint8,
    ppm_header,
    save_image,
    save_png,
    save_ppm,
    write_ppm,
)

__all__ = [
    # Display functions
    "show_preview",
    "prepare_for_display",
    # Export functions
    "QUANTIZE_SCALE",
    "image_to_uint8",
    "ppm_header",
    "write_ppm",
    "save_ppm",
    "save_png",
    "save_image",
]
