"""Image export utilities for rendered images.

Rendered images are linear float arrays of shape (H, W, 3) with channels in
[0, 1]. Exporting quantizes each channel to 8 bits by multiplying by 255.99
and truncating, so 1.0 maps to 255 and 0.25 maps to 63.

Supported formats:
    - PPM "P3" plain text (written directly)
    - PNG and anything else Pillow recognizes from the file suffix

The PPM layout is a three-line header followed by one pixel per line, row
major from the top row:

    P3
    <width> <height>
    255
    <r> <g> <b>
    ...

Example:
    >>> import sys
    >>> from rtweekend.preview.export import image_to_uint8, write_ppm
    >>> from rtweekend.render.scanline import render_gradient
    >>> write_ppm(sys.stdout, image_to_uint8(render_gradient()))
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

# Scale applied before truncation so that 1.0 lands on 255
QUANTIZE_SCALE = 255.99

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255


def _check_image_shape(image: npt.NDArray) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Quantize a linear float image to 8 bits per channel.

    Args:
        image: Linear image array of shape (H, W, 3), nominally in [0, 1].
            Values outside the range are clamped.

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    _check_image_shape(image)

    clamped = np.clip(image.astype(np.float64), 0.0, 1.0)
    return (clamped * QUANTIZE_SCALE).astype(np.uint8)


def ppm_header(width: int, height: int) -> str:
    """Return the three-line P3 header, including the trailing newline."""
    return f"{PPM_MAGIC}\n{width} {height}\n{PPM_MAX_VALUE}\n"


def write_ppm(stream: TextIO, pixels: npt.NDArray[np.uint8]) -> None:
    """Write an 8-bit image to a text stream as a plain PPM.

    Args:
        stream: Writable text stream (a file or sys.stdout).
        pixels: 8-bit image array of shape (H, W, 3), top row first.

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    _check_image_shape(pixels)

    height, width, _ = pixels.shape
    stream.write(ppm_header(width, height))
    for row in pixels:
        stream.writelines(f"{r} {g} {b}\n" for r, g, b in row.tolist())


def save_ppm(pixels: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an 8-bit image as a plain PPM file."""
    with open(filepath, "w", encoding="ascii", newline="\n") as f:
        write_ppm(f, pixels)


def save_png(pixels: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an 8-bit image as a PNG file via Pillow.

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    _check_image_shape(pixels)

    pil_image = PILImage.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    pil_image.save(filepath)


def save_image(pixels: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an 8-bit image, choosing the format from the file suffix.

    ``.ppm`` files are written as plain-text P3; every other suffix is handed
    to Pillow.
    """
    if Path(filepath).suffix.lower() == ".ppm":
        save_ppm(pixels, filepath)
    else:
        save_png(pixels, filepath)
