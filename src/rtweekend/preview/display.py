"""Matplotlib-based preview display for rendered images.

Example:
    >>> from rtweekend.preview.display import show_preview
    >>> from rtweekend.render.scanline import render_sphere
    >>> show_preview(render_sphere(400, 225), title="Sphere")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def prepare_for_display(image: npt.NDArray) -> npt.NDArray:
    """Clamp float images to [0, 1]; pass 8-bit images through unchanged.

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")

    if image.dtype == np.uint8:
        return image
    return np.clip(image, 0.0, 1.0).astype(np.float32)


def show_preview(
    image: npt.NDArray,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 4.5),
    block: bool = True,
) -> None:
    """Display a rendered image in a Matplotlib figure.

    Args:
        image: Linear float image in [0, 1] or 8-bit image, shape (H, W, 3).
        title: Figure title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = prepare_for_display(image)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")

    if title is None:
        height, width, _ = image.shape
        title = f"Render Preview - {width}x{height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
