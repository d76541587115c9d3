"""Camera module for primary ray generation.

Components:
    viewport: Pinhole camera looking down -z through a fixed viewport

Ray generation uses normalized viewport coordinates:
    u in [0, 1]: left to right across image
    v in [0, 1]: bottom to top across image
"""

from .viewport import DEFAULT_ASPECT_RATIO, ViewportCamera

__all__ = [
    "DEFAULT_ASPECT_RATIO",
    "ViewportCamera",
]
