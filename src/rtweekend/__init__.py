"""A small educational ray tracer.

This package follows the "ray tracing in one weekend" progression up to the
first ray-cast scene: a gradient test image, then a pinhole camera looking at
a single sphere against a sky gradient.

Subpackages:
    core: Vec3 value type and Ray
    geometry: Sphere primitive and the ray/sphere hit test
    camera: Pinhole viewport camera
    render: Color resolution, scanline loop and Taichi-parallel renderer
    preview: PPM/PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
