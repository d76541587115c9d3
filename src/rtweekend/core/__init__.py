"""Core value types.

Components:
    vec3: Vec3 value type with Point3 and Color role aliases
    ray: Ray (Python) and TiRay (Taichi kernels), with point evaluation

Note: render-level modules (shading, scanline, parallel) are not imported
here. Import them from rtweekend.render.
"""

from .ray import Ray, TiRay, ti_length_squared, ti_normalized, ti_ray_at, vec3d
from .vec3 import Color, Point3, Vec3

__all__ = [
    "Vec3",
    "Point3",
    "Color",
    "Ray",
    "TiRay",
    "ti_ray_at",
    "ti_length_squared",
    "ti_normalized",
    "vec3d",
]
