"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with a boolean ray-sphere hit test, in Python
        and as a Taichi function (ti_hit_sphere) for the parallel renderer.
"""

from .sphere import Sphere, discriminant, hit_sphere, ti_hit_sphere

__all__ = [
    "Sphere",
    "discriminant",
    "hit_sphere",
    "ti_hit_sphere",
]
