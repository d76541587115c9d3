"""Color resolution for rays and pixels.

Two scenes are shaded here:

- The gradient test pattern: red ramps left to right, green ramps bottom to
  top, blue is fixed at 0.25.
- The sphere scene: a ray that hits the sphere is red, anything else gets a
  vertical sky gradient, a lerp from white (t=0) to sky blue (t=1) with
  ``t = 0.5 * (unit_direction.y + 1)``.

Every function has a Taichi twin (``ti_`` prefix) used by the parallel
renderer.
"""

import taichi as ti

from rtweekend.core.ray import Ray, TiRay, ti_normalized, vec3d
from rtweekend.core.vec3 import Color, Vec3
from rtweekend.geometry.sphere import Sphere, ti_hit_sphere

# =============================================================================
# Scene Constants
# =============================================================================

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
RED = Color(1.0, 0.0, 0.0)

# Blue channel of the gradient test pattern
GRADIENT_BLUE = 0.25

# The sphere the first ray-cast scene looks at
UNIT_SPHERE = Sphere(center=Vec3(0.0, 0.0, -1.0), radius=0.5)


# =============================================================================
# Python Shading
# =============================================================================


def gradient_color(u: float, v: float) -> Color:
    """Color of the gradient test pattern at normalized coordinates (u, v)."""
    return Color(u, v, GRADIENT_BLUE)


def sky_color(direction: Vec3) -> Color:
    """Lerp between white and sky blue on the direction's y component."""
    unit_direction = direction.normalized()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * WHITE + t * SKY_BLUE


def ray_color(ray: Ray, sphere: Sphere = UNIT_SPHERE) -> Color:
    """Resolve the color seen along a ray.

    Args:
        ray: The ray to shade.
        sphere: The single sphere in the scene.

    Returns:
        RED if the ray hits the sphere, otherwise the sky gradient.
    """
    if sphere.hit(ray):
        return RED
    return sky_color(ray.direction)


# =============================================================================
# Taichi Shading (kernel-callable)
# =============================================================================


@ti.func
def ti_gradient_color(u: ti.f64, v: ti.f64) -> vec3d:
    return vec3d(u, v, GRADIENT_BLUE)


@ti.func
def ti_sky_color(direction: vec3d) -> vec3d:
    unit_direction = ti_normalized(direction)
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * vec3d(1.0, 1.0, 1.0) + t * vec3d(0.5, 0.7, 1.0)


@ti.func
def ti_ray_color(ray: TiRay, center: vec3d, radius: ti.f64) -> vec3d:
    """Kernel-side ray_color for a sphere given by center and radius."""
    color = vec3d(1.0, 0.0, 0.0)
    if ti_hit_sphere(center, radius, ray) == 0:
        color = ti_sky_color(ray.direction)
    return color
