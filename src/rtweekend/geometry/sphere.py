"""Sphere primitive with a boolean ray-sphere hit test.

The test substitutes the ray equation into the implicit sphere equation:

    |origin + t * direction - center|^2 = radius^2

which expands to the quadratic a*t^2 + b*t + c = 0 with:

    oc = origin - center
    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2

The ray hits when the discriminant b^2 - 4ac is strictly positive. A tangent
ray (discriminant exactly zero) counts as a miss, and so does any sphere with
a non-positive radius. Only existence is reported; no distance or normal.

Example:
    >>> from rtweekend.core.ray import Ray
    >>> from rtweekend.core.vec3 import Vec3
    >>> from rtweekend.geometry.sphere import Sphere
    >>> sphere = Sphere(center=Vec3(0, 0, -1), radius=0.5)
    >>> sphere.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)))
    True
"""

from dataclasses import dataclass

import taichi as ti

from rtweekend.core.ray import Ray, TiRay, ti_length_squared, vec3d
from rtweekend.core.vec3 import Point3, Vec3


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere. Non-positive radii never hit.
    """

    center: Point3
    radius: float

    def hit(self, ray: Ray) -> bool:
        """Return True if the ray intersects this sphere."""
        return hit_sphere(self.center, self.radius, ray)


def discriminant(center: Point3, radius: float, ray: Ray) -> float:
    """Discriminant of the ray-sphere quadratic, b^2 - 4ac.

    Args:
        center: The center of the sphere.
        radius: The radius of the sphere.
        ray: The ray to test, with a direction of any length.

    Returns:
        Positive when the ray crosses the sphere, zero when tangent, negative
        when it misses.
    """
    oc: Vec3 = ray.origin - center
    a = ray.direction.length_squared()
    b = 2.0 * oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    return b * b - 4.0 * a * c


def hit_sphere(center: Point3, radius: float, ray: Ray) -> bool:
    """Test whether a ray intersects a sphere.

    Args:
        center: The center of the sphere.
        radius: The radius of the sphere.
        ray: The ray to test.

    Returns:
        True if the discriminant is strictly positive and radius > 0.
    """
    if radius <= 0.0:
        return False
    return discriminant(center, radius, ray) > 0.0


# =============================================================================
# Taichi Hit Test (kernel-callable)
# =============================================================================


@ti.func
def ti_hit_sphere(center: vec3d, radius: ti.f64, ray: TiRay) -> ti.i32:
    """Kernel-side hit_sphere.

    Returns:
        1 if the ray hits the sphere, 0 otherwise.
    """
    oc = ray.origin - center
    a = ti_length_squared(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = ti_length_squared(oc) - radius * radius
    disc = b * b - 4.0 * a * c

    did_hit = 0
    if radius > 0.0 and disc > 0.0:
        did_hit = 1
    return did_hit
