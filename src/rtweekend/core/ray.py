"""Ray data structure, in Python and in Taichi form.

A ray is the half-line ``P(t) = origin + t * direction``. The direction is
not required to be unit length; callers that care about distances must
account for its magnitude.

Two representations are provided:

- ``Ray``: an immutable Python value built from ``Vec3``, used by the
  scanline renderer and by anything running outside Taichi kernels.
- ``TiRay``: a Taichi dataclass with f64 components, used inside kernels by
  the parallel renderer. ``ti_ray_at`` and the vector helpers below mirror the
  Python semantics.

Example:
    >>> from rtweekend.core.ray import Ray
    >>> from rtweekend.core.vec3 import Vec3
    >>> ray = Ray(Vec3(2, 3, 4), Vec3(0, 1, 0))
    >>> ray.at(0.5)
    Vec3(x=2.0, y=3.5, z=4.0)
"""

from dataclasses import dataclass

import taichi as ti

from rtweekend.core.vec3 import Point3, Vec3

# Type alias for double precision 3D vectors inside Taichi kernels
vec3d = ti.types.vector(3, ti.f64)


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray, of any non-zero length.
    """

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """Return the point along the ray at parameter t.

        Args:
            t: Distance along the ray in units of ``direction``. Negative
                values lie behind the origin.
        """
        return self.origin + self.direction * t


# =============================================================================
# Taichi Representation
# =============================================================================


@ti.dataclass
class TiRay:
    """Kernel-side ray with f64 origin and direction."""

    origin: vec3d
    direction: vec3d


@ti.func
def ti_ray_at(ray: TiRay, t: ti.f64) -> vec3d:
    """Compute ray.origin + t * ray.direction inside a kernel."""
    return ray.origin + ray.direction * t


@ti.func
def ti_length_squared(v: vec3d) -> ti.f64:
    return v.x * v.x + v.y * v.y + v.z * v.z


@ti.func
def ti_normalized(v: vec3d) -> vec3d:
    """Normalize a vector inside a kernel.

    Zero-length input gives the zero vector, matching Vec3.normalized().
    """
    result = vec3d(0.0, 0.0, 0.0)
    length = ti.sqrt(ti_length_squared(v))
    if length > 0.0:
        result = v / length
    return result
