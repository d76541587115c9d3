"""Pinhole camera looking down -z through a fixed viewport.

The camera sits at ``origin`` and looks toward -z. The viewport is a
rectangle ``viewport_height`` tall and ``aspect_ratio * viewport_height``
wide, placed ``focal_length`` in front of the camera and centered on the view
axis. Rays are generated by interpolating across the viewport from its lower
left corner:

    direction = lower_left_corner + u * horizontal + v * vertical - origin

with u in [0, 1] left to right and v in [0, 1] bottom to top. Directions are
left unnormalized.

Example:
    >>> from rtweekend.camera.viewport import ViewportCamera
    >>> camera = ViewportCamera()
    >>> camera.lower_left_corner
    Vec3(x=-1.7777777777777777, y=-1.0, z=-1.0)
    >>> ray = camera.get_ray(0.5, 0.5)  # Through the viewport center
"""

from dataclasses import dataclass, field

from rtweekend.core.ray import Ray
from rtweekend.core.vec3 import Point3, Vec3

DEFAULT_ASPECT_RATIO = 16.0 / 9.0


@dataclass(frozen=True)
class ViewportCamera:
    """Configuration for the pinhole camera.

    Attributes:
        aspect_ratio: Viewport width divided by height.
        viewport_height: Height of the viewport in world units.
        focal_length: Distance from the camera origin to the viewport.
        origin: Camera position in world space.

    Raises:
        ValueError: If aspect_ratio, viewport_height or focal_length is not
            positive.
    """

    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    viewport_height: float = 2.0
    focal_length: float = 1.0
    origin: Point3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        for name in ("aspect_ratio", "viewport_height", "focal_length"):
            value = getattr(self, name)
            if not value > 0.0:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def viewport_width(self) -> float:
        return self.aspect_ratio * self.viewport_height

    @property
    def horizontal(self) -> Vec3:
        """Vector spanning the full viewport width."""
        return Vec3(self.viewport_width, 0.0, 0.0)

    @property
    def vertical(self) -> Vec3:
        """Vector spanning the full viewport height."""
        return Vec3(0.0, self.viewport_height, 0.0)

    @property
    def lower_left_corner(self) -> Point3:
        """Lower left corner of the viewport in world space."""
        return (
            self.origin
            - self.horizontal / 2
            - self.vertical / 2
            - Vec3(0.0, 0.0, self.focal_length)
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray through normalized viewport coordinates (u, v).

        Args:
            u: Horizontal coordinate in [0, 1] (left to right).
            v: Vertical coordinate in [0, 1] (bottom to top).

        Returns:
            A ray from the camera origin toward the viewport point.
        """
        direction = (
            self.lower_left_corner + u * self.horizontal + v * self.vertical - self.origin
        )
        return Ray(self.origin, direction)

    def image_height(self, width: int) -> int:
        """Image height in pixels matching the aspect ratio for a given width."""
        return int(width / self.aspect_ratio)
