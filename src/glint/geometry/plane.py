"""Infinite plane primitive lying in the object-space x-z plane (y = 0)."""

from glint.core.ray import EPSILON, Ray, Vec4, vector

PLANE_NORMAL = vector(0.0, 1.0, 0.0)


def intersect_plane(ray: Ray) -> tuple[float, ...]:
    """Intersect an object-space ray with the plane y = 0.

    Rays parallel to the plane (including rays lying in it) miss.

    Returns:
        An empty tuple or a single root ``-origin.y / direction.y``.
    """
    if abs(ray.direction[1]) < EPSILON:
        return ()
    return (float(-ray.origin[1] / ray.direction[1]),)


def plane_normal_at(local_point: Vec4) -> Vec4:
    # Constant everywhere on the plane
    return PLANE_NORMAL.copy()
