"""Unit sphere primitive and its ray intersection.

The sphere is centred at the object-space origin with radius 1; size and
placement come from the owning object's transform. Rays arrive already
transformed into object space, so the direction is generally not unit
length and the full quadratic (with ``a = d . d``) is solved.

Example:
    >>> from glint.core.ray import Ray, point, vector
    >>> from glint.geometry.sphere import intersect_sphere
    >>> intersect_sphere(Ray(point(0, 0, -5), vector(0, 0, 1)))
    (4.0, 6.0)
"""

import math

from glint.core.ray import Ray, Vec4, dot, point, vector

SPHERE_CENTER = point(0.0, 0.0, 0.0)


def intersect_sphere(ray: Ray) -> tuple[float, ...]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        ray: The ray in object space.

    Returns:
        An empty tuple if the ray misses, otherwise the two roots in
        ascending order. A tangent ray yields two equal roots and a ray
        starting inside yields one negative and one positive root. A
        zero-length direction misses.
    """
    sphere_to_ray = ray.origin - SPHERE_CENTER
    a = dot(ray.direction, ray.direction)
    if a == 0.0:
        return ()
    b = 2.0 * dot(sphere_to_ray, ray.direction)
    c = dot(sphere_to_ray, sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()

    sqrt_disc = math.sqrt(discriminant)
    t1 = (-b - sqrt_disc) / (2.0 * a)
    t2 = (-b + sqrt_disc) / (2.0 * a)
    return (t1, t2)


def sphere_normal_at(local_point: Vec4) -> Vec4:
    """Outward normal of the unit sphere at an object-space surface point."""
    n = local_point - SPHERE_CENTER
    return vector(n[0], n[1], n[2])
