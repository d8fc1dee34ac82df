"""Shape kinds and intersection dispatch.

Every primitive supplies two pure functions over object space:

- ``intersect(local_ray) -> tuple[float, ...]``: the t values of the hits
- ``normal_at(local_point) -> vector``: the unit surface normal

Scene objects store only a ShapeKind tag; this module maps tags to those
functions. Additional primitives are plugged in with register_shape()
without touching objects, the world or shading.

Example:
    >>> from glint.core.ray import Ray, point, vector
    >>> from glint.geometry.shapes import ShapeKind, intersect_shape
    >>> intersect_shape(ShapeKind.PLANE, Ray(point(0, 1, 0), vector(0, -1, 0)))
    (1.0,)
"""

from collections.abc import Callable
from enum import IntEnum

from glint.core.ray import Ray, Vec4
from glint.geometry.plane import intersect_plane, plane_normal_at
from glint.geometry.sphere import intersect_sphere, sphere_normal_at

IntersectFn = Callable[[Ray], tuple[float, ...]]
NormalFn = Callable[[Vec4], Vec4]


class ShapeKind(IntEnum):
    """Enumeration of supported shape primitives."""

    SPHERE = 0
    PLANE = 1


_SHAPES: dict[int, tuple[IntersectFn, NormalFn]] = {
    ShapeKind.SPHERE: (intersect_sphere, sphere_normal_at),
    ShapeKind.PLANE: (intersect_plane, plane_normal_at),
}


def register_shape(kind: int, intersect: IntersectFn, normal_at: NormalFn) -> None:
    """Register (or replace) the functions for a shape kind.

    Args:
        kind: Integer tag for the shape; new primitives should use values
            outside the ShapeKind range.
        intersect: Object-space intersection function.
        normal_at: Object-space normal function.
    """
    _SHAPES[int(kind)] = (intersect, normal_at)


def _lookup(kind: int) -> tuple[IntersectFn, NormalFn]:
    try:
        return _SHAPES[int(kind)]
    except KeyError:
        raise ValueError(f"Unknown shape kind: {kind}") from None


def intersect_shape(kind: int, local_ray: Ray) -> tuple[float, ...]:
    """Intersect an object-space ray with the primitive identified by kind.

    Raises:
        ValueError: If kind has not been registered.
    """
    return _lookup(kind)[0](local_ray)


def shape_normal_at(kind: int, local_point: Vec4) -> Vec4:
    """Object-space normal of the primitive identified by kind.

    Raises:
        ValueError: If kind has not been registered.
    """
    return _lookup(kind)[1](local_point)
