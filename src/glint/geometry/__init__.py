"""Geometry module for shape primitives.

Components:
    sphere: Unit sphere at the object-space origin
    plane: Infinite x-z plane at y = 0
    shapes: ShapeKind tags and the intersect/normal dispatch registry

Intersection follows the pattern:
    ts = intersect_shape(kind, local_ray)
    n = shape_normal_at(kind, local_point)
"""

from .plane import intersect_plane, plane_normal_at
from .shapes import (
    ShapeKind,
    intersect_shape,
    register_shape,
    shape_normal_at,
)
from .sphere import intersect_sphere, sphere_normal_at

__all__ = [
    "ShapeKind",
    "intersect_shape",
    "shape_normal_at",
    "register_shape",
    "intersect_sphere",
    "sphere_normal_at",
    "intersect_plane",
    "plane_normal_at",
]
