"""Core ray tracing module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Points, vectors, the Ray type and vector utilities
    colour: Unclamped RGB colour values
    transform: Affine transforms with cached inverses and view transforms
    intersection: Intersections and the sorted IntersectionSet
    shading: Shading data precomputation, refractive index tracking and Schlick

The scene-level recursion (colour_at, shade_hit, reflected and refracted
colour) lives in glint.scene.world.
"""

from .colour import Colour
from .intersection import Intersection, IntersectionSet
from .ray import (
    EPSILON,
    Ray,
    cross,
    dot,
    is_point,
    is_vector,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)
from .shading import ShadingData, prepare_computations
from .transform import (
    Transform,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)

__all__ = [
    "EPSILON",
    "Ray",
    "point",
    "vector",
    "is_point",
    "is_vector",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "reflect",
    "Colour",
    "Transform",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Intersection",
    "IntersectionSet",
    "ShadingData",
    "prepare_computations",
]
