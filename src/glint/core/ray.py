"""Ray data structure and vector utilities for recursive ray tracing.

Points and direction vectors are homogeneous NumPy 4-vectors: ``w = 1`` marks
a point and ``w = 0`` a direction, so affine transforms translate points but
leave directions untouched.

Example:
    >>> from glint.core.ray import Ray, point, vector
    >>> ray = Ray(origin=point(0.0, 0.0, -5.0), direction=vector(0.0, 0.0, 1.0))
    >>> ray.position(5.0)  # Point 5 units along the ray
    array([0., 0., 0., 1.])
"""

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Shared tolerance for hit ordering, surface offsets and point/vector tests
EPSILON = 1e-5

Vec4 = npt.NDArray[np.float64]


def point(x: float, y: float, z: float) -> Vec4:
    """Create a point (w = 1)."""
    return np.array([x, y, z, 1.0], dtype=np.float64)


def vector(x: float, y: float, z: float) -> Vec4:
    """Create a direction vector (w = 0)."""
    return np.array([x, y, z, 0.0], dtype=np.float64)


def is_point(v: Vec4) -> bool:
    return v.shape == (4,) and abs(v[3] - 1.0) < EPSILON


def is_vector(v: Vec4) -> bool:
    return v.shape == (4,) and abs(v[3]) < EPSILON


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vec4, b: Vec4) -> float:
    """Compute the dot product of two 4-vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The dot product a . b (w components included, which is harmless
        for directions since their w is zero).
    """
    return float(np.dot(a, b))


def cross(a: Vec4, b: Vec4) -> Vec4:
    """Compute the cross product of the xyz parts of two vectors.

    Returns:
        A direction vector (w = 0).
    """
    c = np.cross(a[:3], b[:3])
    return vector(c[0], c[1], c[2])


def magnitude(v: Vec4) -> float:
    """Compute the Euclidean length of a vector."""
    return float(np.sqrt(np.dot(v, v)))


def normalize(v: Vec4) -> Vec4:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.
        If v is zero-length, it is returned unchanged.
    """
    m = magnitude(v)
    if m == 0.0:
        return v
    return v / m


def reflect(incident: Vec4, normal: Vec4) -> Vec4:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector, ``incident - normal * 2 (incident . normal)``.
    """
    return incident - normal * 2.0 * dot(incident, normal)


# =============================================================================
# Ray
# =============================================================================


@dataclass(eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w = 1).
        direction: The direction vector of the ray (w = 0). It is not
            normalized automatically, so transformed rays keep the t scale
            of the space they were cast in.

    Raises:
        ValueError: If origin is not a point or direction is not a vector.
    """

    origin: Vec4
    direction: Vec4

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=np.float64)
        self.direction = np.asarray(self.direction, dtype=np.float64)
        if not is_point(self.origin):
            raise ValueError(f"Ray origin must be a point (w=1), got {self.origin}")
        if not is_vector(self.direction):
            raise ValueError(
                f"Ray direction must be a vector (w=0), got {self.direction}"
            )

    def position(self, t: float) -> Vec4:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: npt.NDArray[np.float64]) -> "Ray":
        """Return this ray mapped through a 4x4 matrix."""
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"
