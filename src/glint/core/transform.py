"""Affine 4x4 transforms with a cached inverse.

A Transform stores a matrix together with its inverse, computed once at
construction, so objects, patterns and cameras never invert on the hot path.
Builder methods apply the new operation *after* the existing one, which
lets chains read in the order the operations happen:

Example:
    >>> import math
    >>> from glint.core.transform import Transform
    >>> from glint.core.ray import point
    >>> t = Transform.identity().rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> t.apply(point(1, 0, 1))
    array([15.,  0.,  7.,  1.])
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from glint.core.ray import EPSILON, Vec4, cross, normalize

Matrix4 = npt.NDArray[np.float64]

_AFFINE_ROW = np.array([0.0, 0.0, 0.0, 1.0])


class Transform:
    """An invertible affine transform.

    Attributes:
        matrix: The forward 4x4 matrix (read-only).
        inverse: The inverse of matrix (read-only).

    Raises:
        ValueError: If the matrix is not 4x4, is not affine (bottom row
            other than [0, 0, 0, 1]) or is singular.
    """

    __slots__ = ("matrix", "inverse")

    def __init__(self, matrix: npt.ArrayLike | None = None):
        if matrix is None:
            matrix = np.identity(4)
        m = np.array(matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got shape {m.shape}")
        if not np.allclose(m[3], _AFFINE_ROW, rtol=0.0, atol=EPSILON):
            raise ValueError(f"Transform matrix must be affine, got bottom row {m[3]}")
        try:
            inv = np.linalg.inv(m)
        except np.linalg.LinAlgError as exc:
            raise ValueError(f"Transform matrix is not invertible:\n{m}") from exc
        m.setflags(write=False)
        inv.setflags(write=False)
        self.matrix = m
        self.inverse = inv

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def apply(self, v: Vec4) -> Vec4:
        """Map a point or vector from local space into the parent space."""
        return self.matrix @ v

    def apply_inverse(self, v: Vec4) -> Vec4:
        """Map a point or vector from the parent space into local space."""
        return self.inverse @ v

    @property
    def normal_matrix(self) -> Matrix4:
        """Inverse transpose, used to carry surface normals into world space."""
        return self.inverse.T

    def apply_normal(self, n: Vec4) -> Vec4:
        """Transform a local normal to world space (w forced to 0, normalized)."""
        world = self.inverse.T @ n
        world[3] = 0.0
        return normalize(world)

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def __matmul__(self, other: Transform) -> Transform:
        # a @ b applies b first, then a
        return Transform(self.matrix @ other.matrix)

    def then(self, other: Transform | Matrix4) -> Transform:
        """Return a transform that applies self, then other."""
        other_matrix = other.matrix if isinstance(other, Transform) else np.asarray(other)
        return Transform(other_matrix @ self.matrix)

    def translate(self, x: float, y: float, z: float) -> Transform:
        return self.then(translation(x, y, z))

    def scale(self, x: float, y: float, z: float) -> Transform:
        return self.then(scaling(x, y, z))

    def rotate_x(self, radians: float) -> Transform:
        return self.then(rotation_x(radians))

    def rotate_y(self, radians: float) -> Transform:
        return self.then(rotation_y(radians))

    def rotate_z(self, radians: float) -> Transform:
        return self.then(rotation_z(radians))

    def shear(
        self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Transform:
        return self.then(shearing(xy, xz, yx, yz, zx, zy))

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __hash__(self) -> int:
        return hash(self.matrix.tobytes())

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"


def as_transform(value: Transform | npt.ArrayLike) -> Transform:
    """Coerce a Transform or a raw 4x4 matrix into a Transform."""
    if isinstance(value, Transform):
        return value
    return Transform(value)


# =============================================================================
# Matrix Factories
# =============================================================================


def translation(x: float, y: float, z: float) -> Matrix4:
    m = np.identity(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix4:
    return np.diag([x, y, z, 1.0]).astype(np.float64)


def rotation_x(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(
    xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
) -> Matrix4:
    """Shear matrix; ``xy`` moves x in proportion to y, and so on."""
    return np.array(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Vec4, to_point: Vec4, up: Vec4) -> Transform:
    """Build the world-to-eye transform for a camera.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be exactly perpendicular.

    Returns:
        A Transform that orients the world so the eye sits at the origin
        looking down -z.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.array(
        [
            [left[0], left[1], left[2], 0.0],
            [true_up[0], true_up[1], true_up[2], 0.0],
            [-forward[0], -forward[1], -forward[2], 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return Transform(
        orientation @ translation(-from_point[0], -from_point[1], -from_point[2])
    )
