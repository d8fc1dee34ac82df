"""Pinhole camera model for perspective projection ray generation.

The camera sits at the origin of its own space looking down -z, with the
image plane at z = -1. Its transform is a view transform (world to camera),
so rays are generated in camera space and carried into world space by the
cached inverse.

The canvas is sized by ``field_of_view`` across the longer image axis:
- half_view = tan(field_of_view / 2)
- landscape images (hsize >= vsize): half_width = half_view
- portrait images: half_height = half_view

Example:
    >>> import math
    >>> from glint.camera.pinhole import Camera
    >>> from glint.core.ray import point, vector
    >>> from glint.core.transform import view_transform
    >>> camera = Camera(
    ...     hsize=320,
    ...     vsize=240,
    ...     field_of_view=math.pi / 3,
    ...     transform=view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
    ... )
    >>> ray = camera.ray_for_pixel(160, 120)  # Ray through image center
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from glint.core.ray import Ray, normalize, point
from glint.core.transform import Transform, as_transform
from glint.preview.canvas import Canvas

if TYPE_CHECKING:
    from glint.scene.world import World

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class Camera:
    """A pinhole (perspective) camera.

    Attributes:
        hsize: Horizontal size of the image in pixels.
        vsize: Vertical size of the image in pixels.
        field_of_view: Angle, in radians, covered by the longer image axis.
        transform: World-to-camera view transform.

    Raises:
        ValueError: If hsize or vsize is not positive, or field_of_view is
            not strictly between 0 and pi.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Transform = field(default_factory=Transform.identity)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(
                f"Camera size must be positive, got {self.hsize}x{self.vsize}"
            )
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(
                f"field_of_view must be in (0, pi) radians, got {self.field_of_view}"
            )
        object.__setattr__(self, "transform", as_transform(self.transform))

    def with_transform(self, transform: Transform | npt.ArrayLike) -> Camera:
        return replace(self, transform=as_transform(transform))

    # -------------------------------------------------------------------------
    # Derived image-plane geometry
    # -------------------------------------------------------------------------

    @property
    def half_width(self) -> float:
        return self._half_extent()[0]

    @property
    def half_height(self) -> float:
        return self._half_extent()[1]

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the image plane at z = -1."""
        return self.half_width * 2.0 / self.hsize

    def _half_extent(self) -> tuple[float, float]:
        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            return half_view, half_view / aspect
        return half_view * aspect, half_view

    # -------------------------------------------------------------------------
    # Ray generation and rendering
    # -------------------------------------------------------------------------

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """World-space ray through the centre of pixel (px, py).

        Args:
            px: Column, 0 at the left.
            py: Row, 0 at the top.
        """
        half_width, half_height = self._half_extent()
        pixel_size = half_width * 2.0 / self.hsize

        # Camera looks toward -z, so +x is to the left
        world_x = half_width - (px + 0.5) * pixel_size
        world_y = half_height - (py + 0.5) * pixel_size

        inverse = self.transform.inverse
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ point(0.0, 0.0, 0.0)
        direction = normalize(pixel - origin)
        return Ray(origin, direction)

    def render(self, world: World, callback: ProgressCallback | None = None) -> Canvas:
        """Render a world into a new canvas.

        Args:
            world: The scene to render.
            callback: Optional function called after each row with
                (rows_completed, total_rows).

        Returns:
            A Canvas of size hsize x vsize.
        """
        image = np.zeros((self.vsize, self.hsize, 3), dtype=np.float32)
        for y in range(self.vsize):
            for x in range(self.hsize):
                image[y, x] = world.colour_at(self.ray_for_pixel(x, y)).to_tuple()
            if callback is not None:
                callback(y + 1, self.vsize)

        canvas = Canvas(self.hsize, self.vsize)
        canvas.from_numpy(image)
        return canvas
