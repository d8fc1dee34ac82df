"""Taichi-backed pixel canvas.

The canvas stores linear, unclamped RGB colours in a Taichi vector field
indexed ``[x, y]`` with ``y = 0`` as the top row. Bulk operations (fill,
8-bit quantisation) run as Taichi kernels; per-pixel reads and writes go
through the field directly and are meant for tests and small edits.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from glint.core.colour import Colour
    >>> from glint.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, Colour(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    Colour(r=1.0, g=0.0, b=0.0)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from glint.core.colour import Colour

# =============================================================================
# Kernels
# =============================================================================


@ti.kernel
def _fill(pixels: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in pixels:
        pixels[i, j] = ti.Vector([r, g, b])


@ti.kernel
def _to_rgb8(pixels: ti.template(), out: ti.template()):
    # Clamp each channel to [0, 1], scale to [0, 255] and round
    for i, j in pixels:
        for k in ti.static(range(3)):
            c = ti.min(ti.max(pixels[i, j][k], 0.0), 1.0)
            out[i, j, k] = ti.cast(c * 255.0 + 0.5, ti.u8)


# =============================================================================
# Canvas
# =============================================================================


class Canvas:
    """A width x height grid of colours.

    Attributes:
        width: Number of columns.
        height: Number of rows.

    Raises:
        ValueError: If width or height is not positive.
    """

    def __init__(self, width: int, height: int, fill: Colour | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._rgb8 = ti.field(dtype=ti.u8, shape=(width, height, 3))
        self.fill(fill if fill is not None else Colour.black())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> "ti.MatrixField":
        """The underlying Taichi field, indexed [x, y]."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas of size {self._width}x{self._height}"
            )

    def fill(self, colour: Colour) -> None:
        """Set every pixel to colour."""
        _fill(self._pixels, colour.r, colour.g, colour.b)

    def write_pixel(self, x: int, y: int, colour: Colour) -> None:
        """Set one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = [colour.r, colour.g, colour.b]

    def pixel_at(self, x: int, y: int) -> Colour:
        """Read one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Colour(float(value[0]), float(value[1]), float(value[2]))

    def from_numpy(self, image: npt.ArrayLike) -> None:
        """Load the canvas from an image array.

        Args:
            image: Array of shape (height, width, 3), row 0 at the top.

        Raises:
            ValueError: If the array shape does not match the canvas.
        """
        array = np.asarray(image, dtype=np.float32)
        if array.shape != (self._height, self._width, 3):
            raise ValueError(
                f"Expected image of shape {(self._height, self._width, 3)}, got {array.shape}"
            )
        # Field is [x, y]; images are [row, column]
        self._pixels.from_numpy(np.ascontiguousarray(np.transpose(array, (1, 0, 2))))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Linear colours as a (height, width, 3) float32 array."""
        return np.transpose(self._pixels.to_numpy(), (1, 0, 2)).astype(np.float32)

    def to_rgb8(self) -> npt.NDArray[np.uint8]:
        """Colours clamped to [0, 1] and quantised to a (height, width, 3) uint8 array."""
        _to_rgb8(self._pixels, self._rgb8)
        return np.ascontiguousarray(np.transpose(self._rgb8.to_numpy(), (1, 0, 2)))

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
