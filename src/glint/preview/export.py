"""Image export for rendered canvases.

Colours are clamped to [0, 1] and quantised to 8 bits, then written with
Pillow. The file format is deduced from the path's extension (PNG, JPEG,
BMP, PPM, ...); anything Pillow can write is accepted.

Example:
    >>> from glint.preview.export import save_image
    >>> canvas = camera.render(world)
    >>> save_image(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage

if TYPE_CHECKING:
    from glint.preview.canvas import Canvas


def canvas_to_pil(canvas: Canvas) -> PILImage.Image:
    """Convert a canvas into an 8-bit RGB Pillow image."""
    return PILImage.fromarray(canvas.to_rgb8())


def save_image(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas to an image file.

    Args:
        canvas: The canvas to save.
        filepath: Output path; its extension selects the format.

    Raises:
        ValueError: If the extension does not map to a format Pillow can write.
    """
    path = Path(filepath)
    canvas_to_pil(canvas).save(path)
