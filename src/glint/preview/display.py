"""Matplotlib-based preview display for rendered canvases.

Features:
    - Preview window for a rendered canvas
    - Side-by-side comparison of two renders with an amplified difference view
    - RMSE between two images

Example:
    >>> from glint.preview.display import show_canvas
    >>> canvas = camera.render(world)
    >>> show_canvas(canvas, title="Showcase")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from glint.preview.canvas import Canvas


def display_image(canvas: Canvas) -> npt.NDArray[np.float32]:
    """Canvas colours clamped to [0, 1], shape (height, width, 3)."""
    return np.clip(canvas.to_numpy(), 0.0, 1.0)


def compute_rmse(
    image_a: npt.NDArray[np.float32],
    image_b: npt.NDArray[np.float32],
) -> float:
    """Root mean squared error between two images of the same shape.

    Raises:
        ValueError: If the shapes differ.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes differ: {image_a.shape} vs {image_b.shape}")
    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))


def show_canvas(
    canvas: Canvas,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (10, 6),
    block: bool = True,
) -> None:
    """Display a canvas as a Matplotlib figure.

    Args:
        canvas: The rendered canvas.
        title: Custom title (default shows the canvas size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image(canvas))
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)


def show_comparison(
    canvas_a: Canvas,
    canvas_b: Canvas,
    *,
    labels: tuple[str, str] = ("A", "B"),
    diff_scale: float = 10.0,
    figsize: tuple[float, float] = (16, 6),
    block: bool = True,
) -> float:
    """Display two canvases side by side with their amplified difference.

    Args:
        canvas_a: First canvas.
        canvas_b: Second canvas, same size as the first.
        labels: Labels for the two canvases.
        diff_scale: Scale factor for difference amplification.
        figsize: Figure size in inches.
        block: Whether to block execution until the figure is closed.

    Returns:
        RMSE between the two clamped images.
    """
    import matplotlib.pyplot as plt

    image_a = display_image(canvas_a)
    image_b = display_image(canvas_b)
    rmse = compute_rmse(image_a, image_b)
    diff_amplified = np.clip(np.abs(image_a - image_b) * diff_scale, 0.0, 1.0)

    fig, axes = plt.subplots(1, 3, figsize=figsize)
    for ax, image, label in zip(
        axes,
        (image_a, image_b, diff_amplified),
        (labels[0], labels[1], f"Difference ({diff_scale}x) - RMSE: {rmse:.6f}"),
    ):
        ax.imshow(image)
        ax.set_title(label)
        ax.axis("off")

    plt.tight_layout()
    plt.show(block=block)

    return rmse
