"""Preview module for image output.

Components:
    canvas: Taichi-backed colour buffer with clamping/quantisation kernels
    export: Pillow-based image file export
    display: Matplotlib preview windows and image comparison
"""

from .canvas import Canvas
from .display import compute_rmse, display_image, show_canvas, show_comparison
from .export import canvas_to_pil, save_image

__all__ = [
    "Canvas",
    "canvas_to_pil",
    "save_image",
    "display_image",
    "compute_rmse",
    "show_canvas",
    "show_comparison",
]
