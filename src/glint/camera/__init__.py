"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera with view transform, pixel-to-ray mapping and rendering
"""

from .pinhole import Camera, ProgressCallback

__all__ = ["Camera", "ProgressCallback"]
