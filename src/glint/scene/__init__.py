"""Scene module for composing and describing worlds.

Components:
    light: Point light source
    object: Scene objects (shape + transform + material)
    world: The World, shadow tests and recursive colour composition
    config: Dictionary/JSON scene configuration and builders
    showcase: A ready-made demo scene
"""

from .light import PointLight
from .object import SceneObject
from .world import DEFAULT_RECURSION_LIMIT, World, default_world

# Note: config and showcase are NOT imported here because they pull in the
# camera and Taichi canvas. Import them directly when needed.

__all__ = [
    "PointLight",
    "SceneObject",
    "World",
    "default_world",
    "DEFAULT_RECURSION_LIMIT",
]
