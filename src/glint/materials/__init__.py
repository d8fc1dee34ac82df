"""Materials module for surface appearance.

Components:
    pattern: Procedural colour patterns sampled in pattern space
    material: Phong material with reflectivity, transparency and index of refraction
"""

from .material import Material
from .pattern import Pattern, PatternKind

__all__ = ["Material", "Pattern", "PatternKind"]
