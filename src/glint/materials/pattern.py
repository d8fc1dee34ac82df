"""Procedural colour patterns.

A Pattern is a tagged value: a PatternKind, two colours and its own
transform. Sampling happens in pattern space, reached from world space by
the owning object's inverse transform followed by the pattern's inverse:

    world point --object.inverse--> object point --pattern.inverse--> pattern point

Example:
    >>> from glint.core.colour import Colour
    >>> from glint.core.ray import point
    >>> from glint.materials.pattern import Pattern
    >>> stripes = Pattern.stripes(Colour.white(), Colour.black())
    >>> stripes.pattern_at(point(-0.1, 0, 0))
    Colour(r=0.0, g=0.0, b=0.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy.typing as npt

from glint.core.colour import Colour
from glint.core.ray import Vec4
from glint.core.transform import Transform, as_transform

if TYPE_CHECKING:
    from glint.scene.object import SceneObject


class PatternKind(IntEnum):
    """Enumeration of supported pattern types."""

    SOLID = 0
    STRIPES = 1
    RINGS = 2
    CHECKERS = 3
    GRADIENT = 4
    RADIAL = 5
    TEST = 6


@dataclass(frozen=True)
class Pattern:
    """A procedural pattern.

    Attributes:
        kind: Which pattern function to evaluate.
        a: First colour (the only colour for SOLID).
        b: Second colour.
        transform: Pattern-space transform relative to the owning object.
        sectors: Number of angular sectors for RADIAL patterns. Must be even
            so the colours also alternate across the seam at angle pi.
    """

    kind: PatternKind = PatternKind.STRIPES
    a: Colour = field(default_factory=Colour.white)
    b: Colour = field(default_factory=Colour.black)
    transform: Transform = field(default_factory=Transform.identity)
    sectors: int = 4

    def __post_init__(self) -> None:
        if self.sectors < 2 or self.sectors % 2:
            raise ValueError(f"Radial pattern needs an even number of sectors, got {self.sectors}")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def solid(cls, colour: Colour) -> Pattern:
        return cls(kind=PatternKind.SOLID, a=colour, b=colour)

    @classmethod
    def stripes(cls, a: Colour, b: Colour) -> Pattern:
        return cls(kind=PatternKind.STRIPES, a=a, b=b)

    @classmethod
    def rings(cls, a: Colour, b: Colour) -> Pattern:
        return cls(kind=PatternKind.RINGS, a=a, b=b)

    @classmethod
    def checkers(cls, a: Colour, b: Colour) -> Pattern:
        return cls(kind=PatternKind.CHECKERS, a=a, b=b)

    @classmethod
    def gradient(cls, a: Colour, b: Colour) -> Pattern:
        return cls(kind=PatternKind.GRADIENT, a=a, b=b)

    @classmethod
    def radial(cls, a: Colour, b: Colour, sectors: int = 4) -> Pattern:
        return cls(kind=PatternKind.RADIAL, a=a, b=b, sectors=sectors)

    @classmethod
    def test(cls) -> Pattern:
        """Pattern whose colour is the pattern-space point itself."""
        return cls(kind=PatternKind.TEST)

    def with_transform(self, transform: Transform | npt.ArrayLike) -> Pattern:
        return replace(self, transform=as_transform(transform))

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def pattern_at(self, pattern_point: Vec4) -> Colour:
        """Evaluate the pattern at a point already in pattern space.

        Raises:
            ValueError: If the pattern kind is not recognised.
        """
        x, y, z = float(pattern_point[0]), float(pattern_point[1]), float(pattern_point[2])
        kind = self.kind

        if kind == PatternKind.SOLID:
            return self.a
        elif kind == PatternKind.STRIPES:
            return self.a if math.floor(x) % 2 == 0 else self.b
        elif kind == PatternKind.RINGS:
            return self.a if math.floor(math.sqrt(x * x + z * z)) % 2 == 0 else self.b
        elif kind == PatternKind.CHECKERS:
            total = math.floor(x) + math.floor(y) + math.floor(z)
            return self.a if total % 2 == 0 else self.b
        elif kind == PatternKind.GRADIENT:
            fraction = x - math.floor(x)
            return self.a + (self.b - self.a) * fraction
        elif kind == PatternKind.RADIAL:
            theta = math.atan2(z, x)
            sector_width = 2.0 * math.pi / self.sectors
            # atan2 returns pi for the negative x axis; fold it onto -pi
            sector = int((theta + math.pi) // sector_width) % self.sectors
            return self.a if sector % 2 == 0 else self.b
        elif kind == PatternKind.TEST:
            return Colour(x, y, z)
        else:
            raise ValueError(f"Unknown pattern kind: {kind}")

    def pattern_at_object(self, obj: SceneObject, world_point: Vec4) -> Colour:
        """Evaluate the pattern on an object at a world-space point."""
        object_point = obj.transform.apply_inverse(world_point)
        pattern_point = self.transform.apply_inverse(object_point)
        return self.pattern_at(pattern_point)
