"""Point light source."""

from dataclasses import dataclass, field

import numpy as np

from glint.core.colour import Colour
from glint.core.ray import Vec4


@dataclass(eq=False)
class PointLight:
    """A light with no size, emitting equally in all directions.

    Attributes:
        position: World-space position (a point).
        colour: Intensity of the light.
    """

    position: Vec4
    colour: Colour = field(default_factory=Colour.white)

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.colour == other.colour and bool(
            np.array_equal(self.position, other.position)
        )

    __hash__ = None
