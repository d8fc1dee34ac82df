"""RGB colour value type.

Colours are unclamped floats: lighting sums can exceed 1.0 and are only
clamped when a canvas is converted to 8-bit for export.

Example:
    >>> from glint.core.colour import Colour
    >>> Colour(0.9, 0.6, 0.75) * Colour(0.7, 0.1, 0.25)
    Colour(r=0.63, g=0.06, b=0.1875)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Colour:
    """An RGB triple with component-wise arithmetic.

    Attributes:
        r: Red component.
        g: Green component.
        b: Blue component.
    """

    r: float
    g: float
    b: float

    @classmethod
    def black(cls) -> Colour:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Colour:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def grey(cls, value: float) -> Colour:
        return cls(value, value, value)

    @classmethod
    def from_sequence(cls, values) -> Colour:
        """Build a colour from any 3-element sequence.

        Raises:
            ValueError: If values does not have exactly three elements.
        """
        values = list(values)
        if len(values) != 3:
            raise ValueError(f"Colour needs 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def __add__(self, other: Colour) -> Colour:
        return Colour(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Colour) -> Colour:
        return Colour(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Colour | float) -> Colour:
        # Colour * Colour is the Hadamard (component-wise) product
        if isinstance(other, Colour):
            return Colour(self.r * other.r, self.g * other.g, self.b * other.b)
        return Colour(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: float) -> Colour:
        return self * other

    def isclose(self, other: Colour, tol: float = 1e-5) -> bool:
        """Check whether two colours match component-wise within tol."""
        return (
            abs(self.r - other.r) < tol
            and abs(self.g - other.g) < tol
            and abs(self.b - other.b) < tol
        )

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)
