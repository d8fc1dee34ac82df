"""Unit tests for the Colour value type."""

import pytest


class TestColourArithmetic:
    """Tests for component-wise colour operations."""

    def test_add(self):
        """Test adding colours."""
        from glint.core.colour import Colour

        c = Colour(0.9, 0.6, 0.75) + Colour(0.7, 0.1, 0.25)
        assert c.isclose(Colour(1.6, 0.7, 1.0))

    def test_subtract(self):
        """Test subtracting colours."""
        from glint.core.colour import Colour

        c = Colour(0.9, 0.6, 0.75) - Colour(0.7, 0.1, 0.25)
        assert c.isclose(Colour(0.2, 0.5, 0.5))

    def test_scalar_multiply_both_sides(self):
        """Test multiplying by a scalar from either side."""
        from glint.core.colour import Colour

        c = Colour(0.2, 0.3, 0.4)
        assert (c * 2).isclose(Colour(0.4, 0.6, 0.8))
        assert (2 * c).isclose(Colour(0.4, 0.6, 0.8))

    def test_hadamard_product(self):
        """Test multiplying two colours component-wise."""
        from glint.core.colour import Colour

        c = Colour(1.0, 0.2, 0.4) * Colour(0.9, 1.0, 0.1)
        assert c.isclose(Colour(0.9, 0.2, 0.04))

    def test_values_are_not_clamped(self):
        """Test that colours may exceed the [0, 1] range."""
        from glint.core.colour import Colour

        c = Colour.white() * 3.0 - Colour(5.0, 0.0, 0.0)
        assert c.to_tuple() == pytest.approx((-2.0, 3.0, 3.0))


class TestColourConstructors:
    """Tests for named constructors and equality."""

    def test_named_colours(self):
        """Test black, white and grey constructors."""
        from glint.core.colour import Colour

        assert Colour.black() == Colour(0.0, 0.0, 0.0)
        assert Colour.white() == Colour(1.0, 1.0, 1.0)
        assert Colour.grey(0.5) == Colour(0.5, 0.5, 0.5)

    def test_from_sequence(self):
        """Test building a colour from a list."""
        from glint.core.colour import Colour

        assert Colour.from_sequence([0.1, 0.2, 0.3]) == Colour(0.1, 0.2, 0.3)

    def test_from_sequence_wrong_length(self):
        """Test that a two-element list is rejected."""
        from glint.core.colour import Colour

        with pytest.raises(ValueError, match="3 components"):
            Colour.from_sequence([0.1, 0.2])

    def test_isclose_tolerance(self):
        """Test isclose honours its tolerance."""
        from glint.core.colour import Colour

        a = Colour(0.5, 0.5, 0.5)
        b = Colour(0.5, 0.5, 0.5004)
        assert a.isclose(b, tol=1e-3)
        assert not a.isclose(b, tol=1e-5)
