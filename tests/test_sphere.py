"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting the unit sphere from outside (two roots, ascending)
- Ray tangent to the sphere (two equal roots)
- Ray missing the sphere
- Ray starting inside or beyond the sphere
- Object-space normals
"""

import math

import numpy as np
import pytest


class TestSphereIntersection:
    """Tests for ray-sphere intersection in object space."""

    def test_two_points(self):
        """Test a ray through the center hits at t = 4 and t = 6."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        ts = intersect_sphere(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert ts == pytest.approx((4.0, 6.0))

    def test_tangent(self):
        """Test a tangent ray yields two equal roots."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        ts = intersect_sphere(Ray(point(0, 1, -5), vector(0, 0, 1)))
        assert ts == pytest.approx((5.0, 5.0))

    def test_miss(self):
        """Test a ray passing above the sphere has no roots."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(point(0, 2, -5), vector(0, 0, 1))) == ()

    def test_origin_inside(self):
        """Test a ray starting at the center yields one negative and one positive root."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        ts = intersect_sphere(Ray(point(0, 0, 0), vector(0, 0, 1)))
        assert ts == pytest.approx((-1.0, 1.0))

    def test_sphere_behind_ray(self):
        """Test a sphere entirely behind the ray yields two negative roots."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        ts = intersect_sphere(Ray(point(0, 0, 5), vector(0, 0, 1)))
        assert ts == pytest.approx((-6.0, -4.0))

    def test_unnormalized_direction(self):
        """Test roots scale with the direction length (t in ray units)."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        ts = intersect_sphere(Ray(point(0, 0, -5), vector(0, 0, 2)))
        assert ts == pytest.approx((2.0, 3.0))

    def test_zero_direction_misses(self):
        """Test a zero-length direction yields no roots instead of dividing by zero."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(point(0, 0, 0), vector(0, 0, 0))) == ()
        assert intersect_sphere(Ray(point(0, 0, -5), vector(0, 0, 0))) == ()

    def test_large_scale_short_direction_still_hits(self):
        """Test a very short object-space direction is still intersected."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        ts = intersect_sphere(Ray(point(0, 0, -5), vector(0, 0, 0.001)))
        assert ts == pytest.approx((4000.0, 6000.0))

    def test_roots_ascending_for_many_rays(self):
        """Test the first root never exceeds the second."""
        from glint.core.ray import Ray, point, vector
        from glint.geometry.sphere import intersect_sphere

        rng = np.random.default_rng(7)
        for _ in range(50):
            o = rng.uniform(-3, 3, size=3)
            d = rng.uniform(-1, 1, size=3)
            ts = intersect_sphere(Ray(point(*o), vector(*d)))
            if ts:
                assert ts[0] <= ts[1]


class TestSphereNormal:
    """Tests for the unit sphere normal."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_axis_normals(self, p, expected):
        """Test normals on the axes point outward along the axis."""
        from glint.core.ray import point
        from glint.geometry.sphere import sphere_normal_at

        n = sphere_normal_at(point(*p))
        assert np.allclose(n, [*expected, 0])

    def test_nonaxial_normal_is_unit(self):
        """Test the normal at a non-axial surface point is a unit vector."""
        from glint.core.ray import is_vector, magnitude, point
        from glint.geometry.sphere import sphere_normal_at

        s = math.sqrt(3) / 3
        n = sphere_normal_at(point(s, s, s))
        assert is_vector(n)
        assert magnitude(n) == pytest.approx(1.0)
        assert np.allclose(n, [s, s, s, 0])
