"""Unit tests for materials and the Phong lighting model.

Tests cover:
- Default parameters and validation
- Builder methods
- Lighting for the standard eye/light configurations
- Shadowed lighting and pattern sampling during lighting
"""

import math

import pytest


@pytest.fixture
def lit_surface():
    """A default material on a unit sphere, shaded at the origin."""
    from glint.core.ray import point
    from glint.materials.material import Material
    from glint.scene.object import SceneObject

    return Material(), SceneObject.sphere(), point(0, 0, 0)


class TestMaterialParameters:
    """Tests for defaults, validation and builders."""

    def test_defaults(self):
        """Test the default material parameters."""
        from glint.core.colour import Colour
        from glint.materials.material import Material
        from glint.materials.pattern import PatternKind

        m = Material()
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflectivity == 0.0
        assert m.transparency == 0.0
        assert m.ior == 1.0
        assert m.pattern.kind == PatternKind.SOLID
        assert m.pattern.a == Colour.white()

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"reflectivity": 1.5}, "reflectivity"),
            ({"reflectivity": -0.1}, "reflectivity"),
            ({"transparency": 2.0}, "transparency"),
            ({"ior": 0.5}, "ior"),
        ],
    )
    def test_invalid_parameters(self, kwargs, match):
        """Test out-of-range parameters raise ValueError."""
        from glint.materials.material import Material

        with pytest.raises(ValueError, match=match):
            Material(**kwargs)

    def test_builders_validate(self):
        """Test builders re-run validation."""
        from glint.materials.material import Material

        with pytest.raises(ValueError, match="ior"):
            Material().with_ior(0.9)

    def test_builders_return_copies(self):
        """Test each builder changes only its own field."""
        from glint.core.colour import Colour
        from glint.materials.material import Material
        from glint.materials.pattern import Pattern

        base = Material()
        assert base.with_ambient(0.5).ambient == 0.5
        assert base.with_diffuse(0.5).diffuse == 0.5
        assert base.with_specular(0.5).specular == 0.5
        assert base.with_shininess(10).shininess == 10
        assert base.with_reflectivity(0.5).reflectivity == 0.5
        assert base.with_transparency(0.5).transparency == 0.5
        assert base.with_ior(1.33).ior == 1.33
        assert base.with_colour(Colour(1, 0, 0)).pattern.a == Colour(1, 0, 0)
        stripes = Pattern.stripes(Colour.white(), Colour.black())
        assert base.with_pattern(stripes).pattern == stripes
        assert base == Material()


class TestLighting:
    """Tests for Material.lighting."""

    def test_eye_between_light_and_surface(self, lit_surface):
        """Test full ambient + diffuse + specular = 1.9."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        light = PointLight(point(0, 0, -10), Colour.white())
        result = m.lighting(obj, light, position, vector(0, 0, -1), vector(0, 0, -1), False)
        assert result.isclose(Colour.grey(1.9))

    def test_eye_offset_45_degrees(self, lit_surface):
        """Test the specular term vanishes with the eye at 45 degrees."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        r = math.sqrt(2) / 2
        light = PointLight(point(0, 0, -10), Colour.white())
        result = m.lighting(obj, light, position, vector(0, r, -r), vector(0, 0, -1), False)
        assert result.isclose(Colour.grey(1.0))

    def test_light_offset_45_degrees(self, lit_surface):
        """Test reduced diffuse with the light at 45 degrees."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        light = PointLight(point(0, 10, -10), Colour.white())
        result = m.lighting(obj, light, position, vector(0, 0, -1), vector(0, 0, -1), False)
        assert result.isclose(Colour.grey(0.7364), tol=1e-4)

    def test_eye_in_reflection_path(self, lit_surface):
        """Test full specular when the eye sits on the reflection vector."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        r = math.sqrt(2) / 2
        light = PointLight(point(0, 10, -10), Colour.white())
        result = m.lighting(obj, light, position, vector(0, -r, -r), vector(0, 0, -1), False)
        assert result.isclose(Colour.grey(1.6364), tol=1e-4)

    def test_light_behind_surface(self, lit_surface):
        """Test only ambient remains with the light behind the surface."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        light = PointLight(point(0, 0, 10), Colour.white())
        result = m.lighting(obj, light, position, vector(0, 0, -1), vector(0, 0, -1), False)
        assert result.isclose(Colour.grey(0.1))

    def test_surface_in_shadow(self, lit_surface):
        """Test only ambient remains in shadow."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        light = PointLight(point(0, 0, -10), Colour.white())
        result = m.lighting(obj, light, position, vector(0, 0, -1), vector(0, 0, -1), True)
        assert result.isclose(Colour.grey(0.1))

    def test_coloured_light(self, lit_surface):
        """Test the light colour tints the effective colour."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.scene.light import PointLight

        m, obj, position = lit_surface
        light = PointLight(point(0, 0, -10), Colour(1.0, 0.5, 0.0))
        result = m.lighting(obj, light, position, vector(0, 0, -1), vector(0, 0, -1), False)
        assert result.isclose(Colour(1.9, 0.95, 0.0))

    def test_pattern_applied(self):
        """Test lighting samples the pattern at the surface point."""
        from glint.core.colour import Colour
        from glint.core.ray import point, vector
        from glint.materials.material import Material
        from glint.materials.pattern import Pattern
        from glint.scene.light import PointLight
        from glint.scene.object import SceneObject

        m = (
            Material()
            .with_pattern(Pattern.stripes(Colour.white(), Colour.black()))
            .with_ambient(1)
            .with_diffuse(0)
            .with_specular(0)
        )
        obj = SceneObject.sphere()
        eye = vector(0, 0, -1)
        normal = vector(0, 0, -1)
        light = PointLight(point(0, 0, -10), Colour.white())
        assert m.lighting(obj, light, point(0.9, 0, 0), eye, normal, False) == Colour.white()
        assert m.lighting(obj, light, point(1.1, 0, 0), eye, normal, False) == Colour.black()
