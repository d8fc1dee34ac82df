"""Phong surface material with reflection and refraction parameters.

Materials are immutable; the ``with_*`` builders return modified copies and
re-run validation, mirroring how the rest of the scene is assembled.

Example:
    >>> from glint.core.colour import Colour
    >>> from glint.materials.material import Material
    >>> glass = Material().with_transparency(1.0).with_ior(1.5)
    >>> red = Material().with_colour(Colour(1.0, 0.2, 0.2)).with_specular(0.3)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from glint.core.colour import Colour
from glint.core.ray import Vec4, dot, normalize, reflect
from glint.materials.pattern import Pattern

if TYPE_CHECKING:
    from glint.scene.light import PointLight
    from glint.scene.object import SceneObject


@dataclass(frozen=True)
class Material:
    """Surface response parameters for the Phong model.

    Attributes:
        ambient: Fraction of light reflected regardless of direction.
        diffuse: Lambertian reflectance factor.
        specular: Strength of the specular highlight.
        shininess: Phong exponent; larger values give tighter highlights.
        reflectivity: Mirror reflection weight in [0, 1].
        transparency: Refraction weight in [0, 1].
        ior: Index of refraction (>= 1.0; vacuum is 1.0, glass about 1.5).
        pattern: Surface colour source.

    Raises:
        ValueError: If reflectivity or transparency fall outside [0, 1],
            or ior is below 1.0.
    """

    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflectivity: float = 0.0
    transparency: float = 0.0
    ior: float = 1.0
    pattern: Pattern = field(default_factory=lambda: Pattern.solid(Colour.white()))

    def __post_init__(self) -> None:
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"reflectivity must be in [0, 1], got {self.reflectivity}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {self.transparency}")
        if self.ior < 1.0:
            raise ValueError(f"ior must be >= 1.0, got {self.ior}")

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def with_colour(self, colour: Colour) -> Material:
        """Replace the pattern with a solid colour."""
        return replace(self, pattern=Pattern.solid(colour))

    def with_pattern(self, pattern: Pattern) -> Material:
        return replace(self, pattern=pattern)

    def with_ambient(self, ambient: float) -> Material:
        return replace(self, ambient=ambient)

    def with_diffuse(self, diffuse: float) -> Material:
        return replace(self, diffuse=diffuse)

    def with_specular(self, specular: float) -> Material:
        return replace(self, specular=specular)

    def with_shininess(self, shininess: float) -> Material:
        return replace(self, shininess=shininess)

    def with_reflectivity(self, reflectivity: float) -> Material:
        return replace(self, reflectivity=reflectivity)

    def with_transparency(self, transparency: float) -> Material:
        return replace(self, transparency=transparency)

    def with_ior(self, ior: float) -> Material:
        return replace(self, ior=ior)

    # -------------------------------------------------------------------------
    # Lighting
    # -------------------------------------------------------------------------

    def lighting(
        self,
        obj: SceneObject,
        light: PointLight,
        position: Vec4,
        eye_vector: Vec4,
        normal: Vec4,
        in_shadow: bool,
    ) -> Colour:
        """Compute the Phong colour of a surface point lit by one light.

        Args:
            obj: The object being shaded (used to map the pattern).
            light: The point light.
            position: World-space surface point.
            eye_vector: Unit vector from the point toward the viewer.
            normal: Unit surface normal, already flipped toward the eye.
            in_shadow: Whether the light is occluded; if so only the
                ambient term contributes.

        Returns:
            ambient + diffuse + specular for this light.
        """
        colour = self.pattern.pattern_at_object(obj, position)
        effective = colour * light.colour
        ambient = effective * self.ambient

        light_vector = normalize(light.position - position)
        light_dot_normal = dot(light_vector, normal)

        if light_dot_normal < 0.0:
            # Light is on the other side of the surface
            diffuse = Colour.black()
            specular = Colour.black()
        else:
            diffuse = effective * self.diffuse * light_dot_normal
            reflect_vector = reflect(-light_vector, normal)
            reflect_dot_eye = dot(reflect_vector, eye_vector)
            if reflect_dot_eye <= 0.0:
                specular = Colour.black()
            else:
                factor = reflect_dot_eye**self.shininess
                specular = light.colour * self.specular * factor

        if in_shadow:
            return ambient
        return ambient + diffuse + specular
