"""World: the scene composer and recursive shading loop.

A World owns the objects and lights of a scene and turns a ray into a
colour. The recursion is bounded by a ``remaining`` budget that every
reflected or refracted bounce decrements:

    colour_at -> shade_hit -> reflected_colour -> colour_at ...
                           -> refracted_colour -> colour_at ...

When the budget reaches zero the secondary contributions are black, so
rendering always terminates, even between two facing mirrors.

Example:
    >>> from glint.core.ray import Ray, point, vector
    >>> from glint.scene.world import default_world
    >>> world = default_world()
    >>> world.colour_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    Colour(r=0.38066..., g=0.47583..., b=0.2855...)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from glint.core.colour import Colour
from glint.core.intersection import IntersectionSet
from glint.core.ray import EPSILON, Ray, Vec4, dot, magnitude, normalize, point
from glint.core.shading import ShadingData
from glint.core.transform import Transform
from glint.materials.material import Material
from glint.scene.light import PointLight
from glint.scene.object import SceneObject

# Default bound on reflection/refraction bounces per primary ray
DEFAULT_RECURSION_LIMIT = 5


@dataclass(frozen=True)
class World:
    """An immutable collection of objects and lights.

    Attributes:
        objects: Scene objects, intersected by linear scan.
        lights: Point lights; their contributions are summed.
        recursion_limit: Default bounce budget used by colour_at().
    """

    objects: tuple[SceneObject, ...] = ()
    lights: tuple[PointLight, ...] = ()
    recursion_limit: int = DEFAULT_RECURSION_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "objects", tuple(self.objects))
        object.__setattr__(self, "lights", tuple(self.lights))
        if self.recursion_limit < 0:
            raise ValueError(
                f"recursion_limit must be non-negative, got {self.recursion_limit}"
            )

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def with_object(self, obj: SceneObject) -> World:
        return replace(self, objects=self.objects + (obj,))

    def with_light(self, light: PointLight) -> World:
        return replace(self, lights=self.lights + (light,))

    def with_recursions(self, recursion_limit: int) -> World:
        return replace(self, recursion_limit=recursion_limit)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def intersect(self, ray: Ray) -> IntersectionSet:
        """All intersections of ray with every object, sorted by t."""
        hits = []
        for obj in self.objects:
            hits.extend(obj.intersect(ray))
        return IntersectionSet(hits)

    def is_shadowed(self, light_position: Vec4, position: Vec4) -> bool:
        """Check whether a light is occluded from a point.

        Only the nearest hit along the shadow ray is considered: the point
        is in shadow when that hit lies before the light and its object
        casts shadows.

        Args:
            light_position: World-space position of the light.
            position: The point being tested, usually already offset above
                the surface to avoid self-shadowing.

        A point coinciding with the light is never shadowed.
        """
        to_light = light_position - position
        distance = magnitude(to_light)
        if distance < EPSILON:
            return False
        hit = self.intersect(Ray(position, normalize(to_light))).hit()
        return hit is not None and hit.t < distance and hit.object.casts_shadow

    # -------------------------------------------------------------------------
    # Shading
    # -------------------------------------------------------------------------

    def shade_hit(self, comps: ShadingData, remaining: int) -> Colour:
        """Colour at a precomputed hit: local lighting plus secondary rays.

        Args:
            comps: Shading data for the hit.
            remaining: Bounce budget left for reflection and refraction.

        Returns:
            The composed colour. When the material is both reflective and
            transparent the secondary terms are blended by Schlick
            reflectance.
        """
        material = comps.object.material

        surface = Colour.black()
        for light in self.lights:
            shadowed = self.is_shadowed(light.position, comps.position_above_surface)
            surface = surface + material.lighting(
                comps.object,
                light,
                comps.position,
                comps.eye_vector,
                comps.normal,
                shadowed,
            )

        reflected = self.reflected_colour(comps, remaining)
        refracted = self.refracted_colour(comps, remaining)

        if material.reflectivity > 0.0 and material.transparency > 0.0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_colour(self, comps: ShadingData, remaining: int) -> Colour:
        reflectivity = comps.object.material.reflectivity
        if remaining <= 0 or reflectivity == 0.0:
            return Colour.black()

        reflect_ray = Ray(comps.position_above_surface, comps.reflection_vector)
        return self.colour_at(reflect_ray, remaining - 1) * reflectivity

    def refracted_colour(self, comps: ShadingData, remaining: int) -> Colour:
        """Colour seen through a transparent surface, by Snell's law.

        Returns black when the budget is exhausted, the material is opaque,
        or the ray undergoes total internal reflection.
        """
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return Colour.black()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eye_vector, comps.normal)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return Colour.black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye_vector * n_ratio
        refract_ray = Ray(comps.position_below_surface, direction)
        return self.colour_at(refract_ray, remaining - 1) * transparency

    def colour_at(self, ray: Ray, remaining: int | None = None) -> Colour:
        """Colour seen along a ray.

        Args:
            ray: The ray to trace.
            remaining: Bounce budget; defaults to recursion_limit.

        Returns:
            Black if nothing is hit, otherwise the shaded colour of the hit.
        """
        if remaining is None:
            remaining = self.recursion_limit

        intersections = self.intersect(ray)
        index = intersections.hit_index()
        if index is None:
            return Colour.black()

        comps = intersections.prepare_computations(index, ray)
        return self.shade_hit(comps, remaining)


def default_world() -> World:
    """Two concentric spheres lit by a white light at (-10, 10, -10)."""
    outer = SceneObject.sphere().with_material(
        Material()
        .with_colour(Colour(0.8, 1.0, 0.6))
        .with_diffuse(0.7)
        .with_specular(0.2)
    )
    inner = SceneObject.sphere().with_transform(Transform().scale(0.5, 0.5, 0.5))
    light = PointLight(point(-10.0, 10.0, -10.0), Colour.white())
    return World(objects=(outer, inner), lights=(light,))
