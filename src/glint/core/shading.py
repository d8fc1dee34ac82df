"""Shading data precomputed at a ray hit.

prepare_computations() gathers everything the lighting and recursion steps
need about one intersection: the world-space hit point, the eye and normal
vectors (normal flipped toward the eye when the hit is on an inside
surface), points nudged just above and below the surface, the reflection
vector, and the refractive indices on either side of the surface.

Refractive indices are found by walking the sorted intersections up to the
hit with a list of the objects the ray is currently inside. Entering an
object appends it; leaving removes it. n1 is the index of the innermost
object before the hit and n2 the innermost after it, with 1.0 (vacuum) when
the ray is outside everything.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from glint.core.ray import EPSILON, Ray, Vec4, dot, reflect

if TYPE_CHECKING:
    from glint.core.intersection import Intersection

# Refractive index outside every object
VACUUM_IOR = 1.0


@dataclass(eq=False)
class ShadingData:
    """Precomputed values for shading one intersection.

    Attributes:
        t: Ray parameter of the hit.
        object: The object that was hit.
        position: World-space hit point.
        position_above_surface: position + normal * EPSILON, used as the
            origin of shadow and reflection rays.
        position_below_surface: position - normal * EPSILON, used as the
            origin of refraction rays.
        eye_vector: Unit vector pointing back along the ray.
        normal: Unit surface normal, facing the eye.
        reflection_vector: The incoming direction mirrored about normal.
        n1: Refractive index of the medium the ray is leaving.
        n2: Refractive index of the medium the ray is entering.
        inside: True when the hit is on the inner side of a surface.
    """

    t: float
    object: Any
    position: Vec4
    position_above_surface: Vec4
    position_below_surface: Vec4
    eye_vector: Vec4
    normal: Vec4
    reflection_vector: Vec4
    n1: float
    n2: float
    inside: bool

    def schlick(self) -> float:
        """Fraction of light reflected, by Schlick's approximation.

        Returns:
            Reflectance in [0, 1]; exactly 1.0 under total internal
            reflection.
        """
        cos = dot(self.eye_vector, self.normal)

        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            # Going from denser to thinner medium, use the transmitted angle
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def _refractive_indices(
    intersections: Sequence[Intersection], index: int
) -> tuple[float, float]:
    containers: list[Any] = []
    n1 = n2 = VACUUM_IOR

    for i, intersection in enumerate(intersections):
        if i == index:
            n1 = containers[-1].material.ior if containers else VACUUM_IOR

        if intersection.object in containers:
            containers.remove(intersection.object)
        else:
            containers.append(intersection.object)

        if i == index:
            n2 = containers[-1].material.ior if containers else VACUUM_IOR
            break

    return n1, n2


def prepare_computations(
    intersections: Sequence[Intersection], index: int, ray: Ray
) -> ShadingData:
    """Precompute shading data for intersections[index].

    Args:
        intersections: All intersections along the ray, sorted by t.
        index: Which intersection is being shaded.
        ray: The ray that produced the intersections.

    Returns:
        The populated ShadingData.

    Raises:
        IndexError: If index does not address an intersection.
    """
    if not 0 <= index < len(intersections):
        raise IndexError(
            f"Intersection index {index} out of range for {len(intersections)} hits"
        )

    hit = intersections[index]
    obj = hit.object

    position = ray.position(hit.t)
    eye_vector = -ray.direction
    normal = obj.normal_at(position)

    inside = False
    if dot(normal, eye_vector) < 0.0:
        inside = True
        normal = -normal

    n1, n2 = _refractive_indices(intersections, index)

    return ShadingData(
        t=hit.t,
        object=obj,
        position=position,
        position_above_surface=position + normal * EPSILON,
        position_below_surface=position - normal * EPSILON,
        eye_vector=eye_vector,
        normal=normal,
        reflection_vector=reflect(ray.direction, normal),
        n1=n1,
        n2=n2,
        inside=inside,
    )
