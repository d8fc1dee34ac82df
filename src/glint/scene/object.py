"""Scene objects: a primitive placed in the world with a material.

An object couples a ShapeKind with a Transform (object space to world
space) and a Material. World-space rays are mapped into object space by the
cached inverse before the primitive is intersected, and object-space normals
are carried back with the inverse transpose.

Objects are immutable values. Two objects with the same shape, material,
transform and shadow flag compare equal, which is what the refraction
bookkeeping relies on when it tracks which objects a ray is inside.

Example:
    >>> from glint.core.ray import Ray, point, vector
    >>> from glint.core.transform import Transform
    >>> from glint.scene.object import SceneObject
    >>> ball = SceneObject.glass_sphere().with_transform(Transform().scale(2, 2, 2))
    >>> [i.t for i in ball.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [3.0, 7.0]
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy.typing as npt

from glint.core.intersection import Intersection
from glint.core.ray import Ray, Vec4
from glint.core.transform import Transform, as_transform
from glint.geometry.shapes import ShapeKind, intersect_shape, shape_normal_at
from glint.materials.material import Material


@dataclass(frozen=True)
class SceneObject:
    """A shape primitive with a transform and material.

    Attributes:
        shape: Which primitive this object is.
        material: Surface material.
        transform: Object-to-world transform (inverse cached inside).
        casts_shadow: Whether this object occludes lights when it is the
            nearest hit along a shadow ray.
    """

    shape: ShapeKind
    material: Material = field(default_factory=Material)
    transform: Transform = field(default_factory=Transform.identity)
    casts_shadow: bool = True

    @classmethod
    def sphere(cls) -> SceneObject:
        """Unit sphere at the origin with the default material."""
        return cls(shape=ShapeKind.SPHERE)

    @classmethod
    def plane(cls) -> SceneObject:
        """The x-z plane through the origin with the default material."""
        return cls(shape=ShapeKind.PLANE)

    @classmethod
    def glass_sphere(cls) -> SceneObject:
        """Unit sphere that is fully transparent with glass index 1.5."""
        material = Material().with_transparency(1.0).with_ior(1.5)
        return cls(shape=ShapeKind.SPHERE, material=material)

    def with_transform(self, transform: Transform | npt.ArrayLike) -> SceneObject:
        return replace(self, transform=as_transform(transform))

    def with_material(self, material: Material) -> SceneObject:
        return replace(self, material=material)

    def with_shadow(self, casts_shadow: bool) -> SceneObject:
        return replace(self, casts_shadow=casts_shadow)

    @property
    def inverse_transform(self) -> npt.NDArray:
        return self.transform.inverse

    def intersect(self, world_ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this object.

        Args:
            world_ray: The ray in world space.

        Returns:
            Intersections tagged with this object, in primitive order.
        """
        local_ray = world_ray.transform(self.transform.inverse)
        return [Intersection(t, self) for t in intersect_shape(self.shape, local_ray)]

    def normal_at(self, world_point: Vec4) -> Vec4:
        """Unit world-space surface normal at a world-space point."""
        local_point = self.transform.apply_inverse(world_point)
        local_normal = shape_normal_at(self.shape, local_point)
        return self.transform.apply_normal(local_normal)
