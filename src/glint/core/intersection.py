"""Intersections and the sorted intersection set.

An IntersectionSet is built once per ray query and is immutable afterwards.
Ordering uses a tolerant comparison on t: two intersections whose t values
differ by less than EPSILON are considered equal, both when sorting and
when comparing for equality.

Example:
    >>> from glint.core.intersection import Intersection, IntersectionSet
    >>> from glint.scene.object import SceneObject
    >>> s = SceneObject.sphere()
    >>> xs = IntersectionSet([Intersection(5, s), Intersection(-3, s), Intersection(2, s)])
    >>> xs.hit().t
    2
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from typing import Any, overload

from glint.core.ray import EPSILON, Ray
from glint.core.shading import ShadingData, prepare_computations


@functools.total_ordering
class Intersection:
    """A ray parameter t paired with the object that was hit.

    Attributes:
        t: Distance along the ray, in units of the ray direction.
        object: The scene object hit at t.
    """

    __slots__ = ("t", "object")

    def __init__(self, t: float, obj: Any):
        self.t = t
        self.object = obj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return abs(self.t - other.t) < EPSILON

    def __lt__(self, other: Intersection) -> bool:
        return self.t < other.t and not abs(self.t - other.t) < EPSILON

    # Tolerant equality is not transitive, so intersections are unhashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection(t={self.t!r}, object={self.object!r})"


class IntersectionSet:
    """Intersections sorted ascending by t.

    Supports len(), indexing and iteration. The set is sorted once on
    construction with the tolerant comparator; Python's sort is stable,
    so intersections within EPSILON of each other keep their input order.
    """

    __slots__ = ("_items",)

    def __init__(self, intersections: Iterable[Intersection] = ()):
        self._items: tuple[Intersection, ...] = tuple(sorted(intersections))

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Intersection, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntersectionSet({list(self._items)!r})"

    def hit_index(self) -> int | None:
        """Index of the first intersection with t >= 0, or None."""
        for index, intersection in enumerate(self._items):
            if intersection.t >= 0.0:
                return index
        return None

    def hit(self) -> Intersection | None:
        """The visible intersection: smallest non-negative t, or None."""
        index = self.hit_index()
        if index is None:
            return None
        return self._items[index]

    def prepare_computations(self, index: int, ray: Ray) -> ShadingData:
        """Precompute shading data for the intersection at index.

        Args:
            index: Position of the intersection being shaded.
            ray: The ray that produced this set.

        Returns:
            A ShadingData with positions, vectors and refractive indices.

        Raises:
            IndexError: If index is outside the set.
        """
        return prepare_computations(self, index, ray)
