"""Tagged intersection results."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional


class IntersectionKind(enum.Enum):
    NONE = "none"
    POINT = "point"
    SEGMENT = "segment"
    RAY = "ray"
    LINE = "line"
    PLANE = "plane"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SPHERE = "sphere"


@dataclass(frozen=True)
class Intersection:
    """Outcome of ``intersection_with``: a kind tag plus the shape.

    ``value`` is ``None`` exactly when ``kind`` is ``NONE``, and the
    result is falsy in that case, so ``if a.intersection_with(b):``
    reads naturally.  Shapes in a result are expressed in the global
    frame.
    """

    kind: IntersectionKind
    value: Optional[Any] = None

    def __post_init__(self):
        if (self.kind is IntersectionKind.NONE) != (self.value is None):
            raise ValueError('intersection kind {} does not match value {!r}'.format(self.kind, self.value))

    def __bool__(self):
        return self.kind is not IntersectionKind.NONE

    @classmethod
    def of(cls, value) -> "Intersection":
        """tag a shape with its kind"""
        if value is None:
            return NO_INTERSECTION
        return cls(_kind_of(value), value)


NO_INTERSECTION = Intersection(IntersectionKind.NONE)


def _kind_of(value) -> IntersectionKind:
    from yapgeom.linear import Line3d, Ray3d, Segment3d
    from yapgeom.planar import Circle3d, Plane3d, Triangle
    from yapgeom.point import Point3d
    from yapgeom.solid import Sphere

    table = (
        (Point3d, IntersectionKind.POINT),
        (Segment3d, IntersectionKind.SEGMENT),
        (Ray3d, IntersectionKind.RAY),
        (Line3d, IntersectionKind.LINE),
        (Plane3d, IntersectionKind.PLANE),
        (Circle3d, IntersectionKind.CIRCLE),
        (Triangle, IntersectionKind.TRIANGLE),
        (Sphere, IntersectionKind.SPHERE),
    )
    for cls, kind in table:
        if isinstance(value, cls):
            return kind
    raise ValueError('bad intersection value: {!r}'.format(value))


__all__ = ["IntersectionKind", "Intersection", "NO_INTERSECTION"]
