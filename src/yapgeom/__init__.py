# -*- coding: utf-8 -*-
import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("yapgeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from yapgeom.tolerance import (  # noqa: E402
    ToleranceContext, get_tolerance, reset_tolerance, set_absolute_tolerance,
    set_context, set_tolerance,
)
from yapgeom.frame import GLOBAL, Frame  # noqa: E402
from yapgeom.rotation import EulerConvention, Quaternion, Rotation, slerp  # noqa: E402
from yapgeom.point import Point3d, Vector3d  # noqa: E402
from yapgeom.result import NO_INTERSECTION, Intersection, IntersectionKind  # noqa: E402
from yapgeom.linear import Line3d, Ray3d, Segment3d  # noqa: E402
from yapgeom.planar import Circle3d, Plane3d, Triangle  # noqa: E402
from yapgeom.polytope import ConvexPolyhedron, Face  # noqa: E402
from yapgeom.solid import Box3d, Sphere, Tetrahedron  # noqa: E402

__all__ = [
    "ToleranceContext", "get_tolerance", "reset_tolerance", "set_absolute_tolerance",
    "set_context", "set_tolerance",
    "GLOBAL", "Frame",
    "EulerConvention", "Quaternion", "Rotation", "slerp",
    "Point3d", "Vector3d",
    "NO_INTERSECTION", "Intersection", "IntersectionKind",
    "Line3d", "Ray3d", "Segment3d",
    "Circle3d", "Plane3d", "Triangle",
    "ConvexPolyhedron", "Face",
    "Box3d", "Sphere", "Tetrahedron",
]
