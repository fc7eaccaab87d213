## spheres, boxes and tetrahedra for yapgeom

## Copyright (c) 2026 yapgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Solids: spheres, oriented boxes and tetrahedra.

Solids are filled: a point strictly between the surface and the center
is inside, and distances to interior points are zero.  Boxes and
tetrahedra take part in the pairwise predicates as convex polyhedra.

"""

from __future__ import annotations

import math
from itertools import permutations

from yapgeom import vec
from yapgeom import xform
from yapgeom.point import Point3d, Vector3d, as_point
from yapgeom.polytope import ConvexPolyhedron
from yapgeom.rotation import Rotation
from yapgeom.shape import Shape, _kind, _line_foot, _support
from yapgeom.tolerance import get_tolerance

## corner sign pattern along the box axes, bottom face (-z) first
_CORNERS = ((-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
            (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1))


def _positive(name, x):
    if not vec.isgoodnum(x) or x <= 0:
        raise ValueError('{} must be positive, got {}'.format(name, x))
    return float(x)


class Sphere(Shape):

    def __init__(self, center, radius, frame=None):
        self._center = as_point(center, frame)
        self._radius = _positive('sphere radius', radius)

    def __repr__(self):
        return "Sphere({!r}, {})".format(self._center, self._radius)

    @property
    def center(self) -> Point3d:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def frame(self):
        return self._center.frame

    @property
    def area(self) -> float:
        return 4.0 * math.pi * self._radius**2

    @property
    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self._radius**3

    def project_to_plane(self, plane):
        """orthogonal projection onto ``plane``: the circle of the same
        radius about the projected center"""
        from yapgeom.planar import Circle3d
        return Circle3d(self._center.project_to(plane), self._radius, plane.normal)

    def project_to(self, obj):
        """orthogonal projection onto a line (a segment of length ``2r``)
        or onto a plane (see :meth:`project_to_plane`)"""
        from yapgeom.linear import Segment3d
        if _kind(obj)[0] == "plane":
            return self.project_to_plane(obj)
        _, u = _support(obj, "line")
        foot = _line_foot(self._center.global_xyz(), obj)
        return Segment3d(self._center._moved(vec.madd(foot, u, -self._radius)),
                         self._center._moved(vec.madd(foot, u, self._radius)))

    projection_to = project_to

    def _scale(self):
        return self._radius

    def _map(self, point_fn, vector_fn):
        return Sphere(point_fn(self._center), self._radius)

    def _resolve(self):
        return "sphere", (self._center.global_xyz(), self._radius)

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        eps = get_tolerance().eps(max(self._radius, other._radius))
        return (vec.dist(self._center.global_xyz(), other._center.global_xyz()) <= eps and
                abs(self._radius - other._radius) <= eps)


class Box3d(Shape):
    """Box of full edge lengths ``lx``, ``ly``, ``lz`` about ``center``.

    The edges run along the columns of ``rotation`` expressed in the
    center's frame, so the default box is aligned with that frame and
    follows it when the frame moves.
    """

    def __init__(self, center=vec.ORIGIN, lx=1.0, ly=1.0, lz=1.0, rotation=None, frame=None):
        self._center = as_point(center, frame)
        self._lengths = (_positive('lx', lx), _positive('ly', ly), _positive('lz', lz))
        if rotation is None:
            m = xform.Identity()
        elif isinstance(rotation, Rotation):
            m = rotation.convert_to(self._center.frame).matrix
        else:
            raise ValueError('bad rotation: {}'.format(rotation))
        self._axes = tuple(Vector3d(m.getcol(i), frame=self._center.frame) for i in range(3))

    def __repr__(self):
        return "Box3d({!r}, {}, {}, {}, {!r})".format(self._center, *self._lengths, self.rotation)

    @property
    def center(self) -> Point3d:
        return self._center

    @property
    def frame(self):
        return self._center.frame

    @property
    def lx(self) -> float:
        return self._lengths[0]

    @property
    def ly(self) -> float:
        return self._lengths[1]

    @property
    def lz(self) -> float:
        return self._lengths[2]

    @property
    def rotation(self) -> Rotation:
        return Rotation(xform.FromColumns(*(a.xyz for a in self._axes)), self._center.frame)

    @property
    def axes(self):
        """unit edge directions as ``Vector3d``"""
        return self._axes

    def _global_axes(self):
        return tuple(vec.unit(a.global_xyz()) for a in self._axes)

    def corners(self):
        """the eight corners ``P1 .. P8``, bottom face first"""
        c = self._center.global_xyz()
        axes = self._global_axes()
        out = []
        for signs in _CORNERS:
            g = c
            for s, u, l in zip(signs, axes, self._lengths):
                g = vec.madd(g, u, 0.5*s*l)
            out.append(self._center._moved(g))
        return out

    @property
    def volume(self) -> float:
        lx, ly, lz = self._lengths
        return lx * ly * lz

    @property
    def area(self) -> float:
        lx, ly, lz = self._lengths
        return 2.0 * (lx*ly + ly*lz + lz*lx)

    @property
    def diagonal(self) -> float:
        return vec.mag(self._lengths)

    def is_axis_aligned(self) -> bool:
        """every edge parallel to a global coordinate axis"""
        eps = get_tolerance().eps(1.0)
        for u in self._global_axes():
            second = sorted(abs(x) for x in u)[1]
            if second > eps:
                return False
        return True

    def to_polyhedron(self) -> ConvexPolyhedron:
        return ConvexPolyhedron.from_box(self)

    def _scale(self):
        return self.diagonal

    def _map(self, point_fn, vector_fn):
        center = point_fn(self._center)
        axes = [vector_fn(a).convert_to(center.frame).xyz for a in self._axes]
        if vec.triple(*axes) < 0.0:
            ## mirrored: the box is symmetric, so flip one edge direction back
            axes[2] = vec.neg(axes[2])
        rotation = Rotation.from_matrix(xform.FromColumns(*axes), center.frame)
        return Box3d(center, *self._lengths, rotation=rotation)

    def _resolve(self):
        return self.to_polyhedron()._resolve()

    def __eq__(self, other):
        if not isinstance(other, Box3d):
            return NotImplemented
        eps = get_tolerance().eps(max(self.diagonal, other.diagonal))
        theirs = [p.global_xyz() for p in other.corners()]
        for p in self.corners():
            g = p.global_xyz()
            if not any(vec.dist(g, q) <= eps for q in theirs):
                return False
        return True


class Tetrahedron(Shape):

    def __init__(self, p1, p2, p3, p4, frame=None):
        self._points = tuple(as_point(p, frame) for p in (p1, p2, p3, p4))
        a, b, c, d = self._global_vertices()
        edge = self._longest_edge()
        v = vec.triple(vec.sub(b, a), vec.sub(c, a), vec.sub(d, a))
        if edge == 0.0 or abs(v) <= get_tolerance().eps(1.0) * edge**3:
            raise ValueError('degenerate tetrahedron: {}'.format(self._global_vertices()))

    def __repr__(self):
        return "Tetrahedron({!r}, {!r}, {!r}, {!r})".format(*self._points)

    @property
    def vertices(self):
        return self._points

    @property
    def frame(self):
        return self._points[0].frame

    def _global_vertices(self):
        return tuple(p.global_xyz() for p in self._points)

    def _longest_edge(self):
        g = self._global_vertices()
        return max(vec.dist(g[i], g[j]) for i in range(4) for j in range(i + 1, 4))

    @property
    def volume(self) -> float:
        a, b, c, d = self._global_vertices()
        return abs(vec.triple(vec.sub(b, a), vec.sub(c, a), vec.sub(d, a))) / 6.0

    @property
    def area(self) -> float:
        g = self._global_vertices()
        total = 0.0
        for i, j, k in ((0, 1, 2), (0, 1, 3), (1, 2, 3), (2, 0, 3)):
            total += 0.5 * vec.mag(vec.cross(vec.sub(g[j], g[i]), vec.sub(g[k], g[i])))
        return total

    @property
    def center(self) -> Point3d:
        """centroid of the vertices"""
        return self._points[0]._moved(vec.centroid(self._global_vertices()))

    def scale(self, factor) -> "Tetrahedron":
        """copy scaled by ``factor`` about the center"""
        if not vec.isgoodnum(factor) or factor <= 0:
            raise ValueError('scale factor must be positive, got {}'.format(factor))
        c = vec.centroid(self._global_vertices())
        return self._map(lambda p: p._moved(vec.madd(c, vec.sub(p.global_xyz(), c), factor)),
                         lambda u: u)

    def to_polyhedron(self) -> ConvexPolyhedron:
        return ConvexPolyhedron.from_tetrahedron(self)

    def _scale(self):
        return self._longest_edge()

    def _map(self, point_fn, vector_fn):
        return Tetrahedron(*(point_fn(p) for p in self._points))

    def _resolve(self):
        return self.to_polyhedron()._resolve()

    def __eq__(self, other):
        if not isinstance(other, Tetrahedron):
            return NotImplemented
        eps = get_tolerance().eps(max(self._scale(), other._scale()))
        mine = self._global_vertices()
        for theirs in permutations(other._global_vertices()):
            if all(vec.dist(p, q) <= eps for p, q in zip(mine, theirs)):
                return True
        return False


__all__ = ["Sphere", "Box3d", "Tetrahedron"]
