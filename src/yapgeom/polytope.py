## convex polyhedra for yapgeom

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

"""Convex polyhedra.

A :class:`ConvexPolyhedron` is a list of vertices plus faces given as
loops of vertex indices.  Face loops are oriented so that their normals
point outward; edges are the unordered vertex pairs on the face
boundaries.  Intersection tests use the separating axis theorem and
distances use closest-feature search, see :mod:`yapgeom.closest`.

The generic constructor validates its input::

    cube = ConvexPolyhedron(
        [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
         (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1)],
        [[0, 3, 2, 1], [4, 5, 6, 7], [0, 1, 5, 4],
         [2, 3, 7, 6], [1, 2, 6, 5], [0, 4, 7, 3]])

Every face must be planar, every vertex must lie on the inner side of
every face plane, every edge must be shared by exactly two faces, and
the volume must be positive; violations raise ``ValueError``.  The named
constructors (:meth:`ConvexPolyhedron.from_box`, the Platonic solids,
:meth:`Face.extrude`) are correct by construction and skip the checks.

"""

from __future__ import annotations

import math
from collections import Counter

from yapgeom import closest
from yapgeom import vec
from yapgeom.point import Point3d, Vector3d, as_point, as_vector
from yapgeom.shape import Shape
from yapgeom.tolerance import get_tolerance

_PHI = (1.0 + math.sqrt(5.0)) / 2.0

## face loops of a box, over the corners P1 .. P8
_BOX_FACES = ((0, 3, 2, 1), (4, 5, 6, 7), (0, 1, 5, 4),
              (2, 3, 7, 6), (1, 2, 6, 5), (0, 4, 7, 3))

_TETRAHEDRON_FACES = ((0, 1, 2), (0, 1, 3), (1, 2, 3), (2, 0, 3))

_OCTAHEDRON = (
    ((1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)),
    ((0, 2, 4), (2, 1, 4), (1, 3, 4), (3, 0, 4),
     (0, 3, 5), (3, 1, 5), (1, 2, 5), (2, 0, 5)))

_ICOSAHEDRON = (
    ((0, _PHI, 1), (0, _PHI, -1), (0, -_PHI, 1), (0, -_PHI, -1),
     (_PHI, 1, 0), (_PHI, -1, 0), (-_PHI, 1, 0), (-_PHI, -1, 0),
     (1, 0, _PHI), (-1, 0, _PHI), (1, 0, -_PHI), (-1, 0, -_PHI)),
    ((0, 4, 1), (0, 1, 6), (0, 6, 9), (0, 9, 8), (0, 8, 4),
     (1, 4, 10), (1, 10, 11), (1, 11, 6), (2, 3, 5), (2, 5, 8),
     (2, 8, 9), (2, 9, 7), (2, 7, 3), (3, 10, 5), (3, 7, 11),
     (3, 11, 10), (4, 8, 5), (4, 5, 10), (6, 7, 9), (6, 11, 7)))

_DODECAHEDRON = (
    ((-1, 1, 1), (-1, -1, 1), (1, -1, 1), (1, 1, 1),
     (-1, 1, -1), (-1, -1, -1), (1, -1, -1), (1, 1, -1),
     (0, _PHI, 1/_PHI), (0, -_PHI, 1/_PHI), (0, _PHI, -1/_PHI), (0, -_PHI, -1/_PHI),
     (_PHI, 1/_PHI, 0), (_PHI, -1/_PHI, 0), (-_PHI, 1/_PHI, 0), (-_PHI, -1/_PHI, 0),
     (1/_PHI, 0, _PHI), (-1/_PHI, 0, _PHI), (1/_PHI, 0, -_PHI), (-1/_PHI, 0, -_PHI)),
    ((0, 14, 15, 1, 17), (1, 15, 5, 11, 9), (1, 9, 2, 16, 17),
     (2, 9, 11, 6, 13), (0, 17, 16, 3, 8), (2, 13, 12, 3, 16),
     (0, 8, 10, 4, 14), (3, 12, 7, 10, 8), (4, 10, 7, 18, 19),
     (4, 19, 5, 15, 14), (6, 18, 7, 12, 13), (5, 19, 18, 6, 11)))


def _area_vector(points):
    """twice the vector area of a planar loop: its normal times twice
    its area"""
    n = vec.ORIGIN
    p0 = points[0]
    for i in range(1, len(points) - 1):
        n = vec.add(n, vec.cross(vec.sub(points[i], p0), vec.sub(points[i+1], p0)))
    return n


class Face:
    """One face of a polyhedron: vertices in outward counterclockwise
    order plus the outward unit normal."""

    def __init__(self, vertices, normal):
        self._vertices = tuple(vertices)
        self._normal = normal

    def __repr__(self):
        return "Face({!r})".format(self._vertices)

    @property
    def vertices(self):
        return self._vertices

    @property
    def normal(self) -> Vector3d:
        return self._normal

    def _global_vertices(self):
        return [p.global_xyz() for p in self._vertices]

    @property
    def area(self) -> float:
        return 0.5 * vec.mag(_area_vector(self._global_vertices()))

    @property
    def center(self) -> Point3d:
        return self._vertices[0]._moved(vec.centroid(self._global_vertices()))

    def extrude(self, normal, height, symmetric=False) -> "ConvexPolyhedron":
        """Prism swept by moving the face ``height`` along ``normal``.

        With ``symmetric=True`` the prism extends ``height/2`` to both
        sides of the face.  The sweep direction must not lie in the face
        plane.
        """
        d = vec.unit(as_vector(normal).global_xyz())
        if not vec.isgoodnum(height) or height == 0:
            raise ValueError('extrusion height must be nonzero, got {}'.format(height))
        if get_tolerance().is_zero(vec.dot(d, self._normal.global_xyz()), 1.0):
            raise ValueError('extrusion direction lies in the face plane')
        g = self._global_vertices()
        offset = vec.scale3(d, height)
        if symmetric:
            bottom = [vec.madd(p, offset, -0.5) for p in g]
            top = [vec.madd(p, offset, 0.5) for p in g]
        else:
            bottom = g
            top = [vec.add(p, offset) for p in g]
        n = len(g)
        loops = [list(range(n)), list(range(n, 2*n))]
        for i in range(n):
            j = (i + 1) % n
            loops.append([i, j, n + j, n + i])
        p0 = self._vertices[0]
        return ConvexPolyhedron._trusted([p0._moved(p) for p in bottom + top], loops)


class ConvexPolyhedron(Shape):

    def __init__(self, vertices, faces, frame=None):
        points = [as_point(p, frame) for p in vertices]
        loops = [list(f) for f in faces]
        self._validate_indices(points, loops)
        self._build(points, loops)
        self._validate()

    @classmethod
    def _trusted(cls, points, loops):
        obj = cls.__new__(cls)
        obj._build(list(points), [list(f) for f in loops])
        return obj

    ## construction
    ## ------------

    @staticmethod
    def _validate_indices(points, loops):
        if len(points) < 4 or len(loops) < 4:
            raise ValueError('a polyhedron needs at least 4 vertices and 4 faces')
        for loop in loops:
            if len(loop) < 3:
                raise ValueError('face {} has fewer than 3 vertices'.format(loop))
            if len(set(loop)) != len(loop):
                raise ValueError('face {} repeats a vertex'.format(loop))
            for i in loop:
                if not 0 <= i < len(points):
                    raise ValueError('face {} indexes a missing vertex'.format(loop))

    def _build(self, points, loops):
        """orient the face loops outward and collect the edges"""
        g = [p.global_xyz() for p in points]
        inner = vec.centroid(g)
        for loop in loops:
            n = _area_vector([g[i] for i in loop])
            if vec.mag(n) == 0.0:
                raise ValueError('degenerate face {}'.format(loop))
            if vec.dot(n, vec.sub(vec.centroid([g[i] for i in loop]), inner)) < 0.0:
                loop.reverse()
        edges = []
        seen = set()
        for loop in loops:
            for k in range(len(loop)):
                e = tuple(sorted((loop[k], loop[(k+1) % len(loop)])))
                if e not in seen:
                    seen.add(e)
                    edges.append(e)
        self._points = points
        self._loops = loops
        self._edges = edges

    ## normals follow the vertices, whose frames may move
    def _normals(self, g):
        return [vec.unit(_area_vector([g[i] for i in loop])) for loop in self._loops]

    def _validate(self):
        g = self._global_vertices()
        eps = get_tolerance().eps(self._scale())
        for loop, n in zip(self._loops, self._normals(g)):
            q = g[loop[0]]
            if any(abs(vec.dot(vec.sub(g[i], q), n)) > eps for i in loop):
                raise ValueError('face {} is not planar'.format(loop))
            if any(vec.dot(vec.sub(p, q), n) > eps for p in g):
                raise ValueError('polyhedron is not convex at face {}'.format(loop))
        uses = Counter()
        for loop in self._loops:
            for k in range(len(loop)):
                uses[(loop[k], loop[(k+1) % len(loop)])] += 1
        for (i, j), count in uses.items():
            if count != 1 or uses.get((j, i)) != 1:
                raise ValueError('polyhedron is not closed at edge {}'.format((i, j)))
        if self.volume <= 0.0:
            raise ValueError('polyhedron has no volume')

    @classmethod
    def from_box(cls, box) -> "ConvexPolyhedron":
        return cls._trusted(box.corners(), _BOX_FACES)

    @classmethod
    def from_tetrahedron(cls, tetrahedron) -> "ConvexPolyhedron":
        return cls._trusted(tetrahedron.vertices, _TETRAHEDRON_FACES)

    @classmethod
    def _platonic(cls, table, frame):
        points, loops = table
        return cls._trusted([as_point(p, frame) for p in points], loops)

    @classmethod
    def octahedron(cls, frame=None) -> "ConvexPolyhedron":
        """regular octahedron with vertices on the unit axes"""
        return cls._platonic(_OCTAHEDRON, frame)

    @classmethod
    def icosahedron(cls, frame=None) -> "ConvexPolyhedron":
        """regular icosahedron of edge 2 about the origin"""
        return cls._platonic(_ICOSAHEDRON, frame)

    @classmethod
    def dodecahedron(cls, frame=None) -> "ConvexPolyhedron":
        """regular dodecahedron with the cube (+-1, +-1, +-1) among its
        vertices"""
        return cls._platonic(_DODECAHEDRON, frame)

    def copy(self) -> "ConvexPolyhedron":
        return ConvexPolyhedron._trusted(list(self._points), self._loops)

    ## queries
    ## -------

    def __repr__(self):
        return "ConvexPolyhedron({} vertices, {} faces)".format(self.vertex_count, self.face_count)

    @property
    def vertices(self):
        return list(self._points)

    @property
    def faces(self):
        g = self._global_vertices()
        return [Face([self._points[i] for i in loop], Vector3d(n))
                for loop, n in zip(self._loops, self._normals(g))]

    @property
    def edges(self):
        from yapgeom.linear import Segment3d
        return [Segment3d(self._points[i], self._points[j]) for i, j in self._edges]

    @property
    def vertex_count(self) -> int:
        return len(self._points)

    @property
    def face_count(self) -> int:
        return len(self._loops)

    def _global_vertices(self):
        return [p.global_xyz() for p in self._points]

    def _tetrahedra(self):
        """signed volume and centroid of the fan tetrahedra over the
        first vertex"""
        g = self._global_vertices()
        r = g[0]
        for loop in self._loops:
            a = g[loop[0]]
            for k in range(1, len(loop) - 1):
                b = g[loop[k]]
                c = g[loop[k+1]]
                v = vec.triple(vec.sub(a, r), vec.sub(b, r), vec.sub(c, r)) / 6.0
                yield v, vec.centroid((r, a, b, c))

    @property
    def volume(self) -> float:
        return sum(v for v, _ in self._tetrahedra())

    @property
    def area(self) -> float:
        g = self._global_vertices()
        return sum(0.5 * vec.mag(_area_vector([g[i] for i in loop])) for loop in self._loops)

    def _center(self):
        total = 0.0
        moment = vec.ORIGIN
        for v, c in self._tetrahedra():
            total += v
            moment = vec.madd(moment, c, v)
        return vec.scale3(moment, 1.0/total)

    @property
    def center(self) -> Point3d:
        """center of mass of the solid"""
        return self._points[0]._moved(self._center())

    def point_location(self, p) -> int:
        """1 inside, 0 on the boundary, -1 outside"""
        p = as_point(p)
        eps = get_tolerance().eps(max(self._scale(), p._scale()))
        m = self._poly().margin(p.global_xyz())
        if m > eps:
            return -1
        if m >= -eps:
            return 0
        return 1

    def scale(self, factor) -> "ConvexPolyhedron":
        """copy scaled by ``factor`` about the center"""
        if not vec.isgoodnum(factor) or factor <= 0:
            raise ValueError('scale factor must be positive, got {}'.format(factor))
        c = self._center()
        points = [p._moved(vec.madd(c, vec.sub(p.global_xyz(), c), factor)) for p in self._points]
        return ConvexPolyhedron._trusted(points, self._loops)

    ## shape protocol
    ## --------------

    def _poly(self):
        g = self._global_vertices()
        return closest.Poly(g, [(tuple(loop), n) for loop, n in zip(self._loops, self._normals(g))],
                            self._edges)

    def _resolve(self):
        return "poly", self._poly()

    def _scale(self):
        c = self._center()
        return max(vec.dist(c, p) for p in self._global_vertices())

    def _map(self, point_fn, vector_fn):
        return ConvexPolyhedron._trusted([point_fn(p) for p in self._points], self._loops)

    def __eq__(self, other):
        if not isinstance(other, ConvexPolyhedron):
            return NotImplemented
        if self.vertex_count != other.vertex_count or self.face_count != other.face_count:
            return False
        eps = get_tolerance().eps(max(self._scale(), other._scale()))
        theirs = other._global_vertices()
        return all(any(vec.dist(p, q) <= eps for q in theirs) for p in self._global_vertices())


__all__ = ["ConvexPolyhedron", "Face"]
