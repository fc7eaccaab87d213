## planes, circles and triangles for yapgeom

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

"""Planar objects: planes, circles and triangles.

A circle is the flat disk it bounds: distances and containment treat
its interior as part of the shape.

"""

from __future__ import annotations

import math
from itertools import permutations

from yapgeom import vec
from yapgeom.linear import collinear_hull
from yapgeom.point import Point3d, Vector3d, as_point, as_vector
from yapgeom.shape import Shape, _line_foot, _support, is_parallel
from yapgeom.tolerance import get_tolerance


def _normal(normal, frame):
    n = as_vector(normal, frame)
    if vec.mag(n.global_xyz()) == 0.0:
        raise ValueError('zero-length normal not allowed')
    return n


class Plane3d(Shape):
    """plane through ``point`` with normal ``normal``"""

    def __init__(self, point, normal, frame=None):
        self._point = as_point(point, frame)
        self._normal = _normal(normal, frame)

    @classmethod
    def from_coefficients(cls, a, b, c, d, frame=None):
        """plane ``a*x + b*y + c*z + d = 0`` in ``frame`` coordinates"""
        n = (a, b, c)
        m2 = vec.mag2(n)
        if m2 == 0.0:
            raise ValueError('plane coefficients a, b, c are all zero')
        return cls(vec.scale3(n, -d/m2), n, frame)

    def __repr__(self):
        return "Plane3d({!r}, {!r})".format(self._point, self._normal)

    @property
    def point(self) -> Point3d:
        return self._point

    @property
    def normal(self) -> Vector3d:
        return self._normal

    @property
    def frame(self):
        return self._point.frame

    def coefficients(self):
        """``(a, b, c, d)`` in global coordinates, with a unit normal"""
        q, n = self._global_plane()
        return n[0], n[1], n[2], -vec.dot(n, q)

    def intersection_with_planes(self, second, third):
        """common part of this plane and two others, as an
        ``Intersection`` of kind POINT, LINE, PLANE or NONE"""
        from yapgeom import pairs
        return pairs.intersection_of_planes(self, second, third)

    def _global_plane(self):
        return self._point.global_xyz(), vec.unit(self._normal.global_xyz())

    def _orientation(self):
        q, n = self._global_plane()
        return "plane", q, n

    def _scale(self):
        return vec.mag(self._point.global_xyz())

    def _map(self, point_fn, vector_fn):
        return Plane3d(point_fn(self._point), vector_fn(self._normal))

    def _resolve(self):
        return "plane", self._global_plane()

    def __eq__(self, other):
        if not isinstance(other, Plane3d):
            return NotImplemented
        if not is_parallel(self, other):
            return False
        q, n = self._global_plane()
        eps = get_tolerance().eps(max(self._scale(), other._scale()))
        return abs(vec.dot(vec.sub(other._point.global_xyz(), q), n)) <= eps


class Circle3d(Shape):
    """circle (disk) of ``radius`` about ``center``, perpendicular to
    ``normal``"""

    def __init__(self, center, radius, normal=vec.ZAXIS, frame=None):
        self._center = as_point(center, frame)
        if not vec.isgoodnum(radius) or radius <= 0:
            raise ValueError('circle radius must be positive, got {}'.format(radius))
        self._radius = float(radius)
        self._normal = _normal(normal, frame)

    @classmethod
    def from_points(cls, p1, p2, p3, frame=None):
        """circle through three points; they must not be collinear"""
        return Triangle(p1, p2, p3, frame).circumcircle()

    def __repr__(self):
        return "Circle3d({!r}, {}, {!r})".format(self._center, self._radius, self._normal)

    @property
    def center(self) -> Point3d:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def normal(self) -> Vector3d:
        return self._normal

    @property
    def frame(self):
        return self._center.frame

    @property
    def area(self) -> float:
        return math.pi * self._radius**2

    @property
    def perimeter(self) -> float:
        return 2.0 * math.pi * self._radius

    def parametric(self, t) -> Point3d:
        """point of the rim at angle ``t`` (radians) from a fixed in-plane
        reference direction"""
        c, n, r = self._global_disk()
        u, v = vec.basis(n)
        g = vec.madd(vec.madd(c, u, r*math.cos(t)), v, r*math.sin(t))
        return self._center._moved(g)

    def to_plane(self) -> Plane3d:
        return Plane3d(self._center, self._normal)

    def project_to(self, line):
        """orthogonal projection of the disk onto the line carrying
        ``line``"""
        c, n, r = self._global_disk()
        _, u = _support(line, "line")
        half = r*math.sqrt(max(0.0, 1.0 - vec.dot(u, n)**2))
        foot = _line_foot(c, line)
        return collinear_hull([vec.madd(foot, u, -half), vec.madd(foot, u, half)],
                              self._center, self._radius)

    projection_to = project_to

    def _global_disk(self):
        return self._center.global_xyz(), vec.unit(self._normal.global_xyz()), self._radius

    def _orientation(self):
        c, n, _ = self._global_disk()
        return "plane", c, n

    def _scale(self):
        return self._radius

    def _map(self, point_fn, vector_fn):
        return Circle3d(point_fn(self._center), self._radius, vector_fn(self._normal))

    def _resolve(self):
        return "disk", self._global_disk()

    def __eq__(self, other):
        if not isinstance(other, Circle3d):
            return NotImplemented
        eps = get_tolerance().eps(max(self._radius, other._radius))
        return (vec.dist(self._center.global_xyz(), other._center.global_xyz()) <= eps and
                abs(self._radius - other._radius) <= eps and
                is_parallel(self, other))


class Triangle(Shape):
    """triangle with vertices ``a``, ``b``, ``c``"""

    def __init__(self, a, b, c, frame=None):
        self._a = as_point(a, frame)
        self._b = as_point(b, frame)
        self._c = as_point(c, frame)
        ga, gb, gc = self._global_vertices()
        side = max(vec.dist(ga, gb), vec.dist(gb, gc), vec.dist(gc, ga))
        if side == 0.0 or vec.mag(vec.cross(vec.sub(gb, ga), vec.sub(gc, ga))) <= get_tolerance().eps(1.0)*side*side:
            raise ValueError('degenerate triangle: {}, {}, {}'.format(ga, gb, gc))

    def __repr__(self):
        return "Triangle({!r}, {!r}, {!r})".format(self._a, self._b, self._c)

    @property
    def vertices(self):
        return self._a, self._b, self._c

    @property
    def frame(self):
        return self._a.frame

    def _global_vertices(self):
        return self._a.global_xyz(), self._b.global_xyz(), self._c.global_xyz()

    def sides(self):
        """lengths of the sides opposite ``a``, ``b`` and ``c``"""
        a, b, c = self._global_vertices()
        return vec.dist(b, c), vec.dist(c, a), vec.dist(a, b)

    @property
    def area(self) -> float:
        a, b, c = self._global_vertices()
        return 0.5 * vec.mag(vec.cross(vec.sub(b, a), vec.sub(c, a)))

    @property
    def perimeter(self) -> float:
        return sum(self.sides())

    @property
    def centroid(self) -> Point3d:
        return self._a._moved(vec.centroid(self._global_vertices()))

    @property
    def normal(self) -> Vector3d:
        """unit normal, right-handed with respect to ``a, b, c``"""
        a, b, c = self._global_vertices()
        return Vector3d(vec.unit(vec.cross(vec.sub(b, a), vec.sub(c, a)))).convert_to(self.frame)

    def angles(self):
        """interior angles at ``a``, ``b`` and ``c``, in radians"""
        la, lb, lc = self.sides()

        def opposite(x, y, z):
            return math.acos(max(-1.0, min(1.0, (y*y + z*z - x*x)/(2.0*y*z))))

        return opposite(la, lb, lc), opposite(lb, lc, la), opposite(lc, la, lb)

    ## centers and associated circles
    ## ------------------------------

    def _circumcenter(self):
        a, b, c = self._global_vertices()
        ab = vec.sub(b, a)
        ac = vec.sub(c, a)
        n = vec.cross(ab, ac)
        w = vec.add(vec.scale3(vec.cross(n, ab), vec.mag2(ac)),
                    vec.scale3(vec.cross(ac, n), vec.mag2(ab)))
        return vec.madd(a, w, 0.5/vec.mag2(n))

    @property
    def circumcenter(self) -> Point3d:
        """center of the circle through the three vertices"""
        return self._a._moved(self._circumcenter())

    @property
    def incenter(self) -> Point3d:
        """meeting point of the angle bisectors"""
        la, lb, lc = self.sides()
        a, b, c = self._global_vertices()
        w = vec.add(vec.add(vec.scale3(a, la), vec.scale3(b, lb)), vec.scale3(c, lc))
        return self._a._moved(vec.scale3(w, 1.0/(la + lb + lc)))

    @property
    def orthocenter(self) -> Point3d:
        """meeting point of the altitudes"""
        ## H = A + B + C - 2 O, with O the circumcenter
        a, b, c = self._global_vertices()
        s = vec.add(vec.add(a, b), c)
        return self._a._moved(vec.madd(s, self._circumcenter(), -2.0))

    def circumcircle(self) -> Circle3d:
        o = self._circumcenter()
        return Circle3d(self._a._moved(o), vec.dist(o, self._a.global_xyz()), self.normal)

    def incircle(self) -> Circle3d:
        return Circle3d(self.incenter, 2.0*self.area/self.perimeter, self.normal)

    ## classification
    ## --------------
    ##
    ## sides compare at the scale of the longest side, angles at scale 1

    def _equal_sides(self):
        la, lb, lc = self.sides()
        tol = get_tolerance()
        scale = max(la, lb, lc)
        return (tol.almost_equal(la, lb, scale), tol.almost_equal(lb, lc, scale),
                tol.almost_equal(lc, la, scale))

    def is_equilateral(self) -> bool:
        return all(self._equal_sides())

    def is_isosceles(self) -> bool:
        """at least two sides of the same length"""
        return any(self._equal_sides())

    def is_scalene(self) -> bool:
        return not any(self._equal_sides())

    def is_right(self) -> bool:
        tol = get_tolerance()
        return any(tol.almost_equal(x, 0.5*math.pi, 1.0) for x in self.angles())

    def is_obtuse(self) -> bool:
        tol = get_tolerance()
        return any(tol.greater(x, 0.5*math.pi, 1.0) for x in self.angles())

    def is_acute(self) -> bool:
        tol = get_tolerance()
        return all(tol.smaller(x, 0.5*math.pi, 1.0) for x in self.angles())

    ## derived shapes
    ## --------------

    def scale(self, factor, center=None) -> "Triangle":
        """copy scaled by ``factor`` about ``center`` (a ``Point3d``; the
        centroid by default)"""
        if not vec.isgoodnum(factor) or factor <= 0:
            raise ValueError('scale factor must be positive, got {}'.format(factor))
        c = (self.centroid if center is None else as_point(center)).global_xyz()
        return self._map(lambda p: p._moved(vec.madd(c, vec.sub(p.global_xyz(), c), factor)),
                         lambda u: u)

    def project_to(self, line):
        """orthogonal projection onto the line carrying ``line``: a
        segment, or a point when the triangle is perpendicular to it"""
        feet = [_line_foot(p, line) for p in self._global_vertices()]
        return collinear_hull(feet, self._a, self._scale())

    projection_to = project_to

    def to_plane(self) -> Plane3d:
        return Plane3d(self._a, self.normal)

    def _orientation(self):
        a, b, c = self._global_vertices()
        return "plane", a, vec.unit(vec.cross(vec.sub(b, a), vec.sub(c, a)))

    def _scale(self):
        return max(self.sides())

    def _map(self, point_fn, vector_fn):
        return Triangle(point_fn(self._a), point_fn(self._b), point_fn(self._c))

    def _resolve(self):
        return "triangle", self._global_vertices()

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        eps = get_tolerance().eps(max(self._scale(), other._scale()))
        mine = self._global_vertices()
        for theirs in permutations(other._global_vertices()):
            if all(vec.dist(p, q) <= eps for p, q in zip(mine, theirs)):
                return True
        return False


__all__ = ["Plane3d", "Circle3d", "Triangle"]
