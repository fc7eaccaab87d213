## common base classes for yapgeom entities

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

"""Base classes shared by every yapgeom entity.

:class:`Transformable` gives anything built from points and vectors the
rigid transformations (translate, rotate, reflect) and frame
conversions, by mapping a function over its defining points and
vectors.  :class:`Shape` adds the binary predicates (distance,
intersection, containment, orientation), all of which resolve both
operands into the global frame before comparing them.

"""

from __future__ import annotations

import math

from yapgeom import vec
from yapgeom.frame import GLOBAL
from yapgeom.tolerance import get_tolerance


def _global_vector(v):
    from yapgeom.point import Vector3d
    if isinstance(v, Vector3d):
        return v.global_xyz()
    if vec.isvect(v):
        return vec.vect(v)
    raise ValueError('bad vector: {}'.format(v))


class Transformable:
    """Entities that transform piecewise through their points and vectors.

    Subclasses implement ``_map(point_fn, vector_fn)``, returning a new
    instance built from the mapped defining points and vectors.  Mapped
    points and vectors stay in their own frames.
    """

    def _map(self, point_fn, vector_fn):
        raise NotImplementedError

    def translate(self, v):
        """translate by ``v``, a ``Vector3d`` or a tuple in global
        coordinates"""
        d = _global_vector(v)
        return self._map(lambda p: p._moved(vec.add(p.global_xyz(), d)),
                         lambda u: u)

    def rotate(self, rotation, center=None):
        """rotate by ``rotation`` about ``center`` (a ``Point3d``; the
        global origin by default)"""
        from yapgeom.rotation import Rotation
        if not isinstance(rotation, Rotation):
            raise ValueError('bad rotation: {}'.format(rotation))
        r = rotation.global_matrix()
        c = vec.ORIGIN if center is None else center.global_xyz()

        def point_fn(p):
            return p._moved(vec.add(c, r.mul(vec.sub(p.global_xyz(), c))))

        return self._map(point_fn, lambda u: u._moved(r.mul(u.global_xyz())))

    def reflect_in(self, obj):
        """mirror in a ``Point3d``, ``Line3d`` or ``Plane3d``"""
        from yapgeom.linear import Line3d
        from yapgeom.planar import Plane3d
        from yapgeom.point import Point3d

        if isinstance(obj, Point3d):
            x = obj.global_xyz()

            def point_fn(p):
                return p._moved(vec.sub(vec.scale3(x, 2.0), p.global_xyz()))

            def vector_fn(u):
                return u._moved(vec.neg(u.global_xyz()))

        elif isinstance(obj, Line3d):
            o, d = obj._global_axis()

            def point_fn(p):
                g = p.global_xyz()
                foot = vec.madd(o, d, vec.dot(vec.sub(g, o), d))
                return p._moved(vec.sub(vec.scale3(foot, 2.0), g))

            def vector_fn(u):
                g = u.global_xyz()
                return u._moved(vec.sub(vec.scale3(d, 2.0*vec.dot(g, d)), g))

        elif isinstance(obj, Plane3d):
            q, n = obj._global_plane()

            def point_fn(p):
                g = p.global_xyz()
                return p._moved(vec.madd(g, n, -2.0*vec.dot(vec.sub(g, q), n)))

            def vector_fn(u):
                g = u.global_xyz()
                return u._moved(vec.madd(g, n, -2.0*vec.dot(g, n)))

        else:
            raise ValueError('cannot reflect in {}'.format(type(obj).__name__))
        return self._map(point_fn, vector_fn)

    def convert_to(self, frame):
        return self._map(lambda p: p.convert_to(frame), lambda u: u.convert_to(frame))

    def convert_to_global(self):
        return self.convert_to(GLOBAL)


class Shape(Transformable):
    """Base class of points and of every analytic shape."""

    __hash__ = None

    ## characteristic magnitude for relative tolerance
    def _scale(self) -> float:
        raise NotImplementedError

    ## ("line", point, unit direction) or ("plane", point, unit normal)
    def _orientation(self):
        raise ValueError('{} has no direction or normal'.format(type(self).__name__))

    def distance_to(self, other, points=False):
        """Minimum distance to ``other``.

        With ``points=True`` returns ``(distance, point_on_self,
        point_on_other)``, the witness points in the global frame.
        Overlapping shapes report 0 and a common point.
        """
        from yapgeom import pairs
        from yapgeom.point import Point3d
        d, pa, pb = pairs.distance(self, other)
        if points:
            return d, Point3d(pa), Point3d(pb)
        return d

    def intersection_with(self, other):
        from yapgeom import pairs
        return pairs.intersection(self, other)

    def intersects(self, other) -> bool:
        from yapgeom import pairs
        return pairs.intersects(self, other)

    ## containment, relative to a container shape

    def belongs_to(self, container) -> bool:
        from yapgeom import pairs
        return pairs.locate(self, container) >= 0

    def is_inside(self, container) -> bool:
        from yapgeom import pairs
        return pairs.locate(self, container) == 1

    def is_on_boundary(self, container) -> bool:
        from yapgeom import pairs
        return pairs.locate(self, container) == 0

    def is_outside(self, container) -> bool:
        from yapgeom import pairs
        return pairs.locate(self, container) == -1

    def equals(self, other) -> bool:
        return self == other

    ## orientation predicates

    def angle_to(self, other) -> float:
        return angle(self, other)

    def angle_to_deg(self, other) -> float:
        return math.degrees(angle(self, other))

    def is_parallel_to(self, other) -> bool:
        return is_parallel(self, other)

    def is_orthogonal_to(self, other) -> bool:
        return is_orthogonal(self, other)

    def is_coplanar_to(self, other) -> bool:
        return is_coplanar(self, other)


## orientation predicates
## ----------------------
##
## vectors, linear objects and planar objects each carry one unit
## direction (a normal, for planar objects).  Angles involving a line
## or a plane fold into [0, pi/2]; the angle between two vectors lies
## in [0, pi].  The tests on unit vectors are dimensionless, so they
## use the tolerance at scale 1 in either mode.

def _kind(obj):
    from yapgeom.point import Vector3d
    if isinstance(obj, Vector3d):
        return "vector", None, vec.unit(obj.global_xyz())
    if isinstance(obj, Shape):
        return obj._orientation()
    raise ValueError('bad entity: {}'.format(obj))


def _support(obj, kind):
    """point and unit direction (normal, for planes) of the line or plane
    carrying ``obj``, which must be of ``kind``"""
    k, q, u = _kind(obj)
    if k != kind:
        raise ValueError('expected a {} object, got {}'.format(
            "linear" if kind == "line" else "planar", type(obj).__name__))
    return q, u


def _line_foot(g, obj):
    q, u = _support(obj, "line")
    return vec.madd(q, u, vec.dot(vec.sub(g, q), u))


def _plane_foot(g, obj):
    q, n = _support(obj, "plane")
    return vec.madd(g, n, -vec.dot(vec.sub(g, q), n))


def _acos(c):
    return math.acos(max(-1.0, min(1.0, c)))


def angle(a, b) -> float:
    ka, _, u = _kind(a)
    kb, _, v = _kind(b)
    c = vec.dot(u, v)
    if ka == kb == "vector":
        return _acos(c)
    t = _acos(abs(c))
    if (ka == "plane") != (kb == "plane"):
        return 0.5*math.pi - t
    return t


def is_parallel(a, b) -> bool:
    ka, _, u = _kind(a)
    kb, _, v = _kind(b)
    tol = get_tolerance()
    if (ka == "plane") != (kb == "plane"):
        return tol.is_zero(vec.dot(u, v), 1.0)
    return tol.is_zero(vec.mag(vec.cross(u, v)), 1.0)


def is_orthogonal(a, b) -> bool:
    ka, _, u = _kind(a)
    kb, _, v = _kind(b)
    tol = get_tolerance()
    if (ka == "plane") != (kb == "plane"):
        return tol.is_zero(vec.mag(vec.cross(u, v)), 1.0)
    return tol.is_zero(vec.dot(u, v), 1.0)


def is_coplanar(a, b) -> bool:
    ka, p, u = _kind(a)
    kb, q, v = _kind(b)
    if "vector" in (ka, kb):
        raise ValueError('coplanarity is not defined for free vectors')
    eps = get_tolerance().eps(max(a._scale(), b._scale()))
    if ka == kb == "line":
        n = vec.cross(u, v)
        m = vec.mag(n)
        if get_tolerance().is_zero(m, 1.0):
            return True
        return abs(vec.dot(vec.sub(q, p), n))/m <= eps
    if not is_parallel(a, b):
        return False
    if ka == "plane":
        return abs(vec.dot(vec.sub(q, p), u)) <= eps
    return abs(vec.dot(vec.sub(p, q), v)) <= eps


__all__ = ["Transformable", "Shape", "angle", "is_parallel", "is_orthogonal", "is_coplanar"]
