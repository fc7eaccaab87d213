## lines, rays and segments for yapgeom

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

"""Linear objects: infinite lines, rays and segments.

A line or ray is a defining point plus a direction vector (a second
point may be given instead of the direction); a segment is two end
points.  Tuples are taken in ``frame`` coordinates, the global frame by
default.

Reference magnitudes for the tolerance: lines and rays use
``max(|P1|, |P1 - P2|)`` of their defining points, segments use their
length.

"""

from __future__ import annotations

from yapgeom import closest
from yapgeom import vec
from yapgeom.point import Point3d, Vector3d, as_point, as_vector
from yapgeom.shape import Shape, _kind, _plane_foot, _support, is_parallel
from yapgeom.tolerance import get_tolerance


def _direction(point, direction, frame):
    if isinstance(direction, Point3d):
        d = Vector3d.between(point, direction)
    else:
        d = as_vector(direction, frame)
    if vec.mag(d.global_xyz()) == 0.0:
        raise ValueError('zero-length direction not allowed')
    return d


class _Ruled(Shape):
    """point plus direction; shared by lines and rays"""

    def __init__(self, point, direction, frame=None):
        self._point = as_point(point, frame)
        self._direction = _direction(self._point, direction, frame)

    def __repr__(self):
        return "{}({!r}, {!r})".format(type(self).__name__, self._point, self._direction)

    @property
    def point(self) -> Point3d:
        return self._point

    @property
    def direction(self) -> Vector3d:
        return self._direction

    @property
    def frame(self):
        return self._point.frame

    def _global_axis(self):
        return self._point.global_xyz(), vec.unit(self._direction.global_xyz())

    def _orientation(self):
        o, u = self._global_axis()
        return "line", o, u

    def _scale(self):
        return max(vec.mag(self._point.global_xyz()), vec.mag(self._direction.global_xyz()))

    def _map(self, point_fn, vector_fn):
        return type(self)(point_fn(self._point), vector_fn(self._direction))

    def _resolve(self):
        return "span", self.span()

    def project_to(self, plane):
        """orthogonal projection onto the plane carrying ``plane``: the
        same kind of object, or a point when perpendicular to it"""
        o, u = self._global_axis()
        _, n = _support(plane, "plane")
        p = self._point._moved(_plane_foot(o, plane))
        d = vec.madd(u, n, -vec.dot(u, n))
        if get_tolerance().is_zero(vec.mag(d), 1.0):
            return p
        return type(self)(p, Vector3d(d).convert_to(p.frame))

    projection_to = project_to


class Line3d(_Ruled):
    """infinite line through ``point`` along ``direction``"""

    def span(self):
        return closest.line_span(self._point.global_xyz(), self._direction.global_xyz())

    def __eq__(self, other):
        if not isinstance(other, Line3d):
            return NotImplemented
        if not is_parallel(self, other):
            return False
        eps = get_tolerance().eps(max(self._scale(), other._scale()))
        d, _, _ = closest.point_span_witness(other._point.global_xyz(), self.span())
        return d <= eps


class Ray3d(_Ruled):
    """half line starting at ``point``"""

    def span(self):
        return closest.ray_span(self._point.global_xyz(), self._direction.global_xyz())

    def to_line(self) -> Line3d:
        return Line3d(self._point, self._direction)

    def __eq__(self, other):
        if not isinstance(other, Ray3d):
            return NotImplemented
        tol = get_tolerance()
        eps = tol.eps(max(self._scale(), other._scale()))
        o1, u1 = self._global_axis()
        o2, u2 = other._global_axis()
        return vec.dist(o1, o2) <= eps and vec.dist(u1, u2) <= tol.eps(1.0)


class Segment3d(Shape):
    """closed segment between two distinct points"""

    def __init__(self, p1, p2, frame=None):
        self._p1 = as_point(p1, frame)
        self._p2 = as_point(p2, frame)
        if vec.dist(self._p1.global_xyz(), self._p2.global_xyz()) == 0.0:
            raise ValueError('segment end points coincide')

    def __repr__(self):
        return "Segment3d({!r}, {!r})".format(self._p1, self._p2)

    @property
    def p1(self) -> Point3d:
        return self._p1

    @property
    def p2(self) -> Point3d:
        return self._p2

    @property
    def frame(self):
        return self._p1.frame

    @property
    def length(self) -> float:
        return vec.dist(self._p1.global_xyz(), self._p2.global_xyz())

    def to_vector(self) -> Vector3d:
        return Vector3d.between(self._p1, self._p2)

    def to_line(self) -> Line3d:
        return Line3d(self._p1, self._p2)

    def to_ray(self) -> Ray3d:
        """ray from ``p1`` through ``p2``"""
        return Ray3d(self._p1, self._p2)

    def project_to(self, obj):
        """orthogonal projection onto the line or plane carrying ``obj``;
        a point when the segment is perpendicular to it"""
        if _kind(obj)[0] not in ("line", "plane"):
            raise ValueError('cannot project a segment onto {}'.format(type(obj).__name__))
        ends = [p.project_to(obj).global_xyz() for p in (self._p1, self._p2)]
        return collinear_hull(ends, self._p1, self.length)

    projection_to = project_to

    def midpoint(self) -> Point3d:
        return self._p1._moved(vec.lerp(self._p1.global_xyz(), self._p2.global_xyz(), 0.5))

    def span(self):
        return closest.segment_span(self._p1.global_xyz(), self._p2.global_xyz())

    def _global_axis(self):
        a = self._p1.global_xyz()
        return a, vec.unit(vec.sub(self._p2.global_xyz(), a))

    def _orientation(self):
        o, u = self._global_axis()
        return "line", o, u

    def _scale(self):
        return self.length

    def _map(self, point_fn, vector_fn):
        return Segment3d(point_fn(self._p1), point_fn(self._p2))

    def _resolve(self):
        return "span", self.span()

    def __eq__(self, other):
        if not isinstance(other, Segment3d):
            return NotImplemented
        eps = get_tolerance().eps(max(self.length, other.length))
        a1, b1 = self._p1.global_xyz(), self._p2.global_xyz()
        a2, b2 = other._p1.global_xyz(), other._p2.global_xyz()
        return ((vec.dist(a1, a2) <= eps and vec.dist(b1, b2) <= eps) or
                (vec.dist(a1, b2) <= eps and vec.dist(b1, a2) <= eps))


def collinear_hull(points, anchor: Point3d, scale):
    """Segment3d between the two farthest of collinear global points, or
    a Point3d when they coincide within the tolerance at ``scale``;
    expressed in the frame of ``anchor``"""
    best = (0.0, points[0], points[0])
    for i, p in enumerate(points):
        for q in points[i+1:]:
            d = vec.dist(p, q)
            if d > best[0]:
                best = (d, p, q)
    d, p, q = best
    if d <= get_tolerance().eps(scale):
        return anchor._moved(p)
    return Segment3d(anchor._moved(p), anchor._moved(q))


__all__ = ["Line3d", "Ray3d", "Segment3d"]
