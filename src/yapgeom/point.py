## points and vectors for yapgeom

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

"""Frame-tagged points and vectors.

A :class:`Point3d` or :class:`Vector3d` is three local components plus
a reference to the :class:`~yapgeom.frame.Frame` they are expressed in.
The frame is referenced, not copied: moving the frame moves the point.
Comparisons always go through global coordinates.

Point equality uses the tolerance at ``max(|p|, |q|)``; vector equality
uses ``max(|u|, |v|)``.

"""

from __future__ import annotations

from math import degrees

from yapgeom import vec
from yapgeom.frame import GLOBAL, Frame
from yapgeom.shape import Shape, Transformable, _kind, angle, is_orthogonal, is_parallel
from yapgeom.tolerance import get_tolerance


def _components(x, y, z):
    if isinstance(x, (tuple, list)):
        return vec.vect(x)
    return vec.vect((x, y, z))


def _frame(frame):
    if frame is None:
        return GLOBAL
    if not isinstance(frame, Frame):
        raise ValueError('bad frame: {}'.format(frame))
    return frame


class _Triple:
    """shared storage and access for points and vectors"""

    def __init__(self, x=0.0, y=0.0, z=0.0, frame=None):
        self._xyz = _components(x, y, z)
        self._frame = _frame(frame)

    @property
    def x(self):
        return self._xyz[0]

    @property
    def y(self):
        return self._xyz[1]

    @property
    def z(self):
        return self._xyz[2]

    @property
    def xyz(self):
        """local components"""
        return self._xyz

    @property
    def frame(self) -> Frame:
        return self._frame

    def __iter__(self):
        return iter(self._xyz)

    def __getitem__(self, i):
        return self._xyz[i]

    def __len__(self):
        return 3

    def __repr__(self):
        if self._frame is GLOBAL:
            return "{}({}, {}, {})".format(type(self).__name__, *self._xyz)
        return "{}({}, {}, {}, frame={!r})".format(type(self).__name__, *self._xyz, self._frame)


class Point3d(_Triple, Shape):

    def global_xyz(self):
        if self._frame is GLOBAL:
            return self._xyz
        return self._frame.to_global_point(self._xyz)

    def _moved(self, g):
        if self._frame is GLOBAL:
            return Point3d(g)
        return Point3d(self._frame.from_global_point(g), frame=self._frame)

    def _map(self, point_fn, vector_fn):
        return point_fn(self)

    def _scale(self):
        return vec.mag(self.global_xyz())

    def _resolve(self):
        return "point", self.global_xyz()

    def convert_to(self, frame):
        frame = _frame(frame)
        if frame is self._frame:
            return Point3d(self._xyz, frame=frame)
        return Point3d(frame.from_global_point(self.global_xyz()), frame=frame)

    def __eq__(self, other):
        if not isinstance(other, Point3d):
            return NotImplemented
        p = self.global_xyz()
        q = other.global_xyz()
        return vec.dist(p, q) <= get_tolerance().eps(max(vec.mag(p), vec.mag(q)))

    ## arithmetic happens in this point's frame

    def __add__(self, other):
        if isinstance(other, Vector3d):
            return self._moved(vec.add(self.global_xyz(), other.global_xyz()))
        if isinstance(other, Point3d):
            return Point3d(vec.add(self._xyz, other.convert_to(self._frame).xyz), frame=self._frame)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3d):
            return self._moved(vec.sub(self.global_xyz(), other.global_xyz()))
        if isinstance(other, Point3d):
            return Vector3d(vec.sub(self._xyz, other.convert_to(self._frame).xyz), frame=self._frame)
        return NotImplemented

    def __mul__(self, c):
        if vec.isgoodnum(c):
            return Point3d(vec.scale3(self._xyz, c), frame=self._frame)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, c):
        if vec.isgoodnum(c):
            return Point3d(vec.scale3(self._xyz, 1.0/c), frame=self._frame)
        return NotImplemented

    def __neg__(self):
        return Point3d(vec.neg(self._xyz), frame=self._frame)

    def to_vector(self) -> "Vector3d":
        return Vector3d(self._xyz, frame=self._frame)

    def project_to(self, obj) -> "Point3d":
        """orthogonal projection onto a linear or planar object's
        supporting line or plane, or onto the surface of a sphere"""
        from yapgeom.solid import Sphere
        g = self.global_xyz()
        if isinstance(obj, Sphere):
            c = obj.center.global_xyz()
            d = vec.dist(g, c)
            if d == 0.0:
                raise ValueError('the center of a sphere has no unique projection onto it')
            return self._moved(vec.madd(c, vec.sub(g, c), obj.radius/d))
        kind, q, u = _kind(obj)
        if kind == "line":
            foot = vec.madd(q, u, vec.dot(vec.sub(g, q), u))
        elif kind == "plane":
            foot = vec.madd(g, u, -vec.dot(vec.sub(g, q), u))
        else:
            raise ValueError('cannot project a point onto a free vector')
        return self._moved(foot)

    projection_to = project_to


class Vector3d(_Triple, Transformable):

    __hash__ = None

    @classmethod
    def between(cls, p1: Point3d, p2: Point3d) -> "Vector3d":
        """vector from ``p1`` to ``p2``, in ``p1``'s frame"""
        return p2.convert_to(p1.frame) - p1

    def global_xyz(self):
        if self._frame is GLOBAL:
            return self._xyz
        return self._frame.to_global_vector(self._xyz)

    def _moved(self, g):
        if self._frame is GLOBAL:
            return Vector3d(g)
        return Vector3d(self._frame.from_global_vector(g), frame=self._frame)

    def _map(self, point_fn, vector_fn):
        return vector_fn(self)

    def convert_to(self, frame):
        frame = _frame(frame)
        if frame is self._frame:
            return Vector3d(self._xyz, frame=frame)
        return Vector3d(frame.from_global_vector(self.global_xyz()), frame=frame)

    def __eq__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        u = self.global_xyz()
        v = other.global_xyz()
        return vec.dist(u, v) <= get_tolerance().eps(max(vec.mag(u), vec.mag(v)))

    @property
    def norm(self) -> float:
        return vec.mag(self._xyz)

    def normalized(self) -> "Vector3d":
        return Vector3d(vec.unit(self._xyz), frame=self._frame)

    def dot(self, other) -> float:
        return vec.dot(self.global_xyz(), other.global_xyz())

    def cross(self, other) -> "Vector3d":
        return self._moved(vec.cross(self.global_xyz(), other.global_xyz()))

    def __add__(self, other):
        if isinstance(other, Vector3d):
            return self._moved(vec.add(self.global_xyz(), other.global_xyz()))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3d):
            return self._moved(vec.sub(self.global_xyz(), other.global_xyz()))
        return NotImplemented

    def __mul__(self, c):
        if vec.isgoodnum(c):
            return Vector3d(vec.scale3(self._xyz, c), frame=self._frame)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, c):
        if vec.isgoodnum(c):
            return Vector3d(vec.scale3(self._xyz, 1.0/c), frame=self._frame)
        return NotImplemented

    def __neg__(self):
        return Vector3d(vec.neg(self._xyz), frame=self._frame)

    def to_point(self) -> Point3d:
        return Point3d(self._xyz, frame=self._frame)

    def orthogonal_vector(self) -> "Vector3d":
        if self.norm == 0.0:
            raise ValueError('zero vector has no orthogonal direction')
        return Vector3d(vec.orthogonal(self._xyz), frame=self._frame)

    def project_to(self, obj) -> "Vector3d":
        """projection onto a vector, a linear object's direction or a
        planar object's plane"""
        g = self.global_xyz()
        kind, _, u = _kind(obj)
        if kind == "plane":
            return self._moved(vec.madd(g, u, -vec.dot(g, u)))
        return self._moved(vec.scale3(u, vec.dot(g, u)))

    projection_to = project_to

    ## orientation predicates, shared with the shapes

    def angle_to(self, other) -> float:
        return angle(self, other)

    def angle_to_deg(self, other) -> float:
        return degrees(self.angle_to(other))

    def is_parallel_to(self, other) -> bool:
        return is_parallel(self, other)

    def is_orthogonal_to(self, other) -> bool:
        return is_orthogonal(self, other)


def as_point(p, frame=None) -> "Point3d":
    """a ``Point3d`` as is, or a tuple in ``frame`` (global by default)"""
    if isinstance(p, Point3d):
        return p
    if vec.isvect(p):
        return Point3d(p, frame=frame)
    raise ValueError('bad point: {}'.format(p))


def as_vector(v, frame=None) -> "Vector3d":
    if isinstance(v, Vector3d):
        return v
    if vec.isvect(v):
        return Vector3d(v, frame=frame)
    raise ValueError('bad vector: {}'.format(v))


__all__ = ["Point3d", "Vector3d", "as_point", "as_vector"]
