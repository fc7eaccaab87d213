## rotation representations for yapgeom: matrix, quaternion,
## axis-angle and Euler angles

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

"""Rotation algebra.

A :class:`Rotation` is stored as a 3x3 matrix acting on column vectors
expressed in a reference frame.  It converts to and from unit
quaternions, axis-angle pairs and Euler angles in any of the 24
conventions enumerated by :class:`EulerConvention`.  Angles are in
radians throughout.

Equality of rotations is decided on the matrices (largest absolute
element of the difference, tolerance at scale 1), so the two
representational ambiguities never produce false negatives:

* angle near 0, where the axis is undefined (any unit axis is returned);
* angle near pi, where ``q`` and ``-q`` denote the same rotation.

Euler extraction at gimbal lock (middle angle near +/-90 degrees for
Tait-Bryan sequences, near 0 or 180 degrees for proper Euler sequences)
sets the angle of the last intrinsic rotation to zero.  For an extrinsic
convention that is the *first* angle, since extrinsic ``ijk`` with
angles ``(a1, a2, a3)`` is intrinsic ``kji`` with ``(a3, a2, a1)``.  The
recovered angles may then differ from the ones originally supplied, but
they always rebuild the same rotation.

"""

from __future__ import annotations

import enum
import logging
import math
import sys
from typing import Optional, Tuple

from yapgeom import vec
from yapgeom import xform
from yapgeom.frame import GLOBAL, Frame
from yapgeom.tolerance import get_tolerance

logger = logging.getLogger(__name__)

## below this dot product SLERP divides by sin(theta); above it the
## quaternions are close enough to interpolate linearly
_SLERP_LINEAR_THRESHOLD = 0.9995

## the precision floor of the Euler gimbal lock test, sqrt of the
## machine epsilon balances the error of both branches
_GIMBAL_FLOOR = math.sqrt(sys.float_info.epsilon)

_AXES = {"X": 0, "Y": 1, "Z": 2}


class EulerConvention(enum.Enum):
    """The 12 axis sequences, each either intrinsic or extrinsic."""

    INTRINSIC_XYZ = ("XYZ", True)
    INTRINSIC_XZY = ("XZY", True)
    INTRINSIC_YXZ = ("YXZ", True)
    INTRINSIC_YZX = ("YZX", True)
    INTRINSIC_ZXY = ("ZXY", True)
    INTRINSIC_ZYX = ("ZYX", True)
    INTRINSIC_XYX = ("XYX", True)
    INTRINSIC_XZX = ("XZX", True)
    INTRINSIC_YXY = ("YXY", True)
    INTRINSIC_YZY = ("YZY", True)
    INTRINSIC_ZXZ = ("ZXZ", True)
    INTRINSIC_ZYZ = ("ZYZ", True)
    EXTRINSIC_XYZ = ("XYZ", False)
    EXTRINSIC_XZY = ("XZY", False)
    EXTRINSIC_YXZ = ("YXZ", False)
    EXTRINSIC_YZX = ("YZX", False)
    EXTRINSIC_ZXY = ("ZXY", False)
    EXTRINSIC_ZYX = ("ZYX", False)
    EXTRINSIC_XYX = ("XYX", False)
    EXTRINSIC_XZX = ("XZX", False)
    EXTRINSIC_YXY = ("YXY", False)
    EXTRINSIC_YZY = ("YZY", False)
    EXTRINSIC_ZXZ = ("ZXZ", False)
    EXTRINSIC_ZYZ = ("ZYZ", False)

    @property
    def sequence(self) -> str:
        return self.value[0]

    @property
    def intrinsic(self) -> bool:
        return self.value[1]

    @property
    def axes(self) -> Tuple[int, int, int]:
        return tuple(_AXES[c] for c in self.value[0])

    @property
    def proper(self) -> bool:
        """first and last axis coincide (classic Euler, e.g. ZXZ)"""
        return self.value[0][0] == self.value[0][2]

    @classmethod
    def parse(cls, text: str) -> "EulerConvention":
        """Upper case sequences (``"ZYX"``) are intrinsic, lower case
        ones (``"zyx"``) extrinsic."""
        if not isinstance(text, str) or len(text) != 3:
            raise ValueError('bad Euler convention: {!r}'.format(text))
        if text.isupper():
            intrinsic = True
        elif text.islower():
            intrinsic = False
        else:
            raise ValueError('mixed case Euler convention: {!r}'.format(text))
        for member in cls:
            if member.value == (text.upper(), intrinsic):
                return member
        raise ValueError('bad Euler convention: {!r}'.format(text))


def _convention(conv) -> EulerConvention:
    if isinstance(conv, EulerConvention):
        return conv
    return EulerConvention.parse(conv)


def _elementary(axis: int, angle: float) -> xform.Matrix:
    u = [0.0, 0.0, 0.0]
    u[axis] = 1.0
    return xform.RotationMatrix(u, angle)


## (i, j, k) cyclic -> +1, anti-cyclic -> -1
def _parity(i, j, k):
    return 1 if (i, j, k) in ((0, 1, 2), (1, 2, 0), (2, 0, 1)) else -1


def _decompose_intrinsic(m: xform.Matrix, i: int, j: int, proper: bool):
    """angles (a, b, c) with m = R_i(a) R_j(b) R_l(c), l = i if proper"""
    R = m.get
    k = 3 - i - j
    s = _parity(i, j, k)
    floor = max(get_tolerance().eps(1.0), _GIMBAL_FLOOR)
    if proper:
        sb = math.hypot(R(i, j), R(i, k))
        b = math.atan2(sb, R(i, i))
        locked = sb < floor
        if not locked:
            a = math.atan2(R(j, i), -s*R(k, i))
            c = math.atan2(R(i, j), s*R(i, k))
    else:
        cb = math.hypot(R(i, i), R(i, j))
        b = math.atan2(s*R(i, k), cb)
        locked = cb < floor
        if not locked:
            a = math.atan2(-s*R(j, k), R(k, k))
            c = math.atan2(-s*R(i, j), R(i, i))
    if locked:
        logger.debug("gimbal lock in Euler extraction, third angle set to zero")
        a = math.atan2(s*R(k, j), R(j, j))
        c = 0.0
    return a, b, c


class Quaternion:
    """Quaternion ``w + xi + yj + zk``, immutable."""

    __slots__ = ("w", "x", "y", "z")

    def __init__(self, w=1.0, x=0.0, y=0.0, z=0.0):
        for c in (w, x, y, z):
            if not vec.isgoodnum(c):
                raise ValueError('bad quaternion component: {}'.format(c))
        object.__setattr__(self, "w", float(w))
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Quaternion is immutable")

    def __repr__(self):
        return "Quaternion({}, {}, {}, {})".format(self.w, self.x, self.y, self.z)

    def __iter__(self):
        return iter((self.w, self.x, self.y, self.z))

    def __eq__(self, other):
        """componentwise within tolerance; use ``Rotation`` equality to
        compare the rotations two quaternions stand for"""
        if not isinstance(other, Quaternion):
            return NotImplemented
        d = math.sqrt(sum((a - b)**2 for a, b in zip(self, other)))
        return d <= get_tolerance().eps(max(self.norm, other.norm))

    __hash__ = None

    def __add__(self, q):
        return Quaternion(self.w+q.w, self.x+q.x, self.y+q.y, self.z+q.z)

    def __sub__(self, q):
        return Quaternion(self.w-q.w, self.x-q.x, self.y-q.y, self.z-q.z)

    def __neg__(self):
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def __mul__(self, q):
        if isinstance(q, Quaternion):
            w1, x1, y1, z1 = self
            w2, x2, y2, z2 = q
            return Quaternion(w1*w2 - x1*x2 - y1*y2 - z1*z2,
                              w1*x2 + x1*w2 + y1*z2 - z1*y2,
                              w1*y2 - x1*z2 + y1*w2 + z1*x2,
                              w1*z2 + x1*y2 - y1*x2 + z1*w2)
        if vec.isgoodnum(q):
            return Quaternion(self.w*q, self.x*q, self.y*q, self.z*q)
        return NotImplemented

    def __rmul__(self, c):
        if vec.isgoodnum(c):
            return self * c
        return NotImplemented

    def dot(self, q) -> float:
        return self.w*q.w + self.x*q.x + self.y*q.y + self.z*q.z

    @property
    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def conjugate(self):
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def normalized(self):
        n = self.norm
        if n == 0.0:
            raise ValueError('zero quaternion cannot be normalized')
        return self * (1.0/n)

    def inverse(self):
        n2 = self.dot(self)
        if n2 == 0.0:
            raise ValueError('zero quaternion has no inverse')
        return self.conjugate() * (1.0/n2)

    @classmethod
    def from_axis_angle(cls, axis, angle):
        u = vec.unit(vec.vect(axis))
        s = math.sin(angle/2.0)
        return cls(math.cos(angle/2.0), u[0]*s, u[1]*s, u[2]*s)

    def to_angle(self) -> float:
        """rotation angle in [0, 2pi]"""
        q = self.normalized()
        return 2.0*math.acos(max(-1.0, min(1.0, q.w)))

    def to_axis(self):
        """unit rotation axis; any unit vector when the angle is 0"""
        q = self.normalized()
        n = math.sqrt(q.x*q.x + q.y*q.y + q.z*q.z)
        if n <= get_tolerance().eps(1.0):
            logger.debug("axis of a null rotation requested, returning x axis")
            return vec.XAXIS
        return (q.x/n, q.y/n, q.z/n)

    def to_rotation_matrix(self) -> xform.Matrix:
        w, x, y, z = self.normalized()
        return xform.Matrix([[1-2*(y*y+z*z), 2*(x*y-z*w), 2*(x*z+y*w)],
                             [2*(x*y+z*w), 1-2*(x*x+z*z), 2*(y*z-x*w)],
                             [2*(x*z-y*w), 2*(y*z+x*w), 1-2*(x*x+y*y)]])

    @classmethod
    def from_rotation_matrix(cls, m: xform.Matrix) -> "Quaternion":
        """Shepperd's method: the formula branch follows the largest of
        the trace and the three diagonal elements, so the divisor is
        never close to zero."""
        R = m.get
        tr = m.trace()
        d0, d1, d2 = R(0, 0), R(1, 1), R(2, 2)
        if tr >= d0 and tr >= d1 and tr >= d2:
            s = 2.0*math.sqrt(1.0 + tr)
            q = cls(0.25*s, (R(2, 1)-R(1, 2))/s, (R(0, 2)-R(2, 0))/s, (R(1, 0)-R(0, 1))/s)
        elif d0 >= d1 and d0 >= d2:
            s = 2.0*math.sqrt(1.0 + d0 - d1 - d2)
            q = cls((R(2, 1)-R(1, 2))/s, 0.25*s, (R(0, 1)+R(1, 0))/s, (R(0, 2)+R(2, 0))/s)
        elif d1 >= d2:
            s = 2.0*math.sqrt(1.0 + d1 - d0 - d2)
            q = cls((R(0, 2)-R(2, 0))/s, (R(0, 1)+R(1, 0))/s, 0.25*s, (R(1, 2)+R(2, 1))/s)
        else:
            s = 2.0*math.sqrt(1.0 + d2 - d0 - d1)
            q = cls((R(1, 0)-R(0, 1))/s, (R(0, 2)+R(2, 0))/s, (R(1, 2)+R(2, 1))/s, 0.25*s)
        return q.normalized()

    def slerp(self, q, t):
        return slerp(self, q, t)


def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation along the shorter arc.

    ``t == 0`` and ``t == 1`` return the endpoints exactly.  Nearly
    identical quaternions are interpolated linearly and renormalized.
    """
    if t == 0.0:
        return q1
    if t == 1.0:
        return q2
    a = q1.normalized()
    b = q2.normalized()
    d = a.dot(b)
    if d < 0.0:
        b = -b
        d = -d
    if d > _SLERP_LINEAR_THRESHOLD:
        logger.debug("slerp endpoints nearly coincide, interpolating linearly")
        return (a + (b - a)*t).normalized()
    theta = math.acos(d)*t
    c = (b - a*d).normalized()
    return a*math.cos(theta) + c*math.sin(theta)


class Rotation:
    """Rotation of 3D space, stored as a matrix in a reference frame."""

    def __init__(self, matrix=None, frame: Optional[Frame] = None):
        m = xform.Identity() if matrix is None else xform.Matrix(matrix)
        if not m.is_orthogonal(get_tolerance().eps(1.0)) or m.det() < 0:
            raise ValueError('not a rotation matrix: {}'.format(m.rows()))
        if frame is not None and not isinstance(frame, Frame):
            raise ValueError('bad frame: {}'.format(frame))
        self._m = m
        self._frame = GLOBAL if frame is None else frame

    def __repr__(self):
        return "Rotation({}, {!r})".format(self._m.rows(), self._frame)

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def matrix(self) -> xform.Matrix:
        return xform.Matrix(self._m)

    ## constructors
    ## ------------

    @classmethod
    def from_matrix(cls, matrix, frame=None):
        """like the constructor, but snaps a nearly orthonormal matrix to
        the nearest rotation first"""
        m = xform.Matrix(matrix)
        if not m.is_orthogonal(get_tolerance().eps(1.0)):
            logger.debug("orthonormalizing rotation matrix %s", m.rows())
            m = m.orthonormalized()
        return cls(m, frame)

    @classmethod
    def from_axis_angle(cls, axis, angle, frame=None):
        """``axis`` is a ``Vector3d`` (its frame is used unless ``frame``
        is given) or a tuple in ``frame`` coordinates"""
        from yapgeom.point import Vector3d
        if isinstance(axis, Vector3d):
            if frame is None:
                frame = axis.frame
            u = axis.convert_to(frame).xyz
        else:
            u = vec.vect(axis)
        if vec.mag(u) == 0.0:
            raise ValueError('zero-length rotation axis not allowed')
        return cls(xform.RotationMatrix(u, angle), frame)

    @classmethod
    def from_quaternion(cls, q: Quaternion, frame=None):
        if not isinstance(q, Quaternion):
            raise ValueError('bad quaternion: {}'.format(q))
        return cls(q.to_rotation_matrix(), frame)

    @classmethod
    def from_euler_angles(cls, a1, a2, a3, convention, frame=None):
        conv = _convention(convention)
        i, j, k = conv.axes
        if conv.intrinsic:
            m = _elementary(i, a1).mul(_elementary(j, a2)).mul(_elementary(k, a3))
        else:
            m = _elementary(k, a3).mul(_elementary(j, a2)).mul(_elementary(i, a1))
        return cls(m, frame)

    ## conversions
    ## -----------

    def to_quaternion(self) -> Quaternion:
        return Quaternion.from_rotation_matrix(self._m)

    def to_axis_angle(self):
        """``(axis, angle)`` with ``axis`` a unit ``Vector3d`` in this
        rotation's frame and ``angle`` in [0, pi]"""
        from yapgeom.point import Vector3d
        q = self.to_quaternion()
        if q.w < 0:
            q = -q
        return Vector3d(q.to_axis(), self._frame), q.to_angle()

    def to_euler_angles(self, convention):
        conv = _convention(convention)
        i, j, k = conv.axes
        if conv.intrinsic:
            return _decompose_intrinsic(self._m, i, j, conv.proper)
        c, b, a = _decompose_intrinsic(self._m, k, j, conv.proper)
        return a, b, c

    def global_matrix(self) -> xform.Matrix:
        """the matrix acting on global coordinates"""
        if self._frame.is_global():
            return xform.Matrix(self._m)
        a = self._frame.absolute_matrix()
        return a.transpose().mul(self._m).mul(a)

    def convert_to(self, frame: Frame) -> "Rotation":
        a = frame.absolute_matrix()
        return Rotation(a.mul(self.global_matrix()).mul(a.transpose()), frame)

    def convert_to_global(self) -> "Rotation":
        return Rotation(self.global_matrix(), GLOBAL)

    ## algebra
    ## -------

    def __mul__(self, other):
        """composition, ``(r1 * r2)`` applies ``r2`` first"""
        if isinstance(other, Rotation):
            m = self.global_matrix().mul(other.global_matrix())
            return Rotation(m, GLOBAL).convert_to(self._frame)
        return NotImplemented

    def inverse(self) -> "Rotation":
        return Rotation(self._m.transpose(), self._frame)

    def apply(self, obj):
        """rotate a ``Point3d`` or ``Vector3d`` about the global origin"""
        return obj.rotate(self)

    def __eq__(self, other):
        if not isinstance(other, Rotation):
            return NotImplemented
        return self.global_matrix().close(other.global_matrix(), get_tolerance().eps(1.0))

    __hash__ = None


__all__ = ["EulerConvention", "Quaternion", "Rotation", "slerp"]
