## oriented coordinate frames for yapgeom

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

"""Oriented coordinate frames.

A :class:`Frame` is an origin plus three orthonormal axes, expressed in
the coordinates of a parent frame (the global frame by default).  Axes
are stored as the rows of a :class:`~yapgeom.xform.Matrix`, so for a
frame with axes ``A`` and origin ``o``::

    local  = A (parent - o)
    parent = A^T local + o

Points and vectors refer to their frame by plain object reference.
Frames are mutable: translating or rotating a frame in place changes the
global meaning of every point, vector and shape defined in it, and of
every frame that has it as an ancestor.  The absolute transform is
chain-multiplied through the parents on demand, so there is no cache to
go stale.  :data:`GLOBAL` is the root frame and cannot be mutated.

"""

from __future__ import annotations

import logging
from typing import Optional

from yapgeom import vec
from yapgeom import xform
from yapgeom.tolerance import get_tolerance

logger = logging.getLogger(__name__)


class Frame:
    """Right-handed orthonormal coordinate frame."""

    def __init__(self, origin=vec.ORIGIN, axes=None, parent: Optional["Frame"] = None,
                 name: Optional[str] = None, orthonormalize: bool = False):
        self._frozen = False
        self.name = name
        if parent is None and not _building_global:
            parent = GLOBAL
        if parent is not None and not isinstance(parent, Frame):
            raise ValueError('bad parent frame: {}'.format(parent))
        self._parent = parent
        self._origin = self._parent_coords(origin)
        self._axes = self._check_axes(axes, orthonormalize)

    def __repr__(self):
        if self.name:
            return "Frame({!r})".format(self.name)
        return "Frame(origin={}, axes={})".format(self._origin, self._axes.rows())

    ## alternate constructors
    ## ----------------------

    @classmethod
    def from_vectors(cls, origin, v1, v2, parent=None, name=None):
        """Frame whose x axis follows ``v1`` and whose xy plane contains
        ``v2``; the z axis completes a right-handed system."""
        parent = GLOBAL if parent is None else parent
        a = _parent_vector(v1, parent)
        b = _parent_vector(v2, parent)
        if vec.mag(a) == 0.0 or vec.mag(b) == 0.0:
            raise ValueError('zero-length vector passed to Frame.from_vectors')
        z = vec.cross(a, b)
        if get_tolerance().is_zero(vec.mag(z) / (vec.mag(a) * vec.mag(b)), 1.0):
            raise ValueError('parallel vectors passed to Frame.from_vectors')
        x = vec.unit(a)
        z = vec.unit(z)
        y = vec.cross(z, x)
        return cls(origin, xform.FromRows(x, y, z), parent, name)

    @classmethod
    def from_rotation(cls, origin, rotation, parent=None, name=None):
        """Frame obtained by rotating the parent's axes by ``rotation``."""
        from yapgeom.rotation import Rotation
        if not isinstance(rotation, Rotation):
            raise ValueError('bad rotation passed to Frame.from_rotation: {}'.format(rotation))
        parent = GLOBAL if parent is None else parent
        m = parent.absolute_matrix().mul(rotation.global_matrix()).mul(
            parent.absolute_matrix().transpose())
        return cls(origin, m.transpose(), parent, name)

    ## helpers
    ## -------

    def _parent_coords(self, origin):
        if isinstance(origin, (tuple, list)):
            return vec.vect(origin)
        from yapgeom.point import Point3d
        if isinstance(origin, Point3d):
            if self._parent is None:
                return origin.global_xyz()
            return self._parent.from_global_point(origin.global_xyz())
        return vec.vect(origin)

    def _check_axes(self, axes, orthonormalize):
        m = xform.Identity() if axes is None else xform.Matrix(axes)
        if orthonormalize:
            m = m.orthonormalized()
        if not m.is_orthogonal(get_tolerance().eps(1.0)):
            raise ValueError('frame axes are not orthonormal: {}'.format(m.rows()))
        if m.det() < 0:
            raise ValueError('frame axes must be right-handed: {}'.format(m.rows()))
        return m

    def _check_mutable(self):
        if self._frozen:
            raise ValueError('the global frame cannot be modified')

    ## properties
    ## ----------

    @property
    def parent(self) -> Optional["Frame"]:
        return self._parent

    @property
    def origin(self):
        """origin in parent coordinates"""
        return self._origin

    @property
    def axes(self) -> xform.Matrix:
        """copy of the axis matrix (rows are axes, parent coordinates)"""
        return xform.Matrix(self._axes)

    @property
    def xaxis(self):
        return self._axes.getrow(0)

    @property
    def yaxis(self):
        return self._axes.getrow(1)

    @property
    def zaxis(self):
        return self._axes.getrow(2)

    def is_global(self) -> bool:
        return self._parent is None

    def is_orthonormal(self) -> bool:
        return self._axes.is_orthogonal(get_tolerance().eps(1.0))

    ## absolute transform, chain-multiplied through the parents
    ## --------------------------------------------------------

    def absolute_matrix(self) -> xform.Matrix:
        if self._parent is None:
            return xform.Matrix(self._axes)
        return self._axes.mul(self._parent.absolute_matrix())

    def absolute_origin(self):
        if self._parent is None:
            return self._origin
        return self._parent.to_global_point(self._origin)

    def to_global_point(self, p):
        """global coordinates of local point tuple ``p``"""
        f = self
        while f is not None:
            p = vec.add(f._axes.transpose().mul(p), f._origin)
            f = f._parent
        return p

    def from_global_point(self, g):
        """local coordinates of global point tuple ``g``"""
        return self.absolute_matrix().mul(vec.sub(g, self.absolute_origin()))

    def to_global_vector(self, v):
        f = self
        while f is not None:
            v = f._axes.transpose().mul(v)
            f = f._parent
        return v

    def from_global_vector(self, g):
        return self.absolute_matrix().mul(g)

    ## in-place mutation
    ## -----------------

    def set_origin(self, origin):
        self._check_mutable()
        self._origin = self._parent_coords(origin)

    def set_axes(self, axes, orthonormalize=False):
        self._check_mutable()
        self._axes = self._check_axes(axes, orthonormalize)

    def translate(self, v):
        """move the origin by ``v`` (a ``Vector3d``, or a tuple in parent
        coordinates)"""
        self._check_mutable()
        self._origin = vec.add(self._origin, _parent_vector(v, self._parent))

    def rotate(self, rotation, center=None):
        """rotate the frame in place about ``center`` (a ``Point3d``;
        default is the global origin)"""
        from yapgeom.rotation import Rotation
        self._check_mutable()
        if not isinstance(rotation, Rotation):
            raise ValueError('bad rotation passed to Frame.rotate: {}'.format(rotation))
        r = rotation.global_matrix()
        c = vec.ORIGIN if center is None else center.global_xyz()

        ## new global axes are R a_i, new global origin c + R(o - c)
        g_axes = self.absolute_matrix().mul(r.transpose())
        g_origin = vec.add(c, r.mul(vec.sub(self.absolute_origin(), c)))

        if self._parent is None:
            axes = g_axes
            origin = g_origin
        else:
            axes = g_axes.mul(self._parent.absolute_matrix().transpose())
            origin = self._parent.from_global_point(g_origin)
        if not axes.is_orthogonal(0.5 * get_tolerance().eps(1.0)):
            logger.debug("re-orthonormalizing axes of %r after rotation", self)
            axes = axes.orthonormalized()
        self._axes = axes
        self._origin = origin


def _parent_vector(v, parent):
    if isinstance(v, (tuple, list)):
        return vec.vect(v)
    from yapgeom.point import Vector3d
    if isinstance(v, Vector3d):
        if parent is None:
            return v.global_xyz()
        return parent.from_global_vector(v.global_xyz())
    return vec.vect(v)


_building_global = True
GLOBAL = Frame(name="global")
GLOBAL._frozen = True
_building_global = False


__all__ = ["Frame", "GLOBAL"]
