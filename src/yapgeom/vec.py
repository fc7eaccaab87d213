## functional 3-vector operations for yapgeom

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

"""functional vector operations on plain ``(x, y, z)`` tuples

All of the heavy lifting in yapgeom (frame conversion, closest-feature
search, separating axis tests) happens on plain tuples of three floats
expressed in the global frame.  The object layer (``Point3d``,
``Vector3d`` and the shape classes) resolves its operands into tuples
with these helpers and wraps the results back up.

"""

from math import sqrt
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]

ORIGIN = (0.0, 0.0, 0.0)
XAXIS = (1.0, 0.0, 0.0)
YAXIS = (0.0, 1.0, 0.0)
ZAXIS = (0.0, 0.0, 1.0)


def isgoodnum(n):
    """ is the argument a real scalar, and not a boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def isvect(x):
    """ is the argument a sequence of three good numbers
    """
    return isinstance(x, (tuple, list)) and len(x) == 3 and \
        isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2])


def vect(x) -> Vec3:
    """make a float 3-tuple out of any three-element sequence"""
    if not isvect(x):
        raise ValueError('bad vector: {}'.format(x))
    return (float(x[0]), float(x[1]), float(x[2]))


## R^3 -> R^3
## ----------

def add(a, b) -> Vec3:
    """ `a + b` """
    return (a[0]+b[0], a[1]+b[1], a[2]+b[2])

def sub(a, b) -> Vec3:
    """ `a - b` """
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])

def scale3(a, c) -> Vec3:
    """ vector ``a`` times scalar ``c`` """
    return (a[0]*c, a[1]*c, a[2]*c)

def neg(a) -> Vec3:
    return (-a[0], -a[1], -a[2])

def cross(a, b) -> Vec3:
    return (a[1]*b[2] - a[2]*b[1],
            a[2]*b[0] - a[0]*b[2],
            a[0]*b[1] - a[1]*b[0])

## a + c*b, used everywhere a parametric point is evaluated
def madd(a, b, c) -> Vec3:
    return (a[0]+b[0]*c, a[1]+b[1]*c, a[2]+b[2]*c)

def lerp(a, b, t) -> Vec3:
    """point at parameter ``t`` between ``a`` (t=0) and ``b`` (t=1).
    The endpoints are returned exactly."""
    if t == 0.0:
        return a
    if t == 1.0:
        return b
    return (a[0]+(b[0]-a[0])*t, a[1]+(b[1]-a[1])*t, a[2]+(b[2]-a[2])*t)

def centroid(points: Sequence[Vec3]) -> Vec3:
    n = len(points)
    if n == 0:
        raise ValueError('centroid of an empty point list')
    return (sum(p[0] for p in points)/n,
            sum(p[1] for p in points)/n,
            sum(p[2] for p in points)/n)


## R^3 -> R
## --------

def dot(a, b) -> float:
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a) -> float:
    """ magnitude of 3 vector ``a`` """
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def mag2(a) -> float:
    return a[0]*a[0]+a[1]*a[1]+a[2]*a[2]

def dist(a, b) -> float:
    """ euclidean distance between points ``a`` and ``b`` """
    return mag(sub(a, b))

def triple(a, b, c) -> float:
    """ scalar triple product `a . (b x c)` """
    return dot(a, cross(b, c))


## normalization
## -------------

def unit(a) -> Vec3:
    """return ``a`` scaled to unit length; zero vectors are an error"""
    m = mag(a)
    if m == 0.0:
        raise ValueError('zero-length vector cannot be normalized')
    return (a[0]/m, a[1]/m, a[2]/m)

def orthogonal(a) -> Vec3:
    """some vector orthogonal to ``a``, built by zeroing the smallest
    component and swapping the other two"""
    ax, ay, az = abs(a[0]), abs(a[1]), abs(a[2])
    if ax <= ay and ax <= az:
        return (0.0, -a[2], a[1])
    if ay <= ax and ay <= az:
        return (-a[2], 0.0, a[0])
    return (-a[1], a[0], 0.0)

def basis(n) -> Tuple[Vec3, Vec3]:
    """two unit vectors completing unit vector ``n`` to a right-handed
    orthonormal basis ``(u, v, n)``"""
    u = unit(orthogonal(n))
    v = cross(n, u)
    return u, v


__all__ = [
    "Vec3", "ORIGIN", "XAXIS", "YAXIS", "ZAXIS",
    "isgoodnum", "isvect", "vect",
    "add", "sub", "scale3", "neg", "cross", "madd", "lerp", "centroid",
    "dot", "mag", "mag2", "dist", "triple",
    "unit", "orthogonal", "basis",
]
