## closest-feature kernels for yapgeom

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

"""closest-feature kernels on plain global tuples

These functions know nothing about frames, shapes or the tolerance
policy.  Every argument is a tuple of global coordinates and every
result is ``(distance, witness_on_first, witness_on_second)`` unless
noted otherwise.  The object layer (``yapgeom.pairs``) resolves shapes
into these representations:

=============  =====================================================
linear object  ``Span(origin, direction, lo, hi, end)``, the points
               ``origin + t*direction`` for ``lo <= t <= hi``; lines
               and rays use infinite bounds, segments run from 0 to 1
               and carry their exact end point
plane          ``(point, unit normal)``
disk           ``(center, unit normal, radius)``
triangle       ``(a, b, c)``
polytope       ``Poly(vertices, faces, edges)``; a face is
               ``(loop, unit outward normal)`` with ``loop`` a tuple of
               vertex indices, an edge a pair of vertex indices
=============  =====================================================

Where the tolerance matters (touching, clipping) the caller passes an
absolute ``eps``.  The constants below are numerical guards, not
tolerances.

"""

import logging
import math
from typing import NamedTuple, Optional, Sequence, Tuple

import mpmath as mpm

from yapgeom import vec
from yapgeom.vec import Vec3

logger = logging.getLogger(__name__)

INF = math.inf

## sine of the angle below which two directions are treated as exactly
## parallel by the closed-form kernels
_PARALLEL = 1e-12

## disk boundaries are searched by sampling and golden-section refinement
_SAMPLES = 72
_REFINE = 3
_GOLDEN = (math.sqrt(5.0) - 1.0) / 2.0
_GOLDEN_ITERATIONS = 100


class Span(NamedTuple):
    origin: Vec3
    direction: Vec3
    lo: float
    hi: float
    end: Optional[Vec3] = None

    def at(self, t):
        if t == 1.0 and self.end is not None:
            return self.end
        if t == 0.0:
            return self.origin
        return vec.madd(self.origin, self.direction, t)

    def endpoints(self):
        """finite end points as ``(t, point)`` pairs"""
        out = []
        if self.lo != -INF:
            out.append((self.lo, self.at(self.lo)))
        if self.hi != INF:
            out.append((self.hi, self.at(self.hi)))
        return out

    def anchor(self):
        """a finite parameter: an end point if there is one, else 0"""
        if self.lo != -INF:
            return self.lo
        if self.hi != INF:
            return self.hi
        return 0.0


def segment_span(a, b) -> Span:
    return Span(a, vec.sub(b, a), 0.0, 1.0, b)


def ray_span(o, d) -> Span:
    return Span(o, d, 0.0, INF)


def line_span(o, d) -> Span:
    return Span(o, d, -INF, INF)


class Poly(NamedTuple):
    vertices: Sequence[Vec3]
    faces: Sequence[Tuple[Tuple[int, ...], Vec3]]
    edges: Sequence[Tuple[int, int]]

    def fan(self):
        """triangles fanning out of the first vertex of each face"""
        v = self.vertices
        for loop, _ in self.faces:
            for i in range(1, len(loop) - 1):
                yield v[loop[0]], v[loop[i]], v[loop[i+1]]

    def edge_spans(self):
        v = self.vertices
        return [segment_span(v[i], v[j]) for i, j in self.edges]

    def edge_directions(self):
        v = self.vertices
        return [vec.sub(v[j], v[i]) for i, j in self.edges]

    def normals(self):
        return [n for _, n in self.faces]

    def margin(self, p):
        """largest signed face distance: <= 0 inside, > 0 outside"""
        v = self.vertices
        return max(vec.dot(vec.sub(p, v[loop[0]]), n) for loop, n in self.faces)


def _clamp(t, lo, hi):
    if t < lo:
        return lo
    if t > hi:
        return hi
    return t


def _best(*candidates):
    """candidate with the smallest distance; earlier ones win ties"""
    best = None
    for c in candidates:
        if c is not None and (best is None or c[0] < best[0]):
            best = c
    return best


def _swap(r):
    return r[0], r[2], r[1]


def _parallel(u, v):
    return vec.mag(vec.cross(u, v)) <= _PARALLEL * vec.mag(u) * vec.mag(v)


## point kernels
## -------------

def point_point(p, q):
    return vec.dist(p, q), p, q


def point_span(p, s: Span):
    """returns ``(distance, t, closest point on s)``"""
    t = vec.dot(vec.sub(p, s.origin), s.direction) / vec.mag2(s.direction)
    t = _clamp(t, s.lo, s.hi)
    q = s.at(t)
    return vec.dist(p, q), t, q


def point_plane(p, q, n):
    """returns ``(signed distance, foot)``"""
    h = vec.dot(vec.sub(p, q), n)
    return h, vec.madd(p, n, -h)


def point_disk(p, c, n, r):
    h = vec.dot(vec.sub(p, c), n)
    proj = vec.madd(p, n, -h)
    w = vec.sub(proj, c)
    m = vec.mag(w)
    q = proj if m <= r else vec.madd(c, w, r/m)
    return vec.dist(p, q), p, q


def point_triangle(p, a, b, c):
    """Voronoi-region walk; vertex regions return the vertex itself"""
    ab = vec.sub(b, a)
    ac = vec.sub(c, a)
    ap = vec.sub(p, a)
    d1 = vec.dot(ab, ap)
    d2 = vec.dot(ac, ap)
    if d1 <= 0.0 and d2 <= 0.0:
        return vec.dist(p, a), p, a

    bp = vec.sub(p, b)
    d3 = vec.dot(ab, bp)
    d4 = vec.dot(ac, bp)
    if d3 >= 0.0 and d4 <= d3:
        return vec.dist(p, b), p, b

    vc = d1*d4 - d3*d2
    if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
        q = vec.madd(a, ab, d1/(d1 - d3))
        return vec.dist(p, q), p, q

    cp = vec.sub(p, c)
    d5 = vec.dot(ab, cp)
    d6 = vec.dot(ac, cp)
    if d6 >= 0.0 and d5 <= d6:
        return vec.dist(p, c), p, c

    vb = d5*d2 - d1*d6
    if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
        q = vec.madd(a, ac, d2/(d2 - d6))
        return vec.dist(p, q), p, q

    va = d3*d6 - d5*d4
    if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
        q = vec.madd(b, vec.sub(c, b), (d4 - d3)/((d4 - d3) + (d5 - d6)))
        return vec.dist(p, q), p, q

    denom = 1.0/(va + vb + vc)
    q = vec.add(a, vec.add(vec.scale3(ab, vb*denom), vec.scale3(ac, vc*denom)))
    return vec.dist(p, q), p, q


def point_poly(p, poly: Poly):
    if poly.margin(p) <= 0.0:
        return 0.0, p, p
    return _best(*(point_triangle(p, a, b, c) for a, b, c in poly.fan()))


## linear kernels
## --------------

def span_span(s1: Span, s2: Span):
    """closest points of two linear objects; returns
    ``(distance, t1, t2, point on s1, point on s2)``"""
    d1 = s1.direction
    d2 = s2.direction
    r = vec.sub(s1.origin, s2.origin)
    a = vec.mag2(d1)
    e = vec.mag2(d2)
    f = vec.dot(d2, r)
    c = vec.dot(d1, r)
    b = vec.dot(d1, d2)
    denom = a*e - b*b

    if denom > _PARALLEL * _PARALLEL * a * e:
        s = _clamp((b*f - c*e)/denom, s1.lo, s1.hi)
    else:
        s = s1.anchor()
    t = (b*s + f)/e
    if t < s2.lo:
        t = s2.lo
        s = _clamp((b*t - c)/a, s1.lo, s1.hi)
    elif t > s2.hi:
        t = s2.hi
        s = _clamp((b*t - c)/a, s1.lo, s1.hi)
    p = s1.at(s)
    q = s2.at(t)
    return vec.dist(p, q), s, t, p, q


def span_plane(s: Span, q, n):
    h0 = vec.dot(vec.sub(s.origin, q), n)
    dn = vec.dot(s.direction, n)
    if dn != 0.0:
        t = -h0/dn
        if s.lo <= t <= s.hi:
            p = s.at(t)
            return 0.0, p, p
        t = _clamp(t, s.lo, s.hi)
    else:
        t = s.anchor()
    p = s.at(t)
    h, foot = point_plane(p, q, n)
    return abs(h), p, foot


def span_triangle(s: Span, a, b, c):
    e1 = vec.sub(b, a)
    e2 = vec.sub(c, a)
    h = vec.cross(s.direction, e2)
    det = vec.dot(e1, h)
    if det != 0.0:
        f = 1.0/det
        w = vec.sub(s.origin, a)
        u = f*vec.dot(w, h)
        if 0.0 <= u <= 1.0:
            qv = vec.cross(w, e1)
            v = f*vec.dot(s.direction, qv)
            if v >= 0.0 and u + v <= 1.0:
                t = f*vec.dot(e2, qv)
                if s.lo <= t <= s.hi:
                    p = s.at(t)
                    return 0.0, p, p

    candidates = []
    for x, y in ((a, b), (b, c), (c, a)):
        d, _, _, p, q = span_span(s, segment_span(x, y))
        candidates.append((d, p, q))
    for _, p in s.endpoints():
        candidates.append(point_triangle(p, a, b, c))
    return _best(*candidates)


def clip_span(s: Span, poly: Poly, eps=0.0):
    """Cyrus-Beck clip of a linear object against a convex polytope
    grown by ``eps``; returns ``(t0, t1)`` or ``None``"""
    t0, t1 = s.lo, s.hi
    v = poly.vertices
    for loop, n in poly.faces:
        num = vec.dot(n, vec.sub(v[loop[0]], s.origin)) + eps
        den = vec.dot(n, s.direction)
        if den == 0.0:
            if num < 0.0:
                return None
            continue
        t = num/den
        if den < 0.0:
            t0 = max(t0, t)
        else:
            t1 = min(t1, t)
        if t0 > t1:
            return None
    return t0, t1


def span_poly(s: Span, poly: Poly):
    clip = clip_span(s, poly)
    if clip is not None:
        p = s.at(clip[0])
        return 0.0, p, p
    return _best(*(span_triangle(s, a, b, c) for a, b, c in poly.fan()))


def span_sphere(s: Span, c, r, eps):
    """parameters where the supporting line of ``s`` meets the sphere
    surface: ``()`` for a miss, one value at tangency, else two
    ascending values.  The quadratic is solved in extended precision."""
    d = s.direction
    _, _, foot = point_span(c, Span(s.origin, d, -INF, INF))
    delta = vec.dist(c, foot)
    if abs(delta - r) <= eps:
        t = vec.dot(vec.sub(foot, s.origin), d)/vec.mag2(d)
        return (t,)
    if delta > r:
        return ()

    ## solve |o + t d - c|^2 = r^2
    w = vec.sub(s.origin, c)
    mpd = [mpm.mpf(x) for x in d]
    mpw = [mpm.mpf(x) for x in w]
    a = sum(x*x for x in mpd)
    b = 2*sum(x*y for x, y in zip(mpd, mpw))
    cc = sum(x*x for x in mpw) - mpm.mpf(r)*mpm.mpf(r)
    disc = b*b - 4*a*cc
    if disc < 0:
        disc = mpm.mpf(0)
    root = mpm.sqrt(disc)
    return (float((-b - root)/(2*a)), float((-b + root)/(2*a)))


## plane kernels
## -------------

def plane_plane(q1, n1, q2, n2):
    if _parallel(n1, n2):
        h = vec.dot(vec.sub(q1, q2), n2)
        return abs(h), q1, vec.madd(q1, n2, -h)
    p, _ = plane_plane_line(q1, n1, q2, n2)
    return 0.0, p, p


def plane_plane_line(q1, n1, q2, n2):
    """point and direction of the line shared by two non-parallel
    planes"""
    d = vec.cross(n1, n2)
    h1 = vec.dot(n1, q1)
    h2 = vec.dot(n2, q2)
    p = vec.scale3(vec.add(vec.scale3(vec.cross(n2, d), h1),
                           vec.scale3(vec.cross(d, n1), h2)), 1.0/vec.mag2(d))
    return p, d


def plane_points(q, n, points, edges):
    """distance from a plane to the convex hull of ``points``, whose
    hull edges are ``edges``"""
    hs = [vec.dot(vec.sub(p, q), n) for p in points]
    lo = min(hs)
    hi = max(hs)
    if lo <= 0.0 <= hi:
        for p, h in zip(points, hs):
            if h == 0.0:
                return 0.0, p, p
        for i, j in edges:
            if (hs[i] < 0.0) != (hs[j] < 0.0):
                p = vec.lerp(points[i], points[j], hs[i]/(hs[i] - hs[j]))
                return 0.0, p, p
    k = min(range(len(points)), key=lambda i: abs(hs[i]))
    return abs(hs[k]), points[k], vec.madd(points[k], n, -hs[k])


def plane_disk(q, n, c, m, r):
    """plane ``(q, n)`` against disk ``(c, m, r)``; witnesses in that
    order"""
    h = vec.dot(vec.sub(c, q), n)
    inplane = vec.madd(n, m, -vec.dot(n, m))
    s = vec.mag(inplane)
    if s <= _PARALLEL:
        return abs(h), vec.madd(c, n, -h), c
    u = vec.scale3(inplane, 1.0/s)
    if abs(h) <= r*s:
        p = vec.madd(c, u, -h/s)
        return 0.0, p, p
    p = vec.madd(c, u, -math.copysign(r, h))
    hp = vec.dot(vec.sub(p, q), n)
    return abs(hp), vec.madd(p, n, -hp), p


def triangle_plane_section(a, b, c, q, n, eps=0.0):
    """end points of the part of triangle ``abc`` lying in the plane, or
    ``None``; vertices within ``eps`` of the plane count as on it"""
    pts = (a, b, c)
    hs = [vec.dot(vec.sub(p, q), n) for p in pts]
    hs = [0.0 if abs(h) <= eps else h for h in hs]
    out = [p for p, h in zip(pts, hs) if h == 0.0]
    for i, j in ((0, 1), (1, 2), (2, 0)):
        if (hs[i] < 0.0 and hs[j] > 0.0) or (hs[i] > 0.0 and hs[j] < 0.0):
            out.append(vec.lerp(pts[i], pts[j], hs[i]/(hs[i] - hs[j])))
    if not out:
        return None
    if len(out) == 3:
        ## the whole triangle is in the plane
        return None
    return out[0], out[-1]


## disk kernels
## ------------

def circle_point(c, u, v, r, theta):
    return vec.madd(vec.madd(c, u, r*math.cos(theta)), v, r*math.sin(theta))


def circle_min(c, n, r, f):
    """minimize ``f(point)[0]`` over the circle ``(c, n, r)``; ``f``
    returns ``(distance, point, witness)``.  The circle is sampled and
    the best local minima are refined by golden-section search."""
    u, v = vec.basis(n)
    step = 2.0*math.pi/_SAMPLES
    samples = [f(circle_point(c, u, v, r, i*step)) for i in range(_SAMPLES)]
    minima = [i for i in range(_SAMPLES)
              if samples[i][0] <= samples[i-1][0] and samples[i][0] <= samples[(i+1) % _SAMPLES][0]]
    minima.sort(key=lambda i: samples[i][0])
    best = samples[minima[0]] if minima else min(samples, key=lambda s: s[0])
    logger.debug("refining %d circle minima", min(len(minima), _REFINE))

    def g(theta):
        return f(circle_point(c, u, v, r, theta))

    for i in minima[:_REFINE]:
        lo = (i - 1)*step
        hi = (i + 1)*step
        x1 = hi - _GOLDEN*(hi - lo)
        x2 = lo + _GOLDEN*(hi - lo)
        f1 = g(x1)
        f2 = g(x2)
        for _ in range(_GOLDEN_ITERATIONS):
            if hi - lo < 1e-15:
                break
            if f1[0] < f2[0]:
                hi, x2, f2 = x2, x1, f1
                x1 = hi - _GOLDEN*(hi - lo)
                f1 = g(x1)
            else:
                lo, x1, f1 = x1, x2, f2
                x2 = lo + _GOLDEN*(hi - lo)
                f2 = g(x2)
        best = _best(best, f1, f2)
    return best


def _chord(c, n, r, p, d):
    """parameter interval of the line ``p + t*d`` (lying in the disk
    plane) inside the disk, or ``None``"""
    dd = vec.mag2(d)
    t0 = vec.dot(vec.sub(c, p), d)/dd
    delta2 = vec.mag2(vec.sub(vec.madd(p, d, t0), c))
    if delta2 > r*r:
        return None
    half = math.sqrt(r*r - delta2)/math.sqrt(dd)
    return t0 - half, t0 + half


def span_disk(s: Span, c, n, r):
    dn = vec.dot(s.direction, n)
    if abs(dn) <= _PARALLEL*vec.mag(s.direction):
        ## parallel: everything happens in the disk plane
        h = vec.dot(vec.sub(s.origin, c), n)
        end = None if s.end is None else vec.madd(s.end, n, -h)
        flat = Span(vec.madd(s.origin, n, -h), vec.madd(s.direction, n, -dn), s.lo, s.hi, end)
        m, t, q = point_span(c, flat)
        ps = s.at(t)
        pd = q if m <= r else vec.madd(c, vec.sub(q, c), r/m)
        return vec.dist(ps, pd), ps, pd

    t = -vec.dot(vec.sub(s.origin, c), n)/dn
    if s.lo <= t <= s.hi:
        p = s.at(t)
        if vec.dist(p, c) <= r:
            return 0.0, p, p

    candidates = [_swap(point_disk(p, c, n, r)) for _, p in s.endpoints()]
    rim = circle_min(c, n, r, lambda x: _swap(point_span_witness(x, s)))
    candidates.append(_swap(rim))
    return _best(*candidates)


def point_span_witness(p, s: Span):
    d, _, q = point_span(p, s)
    return d, p, q


def disk_disk(c1, n1, r1, c2, n2, r2):
    if _parallel(n1, n2):
        h = vec.dot(vec.sub(c2, c1), n1)
        w = vec.sub(vec.madd(c2, n1, -h), c1)
        m = vec.mag(w)
        gap = m - r1 - r2
        if gap <= 0.0:
            if m == 0.0:
                p1 = c1
            else:
                lo = max(-r1, m - r2)
                hi = min(r1, m + r2)
                p1 = vec.madd(c1, w, 0.5*(lo + hi)/m)
            return abs(h), p1, vec.madd(p1, n1, h)
        p1 = vec.madd(c1, w, r1/m)
        p2 = vec.madd(vec.madd(c1, w, (m - r2)/m), n1, h)
        return vec.dist(p1, p2), p1, p2

    p, d = plane_plane_line(c1, n1, c2, n2)
    k1 = _chord(c1, n1, r1, p, d)
    k2 = _chord(c2, n2, r2, p, d)
    if k1 is not None and k2 is not None:
        lo = max(k1[0], k2[0])
        hi = min(k1[1], k2[1])
        if lo <= hi:
            x = vec.madd(p, d, 0.5*(lo + hi))
            return 0.0, x, x

    first = circle_min(c1, n1, r1, lambda x: point_disk(x, c2, n2, r2))
    second = _swap(circle_min(c2, n2, r2, lambda x: point_disk(x, c1, n1, r1)))
    return _best(first, second)


def disk_triangle(c, n, r, a, b, cc):
    nt = vec.cross(vec.sub(b, a), vec.sub(cc, a))
    if _parallel(n, nt):
        h = vec.dot(vec.sub(a, c), n)
        flat = [vec.madd(x, n, -h) for x in (a, b, cc)]
        m, _, q = point_triangle(c, *flat)
        pd = q if m <= r else vec.madd(c, vec.sub(q, c), r/m)
        pt = vec.madd(q, n, h)
        return vec.dist(pd, pt), pd, pt

    candidates = []
    section = triangle_plane_section(a, b, cc, c, n)
    if section is not None:
        hit = span_disk(segment_span(*section), c, n, r)
        if hit[0] == 0.0:
            return _swap(hit)
        candidates.append(_swap(hit))
    for x, y in ((a, b), (b, cc), (cc, a)):
        candidates.append(_swap(span_disk(segment_span(x, y), c, n, r)))
    candidates.append(circle_min(c, n, r, lambda x: point_triangle(x, a, b, cc)))
    return _best(*candidates)


def disk_poly(c, n, r, poly: Poly):
    if poly.margin(c) <= 0.0:
        return 0.0, c, c
    return _best(*(disk_triangle(c, n, r, a, b, cc) for a, b, cc in poly.fan()))


## triangles and polytopes
## -----------------------

def triangle_triangle(t1, t2):
    candidates = []
    for x, y in ((t1[0], t1[1]), (t1[1], t1[2]), (t1[2], t1[0])):
        candidates.append(span_triangle(segment_span(x, y), *t2))
    for x, y in ((t2[0], t2[1]), (t2[1], t2[2]), (t2[2], t2[0])):
        candidates.append(_swap(span_triangle(segment_span(x, y), *t1)))
    return _best(*candidates)


def triangle_poly(t, poly: Poly):
    if poly.margin(t[0]) <= 0.0:
        return 0.0, t[0], t[0]
    return _best(*(triangle_triangle(t, face) for face in poly.fan()))


def sat_separated(va, na, ea, vb, nb, eb, eps) -> bool:
    """Separating axis test between two convex point sets.

    ``va``/``vb`` are vertices, ``na``/``nb`` face normals, ``ea``/``eb``
    edge directions.  The candidate axes are all face normals plus the
    cross products of every edge pair.  A cross product of nearly
    parallel edges has no usable direction and counts as a
    non-separating axis.  Projections that overlap or touch within
    ``eps`` do not separate.
    """
    axes = list(na) + list(nb)
    degenerate = 0
    for x in ea:
        mx = vec.mag(x)
        for y in eb:
            axis = vec.cross(x, y)
            if vec.mag(axis) <= _PARALLEL * mx * vec.mag(y):
                degenerate += 1
                continue
            axes.append(axis)
    if degenerate:
        logger.debug("%d near-parallel edge pairs counted as non-separating", degenerate)

    for axis in axes:
        u = vec.unit(axis)
        pa = [vec.dot(p, u) for p in va]
        pb = [vec.dot(p, u) for p in vb]
        if min(pb) > max(pa) + eps or min(pa) > max(pb) + eps:
            return True
    return False


def poly_poly_intersects(a: Poly, b: Poly, eps) -> bool:
    return not sat_separated(a.vertices, a.normals(), a.edge_directions(),
                             b.vertices, b.normals(), b.edge_directions(), eps)


def overlap_witness(a: Poly, b: Poly, eps):
    """a point common to two intersecting polytopes (within ``eps``)"""
    for p in a.vertices:
        if b.margin(p) <= eps:
            return p
    for p in b.vertices:
        if a.margin(p) <= eps:
            return p
    for s in a.edge_spans():
        clip = clip_span(s, b, eps)
        if clip is not None:
            return s.at(0.5*(clip[0] + clip[1]))
    for s in b.edge_spans():
        clip = clip_span(s, a, eps)
        if clip is not None:
            return s.at(0.5*(clip[0] + clip[1]))
    return None


def poly_poly(a: Poly, b: Poly):
    """closest points of two disjoint polytopes, by feature search over
    vertex-face pairs (which also covers vertex-vertex and vertex-edge,
    since the face polygons are closed) and edge-edge pairs"""
    candidates = []
    fan_b = list(b.fan())
    for p in a.vertices:
        for t in fan_b:
            candidates.append(point_triangle(p, *t))
    for p in b.vertices:
        for t in a.fan():
            candidates.append(_swap(point_triangle(p, *t)))
    edges_b = b.edge_spans()
    for s in a.edge_spans():
        for e in edges_b:
            d, _, _, p, q = span_span(s, e)
            candidates.append((d, p, q))
    return _best(*candidates)
