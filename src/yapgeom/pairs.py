## pairwise predicates for yapgeom

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

"""Pairwise distance, intersection and containment.

Every function here resolves both operands into global coordinates,
takes one absolute threshold from the current tolerance context at the
larger reference magnitude of the two operands, and hands plain tuples
to :mod:`yapgeom.closest`.

``distance`` and ``intersects`` accept any two shapes.  ``intersection``
covers the pairs with a closed-form result and raises ``ValueError``
for the rest.  ``locate`` classifies an object against a container as
1 (inside), 0 (on the boundary) or -1 (outside).

"""

from __future__ import annotations

import math

from yapgeom import closest
from yapgeom import vec
from yapgeom.closest import INF
from yapgeom.linear import Line3d, Ray3d, Segment3d
from yapgeom.planar import Circle3d, Plane3d, Triangle
from yapgeom.point import Point3d
from yapgeom.polytope import ConvexPolyhedron
from yapgeom.result import NO_INTERSECTION, Intersection
from yapgeom.shape import Shape
from yapgeom.solid import Box3d, Sphere, Tetrahedron
from yapgeom.tolerance import get_tolerance

## canonical operand order of the distance kernels
_ORDER = ("point", "span", "plane", "disk", "triangle", "poly")

_TRIANGLE_EDGES = ((0, 1), (1, 2), (2, 0))


def _swap(r):
    return r[0], r[2], r[1]


def _resolve(obj):
    if not isinstance(obj, Shape):
        raise ValueError('bad shape: {!r}'.format(obj))
    return obj._resolve()


def _eps(a, b):
    return get_tolerance().eps(max(a._scale(), b._scale()))


def _parallel(u, v):
    """unit directions parallel within the dimensionless tolerance"""
    return get_tolerance().is_zero(vec.mag(vec.cross(u, v)), 1.0)


## distance
## --------

def _span_span(s1, s2):
    d, _, _, p, q = closest.span_span(s1, s2)
    return d, p, q


def _point_plane(p, plane):
    h, foot = closest.point_plane(p, *plane)
    return abs(h), p, foot


_KERNELS = {
    ("point", "point"): closest.point_point,
    ("point", "span"): closest.point_span_witness,
    ("point", "plane"): _point_plane,
    ("point", "disk"): lambda p, d: closest.point_disk(p, *d),
    ("point", "triangle"): lambda p, t: closest.point_triangle(p, *t),
    ("point", "poly"): closest.point_poly,
    ("span", "span"): _span_span,
    ("span", "plane"): lambda s, pl: closest.span_plane(s, *pl),
    ("span", "disk"): lambda s, d: closest.span_disk(s, *d),
    ("span", "triangle"): lambda s, t: closest.span_triangle(s, *t),
    ("span", "poly"): closest.span_poly,
    ("plane", "plane"): lambda p1, p2: closest.plane_plane(*p1, *p2),
    ("plane", "disk"): lambda pl, d: closest.plane_disk(*pl, *d),
    ("plane", "triangle"): lambda pl, t: closest.plane_points(pl[0], pl[1], t, _TRIANGLE_EDGES),
    ("plane", "poly"): lambda pl, poly: closest.plane_points(pl[0], pl[1], poly.vertices, poly.edges),
    ("disk", "disk"): lambda d1, d2: closest.disk_disk(*d1, *d2),
    ("disk", "triangle"): lambda d, t: closest.disk_triangle(*d, *t),
    ("disk", "poly"): lambda d, poly: closest.disk_poly(*d, poly),
    ("triangle", "triangle"): closest.triangle_triangle,
    ("triangle", "poly"): closest.triangle_poly,
}


def _sphere_distance(c, r, other):
    ## a ball is its center grown by the radius
    dc, _, px = _distance(("point", c), other)
    if dc <= r:
        return 0.0, px, px
    return dc - r, vec.madd(c, vec.sub(px, c), r/dc), px


def _distance(a, b):
    ka, da = a
    kb, db = b
    if ka == "sphere":
        return _sphere_distance(da[0], da[1], b)
    if kb == "sphere":
        return _swap(_sphere_distance(db[0], db[1], a))
    if _ORDER.index(ka) > _ORDER.index(kb):
        return _swap(_distance(b, a))
    return _KERNELS[ka, kb](da, db)


def distance(a, b):
    """``(distance, point_on_a, point_on_b)`` in global coordinates"""
    ra = _resolve(a)
    rb = _resolve(b)
    if ra[0] == rb[0] == "poly":
        pa, pb = ra[1], rb[1]
        eps = _eps(a, b)
        if closest.poly_poly_intersects(pa, pb, eps):
            w = closest.overlap_witness(pa, pb, eps)
            if w is None:
                _, p, q = closest.poly_poly(pa, pb)
                w = vec.lerp(p, q, 0.5)
            return 0.0, w, w
        return closest.poly_poly(pa, pb)
    return _distance(ra, rb)


## separating axis features: (vertices, face normals, edge directions)
def _sat_features(r):
    kind, data = r
    if kind == "poly":
        return data.vertices, data.normals(), data.edge_directions()
    if kind == "triangle":
        a, b, c = data
        n = vec.cross(vec.sub(b, a), vec.sub(c, a))
        return data, [vec.unit(n)], [vec.sub(b, a), vec.sub(c, b), vec.sub(a, c)]
    return (data.origin, data.end), [], [data.direction]


def _sat_operand(r):
    kind, data = r
    if kind == "span":
        return data.end is not None
    return kind in ("poly", "triangle")


def intersects(a, b) -> bool:
    ra = _resolve(a)
    rb = _resolve(b)
    eps = _eps(a, b)
    if "poly" in (ra[0], rb[0]) and _sat_operand(ra) and _sat_operand(rb):
        return not closest.sat_separated(*_sat_features(ra), *_sat_features(rb), eps)
    return distance(a, b)[0] <= eps


## intersection
## ------------

def _clipped(s, lo, hi, eps):
    """the part of span ``s`` with parameters in ``[lo, hi]``, as the
    matching shape, or ``None``"""
    slack = eps / vec.mag(s.direction)
    lo = max(lo, s.lo)
    hi = min(hi, s.hi)
    if lo > hi + slack:
        return None
    if lo == -INF and hi == INF:
        return Line3d(s.origin, s.direction)
    if hi == INF:
        return Ray3d(s.at(lo), s.direction)
    if lo == -INF:
        return Ray3d(s.at(hi), vec.neg(s.direction))
    if hi - lo <= slack:
        return Point3d(s.at(lo if lo == hi else 0.5*(lo + hi)))
    return Segment3d(s.at(lo), s.at(hi))


def _chord(c, r, s, eps):
    """parameter interval of the line through span ``s`` inside the
    circle ``(c, r)`` in its plane; a single parameter at tangency"""
    dd = vec.mag2(s.direction)
    t0 = vec.dot(vec.sub(c, s.origin), s.direction)/dd
    delta = vec.dist(c, vec.madd(s.origin, s.direction, t0))
    if delta > r + eps:
        return None
    if delta >= r - eps:
        return t0, t0
    half = math.sqrt(r*r - delta*delta)/math.sqrt(dd)
    return t0 - half, t0 + half


def _linear_linear(a, b, eps):
    s1 = a.span()
    s2 = b.span()
    if _parallel(a._global_axis()[1], b._global_axis()[1]):
        d, _, _ = closest.point_span_witness(s2.origin, closest.line_span(s1.origin, s1.direction))
        if d > eps:
            return None
        dd = vec.mag2(s1.direction)
        k = vec.dot(s2.direction, s1.direction)/dd
        t0 = vec.dot(vec.sub(s2.origin, s1.origin), s1.direction)/dd
        lo = t0 + k*s2.lo
        hi = t0 + k*s2.hi
        if k < 0.0:
            lo, hi = hi, lo
        return _clipped(s1, lo, hi, eps)
    d, _, _, p, _ = closest.span_span(s1, s2)
    return Point3d(p) if d <= eps else None


def _linear_plane(a, b, eps):
    s = a.span()
    q, n = b._global_plane()
    h = vec.dot(vec.sub(s.origin, q), n)
    if get_tolerance().is_zero(vec.dot(a._global_axis()[1], n), 1.0):
        return a.convert_to_global() if abs(h) <= eps else None
    t = -h/vec.dot(s.direction, n)
    return _clipped(s, t, t, eps)


def _linear_sphere(a, b, eps):
    s = a.span()
    roots = closest.span_sphere(s, b.center.global_xyz(), b.radius, eps)
    if not roots:
        return None
    return _clipped(s, roots[0], roots[-1], eps)


def _linear_circle(a, b, eps):
    s = a.span()
    c, n, r = b._global_disk()
    h = vec.dot(vec.sub(s.origin, c), n)
    if get_tolerance().is_zero(vec.dot(a._global_axis()[1], n), 1.0):
        if abs(h) > eps:
            return None
        chord = _chord(c, r, s, eps)
        return None if chord is None else _clipped(s, chord[0], chord[1], eps)
    t = -h/vec.dot(s.direction, n)
    if vec.dist(vec.madd(s.origin, s.direction, t), c) > r + eps:
        return None
    return _clipped(s, t, t, eps)


def _clip_convex(s, poly, eps):
    """the part of span ``s`` inside a convex polytope (or prism), as
    the matching shape, or ``None``"""
    clip = closest.clip_span(s, poly)
    if clip is not None:
        return _clipped(s, clip[0], clip[1], eps)
    ## no exact overlap: at most a contact within tolerance
    clip = closest.clip_span(s, poly, eps)
    if clip is None:
        return None
    lo = max(clip[0], s.lo)
    hi = min(clip[1], s.hi)
    if lo > hi:
        return None
    if lo != -INF and hi != INF and (hi - lo)*vec.mag(s.direction) <= 4.0*eps:
        return Point3d(s.at(0.5*(lo + hi)))
    return _clipped(s, lo, hi, eps)


def _triangle_prism(tri, n):
    """the triangle's edge half-spaces, as a polytope open along ``n``"""
    a, b, c = tri
    faces = [((0,), vec.unit(vec.cross(vec.sub(b, a), n))),
             ((1,), vec.unit(vec.cross(vec.sub(c, b), n))),
             ((2,), vec.unit(vec.cross(vec.sub(a, c), n)))]
    return closest.Poly(tri, faces, ())


def _linear_triangle(a, b, eps):
    s = a.span()
    tri = b._global_vertices()
    _, _, n = b._orientation()
    h = vec.dot(vec.sub(s.origin, tri[0]), n)
    if get_tolerance().is_zero(vec.dot(a._global_axis()[1], n), 1.0):
        if abs(h) > eps:
            return None
        return _clip_convex(s, _triangle_prism(tri, n), eps)
    t = -h/vec.dot(s.direction, n)
    if closest.point_triangle(vec.madd(s.origin, s.direction, t), *tri)[0] > eps:
        return None
    return _clipped(s, t, t, eps)


def _linear_solid(a, b, eps):
    return _clip_convex(a.span(), b._resolve()[1], eps)


def _plane_plane(a, b, eps):
    q1, n1 = a._global_plane()
    q2, n2 = b._global_plane()
    if _parallel(n1, n2):
        return a.convert_to_global() if abs(vec.dot(vec.sub(q2, q1), n1)) <= eps else None
    p, d = closest.plane_plane_line(q1, n1, q2, n2)
    return Line3d(p, d)


def _plane_sphere(a, b, eps):
    q, n = a._global_plane()
    c = b.center.global_xyz()
    r = b.radius
    h = vec.dot(vec.sub(c, q), n)
    foot = vec.madd(c, n, -h)
    if abs(h) > r + eps:
        return None
    if abs(h) >= r - eps:
        return Point3d(foot)
    return Circle3d(foot, math.sqrt(r*r - h*h), n)


def _plane_circle(a, b, eps):
    q, n = a._global_plane()
    c, m, r = b._global_disk()
    if _parallel(n, m):
        return b.convert_to_global() if abs(vec.dot(vec.sub(c, q), n)) <= eps else None
    p, d = closest.plane_plane_line(q, n, c, m)
    s = closest.line_span(p, d)
    chord = _chord(c, r, s, eps)
    return None if chord is None else _clipped(s, chord[0], chord[1], eps)


def _plane_triangle(a, b, eps):
    q, n = a._global_plane()
    tri = b._global_vertices()
    if _parallel(n, b._orientation()[2]):
        return b.convert_to_global() if abs(vec.dot(vec.sub(tri[0], q), n)) <= eps else None
    section = closest.triangle_plane_section(*tri, q, n, eps)
    if section is None:
        return None
    p1, p2 = section
    if vec.dist(p1, p2) <= eps:
        return Point3d(p1)
    return Segment3d(p1, p2)


def _coplanar_circles(a, b, eps):
    c1, n1, r1 = a._global_disk()
    c2, _, r2 = b._global_disk()
    u = vec.sub(c2, c1)
    d = vec.mag(u)
    if d <= eps and abs(r1 - r2) <= eps:
        return a.convert_to_global()
    if r1 >= r2:
        small, cb, rb, cs, rs = b, c1, r1, c2, r2
    else:
        small, cb, rb, cs, rs = a, c2, r2, c1, r1
    if d + rs < rb - eps:
        return small.convert_to_global()
    if abs(d - (r1 + r2)) <= eps:
        return Point3d(vec.madd(c1, u, r1/d))
    if abs(d - (rb - rs)) <= eps:
        return Point3d(vec.madd(cb, vec.sub(cs, cb), rb/d))
    x = (d*d - r2*r2 + r1*r1)/(2.0*d)
    y = math.sqrt(max(0.0, r1*r1 - x*x))
    e = vec.scale3(u, 1.0/d)
    mid = vec.madd(c1, e, x)
    if y <= eps:
        return Point3d(mid)
    w = vec.cross(n1, e)
    return Segment3d(vec.madd(mid, w, y), vec.madd(mid, w, -y))


def _circle_circle(a, b, eps):
    c1, n1, r1 = a._global_disk()
    c2, n2, r2 = b._global_disk()
    if vec.dist(c1, c2) > r1 + r2 + eps:
        return None
    if _parallel(n1, n2):
        if abs(vec.dot(vec.sub(c2, c1), n1)) > eps:
            return None
        return _coplanar_circles(a, b, eps)
    ## common chord on the line shared by the two planes
    p, d = closest.plane_plane_line(c1, n1, c2, n2)
    s = closest.line_span(p, d)
    k1 = _chord(c1, r1, s, eps)
    k2 = _chord(c2, r2, s, eps)
    if k1 is None or k2 is None:
        return None
    return _clipped(s, max(k1[0], k2[0]), min(k1[1], k2[1]), eps)


def _sphere_sphere(a, b, eps):
    c1 = a.center.global_xyz()
    c2 = b.center.global_xyz()
    r1 = a.radius
    r2 = b.radius
    u = vec.sub(c2, c1)
    d = vec.mag(u)
    if d <= eps and abs(r1 - r2) <= eps:
        return a.convert_to_global()
    cb, rb, cs, rs = (c1, r1, c2, r2) if r1 >= r2 else (c2, r2, c1, r1)
    if d > r1 + r2 + eps or d < rb - rs - eps:
        return None
    if abs(d - (r1 + r2)) <= eps:
        return Point3d(vec.madd(c1, u, r1/d))
    if abs(d - (rb - rs)) <= eps:
        return Point3d(vec.madd(cb, vec.sub(cs, cb), rb/d))
    ## law of cosines: distance of the circle plane from c1
    x = (d*d - r2*r2 + r1*r1)/(2.0*d)
    e = vec.scale3(u, 1.0/d)
    radius = math.sqrt(max(0.0, r1*r1 - x*x))
    if radius <= eps:
        return Point3d(vec.madd(c1, e, x))
    return Circle3d(vec.madd(c1, e, x), radius, e)


_INTERSECTORS = {
    ("linear", "linear"): _linear_linear,
    ("linear", "plane"): _linear_plane,
    ("linear", "sphere"): _linear_sphere,
    ("linear", "circle"): _linear_circle,
    ("linear", "triangle"): _linear_triangle,
    ("linear", "solid"): _linear_solid,
    ("plane", "plane"): _plane_plane,
    ("plane", "sphere"): _plane_sphere,
    ("plane", "circle"): _plane_circle,
    ("plane", "triangle"): _plane_triangle,
    ("circle", "circle"): _circle_circle,
    ("sphere", "sphere"): _sphere_sphere,
}


def _category(obj):
    if isinstance(obj, Point3d):
        return "point"
    if isinstance(obj, (Line3d, Ray3d, Segment3d)):
        return "linear"
    if isinstance(obj, Plane3d):
        return "plane"
    if isinstance(obj, Circle3d):
        return "circle"
    if isinstance(obj, Triangle):
        return "triangle"
    if isinstance(obj, Sphere):
        return "sphere"
    if isinstance(obj, (Box3d, Tetrahedron, ConvexPolyhedron)):
        return "solid"
    raise ValueError('bad shape: {!r}'.format(obj))


def intersection(a, b) -> Intersection:
    ca = _category(a)
    cb = _category(b)
    eps = _eps(a, b)
    if ca == "point" or cb == "point":
        p = a if ca == "point" else b
        if distance(a, b)[0] <= eps:
            return Intersection.of(Point3d(p.global_xyz()))
        return NO_INTERSECTION
    fn = _INTERSECTORS.get((ca, cb))
    if fn is not None:
        return Intersection.of(fn(a, b, eps))
    fn = _INTERSECTORS.get((cb, ca))
    if fn is not None:
        return Intersection.of(fn(b, a, eps))
    raise ValueError('intersection of {} and {} is not supported'.format(
        type(a).__name__, type(b).__name__))


def intersection_of_planes(a, b, c) -> Intersection:
    """common part of three planes: a point, a line, a plane or nothing"""
    for s in (a, b, c):
        if not isinstance(s, Plane3d):
            raise ValueError('bad plane: {!r}'.format(s))
    (q1, n1), (q2, n2), (q3, n3) = (s._global_plane() for s in (a, b, c))
    det = vec.triple(n1, n2, n3)
    if not get_tolerance().is_zero(det, 1.0):
        ## Cramer's rule on n_i . x = n_i . q_i
        g = vec.add(vec.add(vec.scale3(vec.cross(n2, n3), vec.dot(n1, q1)),
                            vec.scale3(vec.cross(n3, n1), vec.dot(n2, q2))),
                    vec.scale3(vec.cross(n1, n2), vec.dot(n3, q3)))
        return Intersection.of(Point3d(vec.scale3(g, 1.0/det)))
    first = intersection(a, b)
    if not first:
        return NO_INTERSECTION
    return intersection(first.value, c)


## containment
## -----------

def _margin_class(m, eps):
    if m > eps:
        return -1
    if m >= -eps:
        return 0
    return 1


def _locate_point(p, container, eps):
    kind, data = _resolve(container)
    if kind == "point":
        return 1 if vec.dist(p, data) <= eps else -1
    if kind == "span":
        d, _, _ = closest.point_span(p, data)
        if d > eps:
            return -1
        if any(vec.dist(p, e) <= eps for _, e in data.endpoints()):
            return 0
        return 1
    if kind == "plane":
        q, n = data
        return 1 if abs(vec.dot(vec.sub(p, q), n)) <= eps else -1
    if kind == "disk":
        c, n, r = data
        w = vec.sub(p, c)
        h = vec.dot(w, n)
        if abs(h) > eps:
            return -1
        return _margin_class(vec.mag(vec.madd(w, n, -h)) - r, eps)
    if kind == "triangle":
        if closest.point_triangle(p, *data)[0] > eps:
            return -1
        for i, j in _TRIANGLE_EDGES:
            if closest.point_span(p, closest.segment_span(data[i], data[j]))[0] <= eps:
                return 0
        return 1
    if kind == "sphere":
        c, r = data
        return _margin_class(vec.dist(p, c) - r, eps)
    return _margin_class(data.margin(p), eps)


def _vertices(obj):
    if isinstance(obj, Segment3d):
        return [obj.p1, obj.p2]
    if isinstance(obj, (Triangle, Tetrahedron, ConvexPolyhedron)):
        return list(obj.vertices)
    if isinstance(obj, Box3d):
        return obj.corners()
    return None


def _locate_unbounded(obj, container, eps):
    o, u = obj._global_axis()
    if isinstance(container, Plane3d):
        q, n = container._global_plane()
        on = get_tolerance().is_zero(vec.dot(u, n), 1.0) and abs(vec.dot(vec.sub(o, q), n)) <= eps
        return 1 if on else -1
    if isinstance(container, Line3d):
        return 1 if _parallel(u, container._global_axis()[1]) and _locate_point(o, container, eps) == 1 else -1
    if isinstance(obj, Ray3d) and isinstance(container, Ray3d):
        v = container._global_axis()[1]
        if _parallel(u, v) and vec.dot(u, v) > 0.0:
            return _locate_point(o, container, eps)
    return -1


def _locate_disk(obj, container, eps):
    c, n, r = obj._global_disk()
    kind, data = _resolve(container)
    if kind == "plane":
        q, m = data
        return 1 if _parallel(n, m) and abs(vec.dot(vec.sub(c, q), m)) <= eps else -1
    if kind == "disk":
        c2, m, r2 = data
        if not _parallel(n, m) or abs(vec.dot(vec.sub(c, c2), m)) > eps:
            return -1
        return _margin_class(vec.dist(c, c2) + r - r2, eps)
    if kind == "sphere":
        c2, r2 = data
        w = vec.sub(c, c2)
        h = vec.dot(w, n)
        rho = vec.mag(vec.madd(w, n, -h))
        return _margin_class(math.hypot(h, rho + r) - r2, eps)
    if kind == "poly":
        g = data.vertices
        m = max(vec.dot(vec.sub(c, g[loop[0]]), f) + r*math.sqrt(max(0.0, 1.0 - vec.dot(n, f)**2))
                for loop, f in data.faces)
        return _margin_class(m, eps)
    raise ValueError('cannot locate {} in {}'.format(type(obj).__name__, type(container).__name__))


def _locate_sphere(obj, container, eps):
    c = obj.center.global_xyz()
    r = obj.radius
    kind, data = _resolve(container)
    if kind == "sphere":
        return _margin_class(vec.dist(c, data[0]) + r - data[1], eps)
    if kind == "poly":
        return _margin_class(data.margin(c) + r, eps)
    raise ValueError('cannot locate {} in {}'.format(type(obj).__name__, type(container).__name__))


def locate(obj, container) -> int:
    """1 if ``obj`` lies inside ``container``, 0 if it belongs to it
    but touches its boundary, -1 if it is not contained"""
    _resolve(container)
    eps = _eps(obj, container)
    if isinstance(obj, Point3d):
        return _locate_point(obj.global_xyz(), container, eps)
    points = _vertices(obj)
    if points is not None:
        ## every container is convex
        return min(_locate_point(p.global_xyz(), container, eps) for p in points)
    if isinstance(obj, (Line3d, Ray3d)):
        return _locate_unbounded(obj, container, eps)
    if isinstance(obj, Circle3d):
        return _locate_disk(obj, container, eps)
    if isinstance(obj, Sphere):
        return _locate_sphere(obj, container, eps)
    if isinstance(obj, Plane3d) and isinstance(container, Plane3d):
        return 1 if obj == container else -1
    raise ValueError('cannot locate {} in {}'.format(type(obj).__name__, type(container).__name__))


__all__ = ["distance", "intersection", "intersection_of_planes", "intersects", "locate"]
