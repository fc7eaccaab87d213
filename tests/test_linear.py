import math

import pytest

from yapgeom import tolerance
from yapgeom.frame import Frame
from yapgeom.linear import Line3d, Ray3d, Segment3d
from yapgeom.planar import Circle3d, Plane3d, Triangle
from yapgeom.point import Point3d, Vector3d
from yapgeom.result import IntersectionKind
from yapgeom.rotation import Rotation
from yapgeom.solid import Box3d, Sphere, Tetrahedron


def _close(a, b, tol=1e-9):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def _segment_is(seg, a, b, tol=1e-9):
    """end points match ``a`` and ``b`` in either order"""
    p = seg.p1.global_xyz()
    q = seg.p2.global_xyz()
    return (_close(p, a, tol) and _close(q, b, tol)) or (_close(p, b, tol) and _close(q, a, tol))


XAXIS = Line3d((0, 0, 0), (1, 0, 0))


class TestConstruction:

    def test_line(self):
        line = Line3d(Point3d(0, 0, 0), Point3d(1, 1, 0))
        assert line.direction == Vector3d(1, 1, 0)
        assert line.point == Point3d(0, 0, 0)
        with pytest.raises(ValueError):
            Line3d((0, 0, 0), (0, 0, 0))
        with pytest.raises(ValueError):
            Line3d((1, 1, 1), Point3d(1, 1, 1))
        with pytest.raises(ValueError):
            Line3d("origin", (1, 0, 0))

    def test_ray(self):
        ray = Ray3d((1, 2, 3), (0, 0, 2))
        assert ray.to_line() == Line3d((1, 2, 0), (0, 0, -1))
        with pytest.raises(ValueError):
            Ray3d((1, 2, 3), (0, 0, 0))

    def test_segment(self):
        s = Segment3d((0, 0, 0), (3, 4, 0))
        assert s.length == pytest.approx(5.0)
        assert s.midpoint() == Point3d(1.5, 2, 0)
        assert s.to_vector() == Vector3d(3, 4, 0)
        assert s.to_line() == Line3d((3, 4, 0), (-3, -4, 0))
        with pytest.raises(ValueError):
            Segment3d((1, 1, 1), (1, 1, 1))

    def test_local_frame(self):
        f = Frame((1, 0, 0))
        s = Segment3d((0, 0, 0), (2, 0, 0), frame=f)
        assert s.frame is f
        m = s.midpoint()
        assert m.frame is f
        assert _close(m.xyz, (1, 0, 0))
        assert m == Point3d(2, 0, 0)


class TestEquality:

    def test_lines(self):
        assert XAXIS == Line3d((5, 0, 0), (-2, 0, 0))
        assert XAXIS != Line3d((0, 1, 0), (1, 0, 0))
        assert XAXIS != Line3d((0, 0, 0), (1, 1e-6, 0))
        assert XAXIS != Ray3d((0, 0, 0), (1, 0, 0))

    def test_rays(self):
        assert Ray3d((0, 0, 0), (1, 0, 0)) == Ray3d((0, 0, 0), (2, 0, 0))
        assert Ray3d((0, 0, 0), (1, 0, 0)) != Ray3d((0, 0, 0), (-1, 0, 0))
        assert Ray3d((0, 0, 0), (1, 0, 0)) != Ray3d((1, 0, 0), (1, 0, 0))

    def test_segments(self):
        s = Segment3d((0, 0, 0), (1, 2, 3))
        assert s == Segment3d((1, 2, 3), (0, 0, 0))
        assert s != Segment3d((0, 0, 0), (1, 2, 3.001))

    def test_relative_segment_equality(self):
        ## a length-100 segment with one end point moved by 0.99
        s1 = Segment3d((0, 0, 0), (100, 0, 0))
        s2 = Segment3d((0, 0, 0), (100, 0.99, 0))
        with tolerance.tolerance(0.01, absolute=False):
            assert s1 == s2
        with tolerance.tolerance(0.01, absolute=True):
            assert s1 != s2

    def test_relative_line_equality(self):
        ## the offset of the second line is 0.41 off axis, its points
        ## are about 173 from the origin
        l1 = Line3d((100, 100, 100), (1, 1, 1))
        l2 = Line3d((100.5, 100, 100), (1, 1, 1))
        assert l1 != l2
        with tolerance.tolerance(0.01, absolute=False):
            assert l1 == l2


class TestDistance:

    def test_skew_lines(self):
        d, p, q = XAXIS.distance_to(Line3d((0, 0, 1), (0, 1, 0)), points=True)
        assert d == pytest.approx(1.0)
        assert p == Point3d(0, 0, 0)
        assert q == Point3d(0, 0, 1)

    def test_segments(self):
        s = Segment3d((0, 0, 0), (1, 0, 0))
        d, p, q = s.distance_to(Segment3d((2, 1, 0), (2, 2, 0)), points=True)
        assert d == pytest.approx(math.sqrt(2.0))
        assert p == Point3d(1, 0, 0)
        assert q == Point3d(2, 1, 0)
        assert s.distance_to(Segment3d((3, 1, 0), (5, 1, 0))) == pytest.approx(math.sqrt(5.0))
        assert s.distance_to(Segment3d((0.5, -1, 0), (0.5, 1, 0))) == 0.0

    def test_rays(self):
        ray = Ray3d((0, 0, 1), (0, 0, 1))
        plane = Plane3d((0, 0, 0), (0, 0, 1))
        assert ray.distance_to(plane) == pytest.approx(1.0)
        assert plane.distance_to(ray) == pytest.approx(1.0)
        assert Ray3d((0, 0, 1), (0, 0, -1)).distance_to(plane) == 0.0
        assert ray.distance_to(Ray3d((1, 0, 0), (-1, 0, 0))) == pytest.approx(1.0)

    def test_planes(self):
        plane = Plane3d((0, 0, 0), (0, 0, 1))
        assert Segment3d((0, 0, 3), (1, 0, 3)).distance_to(plane) == pytest.approx(3.0)
        assert Line3d((0, 0, 3), (1, 0, 1)).distance_to(plane) == 0.0

    def test_solids(self):
        box = Box3d((0, 0, 0), 2, 2, 2)
        assert Segment3d((3, 0, 0), (5, 0, 0)).distance_to(box) == pytest.approx(2.0)
        assert Line3d((0, 3, 3), (1, 0, 0)).distance_to(box) == pytest.approx(2.0*math.sqrt(2.0))
        assert XAXIS.distance_to(box) == 0.0
        assert Segment3d((0, 0, 5), (1, 0, 5)).distance_to(Sphere((0, 0, 0), 2)) == pytest.approx(3.0)

    def test_circle(self):
        c = Circle3d((0, 0, 0), 1)
        assert Line3d((0, 0, 5), (0, 0, 1)).distance_to(c) == 0.0
        ## parallel to the disk, above its rim
        assert Line3d((0, 2, 1), (1, 0, 0)).distance_to(c) == pytest.approx(math.sqrt(2.0))
        ## skew, passing beside the rim
        d = Line3d((3, 0, -1), (0, 0, 1)).distance_to(c)
        assert d == pytest.approx(2.0, abs=1e-9)


class TestIntersection:

    def test_crossing_lines(self):
        r = XAXIS.intersection_with(Line3d((1, -1, 0), (0, 1, 0)))
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(1, 0, 0)

    def test_skew_and_parallel_lines(self):
        assert not XAXIS.intersection_with(Line3d((0, 0, 1), (0, 1, 0)))
        assert not XAXIS.intersection_with(Line3d((0, 1, 0), (1, 0, 0)))

    def test_coincident_lines(self):
        r = XAXIS.intersection_with(Line3d((3, 0, 0), (-1, 0, 0)))
        assert r.kind is IntersectionKind.LINE
        assert r.value == XAXIS

    def test_overlapping_segments(self):
        r = Segment3d((0, 0, 0), (2, 0, 0)).intersection_with(Segment3d((1, 0, 0), (3, 0, 0)))
        assert r.kind is IntersectionKind.SEGMENT
        assert _segment_is(r.value, (1, 0, 0), (2, 0, 0))

    def test_touching_segments(self):
        r = Segment3d((0, 0, 0), (1, 0, 0)).intersection_with(Segment3d((1, 0, 0), (2, 0, 0)))
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(1, 0, 0)

    def test_disjoint_collinear_segments(self):
        assert not Segment3d((0, 0, 0), (1, 0, 0)).intersection_with(Segment3d((2, 0, 0), (3, 0, 0)))

    def test_rays(self):
        a = Ray3d((0, 0, 0), (1, 0, 0))
        r = a.intersection_with(Ray3d((2, 0, 0), (-1, 0, 0)))
        assert r.kind is IntersectionKind.SEGMENT
        assert _segment_is(r.value, (0, 0, 0), (2, 0, 0))
        r = a.intersection_with(Ray3d((2, 0, 0), (1, 0, 0)))
        assert r.kind is IntersectionKind.RAY
        assert r.value == Ray3d((2, 0, 0), (1, 0, 0))
        assert not a.intersection_with(Ray3d((-1, 0, 0), (-1, 0, 0)))
        r = XAXIS.intersection_with(Ray3d((3, 0, 0), (1, 0, 0)))
        assert r.kind is IntersectionKind.RAY

    def test_plane(self):
        plane = Plane3d((0, 0, 0), (0, 0, 1))
        r = Segment3d((0, 0, -1), (0, 0, 1)).intersection_with(plane)
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(0, 0, 0)
        flat = Segment3d((0, 0, 0), (1, 1, 0))
        r = plane.intersection_with(flat)
        assert r.kind is IntersectionKind.SEGMENT
        assert r.value == flat
        assert not Ray3d((0, 0, 1), (0, 0, 1)).intersection_with(plane)
        assert not Line3d((0, 0, 1), (1, 0, 0)).intersection_with(plane)
        assert plane.intersection_with(XAXIS).kind is IntersectionKind.LINE

    def test_sphere(self):
        sphere = Sphere((0, 0, 0), 2)
        r = Line3d((-5, 0, 0), (1, 0, 0)).intersection_with(sphere)
        assert r.kind is IntersectionKind.SEGMENT
        assert _segment_is(r.value, (-2, 0, 0), (2, 0, 0))
        r = sphere.intersection_with(Line3d((-5, 2, 0), (1, 0, 0)))
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(0, 2, 0)
        assert not Line3d((-5, 3, 0), (1, 0, 0)).intersection_with(sphere)
        inner = Segment3d((-1, 0, 0), (1, 0, 0))
        assert inner.intersection_with(sphere).value == inner
        r = Ray3d((0, 0, 0), (0, 0, 1)).intersection_with(sphere)
        assert _segment_is(r.value, (0, 0, 0), (0, 0, 2))

    def test_circle(self):
        c = Circle3d((0, 0, 0), 1)
        r = Line3d((0, 0, -3), (0, 0, 1)).intersection_with(c)
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(0, 0, 0)
        assert not Line3d((5, 0, -3), (0, 0, 1)).intersection_with(c)
        r = c.intersection_with(Line3d((-5, 0, 0), (1, 0, 0)))
        assert r.kind is IntersectionKind.SEGMENT
        assert _segment_is(r.value, (-1, 0, 0), (1, 0, 0))
        r = Line3d((-5, 1, 0), (1, 0, 0)).intersection_with(c)
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(0, 1, 0)

    def test_triangle(self):
        t = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
        r = Segment3d((0.2, 0.2, -1), (0.2, 0.2, 1)).intersection_with(t)
        assert r.kind is IntersectionKind.POINT
        assert r.value == Point3d(0.2, 0.2, 0)
        assert not Segment3d((2, 2, -1), (2, 2, 1)).intersection_with(t)
        r = t.intersection_with(Line3d((-1, 0.25, 0), (1, 0, 0)))
        assert r.kind is IntersectionKind.SEGMENT
        assert _segment_is(r.value, (0, 0.25, 0), (0.75, 0.25, 0))

    def test_solids(self):
        r = Line3d((-5, 0, 0), (1, 0, 0)).intersection_with(Box3d((0, 0, 0), 2, 2, 2))
        assert r.kind is IntersectionKind.SEGMENT
        assert _segment_is(r.value, (-1, 0, 0), (1, 0, 0))
        tet = Tetrahedron((0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1))
        r = tet.intersection_with(Line3d((0.1, 0.1, -1), (0, 0, 1)))
        assert _segment_is(r.value, (0.1, 0.1, 0), (0.1, 0.1, 0.8))
        assert not Line3d((2, 2, 0), (0, 0, 1)).intersection_with(tet)


class TestOrientation:

    def test_angles(self):
        assert XAXIS.angle_to(Line3d((0, 0, 0), (1, 1, 0))) == pytest.approx(math.pi/4)
        assert XAXIS.angle_to(Line3d((0, 0, 0), (-1, 0, 0))) == pytest.approx(0.0)
        assert XAXIS.angle_to_deg(Line3d((0, 0, 0), (0, 0, 1))) == pytest.approx(90.0)
        z = Segment3d((0, 0, 0), (0, 0, 1))
        assert z.angle_to(Plane3d((0, 0, 0), (0, 0, 1))) == pytest.approx(math.pi/2)

    def test_predicates(self):
        assert XAXIS.is_parallel_to(Segment3d((0, 1, 0), (-3, 1, 0)))
        assert XAXIS.is_parallel_to(Plane3d((0, 0, 5), (0, 0, 1)))
        assert XAXIS.is_orthogonal_to(Ray3d((0, 0, 0), (0, 1, 1)))
        assert XAXIS.is_orthogonal_to(Plane3d((0, 0, 0), (1, 0, 0)))
        assert XAXIS.is_coplanar_to(Line3d((1, -1, 0), (0, 1, 0)))
        assert not XAXIS.is_coplanar_to(Line3d((0, 0, 1), (0, 1, 0)))
        assert XAXIS.is_coplanar_to(Plane3d((0, 0, 0), (0, 1, 0)))
        assert not XAXIS.is_coplanar_to(Plane3d((0, 0, 1), (0, 0, 1)))


class TestContainment:

    def test_segments(self):
        s = Segment3d((0, 0, 0), (1, 0, 0))
        assert s.is_inside(XAXIS)
        assert s.is_inside(Plane3d((0, 0, 0), (0, 0, 1)))
        assert s.is_outside(Plane3d((0, 0, 0), (1, 0, 0)))
        box = Box3d((0, 0, 0), 2, 2, 2)
        assert Segment3d((-0.5, 0, 0), (0.5, 0, 0)).is_inside(box)
        assert Segment3d((-1, 0, 0), (0.5, 0, 0)).is_on_boundary(box)
        assert Segment3d((-2, 0, 0), (0.5, 0, 0)).is_outside(box)

    def test_unbounded(self):
        assert XAXIS.is_inside(Plane3d((0, 0, 0), (0, 1, 0)))
        assert XAXIS.belongs_to(Line3d((2, 0, 0), (3, 0, 0)))
        assert XAXIS.is_outside(Line3d((0, 0, 0), (1, 1, 0)))
        ray = Ray3d((0, 0, 0), (2, 0, 0))
        assert Ray3d((1, 0, 0), (1, 0, 0)).is_inside(ray)
        assert Ray3d((0, 0, 0), (1, 0, 0)).is_on_boundary(ray)
        assert Ray3d((1, 0, 0), (-1, 0, 0)).is_outside(ray)
        assert XAXIS.is_outside(Box3d((0, 0, 0), 2, 2, 2))


class TestTransform:

    def test_segment(self):
        s = Segment3d((0, 0, 0), (1, 0, 0))
        r = Rotation.from_axis_angle((0, 0, 1), math.pi/2)
        assert s.rotate(r) == Segment3d((0, 0, 0), (0, 1, 0))
        assert s.translate((0, 0, 1)) == Segment3d((0, 0, 1), (1, 0, 1))
        assert s.reflect_in(Plane3d((0, 0, 0), (1, 0, 0))) == Segment3d((0, 0, 0), (-1, 0, 0))

    def test_line_follows_its_frame(self):
        f = Frame()
        line = Line3d((0, 0, 0), (1, 0, 0), frame=f)
        f.rotate(Rotation.from_axis_angle((0, 0, 1), math.pi/2))
        assert line == Line3d((0, 0, 0), (0, 1, 0))
        f.translate((0, 0, 4))
        assert line == Line3d((0, 0, 4), (0, 1, 0))
        g = line.convert_to_global()
        assert g.point.frame is not f
        assert g == line

    def test_ray_direction_keeps_its_sense(self):
        ray = Ray3d((1, 0, 0), (1, 0, 0))
        back = ray.reflect_in(Point3d(0, 0, 0))
        assert back == Ray3d((-1, 0, 0), (-1, 0, 0))


class TestProjection:

    def test_segment_to_ray(self):
        r = Segment3d((1, 1, 0), (3, 1, 0)).to_ray()
        assert isinstance(r, Ray3d)
        assert r == Ray3d((1, 1, 0), (1, 0, 0))
        assert Point3d(10, 1, 0).belongs_to(r)

    def test_segment_onto_line(self):
        s = Segment3d((0, 1, 1), (2, 3, 4)).project_to(XAXIS)
        assert _segment_is(s, (0, 0, 0), (2, 0, 0))
        p = Segment3d((1, 0, 2), (1, 3, 2)).project_to(XAXIS)
        assert isinstance(p, Point3d)
        assert p == Point3d(1, 0, 0)

    def test_segment_onto_plane(self):
        xy = Plane3d((0, 0, 0), (0, 0, 1))
        s = Segment3d((0, 0, 1), (1, 2, 5)).project_to(xy)
        assert _segment_is(s, (0, 0, 0), (1, 2, 0))
        p = Segment3d((1, 1, 1), (1, 1, 4)).project_to(xy)
        assert isinstance(p, Point3d)
        assert p == Point3d(1, 1, 0)
        with pytest.raises(ValueError):
            Segment3d((0, 0, 0), (1, 0, 0)).project_to(Sphere((0, 0, 0), 1))

    def test_line_and_ray_onto_plane(self):
        xy = Plane3d((0, 0, 0), (0, 0, 1))
        line = Line3d((0, 0, 3), (1, 0, 1)).project_to(xy)
        assert isinstance(line, Line3d)
        assert line == Line3d((5, 0, 0), (1, 0, 0))
        ray = Ray3d((1, 1, 3), (0, 1, 1)).project_to(xy)
        assert isinstance(ray, Ray3d)
        assert ray == Ray3d((1, 1, 0), (0, 1, 0))
        p = Line3d((2, 3, 7), (0, 0, 1)).project_to(xy)
        assert isinstance(p, Point3d)
        assert p == Point3d(2, 3, 0)
        with pytest.raises(ValueError):
            XAXIS.project_to(Line3d((0, 0, 0), (0, 1, 0)))
