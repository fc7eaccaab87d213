import logging
import math

import pytest

from yapgeom.frame import GLOBAL, Frame
from yapgeom.point import Point3d, Vector3d
from yapgeom.rotation import EulerConvention, Quaternion, Rotation, slerp
from yapgeom.xform import FromRows, RotationMatrix


def _close(a, b, tol=1e-12):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def _same_rotation(q1, q2, tol=1e-12):
    """quaternions q and -q stand for the same rotation"""
    return (_close(tuple(q1), tuple(q2), tol) or
            _close(tuple(q1), tuple(-q2), tol))


## Euler angles
## ------------

TAIT_BRYAN = (0.3, -0.5, 1.2)
PROPER = (0.3, 1.1, -2.2)


@pytest.mark.parametrize("conv", list(EulerConvention), ids=lambda c: c.name)
def test_euler_round_trip(conv):
    angles = PROPER if conv.proper else TAIT_BRYAN
    r = Rotation.from_euler_angles(*angles, conv)
    back = r.to_euler_angles(conv)
    assert back == pytest.approx(angles, abs=1e-9)
    assert Rotation.from_euler_angles(*back, conv) == r


@pytest.mark.parametrize("conv", list(EulerConvention), ids=lambda c: c.name)
def test_euler_gimbal_lock(conv):
    middle = 0.0 if conv.proper else math.pi/2
    r = Rotation.from_euler_angles(0.4, middle, 0.3, conv)
    back = r.to_euler_angles(conv)
    ## the free angle is folded into a single one
    if conv.intrinsic:
        assert back[2] == 0.0
    else:
        assert back[0] == 0.0
    assert Rotation.from_euler_angles(*back, conv) == r


def test_gimbal_lock_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="yapgeom.rotation")
    r = Rotation.from_euler_angles(0.4, math.pi/2, 0.3, EulerConvention.INTRINSIC_ZYX)
    r.to_euler_angles(EulerConvention.INTRINSIC_ZYX)
    assert any("gimbal lock" in rec.getMessage() for rec in caplog.records)


def test_intrinsic_is_reversed_extrinsic():
    a = Rotation.from_euler_angles(0.1, 0.2, 0.3, EulerConvention.INTRINSIC_ZYX)
    b = Rotation.from_euler_angles(0.3, 0.2, 0.1, EulerConvention.EXTRINSIC_XYZ)
    assert a == b


def test_intrinsic_composition():
    r = Rotation.from_euler_angles(0.1, 0.2, 0.3, "ZYX")
    rz = Rotation.from_axis_angle((0, 0, 1), 0.1)
    ry = Rotation.from_axis_angle((0, 1, 0), 0.2)
    rx = Rotation.from_axis_angle((1, 0, 0), 0.3)
    assert r == rz * ry * rx


def test_convention_parse():
    assert EulerConvention.parse("ZYX") is EulerConvention.INTRINSIC_ZYX
    assert EulerConvention.parse("zxz") is EulerConvention.EXTRINSIC_ZXZ
    assert EulerConvention.INTRINSIC_ZXZ.proper
    assert not EulerConvention.INTRINSIC_ZXY.proper
    assert EulerConvention.EXTRINSIC_YZX.axes == (1, 2, 0)
    for bad in ("ZyX", "XXY", "ABC", "XY", 3):
        with pytest.raises(ValueError):
            EulerConvention.parse(bad)


## quaternions
## -----------

class TestQuaternion:

    def test_immutable(self):
        q = Quaternion()
        with pytest.raises(AttributeError):
            q.w = 2.0

    def test_algebra(self):
        i = Quaternion(0, 1, 0, 0)
        j = Quaternion(0, 0, 1, 0)
        k = Quaternion(0, 0, 0, 1)
        assert i*j == k
        assert j*i == -k
        assert i*i == Quaternion(-1, 0, 0, 0)
        q = Quaternion(1, 2, 3, 4)
        assert q.norm == pytest.approx(math.sqrt(30))
        assert q*q.inverse() == Quaternion()
        assert 2*q == q*2
        with pytest.raises(ValueError):
            Quaternion(0, 0, 0, 0).normalized()

    def test_axis_angle(self):
        q = Quaternion.from_axis_angle((0, 0, 2), 0.8)
        assert q.to_angle() == pytest.approx(0.8)
        assert _close(q.to_axis(), (0, 0, 1))
        assert _close(Quaternion().to_axis(), (1, 0, 0))

    @pytest.mark.parametrize("axis, angle", [((1, 2, 3), 0.8),
                                             ((1, 0, 0), 3.0),
                                             ((0, 1, 0), 3.1),
                                             ((0, 0, 1), -3.1),
                                             ((1, -1, 1), math.pi)])
    def test_matrix_round_trip(self, axis, angle):
        q = Quaternion.from_axis_angle(axis, angle)
        m = q.to_rotation_matrix()
        assert m.close(RotationMatrix(axis, angle), 1e-14)
        assert _same_rotation(Quaternion.from_rotation_matrix(m), q)


class TestSlerp:

    def test_endpoints(self):
        q1 = Quaternion.from_axis_angle((1, 0, 0), 0.3)
        q2 = Quaternion.from_axis_angle((0, 1, 0), 1.3)
        assert slerp(q1, q2, 0.0) is q1
        assert slerp(q1, q2, 1.0) is q2

    def test_halfway(self):
        q1 = Quaternion()
        q2 = Quaternion.from_axis_angle((0, 0, 1), 1.0)
        mid = q1.slerp(q2, 0.5)
        assert _same_rotation(mid, Quaternion.from_axis_angle((0, 0, 1), 0.5))
        assert mid.norm == pytest.approx(1.0)

    def test_shortest_arc(self):
        q1 = Quaternion()
        q2 = -Quaternion.from_axis_angle((0, 0, 1), math.pi/2)
        mid = slerp(q1, q2, 0.5)
        expected = Rotation.from_axis_angle((0, 0, 1), math.pi/4)
        assert Rotation.from_quaternion(mid) == expected

    def test_nearly_equal(self):
        q1 = Quaternion.from_axis_angle((0, 0, 1), 0.1)
        q2 = Quaternion.from_axis_angle((0, 0, 1), 0.1 + 1e-6)
        mid = slerp(q1, q2, 0.5)
        assert mid.norm == pytest.approx(1.0)
        assert mid.to_angle() == pytest.approx(0.1 + 5e-7, abs=1e-12)


## rotations
## ---------

class TestRotation:

    def test_rejects_non_rotations(self):
        with pytest.raises(ValueError):
            Rotation(FromRows((1, 0, 0), (0, 1, 0), (0, 0, -1)))
        with pytest.raises(ValueError):
            Rotation(FromRows((2, 0, 0), (0, 2, 0), (0, 0, 2)))
        with pytest.raises(ValueError):
            Rotation.from_axis_angle((0, 0, 0), 1.0)
        with pytest.raises(ValueError):
            Rotation(frame="global")

    def test_from_matrix_snaps(self):
        ## a symmetric stretch has the rotation itself as nearest rotation
        m = RotationMatrix((1, 1, 1), 0.5).mul(FromRows((1 + 1e-9, 0, 0), (0, 1, 0), (0, 0, 1 - 1e-9)))
        r = Rotation.from_matrix(m)
        assert r.matrix.is_orthogonal(1e-14)
        assert r == Rotation.from_axis_angle((1, 1, 1), 0.5)

    def test_to_axis_angle(self):
        axis, angle = Rotation.from_axis_angle((0, 0, -3), 0.5).to_axis_angle()
        assert isinstance(axis, Vector3d)
        assert _close(axis.xyz, (0, 0, -1))
        assert angle == pytest.approx(0.5)
        axis, angle = Rotation.from_axis_angle((0, 1, 0), 2*math.pi - 0.5).to_axis_angle()
        assert _close(axis.xyz, (0, -1, 0))
        assert angle == pytest.approx(0.5)

    def test_quaternion_round_trip(self):
        r = Rotation.from_euler_angles(0.2, -0.4, 0.9, "XYZ")
        assert Rotation.from_quaternion(r.to_quaternion()) == r

    def test_composition_order(self):
        rx = Rotation.from_axis_angle((1, 0, 0), math.pi/2)
        rz = Rotation.from_axis_angle((0, 0, 1), math.pi/2)
        p = Point3d(1, 0, 0)
        ## rx first leaves (1,0,0) alone, then rz takes it to (0,1,0)
        assert _close((rz*rx).apply(p).xyz, (0, 1, 0))
        ## rz first gives (0,1,0), then rx takes it to (0,0,1)
        assert _close((rx*rz).apply(p).xyz, (0, 0, 1))

    def test_inverse(self):
        r = Rotation.from_euler_angles(0.5, 0.6, 0.7, "zyz")
        assert r * r.inverse() == Rotation()

    def test_local_frame(self):
        ## the frame's z axis is the global x axis
        f = Frame(axes=FromRows((0, 1, 0), (0, 0, 1), (1, 0, 0)))
        local = Rotation.from_axis_angle((0, 0, 1), 0.7, frame=f)
        assert local == Rotation.from_axis_angle((1, 0, 0), 0.7)
        assert local.frame is f
        g = local.convert_to_global()
        assert g.frame is GLOBAL
        assert g.convert_to(f) == local
        assert g.convert_to(f).matrix.close(local.matrix, 1e-14)

    def test_vector_axis_uses_its_frame(self):
        f = Frame(axes=FromRows((0, 1, 0), (0, 0, 1), (1, 0, 0)))
        r = Rotation.from_axis_angle(Vector3d(0, 0, 1, frame=f), 0.3)
        assert r.frame is f
        assert r == Rotation.from_axis_angle((1, 0, 0), 0.3)

    def test_apply_to_vector(self):
        r = Rotation.from_axis_angle((0, 0, 1), math.pi/2)
        v = r.apply(Vector3d(1, 0, 0))
        assert isinstance(v, Vector3d)
        assert _close(v.xyz, (0, 1, 0))
