import math

import numpy as np
import pytest

from yapgeom.xform import FromColumns, FromRows, Identity, Matrix, RotationMatrix
## unit tests for yapgeom 3x3 matrices


class TestMatrix:
    """construction, access and arithmetic"""

    def test_construction(self):
        a = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9])
        b = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        c = Matrix(np.arange(1, 10, dtype=float).reshape(3, 3))
        assert a.m == b.m == c.m
        assert Matrix().m == Identity().m
        with pytest.raises(ValueError):
            Matrix([1, 2, 3, 4])
        with pytest.raises(ValueError):
            Matrix([[1, 2], [3, 4], [5, 6]])
        with pytest.raises(ValueError):
            Matrix("nope")

    def test_rows_and_columns(self):
        a = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9])
        assert a.getrow(1) == (4.0, 5.0, 6.0)
        assert a.getcol(2) == (3.0, 6.0, 9.0)
        assert FromRows((1, 2, 3), (4, 5, 6), (7, 8, 9)).m == a.m
        assert FromColumns((1, 4, 7), (2, 5, 8), (3, 6, 9)).rows() == a.rows()

    def test_transpose_is_a_copy(self):
        a = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9])
        t = a.transpose()
        assert t.getrow(0) == (1.0, 4.0, 7.0)
        t.set(0, 0, 100.0)
        assert a.get(0, 0) == 1.0

    def test_mul(self):
        a = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9])
        I = Identity()
        assert I.mul(a).m == a.m
        assert a.mul((1, 0, 0)) == (1.0, 4.0, 7.0)
        assert a.mul(2.0).getrow(2) == (14.0, 16.0, 18.0)
        assert a.mul(a).getrow(0) == (30.0, 36.0, 42.0)
        with pytest.raises(ValueError):
            a.mul("x")

    def test_det_and_trace(self):
        d = FromRows((2, 0, 0), (0, 3, 0), (0, 0, 4))
        assert d.det() == pytest.approx(24.0)
        assert d.trace() == pytest.approx(9.0)
        assert Matrix([1, 2, 3, 2, 4, 6, 0, 0, 1]).det() == 0.0

    def test_close_and_sub(self):
        a = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9])
        b = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9.5])
        assert a.sub(b).max_norm() == pytest.approx(0.5)
        assert a.close(b, 0.5)
        assert not a.close(b, 0.4)


class TestRotationMatrix:

    def test_quarter_turn_about_z(self):
        r = RotationMatrix((0, 0, 1), math.pi/2)
        x, y, z = r.mul((1, 0, 0))
        assert x == pytest.approx(0.0, abs=1e-15)
        assert y == pytest.approx(1.0)
        assert z == 0.0

    def test_orthogonal(self):
        r = RotationMatrix((1, -1, 2), 2.1)
        assert r.is_orthogonal(1e-14)
        assert r.det() == pytest.approx(1.0)
        assert not FromRows((1, 0, 0), (0, 1, 0), (0, 0, 2)).is_orthogonal(1e-6)

    def test_zero_axis(self):
        with pytest.raises(ValueError):
            RotationMatrix((0, 0, 0), 1.0)


def test_orthonormalized_snaps_to_rotation():
    r = RotationMatrix((0, 1, 1), 0.4)
    noisy = r.sub(Matrix([1e-6, -2e-6, 0, 0, 3e-6, 0, 1e-6, 0, -1e-6]))
    assert not noisy.is_orthogonal(1e-9)
    fixed = noisy.orthonormalized()
    assert fixed.is_orthogonal(1e-12)
    assert fixed.det() == pytest.approx(1.0)
    assert fixed.close(r, 1e-5)


def test_orthonormalized_keeps_handedness():
    fixed = FromRows((1, 0, 0), (0, 1, 0), (0, 0, -1)).orthonormalized()
    assert fixed.det() == pytest.approx(1.0)
