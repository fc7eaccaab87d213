## 3x3 matrix operations for rotations and frame axes in yapgeom

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

from math import cos, sin

import numpy as np

from yapgeom import vec

## A matrix is represented as a list of three three-element rows.
## Vectors are plain (x, y, z) tuples, and M.mul(v) computes Mv with v
## taken as a column vector.  The trans flag views the same storage
## as the transpose without copying it.

## Frame axes are stored as rows, so a frame matrix A maps global
## offsets to local coordinates (A v) and its transpose maps local
## coordinates back (A^T v).  Rotation matrices act on column vectors.


def _goodnum(x):
    if not vec.isgoodnum(x):
        raise ValueError('bad element in matrix initialization: {}'.format(x))
    return float(x)


class Matrix:
    """3x3 matrix used for rotations and frame axes"""

    def __init__(self, a=False, trans=False):
        self.m = [[1.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0],
                  [0.0, 0.0, 1.0]]
        self.trans = False

        if isinstance(a, Matrix):
            for i in range(3):
                self.setrow(i, a.getrow(i))

        elif isinstance(a, np.ndarray):
            if a.shape != (3, 3):
                raise ValueError('bad array shape for matrix initialization: {}'.format(a.shape))
            for i in range(3):
                for j in range(3):
                    self.m[i][j] = float(a[i, j])

        elif isinstance(a, (tuple, list)):
            if len(a) == 3:
                for i in range(3):
                    row = a[i]
                    if not isinstance(row, (tuple, list)) or len(row) != 3:
                        raise ValueError('bad row in matrix initialization: {}'.format(row))
                    for j in range(3):
                        self.m[i][j] = _goodnum(row[j])
            elif len(a) == 9:
                for i in range(3):
                    for j in range(3):
                        self.m[i][j] = _goodnum(a[i*3+j])
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{})".format(self.m[0], self.m[1], self.m[2], self.trans)

    # return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        return self.m[i][j]

    # set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        x = _goodnum(x)
        if self.trans:
            self.m[j][i] = x
        else:
            self.m[i][j] = x

    def getrow(self, i):
        if i < 0 or i > 2:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return (self.m[0][i], self.m[1][i], self.m[2][i])
        return tuple(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 2:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if not self.trans:
            return (self.m[0][j], self.m[1][j], self.m[2][j])
        return tuple(self.m[j])

    def setrow(self, i, x):
        if not vec.isvect(x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        if i < 0 or i > 2:
            raise ValueError('bad row index passed to setrow: {}'.format(i))
        if self.trans:
            for k in range(3):
                self.m[k][i] = float(x[k])
        else:
            self.m[i] = [float(x[0]), float(x[1]), float(x[2])]

    def rows(self):
        return (self.getrow(0), self.getrow(1), self.getrow(2))

    def array(self):
        return np.array(self.rows(), dtype=float)

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # vector, compute Mx. If x is a scalar, compute xM.  Respects
    # the transpose flag.
    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(3):
                for j in range(3):
                    result.set(i, j, vec.dot(self.getrow(i), x.getcol(j)))
            return result
        elif vec.isvect(x):
            return (vec.dot(self.getrow(0), x),
                    vec.dot(self.getrow(1), x),
                    vec.dot(self.getrow(2), x))
        elif vec.isgoodnum(x):
            result = Matrix()
            for i in range(3):
                result.setrow(i, vec.scale3(self.getrow(i), x))
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def transpose(self):
        """independent copy of the transpose"""
        return Matrix(Matrix(self, True).rows())

    def sub(self, other):
        return Matrix([vec.sub(self.getrow(i), other.getrow(i)) for i in range(3)])

    def trace(self):
        return self.m[0][0] + self.m[1][1] + self.m[2][2]

    def det(self):
        r0, r1, r2 = self.rows()
        return vec.triple(r0, r1, r2)

    ## largest absolute element, the norm used for matrix equality
    def max_norm(self):
        return max(abs(self.m[i][j]) for i in range(3) for j in range(3))

    def close(self, other, eps):
        return self.sub(other).max_norm() <= eps

    def is_orthogonal(self, eps):
        """is M^T M the identity to within ``eps``"""
        return self.transpose().mul(self).close(Identity(), eps)

    def orthonormalized(self):
        """nearest proper rotation matrix, via SVD"""
        u, _, vt = np.linalg.svd(self.array())
        r = u @ vt
        if np.linalg.det(r) < 0:
            u[:, -1] = -u[:, -1]
            r = u @ vt
        return Matrix(r)


def Identity():
    return Matrix()


## generalized arbitrary-axis rotation matrix, angle in radians
def RotationMatrix(axis, angle):
    m = vec.mag(axis)
    if m == 0.0:
        raise ValueError('zero-length rotation axis not allowed')
    ux, uy, uz = vec.scale3(axis, 1.0/m)

    cang = cos(angle)
    cmin = 1.0-cang
    sang = sin(angle)

    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin]]

    return Matrix(R)


## rows from three vectors, the representation frames use for axes
def FromRows(r0, r1, r2):
    return Matrix([r0, r1, r2])


def FromColumns(c0, c1, c2):
    return Matrix([c0, c1, c2]).transpose()
