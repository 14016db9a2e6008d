# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Arithmetic on Vector and Matrix values.

Every function validates shapes before it reads a single element, so a
refused operation never leaves an ``inplace`` receiver half-written.
In-place variants compute every new value first and only then write
them into the receiver, so an element operation that raises leaves the
receiver as it was.
The Vector/Matrix operators (``+``, ``*``, ``@`` and their augmented
forms) delegate here.
"""

import logging
from typing import Any

from .errors import ShapeMismatchError
from .matrix import Matrix
from .utils import additive_identity, commit_rows, fold_dot, require_same_shape
from .vector import Vector

logger = logging.getLogger(__name__)


def _require(obj, cls, name: str) -> None:
    if not isinstance(obj, cls):
        raise TypeError(f"{name} must be a {cls.__name__}, got {type(obj).__name__}")


def _matrix_zero(*matrices: Matrix) -> Any:
    for m in matrices:
        if m._rows and m._cols:
            return additive_identity(m._elements[0][0])
    return additive_identity()


# ---------------------------------------------------------------------
# Vector
# ---------------------------------------------------------------------
def vec_add(u: Vector, v: Vector, inplace: bool = False) -> Vector:
    """
    Elementwise sum u + v.

    With ``inplace=True`` the sum overwrites ``u`` and ``u`` is returned.
    """
    _require(u, Vector, "u")
    _require(v, Vector, "v")
    require_same_shape("vector addition", u.shape, v.shape)

    out = [a + b for a, b in zip(u._elements, v._elements)]
    if inplace:
        u._elements[:] = out
        return u
    return Vector._adopt(out)


def vec_scalar_mul(v: Vector, scalar: Any, inplace: bool = False) -> Vector:
    """Return v * scalar, evaluated as ``element * scalar`` for every element."""
    _require(v, Vector, "v")

    out = [x * scalar for x in v._elements]
    if inplace:
        v._elements[:] = out
        return v
    return Vector._adopt(out)


def dot_product(u: Vector, v: Vector) -> Any:
    """
    Implements the scalar (dot) product between two vectors.

    The sum starts at the additive identity of the element type and runs
    from index 0 upwards, so floating point results are reproducible.
    An empty dot product is 0.
    """
    _require(u, Vector, "u")
    _require(v, Vector, "v")
    require_same_shape("dot product", u.shape, v.shape)
    return fold_dot(u._elements, v._elements)


# ---------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------
def mat_add(A: Matrix, B: Matrix, inplace: bool = False) -> Matrix:
    """
    Elementwise sum A + B of two matrices with identical (rows, cols).

    With ``inplace=True`` the sum overwrites ``A`` and ``A`` is returned.
    """
    _require(A, Matrix, "A")
    _require(B, Matrix, "B")
    require_same_shape("matrix addition", A.shape, B.shape)

    out = [
        [a + b for a, b in zip(row, other)]
        for row, other in zip(A._elements, B._elements)
    ]
    if inplace:
        commit_rows(A._elements, out)
        return A
    return Matrix._adopt(out, A._rows, A._cols)


def mat_scalar_mul(A: Matrix, scalar: Any, inplace: bool = False) -> Matrix:
    """Return A * scalar, evaluated as ``element * scalar`` for every entry."""
    _require(A, Matrix, "A")

    out = [[x * scalar for x in row] for row in A._elements]
    if inplace:
        commit_rows(A._elements, out)
        return A
    return Matrix._adopt(out, A._rows, A._cols)


def mat_vec_mul(A: Matrix, v: Vector) -> Vector:
    """
    Matrix-vector product A v.

    Parameters
    ----------
    A : Matrix   (m, n)
    v : Vector   (n,)

    Returns
    -------
    Vector (m,) whose i-th element is the dot product of row i with v.

    Raises
    ------
    ShapeMismatchError : if len(v) != A.cols.
    """
    _require(A, Matrix, "A")
    _require(v, Vector, "v")
    if A._cols != len(v._elements):
        raise ShapeMismatchError(
            "matrix-vector product",
            A.shape,
            v.shape,
            f"matrix-vector product: vector length {len(v._elements)} does not "
            f"match matrix column count {A._cols}",
        )

    zero = _matrix_zero(A)
    x = v._elements
    return Vector._adopt([fold_dot(row, x, zero) for row in A._elements])


def _product_rows(A: Matrix, B: Matrix) -> list:
    zero = _matrix_zero(A, B)
    columns = B.transpose()._elements
    return [[fold_dot(row, col, zero) for col in columns] for row in A._elements]


def mat_mul(A: Matrix, B: Matrix, inplace: bool = False) -> Matrix:
    """
    Matrix-matrix product A B.

    Parameters
    ----------
    A : Matrix   (m, k)
    B : Matrix   (k, n)
    inplace : bool
        Overwrite ``A`` with the (m, n) product and return ``A``. The full
        product is computed before any row of ``A`` is touched, which also
        makes ``mat_mul(A, A, inplace=True)`` safe for square A.

    Returns
    -------
    Matrix (m, n); entry (i, j) is row i of A dotted with column j of B.

    Raises
    ------
    ShapeMismatchError : if A.cols != B.rows.
    """
    _require(A, Matrix, "A")
    _require(B, Matrix, "B")
    if A._cols != B._rows:
        raise ShapeMismatchError(
            "matrix product",
            A.shape,
            B.shape,
            f"matrix product: left column count {A._cols} does not match "
            f"right row count {B._rows}",
        )

    out = _product_rows(A, B)
    if not inplace:
        return Matrix._adopt(out, A._rows, B._cols)

    if B._cols > A._cols:
        logger.debug(
            "mat_mul(inplace): growing %d rows from %d to %d columns",
            A._rows,
            A._cols,
            B._cols,
        )
    commit_rows(A._elements, out)
    A._cols = B._cols
    return A
