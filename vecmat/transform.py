# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Element traversal for Vector and Matrix.

The ``lambda_*`` and ``map*`` methods on the containers are thin
wrappers that adapt the user's function to the position-aware
signatures used here:

- vectors:  ``funct(i, x)`` and ``funct(i, a, b)``
- matrices: ``funct(i, j, x)`` and ``funct(i, j, a, b)``

Positions are visited in row-major order. In-place variants evaluate
``funct`` at every position before writing any result back, so an
exception from ``funct`` leaves the receiver unchanged. They return
the receiver.
"""

from typing import Any, Callable

from .matrix import Matrix
from .utils import commit_rows, require_same_shape
from .vector import Vector


def transform_vector(
    v: Vector, funct: Callable[[int, Any], Any], inplace: bool = False
) -> Vector:
    if not isinstance(v, Vector):
        raise TypeError(f"v must be a Vector, got {type(v).__name__}")

    out = [funct(i, x) for i, x in enumerate(v._elements)]
    if inplace:
        v._elements[:] = out
        return v
    return Vector._adopt(out)


def combine_vectors(
    u: Vector, v: Vector, funct: Callable[[int, Any, Any], Any], inplace: bool = False
) -> Vector:
    """
    Apply ``funct(i, u[i], v[i])`` at every index.

    Raises ShapeMismatchError before calling ``funct`` if the lengths
    differ. With ``inplace=True`` the results overwrite ``u``.
    """
    if not isinstance(u, Vector) or not isinstance(v, Vector):
        raise TypeError("combine_vectors expects two Vectors")
    require_same_shape("vector map", u.shape, v.shape)

    out = [funct(i, a, b) for i, (a, b) in enumerate(zip(u._elements, v._elements))]
    if inplace:
        u._elements[:] = out
        return u
    return Vector._adopt(out)


def transform_matrix(
    A: Matrix, funct: Callable[[int, int, Any], Any], inplace: bool = False
) -> Matrix:
    if not isinstance(A, Matrix):
        raise TypeError(f"A must be a Matrix, got {type(A).__name__}")

    out = [
        [funct(i, j, x) for j, x in enumerate(row)] for i, row in enumerate(A._elements)
    ]
    if inplace:
        commit_rows(A._elements, out)
        return A
    return Matrix._adopt(out, A._rows, A._cols)


def combine_matrices(
    A: Matrix,
    B: Matrix,
    funct: Callable[[int, int, Any, Any], Any],
    inplace: bool = False,
) -> Matrix:
    """
    Apply ``funct(i, j, A[i, j], B[i, j])`` at every position.

    Raises ShapeMismatchError before calling ``funct`` unless both
    matrices have the same (rows, cols). With ``inplace=True`` the
    results overwrite ``A``.
    """
    if not isinstance(A, Matrix) or not isinstance(B, Matrix):
        raise TypeError("combine_matrices expects two Matrices")
    require_same_shape("matrix map", A.shape, B.shape)

    out = [
        [funct(i, j, a, b) for j, (a, b) in enumerate(zip(row, other))]
        for i, (row, other) in enumerate(zip(A._elements, B._elements))
    ]
    if inplace:
        commit_rows(A._elements, out)
        return A
    return Matrix._adopt(out, A._rows, A._cols)
