# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Shorthand constructors for writing vectors and matrices inline.

>>> from vecmat.builders import matrix, vector
>>> matrix([1, 2], [3, 4]) * vector(1, 1)
Vector([3, 7])
"""

from typing import Any, Iterable

from .matrix import Matrix
from .utils import check_count
from .vector import Vector


def vector(*elements: Any) -> Vector:
    """vector(1, 2, 3) == Vector([1, 2, 3]); vector() is empty."""
    return Vector(elements)


def vector_repeat(value: Any, n: int) -> Vector:
    """A Vector holding ``value`` n times."""
    return Vector._adopt([value] * check_count(n))


def matrix(*rows: Iterable[Any]) -> Matrix:
    """matrix([1, 2], [3, 4]) == Matrix([[1, 2], [3, 4]])."""
    return Matrix(rows)


def matrix_repeat(row: Iterable[Any], n: int) -> Matrix:
    """An n-row Matrix whose rows are independent copies of ``row``."""
    row = list(row)
    n = check_count(n)
    return Matrix._adopt([list(row) for _ in range(n)], n, len(row))


def zeros(rows: int, cols: int, zero: Any = 0) -> Matrix:
    rows = check_count(rows)
    cols = check_count(cols)
    return Matrix._adopt([[zero] * cols for _ in range(rows)], rows, cols)


def identity(n: int, one: Any = 1, zero: Any = 0) -> Matrix:
    """n x n matrix with ``one`` on the diagonal and ``zero`` elsewhere."""
    eye = zeros(n, n, zero)
    return eye.lambda_index_inplace(lambda i, j: one if i == j else zero)
