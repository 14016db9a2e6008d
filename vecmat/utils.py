# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from typing import Any, List, Tuple

from .errors import ShapeMismatchError

EPS: float = 1e-12
RTOL: float = 1e-9


def additive_identity(sample: Any = None) -> Any:
    """
    Return the zero of ``sample``'s type.

    For ``numbers.Number`` types (int, float, complex, Fraction, Decimal and
    the numpy scalars) this is ``type(sample)()``. Any other type gives
    ``sample - sample``, since its nullary constructor need not be a zero
    (sympy's ``Mul()`` is 1). With no sample at all the integer 0 is used.
    """
    if sample is None:
        return 0
    if isinstance(sample, numbers.Number):
        return type(sample)()
    return sample - sample


def fold_dot(lhs, rhs, zero: Any = None) -> Any:
    """
    Sum of ``lhs[k] * rhs[k]`` for k = 0..n-1, accumulated left to right.

    The caller guarantees ``len(lhs) == len(rhs)``. The accumulator starts at
    the additive identity so floating results are reproducible.
    """
    if zero is None:
        zero = additive_identity(lhs[0] if len(lhs) else None)
    acc = zero
    for a, b in zip(lhs, rhs):
        acc = acc + a * b
    return acc


def require_same_shape(
    operation: str, lhs_shape: Tuple[int, ...], rhs_shape: Tuple[int, ...]
) -> None:
    """Raise ShapeMismatchError unless the two shapes are identical."""
    if tuple(lhs_shape) != tuple(rhs_shape):
        raise ShapeMismatchError(operation, lhs_shape, rhs_shape)


def check_count(n: int) -> int:
    """Validate a repeat/size argument and return it as an int."""
    n = int(n)
    if n < 0:
        raise ValueError(f"size must be non-negative, got {n}")
    return n


def commit_rows(target: List[list], new_rows: List[list]) -> None:
    """Overwrite each row list of ``target`` with the matching new row."""
    for row, new_row in zip(target, new_rows):
        row[:] = new_row
