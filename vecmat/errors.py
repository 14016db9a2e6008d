# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by vecmat.

All of them derive from ValueError, so callers that already guard
shape problems with ``except ValueError`` keep working.
"""

from typing import Optional, Tuple


class VecMatError(ValueError):
    """Base class for every error raised by this package."""


class ShapeMismatchError(VecMatError):
    """
    Operand shapes disagree for an operation.

    Attributes
    ----------
    operation : str
        Name of the operation that was refused.
    lhs_shape, rhs_shape : tuple[int, ...]
        Shapes of the left and right operand.
    """

    def __init__(
        self,
        operation: str,
        lhs_shape: Tuple[int, ...],
        rhs_shape: Tuple[int, ...],
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.lhs_shape = tuple(lhs_shape)
        self.rhs_shape = tuple(rhs_shape)
        if message is None:
            message = (
                f"{operation}: incompatible shapes "
                f"{self.lhs_shape} and {self.rhs_shape}"
            )
        super().__init__(message)


class NonRectangularInputError(VecMatError):
    """Matrix rows do not all have the same length."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Input rows must all have the same length: row {row} has "
            f"{actual} elements, expected {expected}"
        )


class InvalidConversionError(VecMatError):
    """A matrix with neither dimension equal to 1 cannot become a vector."""

    def __init__(self, shape: Tuple[int, int]):
        self.shape = tuple(shape)
        super().__init__(
            f"Cannot convert matrix of shape {self.shape} to a vector: "
            "neither rows nor columns are 1"
        )
