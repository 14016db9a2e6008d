# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
The Matrix type: an owned, rectangular, row-major grid of elements.
"""

import logging
import numbers
from typing import Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

import numpy as np

from .errors import InvalidConversionError, NonRectangularInputError, VecMatError
from .utils import EPS, RTOL, require_same_shape
from .vector import Vector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Matrix(Generic[T]):
    """
    A rows x cols grid of elements stored as a list of equal-length rows.

    The row and column counts are recorded next to the data. Rectangularity
    is checked once, in the constructor; every operation preserves it.

    A matrix built from an empty outer sequence is a valid 0 x 0 matrix.

    Operators
    ---------
    ``A + B``            elementwise sum (same rows and cols)
    ``A * s``, ``s * A`` every entry multiplied by the scalar ``s``
    ``A * v``, ``A @ v`` matrix-vector product (len(v) == A.cols)
    ``A * B``, ``A @ B`` matrix product (A.cols == B.rows)
    ``A += B``, ``A *= s``, ``A *= B``, ``A @= B`` overwrite ``A`` in place
    """

    __slots__ = ("_rows", "_cols", "_elements")

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, rows: Iterable[Iterable[T]] = ()):
        elements = [list(row) for row in rows]
        n_cols = len(elements[0]) if elements else 0
        for i, row in enumerate(elements):
            if len(row) != n_cols:
                raise NonRectangularInputError(i, n_cols, len(row))

        self._rows: int = len(elements)
        self._cols: int = n_cols
        self._elements: List[List[T]] = elements

    @classmethod
    def _adopt(cls, storage: List[List[T]], rows: int, cols: int) -> "Matrix[T]":
        """Wrap rectangular ``storage`` of shape (rows, cols) without copying."""
        mat = cls.__new__(cls)
        mat._rows = rows
        mat._cols = cols
        mat._elements = storage
        return mat

    # -----------------------------------------------------------------
    # Shape and element access
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def elements(self) -> Tuple[Tuple[T, ...], ...]:
        """Read-only view of the rows."""
        return tuple(tuple(row) for row in self._elements)

    def __len__(self) -> int:
        return self._rows

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self._elements[i][j]
        return tuple(self._elements[index])

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return (tuple(row) for row in self._elements)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._elements!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._elements == other._elements

    def copy(self) -> "Matrix[T]":
        rows = [list(row) for row in self._elements]
        return Matrix._adopt(rows, self._rows, self._cols)

    def into_inner(self) -> List[List[T]]:
        """Hand the backing list of rows over to the caller."""
        return self._elements

    def transpose(self) -> "Matrix[T]":
        """Return the cols x rows transpose as a new matrix."""
        if self._rows == 0:
            return Matrix._adopt([[] for _ in range(self._cols)], self._cols, 0)
        return Matrix._adopt(
            [list(col) for col in zip(*self._elements)], self._cols, self._rows
        )

    # -----------------------------------------------------------------
    # Conversions
    # -----------------------------------------------------------------
    def into_vector(self) -> Vector[T]:
        """
        Collapse a single-row or single-column matrix into a Vector.

        A 1 x N matrix gives its row (the storage is reused), an N x 1
        matrix its column.

        Raises
        ------
        InvalidConversionError : if neither rows nor cols equals 1.
        """
        if self._rows == 1:
            logger.debug("into_vector: row matrix of %d columns", self._cols)
            return Vector._adopt(self._elements[0])
        if self._cols == 1:
            logger.debug("into_vector: column matrix of %d rows", self._rows)
            return Vector._adopt([row[0] for row in self._elements])
        raise InvalidConversionError(self.shape)

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Matrix":
        """Build a Matrix from a 2-D ndarray, converting to Python scalars."""
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise VecMatError(
                f"Matrix.from_numpy needs a 2-D array, got shape {arr.shape}"
            )
        m, n = arr.shape
        logger.debug("from_numpy: %d x %d %s array", m, n, arr.dtype)
        return cls._adopt(arr.tolist(), m, n)

    def to_numpy(self, dtype=None) -> np.ndarray:
        if self._rows == 0:
            return np.empty((0, self._cols), dtype=dtype)
        return np.asarray(self._elements, dtype=dtype)

    def isclose(self, other: "Matrix", rtol: float = RTOL, atol: float = EPS) -> bool:
        """Tolerant elementwise comparison for floating point data."""
        require_same_shape("isclose", self.shape, other.shape)
        return bool(
            np.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol)
        )

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    def __add__(self, other):
        from . import arithmetic

        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.mat_add(self, other)

    def __iadd__(self, other):
        from . import arithmetic

        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.mat_add(self, other, inplace=True)

    def __mul__(self, other):
        from . import arithmetic

        if isinstance(other, Matrix):
            return arithmetic.mat_mul(self, other)
        if isinstance(other, Vector):
            return arithmetic.mat_vec_mul(self, other)
        return arithmetic.mat_scalar_mul(self, other)

    def __rmul__(self, other):
        from . import arithmetic

        if not isinstance(other, numbers.Number):
            return NotImplemented
        return arithmetic.mat_scalar_mul(self, other)

    def __imul__(self, other):
        from . import arithmetic

        if isinstance(other, Matrix):
            return arithmetic.mat_mul(self, other, inplace=True)
        if isinstance(other, Vector):
            # the product is a Vector, not a Matrix; fall back to __mul__
            return NotImplemented
        return arithmetic.mat_scalar_mul(self, other, inplace=True)

    def __matmul__(self, other):
        from . import arithmetic

        if isinstance(other, Matrix):
            return arithmetic.mat_mul(self, other)
        if isinstance(other, Vector):
            return arithmetic.mat_vec_mul(self, other)
        return NotImplemented

    def __imatmul__(self, other):
        from . import arithmetic

        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.mat_mul(self, other, inplace=True)

    # -----------------------------------------------------------------
    # Unary transforms
    # -----------------------------------------------------------------
    def lambda_(self, funct: Callable[[T], T]) -> "Matrix[T]":
        """Return a new Matrix with ``funct(x)`` at every position."""
        from . import transform

        return transform.transform_matrix(self, lambda i, j, x: funct(x))

    def lambda_index(self, funct: Callable[[int, int], T]) -> "Matrix[T]":
        """Return a new Matrix with ``funct(i, j)`` at every position (i, j)."""
        from . import transform

        return transform.transform_matrix(self, lambda i, j, x: funct(i, j))

    def lambda_enumerate(self, funct: Callable[[int, int, T], T]) -> "Matrix[T]":
        """Return a new Matrix with ``funct(i, j, x)`` at every position (i, j)."""
        from . import transform

        return transform.transform_matrix(self, funct)

    def lambda_inplace(self, funct: Callable[[T], T]) -> "Matrix[T]":
        from . import transform

        return transform.transform_matrix(self, lambda i, j, x: funct(x), inplace=True)

    def lambda_index_inplace(self, funct: Callable[[int, int], T]) -> "Matrix[T]":
        from . import transform

        return transform.transform_matrix(
            self, lambda i, j, x: funct(i, j), inplace=True
        )

    def lambda_enumerate_inplace(
        self, funct: Callable[[int, int, T], T]
    ) -> "Matrix[T]":
        from . import transform

        return transform.transform_matrix(self, funct, inplace=True)

    # -----------------------------------------------------------------
    # Binary transforms
    # -----------------------------------------------------------------
    def map(self, other: "Matrix[T]", funct: Callable[[T, T], T]) -> "Matrix[T]":
        """Return a new Matrix with ``funct(a, b)`` over corresponding entries."""
        from . import transform

        return transform.combine_matrices(self, other, lambda i, j, a, b: funct(a, b))

    def map_enumerate(
        self, other: "Matrix[T]", funct: Callable[[int, int, T, T], T]
    ) -> "Matrix[T]":
        """Return a new Matrix with ``funct(i, j, a, b)`` over corresponding entries."""
        from . import transform

        return transform.combine_matrices(self, other, funct)

    def map_inplace(
        self, other: "Matrix[T]", funct: Callable[[T, T], T]
    ) -> "Matrix[T]":
        from . import transform

        return transform.combine_matrices(
            self, other, lambda i, j, a, b: funct(a, b), inplace=True
        )

    def map_enumerate_inplace(
        self, other: "Matrix[T]", funct: Callable[[int, int, T, T], T]
    ) -> "Matrix[T]":
        from . import transform

        return transform.combine_matrices(self, other, funct, inplace=True)
