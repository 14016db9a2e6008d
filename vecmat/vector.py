# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
The Vector type: an owned, ordered sequence of elements.
"""

import logging
import numbers
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

import numpy as np

from .errors import VecMatError
from .utils import EPS, RTOL, require_same_shape

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Vector(Generic[T]):
    """
    A one-dimensional container of elements of any type.

    Construction never fails; which operations are usable depends on the
    element type (``+`` needs element addition, ``*`` element
    multiplication and so on).

    Operators
    ---------
    ``u + v``        elementwise sum (same length)
    ``v * s``        every element multiplied by the scalar ``s``
    ``s * v``        same, for numeric ``s`` only
    ``u * v``        dot product, also spelled ``u @ v``
    ``u += v``, ``v *= s`` overwrite ``u``/``v`` in place

    Receivers of in-place operations must not be read or written through
    another reference while the operation runs.
    """

    __slots__ = ("_elements",)

    # numpy scalars/arrays defer to our reflected operators
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, elements: Iterable[T] = ()):
        self._elements: List[T] = list(elements)

    @classmethod
    def _adopt(cls, storage: List[T]) -> "Vector[T]":
        """Wrap ``storage`` without copying it."""
        vec = cls.__new__(cls)
        vec._elements = storage
        return vec

    # -----------------------------------------------------------------
    # Shape and element access
    # -----------------------------------------------------------------
    @property
    def length(self) -> int:
        return len(self._elements)

    @property
    def shape(self) -> Tuple[int]:
        return (len(self._elements),)

    @property
    def elements(self) -> Tuple[T, ...]:
        """Read-only view of the elements."""
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector._adopt(self._elements[index])
        return self._elements[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._elements!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elements == other._elements

    def copy(self) -> "Vector[T]":
        return Vector._adopt(list(self._elements))

    def into_inner(self) -> List[T]:
        """Hand the backing list over to the caller."""
        return self._elements

    # -----------------------------------------------------------------
    # Conversions
    # -----------------------------------------------------------------
    def into_row_matrix(self):
        """
        Reinterpret the vector as a 1 x N matrix.

        The vector's storage becomes the single row of the matrix, so the
        vector should not be used afterwards.
        """
        from .matrix import Matrix

        logger.debug("into_row_matrix: reinterpreting length %d vector", len(self))
        return Matrix._adopt([self._elements], 1, len(self._elements))

    def into_column_matrix(self):
        """Reinterpret the vector as an N x 1 matrix."""
        from .matrix import Matrix

        logger.debug("into_column_matrix: reinterpreting length %d vector", len(self))
        return Matrix._adopt([[x] for x in self._elements], len(self._elements), 1)

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Vector":
        """Build a Vector from a 1-D ndarray, converting to Python scalars."""
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise VecMatError(
                f"Vector.from_numpy needs a 1-D array, got shape {arr.shape}"
            )
        return cls._adopt(arr.tolist())

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.asarray(self._elements, dtype=dtype)

    def isclose(self, other: "Vector", rtol: float = RTOL, atol: float = EPS) -> bool:
        """Tolerant elementwise comparison for floating point data."""
        require_same_shape("isclose", self.shape, other.shape)
        return bool(
            np.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol)
        )

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------
    def dot(self, other: "Vector") -> Any:
        from . import arithmetic

        return arithmetic.dot_product(self, other)

    def __add__(self, other):
        from . import arithmetic

        if not isinstance(other, Vector):
            return NotImplemented
        return arithmetic.vec_add(self, other)

    def __iadd__(self, other):
        from . import arithmetic

        if not isinstance(other, Vector):
            return NotImplemented
        return arithmetic.vec_add(self, other, inplace=True)

    def __mul__(self, other):
        from . import arithmetic
        from .matrix import Matrix

        if isinstance(other, Vector):
            return arithmetic.dot_product(self, other)
        if isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.vec_scalar_mul(self, other)

    def __rmul__(self, other):
        from . import arithmetic

        if not isinstance(other, numbers.Number):
            return NotImplemented
        return arithmetic.vec_scalar_mul(self, other)

    def __imul__(self, other):
        from . import arithmetic
        from .matrix import Matrix

        if isinstance(other, (Vector, Matrix)):
            return NotImplemented
        return arithmetic.vec_scalar_mul(self, other, inplace=True)

    def __matmul__(self, other):
        from . import arithmetic

        if not isinstance(other, Vector):
            return NotImplemented
        return arithmetic.dot_product(self, other)

    # -----------------------------------------------------------------
    # Unary transforms
    # -----------------------------------------------------------------
    def lambda_(self, funct: Callable[[T], T]) -> "Vector[T]":
        """Return a new Vector with ``funct(x)`` at every position."""
        from . import transform

        return transform.transform_vector(self, lambda i, x: funct(x))

    def lambda_index(self, funct: Callable[[int], T]) -> "Vector[T]":
        """Return a new Vector with ``funct(i)`` at every index ``i``."""
        from . import transform

        return transform.transform_vector(self, lambda i, x: funct(i))

    def lambda_enumerate(self, funct: Callable[[int, T], T]) -> "Vector[T]":
        """Return a new Vector with ``funct(i, x)`` at every index ``i``."""
        from . import transform

        return transform.transform_vector(self, funct)

    def lambda_inplace(self, funct: Callable[[T], T]) -> "Vector[T]":
        from . import transform

        return transform.transform_vector(self, lambda i, x: funct(x), inplace=True)

    def lambda_index_inplace(self, funct: Callable[[int], T]) -> "Vector[T]":
        from . import transform

        return transform.transform_vector(self, lambda i, x: funct(i), inplace=True)

    def lambda_enumerate_inplace(self, funct: Callable[[int, T], T]) -> "Vector[T]":
        from . import transform

        return transform.transform_vector(self, funct, inplace=True)

    # -----------------------------------------------------------------
    # Binary transforms
    # -----------------------------------------------------------------
    def map(self, other: "Vector[T]", funct: Callable[[T, T], T]) -> "Vector[T]":
        """Return a new Vector with ``funct(a, b)`` over corresponding elements."""
        from . import transform

        return transform.combine_vectors(self, other, lambda i, a, b: funct(a, b))

    def map_enumerate(
        self, other: "Vector[T]", funct: Callable[[int, T, T], T]
    ) -> "Vector[T]":
        """Return a new Vector with ``funct(i, a, b)`` over corresponding elements."""
        from . import transform

        return transform.combine_vectors(self, other, funct)

    def map_inplace(
        self, other: "Vector[T]", funct: Callable[[T, T], T]
    ) -> "Vector[T]":
        from . import transform

        return transform.combine_vectors(
            self, other, lambda i, a, b: funct(a, b), inplace=True
        )

    def map_enumerate_inplace(
        self, other: "Vector[T]", funct: Callable[[int, T, T], T]
    ) -> "Vector[T]":
        from . import transform

        return transform.combine_vectors(self, other, funct, inplace=True)
