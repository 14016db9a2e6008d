# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
vecmat
======

Dense vectors and matrices over any element type that supports ``+``
and ``*``, with a small, strict operator surface.

Public API
~~~~~~~~~~
- Containers
    - `Vector`, `Matrix`
- Builders
    - `vector`, `vector_repeat`, `matrix`, `matrix_repeat`,
      `zeros`, `identity`
- Arithmetic (also available as operators)
    - `vec_add`, `vec_scalar_mul`, `dot_product`
    - `mat_add`, `mat_scalar_mul`, `mat_vec_mul`, `mat_mul`
- Traversal (also available as ``lambda_*`` / ``map*`` methods)
    - `transform_vector`, `combine_vectors`,
      `transform_matrix`, `combine_matrices`
- Errors
    - `VecMatError`, `ShapeMismatchError`,
      `NonRectangularInputError`, `InvalidConversionError`

Example
-------
>>> import vecmat as vm
>>> A = vm.matrix([1, 2], [3, 4], [5, 6])
>>> A * vm.vector(1, 2)
Vector([5, 11, 17])
>>> A.lambda_(lambda x: x * x).into_inner()
[[1, 4], [9, 16], [25, 36]]
"""

from importlib.metadata import version as _pkg_version

from .vector import Vector
from .matrix import Matrix

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# ---------------------------------------------------------------------
from .arithmetic import (
    dot_product,
    mat_add,
    mat_mul,
    mat_scalar_mul,
    mat_vec_mul,
    vec_add,
    vec_scalar_mul,
)
from .builders import identity, matrix, matrix_repeat, vector, vector_repeat, zeros
from .errors import (
    InvalidConversionError,
    NonRectangularInputError,
    ShapeMismatchError,
    VecMatError,
)
from .transform import (
    combine_matrices,
    combine_vectors,
    transform_matrix,
    transform_vector,
)

__all__ = [
    "Vector",
    "Matrix",
    "vector",
    "vector_repeat",
    "matrix",
    "matrix_repeat",
    "zeros",
    "identity",
    "vec_add",
    "vec_scalar_mul",
    "dot_product",
    "mat_add",
    "mat_scalar_mul",
    "mat_vec_mul",
    "mat_mul",
    "transform_vector",
    "combine_vectors",
    "transform_matrix",
    "combine_matrices",
    "VecMatError",
    "ShapeMismatchError",
    "NonRectangularInputError",
    "InvalidConversionError",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show vecmat", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
