# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from vecmat.arithmetic import (
    dot_product,
    mat_add,
    mat_mul,
    mat_scalar_mul,
    mat_vec_mul,
    vec_add,
    vec_scalar_mul,
)
from vecmat.errors import ShapeMismatchError
from vecmat.matrix import Matrix
from vecmat.vector import Vector

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Vector
# ---------------------------------------------------------------------
def test_vec_add():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    c = a + b
    assert c == Vector([5, 7, 9])
    assert vec_add(a, b) == c
    # operands untouched
    assert a == Vector([1, 2, 3])
    assert b == Vector([4, 5, 6])


def test_vec_add_elementwise_property():
    rng = np.random.default_rng(0)
    for _ in range(TEST_ITERATIONS):
        n = int(rng.integers(0, 30))
        a = Vector(rng.integers(-100, 100, size=n).tolist())
        b = Vector(rng.integers(-100, 100, size=n).tolist())
        s = a + b
        assert len(s) == n
        assert all(s[i] == a[i] + b[i] for i in range(n))


def test_vec_add_length_mismatch():
    with pytest.raises(ShapeMismatchError) as excinfo:
        Vector([1, 2, 3]) + Vector([1, 2])
    assert excinfo.value.lhs_shape == (3,)
    assert excinfo.value.rhs_shape == (2,)


def test_vec_add_inplace_returns_receiver():
    a = Vector([1, 2, 3])
    storage = a.into_inner()
    alias = a
    a += Vector([10, 20, 30])
    assert a is alias
    assert a.into_inner() is storage
    assert a == Vector([11, 22, 33])


def test_vec_add_inplace_mismatch_leaves_receiver_alone():
    a = Vector([1, 2, 3])
    with pytest.raises(ShapeMismatchError):
        vec_add(a, Vector([1, 1]), inplace=True)
    assert a == Vector([1, 2, 3])


def test_vec_add_with_itself():
    a = Vector([1, 2, 3])
    a += a
    assert a == Vector([2, 4, 6])


def test_vec_add_rejects_non_vectors():
    with pytest.raises(TypeError):
        Vector([1, 2]) + [1, 2]
    with pytest.raises(TypeError):
        vec_add(Vector([1]), Matrix([[1]]))


def test_scalar_mul():
    v = Vector([1, 2, 3])
    assert v * 3 == Vector([3, 6, 9])
    assert vec_scalar_mul(v, 3) == Vector([3, 6, 9])
    assert v == Vector([1, 2, 3])


def test_scalar_mul_left_numeric():
    v = Vector([1, 2, 3])
    assert 3 * v == Vector([3, 6, 9])
    assert 0.5 * Vector([2.0, 4.0]) == Vector([1.0, 2.0])
    assert np.float64(2.0) * Vector([1.0, 2.0]) == Vector([2.0, 4.0])


def test_scalar_mul_element_times_scalar_order():
    # str * int repeats, int * str is the same; lists show the order
    v = Vector([[1], [2]])
    assert v * 2 == Vector([[1, 1], [2, 2]])


def test_scalar_mul_associativity():
    rng = np.random.default_rng(1)
    for _ in range(TEST_ITERATIONS):
        a = Vector(rng.integers(-50, 50, size=8).tolist())
        s, s2 = (int(x) for x in rng.integers(-9, 9, size=2))
        assert (a * s) * s2 == a * (s * s2)


def test_scalar_mul_inplace():
    v = Vector([1, 2, 3])
    alias = v
    v *= 4
    assert v is alias
    assert v == Vector([4, 8, 12])
    assert vec_scalar_mul(v, 0, inplace=True) is v
    assert v == Vector([0, 0, 0])


def test_dot_product():
    assert Vector([1, 2, 3]) * Vector([4, 5, 6]) == 32
    assert Vector([1, 2, 3]) @ Vector([4, 5, 6]) == 32
    assert dot_product(Vector([1, 2, 3]), Vector([4, 5, 6])) == 32
    assert Vector([1, 2, 3]).dot(Vector([4, 5, 6])) == 32


def test_dot_product_length_mismatch():
    with pytest.raises(ShapeMismatchError):
        Vector([1, 2, 3]) * Vector([4, 5])


def test_dot_product_empty_is_zero():
    assert dot_product(Vector(), Vector()) == 0


def test_dot_product_left_to_right_order():
    u = [0.1, 0.2, 0.3, 1e16, -1e16]
    v = [1.0, 1.0, 1.0, 1.0, 1.0]
    expected = 0.0
    for a, b in zip(u, v):
        expected = expected + a * b
    result = Vector(u) * Vector(v)
    assert result == expected
    assert type(result) is float


def test_dot_product_keeps_element_type():
    assert Vector([Fraction(1, 2), Fraction(1, 3)]) * Vector([2, 3]) == Fraction(2)
    d = Vector([Decimal("0.1"), Decimal("0.2")]) * Vector([Decimal("1"), Decimal("1")])
    assert d == Decimal("0.3")
    assert isinstance(d, Decimal)


def test_vector_times_matrix_unsupported():
    with pytest.raises(TypeError):
        Vector([1, 2]) * Matrix([[1, 2], [3, 4]])


# ---------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------
def test_mat_add():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    B = Matrix([[7, 8], [9, 10], [11, 12]])
    expected = Matrix([[8, 10], [12, 14], [16, 18]])
    assert A + B == expected
    assert mat_add(A, B) == expected
    assert A == Matrix([[1, 2], [3, 4], [5, 6]])


def test_mat_add_shape_mismatch():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    B = Matrix([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ShapeMismatchError):
        A + B
    with pytest.raises(ShapeMismatchError):
        A += B
    assert A == Matrix([[1, 2], [3, 4], [5, 6]])


def test_mat_add_inplace():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    alias = A
    A += Matrix([[7, 8], [9, 10], [11, 12]])
    assert A is alias
    assert A == Matrix([[8, 10], [12, 14], [16, 18]])


def test_mat_scalar_mul():
    A = Matrix([[1, 2], [3, 4]])
    assert A * 2 == Matrix([[2, 4], [6, 8]])
    assert 2 * A == Matrix([[2, 4], [6, 8]])
    assert mat_scalar_mul(A, -1) == Matrix([[-1, -2], [-3, -4]])
    alias = A
    A *= 3
    assert A is alias
    assert A == Matrix([[3, 6], [9, 12]])


def test_mat_vec_mul():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    v = Vector([1, 2])
    expected = Vector([5, 11, 17])
    assert A * v == expected
    assert A @ v == expected
    assert mat_vec_mul(A, v) == expected


def test_mat_vec_mul_mismatch():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    with pytest.raises(ShapeMismatchError):
        A * Vector([1, 2, 3])


def test_mat_vec_mul_via_imul_rebinds_to_vector():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    A *= Vector([1, 2])
    assert A == Vector([5, 11, 17])


def test_mat_vec_mul_matches_numpy():
    rng = np.random.default_rng(2)
    for _ in range(TEST_ITERATIONS):
        m, n = (int(x) for x in rng.integers(1, 12, size=2))
        A = rng.normal(size=(m, n))
        x = rng.normal(size=n)
        ours = Matrix.from_numpy(A) * Vector.from_numpy(x)
        np.testing.assert_allclose(ours.to_numpy(), A @ x, rtol=1e-10, atol=1e-12)


def test_mat_mul():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    B = Matrix([[8, 9, 10, 11], [12, 13, 14, 15]])
    expected = Matrix([[32, 35, 38, 41], [72, 79, 86, 93], [112, 123, 134, 145]])
    assert A * B == expected
    assert A @ B == expected
    assert mat_mul(A, B) == expected
    assert (A * B).shape == (3, 4)


def test_mat_mul_inner_dimension_mismatch():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    with pytest.raises(ShapeMismatchError) as excinfo:
        A * Matrix([[1, 2], [3, 4], [5, 6]])
    assert excinfo.value.lhs_shape == (3, 2)
    assert excinfo.value.rhs_shape == (3, 2)


def test_mat_mul_inplace_grows_columns():
    A = Matrix([[1, 2], [3, 4], [5, 6]])
    rows_before = A.into_inner()
    first_row = rows_before[0]
    alias = A
    A *= Matrix([[8, 9, 10, 11], [12, 13, 14, 15]])
    assert A is alias
    assert A.shape == (3, 4)
    assert A == Matrix([[32, 35, 38, 41], [72, 79, 86, 93], [112, 123, 134, 145]])
    # same row storage, overwritten in place
    assert A.into_inner() is rows_before
    assert A.into_inner()[0] is first_row


def test_mat_mul_inplace_shrinks_columns():
    A = Matrix([[1, 2, 3], [4, 5, 6]])
    A @= Matrix([[1], [0], [1]])
    assert A == Matrix([[4], [10]])
    assert A.shape == (2, 1)


def test_mat_mul_inplace_mismatch_leaves_receiver_alone():
    A = Matrix([[1, 2], [3, 4]])
    with pytest.raises(ShapeMismatchError):
        A @= Matrix([[1, 2, 3]])
    assert A == Matrix([[1, 2], [3, 4]])
    assert A.shape == (2, 2)


def test_mat_mul_inplace_with_itself():
    A = Matrix([[1, 2], [3, 4]])
    A @= A
    assert A == Matrix([[7, 10], [15, 22]])


def test_mat_mul_matches_numpy():
    rng = np.random.default_rng(3)
    for _ in range(TEST_ITERATIONS):
        m, k, n = (int(x) for x in rng.integers(1, 10, size=3))
        A = rng.normal(size=(m, k))
        B = rng.normal(size=(k, n))
        ours = Matrix.from_numpy(A) @ Matrix.from_numpy(B)
        logger.debug(f"\nOurs:\n{ours.to_numpy()}\nNumpy:\n{A @ B}")
        np.testing.assert_allclose(ours.to_numpy(), A @ B, rtol=1e-10, atol=1e-12)


def test_mat_mul_empty_inner_dimension():
    A = Matrix._adopt([[], [], []], 3, 0)
    B = Matrix._adopt([], 0, 4)
    C = A @ B
    assert C.shape == (3, 4)
    assert C == Matrix([[0] * 4] * 3)


def test_row_times_column_collapses_to_vector():
    row = Vector([1, 2, 3]).into_row_matrix()
    col = Vector([4, 5, 6]).into_column_matrix()
    assert (row @ col).into_vector() == Vector([32])
    assert (col @ row).shape == (3, 3)


# ---------------------------------------------------------------------
# In-place operations are all-or-nothing
# ---------------------------------------------------------------------
def test_vec_add_inplace_failure_leaves_receiver_alone():
    a = Vector([1, None, 3])
    with pytest.raises(TypeError):
        a += Vector([10, 20, 30])
    assert a == Vector([1, None, 3])


def test_vec_scalar_mul_inplace_failure_leaves_receiver_alone():
    v = Vector([1, 2, None])
    with pytest.raises(TypeError):
        v *= 2
    assert v == Vector([1, 2, None])


def test_mat_add_inplace_failure_leaves_receiver_alone():
    A = Matrix([[1, 2], [3, 4]])
    B = Matrix([[10, 20], [30, None]])
    with pytest.raises(TypeError):
        A += B
    assert A == Matrix([[1, 2], [3, 4]])


def test_mat_scalar_mul_inplace_failure_leaves_receiver_alone():
    A = Matrix([[1, 2], [3, None]])
    with pytest.raises(TypeError):
        A *= 2
    assert A == Matrix([[1, 2], [3, None]])


def test_mat_mul_inplace_failure_leaves_receiver_alone():
    A = Matrix([[1, 2], [3, 4]])
    with pytest.raises(TypeError):
        A @= Matrix([[1, 0], [0, None]])
    assert A == Matrix([[1, 2], [3, 4]])
    assert A.shape == (2, 2)
