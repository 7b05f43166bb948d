"""Tests for random matrix generation."""

from __future__ import annotations

import random

import pytest
import sympy

from linalg_engine import FLOAT, INTEGER, Matrix
from linalg_engine.random_matrix import (
    RandomMatrixBuilder,
    gen_matrix_with_rank,
    gen_regular_matrix,
    raw_gen_rand_matrix,
)


def _rank(m: Matrix) -> int:
    return sympy.Matrix(m.to_list()).rank()


def test_raw_shape_and_range() -> None:
    """Checks the default distribution and shape."""
    random.seed(1)
    m: Matrix = raw_gen_rand_matrix(3, 4)
    assert m.shape == (3, 4)
    assert m.field is INTEGER
    assert all(-5 <= item <= 5 for row in m.items for item in row)


def test_custom_distribution() -> None:
    """Checks a user-supplied distribution is used."""
    m: Matrix = raw_gen_rand_matrix(2, 2, dist=lambda: 7)
    assert m.to_list() == [[7, 7], [7, 7]]


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_regular_matrix_is_invertible(n: int) -> None:
    """Checks generated regular matrices have a non-zero determinant."""
    random.seed(n)
    m: Matrix = gen_regular_matrix(n, field=FLOAT)
    assert m.determinant() != 0
    inverse: Matrix = m.invert_by_row_reduction()
    assert (m * inverse).allclose(Matrix.identity(n), tol=1e-9)


def test_regular_matrix_gives_up() -> None:
    """Checks a degenerate distribution fails after the attempt budget."""
    builder = (
        RandomMatrixBuilder.new(max_attempts=5).with_size(2, 2).with_dist(lambda: 1)
    )
    with pytest.raises(RuntimeError):
        builder.build_full_rank()


@pytest.mark.parametrize("shape,rank", [((3, 3), 2), ((4, 3), 1), ((2, 5), 2)])
def test_matrix_with_rank(shape: tuple[int, int], rank: int) -> None:
    """Checks the requested rank is produced."""
    random.seed(2025)
    m: Matrix = gen_matrix_with_rank(shape[0], shape[1], rank=rank)
    assert m.shape == shape
    assert _rank(m) == rank


def test_build_dispatch() -> None:
    """Checks build() picks the right strategy."""
    random.seed(3)
    full: Matrix = RandomMatrixBuilder.new().with_size(3, 3).with_rank(3).build()
    assert full.determinant() != 0
    plain: Matrix = RandomMatrixBuilder.new().with_size(2, 3).build()
    assert plain.shape == (2, 3)
    with pytest.raises(AssertionError):
        RandomMatrixBuilder.new().with_size(2, 3).with_rank(3).build()
