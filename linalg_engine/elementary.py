"""
Elementary row and column operations.

Each function mutates ``matrix`` in place and returns ``None``. Indices are
validated before the first write, so a failing call leaves the matrix as it
was.
"""

from typing import Any

from .errors import ScalarZero
from .linalg import Matrix


def swap_rows(matrix: Matrix, row1: int, row2: int) -> None:
    matrix.check_row(row1)
    matrix.check_row(row2)
    items = matrix.items
    items[row1], items[row2] = items[row2], items[row1]


def swap_columns(matrix: Matrix, col1: int, col2: int) -> None:
    matrix.check_col(col1)
    matrix.check_col(col2)
    for row in matrix.items:
        row[col1], row[col2] = row[col2], row[col1]


def _nonzero_factor(matrix: Matrix, factor: Any) -> Any:
    k = matrix.field.coerce(factor)
    if matrix.field.is_zero(k):
        raise ScalarZero("The factor must not be zero.")
    return k


def scale_row(matrix: Matrix, row: int, factor: Any) -> None:
    matrix.check_row(row)
    k = _nonzero_factor(matrix, factor)
    mul = matrix.field.mul
    line = matrix.items[row]
    for j in range(matrix.cols):
        line[j] = mul(line[j], k)


def scale_column(matrix: Matrix, col: int, factor: Any) -> None:
    matrix.check_col(col)
    k = _nonzero_factor(matrix, factor)
    mul = matrix.field.mul
    for line in matrix.items:
        line[col] = mul(line[col], k)


def add_scaled_row(matrix: Matrix, src: int, dst: int, factor: Any) -> None:
    """``R_dst += factor * R_src``"""
    matrix.check_row(src)
    matrix.check_row(dst)
    f = matrix.field
    k = f.coerce(factor)
    source = list(matrix.items[src])
    target = matrix.items[dst]
    for j in range(matrix.cols):
        target[j] = f.add(target[j], f.mul(source[j], k))


def add_scaled_column(matrix: Matrix, src: int, dst: int, factor: Any) -> None:
    """``C_dst += factor * C_src``"""
    matrix.check_col(src)
    matrix.check_col(dst)
    f = matrix.field
    k = f.coerce(factor)
    for line in matrix.items:
        source = line[src]
        line[dst] = f.add(line[dst], f.mul(source, k))
