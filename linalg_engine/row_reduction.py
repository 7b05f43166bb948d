"""
Simultaneous Gauss-Jordan elimination.

``row_reduce(A, B)`` reduces deep copies of ``A`` and ``B`` with the same
sequence of row operations. With ``B`` the identity the second result is the
inverse of ``A``; with ``B`` a right-hand side it is the solution of
``A x = B``.
"""

from typing import Any, List, Tuple

from .determinant import determinant
from .elementary import add_scaled_row, swap_rows
from .errors import (
    FieldMismatch,
    InvertNotSquare,
    RowCountMismatch,
    SingularMatrix,
    SingularPivot,
)
from .fmt import make_latex_augmented_matrix
from .linalg import Matrix
from .log import log, log_step


def _divide_row(matrix: Matrix, row: int, divisor: Any) -> None:
    div = matrix.field.div
    line = matrix.items[row]
    for k in range(matrix.cols):
        line[k] = div(line[k], divisor)


def _select_pivot(a: Matrix, i: int) -> int:
    # Raw value comparison, not absolute value: a more negative entry never
    # replaces a smaller positive one.
    f = a.field
    pivot_row = i
    for j in range(i + 1, a.rows):
        candidate = a.items[j][i]
        if f.lt(a.items[pivot_row][i], candidate) and not f.is_zero(candidate):
            pivot_row = j
    return pivot_row


def row_reduce(
    a: Matrix, b: Matrix, strict: bool = False, log_steps: bool = False
) -> Tuple[Matrix, Matrix]:
    """
    Reduce the augmented pair ``[A | B]``.

    Args:
        a: Left-hand matrix, n x m.
        b: Companion matrix, n x p.
        strict: Raise ``SingularPivot`` on a zero pivot instead of skipping
            the column.
        log_steps: Log every intermediate augmented matrix.

    Returns:
        The reduced copies ``(A', B')``. Singular inputs in non-strict mode
        give a row-echelon-like ``A'`` rather than the identity.
    """
    if a.rows != b.rows:
        raise RowCountMismatch("The two matrices must have the same number of rows.")
    if a.field is not b.field:
        raise FieldMismatch(
            f"Cannot reduce a {a.field.name} matrix alongside a {b.field.name} matrix"
        )

    left = a.copy()
    right = b.copy()
    f = left.field
    steps: List[str] = []

    def record(description: str) -> None:
        steps.append(description)
        if log_steps:
            log_step(r"\textbf{%s}: %s", description, _augmented(left, right))

    if log_steps:
        log_step(r"Initial matrix: $$ %s $$", _augmented(left, right))

    for i in range(min(left.rows, left.cols)):
        pivot_row = _select_pivot(left, i)
        if pivot_row != i:
            swap_rows(left, i, pivot_row)
            swap_rows(right, i, pivot_row)
            record(r"Swap rows $R_{%d}$ and $R_{%d}$" % (i + 1, pivot_row + 1))

        pivot = left.items[i][i]
        if f.is_zero(f.abs(pivot)):
            if strict:
                raise SingularPivot(f"Zero pivot in column {i}.")
            record(r"Column %d has no pivot, skipped" % (i + 1))
            continue

        _divide_row(left, i, pivot)
        _divide_row(right, i, pivot)
        record(r"Normalize pivot row %d" % (i + 1))

        for j in range(left.rows):
            if j == i:
                continue
            factor = left.items[j][i]
            minus_factor = f.neg(factor)
            add_scaled_row(left, i, j, minus_factor)
            add_scaled_row(right, i, j, minus_factor)
        record(r"Eliminate column %d" % (i + 1))

    if log_steps:
        log(r"Reduced in %s steps: $$ %s $$", str(len(steps)), _augmented(left, right))
    return left, right


def _augmented(left: Matrix, right: Matrix) -> str:
    return make_latex_augmented_matrix(left.augment(right).items, bar_col=left.cols)


def invert_by_row_reduction(a: Matrix, log_steps: bool = False) -> Matrix:
    """Invert ``a`` by reducing ``[A | I]``."""
    if not a.is_square():
        raise InvertNotSquare("The matrix must be square.")
    if a.field.is_zero(determinant(a)):
        raise SingularMatrix("The matrix is singular.")
    _, inverse = row_reduce(a, Matrix.identity(a.rows, a.field), log_steps=log_steps)
    return inverse
