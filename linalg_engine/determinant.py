"""
Determinant, adjugate and determinant-based inversion.

The determinant is computed by recursive Laplace expansion along the first
row. Each term allocates a fresh ``(n-1) x (n-1)`` minor, so the recursion
depth is ``n`` and for dense input the number of minors grows as ``n!``.
Keep ``n`` small.

Unlike the plain expansion formula, entries of the expansion row that are
exactly zero are skipped instead of being multiplied by their minor. For
finite values the result is the same; with non-finite floats a skipped
``0 * inf`` term means the result can differ from the full sum.
"""

from typing import Any

from .errors import InvertNotSquare, NotSquare, SingularMatrix
from .fmt import cformat, make_latex_matrix
from .linalg import Matrix
from .log import log, log_step


def _execute_direct(matrix: Matrix, do_log: bool) -> Any:
    """Closed forms for n <= 2."""
    f = matrix.field
    n = matrix.rows

    if n == 0:
        return f.one

    if n == 1:
        return matrix.items[0][0]

    (a, b), (c, d) = matrix.items
    det = f.sub(f.mul(a, d), f.mul(b, c))
    if do_log:
        log_step(
            r"$$ \det%s = %s \cdot %s - %s \cdot %s = %s $$",
            make_latex_matrix(matrix.items),
            cformat(a, arg_of="*"),
            cformat(d, arg_of="*"),
            cformat(b, arg_of="*"),
            cformat(c, arg_of="*"),
            cformat(det),
        )
    return det


def _execute_row_expansion(matrix: Matrix, do_log: bool) -> Any:
    """Laplace expansion along row 0."""
    f = matrix.field
    det = f.zero
    term_strs = []

    for p in range(matrix.cols):
        element = matrix.items[0][p]
        # zero entries contribute no term
        if f.is_zero(element):
            continue
        minor_det = _determinant(matrix.sub_matrix(0, p), do_log)
        term = f.mul(element, minor_det)
        if p % 2 == 1:
            term = f.neg(term)
        det = f.add(det, term)

        if do_log:
            sign_str = "+" if p % 2 == 0 else "-"
            log_step(
                r"$$ (-1)^{1+%s} \cdot a_{1,%s} \cdot M_{1,%s} = %s %s \cdot %s = %s $$",
                p + 1,
                p + 1,
                p + 1,
                sign_str,
                cformat(element, arg_of="*"),
                cformat(minor_det, arg_of="*"),
                cformat(term),
            )
            term_strs.append(cformat(term, arg_of="+"))

    if do_log:
        log_step(
            r"$$ \det%s = %s = %s $$",
            make_latex_matrix(matrix.items),
            " + ".join(term_strs),
            cformat(det),
        )
    return det


def _determinant(matrix: Matrix, do_log: bool) -> Any:
    if matrix.rows <= 2:
        return _execute_direct(matrix, do_log)
    return _execute_row_expansion(matrix, do_log)


def determinant(matrix: Matrix, do_log: bool = False) -> Any:
    """
    Compute the determinant of a square matrix.

    Args:
        matrix: The matrix to compute the determinant of.
        do_log: Whether to log the expansion.

    Returns:
        The determinant, a value of ``matrix.field``. The empty matrix has
        determinant one.

    Raises:
        NotSquare: If the matrix is not square.
    """
    if not matrix.is_square():
        raise NotSquare("Determinant requires a square matrix")
    det = _determinant(matrix, do_log)
    if do_log:
        log(r"$$ \boxed{\det = %s} $$", cformat(det))
    return det


def cofactor(matrix: Matrix, row: int, col: int) -> Any:
    """Signed minor determinant ``(-1)^(row+col) det(M_row,col)``."""
    if not matrix.is_square():
        raise NotSquare("Cofactors require a square matrix")
    minor_det = _determinant(matrix.sub_matrix(row, col), False)
    if (row + col) % 2 == 1:
        return matrix.field.neg(minor_det)
    return minor_det


def adjugate(matrix: Matrix) -> Matrix:
    """Transpose of the cofactor matrix, written directly in transposed order."""
    if not matrix.is_square():
        raise NotSquare("The adjugate requires a square matrix")
    n = matrix.rows
    res = Matrix.zero(n, n, matrix.field)
    for i, j in matrix.inorder_slot_iter():
        res.items[j][i] = cofactor(matrix, i, j)
    return res


def invert_by_determinant(matrix: Matrix) -> Matrix:
    if not matrix.is_square():
        raise InvertNotSquare("The matrix must be square.")
    f = matrix.field
    det = determinant(matrix)
    if f.is_zero(det):
        raise SingularMatrix("The matrix is singular.")
    return adjugate(matrix).scale(f.div(f.one, det))
