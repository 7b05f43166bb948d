import random

from linalg_engine import RATIONAL, Matrix
from linalg_engine.log import log, global_logger
from linalg_engine.random_matrix import gen_regular_matrix, gen_matrix_with_rank


# -----------------------------------------------------------------------------
# Example generation
# -----------------------------------------------------------------------------


def determinant_example():
    log(r"\section{Determinant}")
    A = gen_regular_matrix(3, field=RATIONAL)
    log(r"Input matrix $A$: $%s$", A)
    det_val = A.determinant(do_log=True)
    log(r"\textbf{Determinant:} $%s$", det_val)


def adjugate_example():
    log(r"\section{Adjugate}")
    A = gen_regular_matrix(3, field=RATIONAL)
    log(r"Input matrix $A$: $%s$", A)
    log(r"\textbf{Adjugate:} $%s$", A.adjugate())


def inverse_example():
    log(r"\section{Inverse}")
    A = gen_regular_matrix(3, field=RATIONAL)
    log(r"Input matrix $A$: $%s$", A)
    inv = A.invert_by_row_reduction(log_steps=True)
    log(r"\textbf{Inverse by row reduction:} $%s$", inv)
    inv_det = A.invert_by_determinant()
    log(r"\textbf{Inverse by determinant:} $%s$", inv_det)
    if inv != inv_det:
        raise AssertionError("The two inversion paths disagree")


def linear_system_example():
    log(r"\section{Linear system}")
    A = gen_regular_matrix(3, field=RATIONAL)
    b = Matrix.new_vector([random.randint(-5, 5) for _ in range(3)], RATIONAL)
    log(r"Linear system $A\,x=b$ with $A=%s$, $b=%s$", A, b)
    _, x = A.row_reduce(b, log_steps=True)
    log(r"\textbf{Solution:} $x = %s$", x)


def singular_example():
    log(r"\section{Singular system}")
    A = Matrix(gen_matrix_with_rank(3, 3, rank=2).items, RATIONAL)
    log(r"Input matrix $A$ of rank 2: $%s$", A)
    reduced, _ = A.row_reduce(Matrix.zero(3, 1, RATIONAL), log_steps=True)
    log(r"\textbf{Row echelon form:} $%s$", reduced)


# -----------------------------------------------------------------------------
# Main routine
# -----------------------------------------------------------------------------


def main():
    random.seed(2025)
    global_logger.auto_print = True

    determinant_example()
    adjugate_example()
    inverse_example()
    linear_system_example()
    singular_example()

    with open("output.tex", "w", encoding="utf-8") as f:
        f.write("\n".join(global_logger.accum))


if __name__ == "__main__":
    main()
