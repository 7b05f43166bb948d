from .scalar import ScalarField, INTEGER, FLOAT, RATIONAL, infer_field
from .errors import (
    MatrixError,
    IndexOutOfRange,
    DimensionMismatch,
    RowCountMismatch,
    SingularPivot,
    ScalarZero,
    NotSquare,
    MatrixInvertError,
    SingularMatrix,
    InvertNotSquare,
    FieldMismatch,
)
from .linalg import Matrix
from .elementary import (
    swap_rows,
    swap_columns,
    scale_row,
    scale_column,
    add_scaled_row,
    add_scaled_column,
)
from .determinant import determinant, cofactor, adjugate, invert_by_determinant
from .row_reduction import row_reduce, invert_by_row_reduction
from .random_matrix import (
    RandomMatrixBuilder,
    raw_gen_rand_matrix,
    gen_regular_matrix,
    gen_matrix_with_rank,
)

from .fmt import cformat, make_latex_matrix, make_latex_augmented_matrix

from .log import log, nest_logger, nest_appending_logger, ignore_log, capture_logs

__all__ = [
    "ScalarField",
    "INTEGER",
    "FLOAT",
    "RATIONAL",
    "infer_field",
    "MatrixError",
    "IndexOutOfRange",
    "DimensionMismatch",
    "RowCountMismatch",
    "SingularPivot",
    "ScalarZero",
    "NotSquare",
    "MatrixInvertError",
    "SingularMatrix",
    "InvertNotSquare",
    "FieldMismatch",
    "Matrix",
    "swap_rows",
    "swap_columns",
    "scale_row",
    "scale_column",
    "add_scaled_row",
    "add_scaled_column",
    "determinant",
    "cofactor",
    "adjugate",
    "invert_by_determinant",
    "row_reduce",
    "invert_by_row_reduction",
    "RandomMatrixBuilder",
    "raw_gen_rand_matrix",
    "gen_regular_matrix",
    "gen_matrix_with_rank",
    "cformat",
    "make_latex_matrix",
    "make_latex_augmented_matrix",
    "log",
    "nest_logger",
    "nest_appending_logger",
    "ignore_log",
    "capture_logs",
]
