class MatrixError(ValueError):
    """Base class for every error raised by the matrix engine."""


class IndexOutOfRange(MatrixError, IndexError):
    pass


class DimensionMismatch(MatrixError):
    pass


class RowCountMismatch(DimensionMismatch):
    """The two matrices of an augmented pair have different row counts."""


class SingularPivot(MatrixError):
    """Strict row reduction met a zero pivot."""


class ScalarZero(MatrixError):
    """A row or column was scaled by zero."""


class NotSquare(MatrixError):
    pass


class MatrixInvertError(MatrixError):
    """Raised by the two inversion paths."""


class SingularMatrix(MatrixInvertError):
    pass


class InvertNotSquare(NotSquare, MatrixInvertError):
    pass


class FieldMismatch(MatrixError, TypeError):
    """Two matrices over different scalar fields were combined."""
