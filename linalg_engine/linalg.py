from typing import Any, Iterator, List, Tuple

from .errors import DimensionMismatch, FieldMismatch, IndexOutOfRange, RowCountMismatch
from .fmt import make_latex_matrix
from .scalar import FLOAT, ScalarField, infer_field


class Matrix:
    """
    Dense matrix over a single scalar field.

    Read accessors and the value-returning operations (``add``, ``scale``,
    ``multiply``, ``transpose`` ...) never touch the receiver. Only the
    ``*_in_place`` methods, ``set`` and the functions in
    :mod:`linalg_engine.elementary` mutate a matrix.
    """

    items: List[List[Any]]
    field: ScalarField

    def __init__(
        self, items: List[List[Any]], field: ScalarField = None, cols: int = None
    ):
        if not all(isinstance(row, (list, tuple)) for row in items):
            raise ValueError("Matrix items must be a list of lists")
        if items:
            row_len = len(items[0])
            if not all(len(row) == row_len for row in items):
                raise ValueError("All matrix rows must have the same length")
        else:
            row_len = cols or 0
        if field is None:
            field = infer_field(item for row in items for item in row)
        self.field = field
        self._cols = row_len
        self.items = [[field.coerce(item) for item in row] for row in items]

    @classmethod
    def _wrap(cls, items: List[List[Any]], field: ScalarField, cols: int) -> "Matrix":
        # items are already coerced and owned by the new matrix
        res = cls.__new__(cls)
        res.items = items
        res.field = field
        res._cols = cols
        return res

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls, rows: int, cols: int, field: ScalarField = FLOAT) -> "Matrix":
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must be non-negative")
        return cls._wrap([[field.zero] * cols for _ in range(rows)], field, cols)

    @classmethod
    def identity(cls, size: int, field: ScalarField = FLOAT) -> "Matrix":
        res = cls.zero(size, size, field)
        for i in range(size):
            res.items[i][i] = field.one
        return res

    @classmethod
    def from_grid(cls, values: List[List[Any]], field: ScalarField = None) -> "Matrix":
        return cls([list(row) for row in values], field)

    @classmethod
    def new_vector(cls, items: List[Any], field: ScalarField = None) -> "Matrix":
        return cls([[i] for i in items], field, cols=1)

    @classmethod
    def copy_of(cls, other: "Matrix") -> "Matrix":
        return cls._wrap([list(row) for row in other.items], other.field, other.cols)

    def copy(self) -> "Matrix":
        return Matrix.copy_of(self)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.items)

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    def check_index(self, i: int, j: int) -> None:
        if not 0 <= i < self.rows or not 0 <= j < self.cols:
            raise IndexOutOfRange(
                f"Index ({i}, {j}) out of range for a {self.rows}x{self.cols} matrix"
            )

    def check_row(self, i: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexOutOfRange(f"Row {i} out of range for {self.rows} rows")

    def check_col(self, j: int) -> None:
        if not 0 <= j < self.cols:
            raise IndexOutOfRange(f"Column {j} out of range for {self.cols} columns")

    def get(self, i: int, j: int) -> Any:
        self.check_index(i, j)
        return self.items[i][j]

    def set(self, i: int, j: int, value: Any) -> None:
        self.check_index(i, j)
        self.items[i][j] = self.field.coerce(value)

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        i, j = index
        return self.get(i, j)

    def __setitem__(self, index: Tuple[int, int], value: Any) -> None:
        i, j = index
        self.set(i, j, value)

    def inorder_slot_iter(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.rows):
            for j in range(self.cols):
                yield (i, j)

    def to_list(self) -> List[List[Any]]:
        return [list(row) for row in self.items]

    def get_column(self, j: int) -> "Matrix":
        self.check_col(j)
        return Matrix._wrap([[row[j]] for row in self.items], self.field, 1)

    def get_line(self, i: int) -> "Matrix":
        self.check_row(i)
        return Matrix._wrap([list(self.items[i])], self.field, self.cols)

    # ------------------------------------------------------------------
    # Comparison and formatting
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        eq = self.field.eq
        return self.shape == other.shape and all(
            eq(a, b)
            for row, other_row in zip(self.items, other.items)
            for a, b in zip(row, other_row)
        )

    __hash__ = None

    def allclose(self, other: "Matrix", tol: float = 1e-9) -> bool:
        if self.shape != other.shape:
            return False
        f = self.field

        def close(a: Any, b: Any) -> bool:
            diff = f.abs(f.sub(a, b))
            return f.lt(diff, tol) or f.eq(diff, tol)

        return all(
            close(self.items[i][j], other.items[i][j])
            for i, j in self.inorder_slot_iter()
        )

    def is_identity(self) -> bool:
        if not self.is_square():
            return False
        for i, j in self.inorder_slot_iter():
            value = self.items[i][j]
            if i == j and not self.field.is_one(value):
                return False
            if i != j and not self.field.is_zero(value):
                return False
        return True

    def __str__(self) -> str:
        return "\n".join([" ".join([str(item) for item in row]) for row in self.items])

    def __repr__(self) -> str:
        return f"Matrix({self.items!r}, field={self.field.name})"

    def cformat(self, _arg_of="") -> str:
        return make_latex_matrix(self.items)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_field(self, other: "Matrix") -> None:
        if other.field is not self.field:
            raise FieldMismatch(
                f"Cannot combine a {self.field.name} matrix "
                f"with a {other.field.name} matrix"
            )

    def _check_same_shape(self, other: "Matrix") -> None:
        self._check_field(other)
        if self.shape != other.shape:
            raise DimensionMismatch(
                "Matrix dimensions must match: %dx%d and %dx%d"
                % (self.rows, self.cols, other.rows, other.cols)
            )

    def _check_product(self, other: "Matrix") -> None:
        self._check_field(other)
        if self.cols != other.rows:
            raise DimensionMismatch(
                "Columns of the left matrix (%d) must equal "
                "rows of the right matrix (%d)"
                % (self.cols, other.rows)
            )

    def add_in_place(self, other: "Matrix") -> None:
        """Add ``other`` into this matrix."""
        self._check_same_shape(other)
        add = self.field.add
        for row, other_row in zip(self.items, other.items):
            for j in range(self.cols):
                row[j] = add(row[j], other_row[j])

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        res = self.copy()
        res.add_in_place(other)
        return res

    def scale_in_place(self, scalar: Any) -> None:
        """Multiply every entry of this matrix by ``scalar``."""
        k = self.field.coerce(scalar)
        mul = self.field.mul
        for row in self.items:
            for j in range(self.cols):
                row[j] = mul(row[j], k)

    def scale(self, scalar: Any) -> "Matrix":
        res = self.copy()
        res.scale_in_place(scalar)
        return res

    def _product_items(self, other: "Matrix") -> List[List[Any]]:
        f = self.field
        return [
            [
                f.sum(
                    f.mul(self.items[i][k], other.items[k][j])
                    for k in range(self.cols)
                )
                for j in range(other.cols)
            ]
            for i in range(self.rows)
        ]

    def multiply(self, other: "Matrix") -> "Matrix":
        self._check_product(other)
        return Matrix._wrap(self._product_items(other), self.field, other.cols)

    def multiply_in_place(self, other: "Matrix") -> None:
        """Replace this matrix with ``self * other``."""
        self._check_product(other)
        self.items = self._product_items(other)
        self._cols = other.cols

    def transpose(self) -> "Matrix":
        items = [[self.items[i][j] for i in range(self.rows)] for j in range(self.cols)]
        return Matrix._wrap(items, self.field, self.rows)

    def negate(self) -> "Matrix":
        neg = self.field.neg
        items = [[neg(item) for item in row] for row in self.items]
        return Matrix._wrap(items, self.field, self.cols)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_field(other)
        return self.add(other.negate())

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Matrix":
        return self.negate()

    def __mul__(self, other) -> "Matrix":
        if not isinstance(other, Matrix):
            return self.scale(other)
        return self.multiply(other)

    def __rmul__(self, other) -> "Matrix":
        return self.scale(other)

    # ------------------------------------------------------------------
    # Slicing
    # ------------------------------------------------------------------

    def split(self, column: int) -> Tuple["Matrix", "Matrix"]:
        """Split into columns ``[0, column]`` and ``(column, cols)``."""
        if not 0 <= column <= self.cols - 1:
            raise IndexOutOfRange(
                f"Split column {column} out of range for {self.cols} columns"
            )
        left = [row[: column + 1] for row in self.items]
        right = [row[column + 1 :] for row in self.items]
        return (
            Matrix._wrap(left, self.field, column + 1),
            Matrix._wrap(right, self.field, self.cols - column - 1),
        )

    def augment(self, other: "Matrix") -> "Matrix":
        """Place ``other`` to the right of this matrix."""
        self._check_field(other)
        if self.rows != other.rows:
            raise RowCountMismatch(
                f"Cannot augment {self.rows} rows with {other.rows} rows"
            )
        items = [row + other_row for row, other_row in zip(self.items, other.items)]
        return Matrix._wrap(items, self.field, self.cols + other.cols)

    def sub_matrix(self, row: int, col: int) -> "Matrix":
        """The minor left after deleting ``row`` and ``col``."""
        self.check_index(row, col)
        items = [
            [item for j, item in enumerate(r) if j != col]
            for i, r in enumerate(self.items)
            if i != row
        ]
        return Matrix._wrap(items, self.field, self.cols - 1)

    # ------------------------------------------------------------------
    # Engine shortcuts
    # ------------------------------------------------------------------

    def determinant(self, do_log: bool = False) -> Any:
        from .determinant import determinant

        return determinant(self, do_log=do_log)

    def adjugate(self) -> "Matrix":
        from .determinant import adjugate

        return adjugate(self)

    def invert_by_determinant(self) -> "Matrix":
        from .determinant import invert_by_determinant

        return invert_by_determinant(self)

    def invert_by_row_reduction(self, log_steps: bool = False) -> "Matrix":
        from .row_reduction import invert_by_row_reduction

        return invert_by_row_reduction(self, log_steps=log_steps)

    def row_reduce(
        self, other: "Matrix", strict: bool = False, log_steps: bool = False
    ) -> Tuple["Matrix", "Matrix"]:
        from .row_reduction import row_reduce

        return row_reduce(self, other, strict=strict, log_steps=log_steps)
