from typing import Any, Callable
import random

from .determinant import determinant
from .linalg import Matrix
from .scalar import INTEGER, ScalarField


class RandomMatrixBuilder:
    rank: int | None = None
    num_rows: int | None = None
    num_cols: int | None = None
    dist: Callable[[], Any] | None = None
    field: ScalarField = INTEGER
    max_attempts: int = 1000

    @classmethod
    def new(cls, **kwargs) -> "RandomMatrixBuilder":
        builder = cls()
        for key, value in kwargs.items():
            setattr(builder, key, value)
        return builder

    def with_size(self, num_rows: int, num_cols: int) -> "RandomMatrixBuilder":
        self.num_rows = num_rows
        self.num_cols = num_cols
        return self

    def with_rank(self, rank: int) -> "RandomMatrixBuilder":
        self.rank = rank
        return self

    def with_dist(self, dist: Callable[[], Any] | None) -> "RandomMatrixBuilder":
        self.dist = dist
        return self

    def with_field(self, field: ScalarField) -> "RandomMatrixBuilder":
        self.field = field
        return self

    def is_square(self) -> bool:
        return self.num_rows == self.num_cols

    def assert_requirements(self) -> None:
        assert (
            self.num_rows is not None and self.num_cols is not None
        ), "Matrix size must be set."
        if self.rank is not None:
            assert 0 < self.rank <= min(
                self.num_rows, self.num_cols
            ), "Rank must be positive and cannot exceed min(num_rows, num_cols)."

    def build(self) -> Matrix:
        self.assert_requirements()
        if self.rank is not None:
            if self.rank == self.num_rows and self.is_square():
                return self.build_full_rank()
            return self.build_rank()
        return self.build_random()

    def _draw(self, rows: int, cols: int) -> Matrix:
        dist = self.dist or (lambda: random.randint(-5, 5))
        return Matrix([[dist() for _ in range(cols)] for _ in range(rows)], self.field)

    def _draw_regular(self, size: int) -> Matrix:
        for _ in range(self.max_attempts):
            val = self._draw(size, size)
            if not self.field.is_zero(determinant(val)):
                return val
        raise RuntimeError(
            f"No regular {size}x{size} matrix found in {self.max_attempts} draws"
        )

    def build_random(self) -> Matrix:
        return self._draw(self.num_rows, self.num_cols)

    def build_full_rank(self) -> Matrix:
        return self._draw_regular(self.num_rows)

    def build_rank(self) -> Matrix:
        # A (rows x rank) and B (rank x cols) each carry a regular leading
        # rank x rank block, so A * B has exactly the requested rank.
        rows, cols, rank = self.num_rows, self.num_cols, self.rank
        top = self._draw_regular(rank)
        rest = self._draw(rows - rank, rank)
        A = Matrix(top.items + rest.items, self.field, cols=rank)
        left = self._draw_regular(rank)
        B = left.augment(self._draw(rank, cols - rank))
        return A * B


def raw_gen_rand_matrix(
    rows: int, cols: int, dist: Callable[[], Any] | None = None
) -> Matrix:
    return (
        RandomMatrixBuilder.new().with_size(rows, cols).with_dist(dist).build_random()
    )


def gen_regular_matrix(
    N: int, dist: Callable[[], Any] | None = None, field: ScalarField = INTEGER
) -> Matrix:
    return (
        RandomMatrixBuilder.new()
        .with_size(N, N)
        .with_dist(dist)
        .with_field(field)
        .build_full_rank()
    )


def gen_matrix_with_rank(
    rows: int, cols: int, rank: int | None = None, dist: Callable[[], Any] | None = None
) -> Matrix:
    return (
        RandomMatrixBuilder.new()
        .with_size(rows, cols)
        .with_rank(rank or min(rows, cols))
        .with_dist(dist)
        .build_rank()
    )
