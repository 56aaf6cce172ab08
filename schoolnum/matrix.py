"""Dense matrices of floats with the usual linear-algebra operations."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

_EQ_STEP = 1e-7


class MatrixError(Exception):
    """Base class for matrix errors."""


class IncorrectMatrixError(MatrixError):
    """Raised when a matrix has dimensions unfit for the operation."""


class CalculationError(MatrixError):
    """Raised when matrices are incompatible or the result is undefined."""


def _cut(data: list[list[float]], row: int, column: int) -> list[list[float]]:
    return [
        [value for j, value in enumerate(line) if j != column]
        for i, line in enumerate(data)
        if i != row
    ]


def _det(data: list[list[float]]) -> float:
    size = len(data)
    if size >= 3:
        return sum(
            (-1) ** j * value * _det(_cut(data, 0, j)) for j, value in enumerate(data[0])
        )
    if size == 2:
        return data[0][0] * data[1][1] - data[0][1] * data[1][0]
    return data[0][0]


def _quantize(value: float) -> int:
    return int(value / _EQ_STEP)


class Matrix:
    """A rows x columns matrix; a zero dimension makes an empty 0 x 0 matrix."""

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int, columns: int) -> None:
        if rows == 0 or columns == 0:
            rows = columns = 0
        elif rows < 0 or columns < 0:
            raise IncorrectMatrixError(f"invalid dimensions {rows}x{columns}")
        self._rows = rows
        self._columns = columns
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise IncorrectMatrixError("rows differ in length")
        matrix = cls(len(data), width)
        if not matrix.is_empty:
            matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def is_empty(self) -> bool:
        return self._rows == 0 or self._columns == 0

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        return self._data[row][column]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = key
        self._data[row][column] = float(value)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def to_lists(self) -> list[list[float]]:
        """Return a copy of the elements as nested lists."""
        return [list(row) for row in self._data]

    def _same_shape(self, other: "Matrix") -> bool:
        return self._rows == other._rows and self._columns == other._columns

    def eq(self, other: "Matrix") -> bool:
        """Compare element-wise to seven decimal places; empty matrices compare equal."""
        if self.is_empty or other.is_empty:
            return True
        if not self._same_shape(other):
            return False
        return all(
            _quantize(a) == _quantize(b)
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def _elementwise(
        self, other: "Matrix", operation: Callable[[float, float], float]
    ) -> "Matrix":
        if not self._same_shape(other):
            raise CalculationError("matrix dimensions differ")
        if self.is_empty:
            raise IncorrectMatrixError("matrix is empty")
        return Matrix.from_rows(
            [operation(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )

    def sum(self, other: "Matrix") -> "Matrix":
        """Element-wise sum."""
        return self._elementwise(other, lambda a, b: a + b)

    def sub(self, other: "Matrix") -> "Matrix":
        """Element-wise difference."""
        return self._elementwise(other, lambda a, b: a - b)

    def mult_number(self, number: float) -> "Matrix":
        """Multiply every element by a number."""
        if self.is_empty:
            raise IncorrectMatrixError("matrix is empty")
        return Matrix.from_rows([value * number for value in row] for row in self._data)

    def mult_matrix(self, other: "Matrix") -> "Matrix":
        """Matrix product self x other."""
        if self._columns != other._rows:
            raise CalculationError("columns of the left matrix differ from rows of the right")
        if self.is_empty or other.is_empty:
            raise IncorrectMatrixError("matrix is empty")
        columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._data
        )

    def transpose(self) -> "Matrix":
        """Swap rows and columns."""
        if self.is_empty:
            raise IncorrectMatrixError("matrix is empty")
        return Matrix.from_rows(zip(*self._data))

    def minor(self, row: int, column: int) -> "Matrix":
        """The matrix left after removing one row and one column."""
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError("row or column out of range")
        return Matrix.from_rows(_cut(self._data, row, column))

    def calc_complements(self) -> "Matrix":
        """Matrix of algebraic complements (cofactors)."""
        if self._rows != self._columns or self._rows == 1:
            raise IncorrectMatrixError("matrix must be square and larger than 1x1")
        return Matrix.from_rows(
            [self._cofactor(i, j) for j in range(self._columns)] for i in range(self._rows)
        )

    def _cofactor(self, row: int, column: int) -> float:
        minor_det = _det(_cut(self._data, row, column))
        return -minor_det if (row + column) % 2 and minor_det else minor_det

    def determinant(self) -> float:
        """Determinant by expansion along the first row."""
        if self._rows != self._columns:
            raise IncorrectMatrixError("matrix is not square")
        if self.is_empty:
            raise IncorrectMatrixError("matrix is empty")
        return _det(self._data)

    def inverse(self) -> "Matrix":
        """Transposed matrix of complements (the adjugate) of a non-singular matrix."""
        if self._rows != self._columns:
            raise IncorrectMatrixError("matrix is not square")
        if self.determinant() == 0:
            raise CalculationError("matrix is singular")
        return self.calc_complements().transpose()


def _as_sequence(values: Sequence[float]) -> list[float]:
    return [float(value) for value in values]