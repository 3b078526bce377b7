"""Dense matrices of floats with element-wise and matrix arithmetic."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable

__all__ = [
    "MatrixError",
    "IncorrectMatrixError",
    "CalculationError",
    "Matrix",
    "is_finite",
]

_PRECISION = 1e7


class MatrixError(Exception):
    """Base class for matrix errors."""


class IncorrectMatrixError(MatrixError):
    """The operand is not a well-formed matrix."""


class CalculationError(MatrixError):
    """The operation cannot be carried out on these operands."""


def is_finite(value: float) -> bool:
    """Return True if *value* is neither infinite nor NaN."""
    return math.isfinite(value)


def _require_matrix(value: object) -> "Matrix":
    if not isinstance(value, Matrix):
        raise IncorrectMatrixError(f"expected a Matrix, got {type(value).__name__}")
    return value


def _same_value(a: float, b: float) -> bool:
    if math.isfinite(a) and math.isfinite(b):
        return round(a * _PRECISION) == round(b * _PRECISION)
    return a == b


class Matrix:
    """A rectangular matrix of floats, at least 1x1."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise IncorrectMatrixError(
                f"matrix dimensions must be positive, got {rows}x{columns}"
            )
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, data: Iterable[Iterable[float]]) -> "Matrix":
        """Build a matrix from an iterable of equally long rows."""
        rows = [[float(value) for value in row] for row in data]
        if not rows or not rows[0]:
            raise IncorrectMatrixError("matrix must have at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise IncorrectMatrixError("all rows must have the same length")
        matrix = cls(len(rows), width)
        matrix._data = rows
        return matrix

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def columns(self) -> int:
        return len(self._data[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def tolist(self) -> list[list[float]]:
        """Return the elements as a fresh list of row lists."""
        return [list(row) for row in self._data]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self._data[row][column]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = index
        self._data[row][column] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            _same_value(a, b)
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.tolist()!r})"

    def _elementwise(self, other: object, op) -> "Matrix":
        other = _require_matrix(other)
        if self.shape != other.shape:
            raise CalculationError(
                f"shapes differ: {self.shape} and {other.shape}"
            )
        result = []
        for row_a, row_b in zip(self._data, other._data):
            new_row = []
            for a, b in zip(row_a, row_b):
                value = op(a, b)
                if not (is_finite(a) and is_finite(b) and is_finite(value)):
                    raise CalculationError("matrix holds a non-finite value")
                new_row.append(value)
            result.append(new_row)
        return Matrix.from_rows(result)

    def sum(self, other: "Matrix") -> "Matrix":
        """Element-wise sum of two matrices of the same shape."""
        return self._elementwise(other, lambda a, b: a + b)

    def sub(self, other: "Matrix") -> "Matrix":
        """Element-wise difference of two matrices of the same shape."""
        return self._elementwise(other, lambda a, b: a - b)

    def mul_number(self, number: float) -> "Matrix":
        """Multiply every element by *number*."""
        return Matrix.from_rows([value * number for value in row] for row in self._data)

    def mul_matrix(self, other: "Matrix") -> "Matrix":
        """Matrix product; the column count must equal the other's row count."""
        other = _require_matrix(other)
        if self.columns != other.rows:
            raise CalculationError(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        other_columns = list(zip(*other._data))
        return Matrix.from_rows(
            [
                sum((a * b for a, b in zip(row, column)), 0.0)
                for column in other_columns
            ]
            for row in self._data
        )

    def transpose(self) -> "Matrix":
        """Return the transposed matrix."""
        if not all(is_finite(value) for row in self._data for value in row):
            raise CalculationError("matrix holds a non-finite value")
        return Matrix.from_rows(zip(*self._data))

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, number: object) -> "Matrix":
        if isinstance(number, bool) or not isinstance(number, Real):
            return NotImplemented
        return self.mul_number(float(number))

    def __rmul__(self, number: object) -> "Matrix":
        return self.__mul__(number)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul_matrix(other)