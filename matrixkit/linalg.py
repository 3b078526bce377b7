"""Determinants, cofactor matrices and inverses of square matrices."""

from __future__ import annotations

from matrixkit.matrix import (
    CalculationError,
    IncorrectMatrixError,
    Matrix,
    is_finite,
)

__all__ = ["minor", "determinant", "calc_complements", "inverse"]


def _require_matrix(value: object) -> Matrix:
    if not isinstance(value, Matrix):
        raise IncorrectMatrixError(f"expected a Matrix, got {type(value).__name__}")
    return value


def _drop(data: list[list[float]], skip_row: int, skip_column: int) -> list[list[float]]:
    return [
        [value for j, value in enumerate(row) if j != skip_column]
        for i, row in enumerate(data)
        if i != skip_row
    ]


def _det(data: list[list[float]]) -> float:
    if len(data) == 1:
        return data[0][0]
    total = 0.0
    sign = 1
    for column, value in enumerate(data[0]):
        total += sign * value * _det(_drop(data, 0, column))
        sign = -sign
    return total


def minor(matrix: Matrix, skip_row: int, skip_column: int) -> Matrix:
    """Return the square matrix left after removing one row and one column."""
    matrix = _require_matrix(matrix)
    size = matrix.rows
    if matrix.columns != size or size < 2:
        raise CalculationError("minor needs a square matrix of size 2 or more")
    if not (0 <= skip_row < size and 0 <= skip_column < size):
        raise IndexError("row or column out of range")
    return Matrix.from_rows(_drop(matrix.tolist(), skip_row, skip_column))


def determinant(matrix: Matrix) -> float:
    """Determinant by cofactor expansion along the first row."""
    matrix = _require_matrix(matrix)
    if matrix.rows != matrix.columns:
        raise CalculationError("determinant needs a square matrix")
    return float(_det(matrix.tolist()))


def calc_complements(matrix: Matrix) -> Matrix:
    """Return the matrix of algebraic complements (cofactors)."""
    matrix = _require_matrix(matrix)
    if matrix.rows != matrix.columns or matrix.columns <= 1:
        raise CalculationError("complements need a square matrix of size 2 or more")
    data = matrix.tolist()
    if not all(is_finite(value) for row in data for value in row):
        raise CalculationError("matrix holds a non-finite value")
    size = matrix.rows
    return Matrix.from_rows(
        [(-1.0) ** (i + j) * _det(_drop(data, i, j)) for j in range(size)]
        for i in range(size)
    )


def inverse(matrix: Matrix) -> Matrix:
    """Return the inverse matrix; raises CalculationError if it is singular."""
    matrix = _require_matrix(matrix)
    d = determinant(matrix)
    if d == 0:
        raise CalculationError("matrix is singular")
    if matrix.rows == 1:
        return Matrix.from_rows([[1.0 / matrix[0, 0]]])
    return calc_complements(matrix).transpose().mul_number(1 / d)