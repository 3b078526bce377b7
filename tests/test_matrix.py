import math

import pytest

from matrixkit.matrix import (
    CalculationError,
    IncorrectMatrixError,
    Matrix,
    MatrixError,
    is_finite,
)


def filled(rows, columns, func):
    m = Matrix(rows, columns)
    for i in range(rows):
        for j in range(columns):
            m[i, j] = func(i, j)
    return m


def test_create_large():
    m = Matrix(10, 20)
    assert m.shape == (10, 20)
    assert m.rows == 10
    assert m.columns == 20
    assert all(v == 0.0 for row in m.tolist() for v in row)


def test_create_zero_size_fails():
    with pytest.raises(IncorrectMatrixError):
        Matrix(0, 0)


def test_create_negative_fails():
    with pytest.raises(IncorrectMatrixError):
        Matrix(3, -1)


def test_create_5x6():
    assert Matrix(5, 6).shape == (5, 6)


def test_errors_share_base():
    with pytest.raises(MatrixError):
        Matrix(0, 1)


def test_from_rows_roundtrip():
    data = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    assert Matrix.from_rows(data).tolist() == data


def test_from_rows_ragged():
    with pytest.raises(IncorrectMatrixError):
        Matrix.from_rows([[1, 2], [3]])


def test_from_rows_empty():
    with pytest.raises(IncorrectMatrixError):
        Matrix.from_rows([])


def test_tolist_is_copy():
    m = Matrix.from_rows([[1, 2]])
    data = m.tolist()
    data[0][0] = 99
    assert m[0, 0] == 1.0


def test_setitem_getitem():
    m = Matrix(2, 2)
    m[1, 0] = 7
    assert m[1, 0] == 7.0


def test_repr_roundtrip_text():
    assert repr(Matrix.from_rows([[1, 2]])) == "Matrix.from_rows([[1.0, 2.0]])"


def test_eq_matrix_equal():
    a = filled(3, 3, lambda i, j: i + j)
    b = filled(3, 3, lambda i, j: i + j)
    assert a == b


def test_eq_matrix_different_values():
    a = filled(3, 3, lambda i, j: i + j)
    b = filled(3, 3, lambda i, j: i + j + 1)
    assert not (a == b)


def test_eq_matrix_different_shape():
    a = filled(3, 3, lambda i, j: i + j)
    b = filled(4, 4, lambda i, j: i + j)
    assert not (a == b)


def test_eq_within_precision():
    a = Matrix.from_rows([[1.0]])
    b = Matrix.from_rows([[1.0 + 1e-9]])
    assert a == b
    c = Matrix.from_rows([[1.0 + 1e-6]])
    assert not (a == c)


def test_transpose_square():
    a = filled(3, 3, lambda i, j: i * 3 + j)
    expected = Matrix.from_rows([[0, 3, 6], [1, 4, 7], [2, 5, 8]])
    assert a.transpose() == expected


def test_transpose_rectangular():
    a = filled(2, 3, lambda i, j: i * 3 + j)
    expected = Matrix.from_rows([[0, 3], [1, 4], [2, 5]])
    result = a.transpose()
    assert result.shape == (3, 2)
    assert result == expected


def test_transpose_non_finite():
    a = Matrix.from_rows([[1, math.inf]])
    with pytest.raises(CalculationError):
        a.transpose()


def test_sum_ones():
    a = Matrix.from_rows([[1, 1], [1, 1]])
    b = Matrix.from_rows([[1, 1], [1, 1]])
    assert a.sum(b).tolist() == [[2.0, 2.0], [2.0, 2.0]]


def test_sum_shape_mismatch():
    a = Matrix.from_rows([[1, 1], [1, 1]])
    b = Matrix(2, 3)
    with pytest.raises(CalculationError):
        a.sum(b)


def test_sum_nan():
    a = Matrix.from_rows([[1, 1], [1, 1]])
    b = Matrix.from_rows([[1, 1], [1, math.nan]])
    with pytest.raises(CalculationError):
        a.sum(b)


def test_sum_not_a_matrix():
    with pytest.raises(IncorrectMatrixError):
        Matrix(1, 1).sum(None)


def test_sub_equal_gives_zero():
    a = filled(5, 6, lambda i, j: i + j + 1)
    b = filled(5, 6, lambda i, j: i + j + 1)
    assert a.sub(b) == Matrix(5, 6)


def test_sub_not_a_matrix():
    with pytest.raises(IncorrectMatrixError):
        Matrix(2, 2).sub(None)


def test_sub_shape_mismatch():
    a = filled(3, 3, lambda i, j: 12345 + i * 10 + j)
    b = filled(2, 3, lambda i, j: 12345 + i * 10 + j)
    with pytest.raises(CalculationError):
        a.sub(b)


def test_mult_number():
    a = filled(5, 6, lambda i, j: i + j + 1)
    expected = filled(5, 6, lambda i, j: (i + j + 1) * 2)
    assert a.mul_number(2) == expected


def test_mult_matrix():
    a = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
    b = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    expected = Matrix.from_rows([[9, 12, 15], [19, 26, 33], [29, 40, 51]])
    assert a.mul_matrix(b) == expected


def test_mult_matrix_mismatch():
    with pytest.raises(CalculationError):
        Matrix(2, 2).mul_matrix(Matrix(3, 3))


def test_mult_matrix_not_a_matrix():
    with pytest.raises(IncorrectMatrixError):
        Matrix(2, 2).mul_matrix(None)


def test_operators():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[4, 3], [2, 1]])
    assert (a + b).tolist() == [[5.0, 5.0], [5.0, 5.0]]
    assert (a - b).tolist() == [[-3.0, -1.0], [1.0, 3.0]]
    assert (a * 3).tolist() == [[3.0, 6.0], [9.0, 12.0]]
    assert (3 * a).tolist() == [[3.0, 6.0], [9.0, 12.0]]
    assert (a @ b).tolist() == [[8.0, 5.0], [20.0, 13.0]]


def test_operator_with_non_matrix():
    with pytest.raises(TypeError):
        Matrix(1, 1) + 1


def test_is_finite():
    assert is_finite(1.5) is True
    assert is_finite(math.inf) is False
    assert is_finite(math.nan) is False