# matrixkit

Small, dependency-free matrices of floating-point numbers with element-wise
and matrix arithmetic, plus determinants, cofactor matrices and inverses.

## Installation

```
pip install .
```

## Building matrices

```python
from matrixkit.matrix import Matrix

a = Matrix(2, 3)                       # 2 x 3, filled with 0.0
b = Matrix.from_rows([[1, 2], [3, 4]]) # values are converted to float

b[0, 1] = 5.0
print(b[0, 1], b.rows, b.columns, b.shape, b.tolist())
```

A matrix needs at least one row and one column, and `from_rows` needs rows
of equal length; otherwise `IncorrectMatrixError` is raised. `tolist()`
returns a fresh copy of the rows. Matrices are mutable and not hashable.

## Arithmetic

```python
c = b.sum(b)            # or b + b
d = b.sub(b)            # or b - b
e = b.mul_number(2.0)   # or b * 2.0, or 2.0 * b
f = b.mul_matrix(b)     # or b @ b
t = b.transpose()
```

Each operation returns a new matrix and leaves its operands unchanged.

- `sum` and `sub` need two matrices of the same shape.
- `mul_matrix` needs the left matrix's column count to equal the right
  matrix's row count.
- A mismatch in shape raises `CalculationError`.
- `sum`, `sub` and `transpose` also raise `CalculationError` when an element
  (or, for `sum` and `sub`, a result) is infinite or NaN; `mul_number` and
  `mul_matrix` do not check for this.
- Passing something other than a `Matrix` to `sum`, `sub` or `mul_matrix`
  raises `IncorrectMatrixError`; the operators `+`, `-` and `@` return
  `NotImplemented` instead, so Python raises `TypeError`. `*` accepts real
  numbers but not `bool`.

Two matrices compare equal with `==` when they have the same shape and every
pair of finite elements agrees after rounding to seven decimal places
(non-finite elements must be exactly equal).

`is_finite(value)` reports whether a float is neither infinite nor NaN.

`IncorrectMatrixError` and `CalculationError` both derive from
`MatrixError`.

## Linear algebra

```python
from matrixkit.matrix import Matrix
from matrixkit.linalg import determinant, calc_complements, inverse, minor

m = Matrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])

determinant(m)          # -1.0
calc_complements(m)     # matrix of algebraic complements (cofactors)
inverse(m)              # [[1, -1, 1], [-38, 41, -34], [27, -29, 24]]
minor(m, 0, 0)          # m without its first row and first column
```

- `determinant` expands along the first row and needs a square matrix.
- `calc_complements` needs a square matrix of size 2 or more with only
  finite elements.
- `minor` needs a square matrix of size 2 or more and raises `IndexError`
  for a row or column out of range.
- `inverse` raises `CalculationError` when the matrix is not square or its
  determinant is zero; for a 1 x 1 matrix it returns the reciprocal of the
  single element.

Any of these given something other than a `Matrix` raises
`IncorrectMatrixError`.

## What it does not do

matrixkit is a library only: it has no command-line tool, and it does not
read or write matrices from files. Determinants use cofactor expansion, so
they grow slow quickly for large matrices.

## Running the tests

```
pip install .[test]
pytest
```