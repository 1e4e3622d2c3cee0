"""Determinant and inverse by column-pivoted elimination, identity matrices."""

from collections.abc import Sequence

__all__ = ["determinant", "identity", "inverse"]

Matrix = list[list[float]]


def _square_copy(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [[float(value) for value in row] for row in matrix]
    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square and non-empty")
    return rows


def _pivot_row(rows: Matrix, column: int) -> int:
    return max(range(column, len(rows)), key=lambda r: abs(rows[r][column]))


def identity(n: int) -> Matrix:
    """Return the n x n identity matrix."""
    if n < 1:
        raise ValueError(f"identity order must be at least 1 ({n})")
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant using Gaussian elimination with column pivoting."""
    a = _square_copy(matrix)
    n = len(a)
    det = 1.0
    for i in range(n):
        p = _pivot_row(a, i)
        if a[p][i] == 0.0:
            return 0.0
        if p != i:
            a[i], a[p] = a[p], a[i]
            det = -det
        pivot = a[i]
        for row in a[i + 1 :]:
            factor = row[i] / pivot[i]
            for k in range(i, n):
                row[k] -= pivot[k] * factor
        det *= pivot[i]
    return det


def inverse(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse using Gauss-Jordan elimination with column pivoting."""
    a = _square_copy(matrix)
    n = len(a)
    b = identity(n)
    for i in range(n):
        p = _pivot_row(a, i)
        if a[p][i] == 0.0:
            raise ValueError("matrix is singular")
        if p != i:
            a[i], a[p] = a[p], a[i]
            b[i], b[p] = b[p], b[i]
        scale = a[i][i]
        a[i] = [value / scale for value in a[i]]
        b[i] = [value / scale for value in b[i]]
        for j in range(n):
            if j == i:
                continue
            factor = a[j][i]
            a[j] = [x - y * factor for x, y in zip(a[j], a[i])]
            b[j] = [x - y * factor for x, y in zip(b[j], b[i])]
    return b