"""Cubic splines expressed through the first derivatives (slopes) at the nodes."""

from collections.abc import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

__all__ = ["spline_slopes_clamped", "spline_slopes_natural"]


def _table(points: Sequence[Sequence[float]], name: str, least: int) -> np.ndarray:
    try:
        data = np.asarray(points, dtype=float)
    except ValueError as exc:
        raise ValueError(f"{name}: points must be a rectangular table") from exc
    if data.ndim != 2 or data.shape[1] != 3:
        raise ValueError(f"{name}: points need exactly 3 columns (x, y, boundary)")
    if data.shape[0] < least:
        raise ValueError(f"{name}: at least {least} points are needed")
    if np.any(np.diff(data[:, 0]) <= 0.0):
        raise ValueError(f"{name}: x values must be strictly increasing")
    return data


def _interior_rows(x: np.ndarray, y: np.ndarray):
    """Return (lambda_i, mu_i, f_i) for the interior nodes i = 1 .. n-1."""
    h = np.diff(x)
    slopes = np.diff(y) / h
    left, right = h[:-1], h[1:]
    lam = right / (left + right)
    mu = 1.0 - lam
    f = 3.0 * (mu * slopes[1:] + lam * slopes[:-1])
    return lam, mu, f


def _solve(matrix: np.ndarray, rhs: np.ndarray, name: str) -> np.ndarray:
    try:
        return np.linalg.solve(matrix, rhs)
    except np.linalg.LinAlgError as exc:
        raise ValueError(f"{name}: the slope equations are singular") from exc


def _piece(x0: float, x1: float, y0: float, y1: float, m0: float, m1: float) -> list[float]:
    """Ascending power coefficients of the cubic Hermite piece on [x0, x1]."""
    h = x1 - x0
    sq0 = P.polymul([-x1, 1.0], [-x1, 1.0])  # (x - x1)^2
    sq1 = P.polymul([-x0, 1.0], [-x0, 1.0])  # (x - x0)^2
    terms = (
        P.polymul(sq0, [h - 2.0 * x0, 2.0]) * (y0 / h**3),
        P.polymul(sq1, [h + 2.0 * x1, -2.0]) * (y1 / h**3),
        P.polymul(sq0, [-x0, 1.0]) * (m0 / h**2),
        P.polymul(sq1, [-x1, 1.0]) * (m1 / h**2),
    )
    total = np.zeros(4)
    for term in terms:
        total[: len(term)] += term
    return total.tolist()


def _pieces(x: np.ndarray, y: np.ndarray, m: np.ndarray) -> list[list[float]]:
    return [
        _piece(x[i - 1], x[i], y[i - 1], y[i], m[i - 1], m[i])
        for i in range(1, len(x))
    ]


def spline_slopes_clamped(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Cubic spline with first-derivative boundary conditions.

    Each row of ``points`` is ``(x, y, y')``; only ``y'`` of the first and last
    rows is used. At least 4 points are needed. Returns one row per interval
    ``[x_{i-1}, x_i]`` holding the ascending coefficients ``[c0, c1, c2, c3]``.
    """
    name = "spline_slopes_clamped"
    data = _table(points, name, least=4)
    x, y = data[:, 0], data[:, 1]
    n = len(x) - 1
    m0, mn = data[0, 2], data[n, 2]

    lam, mu, f = _interior_rows(x, y)
    size = n - 1
    matrix = np.zeros((size, size))
    rhs = f.copy()
    for row in range(size):
        matrix[row, row] = 2.0
        if row > 0:
            matrix[row, row - 1] = lam[row]
        if row < size - 1:
            matrix[row, row + 1] = mu[row]
    rhs[0] -= lam[0] * m0
    rhs[-1] -= mu[-1] * mn

    interior = _solve(matrix, rhs, name)
    slopes = np.concatenate(([m0], interior, [mn]))
    return _pieces(x, y, slopes)


def spline_slopes_natural(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Cubic spline with second-derivative boundary conditions.

    Each row of ``points`` is ``(x, y, y'')``; only ``y''`` of the first and
    last rows is used. At least 2 points are needed. Returns one row per
    interval ``[x_{i-1}, x_i]`` holding the ascending coefficients
    ``[c0, c1, c2, c3]``.
    """
    name = "spline_slopes_natural"
    data = _table(points, name, least=2)
    x, y = data[:, 0], data[:, 1]
    n = len(x) - 1
    h_first, h_last = x[1] - x[0], x[n] - x[n - 1]

    matrix = np.zeros((n + 1, n + 1))
    rhs = np.zeros(n + 1)
    matrix[0, 0], matrix[0, 1] = 2.0, 1.0
    rhs[0] = 3.0 * (y[1] - y[0]) / h_first - h_first * data[0, 2] / 2.0
    if n > 1:
        lam, mu, f = _interior_rows(x, y)
        for i in range(1, n):
            matrix[i, i - 1] = lam[i - 1]
            matrix[i, i] = 2.0
            matrix[i, i + 1] = mu[i - 1]
            rhs[i] = f[i - 1]
    matrix[n, n - 1], matrix[n, n] = 1.0, 2.0
    rhs[n] = 3.0 * (y[n] - y[n - 1]) / h_last + h_last * data[n, 2] / 2.0

    slopes = _solve(matrix, rhs, name)
    return _pieces(x, y, slopes)