"""Cubic splines expressed through the second derivatives (moments) at the nodes."""

from collections.abc import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

__all__ = ["spline_moments_clamped", "spline_moments_natural"]


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
    """Return (mu_i, lambda_i, f_i) for the interior nodes i = 1 .. n-1."""
    h = np.diff(x)
    slopes = np.diff(y) / h
    left, right = h[:-1], h[1:]
    mu = left / (left + right)
    lam = 1.0 - mu
    f = 6.0 * (slopes[1:] - slopes[:-1]) / (left + right)
    return mu, lam, f


def _solve(matrix: np.ndarray, rhs: np.ndarray, name: str) -> np.ndarray:
    try:
        return np.linalg.solve(matrix, rhs)
    except np.linalg.LinAlgError as exc:
        raise ValueError(f"{name}: the moment equations are singular") from exc


def _piece(
    x0: float, x1: float, y0: float, y1: float, m0: float, m1: float
) -> list[float]:
    """Ascending power coefficients of the cubic piece on [x0, x1]."""
    h = x1 - x0
    towards_right = np.array([x1, -1.0])  # x1 - x
    from_left = np.array([-x0, 1.0])  # x - x0
    terms = (
        P.polypow(towards_right, 3) * (m0 / (6.0 * h)),
        P.polypow(from_left, 3) * (m1 / (6.0 * h)),
        towards_right * ((y0 - m0 * h * h / 6.0) / h),
        from_left * ((y1 - m1 * h * h / 6.0) / h),
    )
    total = np.zeros(4)
    for term in terms:
        total[: len(term)] += term
    return total.tolist()


def _pieces(x: np.ndarray, y: np.ndarray, moments: np.ndarray) -> list[list[float]]:
    return [
        _piece(x[i - 1], x[i], y[i - 1], y[i], moments[i - 1], moments[i])
        for i in range(1, len(x))
    ]


def spline_moments_clamped(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Cubic spline through moments with first-derivative boundary conditions.

    Each row of ``points`` is ``(x, y, y')``; only ``y'`` of the first and last
    rows is used. At least 2 points are needed. Returns one row per interval
    ``[x_{i-1}, x_i]`` holding the ascending coefficients ``[c0, c1, c2, c3]``.
    """
    name = "spline_moments_clamped"
    data = _table(points, name, least=2)
    x, y = data[:, 0], data[:, 1]
    n = len(x) - 1
    h_first, h_last = x[1] - x[0], x[n] - x[n - 1]

    matrix = np.zeros((n + 1, n + 1))
    rhs = np.zeros(n + 1)
    matrix[0, 0], matrix[0, 1] = 2.0, 1.0
    rhs[0] = 6.0 * ((y[1] - y[0]) / h_first - data[0, 2]) / h_first
    if n > 1:
        mu, lam, f = _interior_rows(x, y)
        for i in range(1, n):
            matrix[i, i - 1] = mu[i - 1]
            matrix[i, i] = 2.0
            matrix[i, i + 1] = lam[i - 1]
            rhs[i] = f[i - 1]
    matrix[n, n - 1], matrix[n, n] = 1.0, 2.0
    rhs[n] = 6.0 * (data[n, 2] - (y[n] - y[n - 1]) / h_last) / h_last

    moments = _solve(matrix, rhs, name)
    return _pieces(x, y, moments)


def spline_moments_natural(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Cubic spline through moments with second-derivative boundary conditions.

    Each row of ``points`` is ``(x, y, y'')``; only ``y''`` of the first and
    last rows is used. At least 4 points are needed. Returns one row per
    interval ``[x_{i-1}, x_i]`` holding the ascending coefficients
    ``[c0, c1, c2, c3]``.
    """
    name = "spline_moments_natural"
    data = _table(points, name, least=4)
    x, y = data[:, 0], data[:, 1]
    n = len(x) - 1
    m0, mn = data[0, 2], data[n, 2]

    mu, lam, f = _interior_rows(x, y)
    size = n - 1
    matrix = np.zeros((size, size))
    rhs = f.copy()
    for row in range(size):
        matrix[row, row] = 2.0
        if row > 0:
            matrix[row, row - 1] = mu[row]
        if row < size - 1:
            matrix[row, row + 1] = lam[row]
    rhs[0] -= mu[0] * m0
    rhs[-1] -= lam[-1] * mn

    interior = _solve(matrix, rhs, name)
    moments = np.concatenate(([m0], interior, [mn]))
    return _pieces(x, y, moments)