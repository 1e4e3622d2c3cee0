"""Least-squares, polynomial, trigonometric and Bezier curve fitting."""

from collections.abc import Sequence

import numpy as np

from .combinatorics import combinations

__all__ = [
    "bernstein_poly",
    "fit_bezier",
    "fit_linear",
    "fit_polynomial",
    "fit_trigonometric",
    "least_squares",
]


def _points(points: Sequence[Sequence[float]]) -> np.ndarray:
    try:
        data = np.asarray(points, dtype=float)
    except ValueError as exc:
        raise ValueError("points must be a rectangular table") from exc
    if data.ndim != 2 or data.shape[1] < 2:
        raise ValueError("points need at least 2 columns (x, y)")
    if data.shape[0] == 0:
        raise ValueError("points must not be empty")
    return data


def least_squares(a, b) -> list[float]:
    """Solve the overdetermined system ``a x = b`` in the least-squares sense.

    Uses the normal equations ``a.T a x = a.T b``. ``b`` may be a flat vector
    or a single column. Raises ``ValueError`` on mismatched shapes or when the
    columns of ``a`` are linearly dependent.
    """
    matrix = np.asarray(a, dtype=float)
    rhs = np.asarray(b, dtype=float)
    if rhs.ndim == 2 and rhs.shape[1] == 1:
        rhs = rhs[:, 0]
    if matrix.ndim != 2 or rhs.ndim != 1:
        raise ValueError("a must be a matrix and b a vector")
    if matrix.shape[0] != rhs.shape[0]:
        raise ValueError(
            f"a has {matrix.shape[0]} rows but b has {rhs.shape[0]} entries"
        )
    try:
        solution = np.linalg.solve(matrix.T @ matrix, matrix.T @ rhs)
    except np.linalg.LinAlgError as exc:
        raise ValueError("normal equations are singular") from exc
    return solution.tolist()


def fit_linear(points: Sequence[Sequence[float]]) -> tuple[float, float]:
    """Fit ``y = slope * x + intercept`` and return ``(slope, intercept)``."""
    data = _points(points)
    x, y = data[:, 0], data[:, 1]
    design = np.column_stack([x, np.ones_like(x)])
    slope, intercept = least_squares(design, y)
    return slope, intercept


def fit_polynomial(
    points: Sequence[Sequence[float]], degree: int
) -> tuple[list[float], float, float]:
    """Fit a polynomial of the given degree to (x, y) points.

    Returns ``(coefficients, rms, max_error)`` where ``coefficients[k]`` goes
    with ``x**k``, ``rms`` is the square root of the summed squared residuals
    and ``max_error`` the largest absolute residual. The degree must satisfy
    ``0 <= degree <= len(points) - 2``.
    """
    data = _points(points)
    count = data.shape[0]
    if degree < 0 or degree > count - 2:
        raise ValueError(f"degree {degree} is out of range for {count} points")
    x, y = data[:, 0], data[:, 1]
    design = np.vander(x, degree + 1, increasing=True)
    coefficients = least_squares(design, y)
    residuals = design @ np.asarray(coefficients) - y
    rms = float(np.sqrt(np.sum(residuals * residuals)))
    largest = float(np.max(np.abs(residuals)))
    return coefficients, rms, largest


def fit_trigonometric(
    points: Sequence[Sequence[float]], order: int
) -> list[list[float]]:
    """Fit a trigonometric polynomial of the given order by Fourier sums.

    Returns ``order + 1`` rows ``[a_j, b_j]`` with ``b_0 = 0``, for
    ``T(x) = a_0 / 2 + sum(a_j cos(j x) + b_j sin(j x))``. The sums run over
    every point but the first and are scaled by ``2 / len(points)``; the
    order must be below half the number of points.
    """
    data = _points(points)
    count = data.shape[0]
    if order >= count / 2.0:
        raise ValueError(f"order {order} must be below half of {count} points")
    x, y = data[1:, 0], data[1:, 1]
    scale = 2.0 / count
    rows = [[scale * float(np.sum(y)), 0.0]]
    for j in range(1, order + 1):
        rows.append(
            [
                scale * float(np.sum(y * np.cos(j * x))),
                scale * float(np.sum(y * np.sin(j * x))),
            ]
        )
    return rows


def bernstein_poly(i: int, n: int) -> list[float]:
    """Return ascending coefficients of ``C(n, i) t**i (1 - t)**(n - i)``."""
    if n < 0 or not 0 <= i <= n:
        raise ValueError(f"need 0 <= i <= n (got i={i}, n={n})")
    scale = combinations(n, i)
    coefficients = [0.0] * (n + 1)
    for k in range(n - i + 1):
        coefficients[i + k] = float(scale * (-1) ** k * combinations(n - i, k))
    return coefficients


def fit_bezier(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return power-basis coefficients of the Bezier curve through control points.

    Row ``k`` holds ``[cx_k, cy_k]`` so that ``x(t) = sum(cx_k t**k)`` and
    ``y(t) = sum(cy_k t**k)`` for ``0 <= t <= 1``.
    """
    data = _points(points)
    degree = data.shape[0] - 1
    basis = np.array([bernstein_poly(i, degree) for i in range(degree + 1)])
    return (basis.T @ data[:, :2]).tolist()