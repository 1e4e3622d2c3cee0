"""Full-degree Lagrange and Hermite interpolation: point values and coefficients."""

from collections.abc import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

__all__ = ["hermite", "hermite_coefficients", "lagrange", "lagrange_coefficients"]


def _table(
    points: Sequence[Sequence[float]], name: str, *, exact: int | None, least: int
) -> np.ndarray:
    try:
        data = np.asarray(points, dtype=float)
    except ValueError as exc:
        raise ValueError(f"{name}: points must be a rectangular table") from exc
    if data.ndim != 2 or data.shape[0] == 0:
        raise ValueError(f"{name}: points must be a non-empty table")
    if exact is not None and data.shape[1] != exact:
        raise ValueError(f"{name}: points need exactly {exact} columns (x, y, y')")
    if data.shape[1] < least:
        raise ValueError(f"{name}: points need at least {least} columns (x, y)")
    x = data[:, 0]
    if len(np.unique(x)) != len(x):
        raise ValueError(f"{name}: interpolation nodes must be distinct")
    return data


def _at_least_two(data: np.ndarray, name: str) -> None:
    if data.shape[0] < 2:
        raise ValueError(f"{name}: at least 2 points are needed")


def lagrange(points: Sequence[Sequence[float]], xq: float) -> float:
    """Evaluate at ``xq`` the degree-n Lagrange polynomial through n+1 (x, y) points."""
    data = _table(points, "lagrange", exact=None, least=2)
    x, y = data[:, 0], data[:, 1]
    total = 0.0
    for k, (xk, yk) in enumerate(zip(x, y)):
        others = np.delete(x, k)
        total += yk * float(np.prod((xq - others) / (xk - others)))
    return total


def lagrange_coefficients(points: Sequence[Sequence[float]]) -> list[float]:
    """Return ascending coefficients of the Lagrange polynomial through the points.

    ``n + 1`` points give ``n + 1`` coefficients; entry ``k`` goes with ``x**k``.
    """
    data = _table(points, "lagrange_coefficients", exact=None, least=2)
    _at_least_two(data, "lagrange_coefficients")
    x, y = data[:, 0], data[:, 1]
    result = np.zeros(len(x))
    for k, (xk, yk) in enumerate(zip(x, y)):
        others = np.delete(x, k)
        basis = P.polyfromroots(others) * (yk / np.prod(xk - others))
        result[: len(basis)] += basis
    return result.tolist()


def hermite(points: Sequence[Sequence[float]], xq: float) -> float:
    """Evaluate at ``xq`` the Hermite polynomial matching values and slopes.

    Each row of ``points`` is ``(x, y, y')``; n+1 rows give a polynomial of
    degree at most 2n+1.
    """
    data = _table(points, "hermite", exact=3, least=3)
    x = data[:, 0]
    total = 0.0
    for j, (xj, yj, mj) in enumerate(data):
        others = np.delete(x, j)
        basis = float(np.prod((xq - others) / (xj - others)))
        spread = float(np.sum(1.0 / (xj - others)))
        alpha = (1.0 - 2.0 * (xq - xj) * spread) * basis * basis
        beta = (xq - xj) * basis * basis
        total += alpha * yj + beta * mj
    return total


def hermite_coefficients(points: Sequence[Sequence[float]]) -> list[float]:
    """Return ascending coefficients of the Hermite interpolating polynomial.

    Each row of ``points`` is ``(x, y, y')``; n+1 rows give 2n+2 coefficients,
    entry ``k`` going with ``x**k``.
    """
    data = _table(points, "hermite_coefficients", exact=3, least=3)
    _at_least_two(data, "hermite_coefficients")
    x = data[:, 0]
    result = np.zeros(2 * len(x))
    for j, (xj, yj, mj) in enumerate(data):
        others = np.delete(x, j)
        basis = P.polyfromroots(others) / np.prod(xj - others)
        squared = P.polymul(basis, basis)
        spread = float(np.sum(1.0 / (xj - others)))
        alpha = P.polymul([1.0 + 2.0 * spread * xj, -2.0 * spread], squared)
        beta = P.polymul([-xj, 1.0], squared)
        result[: len(alpha)] += yj * alpha
        result[: len(beta)] += mj * beta
    return result.tolist()