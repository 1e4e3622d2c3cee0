"""Newton divided-difference and forward-difference interpolation."""

from collections.abc import Sequence
from math import prod

import numpy as np

from .combinatorics import combinations, factorial

__all__ = ["divided_difference", "newton", "newton_forward"]

_NODE_TOLERANCE = 1e-3


def _table(points: Sequence[Sequence[float]], name: str) -> np.ndarray:
    try:
        data = np.asarray(points, dtype=float)
    except ValueError as exc:
        raise ValueError(f"{name}: points must be a rectangular table") from exc
    if data.ndim != 2 or data.shape[1] < 2 or data.shape[0] == 0:
        raise ValueError(f"{name}: points must be a non-empty table of (x, y)")
    x = data[:, 0]
    if len(np.unique(x)) != len(x):
        raise ValueError(f"{name}: interpolation nodes must be distinct")
    return data


def _divided(x: np.ndarray, y: np.ndarray, k: int) -> float:
    nodes = x[: k + 1]
    return float(
        sum(
            yj / prod(xj - xi for i, xi in enumerate(nodes) if i != j)
            for j, (xj, yj) in enumerate(zip(nodes, y[: k + 1]))
        )
    )


def divided_difference(points: Sequence[Sequence[float]], k: int) -> float:
    """Return the divided difference f[x_0, ..., x_k] of the (x, y) points."""
    data = _table(points, "divided_difference")
    if not 0 <= k < data.shape[0]:
        raise ValueError(f"divided_difference: k={k} is out of range")
    return _divided(data[:, 0], data[:, 1], k)


def newton(points: Sequence[Sequence[float]], xq: float) -> float:
    """Evaluate at ``xq`` the full-degree Newton interpolating polynomial.

    Raises ``ValueError`` when ``xq`` lies within 1e-3 of a node.
    """
    data = _table(points, "newton")
    x, y = data[:, 0], data[:, 1]
    if np.any(np.abs(xq - x) < _NODE_TOLERANCE):
        raise ValueError(f"newton: xq={xq} is too close to a node")
    total = float(y[0])
    product = 1.0
    for k in range(1, len(x)):
        product *= xq - x[k - 1]
        total += _divided(x, y, k) * product
    return total


def _forward_difference(y: np.ndarray, k: int) -> float:
    return float(
        sum((-1) ** s * combinations(k, s) * y[k - s] for s in range(k + 1))
    )


def newton_forward(points: Sequence[Sequence[float]], xq: float) -> float:
    """Evaluate at ``xq`` the Newton forward-difference polynomial.

    The nodes must be equally spaced. If ``xq`` lies within 1e-3 of a node,
    that node's value is returned.
    """
    data = _table(points, "newton_forward")
    x, y = data[:, 0], data[:, 1]
    for xi, yi in zip(x, y):
        if abs(xq - xi) < _NODE_TOLERANCE:
            return float(yi)
    if len(x) < 2:
        raise ValueError("newton_forward: at least 2 points are needed")
    n = len(x) - 1
    h = x[n] - x[n - 1]
    if np.any(np.abs(np.diff(x) - h) >= _NODE_TOLERANCE):
        raise ValueError("newton_forward: nodes are not equally spaced")

    total = float(y[0])
    product = 1.0
    for k in range(1, n + 1):
        product *= xq - x[k - 1]
        total += _forward_difference(y, k) / (factorial(k) * h**k) * product
    return total