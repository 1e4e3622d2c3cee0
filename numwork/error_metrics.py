"""Maximum, mean and root-mean-square errors between fitted and data values."""

from collections.abc import Sequence

import numpy as np

__all__ = ["max_error", "mean_error", "rms_error"]


def _residuals(pairs: Sequence[Sequence[float]]) -> np.ndarray:
    """Return y - f for rows of (f(x_k), y_k)."""
    try:
        data = np.asarray(pairs, dtype=float)
    except ValueError as exc:
        raise ValueError("pairs must be a rectangular table") from exc
    if data.ndim != 2 or data.shape[1] < 2:
        raise ValueError("pairs need at least 2 columns")
    if data.shape[0] == 0:
        raise ValueError("pairs must not be empty")
    return data[:, 1] - data[:, 0]


def max_error(pairs: Sequence[Sequence[float]]) -> float:
    """Return max |f(x_k) - y_k|."""
    return float(np.max(np.abs(_residuals(pairs))))


def mean_error(pairs: Sequence[Sequence[float]]) -> float:
    """Return the mean of |f(x_k) - y_k|."""
    return float(np.mean(np.abs(_residuals(pairs))))


def rms_error(pairs: Sequence[Sequence[float]]) -> float:
    """Return sqrt(mean((f(x_k) - y_k)**2))."""
    residuals = _residuals(pairs)
    return float(np.sqrt(np.mean(residuals * residuals)))