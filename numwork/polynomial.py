"""Derivatives of polynomials given by ascending coefficients."""

from collections.abc import Sequence

__all__ = ["derivative_poly"]


def derivative_poly(coefficients: Sequence[float], order: int) -> list[float]:
    """Return the ``order``-th derivative of a polynomial.

    ``coefficients[k]`` is the coefficient of ``x**k``; the result uses the
    same layout and has ``len(coefficients) - order`` entries. Differentiating
    exactly as many times as there are coefficients gives ``[0.0]``.
    """
    if order < 0:
        raise ValueError(f"derivative order must be non-negative ({order})")
    size = len(coefficients)
    if order > size:
        raise ValueError(
            f"derivative order {order} exceeds the polynomial's {size} coefficients"
        )
    if order == size:
        return [0.0]

    result = [float(c) for c in coefficients]
    for _ in range(order):
        result = [power * c for power, c in enumerate(result[1:], start=1)]
    return result