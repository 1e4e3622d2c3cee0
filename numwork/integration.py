"""Numerical integration: Newton-Cotes, Gauss-Legendre and Romberg rules."""

from collections.abc import Callable

__all__ = [
    "newton_cotes",
    "composite_newton_cotes",
    "halving_newton_cotes",
    "gauss_legendre",
    "romberg",
]

Function = Callable[[float], float]

# Closed Newton-Cotes weights (numerators) and their common divisor, by order n.
_NEWTON_COTES: dict[int, tuple[tuple[float, ...], float]] = {
    1: ((1.0, 1.0), 2.0),
    2: ((1.0, 4.0, 1.0), 6.0),
    3: ((1.0, 3.0, 3.0, 1.0), 8.0),
    4: ((7.0, 32.0, 12.0, 32.0, 7.0), 90.0),
    5: ((19.0, 75.0, 50.0, 50.0, 75.0, 19.0), 288.0),
    6: ((41.0, 216.0, 27.0, 272.0, 27.0, 216.0, 41.0), 840.0),
    7: ((751.0, 3577.0, 1323.0, 2989.0, 2989.0, 1323.0, 3577.0, 751.0), 17280.0),
    8: (
        (989.0, 5888.0, -928.0, 10496.0, -4540.0, 10496.0, -928.0, 5888.0, 989.0),
        28350.0,
    ),
}

# Gauss-Legendre nodes and weights on [-1, 1], by number of points.
_GAUSS_LEGENDRE: dict[int, tuple[tuple[float, ...], tuple[float, ...]]] = {
    1: ((0.0,), (2.0,)),
    2: ((-0.5773502692, 0.5773502692), (1.0, 1.0)),
    3: (
        (-0.7745966692, 0.0, 0.7745966692),
        (0.555555555555556, 0.888888888888889, 0.555555555555556),
    ),
    4: (
        (-0.8611363116, -0.3399810436, 0.3399810436, 0.8611363116),
        (0.3478548451, 0.6521451549, 0.6521451549, 0.3478548451),
    ),
    5: (
        (-0.9061798459, -0.5384693101, 0.0, 0.5384693101, 0.9061798459),
        (0.2369268851, 0.4786286705, 0.568888889, 0.4786286705, 0.2369268851),
    ),
    6: (
        (-0.9324695142, -0.6612093865, -0.2386191861,
         0.2386191861, 0.6612093865, 0.9324695142),
        (0.1713244924, 0.3607615730, 0.4679139346,
         0.4679139346, 0.3607615730, 0.1713244924),
    ),
    7: (
        (-0.9491079123, -0.7415311856, -0.4058451514, 0.0,
         0.4058451514, 0.7415311856, 0.9491079123),
        (0.1294849662, 0.2797053915, 0.3818300505, 0.4179591837,
         0.3818300505, 0.2797053915, 0.1294849662),
    ),
    8: (
        (-0.9602898566, -0.7966664774, -0.5255324099, -0.1834346425,
         0.1834346425, 0.5255324099, 0.7966664774, 0.9602898566),
        (0.1012285363, 0.2223810345, 0.3137066459, 0.3626837834,
         0.3626837834, 0.3137066459, 0.2223810345, 0.1012285363),
    ),
}


def _check_order(n: int, name: str) -> None:
    if not 1 <= n <= 8:
        raise ValueError(f"{name}: order must be between 1 and 8 ({n})")


def newton_cotes(fn: Function, a: float, b: float, n: int) -> float:
    """Integrate ``fn`` over ``[a, b]`` with the closed Newton-Cotes rule of order n."""
    _check_order(n, "newton_cotes")
    if a == b:
        return 0.0
    weights, divisor = _NEWTON_COTES[n]
    total = sum(
        weight * fn(a + (b - a) * i / n) for i, weight in enumerate(weights)
    )
    return total * (b - a) / divisor


def _composite(fn: Function, a: float, b: float, n: int, intervals: int) -> float:
    width = (b - a) / intervals
    return sum(
        newton_cotes(fn, a + width * (i - 1), a + width * i, n)
        for i in range(1, intervals + 1)
    )


def composite_newton_cotes(
    fn: Function, a: float, b: float, n: int, intervals: int
) -> float:
    """Apply the order-n Newton-Cotes rule on ``intervals`` equal sub-intervals."""
    _check_order(n, "composite_newton_cotes")
    if a == b:
        return 0.0
    if intervals < 1:
        raise ValueError(
            f"composite_newton_cotes: need at least one interval ({intervals})"
        )
    if intervals == 1:
        return newton_cotes(fn, a, b, n)
    return _composite(fn, a, b, n, intervals)


def halving_newton_cotes(
    fn: Function, a: float, b: float, tol: float, n: int, max_iter: int
) -> float:
    """Composite Newton-Cotes with sub-intervals halved until two results agree.

    The first estimate (one interval) is compared with zero. Raises
    ``RuntimeError`` if ``max_iter`` halvings do not reach ``tol``.
    """
    _check_order(n, "halving_newton_cotes")
    if a == b:
        return 0.0
    previous = 0.0
    intervals = 1
    for _ in range(max_iter):
        current = _composite(fn, a, b, n, intervals)
        if abs(current - previous) < tol:
            return current
        intervals *= 2
        previous = current
    raise RuntimeError(
        f"halving_newton_cotes did not converge within {max_iter} iterations"
    )


def gauss_legendre(fn: Function, a: float, b: float, n: int) -> float:
    """Integrate ``fn`` over ``[a, b]`` with the n-point Gauss-Legendre rule."""
    _check_order(n, "gauss_legendre")
    nodes, weights = _GAUSS_LEGENDRE[n]
    half = (b - a) / 2.0
    mid = (a + b) / 2.0
    return half * sum(w * fn(mid + half * x) for x, w in zip(nodes, weights))


def romberg(fn: Function, a: float, b: float, tol: float, max_iter: int) -> float:
    """Integrate ``fn`` over ``[a, b]`` by Romberg extrapolation.

    Trapezoid estimates are refined into Simpson, Cotes and Romberg sequences;
    the result is returned once two consecutive Romberg values differ by less
    than ``tol``. Raises ``RuntimeError`` when ``max_iter`` steps are not enough.
    """
    length = b - a
    trapezoid = [length * (fn(a) + fn(b)) / 2.0]
    simpson: list[float] = []
    cotes: list[float] = []
    rombergs: list[float] = []
    for k in range(1, max_iter + 3):
        pieces = 2 ** (k - 1)
        step = length / (2.0 * pieces)
        midpoints = sum(fn(a + (2.0 * j - 1.0) * step) for j in range(1, pieces + 1))
        trapezoid.append(trapezoid[-1] / 2.0 + midpoints * step)
        simpson.append(trapezoid[-1] + (trapezoid[-1] - trapezoid[-2]) / 3.0)
        if len(simpson) >= 2:
            cotes.append(simpson[-1] + (simpson[-1] - simpson[-2]) / 15.0)
        if len(cotes) >= 2:
            rombergs.append(cotes[-1] + (cotes[-1] - cotes[-2]) / 63.0)
        if len(rombergs) >= 2 and abs(rombergs[-1] - rombergs[-2]) < tol:
            return rombergs[-1]
    raise RuntimeError(f"romberg did not converge within {max_iter} iterations")