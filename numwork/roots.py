"""Root finding by interval bisection."""

from collections.abc import Callable

__all__ = ["bisection"]


def bisection(
    fn: Callable[[float], float],
    a: float,
    b: float,
    max_steps: int,
    tol: float,
) -> float:
    """Find a root of ``fn`` on ``[a, b]`` by repeated halving.

    The search stops once ``abs(fn(x)) < tol``. Raises ``ValueError`` when
    ``fn(a)`` and ``fn(b)`` have the same strict sign. Raises ``RuntimeError``
    when the step limit runs out or the bracket cannot be narrowed.
    """
    fa, fb = fn(a), fn(b)
    if (fa > 0 and fb > 0) or (fa < 0 and fb < 0):
        raise ValueError(f"no sign change of the function on [{a}, {b}]")

    for _ in range(max_steps):
        mid = (a + b) / 2
        fm = fn(mid)
        if abs(fm) < tol:
            return mid
        fa, fb = fn(a), fn(b)
        if fm < 0 and fa < 0:
            a = mid
        elif fm > 0 and fa < 0:
            b = mid
        elif fm < 0 and fb < 0:
            b = mid
        elif fm > 0 and fb < 0:
            a = mid
        else:
            raise RuntimeError(f"bisection cannot narrow the bracket at x = {mid}")
    raise RuntimeError(f"bisection did not converge within {max_steps} steps")