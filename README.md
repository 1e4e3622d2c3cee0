# numwork

A library of classic numerical methods written in Python with numpy.

## Modules

- **`numwork.combinatorics`**: `arrangements(n, m)`, `combinations(n, m)`,
  `factorial(n)`, `fibonacci(n)`.
- **`numwork.sorting`**: `bubble_sort`, `insert_sort`, `heap_sort` (any
  comparable values), `bucket_sort(values, bucket_size)` (integers, positive
  bucket size) and `counting_sort` (non-negative integers), plus `int_min` /
  `int_max`. Each sort returns a new list; empty input raises `ValueError`.
- **`numwork.linalg`**: `determinant` and `inverse` by column-pivoted
  elimination (a singular matrix has determinant `0.0`; `inverse` raises
  `ValueError` for it), and `identity(n)`.
- **`numwork.roots`**: `bisection(fn, a, b, max_steps, tol)`. Raises
  `ValueError` when `fn(a)` and `fn(b)` share a strict sign, and
  `RuntimeError` when it does not converge.
- **`numwork.polynomial`**: `derivative_poly(coefficients, order)`.
- **`numwork.error_metrics`**: `max_error`, `mean_error`, `rms_error` over
  rows of `(f(x_k), y_k)`.
- **`numwork.fitting`**: `least_squares(a, b)` (normal equations),
  `fit_linear` (returns `(slope, intercept)`), `fit_polynomial` (returns
  `(coefficients, rms, max_error)`), `fit_trigonometric` (rows `[a_j, b_j]`),
  `fit_bezier` and `bernstein_poly`.
- **`numwork.integration`**: `newton_cotes`, `composite_newton_cotes`,
  `halving_newton_cotes`, `gauss_legendre` (orders 1 to 8) and `romberg`.
  The iterative rules raise `RuntimeError` when they run out of iterations.
- **`numwork.interpolation`**: `lagrange`, `lagrange_coefficients`,
  `hermite`, `hermite_coefficients` (rows of `(x, y, y')`).
- **`numwork.newton_interp`**: `divided_difference`, `newton`,
  `newton_forward` (equally spaced nodes).
- **`numwork.spline_slopes`**: `spline_slopes_clamped`,
  `spline_slopes_natural`; **`numwork.spline_moments`**:
  `spline_moments_clamped`, `spline_moments_natural`. Each takes rows of
  `(x, y, boundary)` with strictly increasing `x`, uses the boundary value of
  the first and last rows only, and returns one row `[c0, c1, c2, c3]` per
  interval.

Polynomial coefficients are always ordered from the constant term upward.
Invalid input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from numwork.combinatorics import combinations
from numwork.integration import romberg
from numwork.roots import bisection
from numwork.sorting import heap_sort

combinations(5, 2)                                  # 10
heap_sort([5.0, 3.2, 1.8, 2.4, 0.1])                # [0.1, 1.8, 2.4, 3.2, 5.0]
bisection(lambda x: x**3 + 4 * x**2 - 10, 1.0, 2.0, 1000, 1e-6)  # ~1.36523
romberg(lambda x: 4 / (1 + x * x), 0.0, 1.0, 1e-6, 1000)         # ~3.14159
```

Interpolating through data points given as rows of `(x, y)`:

```python
from numwork.interpolation import lagrange

points = [(1.0, 0.367879441), (2.0, 0.135335283), (3.0, 0.049787068)]
lagrange(points, 2.1)
```

## What it does not do

`numwork` is a library only: it has no command-line program. It works on
in-memory Python sequences and does not read or write data files.