import math

import pytest

from numwork.fitting import (
    bernstein_poly,
    fit_bezier,
    fit_linear,
    fit_polynomial,
    fit_trigonometric,
    least_squares,
)

XY47 = [
    (-1.0, 10.0),
    (0.0, 9.0),
    (1.0, 7.0),
    (2.0, 5.0),
    (3.0, 4.0),
    (4.0, 3.0),
    (5.0, 0.0),
    (6.0, -1.0),
]

XY49 = [(2.0, 2.0), (1.0, 1.5), (3.5, 0.0), (4.0, 1.0)]

A33 = [
    (1.0, 10.0),
    (3.0, 5.0),
    (4.0, 4.0),
    (5.0, 2.0),
    (6.0, 1.0),
    (7.0, 1.0),
    (8.0, 2.0),
]

XY48 = [
    (k * math.pi / 6.0 - math.pi, (k * math.pi / 6.0 - math.pi) / 2.0)
    for k in range(1, 13)
]

A32 = [
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 0.0, 1.0],
    [-1.0, 1.0, 0.0],
    [0.0, -1.0, 1.0],
    [-1.0, 0.0, 1.0],
]
B32 = [1.0, 2.0, 3.0, 1.0, 2.0, 1.0]


def test_least_squares_example():
    assert least_squares(A32, B32) == pytest.approx([1.25, 1.75, 3.0])


def test_least_squares_column_vector():
    column = [[value] for value in B32]
    assert least_squares(A32, column) == pytest.approx([1.25, 1.75, 3.0])


def test_least_squares_row_mismatch_raises():
    with pytest.raises(ValueError):
        least_squares(A32, B32[:-1])


def test_least_squares_dependent_columns_raise():
    with pytest.raises(ValueError):
        least_squares([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]], [1.0, 2.0, 3.0])


def test_fit_linear_example():
    slope, intercept = fit_linear(XY47)
    assert slope == pytest.approx(-1.6071429, abs=1e-6)
    assert intercept == pytest.approx(8.6428571, abs=1e-6)


def test_fit_linear_recovers_exact_line():
    points = [(x, 2.0 * x + 1.0) for x in (-2.0, 0.0, 1.0, 3.0)]
    slope, intercept = fit_linear(points)
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(1.0)


def test_fit_linear_needs_two_columns():
    with pytest.raises(ValueError):
        fit_linear([(1.0,), (2.0,)])


def test_fit_polynomial_example():
    coefficients, rms, largest = fit_polynomial(A33, 2)
    assert coefficients == pytest.approx([13.4451, -3.5850, 0.2639], abs=1e-3)
    assert 0.0 < rms
    assert largest <= rms


def test_fit_polynomial_exact_quadratic():
    points = [(x, 1.0 - 2.0 * x + 0.5 * x * x) for x in range(6)]
    coefficients, rms, largest = fit_polynomial(points, 2)
    assert coefficients == pytest.approx([1.0, -2.0, 0.5])
    assert rms == pytest.approx(0.0, abs=1e-9)
    assert largest == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("degree", [-1, 6])
def test_fit_polynomial_bad_degree_raises(degree):
    with pytest.raises(ValueError):
        fit_polynomial(A33, degree)


def test_fit_trigonometric_shape():
    rows = fit_trigonometric(XY48, 5)
    assert len(rows) == 6
    assert all(len(row) == 2 for row in rows)
    assert rows[0][1] == 0.0


def test_fit_trigonometric_order_too_large_raises():
    with pytest.raises(ValueError):
        fit_trigonometric(XY48, 6)


def test_fit_trigonometric_recovers_sine():
    points = [(2.0 * math.pi * k / 12.0, math.sin(2.0 * math.pi * k / 12.0)) for k in range(12)]
    rows = fit_trigonometric(points, 5)
    assert rows[1][1] == pytest.approx(1.0, abs=1e-12)
    others = [value for j, row in enumerate(rows) for value in row if (j, value) != (1, rows[1][1])]
    assert others == pytest.approx([0.0] * len(others), abs=1e-12)


def test_bernstein_partition_of_unity():
    n = 5
    total = [sum(column) for column in zip(*(bernstein_poly(i, n) for i in range(n + 1)))]
    assert total == pytest.approx([1.0] + [0.0] * n)


def test_bernstein_lowest_power_is_i():
    coefficients = bernstein_poly(2, 4)
    assert coefficients[:2] == [0.0, 0.0]
    assert coefficients[2] == 6.0


def test_bernstein_invalid_index_raises():
    with pytest.raises(ValueError):
        bernstein_poly(4, 3)


def test_fit_bezier_example():
    rows = fit_bezier(XY49)
    assert [row[0] for row in rows] == pytest.approx([2.0, -3.0, 10.5, -5.5])
    assert [row[1] for row in rows] == pytest.approx([2.0, -1.5, -3.0, 3.5])


def test_fit_bezier_endpoints():
    rows = fit_bezier(XY49)
    assert rows[0] == pytest.approx(list(XY49[0]))
    end = [sum(row[0] for row in rows), sum(row[1] for row in rows)]
    assert end == pytest.approx(list(XY49[-1]))


def test_fit_bezier_needs_two_columns():
    with pytest.raises(ValueError):
        fit_bezier([(1.0,), (2.0,)])