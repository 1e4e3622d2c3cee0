import math

import pytest

from numwork.interpolation import (
    hermite,
    hermite_coefficients,
    lagrange,
    lagrange_coefficients,
)

# 2.4x^3 + 1.5x^2 + 0.3x - 1.63 with its values and slopes
CUBIC_POINTS = [
    [-10.0, -2254.63, 690.3],
    [-4.0, -132.43, 103.5],
    [4.0, 177.17, 127.5],
    [10.0, 2551.37, 750.3],
]

EXP_POINTS = [
    [1.0, 0.367879441],
    [2.0, 0.135335283],
    [3.0, 0.049787068],
]


def _evaluate(coefficients, x):
    return sum(c * x**k for k, c in enumerate(coefficients))


def test_hermite_reproduces_cubic():
    assert hermite(CUBIC_POINTS, 2.4) == pytest.approx(40.9076, abs=1e-6)


@pytest.mark.parametrize("row", CUBIC_POINTS)
def test_hermite_matches_values_at_nodes(row):
    assert hermite(CUBIC_POINTS, row[0]) == pytest.approx(row[1], abs=1e-6)


def test_hermite_needs_three_columns():
    with pytest.raises(ValueError):
        hermite([[0.0, 1.0], [1.0, 2.0]], 0.5)


def test_hermite_rejects_duplicate_nodes():
    with pytest.raises(ValueError):
        hermite([[1.0, 1.0, 0.0], [1.0, 2.0, 0.0]], 0.5)


def test_hermite_coefficients_recover_cubic():
    coefficients = hermite_coefficients(CUBIC_POINTS)
    assert len(coefficients) == 8
    expected = [-1.63, 0.3, 1.5, 2.4, 0.0, 0.0, 0.0, 0.0]
    assert coefficients == pytest.approx(expected, abs=1e-6)


def test_hermite_coefficients_linear_data():
    coefficients = hermite_coefficients(
        [[0.0, 0.0, 1.0], [1.0, 1.0, 1.0], [2.0, 2.0, 1.0]]
    )
    assert coefficients == pytest.approx([0.0, 1.0, 0.0, 0.0, 0.0, 0.0], abs=1e-9)


@pytest.mark.parametrize("xq", [-7.0, 0.0, 2.4, 8.5])
def test_hermite_coefficients_agree_with_values(xq):
    coefficients = hermite_coefficients(CUBIC_POINTS)
    assert _evaluate(coefficients, xq) == pytest.approx(
        hermite(CUBIC_POINTS, xq), rel=1e-9, abs=1e-6
    )


def test_hermite_coefficients_needs_two_points():
    with pytest.raises(ValueError):
        hermite_coefficients([[0.0, 1.0, 0.0]])


def test_lagrange_coefficients_of_line():
    points = [[0.0, 1.0], [1.0, 2.0], [2.0, 3.0]]
    assert lagrange_coefficients(points) == pytest.approx([1.0, 1.0, 0.0], abs=1e-12)


def test_lagrange_near_exponential():
    value = lagrange(EXP_POINTS, 2.1)
    assert value == pytest.approx(math.exp(-2.1), abs=5e-3)


@pytest.mark.parametrize("row", EXP_POINTS)
def test_lagrange_passes_through_nodes(row):
    assert lagrange(EXP_POINTS, row[0]) == pytest.approx(row[1], abs=1e-12)


@pytest.mark.parametrize("xq", [0.5, 1.5, 2.1, 4.0])
def test_lagrange_coefficients_agree_with_values(xq):
    coefficients = lagrange_coefficients(EXP_POINTS)
    assert _evaluate(coefficients, xq) == pytest.approx(
        lagrange(EXP_POINTS, xq), abs=1e-12
    )


def test_lagrange_coefficients_needs_two_points():
    with pytest.raises(ValueError):
        lagrange_coefficients([[1.0, 2.0]])


def test_lagrange_needs_two_columns():
    with pytest.raises(ValueError):
        lagrange([[1.0], [2.0]], 1.5)