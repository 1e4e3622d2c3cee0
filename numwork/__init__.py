"""Classic numerical methods: combinatorics, sorting, linear algebra, root finding, fitting, integration, interpolation and cubic splines."""

__version__ = "0.1.0"

__all__ = [
    "combinatorics",
    "sorting",
    "linalg",
    "roots",
    "polynomial",
    "error_metrics",
    "fitting",
    "integration",
    "interpolation",
    "spline_slopes",
    "spline_moments",
    "newton_interp",
]