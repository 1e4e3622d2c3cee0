[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numwork"
version = "0.1.0"
description = "Classic numerical methods: combinatorics, sorting, linear algebra, root finding, fitting, integration, interpolation and cubic splines."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "numerical-methods",
    "interpolation",
    "integration",
    "spline",
    "least-squares",
    "sorting",
    "root-finding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["numwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
