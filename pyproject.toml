[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meccano"
version = "0.1.0"
description = "Integer diagonals of meccano strip frames and exact arithmetic on rationals, reduced surds and nested radicals."
requires-python = ">=3.10"
dependencies = []
keywords = ["meccano", "geometry", "algebraic numbers", "surds", "polygons", "number theory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
meccano = "meccano.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["meccano"]

[tool.pytest.ini_options]
addopts = "-ra"
