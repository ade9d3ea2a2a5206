[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planargeom"
version = "0.1.0"
description = "Planar 2D geometry model with WKT-style text output, a compact binary serialization and common spatial measures"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "gis", "wkt", "spatial", "polygon", "bounding-box", "quadkey"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planargeom"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
