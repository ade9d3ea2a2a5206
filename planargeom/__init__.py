"""Planar 2D geometries with text output, binary serialization and spatial measures."""

__version__ = "0.1.0"

__all__ = [
    "vertex",
    "geometry",
    "serialize",
    "measures",
    "counts",
    "accessors",
    "extent",
    "lines",
]