"""Counts of parts and interior rings of geometries."""

from __future__ import annotations

from typing import Sequence

from planargeom.geometry import (
    Geometry,
    GeometryCollection,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
)
from planargeom.vertex import Vertex


def num_geometries(geometry: Geometry) -> int:
    """Number of parts of a collection; 1 for a non-empty single geometry, else 0."""
    match geometry:
        case MultiPoint() | MultiLineString() | MultiPolygon() | GeometryCollection():
            return len(geometry)
        case _:
            return 0 if geometry.is_empty() else 1


def polygon2d_num_interior_rings(rings: Sequence[Sequence[Vertex]]) -> int:
    """Number of holes of a polygon given as its rings."""
    return max(len(rings) - 1, 0)


def num_interior_rings(geometry: Geometry) -> int | None:
    """Number of holes of a polygon, or None for any other geometry."""
    if not isinstance(geometry, Polygon):
        return None
    return polygon2d_num_interior_rings(geometry.rings)