"""Vertex counts and perimeters of geometries."""

from __future__ import annotations

from typing import Sequence

from planargeom.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from planargeom.vertex import Box, Vertex, path_length


def num_points(geometry: Geometry) -> int:
    """Number of vertices in a geometry; empty points count as none."""
    match geometry:
        case Point():
            return 0 if geometry.is_empty() else 1
        case LineString():
            return len(geometry)
        case Polygon():
            return polygon2d_num_points(geometry.rings)
        case MultiPoint():
            return sum(1 for point in geometry if not point.is_empty())
        case MultiLineString():
            return sum(len(line) for line in geometry)
        case MultiPolygon():
            return sum(polygon2d_num_points(polygon.rings) for polygon in geometry)
        case GeometryCollection():
            return sum(num_points(part) for part in geometry)
        case _:
            raise TypeError(f"unsupported geometry type: {type(geometry).__name__}")


def polygon2d_num_points(rings: Sequence[Sequence[Vertex]]) -> int:
    """Number of vertices over all rings of a polygon."""
    return sum(len(ring) for ring in rings)


def polygon2d_perimeter(rings: Sequence[Sequence[Vertex]]) -> float:
    """Summed length of all rings of a polygon, holes included."""
    return sum((path_length(ring) for ring in rings), 0.0)


def perimeter(geometry: Geometry) -> float:
    """Perimeter of the areal parts of a geometry; zero for points and lines."""
    match geometry:
        case Polygon():
            return polygon2d_perimeter(geometry.rings)
        case MultiPolygon():
            return sum((polygon2d_perimeter(p.rings) for p in geometry), 0.0)
        case GeometryCollection():
            return sum((perimeter(part) for part in geometry), 0.0)
        case _:
            return 0.0


def box_perimeter(box: Box) -> float:
    """Perimeter of an axis-aligned box."""
    return 2 * (box.maxx - box.minx + box.maxy - box.miny)