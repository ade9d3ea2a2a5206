"""Point constructors, vertex accessors and quadkeys."""

from __future__ import annotations

import math
from typing import Sequence

from planargeom.geometry import Geometry, LineString, Point
from planargeom.vertex import Vertex

_MAX_LATITUDE = 85.05112878
_MIN_LEVEL = 1
_MAX_LEVEL = 23


def make_point(x: float, y: float) -> Point:
    """A point geometry at (x, y)."""
    return Point(Vertex(x, y))


def point_2d(x: float, y: float) -> Vertex:
    """A bare two-dimensional position."""
    return Vertex(x, y)


def point_3d(x: float, y: float, z: float) -> tuple[float, float, float]:
    """A bare three-dimensional position as an (x, y, z) tuple."""
    return (x, y, z)


def point_4d(x: float, y: float, z: float, m: float) -> tuple[float, float, float, float]:
    """A bare position with a measure as an (x, y, z, m) tuple."""
    return (x, y, z, m)


def linestring2d_point_n(vertices: Sequence[Vertex], index: int) -> Vertex | None:
    """The vertex at a 1-based index, counting from the end when negative.

    Returns None for an empty line, an index of zero or an index out of range.
    """
    count = len(vertices)
    if count == 0 or index == 0 or index < -count or index > count:
        return None
    return vertices[index if index < 0 else index - 1]


def point_n(geometry: Geometry, index: int) -> Point | None:
    """The n-th vertex of a line string as a point, or None when there is none."""
    if not isinstance(geometry, LineString):
        return None
    vertex = linestring2d_point_n(geometry.vertices, index)
    if vertex is None:
        return None
    return make_point(vertex.x, vertex.y)


def linestring2d_start_point(vertices: Sequence[Vertex]) -> Vertex | None:
    """The first vertex of a line, or None if the line is empty."""
    if not vertices:
        return None
    return vertices[0]


def start_point(geometry: Geometry) -> Point | None:
    """The first vertex of a line string as a point, or None when there is none."""
    if not isinstance(geometry, LineString):
        return None
    vertex = linestring2d_start_point(geometry.vertices)
    if vertex is None:
        return None
    return make_point(vertex.x, vertex.y)


def _check_level(level: int) -> None:
    if level < _MIN_LEVEL or level > _MAX_LEVEL:
        raise ValueError(
            f"quadkey level must be between {_MIN_LEVEL} and {_MAX_LEVEL}"
        )


def _quadkey(lon: float, lat: float, level: int) -> str:
    lat = max(-_MAX_LATITUDE, min(_MAX_LATITUDE, lat))
    lon = max(-180.0, min(180.0, lon))

    scale = 1 << level
    lat_rad = lat * math.pi / 180.0
    tile_x = int((lon + 180.0) / 360.0 * scale)
    tile_y = int(
        (1.0 - math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad)) / math.pi)
        / 2.0
        * scale
    )

    digits = []
    for bit in range(level - 1, -1, -1):
        mask = 1 << bit
        digit = (1 if tile_x & mask else 0) + (2 if tile_y & mask else 0)
        digits.append(str(digit))
    return "".join(digits)


def quadkey(lon: float, lat: float, level: int) -> str:
    """The web-mercator tile quadkey of a position at the given zoom level."""
    _check_level(level)
    return _quadkey(lon, lat, level)


def geometry_quadkey(geometry: Geometry, level: int) -> str:
    """The quadkey of a non-empty point geometry."""
    if not isinstance(geometry, Point):
        raise ValueError("quadkeys are only supported for POINT geometries")
    if geometry.is_empty():
        raise ValueError("quadkeys are not supported for empty geometries")
    vertex = geometry.vertex()
    _check_level(level)
    return _quadkey(vertex.x, vertex.y, level)