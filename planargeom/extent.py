"""Coordinate accessors and extents of points, boxes, lines and geometries.

The accessors take a bare ``Vertex``, a ``Box``, a ``Geometry`` or the
serialized bytes of a geometry. For geometries, the extent comes from the
serialized bounding box. That box is stored as float32 values rounded
outwards, so the extent of a line or polygon may be slightly larger than its
exact coordinates.
"""

from __future__ import annotations

import sys
from typing import Sequence, Union

from planargeom.geometry import Geometry, GeometryType
from planargeom.serialize import read_header, serialize, try_get_bounding_box
from planargeom.vertex import Box, Vertex

GeometryInput = Union[Geometry, bytes, bytearray, memoryview]


def _serialized(geometry: GeometryInput) -> bytes:
    if isinstance(geometry, (bytes, bytearray, memoryview)):
        return bytes(geometry)
    if isinstance(geometry, Geometry):
        return serialize(geometry)
    raise TypeError(f"unsupported input: {type(geometry).__name__}")


def _point_ordinate(geometry: Vertex | GeometryInput, axis: int) -> float | None:
    if isinstance(geometry, Vertex):
        return geometry.x if axis == 0 else geometry.y
    data = _serialized(geometry)
    if read_header(data).geometry_type is not GeometryType.POINT:
        raise ValueError("ST_X/ST_Y only supports POINT geometries")
    box = try_get_bounding_box(data)
    if box is None:
        return None
    # A point's bounding box collapses onto the point itself.
    return box.minx if axis == 0 else box.miny


def _extent(geometry: Vertex | Box | GeometryInput) -> Box | None:
    if isinstance(geometry, Vertex):
        return Box(geometry.x, geometry.y, geometry.x, geometry.y)
    if isinstance(geometry, Box):
        return geometry
    return try_get_bounding_box(_serialized(geometry))


def x(geometry: Vertex | GeometryInput) -> float | None:
    """The x coordinate of a point; None for an empty point."""
    return _point_ordinate(geometry, 0)


def y(geometry: Vertex | GeometryInput) -> float | None:
    """The y coordinate of a point; None for an empty point."""
    return _point_ordinate(geometry, 1)


def xmin(geometry: Vertex | Box | GeometryInput) -> float | None:
    """The smallest x of the extent, or None when there is no extent."""
    box = _extent(geometry)
    return None if box is None else box.minx


def xmax(geometry: Vertex | Box | GeometryInput) -> float | None:
    """The largest x of the extent, or None when there is no extent."""
    box = _extent(geometry)
    return None if box is None else box.maxx


def ymin(geometry: Vertex | Box | GeometryInput) -> float | None:
    """The smallest y of the extent, or None when there is no extent."""
    box = _extent(geometry)
    return None if box is None else box.miny


def ymax(geometry: Vertex | Box | GeometryInput) -> float | None:
    """The largest y of the extent, or None when there is no extent."""
    box = _extent(geometry)
    return None if box is None else box.maxy


def _start_box() -> Box:
    top = sys.float_info.max
    return Box(top, top, -top, -top)


def linestring2d_extent(vertices: Sequence[Vertex]) -> Box | None:
    """The exact extent of a line's vertices, or None for an empty line."""
    if not vertices:
        return None
    box = _start_box()
    for vertex in vertices:
        box.extend(vertex)
    return box


def polygon2d_extent(rings: Sequence[Sequence[Vertex]]) -> Box | None:
    """The extent of a polygon's shell, ignoring the closing vertex.

    Returns None for a polygon without rings or with an empty shell.
    """
    if not rings or not rings[0]:
        return None
    box = _start_box()
    for vertex in rings[0][:-1]:
        box.extend(vertex)
    return box