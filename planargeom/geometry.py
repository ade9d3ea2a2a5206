"""Geometry model with well-known-text rendering."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Iterator, Sequence

from planargeom.vertex import Vertex, path_length, ring_area


def format_coord(value: float) -> str:
    """Render a coordinate in fixed notation with at most 15 decimals."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = f"{value:.15f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_xy(x: float, y: float) -> str:
    """Render an x/y pair separated by a space."""
    return f"{format_coord(x)} {format_coord(y)}"


def _vertices_text(vertices: Sequence[Vertex]) -> str:
    return ", ".join(format_xy(v.x, v.y) for v in vertices)


def _rings_text(rings: Sequence[Sequence[Vertex]]) -> str:
    return ", ".join(f"({_vertices_text(ring)})" for ring in rings)


class GeometryType(IntEnum):
    """Kinds of geometry."""

    POINT = 0
    LINESTRING = 1
    POLYGON = 2
    MULTIPOINT = 3
    MULTILINESTRING = 4
    MULTIPOLYGON = 5
    GEOMETRYCOLLECTION = 6


class Geometry(ABC):
    """Base of all geometries; str() gives well-known text."""

    geometry_type: ClassVar[GeometryType]
    _dimension: ClassVar[int] = 0
    _collection: ClassVar[bool] = False

    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the geometry has no parts."""

    def dimension(self) -> int:
        """Topological dimension: 0 for points, 1 for lines, 2 for areas."""
        return self._dimension

    def is_collection(self) -> bool:
        """Whether the geometry is a multi-part type."""
        return self._collection

    def __str__(self) -> str:
        return self._wkt()

    @abstractmethod
    def _wkt(self) -> str:
        """Well-known text of the geometry."""


@dataclass
class Point(Geometry):
    """A single position, or an empty point."""

    coordinate: Vertex | None = None

    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    def is_empty(self) -> bool:
        return self.coordinate is None

    def vertex(self) -> Vertex:
        """The point's position."""
        if self.coordinate is None:
            raise ValueError("an empty point has no vertex")
        return self.coordinate

    def _wkt(self) -> str:
        vert = self.coordinate
        # A point with two NaN coordinates is how WKB spells an empty point.
        if vert is None or (math.isnan(vert.x) and math.isnan(vert.y)):
            return "POINT EMPTY"
        return f"POINT ({format_xy(vert.x, vert.y)})"


@dataclass
class LineString(Geometry):
    """A path through a sequence of vertices."""

    vertices: list[Vertex] = field(default_factory=list)

    geometry_type: ClassVar[GeometryType] = GeometryType.LINESTRING
    _dimension: ClassVar[int] = 1

    def is_empty(self) -> bool:
        return not self.vertices

    def length(self) -> float:
        """Length of the path."""
        return path_length(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def _wkt(self) -> str:
        if not self.vertices:
            return "LINESTRING EMPTY"
        return f"LINESTRING ({_vertices_text(self.vertices)})"


@dataclass
class Polygon(Geometry):
    """A shell ring followed by zero or more hole rings."""

    rings: list[list[Vertex]] = field(default_factory=list)

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON
    _dimension: ClassVar[int] = 2

    def is_empty(self) -> bool:
        return not self.rings

    def area(self) -> float:
        """Shell area minus the area of the holes."""
        if not self.rings:
            return 0.0
        shell, *holes = self.rings
        area = ring_area(shell)
        for hole in holes:
            area -= ring_area(hole)
        return abs(area)

    def perimeter(self) -> float:
        """Length of the shell ring."""
        if not self.rings:
            return 0.0
        return path_length(self.rings[0])

    def __len__(self) -> int:
        return len(self.rings)

    def _wkt(self) -> str:
        if not any(self.rings):
            return "POLYGON EMPTY"
        return f"POLYGON ({_rings_text(self.rings)})"


@dataclass
class MultiPoint(Geometry):
    """A collection of points."""

    points: list[Point] = field(default_factory=list)

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT
    _collection: ClassVar[bool] = True

    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def _wkt(self) -> str:
        if not self.points:
            return "MULTIPOINT EMPTY"
        parts = (
            "EMPTY" if point.is_empty() else format_xy(point.vertex().x, point.vertex().y)
            for point in self.points
        )
        return f"MULTIPOINT ({', '.join(parts)})"


@dataclass
class MultiLineString(Geometry):
    """A collection of line strings."""

    lines: list[LineString] = field(default_factory=list)

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING
    _dimension: ClassVar[int] = 1
    _collection: ClassVar[bool] = True

    def is_empty(self) -> bool:
        return not self.lines

    def length(self) -> float:
        """Sum of the lengths of the lines."""
        return sum((line.length() for line in self.lines), 0.0)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> LineString:
        return self.lines[index]

    def _wkt(self) -> str:
        if not self.lines:
            return "MULTILINESTRING EMPTY"
        return f"MULTILINESTRING ({_rings_text([line.vertices for line in self.lines])})"


@dataclass
class MultiPolygon(Geometry):
    """A collection of polygons."""

    polygons: list[Polygon] = field(default_factory=list)

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON
    _dimension: ClassVar[int] = 2
    _collection: ClassVar[bool] = True

    def is_empty(self) -> bool:
        return not self.polygons

    def area(self) -> float:
        """Sum of the areas of the polygons."""
        return sum((polygon.area() for polygon in self.polygons), 0.0)

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> Polygon:
        return self.polygons[index]

    def _wkt(self) -> str:
        if not self.polygons:
            return "MULTIPOLYGON EMPTY"
        parts = (f"({_rings_text(polygon.rings)})" for polygon in self.polygons)
        return f"MULTIPOLYGON ({', '.join(parts)})"


@dataclass
class GeometryCollection(Geometry):
    """A heterogeneous collection of geometries."""

    geometries: list[Geometry] = field(default_factory=list)

    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION
    _collection: ClassVar[bool] = True

    def is_empty(self) -> bool:
        return not self.geometries

    def dimension(self) -> int:
        return max((geom.dimension() for geom in self.geometries), default=0)

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __getitem__(self, index: int) -> Geometry:
        return self.geometries[index]

    def _wkt(self) -> str:
        if not self.geometries:
            return "GEOMETRYCOLLECTION EMPTY"
        return f"GEOMETRYCOLLECTION ({', '.join(str(g) for g in self.geometries)})"


def create_box(xmin: float, ymin: float, xmax: float, ymax: float) -> Polygon:
    """A closed rectangular polygon spanning the given bounds."""
    shell = [
        Vertex(xmin, ymin),
        Vertex(xmin, ymax),
        Vertex(xmax, ymax),
        Vertex(xmax, ymin),
        Vertex(xmin, ymin),
    ]
    return Polygon([shell])