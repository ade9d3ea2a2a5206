"""Compact binary serialization of geometries with an optional bounding box.

Layout (little-endian):

* header (4 bytes): geometry type, property flags, 16-bit size hash
* padding (4 bytes)
* bounding box (16 bytes, four float32 values), present for non-empty
  geometries other than points
* body: for every geometry a type word and a count word, followed by
  coordinates as pairs of doubles. Polygons store all ring lengths first,
  padded to an 8-byte boundary, then the ring coordinates.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import ClassVar, Sequence

from planargeom.geometry import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from planargeom.vertex import Box, Vertex

_HEADER = struct.Struct("<BBH")
_U32 = struct.Struct("<I")
_XY = struct.Struct("<dd")
_BBOX = struct.Struct("<ffff")
_F32 = struct.Struct("<f")

_BBOX_FLAG = 0x01
_PADDING_SIZE = 4
_VERTEX_SIZE = _XY.size


class SerializationError(ValueError):
    """Raised when a geometry cannot be serialized or deserialized."""


@dataclass(frozen=True)
class GeometryHeader:
    """The four leading bytes of a serialized geometry."""

    geometry_type: GeometryType
    has_bbox: bool = False
    hash: int = 0

    SIZE: ClassVar[int] = _HEADER.size

    @classmethod
    def from_bytes(cls, data: bytes) -> GeometryHeader:
        """Decode a header from the start of a serialized geometry."""
        if len(data) < cls.SIZE:
            raise SerializationError("serialized geometry is too short for a header")
        type_code, properties, size_hash = _HEADER.unpack_from(data)
        try:
            geometry_type = GeometryType(type_code)
        except ValueError as exc:
            raise SerializationError(f"unknown geometry type {type_code}") from exc
        return cls(geometry_type, bool(properties & _BBOX_FLAG), size_hash)

    def to_bytes(self) -> bytes:
        """Encode the header."""
        properties = _BBOX_FLAG if self.has_bbox else 0
        return _HEADER.pack(int(self.geometry_type), properties, self.hash)


# ---------------------------------------------------------------------------
# float32 rounding
# ---------------------------------------------------------------------------


def _round_f32(value: float) -> float:
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _f32_bits(value: float) -> int:
    return _U32.unpack(_F32.pack(value))[0]


def _f32_from_bits(bits: int) -> float:
    return _F32.unpack(_U32.pack(bits))[0]


def _f32_next_down(value: float) -> float:
    if value == 0:
        return _f32_from_bits(0x80000001)
    bits = _f32_bits(value)
    return _f32_from_bits(bits - 1 if value > 0 else bits + 1)


def _f32_next_up(value: float) -> float:
    if value == 0:
        return _f32_from_bits(0x00000001)
    bits = _f32_bits(value)
    return _f32_from_bits(bits + 1 if value > 0 else bits - 1)


def double_to_float_down(value: float) -> float:
    """The largest float32 value not greater than value."""
    result = _round_f32(value)
    if result > value:
        result = _f32_next_down(result)
    return result


def double_to_float_up(value: float) -> float:
    """The smallest float32 value not less than value."""
    result = _round_f32(value)
    if result < value:
        result = _f32_next_up(result)
    return result


# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------


def serialized_size(geometry: Geometry) -> int:
    """Size in bytes of the body of a serialized geometry."""
    match geometry:
        case Point():
            return 8 + (0 if geometry.is_empty() else _VERTEX_SIZE)
        case LineString():
            return 8 + len(geometry.vertices) * _VERTEX_SIZE
        case Polygon():
            size = 8 + sum(4 + len(ring) * _VERTEX_SIZE for ring in geometry.rings)
            if len(geometry.rings) % 2 == 1:
                size += 4
            return size
        case MultiPoint() | MultiLineString() | MultiPolygon() | GeometryCollection():
            return 8 + sum(serialized_size(part) for part in geometry)
        case _:
            raise SerializationError(
                f"unsupported geometry for serialization: {type(geometry).__name__}"
            )


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _write_vertices(out: bytearray, vertices: Sequence[Vertex], box: Box | None) -> None:
    for vertex in vertices:
        if box is not None:
            box.extend(vertex)
        out += _XY.pack(vertex.x, vertex.y)


def _write_body(out: bytearray, geometry: Geometry, box: Box) -> None:
    match geometry:
        case Point():
            out += _U32.pack(GeometryType.POINT)
            if geometry.coordinate is None:
                out += _U32.pack(0)
            else:
                out += _U32.pack(1)
                _write_vertices(out, [geometry.coordinate], box)
        case LineString():
            out += _U32.pack(GeometryType.LINESTRING)
            out += _U32.pack(len(geometry.vertices))
            _write_vertices(out, geometry.vertices, box)
        case Polygon():
            out += _U32.pack(GeometryType.POLYGON)
            out += _U32.pack(len(geometry.rings))
            for ring in geometry.rings:
                out += _U32.pack(len(ring))
            if len(geometry.rings) % 2 == 1:
                out += _U32.pack(0)
            for index, ring in enumerate(geometry.rings):
                # Only the shell contributes to the bounding box.
                _write_vertices(out, ring, box if index == 0 else None)
        case MultiPoint() | MultiLineString() | MultiPolygon() | GeometryCollection():
            out += _U32.pack(geometry.geometry_type)
            out += _U32.pack(len(geometry))
            for part in geometry:
                _write_body(out, part, box)
        case _:
            raise SerializationError(
                f"unsupported geometry for serialization: {type(geometry).__name__}"
            )


def serialize(geometry: Geometry) -> bytes:
    """Serialize a geometry to its binary form."""
    if not isinstance(geometry, Geometry):
        raise SerializationError(
            f"unsupported geometry for serialization: {type(geometry).__name__}"
        )
    body = bytearray()
    box = Box()
    _write_body(body, geometry, box)

    size = len(body)
    size_hash = 0
    for shift in (0, 8, 16, 24):
        size_hash ^= (size >> shift) & 0xFF

    has_bbox = geometry.geometry_type is not GeometryType.POINT and not geometry.is_empty()
    header = GeometryHeader(geometry.geometry_type, has_bbox, size_hash)

    parts = [header.to_bytes(), _U32.pack(0)]
    if has_bbox:
        # Rounded outwards so that the float box still contains the geometry.
        parts.append(
            _BBOX.pack(
                double_to_float_down(box.minx),
                double_to_float_down(box.miny),
                double_to_float_up(box.maxx),
                double_to_float_up(box.maxy),
            )
        )
    parts.append(bytes(body))
    return b"".join(parts)


# ---------------------------------------------------------------------------
# Deserialization
# ---------------------------------------------------------------------------


class _Reader:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = data
        self.offset = offset

    def _unpack(self, fmt: struct.Struct, advance: bool = True) -> tuple:
        try:
            values = fmt.unpack_from(self._data, self.offset)
        except struct.error as exc:
            raise SerializationError("unexpected end of serialized geometry") from exc
        if advance:
            self.offset += fmt.size
        return values

    def u32(self) -> int:
        return self._unpack(_U32)[0]

    def peek_u32(self) -> int:
        return self._unpack(_U32, advance=False)[0]

    def vertex(self) -> Vertex:
        x, y = self._unpack(_XY)
        return Vertex(x, y)

    def vertices(self, count: int) -> list[Vertex]:
        return [self.vertex() for _ in range(count)]

    def skip(self, size: int) -> None:
        self.offset += size

    def geometry_type(self) -> GeometryType:
        code = self.peek_u32()
        try:
            return GeometryType(code)
        except ValueError as exc:
            raise SerializationError(
                f"unsupported geometry type for deserialization: {code}"
            ) from exc

    def expect(self, expected: GeometryType) -> None:
        found = self.u32()
        if found != expected:
            raise SerializationError(f"expected {expected.name}, found type {found}")


def _read_point(reader: _Reader) -> Point:
    reader.expect(GeometryType.POINT)
    count = reader.u32()
    if count == 0:
        return Point()
    if count != 1:
        raise SerializationError(f"a point holds at most one vertex, found {count}")
    return Point(reader.vertex())


def _read_linestring(reader: _Reader) -> LineString:
    reader.expect(GeometryType.LINESTRING)
    return LineString(reader.vertices(reader.u32()))


def _read_polygon(reader: _Reader) -> Polygon:
    reader.expect(GeometryType.POLYGON)
    num_rings = reader.u32()
    counts = [reader.u32() for _ in range(num_rings)]
    if num_rings % 2 == 1:
        reader.skip(_PADDING_SIZE)
    return Polygon([reader.vertices(count) for count in counts])


def _read_multipoint(reader: _Reader) -> MultiPoint:
    reader.expect(GeometryType.MULTIPOINT)
    return MultiPoint([_read_point(reader) for _ in range(reader.u32())])


def _read_multilinestring(reader: _Reader) -> MultiLineString:
    reader.expect(GeometryType.MULTILINESTRING)
    return MultiLineString([_read_linestring(reader) for _ in range(reader.u32())])


def _read_multipolygon(reader: _Reader) -> MultiPolygon:
    reader.expect(GeometryType.MULTIPOLYGON)
    return MultiPolygon([_read_polygon(reader) for _ in range(reader.u32())])


def _read_collection(reader: _Reader) -> GeometryCollection:
    reader.expect(GeometryType.GEOMETRYCOLLECTION)
    return GeometryCollection([_read_geometry(reader) for _ in range(reader.u32())])


_READERS = {
    GeometryType.POINT: _read_point,
    GeometryType.LINESTRING: _read_linestring,
    GeometryType.POLYGON: _read_polygon,
    GeometryType.MULTIPOINT: _read_multipoint,
    GeometryType.MULTILINESTRING: _read_multilinestring,
    GeometryType.MULTIPOLYGON: _read_multipolygon,
    GeometryType.GEOMETRYCOLLECTION: _read_collection,
}


def _read_geometry(reader: _Reader) -> Geometry:
    return _READERS[reader.geometry_type()](reader)


def read_header(data: bytes) -> GeometryHeader:
    """The header of a serialized geometry."""
    return GeometryHeader.from_bytes(data)


def deserialize(data: bytes) -> Geometry:
    """Rebuild a geometry from its binary form."""
    data = bytes(data)
    header = read_header(data)
    offset = GeometryHeader.SIZE + _PADDING_SIZE
    if header.has_bbox:
        offset += _BBOX.size
    return _read_geometry(_Reader(data, offset))


def try_get_bounding_box(data: bytes) -> Box | None:
    """The stored bounding box, the position of a point, or None if there is none."""
    data = bytes(data)
    header = read_header(data)
    reader = _Reader(data, GeometryHeader.SIZE + _PADDING_SIZE)
    if header.has_bbox:
        minx, miny, maxx, maxy = reader._unpack(_BBOX)
        return Box(minx, miny, maxx, maxy)
    if header.geometry_type is GeometryType.POINT:
        point = _read_point(reader)
        if point.coordinate is None:
            return None
        vertex = point.coordinate
        return Box(vertex.x, vertex.y, vertex.x, vertex.y)
    return None