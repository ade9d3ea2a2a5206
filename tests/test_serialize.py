import math
import struct

import pytest

from planargeom.geometry import (
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    create_box,
)
from planargeom.serialize import (
    GeometryHeader,
    SerializationError,
    deserialize,
    double_to_float_down,
    double_to_float_up,
    read_header,
    serialize,
    serialized_size,
    try_get_bounding_box,
)
from planargeom.vertex import Box, Vertex


def _line(*coords):
    return LineString([Vertex(x, y) for x, y in coords])


SHELL = [Vertex(0, 0), Vertex(0, 10), Vertex(10, 10), Vertex(10, 0), Vertex(0, 0)]
HOLE = [Vertex(2, 2), Vertex(2, 4), Vertex(4, 4), Vertex(2, 2)]

GEOMETRIES = [
    Point(Vertex(1.0, 2.0)),
    Point(),
    _line((0, 0), (1, 1), (2, 0.5)),
    LineString(),
    Polygon([SHELL]),
    Polygon([SHELL, HOLE]),
    Polygon(),
    MultiPoint([Point(Vertex(1, 2)), Point(), Point(Vertex(-3, 4))]),
    MultiPoint(),
    MultiLineString([_line((0, 0), (1, 1)), LineString(), _line((5, 5), (6, 7))]),
    MultiPolygon([Polygon([SHELL, HOLE]), create_box(20, 20, 30, 25)]),
    GeometryCollection(
        [
            Point(Vertex(1, 1)),
            _line((0, 0), (2, 2)),
            GeometryCollection([MultiPolygon([create_box(0, 0, 1, 1)])]),
        ]
    ),
    GeometryCollection(),
]


@pytest.mark.parametrize("geometry", GEOMETRIES, ids=lambda g: str(g)[:30])
def test_round_trip(geometry):
    restored = deserialize(serialize(geometry))
    assert restored == geometry
    assert str(restored) == str(geometry)


@pytest.mark.parametrize("geometry", GEOMETRIES, ids=lambda g: str(g)[:30])
def test_total_size_matches_body_size(geometry):
    data = serialize(geometry)
    bbox_size = 16 if read_header(data).has_bbox else 0
    assert len(data) == 8 + bbox_size + serialized_size(geometry)


@pytest.mark.parametrize("geometry", GEOMETRIES, ids=lambda g: str(g)[:30])
def test_serialized_length_is_double_aligned(geometry):
    assert len(serialize(geometry)) % 8 == 0


def test_point_wire_format():
    data = serialize(Point(Vertex(1.0, 2.0)))
    expected = (
        bytes([0, 0, 0x18, 0])
        + b"\x00" * 4
        + struct.pack("<II", 0, 1)
        + struct.pack("<dd", 1.0, 2.0)
    )
    assert data == expected


def test_point_body_size():
    assert serialized_size(Point(Vertex(1.0, 2.0))) == 24


def test_header_flags():
    line_header = read_header(serialize(_line((0, 0), (3, 4))))
    assert line_header.geometry_type is GeometryType.LINESTRING
    assert line_header.has_bbox is True

    point_header = read_header(serialize(Point(Vertex(3, 4))))
    assert point_header.geometry_type is GeometryType.POINT
    assert point_header.has_bbox is False

    empty_header = read_header(serialize(LineString()))
    assert empty_header.has_bbox is False


def test_header_round_trip():
    header = GeometryHeader(GeometryType.MULTIPOLYGON, True, 513)
    assert GeometryHeader.from_bytes(header.to_bytes()) == header
    assert len(header.to_bytes()) == GeometryHeader.SIZE


def test_header_rejects_short_data():
    with pytest.raises(SerializationError):
        GeometryHeader.from_bytes(b"\x00\x00")


def test_header_rejects_unknown_type():
    with pytest.raises(SerializationError):
        GeometryHeader.from_bytes(bytes([42, 0, 0, 0]))


def test_bounding_box_of_linestring():
    box = try_get_bounding_box(serialize(_line((0, 0), (3, 4), (1, -2))))
    assert box == Box(0.0, -2.0, 3.0, 4.0)


def test_bounding_box_uses_only_polygon_shell():
    shell = [Vertex(0, 0), Vertex(0, 5), Vertex(5, 5), Vertex(5, 0), Vertex(0, 0)]
    hole = [Vertex(-1, -1), Vertex(-1, 9), Vertex(9, 9), Vertex(-1, -1)]
    box = try_get_bounding_box(serialize(Polygon([shell, hole])))
    assert box == Box(0.0, 0.0, 5.0, 5.0)


def test_bounding_box_contains_inexact_coordinates():
    line = _line((0.1, 0.2), (0.3, 0.7))
    box = try_get_bounding_box(serialize(line))
    assert box.minx <= 0.1 and box.miny <= 0.2
    assert box.maxx >= 0.3 and box.maxy >= 0.7


def test_bounding_box_of_point():
    assert try_get_bounding_box(serialize(Point(Vertex(1.5, 2.5)))) == Box(1.5, 2.5, 1.5, 2.5)


def test_bounding_box_missing_for_empty_geometries():
    assert try_get_bounding_box(serialize(Point())) is None
    assert try_get_bounding_box(serialize(MultiPolygon())) is None


def test_float_rounding_brackets_value():
    down = double_to_float_down(0.1)
    up = double_to_float_up(0.1)
    assert down < 0.1 < up
    for value in (down, up):
        assert struct.unpack("<f", struct.pack("<f", value))[0] == value


def test_float_rounding_keeps_exact_values():
    assert double_to_float_down(1.0) == 1.0
    assert double_to_float_up(-2.5) == -2.5


def test_float_rounding_negative_values():
    down = double_to_float_down(-0.1)
    up = double_to_float_up(-0.1)
    assert down < -0.1 < up


def test_float_rounding_out_of_range():
    float32_max = struct.unpack("<f", bytes.fromhex("ffff7f7f"))[0]
    assert double_to_float_up(1e300) == math.inf
    assert double_to_float_down(1e300) == float32_max
    assert double_to_float_down(-1e300) == -math.inf
    assert double_to_float_up(-1e300) == -float32_max


def test_deserialize_truncated_data():
    data = serialize(_line((0, 0), (1, 1), (2, 2)))
    with pytest.raises(SerializationError):
        deserialize(data[:-4])


def test_deserialize_unknown_body_type():
    data = bytes([0, 0, 0, 0]) + b"\x00" * 4 + struct.pack("<II", 99, 0)
    with pytest.raises(SerializationError):
        deserialize(data)


def test_serialize_rejects_non_geometry():
    with pytest.raises(SerializationError):
        serialize("POINT (1 2)")