import sys

import pytest

from planargeom.extent import (
    linestring2d_extent,
    polygon2d_extent,
    x,
    xmax,
    xmin,
    y,
    ymax,
    ymin,
)
from planargeom.geometry import LineString, Point, Polygon, create_box
from planargeom.serialize import serialize
from planargeom.vertex import Box, Vertex


def test_x_and_y_of_point_geometry():
    point = Point(Vertex(1.5, -2.25))
    assert x(point) == 1.5
    assert y(point) == -2.25


def test_x_and_y_keep_double_precision_for_points():
    point = Point(Vertex(0.1, 0.2))
    assert x(point) == 0.1
    assert y(point) == 0.2


def test_x_of_serialized_bytes():
    data = serialize(Point(Vertex(3.0, 4.0)))
    assert x(data) == 3.0
    assert y(data) == 4.0


def test_x_of_empty_point_is_none():
    assert x(Point()) is None
    assert y(Point()) is None


def test_x_of_non_point_raises():
    line = LineString([Vertex(0, 0), Vertex(1, 1)])
    with pytest.raises(ValueError):
        x(line)
    with pytest.raises(ValueError):
        y(line)


def test_x_and_y_of_bare_vertex():
    vertex = Vertex(7.0, 8.0)
    assert x(vertex) == 7.0
    assert y(vertex) == 8.0


def test_extent_of_linestring():
    line = LineString([Vertex(1, 5), Vertex(-3, 2), Vertex(4, -1)])
    assert xmin(line) == -3.0
    assert xmax(line) == 4.0
    assert ymin(line) == -1.0
    assert ymax(line) == 5.0


def test_extent_of_geometry_contains_inexact_coordinates():
    line = LineString([Vertex(0.1, 0.3), Vertex(0.7, 0.9)])
    assert xmin(line) <= 0.1
    assert ymin(line) <= 0.3
    assert xmax(line) >= 0.7
    assert ymax(line) >= 0.9


def test_extent_of_empty_line_is_none():
    assert xmin(LineString()) is None
    assert ymax(LineString()) is None


def test_extent_of_box_and_vertex():
    box = Box(1.0, 2.0, 3.0, 4.0)
    assert (xmin(box), ymin(box), xmax(box), ymax(box)) == (1.0, 2.0, 3.0, 4.0)
    vertex = Vertex(5.0, 6.0)
    assert (xmin(vertex), ymin(vertex), xmax(vertex), ymax(vertex)) == (5.0, 6.0, 5.0, 6.0)


def test_extent_of_polygon_geometry():
    polygon = create_box(-1.0, -2.0, 3.0, 4.0)
    assert (xmin(polygon), ymin(polygon), xmax(polygon), ymax(polygon)) == (
        -1.0,
        -2.0,
        3.0,
        4.0,
    )


def test_unsupported_input_raises_type_error():
    with pytest.raises(TypeError):
        xmin("not a geometry")


def test_linestring2d_extent():
    box = linestring2d_extent([Vertex(0.1, 2), Vertex(-1, 0.3)])
    assert (box.minx, box.miny, box.maxx, box.maxy) == (-1, 0.3, 0.1, 2)


def test_linestring2d_extent_empty():
    assert linestring2d_extent([]) is None


def test_polygon2d_extent_ignores_closing_vertex():
    shell = [Vertex(0, 0), Vertex(2, 0), Vertex(2, 2), Vertex(0, 2), Vertex(5, 5)]
    box = polygon2d_extent([shell])
    assert (box.minx, box.miny, box.maxx, box.maxy) == (0, 0, 2, 2)


def test_polygon2d_extent_only_uses_shell():
    shell = [Vertex(0, 0), Vertex(1, 0), Vertex(1, 1), Vertex(0, 0)]
    hole = [Vertex(-9, -9), Vertex(9, 9), Vertex(-9, -9)]
    box = polygon2d_extent([shell, hole])
    assert (box.minx, box.maxx) == (0, 1)


def test_polygon2d_extent_empty():
    assert polygon2d_extent([]) is None
    assert polygon2d_extent([[]]) is None


def test_polygon2d_extent_single_vertex_shell_keeps_defaults():
    box = polygon2d_extent([[Vertex(1, 1)]])
    assert box.minx == sys.float_info.max
    assert box.maxx == -sys.float_info.max


def test_polygon_geometry_extent_matches_helper_for_exact_values():
    polygon = Polygon([[Vertex(0, 0), Vertex(4, 0), Vertex(4, 3), Vertex(0, 0)]])
    box = polygon2d_extent(polygon.rings)
    assert (xmin(polygon), xmax(polygon)) == (box.minx, box.maxx)
    assert (ymin(polygon), ymax(polygon)) == (box.miny, box.maxy)