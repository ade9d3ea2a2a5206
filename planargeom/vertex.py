"""Planar vertices, bounding boxes and algorithms over vertex sequences."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import Sequence


class Side(Enum):
    """Position of a point relative to a directed line."""

    LEFT = "left"
    RIGHT = "right"
    ON = "on"


class Contains(Enum):
    """Result of a point-in-ring test."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_EDGE = "on_edge"


class WindingOrder(Enum):
    """Orientation of a ring."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


@dataclass(frozen=True)
class Vertex:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Vertex) -> float:
        """Euclidean distance to another vertex."""
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Vertex) -> float:
        """Squared Euclidean distance to another vertex."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to_segment(self, p1: Vertex, p2: Vertex) -> float:
        """Distance to the segment from p1 to p2."""
        return math.sqrt(self.distance_squared_to_segment(p1, p2))

    def distance_squared_to_segment(self, p1: Vertex, p2: Vertex) -> float:
        """Squared distance to the segment from p1 to p2."""
        return self.distance_squared(closest_point_on_segment(self, p1, p2))

    def side_of_line(self, p1: Vertex, p2: Vertex) -> Side:
        """Which side of the directed line p1 -> p2 this vertex lies on."""
        side = (self.x - p1.x) * (p2.y - p1.y) - (p2.x - p1.x) * (self.y - p1.y)
        if side == 0:
            return Side.ON
        if side < 0:
            return Side.LEFT
        return Side.RIGHT

    def is_on_segment(self, p1: Vertex, p2: Vertex) -> bool:
        """Whether this vertex, known to be collinear, lies within the segment's span."""
        x, y = self.x, self.y
        return (
            (p1.x <= x < p2.x)
            or (p1.x >= x > p2.x)
            or (p1.y <= y < p2.y)
            or (p1.y >= y > p2.y)
        )


@dataclass
class Box:
    """A growable axis-aligned bounding box; starts out empty."""

    minx: float = math.inf
    miny: float = math.inf
    maxx: float = -math.inf
    maxy: float = -math.inf

    def extend(self, vertex: Vertex) -> None:
        """Grow the box so that it contains the vertex."""
        self.minx = min(self.minx, vertex.x)
        self.miny = min(self.miny, vertex.y)
        self.maxx = max(self.maxx, vertex.x)
        self.maxy = max(self.maxy, vertex.y)


def closest_point_on_segment(p: Vertex, p1: Vertex, p2: Vertex) -> Vertex:
    """The point of the segment p1 -> p2 nearest to p."""
    if p1 == p2:
        return p1
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    r = ((p.x - p1.x) * dx + (p.y - p1.y) * dy) / (dx * dx + dy * dy)
    if r <= 0:
        return p1
    if r >= 1:
        return p2
    return Vertex(p1.x + r * dx, p1.y + r * dy)


def path_length(vertices: Sequence[Vertex]) -> float:
    """Total length of the path through the vertices."""
    return sum((a.distance(b) for a, b in pairwise(vertices)), 0.0)


def signed_area(vertices: Sequence[Vertex]) -> float:
    """Signed area of a ring; positive values denote counter-clockwise order."""
    if len(vertices) < 3:
        return 0.0
    # Shift x by the first vertex to keep the products small.
    x0 = vertices[0].x
    area = 0.0
    for prev, cur, nxt in zip(vertices, vertices[1:], vertices[2:]):
        area += (cur.x - x0) * (prev.y - nxt.y)
    return area * 0.5


def ring_area(vertices: Sequence[Vertex]) -> float:
    """Unsigned area of a ring."""
    return abs(signed_area(vertices))


def is_closed(vertices: Sequence[Vertex]) -> bool:
    """Whether the first and last vertices coincide."""
    if not vertices:
        return False
    if len(vertices) == 1:
        return True
    return vertices[0] == vertices[-1]


def winding_order(vertices: Sequence[Vertex]) -> WindingOrder:
    """Orientation of a ring as derived from its signed area."""
    if signed_area(vertices) > 0:
        return WindingOrder.COUNTER_CLOCKWISE
    return WindingOrder.CLOCKWISE


def is_clockwise(vertices: Sequence[Vertex]) -> bool:
    """Whether the ring's winding order is clockwise."""
    return winding_order(vertices) is WindingOrder.CLOCKWISE


def is_counter_clockwise(vertices: Sequence[Vertex]) -> bool:
    """Whether the ring's winding order is counter-clockwise."""
    return winding_order(vertices) is WindingOrder.COUNTER_CLOCKWISE


def contains_vertex(
    vertices: Sequence[Vertex], p: Vertex, ensure_closed: bool = False
) -> Contains:
    """Locate p relative to a ring using the winding-number rule."""
    if not vertices:
        raise ValueError("cannot test containment against an empty ring")
    p1 = vertices[0]
    if ensure_closed and p1 != vertices[-1]:
        raise ValueError("ring is not closed")

    winding_number = 0
    for p2 in vertices:
        if p1 == p2:
            continue
        if p.y > max(p1.y, p2.y) or p.y < min(p1.y, p2.y):
            p1 = p2
            continue
        side = p.side_of_line(p1, p2)
        if side is Side.ON and p.is_on_segment(p1, p2):
            return Contains.ON_EDGE
        if side is Side.LEFT and p1.y < p.y <= p2.y:
            winding_number += 1
        elif side is Side.RIGHT and p2.y <= p.y < p1.y:
            winding_number -= 1
        p1 = p2
    return Contains.OUTSIDE if winding_number == 0 else Contains.INSIDE


def closest_segment(vertices: Sequence[Vertex], p: Vertex) -> tuple[int, float]:
    """Index of the segment nearest to p, and its distance."""
    min_distance = sys.float_info.max
    min_index = 0
    for index, (p1, p2) in enumerate(pairwise(vertices)):
        distance = p.distance_squared_to_segment(p1, p2)
        if distance < min_distance:
            min_distance = distance
            min_index = index
            if min_distance == 0:
                return min_index, 0.0
    return min_index, math.sqrt(min_distance)


def closest_vertex(vertices: Sequence[Vertex], p: Vertex) -> tuple[int, float]:
    """Index of the vertex nearest to p, and its distance."""
    min_distance = sys.float_info.max
    min_index = 0
    for index, vertex in enumerate(vertices):
        distance = p.distance_squared(vertex)
        if distance < min_distance:
            min_distance = distance
            min_index = index
            if min_distance == 0:
                return min_index, 0.0
    return min_index, math.sqrt(min_distance)


def locate_vertex(
    vertices: Sequence[Vertex], p: Vertex
) -> tuple[Vertex, float, float]:
    """Nearest point on the path, its fractional location and its distance from p."""
    if not vertices:
        return Vertex(), 0.0, 0.0
    if len(vertices) == 1:
        single = vertices[0]
        return single, 0.0, p.distance(single)

    min_distance = sys.float_info.max
    min_index = 0
    p1, p2 = vertices[0], vertices[1]
    for index, p2 in enumerate(vertices[1:], start=1):
        distance = p.distance_squared_to_segment(p1, p2)
        if distance < min_distance:
            min_distance = distance
            min_index = index - 1
            if min_distance == 0:
                break
        p1 = p2

    min_distance = math.sqrt(min_distance)
    closest = closest_point_on_segment(p, p1, p2)

    total_length = path_length(vertices)
    if total_length == 0:
        return closest, 0.0, min_distance
    prefix_length = path_length(vertices[: min_index + 1])
    return closest, prefix_length / total_length, min_distance


def columnar_area(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Twice the signed shoelace area of a ring given as coordinate columns."""
    area = 0.0
    for (xa, ya), (xb, yb) in pairwise(zip(xs, ys)):
        area += xa * yb
        area -= xb * ya
    return area


def columnar_contains_point(
    xs: Sequence[float], ys: Sequence[float], x: float, y: float
) -> Contains:
    """Locate (x, y) relative to a ring given as coordinate columns."""
    ring = [Vertex(vx, vy) for vx, vy in zip(xs, ys, strict=True)]
    return contains_vertex(ring, Vertex(x, y), False)