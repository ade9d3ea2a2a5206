"""Simplification of line vertex sequences."""

from __future__ import annotations

from typing import Sequence

from planargeom.vertex import Vertex


def _without_exact_repeats(vertices: Sequence[Vertex]) -> list[Vertex]:
    kept = [vertices[0]]
    for vertex in vertices[1:]:
        if vertex != kept[-1]:
            kept.append(vertex)
    if len(kept) == 1:
        return [vertices[0], vertices[-1]]
    return kept


def _without_near_repeats(vertices: Sequence[Vertex], tolerance: float) -> list[Vertex]:
    tolerance_squared = tolerance * tolerance
    first, last = vertices[0], vertices[-1]

    keep_count = 1
    anchor = first
    for vertex in vertices[1:]:
        if vertex.distance_squared(anchor) > tolerance_squared:
            anchor = vertex
            keep_count += 1

    if keep_count == 1:
        return [first, last]

    result = [first]
    anchor = first
    for vertex in vertices[1:-1]:
        if vertex.distance_squared(anchor) > tolerance_squared:
            result.append(vertex)
            anchor = vertex
    # The end point is always kept; it takes the final slot of the line.
    result[keep_count - 1 :] = [last]
    return result


def remove_repeated_points(
    vertices: Sequence[Vertex], tolerance: float | None = None
) -> list[Vertex]:
    """Drop consecutive duplicate vertices from a line.

    Without a tolerance only exact repeats are removed. With a tolerance,
    vertices within that distance of the last kept vertex are removed, and
    the end point is always kept. Lines of fewer than three vertices are
    returned unchanged; a line that collapses onto one point keeps its first
    and last vertex.
    """
    if len(vertices) < 3:
        return list(vertices)
    if tolerance is None:
        return _without_exact_repeats(vertices)
    return _without_near_repeats(vertices, tolerance)