# planargeom

A small, dependency-free library for planar (2D) geometries.

- `planargeom.vertex`: the `Vertex` and `Box` types and algorithms over
  vertex sequences: `path_length`, `signed_area`, `ring_area`, `is_closed`,
  `winding_order`, `contains_vertex` (winding-number point-in-ring test
  returning a `Contains` value), `closest_segment`, `closest_vertex`,
  `locate_vertex` and `closest_point_on_segment`.
- `planargeom.geometry`: the geometry model `Point`, `LineString`, `Polygon`,
  `MultiPoint`, `MultiLineString`, `MultiPolygon` and `GeometryCollection`,
  with WKT-style text through `str()`, plus `create_box`.
- `planargeom.serialize`: a compact little-endian binary form with a 4-byte
  header and, for non-empty non-point geometries, a float32 bounding box
  rounded outwards (`serialize`, `deserialize`, `read_header`,
  `try_get_bounding_box`, `serialized_size`).
- `planargeom.measures`: `num_points`, `perimeter`, `box_perimeter` and
  polygon-ring helpers.
- `planargeom.counts`: `num_geometries` and `num_interior_rings`.
- `planargeom.accessors`: `make_point`, `point_n`, `start_point`, `quadkey`
  and `geometry_quadkey`.
- `planargeom.extent`: `x`, `y`, `xmin`, `xmax`, `ymin`, `ymax`, taking a
  `Vertex`, a `Box`, a `Geometry` or serialized bytes.
- `planargeom.lines`: `remove_repeated_points`.

## Installation

```
pip install planargeom
```

Python 3.10 or later is required. The package has no third-party dependencies.

## Usage

```python
from planargeom.geometry import create_box
from planargeom.serialize import serialize, deserialize, try_get_bounding_box
from planargeom.measures import perimeter, num_points
from planargeom.accessors import make_point, quadkey
from planargeom.extent import x, xmax

box = create_box(0.0, 0.0, 2.0, 1.0)
print(box)                # POLYGON ((0 0, 0 1, 2 1, 2 0, 0 0))
print(box.area())         # 2.0
print(perimeter(box))     # 6.0
print(num_points(box))    # 5

# Compact serialization carrying a bounding box
blob = serialize(box)
print(try_get_bounding_box(blob))  # Box(minx=0.0, miny=0.0, maxx=2.0, maxy=1.0)
print(deserialize(blob))           # POLYGON ((0 0, 0 1, 2 1, 2 0, 0 0))
print(xmax(blob))                  # 2.0

point = make_point(4.9, 52.37)
print(x(point))                    # 4.9
print(quadkey(4.9, 52.37, 10))     # a 10-digit quadkey string
```

Functions return `None` where a value does not exist (for example `point_n`
with an index out of range, `start_point` of an empty line, or
`num_interior_rings` of anything that is not a polygon). Invalid input raises
`ValueError`, such as a quadkey level outside 1 to 23; malformed serialized
data raises `planargeom.serialize.SerializationError`, a subclass of
`ValueError`.

## What the package does not do

- It does not read or write Well-Known Binary or parse Well-Known Text; text
  output through `str()` is the only interchange format besides the package's
  own binary serialization.
- Geometries are strictly two-dimensional. `point_3d` and `point_4d` in
  `planargeom.accessors` only build plain tuples.

## Running the tests

```
pip install "planargeom[test]"
pytest
```