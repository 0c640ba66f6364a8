# shapekit

A small geometry library: ASCII STL loading, triangle–triangle
intersection, Bezier curves, 2D polygon boolean operations, rectangle
booleans, and a simple vertex/edge/face/solid sketcher with extrusion and
revolution. It also holds the state of a few interactive editors (curve
canvas, polygon extrusion editor, sketch session), driven by plain method
calls for clicks, drags and wheel events.

## Installation

```
pip install .
```

## Meshes and intersection (`shapekit.mesh`, `shapekit.intersection`)

`load_stl_triangles(path)` reads an ASCII STL file into a list of
`Triangle`s of `Point`s; every three `vertex` lines make one triangle.

```python
from shapekit.mesh import load_stl_triangles
from shapekit.intersection import intersection_segments

a = load_stl_triangles("part_a.stl")
b = load_stl_triangles("part_b.stl")
for start, end in intersection_segments(a, b):
    print(start, end)
```

`shapekit.intersection` also offers `segments_intersect_2d`,
`triangles_intersect`, `triangles_coplanar`,
`triangle_triangle_intersection_segment`, `point_in_triangle_2d` and
`coplanar_overlap_segments`. For coplanar pairs the overlap is found by
sampling edges (every `0.01` of an edge by default).

## Bezier curves (`shapekit.bezier`, `shapekit.bezier_canvas`)

```python
from shapekit.bezier import Bezier

c1 = Bezier([(0, 0), (1, 2), (2, 0)], 100)
c2 = Bezier([(0, 1), (2, 1)], 100)
print(c1.find_intersections(c2))
```

`find_intersections` samples both curves at 501 points and reports each
sample of the first curve closer than 0.05 to a sample of the second.
`de_casteljau(points, t)` evaluates a curve directly.

`BezierCanvas(width, height)` keeps several curves with `add_curve`,
selects a control point under a pixel with `press`, moves it with `drag`,
zooms with `wheel`, and lists the crossings of every pair of curves with
`intersections`.

## Polygon booleans (`shapekit.polygon_ops`, `shapekit.extrusion_editor`, `shapekit.rectangles`)

`polygon_ops` works on lists of 2D points: `point_in_polygon`,
`segments_intersect`, `split_edges`, `intersect`, `union_polygons` and
`subtract_polygons`, plus `compute_polygon_normal`,
`is_close_to_first_point` and `screen_to_world`.

`ExtrusionEditor(width, height)` sketches polygons from `double_click`
events; a double click near the first point closes a polygon. A
right-button drag (`press_right`, `move`, `release_right`) rotates the
view; a left drag after closing sets the extrusion height, and
`extruded_edges(polygon)` gives the side and top edges. `apply_boolean`
combines the first two polygons with a `BooleanOperation` (`"Union"`,
`"Subtraction"`, `"Intersection"`) into the first and removes the second.

`rectangles` has the `Rectangle` class (centre, length, width) with
`bounds()` and `vertices()`, `overlap(rect1, rect2)`, and
`boolean_polygons(rect1, rect2, operation)`, which returns the
`FilledPolygon`s to paint for `"intersection"`, `"union"` or
`"difference"`.

## Sketcher (`shapekit.sketcher`, `shapekit.sketch_session`)

```python
from shapekit.sketcher import Sketcher

sk = Sketcher()
a, b, c = (sk.add_vertex(*p) for p in [(0, 0, 0), (1, 0, 0), (0, 1, 0)])
face = sk.add_face([sk.add_edge(a, b), sk.add_edge(b, c), sk.add_edge(c, a)])
prism = sk.extrude_face(face, 2.0)
print(len(prism.faces))  # 5
```

`revolve_face(face, angle, steps)` sweeps a face about the y axis.
`Sketcher.load_file` reads `.stl` and `.obj` files into the sketch and
returns the number of faces added.

`SketchSession(width, height)` collects clicked points (`click`) and turns
them into faces with `finalize_current_shape` or `finalize_shape`;
`apply_union`, `apply_difference` and `apply_intersection` combine the
last two faces at the level of their edge lists.

## What it does not do

shapekit has no command-line program and no graphical window: it computes
geometry and keeps editor state, and leaves drawing to the caller. It has
no wireframe 3D primitives (cuboid, sphere, cylinder) and no plotting.

## Tests

```
pip install .[test]
pytest
```