# netcanvas

`netcanvas` holds the state and geometry of a network drawing as plain Python objects:
node items with their numbers and labels, the paths edges are drawn along, guide circles
and lines, and a scene that tracks what is shown. It computes outlines, arrow heads and
bounding rectangles, but it does not paint anything, so any renderer or GUI toolkit can
sit on top of it. It also has a web crawler option form that checks a seed URL and URL
patterns before handing the choices on.

It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `netcanvas.geometry`: `Point` (supports `+` and `-`), `Rect`, `PainterPath` (`move_to`,
  `line_to`, `cubic_to`, `close_subpath`, `add_rect`, `add_rounded_rect`, `add_ellipse`,
  `add_polygon`, `control_point_rect`) and `Color`. `Color.parse` accepts `#RGB`,
  `#RRGGBB`, `#AARRGGBB`, `#RRRGGGBBB`, `#RRRRGGGGBBBB`, SVG colour names and
  `transparent`, and raises `ValueError` for anything else. `Color.name()` gives
  `#rrggbb`; `darker()` and `lighter()` scale the HSV value.
- `netcanvas.scene`: `Scene`, an ordered set of items compared by identity, with
  `add_item`, `remove_item`, `in`, `len` and iteration.
- `netcanvas.texts`: text items placed in their parent's scene: `EdgeLabel`,
  `EdgeWeight`, `NodeLabel` and `NodeNumber`, all built on `TextItem`, with a `Font`.
- `netcanvas.shapes`: `node_path(shape, size)` builds a node outline centred at the origin
  for circle, ellipse, box, rectangle, square, roundrectangle, triangle, star and diamond,
  and a square for the icon shapes (custom, bugs, heart, dice, person, person-b); unknown
  shapes become circles. Also `is_icon_shape`, `default_icon_path` and
  `inside_number_layout`, which returns a `NumberLayout` for a number drawn inside a node.
- `netcanvas.node`: `GraphicsNode`. It keeps lists of in-edges and out-edges and tells them
  when the node moves (`set_pos`), changes size (`set_size`), is selected
  (`set_selected`, which also doubles the size less one and darkens the colour) or is
  removed (`remove`). It manages its outside number and its label items.
- `netcanvas.edge_path`: `EdgeType`, `edge_width(weight)`, `color_to_pajek(color)` and
  `build_edge_path(...)`, which makes the path between two node centres, with a loop for
  self-links and arrow heads on edges longer than 10 units (at both ends for undirected
  and reciprocated edges).
- `netcanvas.guide`: `Guide`, made with `Guide.circle` or `Guide.horizontal`; `die()`
  hides it and takes it off the scene.
- `netcanvas.crawler_form`: `CrawlerForm`, whose `check_errors()` returns a
  `CrawlerFormErrors` and sets `ok_enabled`, and whose `user_choices()` returns a
  `CrawlerChoices` and passes it to `on_choices` if set. Also `normalize_seed_url()` and
  `parse_text_edit_input()`.

## Example

```python
from netcanvas.scene import Scene
from netcanvas.geometry import Color, Point
from netcanvas.guide import Guide
from netcanvas.node import GraphicsNode
from netcanvas.edge_path import EdgeType, build_edge_path, edge_width
from netcanvas.crawler_form import CrawlerForm

scene = Scene()

guide = Guide.circle(scene, 100.0, 100.0, 50.0)
print(guide.bounding_rect())          # Rect(x=-51.0, y=-51.0, width=101.0, height=101.0)
guide.die()

node = GraphicsNode(scene, 1, size=8, shape="diamond", pos=Point(10, 20))
print(node.bounding_rect(), node.color)

path = build_edge_path(Point(0, 0), Point(100, 0), 14, False, True, EdgeType.DIRECTED, 4)
print(path.control_point_rect(), edge_width(0.5))

print(Color.parse("steelblue").name())  # #4682b4

form = CrawlerForm(seed_url_text="example.com")
form.check_errors()
print(form.seed_url, form.ok_enabled)   # http://example.com/ True
```

## What it does not do

- It has no on-screen drawing, event handling or dialog windows; callers render the
  paths, colours and text items themselves and call the methods on user actions.
- It has no edge item class. `GraphicsNode` works with any edge object that provides
  `set_source_node_size`, `set_target_node_size`, `adjust`, `set_highlighted` and
  `remove`; `netcanvas.edge_path` supplies the geometry such an object would use.
- The crawler form only validates and collects options; it does not fetch any pages.