"""Edge geometry: line width from weight, Pajek colours and the drawn path."""

from __future__ import annotations

import math
from enum import IntEnum

from netcanvas.geometry import Color, PainterPath, Point

_PI_3 = math.pi / 3
_PI_X_2 = 2 * math.pi

# Edges shorter than this carry no arrow heads.
_MIN_ARROW_LENGTH = 10
# Distance of the control points of a self-loop from the node centre.
_SELF_LOOP_SPREAD = 30


class EdgeType(IntEnum):
    DIRECTED = 0
    RECIPROCATED = 1
    UNDIRECTED = 2


def edge_width(weight: float) -> float:
    """Return the pen width for an edge of the given weight.

    Weights up to 1 in magnitude map to their magnitude; larger ones grow
    doubly logarithmically so heavy edges stay readable.
    """
    magnitude = abs(weight)
    if magnitude > 1:
        return 1 + math.log(1 + math.log(magnitude))
    return magnitude


def color_to_pajek(color: str | Color) -> str:
    """Return a colour in the form Pajek accepts, e.g. 'RGBFF0000'."""
    name = Color.parse(color).name()
    if name.startswith("#"):
        return ("RGB" + name[1:]).upper()
    return name


def _arrow_head(tip: Point, angle: float, first: float, second: float, size: float) -> list[Point]:
    p1 = tip + Point(math.sin(angle + first) * size, math.cos(angle + first) * size)
    p2 = tip + Point(math.sin(angle + second) * size, math.cos(angle + second) * size)
    return [tip, p1, p2, tip]


def build_edge_path(
    source: Point,
    target: Point,
    offset: float,
    bezier: bool,
    draw_arrows: bool,
    dir_type: int,
    arrow_size: float,
) -> PainterPath:
    """Build the path of an edge between two node centres.

    The ends are pulled in by ``offset`` along the edge so they stop at the
    node outlines. An edge whose ends coincide is drawn as a loop above the
    node. Arrow heads are added to edges longer than a minimum length; both
    ends get one for undirected and reciprocated edges.
    """
    dx = target.x - source.x
    dy = target.y - source.y
    length = math.hypot(dx, dy)
    self_link = source == target

    if self_link:
        edge_offset = Point(0.0, 0.0)
    else:
        edge_offset = Point(dx * offset / length, dy * offset / length)

    source_point = source + edge_offset
    target_point = target - edge_offset

    path = PainterPath(source_point)
    if not self_link:
        if not bezier:
            path.line_to(target_point.x, target_point.y)
        else:
            control = Point(target_point.x - source_point.x, target_point.y - target_point.y)
            path.cubic_to(source_point, control, target_point)
    else:
        c1 = Point(target_point.x - _SELF_LOOP_SPREAD, target_point.y - _SELF_LOOP_SPREAD)
        c2 = Point(target_point.x + _SELF_LOOP_SPREAD, target_point.y - _SELF_LOOP_SPREAD)
        path.cubic_to(c1, c2, target_point)

    if draw_arrows and not self_link and length > _MIN_ARROW_LENGTH:
        angle = math.acos(dx / length)
        if dy >= 0:
            angle = _PI_X_2 - angle
        path.add_polygon(
            _arrow_head(target_point, angle, -_PI_3, -math.pi + _PI_3, arrow_size)
        )
        if dir_type in (EdgeType.UNDIRECTED, EdgeType.RECIPROCATED):
            path.add_polygon(
                _arrow_head(source_point, angle, _PI_3, math.pi - _PI_3, arrow_size)
            )
    return path