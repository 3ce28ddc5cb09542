"""Outlines of node shapes and the placement of numbers drawn inside nodes."""

from __future__ import annotations

from dataclasses import dataclass

from netcanvas.geometry import FillRule, PainterPath, Point

_BOX_SHAPES = frozenset({"box", "rectangle", "square"})
_BUILTIN_ICON_SHAPES = frozenset({"bugs", "heart", "dice", "person", "person-b"})
_ICON_SHAPES = _BUILTIN_ICON_SHAPES | {"custom"}

_DEFAULT_ICONS = {
    "person": ":/images/person.svg",
    "bugs": ":/images/bugs.png",
    "heart": ":/images/heart.svg",
    "dice": ":/images/random.png",
}

# Corner radius of a round rectangle, as a percentage of half its side.
_ROUND_RECT_RADIUS_PERCENT = 60.0

NUMBER_FONT_FAMILY = "Sans Serif"


@dataclass(frozen=True)
class NumberLayout:
    """Where and how large a node number is drawn inside the node shape."""

    text: str
    font_size: int
    x: int
    y: int
    family: str = NUMBER_FONT_FAMILY


def _triangle(path: PainterPath, s: float) -> None:
    path.move_to(-s, 0.95 * s)
    path.line_to(s, 0.95 * s)
    path.line_to(0, -1 * s)
    path.line_to(-s, 0.95 * s)
    path.close_subpath()


def _star(path: PainterPath, s: float) -> None:
    path.fill_rule = FillRule.WINDING
    path.move_to(-0.8 * s, 0.6 * s)
    path.line_to(0.8 * s, 0.6 * s)
    path.line_to(0, -1 * s)
    path.line_to(-0.8 * s, 0.6 * s)
    path.close_subpath()

    path.move_to(0, 1 * s)
    path.line_to(0.8 * s, -0.6 * s)
    path.line_to(-0.8 * s, -0.6 * s)
    path.line_to(0, 1 * s)
    path.close_subpath()


def _diamond(path: PainterPath, s: float) -> None:
    path.move_to(-s, 0)
    path.line_to(0, -1 * s)
    path.line_to(s, 0)
    path.line_to(0, 1 * s)
    path.line_to(-s, 0)
    path.close_subpath()


def node_path(shape: str, size: float) -> PainterPath:
    """Build the outline of a node of the given shape and size, centred at the origin.

    Icon shapes are outlined by the square the icon is drawn into; unknown
    shapes fall back to a circle.
    """
    s = size
    path = PainterPath()
    if shape == "circle":
        path.add_ellipse(-s, -s, 2 * s, 2 * s)
    elif shape == "ellipse":
        path.add_ellipse(-s, -s, 2 * s, 1.7 * s)
    elif shape in _BOX_SHAPES:
        path.add_rect(-s, -s, 1.8 * s, 1.8 * s)
    elif shape == "roundrectangle":
        side = 1.8 * s
        radius = abs(side) / 2 * _ROUND_RECT_RADIUS_PERCENT / 100
        path.add_rounded_rect(-s, -s, side, side, radius, radius)
    elif shape == "triangle":
        _triangle(path, s)
    elif shape == "star":
        _star(path, s)
    elif shape == "diamond":
        _diamond(path, s)
    elif shape in _ICON_SHAPES:
        path.add_rect(-s, -s, 2 * s, 2 * s)
    else:
        path.add_ellipse(-s, -s, 2 * s, 2 * s)
    return path


def default_icon_path(shape: str) -> str:
    """Return the built-in icon for a shape, or an empty string if it has none."""
    return _DEFAULT_ICONS.get(shape, "")


def is_icon_shape(shape: str) -> bool:
    """Tell whether a node of this shape is drawn as an image rather than a path."""
    return shape in _ICON_SHAPES


def inside_number_layout(number: int, size: int, number_size: int) -> NumberLayout:
    """Lay out a node number drawn inside a node.

    A zero ``number_size`` lets the font scale with the node size; wider
    numbers are drawn smaller and shifted further left.
    """
    if number > 999:
        font_size = number_size - 1 if number_size else 0.4 * size
        x = -0.8 * size
    elif number > 99:
        font_size = number_size - 1 if number_size else 0.5 * size
        x = -0.6 * size
    elif number > 9:
        font_size = number_size if number_size else 0.66 * size
        x = -0.5 * size
    else:
        font_size = number_size if number_size else 0.66 * size
        x = -0.33 * size
    y = int(size / 3)
    return NumberLayout(text=str(number), font_size=int(font_size), x=int(x), y=y)