"""Plane geometry primitives for canvas items: points, rectangles, paths and colours."""

from __future__ import annotations

import colorsys
import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

# Control-point distance that makes a cubic Bézier approximate a quarter ellipse.
_KAPPA = 0.5522847498


@dataclass(frozen=True)
class Point:
    """A point (or offset) in item or scene coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class ElementKind(Enum):
    MOVE_TO = "move"
    LINE_TO = "line"
    CURVE_TO = "curve"
    CURVE_DATA = "curve-data"


class FillRule(Enum):
    ODD_EVEN = "odd-even"
    WINDING = "winding"


@dataclass(frozen=True)
class PathElement:
    kind: ElementKind
    point: Point


class PainterPath:
    """A sequence of straight and cubic segments grouped into subpaths."""

    def __init__(self, start: Point | None = None) -> None:
        self._elements: list[PathElement] = []
        self._subpath_start = Point()
        self.fill_rule = FillRule.ODD_EVEN
        if start is not None:
            self.move_to(start.x, start.y)

    @property
    def elements(self) -> tuple[PathElement, ...]:
        return tuple(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def current_position(self) -> Point:
        return self._elements[-1].point if self._elements else Point()

    def __len__(self) -> int:
        return len(self._elements)

    def _ensure_started(self) -> None:
        if not self._elements:
            self.move_to(0.0, 0.0)

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        point = Point(float(x), float(y))
        element = PathElement(ElementKind.MOVE_TO, point)
        if self._elements and self._elements[-1].kind is ElementKind.MOVE_TO:
            self._elements[-1] = element
        else:
            self._elements.append(element)
        self._subpath_start = point

    def line_to(self, x: float, y: float) -> None:
        """Add a straight segment to (x, y)."""
        self._ensure_started()
        self._elements.append(PathElement(ElementKind.LINE_TO, Point(float(x), float(y))))

    def cubic_to(self, c1: Point, c2: Point, end: Point) -> None:
        """Add a cubic Bézier segment with control points c1, c2 ending at end."""
        self._ensure_started()
        self._elements.append(PathElement(ElementKind.CURVE_TO, c1))
        self._elements.append(PathElement(ElementKind.CURVE_DATA, c2))
        self._elements.append(PathElement(ElementKind.CURVE_DATA, end))

    def close_subpath(self) -> None:
        """Close the current subpath by drawing back to its start."""
        if self._elements and self.current_position != self._subpath_start:
            self.line_to(self._subpath_start.x, self._subpath_start.y)

    def add_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        self.line_to(x, y)

    def add_rounded_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        x_radius: float,
        y_radius: float,
    ) -> None:
        """Add a rectangle whose corners are rounded with absolute radii."""
        rx = min(float(x_radius), abs(width) / 2)
        ry = min(float(y_radius), abs(height) / 2)
        if rx <= 0 or ry <= 0:
            self.add_rect(x, y, width, height)
            return
        k = _KAPPA
        right, bottom = x + width, y + height
        self.move_to(right, y + ry)
        self.cubic_to(Point(right, y + ry - k * ry), Point(right - rx + k * rx, y), Point(right - rx, y))
        self.line_to(x + rx, y)
        self.cubic_to(Point(x + rx - k * rx, y), Point(x, y + ry - k * ry), Point(x, y + ry))
        self.line_to(x, bottom - ry)
        self.cubic_to(Point(x, bottom - ry + k * ry), Point(x + rx - k * rx, bottom), Point(x + rx, bottom))
        self.line_to(right - rx, bottom)
        self.cubic_to(
            Point(right - rx + k * rx, bottom), Point(right, bottom - ry + k * ry), Point(right, bottom - ry)
        )
        self.close_subpath()

    def add_ellipse(self, x: float, y: float, width: float, height: float) -> None:
        """Add the ellipse inscribed in the given rectangle as four Bézier arcs."""
        rx, ry = width / 2, height / 2
        cx, cy = x + rx, y + ry
        k = _KAPPA
        self.move_to(cx + rx, cy)
        self.cubic_to(Point(cx + rx, cy - k * ry), Point(cx + k * rx, cy - ry), Point(cx, cy - ry))
        self.cubic_to(Point(cx - k * rx, cy - ry), Point(cx - rx, cy - k * ry), Point(cx - rx, cy))
        self.cubic_to(Point(cx - rx, cy + k * ry), Point(cx - k * rx, cy + ry), Point(cx, cy + ry))
        self.cubic_to(Point(cx + k * rx, cy + ry), Point(cx + rx, cy + k * ry), Point(cx + rx, cy))
        self.close_subpath()

    def add_polygon(self, points: Iterable[Point]) -> None:
        """Add an open polyline through the given points as a new subpath."""
        iterator = iter(points)
        first = next(iterator, None)
        if first is None:
            return
        self.move_to(first.x, first.y)
        for point in iterator:
            self.line_to(point.x, point.y)

    def control_point_rect(self) -> Rect:
        """Return the rectangle enclosing every point and control point of the path."""
        if not self._elements:
            return Rect()
        xs = [element.point.x for element in self._elements]
        ys = [element.point.y for element in self._elements]
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)


_SVG_COLOR_TABLE = """
aliceblue f0f8ff antiquewhite faebd7 aqua 00ffff aquamarine 7fffd4 azure f0ffff
beige f5f5dc bisque ffe4c4 black 000000 blanchedalmond ffebcd blue 0000ff
blueviolet 8a2be2 brown a52a2a burlywood deb887 cadetblue 5f9ea0 chartreuse 7fff00
chocolate d2691e coral ff7f50 cornflowerblue 6495ed cornsilk fff8dc crimson dc143c
cyan 00ffff darkblue 00008b darkcyan 008b8b darkgoldenrod b8860b darkgray a9a9a9
darkgreen 006400 darkgrey a9a9a9 darkkhaki bdb76b darkmagenta 8b008b
darkolivegreen 556b2f darkorange ff8c00 darkorchid 9932cc darkred 8b0000
darksalmon e9967a darkseagreen 8fbc8f darkslateblue 483d8b darkslategray 2f4f4f
darkslategrey 2f4f4f darkturquoise 00ced1 darkviolet 9400d3 deeppink ff1493
deepskyblue 00bfff dimgray 696969 dimgrey 696969 dodgerblue 1e90ff firebrick b22222
floralwhite fffaf0 forestgreen 228b22 fuchsia ff00ff gainsboro dcdcdc
ghostwhite f8f8ff gold ffd700 goldenrod daa520 gray 808080 grey 808080 green 008000
greenyellow adff2f honeydew f0fff0 hotpink ff69b4 indianred cd5c5c indigo 4b0082
ivory fffff0 khaki f0e68c lavender e6e6fa lavenderblush fff0f5 lawngreen 7cfc00
lemonchiffon fffacd lightblue add8e6 lightcoral f08080 lightcyan e0ffff
lightgoldenrodyellow fafad2 lightgray d3d3d3 lightgreen 90ee90 lightgrey d3d3d3
lightpink ffb6c1 lightsalmon ffa07a lightseagreen 20b2aa lightskyblue 87cefa
lightslategray 778899 lightslategrey 778899 lightsteelblue b0c4de lightyellow ffffe0
lime 00ff00 limegreen 32cd32 linen faf0e6 magenta ff00ff maroon 800000
mediumaquamarine 66cdaa mediumblue 0000cd mediumorchid ba55d3 mediumpurple 9370db
mediumseagreen 3cb371 mediumslateblue 7b68ee mediumspringgreen 00fa9a
mediumturquoise 48d1cc mediumvioletred c71585 midnightblue 191970 mintcream f5fffa
mistyrose ffe4e1 moccasin ffe4b5 navajowhite ffdead navy 000080 oldlace fdf5e6
olive 808000 olivedrab 6b8e23 orange ffa500 orangered ff4500 orchid da70d6
palegoldenrod eee8aa palegreen 98fb98 paleturquoise afeeee palevioletred db7093
papayawhip ffefd5 peachpuff ffdab9 peru cd853f pink ffc0cb plum dda0dd
powderblue b0e0e6 purple 800080 red ff0000 rosybrown bc8f8f royalblue 4169e1
saddlebrown 8b4513 salmon fa8072 sandybrown f4a460 seagreen 2e8b57 seashell fff5ee
sienna a0522d silver c0c0c0 skyblue 87ceeb slateblue 6a5acd slategray 708090
slategrey 708090 snow fffafa springgreen 00ff7f steelblue 4682b4 tan d2b48c
teal 008080 thistle d8bfd8 tomato ff6347 turquoise 40e0d0 violet ee82ee wheat f5deb3
white ffffff whitesmoke f5f5f5 yellow ffff00 yellowgreen 9acd32
"""

_tokens = _SVG_COLOR_TABLE.split()
_SVG_COLORS: dict[str, str] = dict(zip(_tokens[::2], _tokens[1::2]))


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def parse(cls, text: str | Color) -> Color:
        """Parse #RGB, #RRGGBB, #AARRGGBB, #RRRGGGBBB, #RRRRGGGGBBBB, an SVG name or 'transparent'."""
        if isinstance(text, Color):
            return text
        spec = text.strip()
        lowered = spec.lower()
        if lowered == "transparent":
            return cls(0, 0, 0, 0)
        if lowered in _SVG_COLORS:
            return cls._from_hex(_SVG_COLORS[lowered])
        if spec.startswith("#"):
            digits = spec[1:]
            if digits and all(c in string.hexdigits for c in digits):
                if len(digits) == 3:
                    return cls(*(int(c, 16) * 17 for c in digits))
                if len(digits) == 6:
                    return cls._from_hex(digits)
                if len(digits) == 8:
                    alpha = int(digits[:2], 16)
                    rgb = cls._from_hex(digits[2:])
                    return cls(rgb.red, rgb.green, rgb.blue, alpha)
                if len(digits) == 9:
                    return cls(*(int(digits[i : i + 3], 16) >> 4 for i in (0, 3, 6)))
                if len(digits) == 12:
                    return cls(*(int(digits[i : i + 4], 16) >> 8 for i in (0, 4, 8)))
        raise ValueError(f"invalid colour: {text!r}")

    @classmethod
    def _from_hex(cls, digits: str) -> Color:
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def name(self) -> str:
        """Return the colour as '#rrggbb'."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def _hsv(self) -> tuple[float, float, float]:
        return colorsys.rgb_to_hsv(self.red / 255, self.green / 255, self.blue / 255)

    def _with_hsv(self, h: float, s: float, v: float) -> Color:
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return Color(round(r * 255), round(g * 255), round(b * 255), self.alpha)

    def darker(self, factor: float = 200) -> Color:
        """Return a darker colour: the HSV value is divided by factor/100."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.lighter(10000 / factor)
        h, s, v = self._hsv()
        return self._with_hsv(h, s, v * 100 / factor)

    def lighter(self, factor: float = 150) -> Color:
        """Return a lighter colour: the HSV value is multiplied by factor/100."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.darker(10000 / factor)
        h, s, v = self._hsv()
        v = v * factor / 100
        if v > 1.0:
            s = max(0.0, s - (v - 1.0))
            v = 1.0
        return self._with_hsv(h, s, v)