"""Text items attached to edges and nodes: labels, weights and numbers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from netcanvas.geometry import Color, Point
from netcanvas.scene import USER_TYPE


class FontWeight(IntEnum):
    LIGHT = 300
    NORMAL = 400
    BLACK = 900


@dataclass(frozen=True)
class Font:
    family: str
    point_size: int
    weight: FontWeight = FontWeight.NORMAL
    italic: bool = False


class TextItem:
    """A plain-text item owned by a parent item and placed in the parent's scene."""

    TYPE = USER_TYPE
    Z_VALUE = 0

    def __init__(self, parent: Any, text: str, font: Font) -> None:
        self.parent = parent
        self.text = text
        self.font = font
        self.pos = Point()
        self.visible = True
        self.z_value = self.Z_VALUE
        self.accepts_hover = True
        self._default_text_color = Color(0, 0, 0)
        self.scene = getattr(parent, "scene", None)
        if self.scene is not None:
            self.scene.add_item(self)

    @property
    def default_text_color(self) -> Color:
        return self._default_text_color

    @default_text_color.setter
    def default_text_color(self, color: Color | str) -> None:
        self._default_text_color = Color.parse(color)

    def set_plain_text(self, text: str) -> None:
        self.text = text

    def set_pos(self, x: float, y: float) -> None:
        self.pos = Point(float(x), float(y))

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


class EdgeLabel(TextItem):
    """The label text drawn next to an edge."""

    TYPE = USER_TYPE + 6
    Z_VALUE = 80

    def __init__(self, edge: Any, size: int, text: str) -> None:
        super().__init__(edge, text, Font("Courier", size, FontWeight.LIGHT, True))


class EdgeWeight(TextItem):
    """The weight number drawn next to an edge."""

    TYPE = USER_TYPE + 5
    Z_VALUE = 80

    def __init__(self, edge: Any, size: int, text: str) -> None:
        super().__init__(edge, text, Font("Courier", size, FontWeight.LIGHT, True))


class NodeLabel(TextItem):
    """The label text drawn below a node."""

    TYPE = USER_TYPE + 4
    Z_VALUE = 80

    def __init__(self, node: Any, text: str, size: int) -> None:
        super().__init__(node, text, Font("Times", size, FontWeight.LIGHT, True))
        self.node = node
        self.accepts_hover = False

    def set_size(self, size: int) -> None:
        self.font = Font("Times", size, FontWeight.BLACK, False)

    def remove_refs(self) -> None:
        """Ask the owning node to drop this label."""
        self.node.delete_label()


class NodeNumber(TextItem):
    """The number drawn beside a node."""

    TYPE = USER_TYPE + 3
    Z_VALUE = 90

    def __init__(self, node: Any, text: str, size: int) -> None:
        super().__init__(node, text, Font("Times", size, FontWeight.BLACK, False))
        self.node = node
        self.accepts_hover = False

    def set_size(self, size: int) -> None:
        self.font = Font("Times", size, FontWeight.BLACK, False)

    def remove_refs(self) -> None:
        """Ask the owning node to drop this number."""
        self.node.delete_number()