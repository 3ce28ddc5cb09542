"""Nodes drawn on the canvas, with their numbers, labels and attached edges."""

from __future__ import annotations

from typing import Optional, Protocol

from netcanvas.geometry import Color, PainterPath, Point, Rect
from netcanvas.scene import USER_TYPE, Scene
from netcanvas.shapes import (
    NumberLayout,
    default_icon_path,
    inside_number_layout,
    is_icon_shape,
    node_path,
)
from netcanvas.texts import NodeLabel, NodeNumber

_CUSTOM_SHAPE = "custom"


class EdgeLike(Protocol):
    """What a node needs from the edges attached to it."""

    def set_source_node_size(self, size: int) -> None: ...

    def set_target_node_size(self, size: int) -> None: ...

    def adjust(self) -> None: ...

    def set_highlighted(self, flag: bool) -> None: ...

    def remove(self) -> None: ...


class GraphicsNode:
    """A node item: a shape or icon, an optional number and label, and its edges.

    Each node keeps the edges that point to it and the edges that leave it,
    and tells them when it moves or changes size.
    """

    TYPE = USER_TYPE + 1
    Z_VALUE = 100
    Z_VALUE_HIGHLIGHTED = 110
    NUMBER_Z_VALUE = NodeNumber.Z_VALUE
    OUTLINE_COLOR = Color(0, 0, 0, 50)

    def __init__(
        self,
        scene: Scene,
        num: int,
        size: int = 8,
        color: str = "red",
        shape: str = "circle",
        icon_path: str = "",
        show_numbers: bool = True,
        numbers_inside: bool = False,
        number_color: str = "#333333",
        number_size: int = 7,
        number_distance: int = 2,
        show_labels: bool = False,
        label: str = "",
        label_color: str = "#8d8d8d",
        label_size: int = 7,
        label_distance: int = 6,
        edge_highlighting: bool = True,
        pos: Point = Point(),
    ) -> None:
        self.scene = scene
        scene.add_item(self)

        self.num = num
        self.size = size
        self.shape = shape
        self.icon_path = icon_path
        self._color = Color.parse(color)
        self._color_orig = self._color
        self._size_orig = size

        self.has_number = show_numbers
        self.has_number_inside = numbers_inside
        self.number_size = number_size
        self.number_color = number_color
        self.number_distance = number_distance

        self.has_label = show_labels
        self.label_text = label
        self.label_size = label_size
        self.label_color = label_color
        self.label_distance = label_distance

        self._in_edges: list[EdgeLike] = []
        self._out_edges: list[EdgeLike] = []
        self._label: Optional[NodeLabel] = None
        self._number: Optional[NodeNumber] = None
        self._path = PainterPath()

        self.pos = Point()
        self.visible = True
        self.selected = False
        self.accepts_hover = True

        if self.has_label:
            self.add_label()
        if not self.has_number_inside and self.has_number:
            self.add_number()

        self.edge_highlighting = edge_highlighting
        self.z_value = self.Z_VALUE
        self.set_shape(self.shape, self.icon_path)
        self.set_pos(pos.x, pos.y)

    # -- edges ---------------------------------------------------------------

    @property
    def in_edges(self) -> tuple[EdgeLike, ...]:
        return tuple(self._in_edges)

    @property
    def out_edges(self) -> tuple[EdgeLike, ...]:
        return tuple(self._out_edges)

    def add_in_edge(self, edge: EdgeLike) -> None:
        self._in_edges.append(edge)

    def remove_in_edge(self, edge: EdgeLike) -> None:
        self._in_edges = [e for e in self._in_edges if e is not edge]

    def add_out_edge(self, edge: EdgeLike) -> None:
        self._out_edges.append(edge)

    def remove_out_edge(self, edge: EdgeLike) -> None:
        self._out_edges = [e for e in self._out_edges if e is not edge]

    # -- position, size, shape, colour ----------------------------------------

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    def set_pos(self, x: float, y: float) -> None:
        """Move the node and bring its edges, number and label along."""
        new_pos = Point(float(x), float(y))
        if new_pos == self.pos:
            return
        self.pos = new_pos
        for edge in list(self._in_edges):
            edge.adjust()
        for edge in list(self._out_edges):
            edge.adjust()
        if self.has_number and not self.has_number_inside and self._number is not None:
            self._number.z_value = self.NUMBER_Z_VALUE
            self._number.set_pos(self.size + self.number_distance, 0)
        if self.has_label and self._label is not None:
            self._label.set_pos(-self.size, self.label_distance + self.size)

    def set_size(self, size: int) -> None:
        """Resize the node and tell the attached edges about it."""
        self.size = size
        for edge in list(self._in_edges):
            edge.set_target_node_size(size)
        for edge in list(self._out_edges):
            edge.set_source_node_size(size)
        self.set_shape(self.shape)

    def set_shape(self, shape: str, icon_path: str = "") -> None:
        """Change the shape and rebuild the outline.

        An empty icon path keeps the current icon, or picks the built-in one
        for shapes that have it.
        """
        self.shape = shape
        if is_icon_shape(shape):
            if icon_path:
                self.icon_path = icon_path
            elif shape != _CUSTOM_SHAPE:
                builtin = default_icon_path(shape)
                if builtin:
                    self.icon_path = builtin
        self._path = node_path(shape, self.size)

    @property
    def path(self) -> PainterPath:
        """The outline of the node in local coordinates."""
        return self._path

    def bounding_rect(self) -> Rect:
        return self._path.control_point_rect()

    def set_color(self, color: str | Color) -> None:
        """Set the node colour, which is also the colour restored after selection."""
        self._color = Color.parse(color)
        self._color_orig = self._color

    def set_display_color(self, color: str | Color) -> None:
        """Set the colour shown now, leaving the colour to restore untouched."""
        self._color = Color.parse(color)

    @property
    def color(self) -> str:
        """The current colour as '#rrggbb'."""
        return self._color.name()

    def fill_color(self, hovered: bool = False) -> Color:
        """The brush colour used to paint the node."""
        return self._color.darker(120) if hovered else self._color

    def number_layout(self) -> Optional[NumberLayout]:
        """Where the number goes when it is drawn inside the node, if it is."""
        if self.has_number and self.has_number_inside:
            return inside_number_layout(self.num, self.size, self.number_size)
        return None

    # -- selection -----------------------------------------------------------

    def set_selected(self, selected: bool) -> None:
        """Select or deselect: a selected node grows, darkens and highlights its edges."""
        selected = bool(selected)
        if selected == self.selected:
            return
        self.selected = selected
        if selected:
            self.z_value = self.Z_VALUE_HIGHLIGHTED
            self._size_orig = self.size
            self.set_size(self.size * 2 - 1)
            self._color_orig = self._color
            self.set_display_color(self._color.darker(120))
        else:
            self.z_value = self.Z_VALUE
            self.set_size(self._size_orig)
            self.set_display_color(self._color_orig)
        if self.edge_highlighting:
            for edge in list(self._in_edges):
                edge.set_highlighted(selected)
            for edge in list(self._out_edges):
                edge.set_highlighted(selected)

    def set_edge_highlighting(self, toggle: bool) -> None:
        self.edge_highlighting = bool(toggle)

    # -- label ---------------------------------------------------------------

    def add_label(self) -> None:
        """Create a fresh label item for this node."""
        if self._label is not None:
            self.scene.remove_item(self._label)
        self._label = NodeLabel(self, self.label_text, self.label_size)
        self._label.default_text_color = self.label_color
        self._label.set_pos(self.size, self.label_distance + self.size)
        self.has_label = True

    def label(self) -> NodeLabel:
        """Return the label item, creating it if there is none."""
        if not self.has_label or self._label is None:
            self.add_label()
        assert self._label is not None
        return self._label

    def delete_label(self) -> None:
        if self.has_label and self._label is not None:
            self.has_label = False
            self._label.hide()
            self.scene.remove_item(self._label)
            self._label = None

    def set_label_text(self, text: str) -> None:
        self.label_text = text
        if self.has_label and self._label is not None:
            self._label.set_plain_text(text)
        else:
            self.add_label()
        self.has_label = True

    def set_label_color(self, color: str) -> None:
        self.label_color = color
        if self.has_label and self._label is not None:
            self._label.default_text_color = color
        else:
            self.add_label()
        self.has_label = True

    def set_label_visibility(self, toggle: bool) -> None:
        if toggle:
            if self.has_label and self._label is not None:
                self._label.show()
            else:
                self.add_label()
        elif self.has_label and self._label is not None:
            self._label.hide()
        self.has_label = bool(toggle)

    def set_label_size(self, size: int) -> None:
        self.label_size = size
        self.label().set_size(size)

    def set_label_distance(self, distance: int) -> None:
        self.label_distance = distance
        self.label().set_pos(-self.size, self.size + distance)

    # -- number --------------------------------------------------------------

    def add_number(self) -> None:
        """Create a number item drawn beside (outside) the node."""
        self.has_number = True
        self.has_number_inside = False
        if self._number is not None:
            self.scene.remove_item(self._number)
        self._number = NodeNumber(self, str(self.num), self.number_size)
        self._number.default_text_color = self.number_color
        self._number.set_pos(self.size + self.number_distance, 0)

    @property
    def number(self) -> Optional[NodeNumber]:
        """The outside number item, if there is one."""
        return self._number

    def delete_number(self) -> None:
        if self.has_number and not self.has_number_inside and self._number is not None:
            self._number.hide()
            self.scene.remove_item(self._number)
            self._number = None
            self.has_number = False

    def set_number_visibility(self, toggle: bool) -> None:
        if toggle:
            if not self.has_number:
                self.has_number = True
                if not self.has_number_inside:
                    self.add_number()
                else:
                    self.set_shape(self.shape)
        else:
            self.delete_number()
            self.has_number = False
            self.set_shape(self.shape)

    def set_number_inside(self, toggle: bool) -> None:
        if toggle:
            self.delete_number()
        else:
            self.add_number()
        self.has_number = True
        self.has_number_inside = bool(toggle)
        self.set_shape(self.shape)

    def set_number_size(self, size: int) -> None:
        self.number_size = size
        if self.has_number and not self.has_number_inside and self._number is not None:
            self._number.set_size(size)
        elif self.has_number and self.has_number_inside:
            self.set_shape(self.shape)

    def set_number_color(self, color: str) -> None:
        self.number_color = color
        if self.has_number:
            if self.has_number_inside:
                self.set_shape(self.shape)
            elif self._number is not None:
                self._number.default_text_color = color

    def set_number_distance(self, distance: int) -> None:
        self.number_distance = distance
        if self.has_number and not self.has_number_inside and self._number is not None:
            self._number.set_pos(self.size + distance, 0)

    # -- removal -------------------------------------------------------------

    def remove(self) -> None:
        """Remove the node, its edges, number and label from the scene."""
        for edge in list(self._in_edges):
            edge.remove()
        for edge in list(self._out_edges):
            edge.remove()
        if self.has_number:
            self.delete_number()
        if self.has_label:
            self.delete_label()
        self._in_edges.clear()
        self._out_edges.clear()
        self.visible = False
        self.scene.remove_item(self)