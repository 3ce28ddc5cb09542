"""Dotted guide shapes (circles or horizontal lines) drawn behind the graph."""

from __future__ import annotations

from netcanvas.geometry import Point, Rect
from netcanvas.scene import USER_TYPE, Scene


class Guide:
    """A guide circle or horizontal line placed on a scene."""

    TYPE = USER_TYPE + 7
    Z_VALUE = 10

    def __init__(
        self,
        scene: Scene,
        *,
        circle: bool,
        pos: Point,
        radius: float = 0.0,
        width: int = 0,
    ) -> None:
        self.scene = scene
        self._circle = circle
        self.pos = pos
        self.radius = float(radius)
        self.width = int(width)
        self.z_value = self.Z_VALUE
        self.visible = True
        scene.add_item(self)

    @classmethod
    def circle(cls, scene: Scene, x0: float, y0: float, radius: float) -> Guide:
        """Create a guide circle centred at (x0, y0)."""
        return cls(scene, circle=True, pos=Point(float(x0), float(y0)), radius=radius)

    @classmethod
    def horizontal(cls, scene: Scene, y0: float, width: int) -> Guide:
        """Create a horizontal guide line starting at (0, y0)."""
        return cls(scene, circle=False, pos=Point(0.0, float(y0)), width=width)

    def is_circle(self) -> bool:
        return self._circle

    def set_circle(self, center: Point, radius: float) -> None:
        self.pos = center
        self.radius = float(radius)
        self._circle = True

    def set_horizontal_line(self, origin: Point, width: int) -> None:
        self.pos = origin
        self.width = int(width)
        self._circle = False

    def bounding_rect(self) -> Rect:
        if self._circle:
            r = self.radius
            return Rect(-r - 1, -r - 1, 2 * r + 1, 2 * r + 1)
        return Rect(1, -1, self.width, 1)

    def die(self) -> None:
        """Hide the guide and take it off its scene."""
        self.visible = False
        self.scene.remove_item(self)