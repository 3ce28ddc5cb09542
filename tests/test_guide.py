from netcanvas.geometry import Point, Rect
from netcanvas.guide import Guide
from netcanvas.scene import Scene


def test_circle_guide():
    scene = Scene()
    guide = Guide.circle(scene, 40, 50, 10)
    assert guide.is_circle()
    assert guide.pos == Point(40, 50)
    assert guide.radius == 10
    assert guide.z_value == 10
    assert guide in scene


def test_circle_bounding_rect():
    guide = Guide.circle(Scene(), 0, 0, 10)
    assert guide.bounding_rect() == Rect(-11.0, -11.0, 21.0, 21.0)


def test_horizontal_guide():
    scene = Scene()
    guide = Guide.horizontal(scene, 30, 120)
    assert not guide.is_circle()
    assert guide.pos == Point(0, 30)
    assert guide.width == 120
    assert guide.bounding_rect() == Rect(1, -1, 120, 1)


def test_switching_between_shapes():
    guide = Guide.horizontal(Scene(), 5, 80)
    guide.set_circle(Point(7, 8), 25)
    assert guide.is_circle()
    assert guide.pos == Point(7, 8)
    assert guide.radius == 25
    guide.set_horizontal_line(Point(0, 9), 60)
    assert not guide.is_circle()
    assert guide.bounding_rect() == Rect(1, -1, 60, 1)


def test_die_removes_from_scene():
    scene = Scene()
    guide = Guide.circle(scene, 1, 2, 3)
    guide.die()
    assert guide not in scene
    assert guide.visible is False
    assert len(scene) == 0