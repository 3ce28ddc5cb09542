import pytest

from netcanvas.geometry import ElementKind, FillRule, Rect
from netcanvas.shapes import (
    NumberLayout,
    default_icon_path,
    inside_number_layout,
    is_icon_shape,
    node_path,
)


def test_circle_bounds_match_diameter():
    rect = node_path("circle", 10).control_point_rect()
    assert rect.left == pytest.approx(-10)
    assert rect.top == pytest.approx(-10)
    assert rect.width == pytest.approx(20)
    assert rect.height == pytest.approx(20)


def test_ellipse_is_shorter_than_wide():
    rect = node_path("ellipse", 10).control_point_rect()
    assert rect.width == pytest.approx(20)
    assert rect.height == pytest.approx(1.7 * 10)


@pytest.mark.parametrize("shape", ["box", "rectangle", "square"])
def test_box_shapes_share_outline(shape):
    rect = node_path(shape, 10).control_point_rect()
    assert rect == Rect(-10, -10, 1.8 * 10, 1.8 * 10)
    assert node_path(shape, 10).elements == node_path("box", 10).elements


def test_round_rectangle_stays_within_box():
    rect = node_path("roundrectangle", 10).control_point_rect()
    box = node_path("box", 10).control_point_rect()
    assert rect.left == pytest.approx(box.left)
    assert rect.right == pytest.approx(box.right)
    assert rect.top == pytest.approx(box.top)
    assert rect.bottom == pytest.approx(box.bottom)
    kinds = {e.kind for e in node_path("roundrectangle", 10).elements}
    assert ElementKind.CURVE_TO in kinds


def test_triangle_vertices():
    path = node_path("triangle", 10)
    rect = path.control_point_rect()
    assert rect.left == pytest.approx(-10)
    assert rect.right == pytest.approx(10)
    assert rect.top == pytest.approx(-10)
    assert rect.bottom == pytest.approx(0.95 * 10)
    assert path.elements[0].point == path.elements[-1].point


def test_star_uses_winding_fill_and_two_subpaths():
    path = node_path("star", 10)
    assert path.fill_rule is FillRule.WINDING
    moves = [e for e in path.elements if e.kind is ElementKind.MOVE_TO]
    assert len(moves) == 2


def test_other_shapes_use_default_fill_rule():
    assert node_path("circle", 5).fill_rule is FillRule.ODD_EVEN


def test_diamond_is_symmetric():
    rect = node_path("diamond", 7).control_point_rect()
    assert rect.left == pytest.approx(-rect.right)
    assert rect.top == pytest.approx(-rect.bottom)
    assert rect.width == pytest.approx(14)


@pytest.mark.parametrize("shape", ["custom", "bugs", "heart", "dice", "person", "person-b"])
def test_icon_shapes_use_full_square(shape):
    rect = node_path(shape, 8).control_point_rect()
    assert rect == Rect(-8, -8, 16, 16)


def test_unknown_shape_falls_back_to_circle():
    assert node_path("hexagon", 12).elements == node_path("circle", 12).elements


def test_default_icon_paths():
    assert default_icon_path("person") == ":/images/person.svg"
    assert default_icon_path("bugs") == ":/images/bugs.png"
    assert default_icon_path("heart") == ":/images/heart.svg"
    assert default_icon_path("dice") == ":/images/random.png"


@pytest.mark.parametrize("shape", ["person-b", "custom", "circle", "star"])
def test_no_default_icon(shape):
    assert default_icon_path(shape) == ""


@pytest.mark.parametrize(
    "shape, expected",
    [
        ("custom", True),
        ("person", True),
        ("person-b", True),
        ("bugs", True),
        ("heart", True),
        ("dice", True),
        ("circle", False),
        ("diamond", False),
        ("Person", False),
    ],
)
def test_is_icon_shape(shape, expected):
    assert is_icon_shape(shape) is expected


def test_layout_text_is_number():
    layout = inside_number_layout(1234, 30, 0)
    assert isinstance(layout, NumberLayout)
    assert layout.text == "1234"
    assert layout.family == "Sans Serif"


@pytest.mark.parametrize("number", [1000, 100])
def test_wide_numbers_shrink_fixed_font(number):
    assert inside_number_layout(number, 20, 8).font_size == 8 - 1


@pytest.mark.parametrize("number", [10, 5])
def test_narrow_numbers_keep_fixed_font(number):
    assert inside_number_layout(number, 20, 8).font_size == 8


def test_wider_numbers_shift_left():
    xs = [inside_number_layout(n, 30, 0).x for n in (1000, 100, 10, 5)]
    assert xs == sorted(xs)
    assert len(set(xs)) == 4


def test_auto_font_grows_with_node_size():
    small = inside_number_layout(5, 10, 0).font_size
    large = inside_number_layout(5, 40, 0).font_size
    assert large > small


def test_auto_font_shrinks_for_wide_numbers():
    assert inside_number_layout(1000, 30, 0).font_size < inside_number_layout(5, 30, 0).font_size


def test_vertical_offset_is_third_of_size():
    assert inside_number_layout(5, 9, 0).y == 3
    assert inside_number_layout(1000, 9, 4).y == inside_number_layout(5, 9, 0).y