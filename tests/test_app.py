import pytest

from paintboard.app import (
    ARROW_AREA_WIDTH,
    ARROW_SIZE,
    OPERATION_BUTTONS,
    mouse_in_arrow_area,
    toolbar_geometry,
)
from paintboard.shapes import BTN_SIZE, ICON_SIZE


@pytest.mark.parametrize("arrow_y", [0, 66, 120.5])
def test_arrow_area_accepts_inclusive_bounds(arrow_y):
    assert mouse_in_arrow_area(0, arrow_y, arrow_y) is True
    assert mouse_in_arrow_area(ARROW_AREA_WIDTH, arrow_y, arrow_y) is True
    assert mouse_in_arrow_area(ARROW_AREA_WIDTH, arrow_y + ARROW_SIZE, arrow_y) is True


@pytest.mark.parametrize("arrow_y", [0, 66])
def test_arrow_area_rejects_outside(arrow_y):
    assert mouse_in_arrow_area(ARROW_AREA_WIDTH + 1, arrow_y + 1, arrow_y) is False
    assert mouse_in_arrow_area(10, arrow_y - 1, arrow_y) is False
    assert mouse_in_arrow_area(10, arrow_y + ARROW_SIZE + 1, arrow_y) is False


def test_arrow_area_allows_negative_x():
    assert mouse_in_arrow_area(-5, 70, 66) is True


def test_toolbar_has_every_operation_and_close():
    geometry = toolbar_geometry(800)
    assert set(geometry) == set(OPERATION_BUTTONS) | {"close"}


def test_toolbar_first_button_at_origin():
    assert toolbar_geometry(800)["reset"] == (0, 0, BTN_SIZE, BTN_SIZE)


def test_toolbar_buttons_are_adjacent_squares():
    geometry = toolbar_geometry(640)
    boxes = [geometry[name] for name in OPERATION_BUTTONS]
    for (x0, y0, w0, h0), (x1, y1, w1, h1) in zip(boxes, boxes[1:]):
        assert x1 == x0 + w0
        assert y0 == y1 == 0
        assert w0 == h0 == w1 == h1 == BTN_SIZE


def test_toolbar_order_matches_source_layout():
    geometry = toolbar_geometry(800)
    xs = {name: geometry[name][0] for name in OPERATION_BUTTONS}
    assert xs["clear"] < xs["save"] < xs["load"]
    assert xs["zoom_out"] < xs["clear"]


@pytest.mark.parametrize("width", [300, 800, 1920])
def test_close_button_follows_window_width(width):
    x, y, w, h = toolbar_geometry(width)["close"]
    assert x == width - ICON_SIZE * 2
    assert y == ICON_SIZE - 10
    assert (w, h) == (20, 20)


def test_operation_buttons_do_not_depend_on_width():
    narrow = toolbar_geometry(200)
    wide = toolbar_geometry(2000)
    for name in OPERATION_BUTTONS:
        assert narrow[name] == wide[name]