import pytest

from paintboard.shapes import Ellipse, Line, Rectangle, Text, Triangle
from paintboard.store import ShapeStore, create_from_json, get_store


@pytest.fixture
def shared_store():
    store = get_store()
    store.clear()
    yield store
    store.clear()


def test_get_store_is_shared(shared_store):
    assert get_store() is shared_store
    shared_store.add(Line(0, 0, 1, 1))
    assert len(get_store()) == 1


def test_add_keeps_order():
    store = ShapeStore()
    first = Line(0, 0, 1, 1)
    second = Text(1, 1, "a")
    store.add(first)
    store.add(second)
    assert len(store) == 2
    assert list(store) == [first, second]


def test_clear_empties_store():
    store = ShapeStore()
    store.add(Triangle(1, 2, 3, 4))
    store.clear()
    assert len(store) == 0
    assert list(store) == []


@pytest.mark.parametrize(
    "shape",
    [
        Ellipse(1.0, 2.0, 3.0, 3.0),
        Triangle(1.0, 2.0, 3.0, 4.0),
        Line(1.0, 2.0, 3.0, 4.0),
        Text(1.0, 2.0, "note"),
    ],
)
def test_create_from_json_dispatches_on_type(shape):
    loaded = create_from_json(shape.to_json())
    assert type(loaded) is type(shape)
    assert loaded == shape


def test_create_rectangle_from_empty_data():
    assert create_from_json({"type": "rectangle", "data": {}}) == Rectangle()


def test_create_rectangle_with_data_fails():
    with pytest.raises(ValueError):
        create_from_json(Rectangle(1, 2, 3, 4).to_json())


@pytest.mark.parametrize(
    "record",
    [
        {"data": {"x": 1}},
        {"type": "hexagon", "data": {"x": 1}},
        {"type": 5, "data": {"x": 1}},
        {"type": "cursor", "data": {"x": 1}},
        {"type": "line", "data": {}},
    ],
)
def test_create_from_json_rejects_bad_records(record):
    with pytest.raises(ValueError):
        create_from_json(record)