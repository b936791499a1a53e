import json

import pytest

from paintboard.document import (
    DocumentError,
    dumps_shapes,
    load_shapes,
    loads_shapes,
    next_save_path,
    save_shapes,
)
from paintboard.shapes import Ellipse, Line, Rectangle, Text, Triangle


def test_round_trip_of_loadable_shapes():
    shapes = [
        Line(1.0, 2.0, 3.0, 4.0),
        Triangle(5.0, 6.0, 7.0, 8.0),
        Text(9.0, 10.0, "hello"),
        Ellipse(1.0, 1.0, 4.0, 4.0),
    ]
    assert loads_shapes(dumps_shapes(shapes)) == shapes


def test_rectangle_records_with_data_are_dropped():
    text = dumps_shapes([Rectangle(1.0, 2.0, 3.0, 4.0), Line(0.0, 0.0, 1.0, 1.0)])
    assert loads_shapes(text) == [Line(0.0, 0.0, 1.0, 1.0)]


def test_dumps_layout():
    text = dumps_shapes([Line(0.0, 0.0, 1.0, 1.0)])
    assert text.startswith('{\n    "shapes"')
    assert json.loads(text)["shapes"][0]["type"] == "line"


def test_invalid_json_raises():
    with pytest.raises(DocumentError):
        loads_shapes("{not json")


def test_non_object_root_and_missing_array():
    assert loads_shapes("[1, 2]") == []
    assert loads_shapes('{"shapes": 3}') == []


def test_unknown_and_malformed_records_skipped():
    doc = {"shapes": [{"type": "hexagon", "data": {"x": 1}}, 7, {"data": {}}]}
    assert loads_shapes(json.dumps(doc)) == []


def test_next_save_path_in_empty_directory(tmp_path):
    assert next_save_path(tmp_path) == tmp_path / "paintDraw.draw"


def test_next_save_path_appends_x(tmp_path):
    (tmp_path / "paintDraw.draw").write_text("{}")
    assert next_save_path(tmp_path).name == "paintDrawX.draw"
    (tmp_path / "paintDrawX.draw").write_text("{}")
    assert next_save_path(tmp_path).name == "paintDrawXX.draw"


def test_next_save_path_missing_directory(tmp_path):
    with pytest.raises(DocumentError):
        next_save_path(tmp_path / "absent")


def test_save_then_load(tmp_path):
    shapes = [Text(3.0, 4.0, "note"), Line(0.0, 1.0, 2.0, 3.0)]
    path = save_shapes(shapes, tmp_path)
    assert path.exists()
    assert load_shapes(path) == shapes
    second = save_shapes(shapes, tmp_path)
    assert second != path


def test_load_missing_file(tmp_path):
    with pytest.raises(DocumentError):
        load_shapes(tmp_path / "nothing.draw")