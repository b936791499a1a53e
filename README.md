# paintboard

A small drawing board for simple vector shapes. Pick a tool, drag on the
canvas, and the shape is added to the drawing. Drawings can be saved to and
loaded from `.draw` files, which are plain JSON. The window is built on
tkinter from the standard library; nothing else needs to be installed.

## Features

- Shapes: rectangle, ellipse, triangle, straight line and text. With the text
  tool, releasing the mouse opens a one-line entry; Return places the text,
  Escape or leaving the entry discards it.
- While dragging, a preview of the shape follows the pointer; when the drag is
  nearly square the preview outline is drawn thicker.
- View controls: zoom in and out (by a factor of 1.15, also with the mouse
  wheel), rotate left or right in 90° steps, reset the view, clear the board.
- Save the drawing into a chosen directory as `paintDraw.draw` (an `X` is
  appended to the name while it is already taken), and load any `.draw` file;
  loaded shapes are added to those already on the board.
- The shape tools sit in a side panel that slides out when the pointer reaches
  the arrow at the left edge of the window.

## Running

Install the package and start the application:

```
pip install .
paintboard
```

The command calls `paintboard.app.main`, which opens `MainWindow` and runs
until the window is closed.

## Using it as a library

The drawing model works without a window:

```python
from paintboard.board import Board
from paintboard.shapes import ShapeType
from paintboard.document import dumps_shapes, loads_shapes

board = Board()
board.set_shape_type(ShapeType.LINE)
board.press(10, 10)
board.move(60, 40)
shape = board.release(60, 40)   # the Line added to board.store

text = dumps_shapes(board.store)
shapes = loads_shapes(text)
```

Modules:

- `paintboard.shapes` — `ShapeType` and the shape dataclasses `Rectangle`,
  `Ellipse`, `Triangle`, `Line`, `Text` and `Cursor`, each with `to_json()`
  and the class method `from_json(data)`, which raises `ValueError` for an
  unusable record.
- `paintboard.store` — `ShapeStore` (ordered, with `add`, `clear`, iteration
  and `len`), `get_store()` for the store shared by the application, and
  `create_from_json(record)`, which picks the shape class from the record's
  `type` field and raises `ValueError` when the type is missing or unknown or
  the data is unusable.
- `paintboard.board` — `Board`, which turns press/move/release input into
  shapes, keeps zoom (`scaling`) and `RotateType` rotation, and gives paint
  primitives as `DrawItem`s through `draw_items()` and `preview_items()`;
  `transform(width, height)` returns the scale, translation and angle to apply.
- `paintboard.document` — `dumps_shapes`, `loads_shapes`, `next_save_path`,
  `save_shapes` and `load_shapes`; failures to parse, read or write raise
  `DocumentError`. `loads_shapes` skips records it cannot turn into shapes.
- `paintboard.app` — the tkinter window (`MainWindow`, `DrawCanvas`,
  `ContentEditor`) and the helpers `mouse_in_arrow_area` and
  `toolbar_geometry`.

## File format

A `.draw` file is a JSON object with a `shapes` list; each entry has the form
`{"type": "<name>", "data": {...}}`:

- `rectangle`: `x`, `y`, `width`, `height`
- `ellipse`: `x`, `y`, `radius`
- `triangle`: `x`, `y`, `width`, `height`
- `line`: `x1`, `y1`, `x2`, `y2`
- `text`: `x`, `y`, `content`

Known limits of the format as implemented:

- An ellipse stores a single `radius` (its second radius), so on loading both
  radii take that value and a non-circular ellipse comes back circular.
- `Rectangle.from_json` accepts only a record whose `data` is empty, so saved
  rectangles, which always carry data, are skipped when a file is loaded.
- `Cursor` has no stored form and cannot be loaded.

## What it does not do

There is no undo, no selection or editing of placed shapes, and no choice of
colour, pen width or font: every shape is drawn with the same pink pen.

## Tests

```
pip install .[test]
pytest
```