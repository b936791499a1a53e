"""Drawing-board state: tools, mouse dragging, zoom, rotation and what to paint."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from paintboard.shapes import (
    Ellipse,
    Line,
    Rectangle,
    Shape,
    ShapeType,
    Text,
    Triangle,
)
from paintboard.store import ShapeStore, get_store

log = logging.getLogger(__name__)

ZOOM_FACTOR = 1.15
DEFAULT_PEN_WIDTH = 1
EMPHASIS_EXTRA_WIDTH = 5
EDITOR_WIDTH = 200
EDITOR_HEIGHT = 30


class RotateType(enum.IntEnum):
    """View rotation in quarter turns clockwise."""

    ROTATE_0 = 0
    ROTATE_90 = 1
    ROTATE_180 = 2
    ROTATE_270 = 3


@dataclass(frozen=True)
class DrawItem:
    """One painting primitive.

    ``kind`` is ``"rect"`` or ``"ellipse"`` (coords are x, y, width, height),
    ``"line"`` (x1, y1, x2, y2) or ``"text"`` (x, y, with ``text`` set).
    """

    kind: str
    coords: tuple
    text: str = ""
    pen_width: int = DEFAULT_PEN_WIDTH


def _near_square(dx: float, dy: float) -> bool:
    return abs(dy - dx) < 3


class Board:
    """The drawing area: turns mouse input into shapes and shapes into paint items."""

    def __init__(self, store: Optional[ShapeStore] = None) -> None:
        self.store = store if store is not None else get_store()
        self.shape_type = ShapeType.UNKNOWN
        self.button_down = False
        self.is_drawing = False
        self.click_point: tuple[float, float] = (0.0, 0.0)
        self.move_point: tuple[float, float] = (0.0, 0.0)
        self.scaling = 1.0
        self.rotation = RotateType.ROTATE_0
        self.text_anchor: Optional[tuple[float, float, int, int]] = None

    def set_shape_type(self, shape_type: ShapeType) -> None:
        """Choose the tool used by the next drag."""
        self.shape_type = ShapeType(shape_type)

    def rotate_left(self) -> RotateType:
        """Turn the view a quarter turn counter-clockwise."""
        self.rotation = RotateType((self.rotation - 1) % 4)
        return self.rotation

    def rotate_right(self) -> RotateType:
        """Turn the view a quarter turn clockwise."""
        self.rotation = RotateType((self.rotation + 1) % 4)
        return self.rotation

    def reset(self) -> None:
        """Restore unit zoom and the unrotated view."""
        self.scaling = 1.0
        while self.rotation != RotateType.ROTATE_0:
            self.rotate_left()

    def clear(self) -> None:
        """Remove every shape from the board."""
        self.store.clear()

    def zoom_in(self) -> float:
        self.scaling *= ZOOM_FACTOR
        return self.scaling

    def zoom_out(self) -> float:
        self.scaling /= ZOOM_FACTOR
        return self.scaling

    def wheel(self, delta: float) -> float:
        """Zoom in for a positive wheel delta, out otherwise."""
        return self.zoom_in() if delta > 0 else self.zoom_out()

    def physical_to_logical(self, x: float, y: float) -> tuple[float, float]:
        return (x / self.scaling, y / self.scaling)

    def logical_to_physical(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.scaling, y * self.scaling)

    def press(self, x: float, y: float) -> None:
        """Start a drag at a physical position."""
        self.button_down = True
        self.click_point = self.physical_to_logical(x, y)

    def move(self, x: float, y: float) -> None:
        """Follow the mouse while the button is held."""
        if not self.button_down:
            return
        if self.shape_type not in (ShapeType.UNKNOWN, ShapeType.CURSOR):
            self.is_drawing = True
        self.move_point = self.physical_to_logical(x, y)

    def release(self, x: float, y: float) -> Optional[Shape]:
        """Finish a drag; return the shape added to the store, if any.

        With the text tool nothing is added; instead ``text_anchor`` is set to
        the physical geometry (x, y, width, height) where text entry opens.
        """
        self.button_down = False
        self.move_point = self.physical_to_logical(x, y)
        self.is_drawing = False
        (cx, cy), (mx, my) = self.click_point, self.move_point
        dx, dy = mx - cx, my - cy
        shape: Optional[Shape] = None
        if self.shape_type == ShapeType.RECTANGLE:
            shape = Rectangle(float(int(min(cx, mx))), float(int(min(cy, my))), abs(dx), abs(dy))
        elif self.shape_type == ShapeType.ELLIPSE:
            shape = Ellipse(float(int(min(cx, mx))), float(int(min(cy, my))), abs(dx), abs(dy))
        elif self.shape_type == ShapeType.TRIANGLE:
            shape = Triangle(float(int(min(cx, mx))), float(int(max(cy, my))), abs(dx), abs(dy))
        elif self.shape_type == ShapeType.LINE:
            shape = Line(cx, cy, mx, my)
        elif self.shape_type == ShapeType.TEXT:
            px, py = self.logical_to_physical(mx, my)
            self.text_anchor = (px, py, EDITOR_WIDTH, EDITOR_HEIGHT)
        if shape is not None:
            self.store.add(shape)
        return shape

    def receive_content(self, text: str) -> Text:
        """Place entered text at the last release point."""
        item = Text(self.move_point[0], self.move_point[1], text)
        self.store.add(item)
        self.text_anchor = None
        return item

    def transform(self, width: float, height: float) -> tuple[float, float, float, int]:
        """Return (scale, translate_x, translate_y, angle) applied before painting."""
        offsets = {
            RotateType.ROTATE_0: (0.0, 0.0),
            RotateType.ROTATE_90: (float(width), 0.0),
            RotateType.ROTATE_180: (float(width), float(height)),
            RotateType.ROTATE_270: (0.0, float(height)),
        }
        tx, ty = offsets[self.rotation]
        return (self.scaling, tx, ty, int(self.rotation) * 90)

    def draw_items(self) -> list[DrawItem]:
        """Paint items for every stored shape, in drawing order."""
        items: list[DrawItem] = []
        for shape in self.store:
            if isinstance(shape, Rectangle):
                items.append(DrawItem("rect", (shape.x, shape.y, shape.width, shape.height)))
            elif isinstance(shape, Ellipse):
                items.append(
                    DrawItem(
                        "ellipse",
                        (int(shape.x), int(shape.y), int(shape.radius1), int(shape.radius2)),
                    )
                )
            elif isinstance(shape, Triangle):
                p1 = (shape.x, shape.y)
                p2 = (shape.x + shape.width, shape.y)
                p3 = (shape.x + shape.width / 2.0, shape.y - shape.height)
                items.extend(DrawItem("line", a + b) for a, b in ((p1, p2), (p2, p3), (p3, p1)))
            elif isinstance(shape, Line):
                items.append(
                    DrawItem("line", (int(shape.x1), int(shape.y1), int(shape.x2), int(shape.y2)))
                )
            elif isinstance(shape, Text):
                items.append(DrawItem("text", (shape.x, shape.y), text=shape.content))
            else:
                log.warning("Unhandled shape type or type mismatch")
        return items

    def preview_items(self) -> list[DrawItem]:
        """Paint items for the outline of the shape being dragged."""
        (cx, cy), (mx, my) = self.click_point, self.move_point
        dx, dy = mx - cx, my - cy
        width = DEFAULT_PEN_WIDTH
        if self.is_drawing and _near_square(dx, dy):
            width += EMPHASIS_EXTRA_WIDTH
        if self.shape_type == ShapeType.RECTANGLE:
            return [DrawItem("rect", (cx, cy, dx, dy), pen_width=width)]
        if self.shape_type == ShapeType.ELLIPSE:
            return [DrawItem("ellipse", (cx, cy, dx, dy), pen_width=width)]
        if self.shape_type == ShapeType.TRIANGLE:
            x1 = float(int(min(cx, mx)))
            y1 = float(int(max(cy, my)))
            right = (x1 + abs(dx), y1)
            apex = (x1 + abs(dx) / 2.0, y1 - abs(dy))
            left = (x1, y1)
            return [
                DrawItem("line", left + right, pen_width=width),
                DrawItem("line", left + apex, pen_width=width),
                DrawItem("line", apex + right, pen_width=width),
            ]
        if self.shape_type == ShapeType.LINE:
            return [DrawItem("line", (int(cx), int(cy), int(mx), int(my)))]
        return []