"""Shapes that can be placed on the drawing board, and their JSON form."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

ICON_SIZE = 15
BTN_SIZE = 46
DEFAULT_SHAPE_COLOR = (255, 182, 193)


class ShapeType(enum.IntEnum):
    """Kinds of shape the board knows how to draw."""

    UNKNOWN = 0
    RECTANGLE = 1
    ELLIPSE = 2
    TRIANGLE = 3
    LINE = 4
    TEXT = 5
    CURSOR = 6


def _data_of(record: Any) -> dict:
    """Return the ``data`` object of a record, or an empty dict if there is none."""
    if not isinstance(record, Mapping):
        return {}
    data = record.get("data")
    return dict(data) if isinstance(data, Mapping) else {}


def _number(data: Mapping, key: str) -> float:
    """Read a number field; anything that is not a number reads as 0.0."""
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _string(data: Mapping, key: str) -> str:
    """Read a string field; anything that is not a string reads as ''."""
    value = data.get(key)
    return value if isinstance(value, str) else ""


class Shape(ABC):
    """A drawable shape with a JSON representation."""

    shape_type: ClassVar[ShapeType] = ShapeType.UNKNOWN
    type_name: ClassVar[str] = ""

    @abstractmethod
    def to_json(self) -> dict:
        """Return the shape as a JSON-ready dict."""

    @classmethod
    @abstractmethod
    def from_json(cls, data: Mapping) -> "Shape":
        """Build a shape from a JSON record; raise ValueError if it is unusable."""


@dataclass
class Rectangle(Shape):
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    shape_type: ClassVar[ShapeType] = ShapeType.RECTANGLE
    type_name: ClassVar[str] = "rectangle"

    def to_json(self) -> dict:
        return {
            "type": self.type_name,
            "data": {
                "x": float(self.x),
                "y": float(self.y),
                "width": float(self.width),
                "height": float(self.height),
            },
        }

    @classmethod
    def from_json(cls, data: Mapping) -> "Rectangle":
        fields = _data_of(data)
        # A rectangle record is only accepted when its data object is empty.
        if fields:
            raise ValueError("rectangle record with data is rejected")
        return cls(
            x=_number(fields, "x"),
            y=_number(fields, "y"),
            width=_number(fields, "width"),
            height=_number(fields, "height"),
        )


@dataclass
class Ellipse(Shape):
    """Ellipse inscribed in the box at (x, y) with the two radii as its size."""

    x: float = 0.0
    y: float = 0.0
    radius1: float = 0.0
    radius2: float = 0.0

    shape_type: ClassVar[ShapeType] = ShapeType.ELLIPSE
    type_name: ClassVar[str] = "ellipse"

    def to_json(self) -> dict:
        # Both radii share one key, so the second one is what gets stored.
        return {
            "type": self.type_name,
            "data": {
                "x": float(self.x),
                "y": float(self.y),
                "radius": float(self.radius2),
            },
        }

    @classmethod
    def from_json(cls, data: Mapping) -> "Ellipse":
        fields = _data_of(data)
        if not fields:
            raise ValueError("ellipse record has no data")
        radius = _number(fields, "radius")
        return cls(
            x=_number(fields, "x"),
            y=_number(fields, "y"),
            radius1=radius,
            radius2=radius,
        )


@dataclass
class Triangle(Shape):
    """Isosceles triangle whose base starts at (x, y) and whose apex is above it."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    shape_type: ClassVar[ShapeType] = ShapeType.TRIANGLE
    type_name: ClassVar[str] = "triangle"

    def to_json(self) -> dict:
        return {
            "type": self.type_name,
            "data": {
                "x": float(self.x),
                "y": float(self.y),
                "width": float(self.width),
                "height": float(self.height),
            },
        }

    @classmethod
    def from_json(cls, data: Mapping) -> "Triangle":
        fields = _data_of(data)
        if not fields:
            raise ValueError("triangle record has no data")
        return cls(
            x=_number(fields, "x"),
            y=_number(fields, "y"),
            width=_number(fields, "width"),
            height=_number(fields, "height"),
        )


@dataclass
class Line(Shape):
    """Straight segment between two points."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    shape_type: ClassVar[ShapeType] = ShapeType.LINE
    type_name: ClassVar[str] = "line"

    def to_json(self) -> dict:
        return {
            "type": self.type_name,
            "data": {
                "x1": float(self.x1),
                "y1": float(self.y1),
                "x2": float(self.x2),
                "y2": float(self.y2),
            },
        }

    @classmethod
    def from_json(cls, data: Mapping) -> "Line":
        fields = _data_of(data)
        if not fields:
            raise ValueError("line record has no data")
        return cls(
            x1=_number(fields, "x1"),
            y1=_number(fields, "y1"),
            x2=_number(fields, "x2"),
            y2=_number(fields, "y2"),
        )


@dataclass
class Text(Shape):
    """A piece of text anchored at (x, y)."""

    x: float = 0.0
    y: float = 0.0
    content: str = ""

    shape_type: ClassVar[ShapeType] = ShapeType.TEXT
    type_name: ClassVar[str] = "text"

    def to_json(self) -> dict:
        return {
            "type": self.type_name,
            "data": {
                "x": float(self.x),
                "y": float(self.y),
                "content": self.content,
            },
        }

    @classmethod
    def from_json(cls, data: Mapping) -> "Text":
        fields = _data_of(data)
        if not fields:
            raise ValueError("text record has no data")
        return cls(
            x=_number(fields, "x"),
            y=_number(fields, "y"),
            content=_string(fields, "content"),
        )


@dataclass
class Cursor(Shape):
    """Selection cursor; it has no stored form."""

    shape_type: ClassVar[ShapeType] = ShapeType.CURSOR
    type_name: ClassVar[str] = "cursor"

    def to_json(self) -> dict:
        return {}

    @classmethod
    def from_json(cls, data: Mapping) -> "Cursor":
        raise ValueError("a cursor cannot be loaded from JSON")