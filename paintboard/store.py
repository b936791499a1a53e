"""The shared collection of shapes on the board, and loading shapes by type."""

from __future__ import annotations

import functools
from collections.abc import Iterator, Mapping
from typing import Any

from paintboard.shapes import Ellipse, Line, Rectangle, Shape, Text, Triangle

_LOADABLE: dict[str, type[Shape]] = {
    cls.type_name: cls for cls in (Rectangle, Ellipse, Triangle, Line, Text)
}


class ShapeStore:
    """An ordered collection of shapes, in drawing order."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []

    def add(self, shape: Shape) -> None:
        """Append a shape on top of the others."""
        self._shapes.append(shape)

    def clear(self) -> None:
        """Remove every shape."""
        self._shapes.clear()

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __len__(self) -> int:
        return len(self._shapes)


@functools.lru_cache(maxsize=None)
def get_store() -> ShapeStore:
    """Return the store shared by the whole application."""
    return ShapeStore()


def create_from_json(data: Mapping[str, Any]) -> Shape:
    """Build a shape from a record with a ``type`` field; raise ValueError if it cannot be."""
    if not isinstance(data, Mapping) or "type" not in data:
        raise ValueError("shape record has no type")
    type_name = data["type"]
    if not isinstance(type_name, str):
        type_name = ""
    try:
        cls = _LOADABLE[type_name]
    except KeyError:
        raise ValueError(f"unknown shape type: {type_name!r}") from None
    return cls.from_json(data)