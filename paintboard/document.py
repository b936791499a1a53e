"""Saving and loading drawings as ``.draw`` JSON documents."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from paintboard.shapes import Shape
from paintboard.store import create_from_json

BASE_NAME = "paintDraw"
SUFFIX = ".draw"


class DocumentError(Exception):
    """A drawing document could not be written or read."""


def dumps_shapes(shapes: Iterable[Shape]) -> str:
    """Return the JSON document holding the given shapes."""
    return json.dumps({"shapes": [shape.to_json() for shape in shapes]}, indent=4, ensure_ascii=False)


def loads_shapes(text: str | bytes) -> list[Shape]:
    """Parse a document; records that cannot be turned into shapes are skipped."""
    try:
        root = json.loads(text)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DocumentError("json parse error") from exc
    if not isinstance(root, Mapping):
        return []
    records = root.get("shapes")
    if not isinstance(records, list):
        return []
    shapes: list[Shape] = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        try:
            shapes.append(create_from_json(record))
        except ValueError:
            continue
    return shapes


def next_save_path(directory: str | os.PathLike) -> Path:
    """Return a fresh ``paintDraw...draw`` path in the directory."""
    folder = Path(directory)
    if not folder.is_dir():
        raise DocumentError(f"directory does not exist: {folder}")
    name = BASE_NAME
    for entry in sorted(os.listdir(folder), key=str.lower):
        if entry.split(".", 1)[0] == name:
            name += "X"
    return folder / f"{name}{SUFFIX}"


def save_shapes(shapes: Iterable[Shape], directory: str | os.PathLike) -> Path:
    """Write the shapes to a new document in the directory and return its path."""
    path = next_save_path(directory)
    try:
        path.write_text(dumps_shapes(shapes), encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"cannot write {path}") from exc
    return path


def load_shapes(path: str | os.PathLike) -> list[Shape]:
    """Read the shapes stored in a document file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise DocumentError(f"file does not exist or cannot be read: {path}") from exc
    return loads_shapes(data)