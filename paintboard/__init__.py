"""A small vector drawing board: shapes, board model, .draw JSON documents and a tkinter window."""

__version__ = "0.1.0"