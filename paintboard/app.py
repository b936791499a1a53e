"""Desktop window for the drawing board, built on tkinter."""

from __future__ import annotations

import os
from typing import Callable, Optional

from paintboard.board import Board, DrawItem
from paintboard.document import DocumentError, next_save_path, save_shapes, load_shapes
from paintboard.shapes import BTN_SIZE, DEFAULT_SHAPE_COLOR, ICON_SIZE, ShapeType
from paintboard.store import ShapeStore, get_store

ARROW_AREA_WIDTH = 50
ARROW_SIZE = 30
ARROW_Y = BTN_SIZE + 20
PANEL_Y = BTN_SIZE + 2
PANEL_MARGIN = 3
PANEL_SPACING = 2
ANIMATION_MS = 300
ANIMATION_TICK_MS = 15
CLOSE_SIZE = 20

WINDOW_BACKGROUND = "#ffb6c1"
BUTTON_BACKGROUND = "#FFCCFF"
BUTTON_FOREGROUND = "#0066FF"
BUTTON_HOVER = "red"
PEN_COLOR = "#{:02x}{:02x}{:02x}".format(*DEFAULT_SHAPE_COLOR)
FONT_FAMILY = "KaiTi"
FONT_SIZE = 12

OPERATION_BUTTONS = (
    "reset",
    "rotate_left",
    "rotate_right",
    "zoom_in",
    "zoom_out",
    "clear",
    "save",
    "load",
)

_OPERATION_LABELS = {
    "reset": "Reset",
    "rotate_left": "Rotate L",
    "rotate_right": "Rotate R",
    "zoom_in": "Zoom in",
    "zoom_out": "Zoom out",
    "clear": "Clear",
    "save": "Save",
    "load": "Load",
}

_SHAPE_TOOLS = (
    ("Rect", ShapeType.RECTANGLE),
    ("Ellipse", ShapeType.ELLIPSE),
    ("Triangle", ShapeType.TRIANGLE),
    ("Line", ShapeType.LINE),
    ("Text", ShapeType.TEXT),
)

# cos, sin for rotations in quarter turns (clockwise on a y-down screen).
_ROTATION = {0: (1, 0), 90: (0, 1), 180: (-1, 0), 270: (0, -1)}


def mouse_in_arrow_area(x: float, y: float, arrow_y: float) -> bool:
    """Whether a window position lies in the strip that reveals the shape panel."""
    return x <= ARROW_AREA_WIDTH and arrow_y <= y <= arrow_y + ARROW_SIZE


def toolbar_geometry(width: int) -> dict[str, tuple[int, int, int, int]]:
    """Return (x, y, width, height) of each toolbar button for a window width."""
    geometry = {
        name: (BTN_SIZE * index, 0, BTN_SIZE, BTN_SIZE)
        for index, name in enumerate(OPERATION_BUTTONS)
    }
    geometry["close"] = (width - ICON_SIZE * 2, ICON_SIZE - 10, CLOSE_SIZE, CLOSE_SIZE)
    return geometry


def _style_button(button, font_size: int = 8) -> None:
    button.configure(
        background=BUTTON_BACKGROUND,
        foreground=BUTTON_FOREGROUND,
        activebackground=BUTTON_HOVER,
        relief="flat",
        borderwidth=0,
        font=(None, font_size),
        wraplength=BTN_SIZE - 4,
    )


class ContentEditor:
    """One-line text entry that reports its content when Return is pressed."""

    def __init__(self, parent, on_content: Callable[[str], None]) -> None:
        import tkinter as tk

        self._parent = parent
        self._on_content = on_content
        self.entry = tk.Entry(parent, background="white")
        self.entry.bind("<Return>", self._on_return)
        self.entry.bind("<KP_Enter>", self._on_return)
        self.entry.bind("<Escape>", self._on_escape)
        self.entry.bind("<FocusIn>", self._on_focus_in)
        self.entry.bind("<FocusOut>", self._on_focus_out)
        self.entry.bind("<Button-3>", lambda event: "break")

    @property
    def text(self) -> str:
        return self.entry.get()

    def open_at(self, x: float, y: float, width: int, height: int) -> None:
        """Show an empty editor at a position in the parent and focus it."""
        self.entry.delete(0, "end")
        self.entry.place(x=int(x), y=int(y), width=width, height=height)
        self.entry.lift()
        self.entry.focus_set()

    def hide(self) -> None:
        self.entry.place_forget()

    def _on_return(self, event) -> str:
        content = self.entry.get()
        self.hide()
        self._parent.focus_set()
        self._on_content(content)
        return "break"

    def _on_escape(self, event) -> str:
        self.hide()
        self._parent.focus_set()
        return "break"

    def _on_focus_in(self, event) -> None:
        self.entry.select_range(0, "end")
        self.entry.icursor("end")

    def _on_focus_out(self, event) -> None:
        self.hide()


class DrawCanvas:
    """A tkinter canvas that feeds mouse input to a Board and paints it."""

    def __init__(self, parent, board: Optional[Board] = None) -> None:
        import tkinter as tk

        self.board = board if board is not None else Board()
        self.widget = tk.Canvas(parent, background="white", highlightthickness=0)
        self.editor = ContentEditor(self.widget, self._on_content)
        self.widget.bind("<ButtonPress-1>", self._on_press)
        self.widget.bind("<B1-Motion>", self._on_move)
        self.widget.bind("<ButtonRelease-1>", self._on_release)
        self.widget.bind("<MouseWheel>", self._on_wheel)
        self.widget.bind("<Button-4>", lambda event: self._zoom(1))
        self.widget.bind("<Button-5>", lambda event: self._zoom(-1))
        self.widget.bind("<Configure>", lambda event: self.redraw())

    def place(self, x: int, y: int, width: int, height: int) -> None:
        self.widget.place(x=x, y=y, width=max(width, 1), height=max(height, 1))

    def set_shape_type(self, shape_type: ShapeType) -> None:
        self.board.set_shape_type(shape_type)

    def rotate_left(self) -> None:
        self.board.rotate_left()
        self.redraw()

    def rotate_right(self) -> None:
        self.board.rotate_right()
        self.redraw()

    def reset(self) -> None:
        self.board.reset()
        self.redraw()

    def clear(self) -> None:
        self.board.clear()
        self.redraw(preview=False)

    def zoom_in(self) -> None:
        self.board.zoom_in()
        self.redraw()

    def zoom_out(self) -> None:
        self.board.zoom_out()
        self.redraw()

    def redraw(self, preview: bool = True) -> None:
        """Repaint every stored shape and, optionally, the shape being dragged."""
        canvas = self.widget
        canvas.delete("all")
        scale, tx, ty, angle = self.board.transform(canvas.winfo_width(), canvas.winfo_height())
        cos, sin = _ROTATION[angle % 360]

        def device(px: float, py: float) -> tuple[float, float]:
            rx = px * cos - py * sin
            ry = px * sin + py * cos
            return ((rx + tx) * scale, (ry + ty) * scale)

        items = self.board.draw_items()
        if preview:
            items += self.board.preview_items()
        for item in items:
            self._paint(item, device, scale, angle)

    def _paint(self, item: DrawItem, device, scale: float, angle: int) -> None:
        canvas = self.widget
        width = max(1, round(item.pen_width * scale))
        if item.kind in ("rect", "ellipse"):
            x, y, w, h = item.coords
            ax, ay = device(x, y)
            bx, by = device(x + w, y + h)
            box = (min(ax, bx), min(ay, by), max(ax, bx), max(ay, by))
            draw = canvas.create_rectangle if item.kind == "rect" else canvas.create_oval
            draw(*box, outline=PEN_COLOR, width=width)
        elif item.kind == "line":
            x1, y1, x2, y2 = item.coords
            canvas.create_line(*device(x1, y1), *device(x2, y2), fill=PEN_COLOR, width=width)
        elif item.kind == "text":
            x, y = item.coords
            canvas.create_text(
                *device(x, y),
                text=item.text,
                anchor="sw",
                fill=PEN_COLOR,
                angle=-angle,
                font=(FONT_FAMILY, max(1, round(FONT_SIZE * scale))),
            )

    def _on_press(self, event) -> None:
        self.board.press(event.x, event.y)

    def _on_move(self, event) -> None:
        self.board.move(event.x, event.y)
        self.redraw()

    def _on_release(self, event) -> None:
        self.board.release(event.x, event.y)
        if self.board.shape_type == ShapeType.TEXT and self.board.text_anchor is not None:
            self.editor.open_at(*self.board.text_anchor)
        self.redraw()

    def _on_wheel(self, event) -> None:
        self._zoom(event.delta)

    def _zoom(self, delta: float) -> None:
        self.board.wheel(delta)
        self.redraw()

    def _on_content(self, text: str) -> None:
        self.board.receive_content(text)
        self.redraw()


class MainWindow:
    """Main window: toolbar, hidden shape panel on the left, and the canvas."""

    def __init__(self, root=None, store: Optional[ShapeStore] = None) -> None:
        import tkinter as tk

        self.root = root if root is not None else tk.Tk()
        self.store = store if store is not None else get_store()
        self.file_path = os.getcwd()
        self.panel_visible = False
        self._panel_x = -BTN_SIZE
        self._animation: Optional[str] = None

        self.root.title("Paint")
        self.root.geometry("800x600")
        self.root.configure(background=WINDOW_BACKGROUND)

        self.canvas = DrawCanvas(self.root, Board(self.store))

        self.arrow_label = tk.Label(
            self.root, text="\u25b6", background=WINDOW_BACKGROUND, font=(None, 14)
        )

        panel_height = len(_SHAPE_TOOLS) * (BTN_SIZE + PANEL_SPACING)
        self._panel_size = (BTN_SIZE + PANEL_MARGIN, panel_height)
        self.panel = tk.Frame(self.root, background=WINDOW_BACKGROUND)
        for index, (label, shape_type) in enumerate(_SHAPE_TOOLS):
            button = tk.Button(
                self.panel,
                text=label,
                command=lambda kind=shape_type: self.canvas.set_shape_type(kind),
            )
            _style_button(button)
            button.place(
                x=PANEL_MARGIN,
                y=index * (BTN_SIZE + PANEL_SPACING),
                width=BTN_SIZE,
                height=BTN_SIZE,
            )

        commands = {
            "reset": self.canvas.reset,
            "rotate_left": self.canvas.rotate_left,
            "rotate_right": self.canvas.rotate_right,
            "zoom_in": self.canvas.zoom_in,
            "zoom_out": self.canvas.zoom_out,
            "clear": self.canvas.clear,
            "save": self.save_file,
            "load": self.load_file,
        }
        self.buttons = {}
        for name in OPERATION_BUTTONS:
            button = tk.Button(self.root, text=_OPERATION_LABELS[name], command=commands[name])
            _style_button(button)
            self.buttons[name] = button
        close = tk.Button(self.root, text="\u2715", command=self.root.destroy)
        _style_button(close, font_size=10)
        close.configure(background=WINDOW_BACKGROUND)
        self.buttons["close"] = close

        self.root.bind("<Configure>", self._on_configure)
        self.root.bind("<Motion>", self._on_motion, add="+")

    def show(self) -> None:
        self.root.mainloop()

    def _on_configure(self, event) -> None:
        if event.widget is self.root:
            self._layout()

    def _layout(self) -> None:
        width = self.root.winfo_width()
        height = self.root.winfo_height()
        for name, (x, y, w, h) in toolbar_geometry(width).items():
            self.buttons[name].place(x=x, y=y, width=w, height=h)
        self.canvas.place(5, BTN_SIZE + 5, width - 10, height - 10 - BTN_SIZE)
        arrow_x = -ARROW_SIZE if self.panel_visible else 0
        self.arrow_label.place(x=arrow_x, y=ARROW_Y, width=ARROW_SIZE, height=ARROW_SIZE)
        self._place_panel()

    def _place_panel(self) -> None:
        width, height = self._panel_size
        self.panel.place(x=self._panel_x, y=PANEL_Y, width=width, height=height)
        self.panel.lift()

    def _panel_contains(self, x: float, y: float) -> bool:
        width, height = self._panel_size
        return self._panel_x <= x < self._panel_x + width and PANEL_Y <= y < PANEL_Y + height

    def _slide_panel(self, start: int, end: int) -> None:
        if self._animation is not None:
            self.root.after_cancel(self._animation)
            self._animation = None
        steps = max(1, ANIMATION_MS // ANIMATION_TICK_MS)

        def step(index: int) -> None:
            self._panel_x = round(start + (end - start) * index / steps)
            self._place_panel()
            if index < steps:
                self._animation = self.root.after(ANIMATION_TICK_MS, step, index + 1)
            else:
                self._animation = None

        step(0)

    def _on_motion(self, event) -> None:
        x = event.x_root - self.root.winfo_rootx()
        y = event.y_root - self.root.winfo_rooty()
        in_area = mouse_in_arrow_area(x, y, ARROW_Y)
        if in_area and not self.panel_visible:
            self._slide_panel(-BTN_SIZE, 0)
            self.panel_visible = True
            self.arrow_label.place(x=-ARROW_SIZE, y=ARROW_Y)
        elif not in_area and self.panel_visible and not self._panel_contains(x, y):
            self._slide_panel(0, -BTN_SIZE)
            self.panel_visible = False
            self.arrow_label.place(x=0, y=ARROW_Y)

    def save_file(self) -> None:
        """Ask for a directory and save the drawing there as a new document."""
        from tkinter import filedialog, messagebox

        directory = filedialog.askdirectory(
            parent=self.root, title="Save file", initialdir=os.getcwd()
        )
        if not directory:
            messagebox.showwarning("Error", "Path does not exist or is invalid", parent=self.root)
            return
        self.file_path = directory
        try:
            target = next_save_path(directory)
        except DocumentError as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return
        if not messagebox.askyesno("Confirm", f"Save the file to {target}?", parent=self.root):
            return
        try:
            save_shapes(self.store, directory)
        except DocumentError as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)

    def load_file(self) -> None:
        """Ask for a document and add its shapes to the board."""
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(
            parent=self.root,
            title="Load file",
            initialdir=os.getcwd(),
            filetypes=[("draw", "*.draw")],
        )
        if not path:
            messagebox.showwarning(
                "Error", "File does not exist or cannot be read", parent=self.root
            )
            return
        self.file_path = path
        try:
            shapes = load_shapes(path)
        except DocumentError as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return
        for shape in shapes:
            self.store.add(shape)
        self.canvas.redraw()


def main(argv: Optional[list[str]] = None) -> int:
    """Open the drawing window and run until it is closed."""
    window = MainWindow()
    window.show()
    return 0