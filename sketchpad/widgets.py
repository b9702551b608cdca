"""Buttons, colour palette and drop-down menus of the paint window."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TextIO

from PIL import Image

from sketchpad.canvas import Canvas, Point
from sketchpad.layout import (
    BLACK,
    BLUE,
    COLOR_WHEEL_POSITION,
    GREY,
    RED,
    TRANSPARENT,
    WHITE,
    Color,
    Rect,
    button_layout,
    palette_layout,
)
from sketchpad.strutil import strcmp
from sketchpad.tools import PaintState

_IMAGE_EXTENSIONS = (".jpg", ".png", ".bmp", ".jpeg")
_TEXT_LIMIT = 1200
_HIGHLIGHT_THICKNESS = 5

OPEN_PROMPT = "\033[1;31mNom du fichier à ouvrir ?\n> \033[0m"
SAVE_PROMPT = "\033[1;31mNom du fichier à sauvegarder ?\n> \033[0m"
INVALID_FILE = "Please enter a valid file.\n"
HELP_FILE = "help_message.txt"
ABOUT_FILE = "about_message.txt"

# Entries of each drop-down menu: button name and the label drawn on it.
MENUS: dict[str, tuple[tuple[str, str], ...]] = {
    "file": (("file_new", "  new_file"), ("file_open", "\topen"), ("file_save", "\tsave")),
    "edit": (("size_up", "+  or"), ("size_down", "-"), ("eraser", "eraser"), ("brush", "brush")),
    "help": (("tutorial", "tuto"), ("about", "about")),
}


def has_image_extension(filename: str) -> bool:
    """Whether the text from the first dot on matches an image extension.

    Extensions are compared over their common length, so a shortened
    extension such as ``.jp`` is accepted too.
    """
    dot = filename.find(".")
    if dot < 0:
        return False
    suffix = filename[dot:]
    return any(strcmp(suffix, extension) == 0 for extension in _IMAGE_EXTENSIONS)


def read_text_file(path: str | Path) -> str:
    """The first 1200 bytes of a text file followed by a newline."""
    with open(path, "rb") as handle:
        data = handle.read(_TEXT_LIMIT)
    return data.decode("utf-8", errors="replace") + "\n"


def _readable(filename: str) -> bool:
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


@dataclass
class Button:
    """A clickable rectangle with a fill colour and an optional outline."""

    rect: Rect
    fill: Color
    outline_color: Color = BLACK
    outline_thickness: float = 0

    @property
    def bounds(self) -> Rect:
        """The area covered by the rectangle and its outline."""
        t = self.outline_thickness
        return Rect(self.rect.x - t, self.rect.y - t,
                    self.rect.width + 2 * t, self.rect.height + 2 * t)

    def is_clicked(self, mouse: Point, pressed: bool) -> bool:
        """Whether a left press happened over the button; a click paints it blue."""
        if pressed and self.bounds.contains(*mouse):
            self.fill = BLUE
            return True
        return False

    def is_hovered(self, mouse: Point) -> bool:
        return self.bounds.contains(*mouse)

    def _highlight(self) -> None:
        self.outline_color = BLACK
        self.outline_thickness = _HIGHLIGHT_THICKNESS

    def _plain(self, fill: Color) -> None:
        self.outline_thickness = 0
        self.fill = fill


class Toolbar:
    """All the window's buttons and what a mouse event over them does."""

    def __init__(
        self,
        ask: Callable[[str], str] = input,
        output: TextIO | None = None,
        help_dir: str | Path = ".",
        wheel: Image.Image | None = None,
    ) -> None:
        self.buttons: dict[str, Button] = {
            name: Button(rect, color) for name, (rect, color) in button_layout().items()
        }
        self.swatches: dict[str, tuple[Button, Color]] = {
            name: (Button(rect, color), color) for name, (rect, color) in palette_layout().items()
        }
        self.wheel = wheel.convert("RGBA") if wheel is not None else None
        self._ask = ask
        self._output = output
        self._help_dir = Path(help_dir)

    def _write(self, text: str) -> None:
        stream = self._output if self._output is not None else sys.stdout
        stream.write(text)

    def _prompt(self, text: str) -> str:
        try:
            return self._ask(text)
        except EOFError:
            return ""

    def handle(self, state: PaintState, canvas: Canvas, mouse: Point, pressed: bool) -> None:
        """Process one event: ``mouse`` is the pointer, ``pressed`` a left press."""
        buttons = self.buttons
        if state.file_menu:
            self._save(canvas, mouse, pressed)
            self._open(canvas, mouse, pressed)
            self._new(state, canvas, mouse, pressed)
        if state.edit_menu:
            self._square(mouse, pressed)
            self._brush(state, mouse, pressed)
            self._step(buttons["size_down"], state.shrink, mouse, pressed)
            self._step(buttons["size_up"], state.grow, mouse, pressed)
        if state.help_menu:
            self._show(buttons["tutorial"], HELP_FILE, mouse, pressed)
            self._show(buttons["about"], ABOUT_FILE, mouse, pressed)
        self._palette(state, mouse, pressed)
        state.file_menu = self._menu("file", state.file_menu, mouse, pressed)
        state.edit_menu = self._menu("edit", state.edit_menu, mouse, pressed)
        state.help_menu = self._menu("help", state.help_menu, mouse, pressed)
        state.pipette = self._tool(buttons["pipette"], state.pipette, mouse, pressed)
        state.bucket = self._tool(buttons["bucket"], state.bucket, mouse, pressed)
        self._pick_from_wheel(state, mouse, pressed)

    def _save(self, canvas: Canvas, mouse: Point, pressed: bool) -> None:
        button = self.buttons["file_save"]
        if button.is_clicked(mouse, pressed):
            filename = self._prompt(SAVE_PROMPT)
            try:
                canvas.save(filename)
            except (OSError, ValueError):
                sys.stderr.write(f'Failed to save image "{filename}"\n')
        elif button.is_hovered(mouse):
            button.fill = GREY
        else:
            button.fill = WHITE

    def _open(self, canvas: Canvas, mouse: Point, pressed: bool) -> None:
        button = self.buttons["file_open"]
        if button.is_clicked(mouse, pressed):
            filename = self._prompt(OPEN_PROMPT)
            if not _readable(filename) or not has_image_extension(filename):
                self._write(INVALID_FILE)
                return
            try:
                canvas.load(filename)
            except OSError:
                self._write(INVALID_FILE)
        elif button.is_hovered(mouse):
            button.fill = GREY
        else:
            button.fill = WHITE

    def _new(self, state: PaintState, canvas: Canvas, mouse: Point, pressed: bool) -> None:
        button = self.buttons["file_new"]
        if button.is_clicked(mouse, pressed):
            state.reset(canvas)
        elif button.is_hovered(mouse):
            button.fill = GREY
        else:
            button.fill = RED

    def _square(self, mouse: Point, pressed: bool) -> None:
        button = self.buttons["square"]
        if button.is_clicked(mouse, pressed):
            return
        if button.is_hovered(mouse):
            button._highlight()
        else:
            button._plain(WHITE)

    def _brush(self, state: PaintState, mouse: Point, pressed: bool) -> None:
        button = self.buttons["brush"]
        if button.is_clicked(mouse, pressed):
            if state.brush:
                state.color = BLACK
                state.brush = False
            else:
                state.brush = True
        elif button.is_hovered(mouse):
            button._highlight()
        else:
            button.fill = WHITE

    @staticmethod
    def _step(button: Button, action: Callable[[], None], mouse: Point, pressed: bool) -> None:
        if button.is_clicked(mouse, pressed):
            action()
        elif button.is_hovered(mouse):
            button._highlight()
        else:
            button._plain(BLACK)

    def _show(self, button: Button, filename: str, mouse: Point, pressed: bool) -> None:
        if button.is_clicked(mouse, pressed):
            try:
                text = read_text_file(self._help_dir / filename)
            except OSError:
                text = "\n"
            self._write(text)
        elif button.is_hovered(mouse):
            button._highlight()
        else:
            button._plain(WHITE)

    def _palette(self, state: PaintState, mouse: Point, pressed: bool) -> None:
        for button, color in self.swatches.values():
            if button.is_clicked(mouse, pressed):
                state.color = color
            elif button.is_hovered(mouse):
                button._highlight()
            else:
                button._plain(color)
        if not state.edit_menu:
            return
        eraser = self.buttons["eraser"]
        if eraser.is_clicked(mouse, pressed):
            state.color = WHITE
            if state.eraser:
                state.color = BLACK
                state.eraser = False
            else:
                state.eraser = True
        elif eraser.is_hovered(mouse):
            eraser._highlight()
        else:
            eraser._plain(WHITE)

    def _menu(self, name: str, is_open: bool, mouse: Point, pressed: bool) -> bool:
        button = self.buttons[name]
        if button.is_clicked(mouse, pressed):
            is_open = not is_open
        elif button.is_hovered(mouse):
            button._highlight()
        else:
            button._plain(WHITE)
        if is_open:
            for entry_name, _label in MENUS[name]:
                entry = self.buttons[entry_name]
                if entry.is_hovered(mouse):
                    entry._highlight()
                else:
                    entry._plain(WHITE)
        return is_open

    @staticmethod
    def _tool(button: Button, active: bool, mouse: Point, pressed: bool) -> bool:
        if button.is_clicked(mouse, pressed):
            return not active
        if button.is_hovered(mouse):
            button._highlight()
        else:
            button._plain(TRANSPARENT)
        return active

    def _pick_from_wheel(self, state: PaintState, mouse: Point, pressed: bool) -> None:
        if self.wheel is None or not pressed or not state.pipette:
            return
        left, top = COLOR_WHEEL_POSITION
        area = Rect(left, top, self.wheel.width, self.wheel.height)
        if area.contains(*mouse):
            state.color = Color(*self.wheel.getpixel((mouse[0] - left, mouse[1] - top)))