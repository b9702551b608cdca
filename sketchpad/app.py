"""The paint window: event loop, rendering and the command-line entry point."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
from PIL import Image  # noqa: E402

from sketchpad.canvas import Canvas, StrokeTracker  # noqa: E402
from sketchpad.layout import (  # noqa: E402
    BLACK,
    CANVAS_ORIGIN,
    COLOR_WHEEL_POSITION,
    FRAMERATE,
    GREY,
    ICON_SIZE,
    PREVIEW_POSITION,
    WINDOW_SIZE,
    dropdown_position,
)
from sketchpad.printf import printf  # noqa: E402
from sketchpad.tools import Cursor, PaintState  # noqa: E402
from sketchpad.widgets import MENUS, Button, Toolbar  # noqa: E402

TITLE = "My_Paint"
USAGE = "# USAGE : ./my_paint\n"
TOO_MANY = "The program take only one parameter !\n"
EXIT_FAILURE = 84

FONT_FILE = "police.ttf"
FONT_SIZE = 20
HEADER_POSITION = (10, 8)
HEADER = (
    "\t file\t\t   \tedit\t\t       help"
    + "\n" * 7
    + "\t\t\t\t"
    + "\n" * 7
    + "        Preview Brush:"
)
_TAB = "    "

# Tool sprites drawn next to the palette: asset, position and scale.
_TOOL_SPRITES = (
    ("pipette.png", (1690, 300), 0.4),
    ("bc.png", (1768, 300), 0.3),
)
_WHEEL_FILE = "noir.png"
_ICON_FILE = "icone.jpg"


def _scaled(surface: pygame.Surface, scale: float) -> pygame.Surface:
    width, height = surface.get_size()
    size = (max(1, int(width * scale)), max(1, int(height * scale)))
    return pygame.transform.scale(surface, size)


class PaintApp:
    """A window holding the canvas, the toolbar and the current tool state."""

    def __init__(
        self,
        asset_dir: str | Path = "code/asset",
        help_dir: str | Path = ".",
        ask: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.asset_dir = Path(asset_dir)
        pygame.init()
        self.screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.state = PaintState()
        self.canvas = Canvas()
        self.tracker = StrokeTracker()
        wheel_path = self.asset_dir / _WHEEL_FILE
        wheel = None
        if wheel_path.is_file():
            with Image.open(wheel_path) as source:
                wheel = source.convert("RGBA")
        self.toolbar = Toolbar(ask=ask, output=output, help_dir=help_dir, wheel=wheel)
        self.running = True
        self._mouse: tuple[int, int] = (0, 0)
        self._held = False
        self._clock = pygame.time.Clock()
        font_path = self.asset_dir / FONT_FILE
        font_name = str(font_path) if font_path.is_file() else None
        self._header_font = pygame.font.Font(font_name, FONT_SIZE)
        self._menu_font = pygame.font.Font(font_name, FONT_SIZE)
        self._wheel_surface = self._load(_WHEEL_FILE)
        self._tool_sprites = [
            (_scaled(surface, scale), position)
            for name, position, scale in _TOOL_SPRITES
            if (surface := self._load(name)) is not None
        ]
        self._cursor_sprites: dict[Cursor, pygame.Surface | None] = {}
        icon = self._load(_ICON_FILE)
        if icon is not None:
            pygame.display.set_icon(pygame.transform.scale(icon, ICON_SIZE))
        pygame.event.clear()

    def _load(self, name: str) -> pygame.Surface | None:
        path = self.asset_dir / name
        if not path.is_file():
            return None
        try:
            return pygame.image.load(str(path)).convert_alpha()
        except pygame.error:
            return None

    def run(self) -> None:
        """Process events until the window is closed or Escape is pressed."""
        try:
            while self.running:
                events = [pygame.event.wait(), *pygame.event.get()]
                for event in events:
                    self._process(event)
                    if not self.running:
                        break
                    self.draw()
                self._clock.tick(FRAMERATE)
        finally:
            pygame.quit()

    def _process(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT or (
            event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
        ):
            self.running = False
            return
        position = getattr(event, "pos", None)
        if position is not None:
            self._mouse = (int(position[0]), int(position[1]))
        left = getattr(event, "button", None) == 1
        if event.type == pygame.MOUSEBUTTONDOWN and left:
            self._held = True
        elif event.type == pygame.MOUSEBUTTONUP and left:
            self._held = False
        clicked = event.type == pygame.MOUSEBUTTONDOWN and left
        segment = self.tracker.update(self._held, self._mouse)
        if segment is not None:
            position_now, previous = segment
            self.state.apply_stroke(self.canvas, position_now, previous)
        self.toolbar.handle(self.state, self.canvas, self._mouse, clicked)

    def draw(self) -> None:
        """Render one frame of the whole window."""
        self.screen.fill(GREY.rgba)
        self._draw_preview()
        self._draw_palette()
        self._draw_menus()
        self._draw_text(self._header_font, HEADER, HEADER_POSITION)
        self._draw_canvas()
        self._draw_cursor()
        pygame.display.flip()

    def _draw_preview(self) -> None:
        size = self.state.size
        if size > 0:
            x, y = PREVIEW_POSITION
            pygame.draw.rect(self.screen, self.state.color.rgba, pygame.Rect(x, y, size, size))

    def _draw_button(self, button: Button) -> None:
        rect = button.rect
        if button.fill.a:
            area = pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
            pygame.draw.rect(self.screen, button.fill.rgba, area)
        thickness = int(button.outline_thickness)
        if thickness > 0:
            bounds = button.bounds
            area = pygame.Rect(int(bounds.x), int(bounds.y), int(bounds.width), int(bounds.height))
            pygame.draw.rect(self.screen, button.outline_color.rgba, area, thickness)

    def _draw_palette(self) -> None:
        for button, _color in self.toolbar.swatches.values():
            self._draw_button(button)
        buttons = self.toolbar.buttons
        for name in ("file", "edit", "help", "pipette", "bucket"):
            self._draw_button(buttons[name])
        for surface, position in self._tool_sprites:
            self.screen.blit(surface, position)
        if self._wheel_surface is not None:
            self.screen.blit(self._wheel_surface, COLOR_WHEEL_POSITION)

    def _draw_menus(self) -> None:
        opened = {
            "file": self.state.file_menu,
            "edit": self.state.edit_menu,
            "help": self.state.help_menu,
        }
        for menu, is_open in opened.items():
            if not is_open:
                continue
            for name, label in MENUS[menu]:
                self._draw_button(self.toolbar.buttons[name])
                self._draw_text(self._menu_font, label, dropdown_position(label))

    def _draw_text(self, font: pygame.font.Font, text: str, position: tuple[int, int]) -> None:
        x, y = position
        for line in text.split("\n"):
            line = line.replace("\t", _TAB)
            if line.strip():
                self.screen.blit(font.render(line, True, BLACK.rgba), (x, y))
            y += font.get_linesize()

    def _draw_canvas(self) -> None:
        data = self.canvas.to_bytes()
        surface = pygame.image.frombuffer(data, self.canvas.size, "RGBA")
        self.screen.blit(surface, CANVAS_ORIGIN)

    def _cursor_sprite(self, cursor: Cursor) -> pygame.Surface | None:
        if cursor not in self._cursor_sprites:
            surface = self._load(cursor.asset) if cursor.asset else None
            self._cursor_sprites[cursor] = (
                _scaled(surface, cursor.scale) if surface is not None else None
            )
        return self._cursor_sprites[cursor]

    def _draw_cursor(self) -> None:
        cursor = self.state.active_cursor(self._mouse)
        sprite = self._cursor_sprite(cursor) if cursor is not Cursor.SYSTEM else None
        if sprite is None:
            pygame.mouse.set_visible(True)
            return
        pygame.mouse.set_visible(False)
        dx, dy = cursor.offset
        self.screen.blit(sprite, (self._mouse[0] + dx, self._mouse[1] + dy))


def main(argv: list[str] | None = None) -> int:
    """Start the paint window; ``-h`` prints the usage instead."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1:
        if args[0] == "-h":
            printf(USAGE)
            return 0
        printf(TOO_MANY)
        return EXIT_FAILURE
    if len(args) >= 2:
        return EXIT_FAILURE
    PaintApp().run()
    return 0