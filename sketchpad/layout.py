"""Geometry and colours of the paint window: buttons, palette and menus."""

from __future__ import annotations

from dataclasses import dataclass

from sketchpad.strutil import strcmp

WINDOW_SIZE = (1920, 1080)
CANVAS_ORIGIN = (360, 140)
CANVAS_SIZE = (1200, 800)
DEFAULT_SIZE = 20
MAX_SIZE = 80
SIZE_STEP = 3
FRAMERATE = 120
PREVIEW_POSITION = (215, 333)
COLOR_WHEEL_POSITION = (50, 490)
ICON_SIZE = (400, 400)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)
GREY = Color(215, 215, 215)
MAROON = Color(124, 21, 21)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; left and top edges are inside, right and bottom are not."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


_DROPDOWN_POSITIONS: tuple[tuple[str, tuple[int, int]], ...] = (
    ("  new_file", (5, 50)),
    ("\topen", (5, 100)),
    ("\tsave", (5, 150)),
    ("+  or", (143, 52)),
    ("-", (202, 52)),
    ("eraser", (150, 100)),
    ("brush", (150, 150)),
    ("tuto", (280, 50)),
    ("about", (280, 100)),
)


def dropdown_position(label: str) -> tuple[int, int]:
    """Where the text of a drop-down menu entry is drawn.

    Labels are matched by common prefix; the last matching entry wins.
    """
    position = None
    for name, place in _DROPDOWN_POSITIONS:
        if strcmp(label, name) == 0:
            position = place
    if position is None:
        raise ValueError(f"unknown menu entry {label!r}")
    return position


def button_layout() -> dict[str, tuple[Rect, Color]]:
    """Rectangles and initial fill colours of the menu and tool buttons."""
    menu = (100, 30)
    return {
        "size_minus": (Rect(960, 950, 50, 50), BLACK),
        "size_plus": (Rect(1035, 950, 50, 50), BLACK),
        "file": (Rect(5, 5, *menu), TRANSPARENT),
        "edit": (Rect(130, 5, *menu), TRANSPARENT),
        "help": (Rect(255, 5, *menu), TRANSPARENT),
        "file_new": (Rect(5, 50, *menu), RED),
        "file_open": (Rect(5, 100, *menu), RED),
        "file_save": (Rect(5, 150, *menu), RED),
        "size_up": (Rect(135, 50, 30, 30), TRANSPARENT),
        "size_down": (Rect(192, 50, 30, 30), TRANSPARENT),
        "eraser": (Rect(130, 100, *menu), TRANSPARENT),
        "brush": (Rect(130, 150, *menu), TRANSPARENT),
        "square": (Rect(130, 200, *menu), TRANSPARENT),
        "tutorial": (Rect(255, 50, *menu), TRANSPARENT),
        "about": (Rect(255, 100, *menu), TRANSPARENT),
        "pipette": (Rect(1690, 300, 59, 59), TRANSPARENT),
        "bucket": (Rect(1768, 300, 65, 65), TRANSPARENT),
    }


def palette_layout() -> dict[str, tuple[Rect, Color]]:
    """Palette swatches and the colour each one selects."""
    return {
        "black": (Rect(1700, 400, 50, 50), BLACK),
        "white": (Rect(1700, 475, 50, 50), MAROON),
        "green": (Rect(1700, 550, 50, 50), GREEN),
        "yellow": (Rect(1700, 625, 50, 50), YELLOW),
        "red": (Rect(1775, 400, 50, 50), RED),
        "cyan": (Rect(1775, 475, 50, 50), CYAN),
        "magenta": (Rect(1775, 550, 50, 50), MAGENTA),
        "blue": (Rect(1775, 625, 50, 50), BLUE),
    }