"""The painting tools, their state and the cursor shown for each."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sketchpad.canvas import Canvas, Point
from sketchpad.layout import BLACK, CANVAS_SIZE, DEFAULT_SIZE, MAX_SIZE, SIZE_STEP, WHITE, Color


class Cursor(Enum):
    """Mouse cursors: the sprite asset, its scale and its offset from the pointer."""

    SYSTEM = (None, 1.0, (0, 0))
    PEN = ("pen.png", 0.5, (-25, -105))
    BRUSH = ("pinceau.png", 0.5, (-35, -30))
    ERASER = ("eraser.png", 0.1, (-20, -35))
    PIPETTE = ("pipette.png", 0.27, (0, -29))
    BUCKET = ("bc.png", 0.2, (0, -29))

    def __init__(self, asset: str | None, scale: float, offset: tuple[int, int]) -> None:
        self.asset = asset
        self.scale = scale
        self.offset = offset


_PEN_AREA = (359, 142, 1560, 940)


@dataclass
class PaintState:
    """The selected colour, brush size, active tool and open menus."""

    color: Color = BLACK
    size: int = DEFAULT_SIZE
    eraser: bool = False
    pipette: bool = False
    bucket: bool = False
    brush: bool = False
    square: bool = False
    circle: bool = True
    file_menu: bool = False
    edit_menu: bool = False
    help_menu: bool = False

    def apply_stroke(self, canvas: Canvas, pos: Point, prev: Point) -> None:
        """Use the active tool at ``pos``, coming from ``prev``, in canvas coordinates.

        Nothing happens when ``pos`` is within a brush radius of the edge.
        """
        radius = int(self.size / 2)
        x, y = pos
        width, height = CANVAS_SIZE
        if not (radius < x < width - radius and radius < y < height - radius):
            return
        if self.pipette:
            self.color = canvas.get_pixel(x, y)
        elif self.bucket:
            canvas.fill(self.color)
        elif self.eraser:
            canvas.stamp_disc(pos, radius, WHITE)
        elif self.brush:
            canvas.stamp_disc(pos, radius, self.color)
        else:
            canvas.draw_line(prev, pos, self.color)

    def active_cursor(self, mouse: Point) -> Cursor:
        """The cursor for the current tool; the chosen tool switches the others off."""
        if self.pipette:
            self.eraser = self.bucket = self.brush = False
            return Cursor.PIPETTE
        if self.eraser:
            self.pipette = self.bucket = self.brush = False
            return Cursor.ERASER
        if self.bucket:
            self.pipette = self.eraser = self.brush = False
            return Cursor.BUCKET
        if self.brush:
            self.pipette = self.eraser = self.bucket = False
            return Cursor.BRUSH
        left, top, right, bottom = _PEN_AREA
        if left < mouse[0] < right and top < mouse[1] < bottom:
            return Cursor.PEN
        return Cursor.SYSTEM

    def grow(self) -> None:
        if self.size < MAX_SIZE:
            self.size += SIZE_STEP

    def shrink(self) -> None:
        if self.size > 0:
            self.size -= SIZE_STEP

    def reset(self, canvas: Canvas) -> None:
        """Start a new drawing: black ink on a white canvas."""
        self.color = BLACK
        canvas.fill(WHITE)