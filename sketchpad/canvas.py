"""The drawing surface and the mouse-stroke tracker."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from sketchpad.layout import CANVAS_ORIGIN, CANVAS_SIZE, WHITE, Color

Point = tuple[int, int]


def in_surface(x: int, y: int) -> bool:
    """Whether a point lies strictly inside the drawing surface."""
    width, height = CANVAS_SIZE
    return 0 < x < width and 0 < y < height


class Canvas:
    """An RGBA image that the tools paint on."""

    def __init__(self, width: int = CANVAS_SIZE[0], height: int = CANVAS_SIZE[1],
                 color: Color = WHITE) -> None:
        self._image = Image.new("RGBA", (width, height), color.rgba)

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def to_bytes(self) -> bytes:
        """Raw RGBA pixel data, row by row."""
        return self._image.tobytes()

    def _inside(self, x: int, y: int) -> bool:
        width, height = self._image.size
        return 0 <= x < width and 0 <= y < height

    def fill(self, color: Color) -> None:
        """Replace every pixel with ``color``."""
        self._image = Image.new("RGBA", self._image.size, color.rgba)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; points outside the image are ignored."""
        if self._inside(x, y):
            self._image.putpixel((x, y), color.rgba)

    def get_pixel(self, x: int, y: int) -> Color:
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return Color(*self._image.getpixel((x, y)))

    def stamp_disc(self, center: Point, radius: int, color: Color) -> None:
        """Fill the horizontal spans visited by a midpoint circle walk.

        Rows are painted above and below the centre while the walk stays
        in its first octant, which leaves a flattened round stamp.
        """
        cx, cy = center
        x, y = radius, 0
        crit = 1 - radius
        while x >= y:
            for xi in range(-x, x + 1):
                self.set_pixel(cx + xi, cy + y, color)
                self.set_pixel(cx + xi, cy - y, color)
            if crit <= 0:
                crit += 2 * y + 1
            else:
                x -= 1
                crit += 2 * (y - x) + 1
            y += 1

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        """Draw from ``start`` towards ``end``, excluding ``end``.

        Drawing stops as soon as the line leaves the surface.
        """
        x, y = start
        ex, ey = end
        dx, dy = abs(ex - x), abs(ey - y)
        sx = 1 if x < ex else -1
        sy = 1 if y < ey else -1
        err = dx - dy
        while (x, y) != (ex, ey) and in_surface(x, y):
            self.set_pixel(x, y, color)
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    def load(self, path: str | Path) -> None:
        """Blend an image file onto the canvas at its top-left corner."""
        with Image.open(path) as source:
            picture = source.convert("RGBA")
        width, height = self._image.size
        picture = picture.crop((0, 0, min(picture.width, width), min(picture.height, height)))
        self._image.alpha_composite(picture, (0, 0))

    def save(self, path: str | Path) -> None:
        """Write the canvas to a file; the format follows the extension."""
        image = self._image
        if Path(path).suffix.lower() in (".jpg", ".jpeg"):
            image = image.convert("RGB")
        image.save(path)


class StrokeTracker:
    """Turns successive mouse samples into line segments on the canvas."""

    def __init__(self) -> None:
        self._first: Point = (0, 0)
        self._previous: Point = (0, 0)

    def update(self, pressed: bool, pos: Point) -> tuple[Point, Point] | None:
        """Feed one sample in window coordinates.

        Returns ``(position, previous)`` in canvas coordinates when a
        segment should be drawn, or None at the start of a stroke and
        while the button is up.
        """
        if not pressed:
            self._first = (0, 0)
            return None
        point = (pos[0] - CANVAS_ORIGIN[0], pos[1] - CANVAS_ORIGIN[1])
        segment = None
        if self._first == (0, 0):
            self._first = point
        else:
            segment = (point, self._previous)
        self._previous = point
        return segment