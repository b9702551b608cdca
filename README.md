# sketchpad

A small raster paint program. It opens a 1920×1080 window. The window holds a
1200×800 white drawing sheet, a colour palette, a size preview and a set of
tools:

- **pencil**: the default tool. It draws a thin line that follows the mouse
  while the left button is held.
- **brush**: stamps a filled round disc of the current size and colour.
- **eraser**: stamps a white disc. Turning it off sets the colour back to
  black.
- **bucket**: fills the whole sheet with the current colour. It does not
  flood a region.
- **pipette**: takes the colour under the mouse from the sheet. It also takes
  it from the colour wheel picture, if `noir.png` is present.

Nothing is drawn when the pointer is within half a tool size of the sheet's
edge. The palette has eight swatches. The swatch placed second in the first
column selects a maroon colour.

The menus along the top hold these entries:

- **file**
  - `new_file` clears the sheet to white and resets the colour to black.
  - `open` asks for a file name on the terminal. It then draws that image onto
    the top-left corner of the sheet. The name must be of a readable file, and
    the part from its first dot must match `.jpg`, `.jpeg`, `.png` or `.bmp`.
    That part is compared over the length both have in common. Otherwise
    `Please enter a valid file.` is printed.
  - `save` asks for a file name. It writes the sheet to that file, and the
    format follows the extension.
- **edit**
  - `+` and `-` change the tool size in steps of 3. The size starts at 20.
    `+` stops adding once the size has reached 80. `-` stops once the size
    is 0 or below.
  - This menu also holds the `eraser` and `brush` toggles.
- **help**
  - `tuto` prints the first 1200 bytes of `help_message.txt` from the current
    directory to the terminal.
  - `about` does the same for `about_message.txt`.

## Installing

```
pip install .
```

## Running

```
sketchpad
```

- `sketchpad -h` prints `# USAGE : ./my_paint` and exits with status 0.
- Any other single argument prints a message and exits with status 84.
- Two or more arguments exit with status 84 and print nothing.

Press Escape or close the window to quit.

Pictures and the font are read from `code/asset/`, relative to the directory
the program is started from:

- `police.ttf` is the font.
- `noir.png` is the colour wheel.
- `pipette.png`, `bc.png`, `pen.png`, `pinceau.png` and `eraser.png` are the
  tool and cursor sprites.
- `icone.jpg` is the window icon.

A missing picture is simply not drawn. A missing font falls back to pygame's
default font.

## Using it as a library

The drawing surface and the tools work without a window:

```python
from sketchpad.canvas import Canvas
from sketchpad.tools import PaintState

canvas = Canvas()
state = PaintState()
state.apply_stroke(canvas, (100, 100), (50, 50))  # pencil line
state.brush = True
state.apply_stroke(canvas, (300, 300), (300, 300))  # brush stamp
canvas.save("out.png")
```

### Modules

- `sketchpad.canvas`
  - `Canvas` offers `fill`, `set_pixel`, `get_pixel`, `stamp_disc`,
    `draw_line`, `load` and `save`.
  - `StrokeTracker` turns mouse samples into line segments.
  - `in_surface` tells whether a point lies strictly inside the sheet.
- `sketchpad.tools`
  - `PaintState` holds the colour, the size, the active tool and the open
    menus. Its methods are `apply_stroke`, `active_cursor`, `grow`, `shrink`
    and `reset`.
  - `Cursor` lists the cursors.
- `sketchpad.widgets`
  - `Button` and `Toolbar` are the window's buttons. They also say what a
    click over them does.
  - `has_image_extension` is the check that `open` applies to file names.
  - `read_text_file` reads a help text.
- `sketchpad.layout`: button and palette geometry (`button_layout`,
  `palette_layout`), `Rect`, `Color` and `dropdown_position`.
- `sketchpad.app`: `PaintApp`, the window with `run` and `draw`, and
  `main(argv=None)`.
- `sketchpad.printf`: `sprintf(fmt, *args)` returns a `Formatted` value. Its
  `out` field holds the normal output and its `err` field the error output.
  `printf(fmt, *args)` writes both.
  - It supports `%c %s %% %d %i %u %x %X %o %b %p %f %e %E %n`.
  - It supports the `l` prefix and the `#`, space, `-` and `+` flags.
- Number rendering lives in `sketchpad.numfmt`. Scientific notation lives in
  `sketchpad.expfmt`.
- `sketchpad.strutil` has the string helpers `strcmp`, `str_to_int`,
  `str_to_word_array` and `strncpy`.

## What it does not do

- There is no undo.
- There are no shape tools. The square entry in the button layout has no
  effect.
- There is no region flood fill.
- File names for opening and saving are typed on the terminal, not chosen in
  a dialog.

## Tests

```
pip install .[test]
pytest
```