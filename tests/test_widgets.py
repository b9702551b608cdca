import io

import pytest
from PIL import Image

from sketchpad.canvas import Canvas
from sketchpad.layout import BLACK, BLUE, GREEN, MAROON, RED, WHITE, Rect
from sketchpad.tools import PaintState
from sketchpad.widgets import (
    INVALID_FILE,
    Button,
    Toolbar,
    has_image_extension,
    read_text_file,
)


def make_toolbar(help_dir=".", answers=(), wheel=None):
    out = io.StringIO()
    replies = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(replies)

    bar = Toolbar(ask=ask, output=out, help_dir=help_dir, wheel=wheel)
    return bar, out, prompts


def test_button_click_inside_paints_blue():
    button = Button(Rect(0, 0, 10, 10), WHITE)
    assert button.is_clicked((5, 5), True) is True
    assert button.fill == BLUE


def test_button_not_pressed_is_not_clicked():
    button = Button(Rect(0, 0, 10, 10), WHITE)
    assert button.is_clicked((5, 5), False) is False
    assert button.fill == WHITE


def test_button_click_outside():
    button = Button(Rect(0, 0, 10, 10), WHITE)
    assert button.is_clicked((20, 5), True) is False


def test_button_hover_edges():
    button = Button(Rect(0, 0, 10, 10), WHITE)
    assert button.is_hovered((0, 0)) is True
    assert button.is_hovered((10, 5)) is False


def test_button_outline_extends_bounds():
    button = Button(Rect(0, 0, 10, 10), WHITE, outline_thickness=5)
    assert button.is_hovered((-3, 0)) is True
    assert button.bounds == Rect(-5, -5, 20, 20)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.png", True),
        ("a.jpg", True),
        ("a.bmp", True),
        ("a.jpeg", True),
        ("photo.jp", True),
        ("a.txt", False),
        ("noext", False),
        ("x.tar.png", False),
        ("photo.PNG", False),
    ],
)
def test_has_image_extension(name, expected):
    assert has_image_extension(name) is expected


def test_read_text_file(tmp_path):
    path = tmp_path / "msg.txt"
    path.write_text("hello")
    assert read_text_file(path) == "hello\n"


def test_read_text_file_truncates(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("a" * 1500)
    assert read_text_file(path) == "a" * 1200 + "\n"


def test_read_text_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text_file(tmp_path / "missing.txt")


def test_palette_click_selects_colour():
    bar, _, _ = make_toolbar()
    state = PaintState()
    bar.handle(state, Canvas(), (1780, 405), True)
    assert state.color == RED


def test_white_swatch_selects_maroon():
    bar, _, _ = make_toolbar()
    state = PaintState()
    bar.handle(state, Canvas(), (1705, 480), True)
    assert state.color == MAROON


def test_swatch_hover_highlights_then_clears():
    bar, _, _ = make_toolbar()
    state = PaintState()
    canvas = Canvas()
    bar.handle(state, canvas, (1705, 405), False)
    assert bar.swatches["black"][0].outline_thickness == 5
    bar.handle(state, canvas, (0, 1000), False)
    assert bar.swatches["black"][0].outline_thickness == 0


def test_file_menu_toggles():
    bar, _, _ = make_toolbar()
    state = PaintState()
    canvas = Canvas()
    bar.handle(state, canvas, (10, 10), True)
    assert state.file_menu is True
    bar.handle(state, canvas, (10, 10), True)
    assert state.file_menu is False


def test_edit_and_help_menus_toggle():
    bar, _, _ = make_toolbar()
    state = PaintState()
    canvas = Canvas()
    bar.handle(state, canvas, (140, 10), True)
    bar.handle(state, canvas, (260, 10), True)
    assert (state.edit_menu, state.help_menu) == (True, True)


def test_brush_toggles_and_resets_colour():
    bar, _, _ = make_toolbar()
    state = PaintState(edit_menu=True, color=RED)
    canvas = Canvas()
    bar.handle(state, canvas, (135, 155), True)
    assert state.brush is True
    assert state.color == RED
    bar.handle(state, canvas, (135, 155), True)
    assert state.brush is False
    assert state.color == BLACK


def test_square_click_changes_nothing():
    bar, _, _ = make_toolbar()
    state = PaintState(edit_menu=True)
    bar.handle(state, Canvas(), (135, 205), True)
    assert state.square is False
    assert bar.buttons["square"].fill == BLUE


def test_size_up_and_down():
    bar, _, _ = make_toolbar()
    state = PaintState(edit_menu=True)
    canvas = Canvas()
    bar.handle(state, canvas, (140, 55), True)
    assert state.size == 23
    bar.handle(state, canvas, (195, 55), True)
    bar.handle(state, canvas, (195, 55), True)
    assert state.size == 17


def test_size_limits():
    bar, _, _ = make_toolbar()
    canvas = Canvas()
    big = PaintState(edit_menu=True, size=80)
    bar.handle(big, canvas, (140, 55), True)
    assert big.size == 80
    almost = PaintState(edit_menu=True, size=79)
    bar.handle(almost, canvas, (140, 55), True)
    assert almost.size == 82
    empty = PaintState(edit_menu=True, size=0)
    bar.handle(empty, canvas, (195, 55), True)
    assert empty.size == 0


def test_eraser_toggles():
    bar, _, _ = make_toolbar()
    state = PaintState(edit_menu=True)
    canvas = Canvas()
    bar.handle(state, canvas, (135, 105), True)
    assert state.eraser is True
    assert state.color == WHITE
    bar.handle(state, canvas, (135, 105), True)
    assert state.eraser is False
    assert state.color == BLACK


def test_eraser_ignored_when_edit_menu_closed():
    bar, _, _ = make_toolbar()
    state = PaintState()
    bar.handle(state, Canvas(), (135, 105), True)
    assert state.eraser is False


def test_pipette_and_bucket_toggle():
    bar, _, _ = make_toolbar()
    state = PaintState()
    canvas = Canvas()
    bar.handle(state, canvas, (1700, 310), True)
    bar.handle(state, canvas, (1780, 310), True)
    assert (state.pipette, state.bucket) == (True, True)
    bar.handle(state, canvas, (1700, 310), True)
    assert state.pipette is False


def test_new_file_resets_canvas_and_colour():
    bar, _, _ = make_toolbar()
    state = PaintState(file_menu=True, color=RED)
    canvas = Canvas()
    canvas.set_pixel(5, 5, RED)
    bar.handle(state, canvas, (10, 55), True)
    assert canvas.get_pixel(5, 5) == WHITE
    assert state.color == BLACK


def test_open_loads_image(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGBA", (10, 10), (255, 0, 0, 255)).save(path)
    bar, out, prompts = make_toolbar(answers=[str(path)])
    state = PaintState(file_menu=True)
    canvas = Canvas()
    bar.handle(state, canvas, (10, 105), True)
    assert canvas.get_pixel(3, 3) == RED
    assert canvas.get_pixel(20, 20) == WHITE
    assert "ouvrir" in prompts[0]
    assert out.getvalue() == ""


def test_open_missing_file_reports(tmp_path):
    bar, out, _ = make_toolbar(answers=[str(tmp_path / "missing.png")])
    state = PaintState(file_menu=True)
    canvas = Canvas()
    bar.handle(state, canvas, (10, 105), True)
    assert out.getvalue() == INVALID_FILE
    assert canvas.get_pixel(3, 3) == WHITE


def test_open_wrong_extension_reports(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("text")
    bar, out, _ = make_toolbar(answers=[str(path)])
    state = PaintState(file_menu=True)
    bar.handle(state, Canvas(), (10, 105), True)
    assert out.getvalue() == "Please enter a valid file.\n"


def test_save_writes_image(tmp_path):
    target = tmp_path / "out.png"
    bar, _, prompts = make_toolbar(answers=[str(target)])
    state = PaintState(file_menu=True)
    canvas = Canvas()
    canvas.set_pixel(1, 1, BLUE)
    bar.handle(state, canvas, (10, 155), True)
    with Image.open(target) as saved:
        assert saved.convert("RGBA").getpixel((1, 1)) == (0, 0, 255, 255)
    assert "sauvegarder" in prompts[0]


def test_save_unknown_format_writes_nothing(tmp_path):
    target = tmp_path / "out.unknownformat"
    bar, _, _ = make_toolbar(answers=[str(target)])
    state = PaintState(file_menu=True)
    bar.handle(state, Canvas(), (10, 155), True)
    assert not target.exists()


def test_tutorial_prints_help_file(tmp_path):
    (tmp_path / "help_message.txt").write_text("tuto text")
    bar, out, _ = make_toolbar(help_dir=tmp_path)
    state = PaintState(help_menu=True)
    bar.handle(state, Canvas(), (260, 55), True)
    assert out.getvalue() == "tuto text\n"


def test_about_prints_about_file(tmp_path):
    (tmp_path / "about_message.txt").write_text("about text")
    bar, out, _ = make_toolbar(help_dir=tmp_path)
    state = PaintState(help_menu=True)
    bar.handle(state, Canvas(), (260, 105), True)
    assert out.getvalue() == "about text\n"


def test_missing_help_file_prints_newline(tmp_path):
    bar, out, _ = make_toolbar(help_dir=tmp_path)
    state = PaintState(help_menu=True)
    bar.handle(state, Canvas(), (260, 55), True)
    assert out.getvalue() == "\n"


def test_help_entry_hover_highlights():
    bar, _, _ = make_toolbar()
    state = PaintState(help_menu=True)
    bar.handle(state, Canvas(), (260, 55), False)
    assert bar.buttons["tutorial"].outline_thickness == 5
    assert bar.buttons["about"].outline_thickness == 0


def test_wheel_pick_with_pipette():
    wheel = Image.new("RGB", (20, 20), (0, 255, 0))
    bar, _, _ = make_toolbar(wheel=wheel)
    state = PaintState(pipette=True)
    bar.handle(state, Canvas(), (55, 495), True)
    assert state.color == GREEN


def test_wheel_ignored_without_pipette():
    wheel = Image.new("RGB", (20, 20), (0, 255, 0))
    bar, _, _ = make_toolbar(wheel=wheel)
    state = PaintState()
    bar.handle(state, Canvas(), (55, 495), True)
    assert state.color == BLACK