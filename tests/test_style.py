from termask import style
from termask.style import BOLD, DIM, UNDERLINE, format_color, format_style, format_escape


def test_format_color():
    assert format_color(245) == "38;5;245"
    assert format_color(0) == "38;5;0"
    assert format_color(245, True) == "48;5;245"
    assert format_color("37") == "38;5;37"
    assert format_color("#DD0000") == "38;2;221;0;0"
    assert format_color("#f00", True) == "48;2;255;0;0"
    assert format_color("red") == "31"
    assert format_color("Red", True) == "41"
    assert format_color("bright red") == "91"
    assert format_color("bright_blue", True) == "104"


def test_format_color_unknown():
    for spec in [256, -1, "nope", "#12", "#gggggg", None, True, 1.5]:
        assert format_color(spec) == ""


def test_format_style():
    assert format_style(BOLD) == "1"
    assert format_style(BOLD | UNDERLINE) == "1;4"
    assert format_style(BOLD, invert=True) == "22"
    # Bold and dim are switched off by the same code
    assert format_style(BOLD | DIM, invert=True) == "22"
    assert format_style(0) == ""


def test_format_escape():
    assert format_escape() == ""
    assert format_escape(color=37) == "\x1b[38;5;37m"
    assert format_escape(flags=BOLD, color="red", background=17) == "\x1b[1;31;48;5;17m"
    assert format_escape(color="nope") == ""


def test_sequences():
    assert style.cursor_left() == "\x1b[1D"
    assert style.cursor_left(3) == "\x1b[3D"
    assert style.move_to() == "\x1b[1;1H"
