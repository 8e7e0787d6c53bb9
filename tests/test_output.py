import io

from termask import Output, QUIET, NORMAL, VERBOSE, DEBUG


def make_output(verbosity=NORMAL):
    return Output(io.StringIO(), verbosity)


def test_verbosity_filter():
    out = make_output(NORMAL)
    out.write("a")
    out.write("b", QUIET)
    out.write("c", VERBOSE)
    out.write_line("d", DEBUG)
    out.write_line("e")
    assert out.file.getvalue() == "abe\n"


def test_quiet_script():
    out = make_output(QUIET)
    out.write("hidden")
    out.line_feed(2)
    out.write("shown", QUIET)
    out.line_feed(2, QUIET)
    assert out.file.getvalue() == "shown\n\n"


def test_escapes_ignore_verbosity():
    out = make_output(QUIET)
    out.reset()
    out.bell()
    assert out.file.getvalue() == "\x1b[0m\x07"


def test_set_verbosity():
    out = make_output(NORMAL)
    assert out.set_script_verbosity(DEBUG) == NORMAL
    assert out.script_verbosity == DEBUG
    assert out.set_verbosity(DEBUG) == NORMAL
    assert out.verbosity == DEBUG
    out.write("x")
    assert out.file.getvalue() == "x"


def test_verbosity_override():
    out = make_output(QUIET)
    with out.verbosity_override(QUIET):
        assert out.verbosity == QUIET
        out.write("a")
    assert out.verbosity == NORMAL
    out.write("b")

    # Also restored on errors
    try:
        with out.verbosity_override(DEBUG):
            raise ValueError()
    except ValueError:
        pass
    assert out.verbosity == NORMAL
    assert out.file.getvalue() == "a"


def test_debug():
    out = make_output(NORMAL)
    out.debug("nope")
    assert "nope" not in out.file.getvalue()

    out = make_output(DEBUG)
    out.debug("yes")
    assert out.file.getvalue() == "\x1b[38;5;250myes\n\x1b[0m"
    assert out.verbosity == NORMAL


def test_messages():
    out = make_output()
    out.error("bad")
    out.alert("hmm")
    out.success("good")
    value = out.file.getvalue()
    assert "\x1b[38;5;160mbad\n\x1b[0m" in value
    assert "\x1b[38;5;214mhmm\n\x1b[0m" in value
    assert "\x1b[38;5;40mgood\n\x1b[0m" in value


def test_title():
    out = make_output()
    out.title("Hi")
    lines = out.file.getvalue().splitlines()
    assert lines[0].endswith("     ╭────╮")
    assert lines[1] == "     │ Hi │"
    assert lines[2].startswith("     ╰────╯")


def test_cursor():
    out = make_output()
    out.save_cursor()
    out.restore_cursor()
    out.erase_left()
    out.move_to(3, 4)
    out.clear_line()
    out.clear()
    assert out.file.getvalue() == (
        "\x1b7" "\x1b8" "\x1b[1D\x1b[0K" "\x1b[3;4H" "\x1b[2K\x1b[G" "\x1b[2J\x1b[H"
    )


def test_visible_cursor():
    out = make_output()
    with out.visible_cursor():
        pass
    assert out.file.getvalue() == "\x1b[?25h"

    # A hidden cursor is hidden again afterwards
    out = make_output()
    out.hide_cursor()
    with out.visible_cursor():
        pass
    assert out.file.getvalue() == "\x1b[?25l\x1b[?25h\x1b[?25l"
