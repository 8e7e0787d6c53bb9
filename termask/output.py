"""
A text writer that filters on verbosity.

Each piece of text is written at a certain level (the current verbosity,
unless specified). It only shows up when that level is lower than or equal
to the script verbosity, so with a script verbosity of QUIET, only texts
at QUIET level are shown. Escape sequences (colors, cursor) are always
written; they're invisible anyway.
"""

import sys
import contextlib

from . import style as ansi


# Verbosity levels. The quietest level has the lowest number.
QUIET = 1
NORMAL = 2
VERBOSE = 3
DEBUG = 4

# Colors used by the message shortcuts
DEBUG_COLOR = 250
ALERT_COLOR = 214
SUCCESS_COLOR = 40
ERROR_COLOR = 160
TITLE_COLOR = 39


class Output:
    """Write text and escape sequences to a file, honouring verbosity."""

    def __init__(self, file=None, verbosity=NORMAL):
        self._file = file
        self._script_verbosity = int(verbosity)
        self._verbosity = NORMAL
        self._cursor_hidden = False

    @property
    def file(self):
        # Resolve lazily, so that a replaced sys.stdout is picked up
        return self._file or sys.stdout

    # %% Verbosity

    @property
    def script_verbosity(self):
        """The threshold: the most verbose level that is still shown."""
        return self._script_verbosity

    def set_script_verbosity(self, level):
        """Set the script verbosity, returns the old value."""
        old, self._script_verbosity = self._script_verbosity, int(level)
        return old

    @property
    def verbosity(self):
        """The level at which text is written when no level is given."""
        return self._verbosity

    def set_verbosity(self, level):
        """Set the current verbosity, returns the old value."""
        old, self._verbosity = self._verbosity, int(level)
        return old

    @contextlib.contextmanager
    def verbosity_override(self, level):
        """Temporarily write at the given verbosity."""
        old = self.set_verbosity(level)
        try:
            yield self
        finally:
            self.set_verbosity(old)

    def is_visible(self, level=None):
        level = self._verbosity if level is None else level
        return level <= self._script_verbosity

    # %% Writing text

    def raw(self, text):
        """Write text regardless of verbosity, e.g. an escape sequence."""
        file = self.file
        file.write(text)
        file.flush()

    def write(self, text, level=None):
        if self.is_visible(level):
            self.raw(str(text))

    def write_line(self, text="", level=None):
        if self.is_visible(level):
            self.raw(f"{text}\n")

    def line_feed(self, n=1, level=None):
        if self.is_visible(level):
            self.raw("\n" * n)

    def flush(self):
        self.file.flush()

    # %% Presentation helpers

    def esc(self, code):
        self.raw(ansi.ESC + "[" + code)

    def bell(self):
        self.raw(ansi.BELL)

    def color(self, spec):
        self.raw(ansi.format_escape(color=spec))

    def background(self, spec):
        self.raw(ansi.format_escape(background=spec))

    def style(self, flags, invert=False):
        self.raw(ansi.format_escape(flags=flags, invert=invert))

    def reset(self):
        """Reset text color and style."""
        self.raw(ansi.RESET)

    def clear(self):
        self.raw(ansi.CLEAR_SCREEN)

    def move_to(self, row=1, col=1):
        self.raw(ansi.move_to(row, col))

    def clear_line(self):
        self.raw(ansi.CLEAR_LINE)

    def erase_left(self, n=1):
        """Move the cursor left and clear the rest of the line."""
        self.raw(ansi.cursor_left(n) + ansi.CLEAR_TO_EOL)

    def show_cursor(self):
        self._cursor_hidden = False
        self.raw(ansi.SHOW_CURSOR)

    def hide_cursor(self):
        self._cursor_hidden = True
        self.raw(ansi.HIDE_CURSOR)

    def save_cursor(self):
        self.raw(ansi.SAVE_CURSOR)

    def restore_cursor(self):
        self.raw(ansi.RESTORE_CURSOR)

    @contextlib.contextmanager
    def visible_cursor(self):
        """Show the cursor, and put back its visibility afterwards."""
        was_hidden = self._cursor_hidden
        self.show_cursor()
        try:
            yield self
        finally:
            if was_hidden:
                self.hide_cursor()

    # %% Message shortcuts

    def debug(self, text):
        """Write a line at DEBUG level, in grey."""
        with self.verbosity_override(DEBUG):
            self.color(DEBUG_COLOR)
            self.write_line(text)
            self.reset()

    def alert(self, text):
        self.color(ALERT_COLOR)
        self.write_line(text)
        self.reset()

    def success(self, text):
        self.color(SUCCESS_COLOR)
        self.write_line(text)
        self.reset()

    def error(self, text):
        self.color(ERROR_COLOR)
        self.write_line(text)
        self.reset()

    def title(self, text):
        """Write a text in a box."""
        n = len(text)
        self.color(TITLE_COLOR)
        self.write_line("     ╭" + "─" * (n + 2) + "╮")
        self.write_line("     │ " + text + " │")
        self.write_line("     ╰" + "─" * (n + 2) + "╯")
        self.reset()
