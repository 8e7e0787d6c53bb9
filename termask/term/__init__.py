"""
Utilities to read keys from the terminal.

We don't use curses or readline: the terminal is put in raw mode with
termios, we wait for input with select(), and the bytes are decoded into
keys using a map of vt100 escape sequences. This only works on Unix.
"""

from ._context import TerminalContext  # noqa
from ._input_reader import InputReader  # noqa
from .keys import KeyDecoder, KEY_MAP  # noqa
