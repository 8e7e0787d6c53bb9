import os
import sys
import logging

from ._input_reader import InputReader


logger = logging.getLogger("termask")


class TerminalContext:
    """Context manager that puts the terminal input in raw mode.

    Instantiating this class produces a class corresponding with the
    current platform. On enter, the current terminal mode is stored and
    the input is switched to unbuffered, no-echo mode. On exit (by whatever
    route) the stored mode is put back. While entered, ``reader`` provides
    access to the raw input.
    """

    def __new__(cls, **kwargs):
        # Select terminal class
        if sys.platform.startswith("win"):
            raise RuntimeError("termask needs a POSIX terminal.")
        else:
            from ._context_unix import UnixTerminalContext as TerminalContext
        return super().__new__(TerminalContext)

    def __init__(self, stdin=None):

        self._entered = False

        stdin = stdin or sys.__stdin__
        self.fd_in = stdin.fileno()
        self.reader = InputReader(self.fd_in)

        # Not an error, e.g. answers may be piped in
        if not os.isatty(self.fd_in):
            logger.info(f"Input is not a tty: {stdin}")

    def __enter__(self):
        if self._entered:
            raise RuntimeError("Can only enter the context state once.")
        self._entered = True
        self._store_terminal_mode()
        self._set_terminal_mode()
        return self

    def __exit__(self, *args):
        self._entered = False
        self.reset()

    def reset(self):
        """Reset the terminal to the state it was when the context was entered."""
        self._reset_terminal_mode()

    # For subclasses to implement

    def _store_terminal_mode(self):
        raise NotImplementedError()

    def _set_terminal_mode(self):
        raise NotImplementedError()

    def _reset_terminal_mode(self):
        raise NotImplementedError()
