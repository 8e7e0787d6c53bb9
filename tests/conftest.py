import io
import os

import pytest

from termask import AnswerStore, Output, PromptEngine, NORMAL
from termask.term import InputReader


class PipeTerminal:
    """Stands in for a TerminalContext, with scripted input from a pipe.

    The bytes are written to the pipe up front and the write end is closed,
    so the reader sees an EOF once the script is consumed.
    """

    def __init__(self, data=b""):
        r, w = os.pipe()
        os.write(w, data)
        os.close(w)
        self.reader = InputReader(r)
        self.entered = 0
        self.exited = 0

    def __call__(self):
        return self

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, *args):
        self.exited += 1

    def close(self):
        os.close(self.reader.fd)


class NoTerminal:
    """A terminal factory for when no live input may happen."""

    def __call__(self):
        raise AssertionError("the terminal should not have been used")


class NoStdin:
    def readline(self):
        raise AssertionError("stdin should not have been read")


@pytest.fixture
def pipe_terminal():
    terminals = []

    def make(data=b""):
        terminal = PipeTerminal(data)
        terminals.append(terminal)
        return terminal

    yield make
    for terminal in terminals:
        terminal.close()


@pytest.fixture
def make_engine():
    """Create an engine that writes to a StringIO, and never touches the real terminal."""

    def make(answers=None, verbosity=NORMAL, stdin=None, terminal=None, recorder=None):
        output = Output(io.StringIO(), verbosity)
        store = answers if isinstance(answers, AnswerStore) else AnswerStore(answers)
        return PromptEngine(
            output,
            store,
            stdin=stdin or NoStdin(),
            terminal=terminal or NoTerminal(),
            recorder=recorder,
        )

    return make
