"""
Ask the user questions: free text, hidden text, or a choice from a menu.

Every question can have an id. If the answer store has an answer for that
id, it's used instead of asking the user, so that a script can run
unattended. The terminal is only switched to raw mode while reading keys,
and always switched back, also on errors and Ctrl-C.
"""

import sys
import logging
from collections.abc import Mapping

from . import ids
from .answers import AnswerStore
from .dispatch import POLL_INTERVAL, read_char
from .output import Output, QUIET, DEBUG
from .style import BOLD
from .term import TerminalContext


logger = logging.getLogger("termask")

# Shown for each character of a hidden answer
MASK_MARKER = "•"

# Color of the option ids in a menu
OPTION_ID_COLOR = 245


class PromptConfig:
    """How the prompt indicator looks."""

    def __init__(self, text="#", color=37, background=None, flags=None):
        self.text = text
        self.color = color
        self.background = background
        self.flags = flags

    @property
    def indicator(self):
        return self.text + " "


class HiddenInput:
    """The answer being typed at a hidden prompt.

    Call ``on_key()`` for each key; it returns True when the answer is
    complete. Each typed character is shown as a marker (if show_markers
    is set), and backspace removes the last character and its marker.
    Special keys (arrows, escape, etc.) are ignored, there is no cursor
    movement.
    """

    def __init__(self, output, show_markers=True, marker=MASK_MARKER):
        self._out = output
        self._show_markers = show_markers
        self._marker = marker
        self._chars = []
        self.done = False

    @property
    def length(self):
        """The number of characters (not bytes) typed so far."""
        return len(self._chars)

    @property
    def value(self):
        return "".join(self._chars)

    def on_key(self, key):
        if self.done:
            return True

        if key == "enter":
            self._out.line_feed()
            self.done = True
        elif key == "backspace":
            if self.length > 0:
                self._chars.pop()
                if self._show_markers:
                    self._out.erase_left(1)
        elif len(key) == 1:
            self._chars.append(key)
            if self._show_markers:
                self._out.write(self._marker)
        else:
            logger.debug(f"hidden input ignores {key}")

        return self.done


class PromptEngine:
    """Ask questions, answering them from the answer store when possible.

    Parameters:
        output: the ``Output`` to write to (default writes to sys.stdout).
        answers: the ``AnswerStore`` with pre-recorded answers.
        config: the ``PromptConfig`` for the prompt indicator.
        stdin: the file to read input from (default sys.stdin).
        terminal: a callable that returns a context manager for raw input
            mode, which has a ``reader`` attribute (default ``TerminalContext``).
        recorder: a callable ``(qid, answer)`` that is called for each answer
            given by the user, if recording is enabled on the answer store.
            Default ``answers.record``.
    """

    poll_interval = POLL_INTERVAL

    def __init__(
        self,
        output=None,
        answers=None,
        config=None,
        stdin=None,
        terminal=None,
        recorder=None,
    ):
        self._out = output or Output()
        self.answers = AnswerStore() if answers is None else answers
        self.config = config or PromptConfig()
        self._stdin = stdin
        self._terminal_factory = terminal or self._default_terminal
        self._recorder = recorder

    @property
    def output(self):
        return self._out

    @property
    def stdin(self):
        return self._stdin or sys.stdin

    def _default_terminal(self):
        return TerminalContext(stdin=self.stdin)

    def set_prompt(self, text, color=None, background=None, flags=None):
        """Personalize the prompt indicator."""
        self.config = PromptConfig(text, color, background, flags)

    # %% Helpers

    def _write_prompt(self):
        """Write the prompt indicator, leaving its color active for the answer."""
        out = self._out
        config = self.config
        if config.color is not None:
            out.color(config.color)
        if config.background is not None:
            out.background(config.background)
        if config.flags:
            out.style(config.flags)
        out.write(config.indicator)

    def _end_question(self, qid):
        """Show the question id (in debug mode), and end the line."""
        out = self._out
        if qid and out.script_verbosity >= DEBUG:
            out.debug(f" [{qid}]")
        else:
            out.line_feed()

    def _record(self, qid, answer):
        if qid and self.answers.recording:
            recorder = self._recorder or self.answers.record
            recorder(qid, answer)

    # %% Questions

    def ask(self, question, qid=None):
        """Ask a question and return the answer, as a stripped string."""
        out = self._out
        replayed = self.answers.get(qid)

        with out.verbosity_override(QUIET):
            try:
                out.bell()
                out.style(BOLD)
                out.write(question)
                out.style(BOLD, invert=True)
                self._end_question(qid)
                self._write_prompt()

                if replayed is not None:
                    logger.debug(f"replaying answer for {qid!r}")
                    out.write_line(replayed)
                    return replayed

                with out.visible_cursor():
                    line = self.stdin.readline()
                if not line:
                    raise EOFError("Input was closed while waiting for an answer.")
                answer = line.strip()
            finally:
                out.reset()

        self._record(qid, answer)
        return answer

    def hidden(self, question, show_markers=True, qid=None):
        """Ask for a secret, e.g. a password. What is typed is not shown."""
        out = self._out
        replayed = self.answers.get(qid)

        with out.verbosity_override(QUIET):
            try:
                if replayed is not None:
                    logger.debug(f"replaying hidden answer for {qid!r}")
                    self._show_hidden_question(question, qid)
                    if show_markers:
                        out.write(MASK_MARKER * len(replayed))
                    out.line_feed()
                    return replayed

                pending = HiddenInput(out, show_markers)
                with self._terminal_factory() as terminal, out.visible_cursor():
                    self._show_hidden_question(question, qid)
                    reader = terminal.reader
                    logger.info("hidden input started")
                    while not pending.done:
                        for key in reader.read_keys(self.poll_interval):
                            if pending.on_key(key):
                                break
                        if reader.closed and not pending.done:
                            raise EOFError("Input was closed while waiting for an answer.")
                    logger.info("hidden input stopped")
            finally:
                out.reset()

        answer = pending.value
        self._record(qid, answer)
        return answer

    def _show_hidden_question(self, question, qid):
        out = self._out
        out.save_cursor()
        out.bell()
        if question:
            out.write(question)
        self._end_question(qid)
        self._write_prompt()

    def select(self, question, options, qid=None):
        """Show a menu of options, and return the selected (key, label) pair.

        The options can be a mapping, a sequence of (key, label) pairs, or
        a sequence of labels (in which case the keys are the indices).
        Each option is selected with a single keystroke: its id
        ("1" ... "9", "a" ... "z"). The answer to store for a question is
        this id. Other keys are ignored.

        When the script verbosity is QUIET, no menu is shown, and the result
        is the pre-recorded answer, or None if there is none.
        """
        out = self._out
        pairs = as_pairs(options)
        if not pairs:
            raise ValueError("Need at least one option to select from.")
        option_ids = ids.option_ids(len(pairs))
        if len(pairs) == ids.MAX_OPTIONS:
            logger.warning("the last option can only be selected via a recorded answer")

        replayed = self.answers.get(qid)
        match = None if replayed is None else ids.resolve(pairs, replayed)

        if out.script_verbosity <= QUIET:
            return match

        with out.verbosity_override(QUIET):
            try:
                out.bell()
                out.write(question)
                self._end_question(qid)

                for option_id, (_, label) in zip(option_ids, pairs):
                    out.color(OPTION_ID_COLOR)
                    out.write(f"  {option_id}. ")
                    out.reset()
                    out.write_line(label)

                if replayed is not None and match is None:
                    logger.warning(f"invalid answer {replayed!r} for question {qid!r}")
                    out.debug(f'Invalid answer "{replayed}" for question "{qid}"')

                self._write_prompt()

                if match is not None:
                    logger.debug(f"replaying answer for {qid!r}")
                    out.write_line(replayed)
                    return match

                table = dict(zip(option_ids, pairs))

                def on_key(key):
                    option_id = key.lower()
                    if len(key) == 1 and option_id in table:
                        out.write_line(option_id)
                        return option_id
                    logger.debug(f"no option for key {key!r}")
                    return False

                with self._terminal_factory() as terminal:
                    option_id = read_char(terminal.reader, on_key, self.poll_interval)
            finally:
                out.reset()

        self._record(qid, option_id)
        return table[option_id]


def as_pairs(options):
    """Turn the given options into a list of (key, label) tuples."""
    if isinstance(options, Mapping):
        return list(options.items())
    pairs = []
    for i, option in enumerate(options):
        if isinstance(option, (tuple, list)) and len(option) == 2:
            pairs.append(tuple(option))
        else:
            pairs.append((i, option))
    return pairs
