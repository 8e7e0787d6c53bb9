"""
termask - ask questions in the terminal, or answer them from a file.
"""

import logging

from .answers import AnswerStore  # noqa
from .errors import (  # noqa
    AnswerStoreError,
    AnswerFileNotFound,
    AnswerFileUnreadable,
    AnswerFileEmpty,
    AnswerFileInvalid,
    AnswerFileWriteFailed,
)
from .output import Output, QUIET, NORMAL, VERBOSE, DEBUG  # noqa
from .prompt import PromptEngine, PromptConfig  # noqa
from .dispatch import read_char  # noqa
from ._cli import cli  # noqa

# Logs never go to the terminal, unless asked for
logging.getLogger("termask").addHandler(logging.NullHandler())

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
