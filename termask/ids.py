"""
Ids for the options of a selection menu.

Options are numbered from 1, and the number is written in base 36, so
the ids are "1" ... "9", "a" ... "z". That's one keystroke per option.
These ids are also what gets stored as the answer to a selection, so
recorded answers depend on the order of the options: reordering the
options silently changes the meaning of old recorded answers.

Base 36 gives 35 single-digit ids. The 36th option gets "10", which can
only be chosen via a recorded answer, not with a single keystroke.
"""

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

MAX_OPTIONS = 36


def to_base36(n):
    """Write a positive int in (lowercase) base 36."""
    if n < 1:
        raise ValueError(f"Expected a positive number, got {n}.")
    s = ""
    while n:
        n, d = divmod(n, 36)
        s = DIGITS[d] + s
    return s


def option_ids(n):
    """Get the ids for a list of n options."""
    if n > MAX_OPTIONS:
        raise ValueError(f"Can select from at most {MAX_OPTIONS} options, got {n}.")
    return [to_base36(i) for i in range(1, n + 1)]


def decode_id(s):
    """Get the 1-based position from an option id, or None if it's not an id.

    Ids are case-insensitive, and surrounding whitespace is ignored.
    """
    s = str(s).strip()
    if not s or not s.isalnum() or not s.isascii():
        return None
    return int(s, 36)


def resolve(options, answer):
    """Look up a recorded answer in a sequence of (key, label) pairs.

    Returns the (key, label) pair, or None if the answer does not
    correspond to an option.
    """
    pos = decode_id(answer)
    if pos is None or not 1 <= pos <= len(options):
        return None
    return tuple(options[pos - 1])
