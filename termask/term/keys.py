"""
Turn the raw bytes that arrive on the input descriptor into logical keys.

A logical key is either a single character (one code point, which may have
arrived as several bytes) or the name of a special key, like "enter",
"backspace" or "up". Names are always longer than one character, so
``len(key) == 1`` tells a typed character from a special key.
"""

from codecs import getincrementaldecoder
from collections import deque


# %% Decoder


class KeyDecoder:
    """A streaming bytes-to-keys decoder.

    Both multi-byte characters and escape sequences can be split between
    multiple calls to decode. Bytes that are not valid UTF-8 become the
    replacement character U+FFFD.
    """

    def __init__(self, key_map=None):
        self._decode_utf8 = getincrementaldecoder("utf-8")(errors="replace").decode
        self._key_tree = build_tree(KEY_MAP if key_map is None else key_map)
        self._branch = self._key_tree
        self._chars = deque()

    @property
    def pending(self):
        """Whether a partial escape sequence is waiting for more input."""
        return self._branch is not self._key_tree

    def decode(self, bb, flush=False):
        """Decode the given bytes into a list of keys.

        When flush is True, a pending escape sequence is resolved with what
        we have. Without a flush, a lonely escape byte is not reported until
        more bytes arrive, because it may be the start of e.g. an arrow key.
        """
        self._chars.extend(self._decode_utf8(bb))
        result = []

        while self._chars:
            c = self._chars.popleft()
            if c in self._branch:
                node = self._branch[c]
                if isinstance(node, dict):
                    self._branch = node
                else:
                    self._branch = self._key_tree
                    result.extend(node)
            elif self._branch is self._key_tree:
                result.append(c)
            else:
                # The sequence ended early, it may still resolve to a key
                result.extend(self._branch.get("", ()))
                self._branch = self._key_tree
                self._chars.appendleft(c)

        if flush and self.pending:
            result.extend(self._branch.get("", ()))
            self._branch = self._key_tree

        return result


def build_tree(map):
    """Build a tree from a flat map, so it can be traversed while decoding incoming chars."""
    trunk = {}
    for text, keys in map.items():
        branch = trunk
        while len(text) > 1:
            char, text = text[0], text[1:]
            new_branch = branch.setdefault(char, {})
            if not isinstance(new_branch, dict):
                branch[char] = new_branch = {"": new_branch}
            branch = new_branch
        if isinstance(branch.get(text), dict):
            branch[text][""] = keys
        else:
            branch[text] = keys
    assert "" not in trunk  # Sanity check
    return trunk


# %% A flat mapping of vt100 input sequences to keys

# Control characters first. Ctrl+letter produces the letter's position in
# the alphabet; a few of these have their own name.
KEY_MAP = {chr(i): (f"ctrl+{chr(ord('a') + i - 1)}",) for i in range(1, 27)}

KEY_MAP.update(
    {
        "\x00": ("ctrl+@",),  # Also for Ctrl-Space
        "\x08": ("backspace",),  # Control-H
        "\x09": ("tab",),  # Control-I
        "\x0a": ("enter",),  # Control-J, what a pipe gives us
        "\x0d": ("enter",),  # Control-M, what a raw tty gives us
        "\x1b": ("escape",),
        "\x1c": ("ctrl+backslash",),
        "\x1d": ("ctrl+right_square_bracket",),
        "\x1e": ("ctrl+circumflex_accent",),
        "\x1f": ("ctrl+underscore",),
        # Vt220 and the Linux terminal send DEL for the backspace key
        "\x7f": ("backspace",),
        "\x1b\x7f": ("ctrl+w",),
        # Cursor keys, both the CSI and the SS3 (application mode) variants
        "\x1b[A": ("up",),
        "\x1b[B": ("down",),
        "\x1b[C": ("right",),
        "\x1b[D": ("left",),
        "\x1b[H": ("home",),
        "\x1b[F": ("end",),
        "\x1bOA": ("up",),
        "\x1bOB": ("down",),
        "\x1bOC": ("right",),
        "\x1bOD": ("left",),
        "\x1bOH": ("home",),
        "\x1bOF": ("end",),
        "\x1bOM": ("enter",),
        # Various
        "\x1b[1~": ("home",),  # tmux
        "\x1b[2~": ("insert",),
        "\x1b[3~": ("delete",),
        "\x1b[4~": ("end",),  # tmux
        "\x1b[5~": ("pageup",),
        "\x1b[6~": ("pagedown",),
        "\x1b[7~": ("home",),  # xrvt
        "\x1b[8~": ("end",),  # xrvt
        "\x1b[Z": ("shift+tab",),
        "\x1b\x09": ("shift+tab",),  # Linux console
        # Function keys
        "\x1bOP": ("f1",),
        "\x1bOQ": ("f2",),
        "\x1bOR": ("f3",),
        "\x1bOS": ("f4",),
        "\x1b[[A": ("f1",),  # Linux console
        "\x1b[[B": ("f2",),
        "\x1b[[C": ("f3",),
        "\x1b[[D": ("f4",),
        "\x1b[[E": ("f5",),
        "\x1b[15~": ("f5",),
        "\x1b[17~": ("f6",),
        "\x1b[18~": ("f7",),
        "\x1b[19~": ("f8",),
        "\x1b[20~": ("f9",),
        "\x1b[21~": ("f10",),
        "\x1b[23~": ("f11",),
        "\x1b[24~": ("f12",),
        # Modified cursor keys (xterm)
        "\x1b[1;2A": ("shift+up",),
        "\x1b[1;2B": ("shift+down",),
        "\x1b[1;2C": ("shift+right",),
        "\x1b[1;2D": ("shift+left",),
        "\x1b[1;5A": ("ctrl+up",),
        "\x1b[1;5B": ("ctrl+down",),
        "\x1b[1;5C": ("ctrl+right",),
        "\x1b[1;5D": ("ctrl+left",),
        # Bracketed paste markers carry no key
        "\x1b[200~": (),
        "\x1b[201~": (),
        # Numeric keypad 5 when not in number mode
        "\x1b[E": (),  # Xterm
        "\x1b[G": (),  # Linux console
    }
)
