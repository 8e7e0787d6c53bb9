"""
Escape sequences for colors, text style and the cursor.

These functions only build strings; writing them is up to the caller
(usually ``Output``).
"""

import re


ESC = "\x1b"

# Style flags, can be combined with ``|``
BOLD = 1
DIM = 2
ITALIC = 4
UNDERLINE = 8
BLINK = 16
INVERSE = 32
HIDDEN = 64
STRIKE = 128

# flag -> (code to turn on, code to turn off)
_STYLE_CODES = {
    BOLD: (1, 22),
    DIM: (2, 22),
    ITALIC: (3, 23),
    UNDERLINE: (4, 24),
    BLINK: (5, 25),
    INVERSE: (7, 27),
    HIDDEN: (8, 28),
    STRIKE: (9, 29),
}

COLOR_NAMES = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def format_color(spec, background=False):
    """Get the SGR parameters for a color spec, or "" if the spec is not understood.

    A spec can be an int in the 256-color palette, a "#rrggbb" or "#rgb"
    string, or one of the basic color names, optionally prefixed with "bright".
    """
    if isinstance(spec, bool):
        return ""
    if isinstance(spec, int):
        if 0 <= spec <= 255:
            return f"{48 if background else 38};5;{spec}"
        return ""
    if not isinstance(spec, str):
        return ""

    spec = spec.strip().lower()
    m = _HEX_RE.match(spec)
    if m:
        hex = m.group(1)
        if len(hex) == 3:
            hex = "".join(c * 2 for c in hex)
        r, g, b = (int(hex[i : i + 2], 16) for i in (0, 2, 4))
        return f"{48 if background else 38};2;{r};{g};{b}"
    elif spec.isdigit():
        return format_color(int(spec), background)

    bright = spec.startswith("bright")
    name = spec[len("bright") :].strip(" _-") if bright else spec
    index = COLOR_NAMES.get(name)
    if index is None:
        return ""
    if bright:
        return str((100 if background else 90) + index)
    return str((40 if background else 30) + index)


def format_style(flags, invert=False):
    """Get the SGR parameters to turn the given style flags on (or off)."""
    codes = []
    for flag, (on, off) in _STYLE_CODES.items():
        if flags & flag:
            code = off if invert else on
            if code not in codes:
                codes.append(code)
    return ";".join(str(code) for code in codes)


def format_escape(color=None, background=None, flags=None, invert=False):
    """Combine style, color and background in a single SGR escape sequence."""
    params = []
    if flags:
        params.append(format_style(flags, invert))
    if color is not None:
        params.append(format_color(color))
    if background is not None:
        params.append(format_color(background, True))
    params = [p for p in params if p]
    if not params:
        return ""
    return f"{ESC}[{';'.join(params)}m"


# Fixed sequences

RESET = f"{ESC}[0m"
BELL = "\x07"
SHOW_CURSOR = f"{ESC}[?25h"
HIDE_CURSOR = f"{ESC}[?25l"
SAVE_CURSOR = f"{ESC}7"
RESTORE_CURSOR = f"{ESC}8"
CLEAR_SCREEN = f"{ESC}[2J{ESC}[H"
CLEAR_LINE = f"{ESC}[2K{ESC}[G"
CLEAR_TO_EOL = f"{ESC}[0K"


def cursor_left(n=1):
    return f"{ESC}[{n}D"


def move_to(row=1, col=1):
    return f"{ESC}[{row};{col}H"
