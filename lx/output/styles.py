"""ANSI style table shared by wrapping and width measurement.

Every style is a (start, reset) pair. Stripping uses the same table so
measured widths always match what :func:`wrap` produced.
"""

import unicodedata
from typing import NamedTuple

STYLE_BOLD = "\x1b[1m"
COLOUR_PINK = "\x1b[95m"
STYLE_RESET = "\x1b[0m"
COLOUR_RESET = "\x1b[39m"


class Style(NamedTuple):
    start: str
    reset: str


DIRECTORY_STYLE = Style(start=STYLE_BOLD + COLOUR_PINK, reset=STYLE_RESET + COLOUR_RESET)

STYLES = (DIRECTORY_STYLE,)

# Longest first so composite sequences are removed before their parts
CONTROL_SEQUENCES = tuple(
    sorted(
        {seq for style in STYLES for seq in style},
        key=len,
        reverse=True,
    )
)


def wrap(text: str, style: Style) -> str:
    return f"{style.start}{text}{style.reset}"


def sanitize_name(name: str) -> str:
    """Replace control characters with ``?`` so a name cannot carry its own
    escape sequences onto the terminal.
    """
    return "".join(
        "?" if unicodedata.category(ch) == "Cc" else ch for ch in name
    )


def strip_styles(text: str) -> str:
    for seq in CONTROL_SEQUENCES:
        text = text.replace(seq, "")
    return text


def char_display_width(ch: str) -> int:
    """Return terminal cell width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def visual_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in strip_styles(text))


def is_directory_token(token: str) -> bool:
    return token.startswith(DIRECTORY_STYLE.start)
