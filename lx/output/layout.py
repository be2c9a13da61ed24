"""Column layout for styled name tokens.

Tokens may carry style sequences from :mod:`lx.output.styles`; those bytes
are kept in the output but contribute nothing to widths or padding.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from lx.config import COLUMN_PADDING, DEFAULT_TERMINAL_WIDTH
from lx.output.styles import is_directory_token, visual_width
from lx.terminal import resolve_terminal_width

logger = logging.getLogger(__name__)


def column_geometry(
    tokens: Sequence[str],
    terminal_width: int,
    padding: int = COLUMN_PADDING,
) -> Tuple[int, int]:
    """Return ``(column_width, column_count)`` for ``tokens``.

    At least one column is always used, even when a token is wider than
    the terminal, and a column is never narrower than one cell.
    """
    column_width = max(1, max(visual_width(token) for token in tokens) + padding)
    column_count = max(1, terminal_width // column_width)
    return column_width, column_count


def pad_token(token: str, column_width: int) -> str:
    return token + " " * max(0, column_width - visual_width(token))


def order_tokens(tokens: Sequence[str]) -> List[str]:
    """Stable sort with directory tokens ahead of file tokens."""
    return sorted(tokens, key=lambda token: not is_directory_token(token))


def layout(
    tokens: Sequence[str],
    terminal_width: Optional[int] = None,
    padding: int = COLUMN_PADDING,
    default_width: int = DEFAULT_TERMINAL_WIDTH,
) -> str:
    """Lay out ``tokens`` row-major in padded columns.

    Args:
        tokens: Display tokens, optionally styled.
        terminal_width: Available width; read from the terminal when None.
        padding: Spaces added to the widest token to form the column width.
        default_width: Width used when the terminal cannot be queried.

    Returns:
        The laid-out block with trailing whitespace removed, or "" when
        there are no tokens.
    """
    if not tokens:
        return ""

    if terminal_width is None:
        terminal_width = resolve_terminal_width(default=default_width)

    column_width, column_count = column_geometry(tokens, terminal_width, padding)
    logger.debug(
        f"Layout: {len(tokens)} token(s), width={terminal_width}, "
        f"column_width={column_width}, columns={column_count}"
    )

    ordered = order_tokens(tokens)
    rows = []
    for start in range(0, len(ordered), column_count):
        row = ordered[start:start + column_count]
        rows.append("".join(pad_token(token, column_width) for token in row))

    return "\n".join(rows).rstrip()
