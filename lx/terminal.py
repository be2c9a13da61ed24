"""Terminal width lookup."""

import os
import sys
import logging
from typing import Optional

from lx.config import DEFAULT_TERMINAL_WIDTH
from lx.exceptions import TerminalSizeUnavailableException

logger = logging.getLogger(__name__)


def get_terminal_width(stream=None) -> int:
    """Return the column count of the terminal attached to ``stream``.

    Raises:
        TerminalSizeUnavailableException: If ``stream`` is not a terminal.
    """
    stream = stream or sys.stdout
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalSizeUnavailableException(f"Terminal size unavailable: {e}")
    if columns < 1:
        raise TerminalSizeUnavailableException(f"Terminal reported {columns} columns")
    return columns


def resolve_terminal_width(
    override: Optional[int] = None,
    default: int = DEFAULT_TERMINAL_WIDTH,
    stream=None,
) -> int:
    """Pick the layout width: explicit override, terminal size, then default."""
    if override is not None:
        return override
    try:
        return get_terminal_width(stream)
    except TerminalSizeUnavailableException as e:
        logger.debug(f"{e.message}; using default width {default}")
        return default
