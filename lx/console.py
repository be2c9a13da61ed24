"""Output helpers for the lx CLI.

Listings go to stdout untouched so their ANSI styling survives; errors go
to stderr through rich.
"""

import sys
from typing import List

from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape

from lx.models.responses import DirectoryItemResponse

error_console = Console(stderr=True)

_listing_adapter = TypeAdapter(List[DirectoryItemResponse])


def output_listing(text: str) -> None:
    """Print a rendered listing; an empty listing prints nothing."""
    if text:
        print(text)


def output_items_json(items: List[DirectoryItemResponse]) -> None:
    """Print directory items as an indented JSON array."""
    print(_listing_adapter.dump_json(items, indent=2).decode())


def output_error(message: str, exit_code: int = 1) -> None:
    """Output error message and optionally exit."""
    error_console.print(f"[red]Error:[/red] {escape(message)}", style="bold", soft_wrap=True)
    if exit_code:
        sys.exit(exit_code)
