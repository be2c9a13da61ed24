"""CLI entry point for lx.

Usage:
    lx [DIRECTORY] [--all] [--permissions] [--json] [--width N] [--verbose]
"""

import logging
from dataclasses import replace
from typing import Optional

import click

from lx import __version__
from lx.config import ListingConfig
from lx.console import output_error, output_items_json, output_listing
from lx.exceptions import ScanException
from lx.models.directory import DisplayMode, Visibility
from lx.output.renderer import render, render_json_items
from lx.services.metadata import MetadataEnricher
from lx.services.scanner import DirectoryScanner

logger = logging.getLogger(__name__)


@click.command(help="List files and directories within a directory.")
@click.argument("directory", default=".")
@click.option("--all", "-a", "show_all", is_flag=True, help="Show all items, including hidden ones")
@click.option("--permissions", "-p", is_flag=True, help="Show creation date, permissions and size")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--width", "-w", type=click.IntRange(min=1), default=None, help="Terminal width override")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="lx")
def cli(
    directory: str,
    show_all: bool,
    permissions: bool,
    as_json: bool,
    width: Optional[int],
    verbose: bool,
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    config = ListingConfig.from_env()
    if width is not None:
        config = replace(config, width=width)

    scanner = DirectoryScanner(MetadataEnricher(strict_birthtime=config.strict_birthtime))
    try:
        items = scanner.scan(directory)
    except ScanException as e:
        logger.debug(f"Scan of {directory} failed: {e}")
        output_error(e.message)
        return

    visibility = Visibility.SHOW_ALL if show_all else Visibility.HIDE_HIDDEN

    if as_json:
        output_items_json(render_json_items(items, visibility))
        return

    mode = DisplayMode.DETAILED if permissions else DisplayMode.GRID
    text = render(
        items,
        visibility,
        mode,
        terminal_width=config.width,
        default_width=config.default_width,
    )
    output_listing(text)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
