"""Rendering of directory items as grid or detailed text."""

from typing import Iterable, List, Optional

from lx.config import COLUMN_PADDING, DEFAULT_TERMINAL_WIDTH, SIZE_WIDTH
from lx.models.directory import DirectoryItem, DisplayMode, Visibility
from lx.models.responses import DirectoryItemResponse
from lx.output.layout import layout
from lx.output.styles import DIRECTORY_STYLE, sanitize_name, wrap
from lx.services.metadata import humanize_size


def select(items: Iterable[DirectoryItem], visibility: Visibility) -> List[DirectoryItem]:
    return [item for item in items if visibility.selects(item)]


def directories_first(items: Iterable[DirectoryItem]) -> List[DirectoryItem]:
    return sorted(items, key=lambda item: not item.is_dir)


def display_name(item: DirectoryItem) -> str:
    name = sanitize_name(item.name)
    if item.is_dir:
        return wrap(name, DIRECTORY_STYLE)
    return name


def grid_tokens(items: Iterable[DirectoryItem], visibility: Visibility) -> List[str]:
    return [display_name(item) for item in select(items, visibility)]


def detailed_line(item: DirectoryItem, size_width: int = SIZE_WIDTH) -> str:
    return " ".join(
        [
            item.created_at.isoformat(),
            item.file_permissions,
            humanize_size(item.size).rjust(size_width),
            display_name(item),
        ]
    )


def size_column_width(items: Iterable[DirectoryItem], minimum: int = SIZE_WIDTH) -> int:
    """Width of the size column: ``minimum``, grown to fit the widest size."""
    return max([minimum] + [len(humanize_size(item.size)) for item in items])


def detailed_lines(
    items: Iterable[DirectoryItem],
    visibility: Visibility,
    size_width: int = SIZE_WIDTH,
) -> List[str]:
    selected = directories_first(select(items, visibility))
    width = size_column_width(selected, size_width)
    return [detailed_line(item, width) for item in selected]


def render(
    items: Iterable[DirectoryItem],
    visibility: Visibility = Visibility.HIDE_HIDDEN,
    mode: DisplayMode = DisplayMode.GRID,
    terminal_width: Optional[int] = None,
    padding: int = COLUMN_PADDING,
    size_width: int = SIZE_WIDTH,
    default_width: int = DEFAULT_TERMINAL_WIDTH,
) -> str:
    """Render directory items as text.

    Args:
        items: Scanned items, in any order.
        visibility: Which items to show.
        mode: Grid of names or one detailed line per item.
        terminal_width: Grid width; read from the terminal when None.
        padding: Grid inter-column padding.
        size_width: Minimum right-aligned width of the detailed size column.
        default_width: Grid width when the terminal cannot be queried.

    Returns:
        Rendered text, "" when nothing passes the filter.
    """
    if mode is DisplayMode.DETAILED:
        return "\n".join(detailed_lines(items, visibility, size_width)).rstrip()
    tokens = grid_tokens(items, visibility)
    if not tokens:
        return ""
    return layout(tokens, terminal_width, padding, default_width)


def render_json_items(
    items: Iterable[DirectoryItem],
    visibility: Visibility = Visibility.HIDE_HIDDEN,
) -> List[DirectoryItemResponse]:
    """Return response models for the selected items, directories first."""
    return [
        DirectoryItemResponse.from_item(item, humanize_size(item.size))
        for item in directories_first(select(items, visibility))
    ]
