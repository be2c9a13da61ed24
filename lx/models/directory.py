from dataclasses import dataclass
from datetime import date
from enum import Enum

from lx.exceptions import InvalidArgumentException

PERMISSION_CHARS = frozenset("rwx-")
PERMISSION_LENGTH = 9


class Visibility(str, Enum):
    SHOW_ALL = "all"
    HIDE_HIDDEN = "visible"

    def selects(self, item: "DirectoryItem") -> bool:
        if self is Visibility.SHOW_ALL:
            return True
        return not item.is_hidden


class DisplayMode(str, Enum):
    GRID = "grid"
    DETAILED = "detailed"


@dataclass(frozen=True)
class DirectoryItem:
    name: str
    is_dir: bool
    is_hidden: bool
    file_permissions: str  # "rwxr-xr-x" format
    size: int
    created_at: date


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def make_directory_item(
    name: str,
    is_dir: bool,
    file_permissions: str,
    size: int,
    created_at: date,
) -> DirectoryItem:
    """Build a validated DirectoryItem.

    ``is_hidden`` is derived from ``name`` and never passed in.

    Raises:
        InvalidArgumentException: If any field is missing or malformed.
    """
    if not name:
        raise InvalidArgumentException("Name must not be empty", argument_name="name")
    if (
        file_permissions is None
        or len(file_permissions) != PERMISSION_LENGTH
        or not set(file_permissions) <= PERMISSION_CHARS
    ):
        raise InvalidArgumentException(
            f"Invalid permission string: {file_permissions!r}",
            argument_name="file_permissions",
        )
    if size is None or size < 0:
        raise InvalidArgumentException(
            f"Size must be non-negative, got {size}", argument_name="size"
        )
    if created_at is None:
        raise InvalidArgumentException(
            "Creation date is required", argument_name="created_at"
        )

    return DirectoryItem(
        name=name,
        is_dir=bool(is_dir),
        is_hidden=is_hidden_name(name),
        file_permissions=file_permissions,
        size=size,
        created_at=created_at,
    )
