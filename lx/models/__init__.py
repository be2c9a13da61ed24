from lx.models.directory import (
    DirectoryItem,
    DisplayMode,
    Visibility,
    is_hidden_name,
    make_directory_item,
)
from lx.models.responses import DirectoryItemResponse

__all__ = [
    "DirectoryItem", "DisplayMode", "Visibility",
    "is_hidden_name", "make_directory_item",
    "DirectoryItemResponse",
]
