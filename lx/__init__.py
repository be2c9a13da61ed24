"""lx - list directory contents as styled, column-aligned terminal output."""

from lx.models.directory import (
    DirectoryItem,
    DisplayMode,
    Visibility,
    make_directory_item,
)
from lx.services.metadata import MetadataEnricher
from lx.services.scanner import DirectoryScanner
from lx.exceptions import (
    LxException,
    ScanException,
    DirectoryNotFoundException,
    NotADirectoryException,
    PermissionDeniedException,
    MetadataError,
    MetadataUnavailableException,
    InvalidArgumentException,
    TerminalSizeUnavailableException,
)

__version__ = "0.1.0"
__all__ = [
    # Models
    "DirectoryItem",
    "DisplayMode",
    "Visibility",
    "make_directory_item",
    # Services
    "MetadataEnricher",
    "DirectoryScanner",
    # Exceptions
    "LxException",
    "ScanException",
    "DirectoryNotFoundException",
    "NotADirectoryException",
    "PermissionDeniedException",
    "MetadataError",
    "MetadataUnavailableException",
    "InvalidArgumentException",
    "TerminalSizeUnavailableException",
]
