"""Exception classes for lx.

Directory-level failures abort the listing; entry-level failures are
absorbed by the scanner and the entry is omitted.
"""

from enum import Enum
from typing import Optional


class MetadataError(str, Enum):
    INVALID_NAME = "invalid_name"
    UNREADABLE = "unreadable"
    NO_CREATION_TIME = "no_creation_time"
    INVALID_FIELD = "invalid_field"


class LxException(Exception):
    """Base exception for listing operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ScanException(LxException):
    """Raised when the target directory cannot be opened."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class DirectoryNotFoundException(ScanException):
    """Raised when the target directory does not exist."""

    def __init__(self, path: str):
        super().__init__(f"No such directory: {path}", path)


class NotADirectoryException(ScanException):
    """Raised when the target path is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"Not a directory: {path}", path)


class PermissionDeniedException(ScanException):
    """Raised when the target directory cannot be read."""

    def __init__(self, path: str):
        super().__init__(f"Permission denied: {path}", path)


class MetadataUnavailableException(LxException):
    """Raised when a single entry cannot be turned into a DirectoryItem."""

    def __init__(
        self,
        message: str = "Metadata unavailable",
        name: Optional[str] = None,
        reason: MetadataError = MetadataError.UNREADABLE,
    ):
        self.name = name
        self.reason = reason
        super().__init__(message)


class InvalidArgumentException(LxException):
    """Raised when invalid arguments are provided."""

    def __init__(
        self,
        message: str = "Invalid argument",
        argument_name: Optional[str] = None,
    ):
        self.argument_name = argument_name
        super().__init__(message)


class TerminalSizeUnavailableException(LxException):
    """Raised when the terminal width cannot be determined."""

    def __init__(self, message: str = "Terminal size unavailable"):
        super().__init__(message)


def format_scan_error(error: OSError, path: str) -> ScanException:
    """Map an OSError raised while opening ``path`` to a ScanException."""
    if isinstance(error, FileNotFoundError):
        return DirectoryNotFoundException(path)
    if isinstance(error, NotADirectoryError):
        return NotADirectoryException(path)
    if isinstance(error, PermissionError):
        return PermissionDeniedException(path)
    return ScanException(f"Failed to open directory {path}: {error}", path)
