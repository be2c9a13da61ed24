"""Conversion of raw directory entries into DirectoryItem records."""

import os
import stat
import logging
from datetime import date, datetime

from lx.models.directory import DirectoryItem, make_directory_item
from lx.exceptions import (
    InvalidArgumentException,
    MetadataError,
    MetadataUnavailableException,
)

logger = logging.getLogger(__name__)

# Owner, group, other; read, write, execute
PERMISSION_FLAGS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)

KILOBYTE = 1024


def mode_to_rwx(mode: int) -> str:
    """Convert mode bits into a 9 character rwx string."""
    return "".join(ch if mode & bit else "-" for bit, ch in PERMISSION_FLAGS)


def humanize_size(size: int) -> str:
    """Format a byte count, switching to kilobytes above 1024 bytes.

    >>> humanize_size(512)
    '512b'
    >>> humanize_size(1536)
    '1.5kb'
    """
    if size > KILOBYTE:
        return f"{size / KILOBYTE:.1f}kb"
    return f"{size}b"


def timestamp_to_local_date(timestamp: float) -> date:
    return datetime.fromtimestamp(timestamp).date()


def decode_name(name: str) -> str:
    """Return ``name`` if it is valid text.

    Undecodable bytes surface from ``os.scandir`` as lone surrogates.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raise MetadataUnavailableException(
            f"Undecodable entry name: {name!r}",
            name=name,
            reason=MetadataError.INVALID_NAME,
        )
    return name


class MetadataEnricher:
    """Builds DirectoryItem records from ``os.DirEntry``-like objects."""

    def __init__(self, strict_birthtime: bool = False):
        self._strict_birthtime = strict_birthtime

    def creation_timestamp(self, st: os.stat_result, name: str) -> float:
        """Return the creation timestamp recorded in ``st``.

        Without ``st_birthtime``, Windows reports creation through
        ``st_ctime``. Elsewhere ``st_ctime`` is the inode change time and is
        only used when strict mode is off.
        """
        birthtime = getattr(st, "st_birthtime", None)
        if birthtime is not None:
            return birthtime
        if os.name == "nt" or not self._strict_birthtime:
            return st.st_ctime
        raise MetadataUnavailableException(
            f"No creation time for {name}",
            name=name,
            reason=MetadataError.NO_CREATION_TIME,
        )

    def enrich(self, entry) -> DirectoryItem:
        """Convert one directory entry into a DirectoryItem.

        Args:
            entry: An ``os.DirEntry`` (or anything with ``name``, ``is_dir``
                and ``stat``).

        Returns:
            The enriched DirectoryItem.

        Raises:
            MetadataUnavailableException: If the entry cannot be described.
        """
        name = decode_name(entry.name)

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            raise MetadataUnavailableException(
                f"Failed to read metadata for {name}: {e}",
                name=name,
                reason=MetadataError.UNREADABLE,
            )

        try:
            created_at = timestamp_to_local_date(self.creation_timestamp(st, name))
        except (OverflowError, OSError, ValueError) as e:
            raise MetadataUnavailableException(
                f"Invalid creation time for {name}: {e}",
                name=name,
                reason=MetadataError.UNREADABLE,
            )

        try:
            return make_directory_item(
                name=name,
                is_dir=is_dir,
                file_permissions=mode_to_rwx(st.st_mode),
                size=st.st_size,
                created_at=created_at,
            )
        except InvalidArgumentException as e:
            raise MetadataUnavailableException(
                f"Invalid {e.argument_name} for {name}: {e.message}",
                name=name,
                reason=MetadataError.INVALID_FIELD,
            )
