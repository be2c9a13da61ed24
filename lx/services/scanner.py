"""Directory scanning."""

import os
import logging
from typing import List, Optional

from lx.models.directory import DirectoryItem
from lx.services.metadata import MetadataEnricher
from lx.exceptions import MetadataUnavailableException, format_scan_error

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Lists one directory level as DirectoryItem records."""

    def __init__(self, enricher: Optional[MetadataEnricher] = None):
        self._enricher = enricher or MetadataEnricher()

    def scan(self, path: str) -> List[DirectoryItem]:
        """List directory contents.

        Entries whose metadata cannot be read are omitted. No order is
        guaranteed.

        Args:
            path: Directory path.

        Returns:
            List of DirectoryItem objects.

        Raises:
            DirectoryNotFoundException: If ``path`` doesn't exist.
            NotADirectoryException: If ``path`` is not a directory.
            PermissionDeniedException: If ``path`` cannot be read.
            ScanException: For any other failure opening ``path``.
        """
        try:
            iterator = os.scandir(path)
        except OSError as e:
            raise format_scan_error(e, path)

        items = []
        with iterator:
            try:
                for entry in iterator:
                    try:
                        items.append(self._enricher.enrich(entry))
                    except MetadataUnavailableException as e:
                        logger.debug(f"Skipping entry ({e.reason.value}): {e.message}")
            except OSError as e:
                raise format_scan_error(e, path)

        logger.debug(f"Scanned {len(items)} item(s) in {path}")
        return items
