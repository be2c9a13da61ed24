from lx.services.metadata import MetadataEnricher, humanize_size, mode_to_rwx
from lx.services.scanner import DirectoryScanner

__all__ = [
    "MetadataEnricher", "humanize_size", "mode_to_rwx",
    "DirectoryScanner",
]
