"""Listing configuration resolved from the environment."""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

COLUMNS_ENV = "LX_COLUMNS"
STRICT_BIRTHTIME_ENV = "LX_STRICT_BIRTHTIME"

DEFAULT_TERMINAL_WIDTH = 80
COLUMN_PADDING = 2
SIZE_WIDTH = 8

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ListingConfig:
    width: Optional[int] = None
    strict_birthtime: bool = False
    default_width: int = DEFAULT_TERMINAL_WIDTH

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ListingConfig":
        """Build a config from ``LX_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            ListingConfig with env overrides applied.
        """
        env = os.environ if environ is None else environ
        return cls(
            width=_parse_width(env.get(COLUMNS_ENV)),
            strict_birthtime=env.get(STRICT_BIRTHTIME_ENV, "").strip().lower() in _TRUTHY,
        )


def _parse_width(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        width = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {COLUMNS_ENV}={raw!r}: not an integer")
        return None
    if width < 1:
        logger.warning(f"Ignoring {COLUMNS_ENV}={raw!r}: must be positive")
        return None
    return width
