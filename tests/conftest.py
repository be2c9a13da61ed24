"""Pytest configuration and fixtures."""

import pytest
import logging
from datetime import date

from lx.config import COLUMNS_ENV, STRICT_BIRTHTIME_ENV
from lx.models.directory import make_directory_item

# Configure logging for tests
logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LX_* settings from the developer's shell out of tests."""
    monkeypatch.delenv(COLUMNS_ENV, raising=False)
    monkeypatch.delenv(STRICT_BIRTHTIME_ENV, raising=False)


@pytest.fixture
def listing_dir(tmp_path):
    """Directory holding one file and one empty subdirectory."""
    (tmp_path / "file.txt").touch()
    (tmp_path / "subdir").mkdir()
    return tmp_path


@pytest.fixture
def make_item():
    """Factory for DirectoryItem values with sensible defaults."""

    def _make(
        name,
        is_dir=False,
        file_permissions="rw-r--r--",
        size=0,
        created_at=date(2024, 1, 2),
    ):
        return make_directory_item(
            name=name,
            is_dir=is_dir,
            file_permissions=file_permissions,
            size=size,
            created_at=created_at,
        )

    return _make
