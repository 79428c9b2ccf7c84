"""Root test configuration: shared settings and in-memory file system fixtures"""

from pathlib import Path

import pytest

from knitpost.config import Settings
from knitpost.store.fs import MemoryFileSystem


@pytest.fixture(name="memory_fs")
def memory_fs_fixture():
    return MemoryFileSystem()


@pytest.fixture(name="settings")
def settings_fixture():
    """Default settings with tags rooted at a fixed relative path."""
    return Settings(tags_dir="site/tags")


@pytest.fixture(name="tags_dir")
def tags_dir_fixture(settings):
    return Path(settings.tags_dir)
