"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from blogdata.config import StorageSettings, ENV_OVERRIDES, CONFIG_FILE_ENV, ensure_directories
from blogdata.repositories.blog_repository import BlogRepository


@pytest.fixture(autouse=True)
def clean_blogdata_env(monkeypatch):
    """Keep BLOGDATA_* variables from the host out of the tests."""
    for env_name in list(ENV_OVERRIDES) + [CONFIG_FILE_ENV]:
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture
def settings(tmp_path):
    """Storage settings rooted in a fresh temp directory, folders created."""
    storage = StorageSettings(data_path=str(tmp_path / "data"))
    ensure_directories(storage)
    return storage


@pytest.fixture
def blog_repo(settings):
    """BlogRepository over the temp data directory."""
    return BlogRepository(settings)
