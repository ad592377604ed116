"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Test environment that overrides every config value
TEST_ENV = {
    "SEARCH_WIRE_LOG_LEVEL": "info",
    "SEARCH_WIRE_LOG_JSON": "true",
    "SEARCH_WIRE_SERVICE_NAME": "search-wire-tests",
    "SEARCH_WIRE_MAX_STRING_BYTES": "1048576",
    "SEARCH_WIRE_MAX_ARRAY_SIZE": "1024",
    "SEARCH_WIRE_PRETTY_JSON": "false",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

# Now we can safely import config-dependent modules
from search_wire.config import get_settings
from search_wire.query import exists_filter, term_filter


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset environment variables and cached settings around each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def filter_a():
    return term_filter("user", "kimchy")


@pytest.fixture
def filter_b():
    return term_filter("tag", "wow")


@pytest.fixture
def filter_c():
    return exists_filter("deleted_at")
