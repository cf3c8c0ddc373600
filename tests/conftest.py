"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from st8 import StoreSettings, create_store
from st8.config import default_settings


def set_x(data, value):
    data["x"] = value


def generic(data, item):
    data[item["name"]] = item["value"]


@pytest.fixture
def fresh_default_settings():
    """Re-read ST8_* defaults around a test that patches the environment."""
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings, independent of ST8_* environment variables."""
    return StoreSettings(falsy_reads_absent=True, copy_reads=False)


@pytest.fixture
def store(settings):
    """Store with one data key and two mutations."""
    return create_store(
        {
            "data": {"x": None, "a": "bc"},
            "mutations": {"set_x": set_x, "generic": generic},
        },
        settings=settings,
    )


@pytest.fixture
def generic_store(settings):
    """Store with no data, only a generic key/value mutation."""
    return create_store({"mutations": {"generic": generic}}, settings=settings)
