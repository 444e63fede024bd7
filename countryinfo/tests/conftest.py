"""Pytest configuration and shared fixtures."""

import os

import pytest
import structlog

from countryinfo.app.config import get_settings
from countryinfo.app.country_data import COLUMNS
from countryinfo.app.services.lookup import registry as shared_registry


def make_row(alpha3: str, alpha2: str, numeric: int, **overrides) -> tuple:
    """Build a positional table row with blank codes unless overridden."""
    values = {column: "" for column in COLUMNS}
    values.update(
        alpha3=alpha3,
        alpha2=alpha2,
        numeric=numeric,
        name=f"Country {alpha3}",
        independent_status="Yes",
    )
    values.update(overrides)
    return tuple(values[column] for column in COLUMNS)


@pytest.fixture
def row_factory():
    return make_row


@pytest.fixture
def registry():
    """The process-wide registry built from the embedded table."""
    return shared_registry


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any COUNTRYINFO_* variables leaking in from the environment."""
    for name in list(os.environ):
        if name.startswith("COUNTRYINFO_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
