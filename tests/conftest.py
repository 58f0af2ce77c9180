"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For shared schema documents, see tests/fixtures/schema_fixtures.py
"""

import json
import pytest

from core.schema import load_schema
from tests.fixtures.schema_fixtures import VALID_SCHEMA, valid_schema


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that drive the HTTP surface (deselect with '-m \"not api\"')"
    )


@pytest.fixture
def schema_document():
    """A fresh, mutable copy of the shared schema document."""
    return valid_schema()


@pytest.fixture
def schema():
    """The shared schema document, loaded."""
    return load_schema(valid_schema())


@pytest.fixture
def schema_file(tmp_path):
    """The shared schema document written to a temporary JSON file."""
    path = tmp_path / "skill_coefficients.json"
    path.write_text(json.dumps(VALID_SCHEMA), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Keep configuration overrides from the developer's shell out of tests."""
    for key in ("APP_CONFIG", "SCHEMA_PATH", "WEB_HOST", "WEB_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
