"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's .env settings out of the test run."""
    monkeypatch.delenv("LV_NUMWORDS_MAX_BATCH", raising=False)
    monkeypatch.delenv("LV_NUMWORDS_LOG_LEVEL", raising=False)
    yield
