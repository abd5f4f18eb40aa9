"""
Pytest fixtures and configuration for the test suite.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import analytics_client package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from analytics_client.analytics.params import AnalyticsParams  # noqa: E402

# === ENVIRONMENT FIXTURES ===


@pytest.fixture
def clean_env(monkeypatch):
    """Remove analytics client environment variables for the duration of a test."""
    import os

    for key in list(os.environ):
        if key.startswith("ANALYTICS_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


# === BUILDER FIXTURES ===


@pytest.fixture
def params() -> AnalyticsParams:
    """Provide a freshly built AnalyticsParams."""
    return AnalyticsParams.build()


@pytest.fixture
def query_json() -> dict:
    """Provide a query body as a caller would hand it to inject_params."""
    return {"statement": "SELECT VALUE 1;"}


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a fast unit test")
