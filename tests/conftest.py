"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from subtrack.core.config import reset_config
from subtrack.core.dates import parse_local_date
from tests.fixtures.subscriptions import make_subscription


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def reference_today():
    """Fixed "today" used throughout the renewal tests."""
    return parse_local_date("2025-12-10")


@pytest.fixture
def sample_subscriptions():
    """A small mixed collection of monthly and yearly subscriptions."""
    return [
        make_subscription("1", "Netflix", "2025-12-15", cost="15.99", category="Entertainment"),
        make_subscription("2", "Spotify", "2025-12-13", cost="9.99", category="Music"),
        make_subscription("3", "iCloud", "2026-02-01", cost="2.99", category="Storage"),
        make_subscription(
            "4", "Office 365", "2026-06-30", cost="99.99", billing_cycle="yearly", category="Productivity"
        ),
    ]


@pytest.fixture
def sample_storage_record():
    """Sample subscription record in the storage shape."""
    return {
        "id": "sub-123",
        "name": "Netflix",
        "cost": 15.99,
        "billingCycle": "monthly",
        "renewalDate": "2025-12-13",
        "category": "Entertainment",
        "createdAt": "2025-01-01T00:00:00.000Z",
        "updatedAt": "2025-01-01T00:00:00.000Z",
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a throwaway data directory."""
    monkeypatch.setenv("SUBTRACK_ENV", "test")
    monkeypatch.setenv("SUBTRACK_DATA_DIR", str(tmp_path / "subtrack_data"))
    monkeypatch.delenv("SUBTRACK_SUBSCRIPTIONS_FILE", raising=False)
    monkeypatch.delenv("TIMELINE_HORIZON_DAYS", raising=False)
    monkeypatch.delenv("UPCOMING_WINDOW_DAYS", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    reset_config()
    yield
    reset_config()


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "dates: Tests for calendar date parsing and arithmetic")
    config.addinivalue_line("markers", "currency: Tests for cost handling and precision")
    config.addinivalue_line("markers", "renewals: Tests for renewal aggregation")
