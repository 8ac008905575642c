"""Pytest configuration and shared fixtures."""

import os
from typing import Any

import pytest
import structlog

# Keep test runs independent of the runner environment
os.environ.pop("RUNNER_DEBUG", None)
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"


@pytest.fixture
def sample_poll_request_data() -> dict[str, Any]:
    """Sample poll request data for testing."""
    return {
        "cluster": "prod-cluster",
        "services": ["svc-a", "svc-b"],
        "max_retries": 3,
        "verbose": True,
    }


@pytest.fixture
def input_env(monkeypatch) -> None:
    """Action inputs as the runner sets them."""
    monkeypatch.setenv("INPUT_ECS-CLUSTER", "prod-cluster")
    monkeypatch.setenv("INPUT_ECS-SERVICES", '["svc-a", "svc-b"]')
    monkeypatch.setenv("INPUT_RETRIES", "3")
    monkeypatch.setenv("INPUT_VERBOSE", "true")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop any logging configuration a test installed."""
    yield
    structlog.reset_defaults()


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (require AWS access)"
    )
