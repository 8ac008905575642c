"""Test fixtures for the ECS Stability Waiter."""

from collections.abc import Sequence

import pytest
import structlog

from app.errors import ProbeError


class FakeProbe:
    """Stability probe that succeeds on a chosen call.

    succeed_on=None never succeeds.
    """

    def __init__(self, succeed_on: int | None = 1):
        self.succeed_on = succeed_on
        self.calls: list[tuple[str, list[str]]] = []

    async def check(self, cluster: str, services: Sequence[str]) -> None:
        self.calls.append((cluster, list(services)))
        if self.succeed_on is None or len(self.calls) < self.succeed_on:
            raise ProbeError("Max attempts exceeded", cluster=cluster, services=services)


@pytest.fixture
def always_succeed_probe():
    return FakeProbe(succeed_on=1)


@pytest.fixture
def always_fail_probe():
    return FakeProbe(succeed_on=None)


@pytest.fixture
def probe_factory():
    """Build a probe that succeeds on the Nth call."""
    return FakeProbe


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop any logging configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def action_env(monkeypatch, tmp_path):
    """Environment of a typical action run."""
    output_file = tmp_path / "github_output"
    output_file.touch()

    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("INPUT_AWS-ACCESS-KEY-ID", "AKIAEXAMPLE")
    monkeypatch.setenv("INPUT_AWS-SECRET-ACCESS-KEY", "secret")
    monkeypatch.setenv("INPUT_AWS-REGION", "eu-west-1")
    monkeypatch.setenv("INPUT_ECS-CLUSTER", "prod-cluster")
    monkeypatch.setenv("INPUT_ECS-SERVICES", '["svc-a", "svc-b"]')
    monkeypatch.setenv("INPUT_RETRIES", "3")
    monkeypatch.setenv("INPUT_VERBOSE", "true")
    monkeypatch.setenv("INPUT_WAITER-DELAY", "1")
    monkeypatch.setenv("INPUT_WAITER-MAX-ATTEMPTS", "2")
    return output_file
