"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from shared.models import PollOutcome, PollRequest


class TestPollRequest:
    """Test poll request model."""

    def test_poll_request(self, sample_poll_request_data: dict) -> None:
        """Test creating a poll request."""
        request = PollRequest(**sample_poll_request_data)
        assert request.cluster == "prod-cluster"
        assert request.services == ["svc-a", "svc-b"]
        assert request.max_retries == 3
        assert request.verbose is True

    def test_verbose_defaults_off(self) -> None:
        request = PollRequest(cluster="c", services=["s"], max_retries=1)
        assert request.verbose is False

    def test_zero_retries_allowed(self) -> None:
        """Test a zero retry budget is accepted."""
        request = PollRequest(cluster="c", services=["s"], max_retries=0)
        assert request.max_retries == 0

    def test_negative_retries_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PollRequest(cluster="c", services=["s"], max_retries=-1)

    def test_empty_services_rejected(self) -> None:
        """Test at least one service is required."""
        with pytest.raises(ValidationError):
            PollRequest(cluster="c", services=[], max_retries=1)

    def test_blank_service_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-empty"):
            PollRequest(cluster="c", services=["svc-a", ""], max_retries=1)

    def test_empty_cluster_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PollRequest(cluster="", services=["s"], max_retries=1)

    def test_request_is_immutable(self, sample_poll_request_data: dict) -> None:
        """Test requests cannot change during a poll."""
        request = PollRequest(**sample_poll_request_data)
        with pytest.raises(ValidationError):
            request.max_retries = 5


class TestPollOutcome:
    """Test poll outcome model."""

    def test_exhausted(self) -> None:
        """Test the downstream failure check."""
        assert PollOutcome(attempts_made=3, stable=False).exhausted(2)
        assert not PollOutcome(attempts_made=3, stable=True).exhausted(3)

    def test_attempts_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PollOutcome(attempts_made=0, stable=False)
