"""Stability polling models.

A PollRequest describes one bounded wait for a set of services on a
cluster. A PollOutcome is produced once per request.
"""

from pydantic import Field, field_validator

from .base import WaiterBaseModel


class PollRequest(WaiterBaseModel):
    """Parameters of a single stability poll."""

    cluster: str = Field(min_length=1, description="Cluster name or ARN")
    services: list[str] = Field(
        min_length=1,
        description="Service names or ARNs, in the order they are checked",
    )
    max_retries: int = Field(ge=0, description="Maximum number of probe attempts")
    verbose: bool = Field(default=False, description="Log one line per attempt")

    @field_validator("services")
    @classmethod
    def validate_services(cls, v: list[str]) -> list[str]:
        if any(not service for service in v):
            raise ValueError("Service identifiers must be non-empty strings")
        return v


class PollOutcome(WaiterBaseModel):
    """Result of a stability poll.

    attempts_made is the 1-based index of the successful attempt, or
    max_retries + 1 when every attempt failed.
    """

    attempts_made: int = Field(ge=1)
    stable: bool

    def exhausted(self, max_retries: int) -> bool:
        """Check whether the retry budget ran out before stability."""
        return self.attempts_made > max_retries
