"""Exceptions raised by the stability waiter."""

from collections.abc import Sequence


class StabilityWaiterError(Exception):
    """Base class for stability waiter errors."""


class ProbeError(StabilityWaiterError):
    """A stability check did not confirm stability.

    Raised for services still settling as well as for API failures; the
    retry loop treats both the same way.
    """

    def __init__(
        self,
        message: str,
        cluster: str | None = None,
        services: Sequence[str] = (),
    ):
        super().__init__(message)
        self.cluster = cluster
        self.services = list(services)


class ConfigurationError(StabilityWaiterError):
    """Action inputs are missing or malformed."""
