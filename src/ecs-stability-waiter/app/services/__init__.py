"""Services for the stability waiter."""

from .reporter import ActionReporter
from .waiter import StabilityWaiter

__all__ = [
    "ActionReporter",
    "StabilityWaiter",
]
