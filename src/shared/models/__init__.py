"""Shared data models for the ECS stability waiter.

All models follow these conventions:
- Immutable (frozen) after construction
- Field names: lowercase snake_case
"""

# Base
from .base import WaiterBaseModel

# Stability polling
from .stability import PollOutcome, PollRequest

__all__ = [
    # Base
    "WaiterBaseModel",
    # Stability polling
    "PollRequest",
    "PollOutcome",
]
