"""Clients for the orchestration API."""

from .base import StabilityProbe
from .ecs import (
    ECS_API_VERSION,
    EcsStabilityProbe,
    create_ecs_client,
)

__all__ = [
    "ECS_API_VERSION",
    "EcsStabilityProbe",
    "StabilityProbe",
    "create_ecs_client",
]
