"""AWS ECS stability probe.

Wraps the boto3 ``services_stable`` waiter, which polls DescribeServices
until every service has its desired task count running and no deployment
in progress.
"""

import asyncio
import time
from collections.abc import Iterator, Sequence
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shared.config import DEFAULT_WAITER_DELAY, DEFAULT_WAITER_MAX_ATTEMPTS
from shared.observability import (
    get_logger,
    log_external_call_end,
    log_external_call_start,
)

from ..errors import ProbeError

logger = get_logger(__name__)

ECS_API_VERSION = "2014-11-13"

# DescribeServices accepts at most 10 services per call
MAX_SERVICES_PER_CHECK = 10


def create_ecs_client(
    access_key_id: str = "",
    secret_access_key: str = "",
    region: str = "",
) -> Any:
    """Create an ECS client.

    Empty values fall back to boto3's default credential chain and
    region resolution.
    """
    return boto3.client(
        "ecs",
        api_version=ECS_API_VERSION,
        aws_access_key_id=access_key_id or None,
        aws_secret_access_key=secret_access_key or None,
        region_name=region or None,
    )


def _chunks(services: Sequence[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(services), size):
        yield list(services[start : start + size])


class EcsStabilityProbe:
    """Stability probe backed by one ECS client."""

    def __init__(
        self,
        client: Any,
        delay: int = DEFAULT_WAITER_DELAY,
        max_attempts: int = DEFAULT_WAITER_MAX_ATTEMPTS,
    ):
        self.client = client
        self.delay = delay
        self.max_attempts = max_attempts

    async def check(self, cluster: str, services: Sequence[str]) -> None:
        """Wait until every service is stable.

        Services are checked in batches of MAX_SERVICES_PER_CHECK, one
        batch after another.

        Raises:
            ProbeError: A batch did not stabilize or the ECS call failed
        """
        for batch in _chunks(services, MAX_SERVICES_PER_CHECK):
            start = time.monotonic()
            log_external_call_start(logger, "ecs", "services_stable")

            try:
                # The boto3 waiter blocks; keep the event loop free
                await asyncio.to_thread(self._wait, cluster, batch)
            except (BotoCoreError, ClientError) as e:
                log_external_call_end(
                    logger,
                    "ecs",
                    "services_stable",
                    success=False,
                    duration_ms=(time.monotonic() - start) * 1000,
                    error=str(e),
                )
                raise ProbeError(
                    f"Services not stable on cluster {cluster}: {e!s}",
                    cluster=cluster,
                    services=batch,
                ) from e

            log_external_call_end(
                logger,
                "ecs",
                "services_stable",
                success=True,
                duration_ms=(time.monotonic() - start) * 1000,
            )

    def _wait(self, cluster: str, services: list[str]) -> None:
        waiter = self.client.get_waiter("services_stable")
        waiter.wait(
            cluster=cluster,
            services=services,
            WaiterConfig={
                "Delay": self.delay,
                "MaxAttempts": self.max_attempts,
            },
        )
