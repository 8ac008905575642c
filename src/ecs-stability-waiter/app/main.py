"""ECS Stability Waiter entry point.

Waits for a set of ECS services to become stable and reports the result
to the GitHub Actions runner:
- ``retries`` output with the number of attempts on success
- ``::error::`` annotation and exit code 1 on failure
"""

from __future__ import annotations

import asyncio
import sys

from pydantic import ValidationError
from pydantic_settings import SettingsError

from shared.config import StabilityWaiterSettings
from shared.models import PollOutcome, PollRequest
from shared.observability import RunContextManager, get_logger, setup_logging

from .clients import EcsStabilityProbe, create_ecs_client
from .errors import ConfigurationError
from .services import ActionReporter, StabilityWaiter

logger = get_logger(__name__)


def load_settings() -> StabilityWaiterSettings:
    """Read action inputs from the environment.

    Raises:
        ConfigurationError: An input is missing or malformed
    """
    try:
        return StabilityWaiterSettings()
    except (ValidationError, SettingsError) as e:
        raise ConfigurationError(str(e)) from e


def report_outcome(
    outcome: PollOutcome,
    request: PollRequest,
    reporter: ActionReporter,
) -> None:
    """Translate a poll outcome into a step output or a step failure."""
    if outcome.exhausted(request.max_retries):
        message = f"Service is not stable after {request.max_retries} retries!"
        if request.verbose:
            logger.error(message, cluster=request.cluster, services=request.services)
        reporter.set_failed(message)
        return

    if request.verbose:
        logger.info(
            f"Service is stable after {outcome.attempts_made} retries!",
            cluster=request.cluster,
            attempts=outcome.attempts_made,
        )
    reporter.set_output("retries", outcome.attempts_made)


async def run(reporter: ActionReporter) -> None:
    """Run the action.

    Any error during setup or polling fails the step with the error's
    message.
    """
    try:
        settings = load_settings()
        setup_logging(
            service_name=settings.app_name,
            log_level=settings.effective_log_level,
            log_format=settings.log_format,
        )
        request = settings.to_poll_request()

        # One ECS connection for the whole run
        client = create_ecs_client(
            access_key_id=settings.aws.access_key_id,
            secret_access_key=settings.aws.secret_access_key,
            region=settings.aws.region,
        )
        probe = EcsStabilityProbe(
            client,
            delay=settings.waiter_delay,
            max_attempts=settings.waiter_max_attempts,
        )

        async with RunContextManager(cluster=request.cluster):
            logger.debug(
                "Starting stability check",
                version=settings.app_version,
                services=request.services,
                retries=request.max_retries,
            )
            outcome = await StabilityWaiter().poll(request, probe)
            report_outcome(outcome, request, reporter)

    except Exception as e:
        logger.error("Stability check aborted", error=str(e))
        reporter.set_failed(str(e) or e.__class__.__name__)


def main() -> int:
    """Console entry point; returns the process exit code."""
    reporter = ActionReporter()
    asyncio.run(run(reporter))
    return reporter.exit_code


if __name__ == "__main__":
    sys.exit(main())
