"""Bounded retry loop over a stability probe."""

from shared.models import PollOutcome, PollRequest
from shared.observability import get_logger

from ..clients.base import StabilityProbe
from ..errors import ProbeError

logger = get_logger(__name__)


class StabilityWaiter:
    """Repeats a stability probe until it succeeds or retries run out.

    Attempts run strictly one after another with no delay in between;
    pacing comes from the probe's own wait. Every ProbeError is absorbed
    and counted as a failed attempt, any other exception propagates.
    """

    async def poll(self, request: PollRequest, probe: StabilityProbe) -> PollOutcome:
        """Run up to request.max_retries probe attempts.

        Returns:
            PollOutcome whose attempts_made is the index of the successful
            attempt, or max_retries + 1 when every attempt failed. With
            max_retries of 0 the probe is never called.
        """
        curr_try = 1
        is_stable = False

        while curr_try <= request.max_retries and not is_stable:
            try:
                if request.verbose:
                    logger.info(
                        f"Waiting for service stability, try #{curr_try}",
                        attempt=curr_try,
                        cluster=request.cluster,
                        services=request.services,
                    )
                await probe.check(request.cluster, request.services)
                is_stable = True
            except ProbeError as e:
                if request.verbose:
                    logger.warning(
                        f"Try #{curr_try} failed!",
                        attempt=curr_try,
                        cluster=request.cluster,
                        error=str(e),
                    )
                curr_try += 1

        return PollOutcome(attempts_made=curr_try, stable=is_stable)
