"""Stability probe interface.

A probe performs one long-running check: it returns once every listed
service on the cluster is stable, or raises ProbeError when its own wait
budget runs out.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class StabilityProbe(Protocol):
    """A single blocking check for service stability."""

    async def check(self, cluster: str, services: Sequence[str]) -> None:
        """Wait until the services are stable.

        Raises:
            ProbeError: The services did not become stable within the
                probe's wait budget, or the check itself failed.
        """
        ...
