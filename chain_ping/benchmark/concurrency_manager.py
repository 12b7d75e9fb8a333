"""Drives the repeated probes against one endpoint."""
import asyncio
import dataclasses
import itertools
import logging
from typing import List

import httpx

from .models import ProbeOutcome
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class ConcurrencyManager:
    """Runs ``pings`` probes against a single endpoint."""

    def __init__(self, request_executor: RequestExecutor, concurrent_pings: bool = False):
        self.request_executor = request_executor
        self.concurrent_pings = concurrent_pings

    async def run(self, client: httpx.AsyncClient, endpoint: str, pings: int, timeout: float) -> List[ProbeOutcome]:
        """
        Issue ``pings`` probes against one endpoint.

        Args:
            client: Async HTTP client owned by this endpoint.
            endpoint: JSON-RPC endpoint URL.
            pings: Number of probes to issue.
            timeout: Deadline applied to each probe separately.

        Returns:
            One outcome per probe in dispatch order, each stamped with its completion index.
        """
        completion_counter = itertools.count()

        async def _timed_probe(sequence: int) -> ProbeOutcome:
            outcome = await self.request_executor.probe(client, endpoint, timeout, sequence)
            # The event loop resumes probes one at a time, so indexes are unique.
            return dataclasses.replace(outcome, completion_index=next(completion_counter))

        if self.concurrent_pings:
            outcomes = list(await asyncio.gather(*(_timed_probe(i) for i in range(pings))))
        else:
            outcomes = [await _timed_probe(i) for i in range(pings)]

        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        logger.debug(f"{endpoint}: {pings - failed}/{pings} probes succeeded")
        return outcomes
