"""Main class for running JSON-RPC latency benchmarks across many endpoints."""
import asyncio
import logging
from typing import List, Optional, Sequence

from .concurrency_manager import ConcurrencyManager
from .exceptions import InvalidBenchmarkConfigError
from .latency_analyzer import LatencyAnalyzer
from .models import BenchmarkConfig, EndpointResult
from .request_builder import ProbeRequestBuilder
from .request_executor import RequestExecutor
from .request_session_manager import RequestSessionManager


# Configure logging
logger = logging.getLogger(__name__)


class ChainPingBenchmark:
    """Fans probing out across endpoints and collects one result per endpoint."""

    def __init__(self, config: Optional[BenchmarkConfig] = None, request_session_manager: Optional[RequestSessionManager] = None):
        self.config = config or BenchmarkConfig()
        self.request_session_manager = request_session_manager or RequestSessionManager()
        self.request_executor = RequestExecutor(ProbeRequestBuilder())
        self.concurrency_manager = ConcurrencyManager(self.request_executor, concurrent_pings=self.config.concurrent_pings)
        self.latency_analyzer = LatencyAnalyzer()

    async def run(self, endpoints: Sequence[str], pings: int, timeout: float) -> List[EndpointResult]:
        """
        Probe every endpoint concurrently and wait for all of them.

        Args:
            endpoints: Endpoint URLs; duplicates are probed independently.
            pings: Probes per endpoint.
            timeout: Deadline per probe, in seconds.

        Returns:
            One EndpointResult per endpoint, in input order.

        Raises:
            InvalidBenchmarkConfigError: If pings or timeout is not positive.
        """
        self.validate(pings, timeout)

        logger.info(f"Pinging {len(endpoints)} endpoints {pings} times each (timeout {timeout}s)")
        results = await asyncio.gather(*(self._run_endpoint(endpoint, pings, timeout) for endpoint in endpoints))
        logger.info(f"Finished {len(results)} endpoints")
        return list(results)

    async def run_benchmarks(self) -> List[EndpointResult]:
        """Run the benchmark described by this instance's config."""
        return await self.run(self.config.endpoints, self.config.pings, self.config.timeout)

    @staticmethod
    def validate(pings: int, timeout: float) -> None:
        if isinstance(pings, bool) or not isinstance(pings, int) or pings < 1:
            raise InvalidBenchmarkConfigError(f"pings must be a positive integer, got {pings!r}")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or not timeout > 0:
            raise InvalidBenchmarkConfigError(f"timeout must be a positive number of seconds, got {timeout!r}")

    async def _run_endpoint(self, endpoint: str, pings: int, timeout: float) -> EndpointResult:
        async with self.request_session_manager.create_client(timeout) as client:
            outcomes = await self.concurrency_manager.run(client, endpoint, pings, timeout)
        return self.latency_analyzer.aggregate(endpoint, outcomes)
