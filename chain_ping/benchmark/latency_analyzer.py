"""Analyzes probe outcomes and computes per-endpoint statistics."""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .models import EndpointResult, PingStatus, ProbeOutcome


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def aggregate(endpoint: str, outcomes: Sequence[ProbeOutcome]) -> EndpointResult:
        """
        Reduce the outcomes of one endpoint into an EndpointResult.

        Latencies are averaged over successful probes only and reported in
        whole milliseconds. ``block_number`` and ``last_error`` come from the
        most recently completed success and failure respectively.

        Args:
            endpoint: The endpoint the outcomes belong to.
            outcomes: All probe outcomes for that endpoint.

        Returns:
            EndpointResult dataclass with the summary statistics.
        """
        ordered = sorted(outcomes, key=LatencyAnalyzer._completion_key)
        successes = [o for o in ordered if o.succeeded]
        failures = [o for o in ordered if not o.succeeded]

        result = EndpointResult(
            endpoint=endpoint,
            status=PingStatus.SUCCESS if successes else PingStatus.FAILURE,
            success_count=len(successes),
            ping_count=len(outcomes),
            last_error=failures[-1].error_message if failures else None,
        )

        avg, low, high = LatencyAnalyzer.compute_stats([o.latency_ms for o in successes])
        result.avg_latency_ms, result.min_latency_ms, result.max_latency_ms = avg, low, high
        if successes:
            result.block_number = successes[-1].block_number

        logger.debug(f"{endpoint}: {result.status.value}, {result.success_count}/{result.ping_count} succeeded")

        return result

    @staticmethod
    def compute_stats(latencies_ms: List[float]) -> Tuple[Optional[int], Optional[int], Optional[int]]:
        """Return (avg, min, max) in whole milliseconds, or Nones for no samples."""
        if not latencies_ms:
            return (None, None, None)
        samples = np.array(latencies_ms, dtype=float)
        return (
            LatencyAnalyzer._round_ms(samples.mean()),
            LatencyAnalyzer._round_ms(samples.min()),
            LatencyAnalyzer._round_ms(samples.max()),
        )

    @staticmethod
    def _round_ms(value: float) -> int:
        return int(np.rint(value))

    @staticmethod
    def _completion_key(outcome: ProbeOutcome) -> tuple:
        # Equal completion indexes fall back to the later dispatch.
        completion = outcome.completion_index if outcome.completion_index is not None else outcome.sequence
        return (completion, outcome.sequence)
