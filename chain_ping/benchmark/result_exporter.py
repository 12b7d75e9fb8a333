"""Handles exporting benchmark results to JSON."""
import json
import logging
from typing import Any, Dict, List, Sequence

from .models import EndpointResult


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting benchmark results to JSON."""

    @staticmethod
    def to_record(result: EndpointResult) -> Dict[str, Any]:
        """
        Convert one result into its JSON record.

        Args:
            result: Aggregated endpoint result.

        Returns:
            Dict with exactly the published field set, None for absent values.
        """
        return {
            "endpoint": result.endpoint,
            "avg_latency_ms": result.avg_latency_ms,
            "min_latency_ms": result.min_latency_ms,
            "max_latency_ms": result.max_latency_ms,
            "status": result.status.value,
            "block_number": result.block_number,
            "success_count": result.success_count,
            "ping_count": result.ping_count,
            "error_message": result.last_error,
        }

    @staticmethod
    def to_records(results: Sequence[EndpointResult]) -> List[Dict[str, Any]]:
        return [ResultExporter.to_record(result) for result in results]

    @staticmethod
    def to_json(results: Sequence[EndpointResult], indent: int = 2) -> str:
        """Serialize results as a pretty-printed JSON array, preserving order."""
        records = ResultExporter.to_records(results)
        logger.debug(f"Serializing {len(records)} results to JSON")
        return json.dumps(records, indent=indent)
