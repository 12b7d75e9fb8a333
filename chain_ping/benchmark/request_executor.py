"""Handles individual probe execution and timing."""
import asyncio
import logging
import time
from typing import Any, Dict, Optional

import httpx

from .constants import BenchmarkConstants
from .exceptions import HttpStatusError, ProbeError, ProbeTimeoutError, ProbeTransportError, RpcError
from .models import ProbeOutcome
from .request_builder import ProbeRequestBuilder


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Handles individual probe execution and timing."""

    def __init__(self, request_builder: Optional[ProbeRequestBuilder] = None):
        self.request_builder = request_builder or ProbeRequestBuilder()

    async def probe(self, client: httpx.AsyncClient, endpoint: str, timeout: float, sequence: int = 0) -> ProbeOutcome:
        """
        Send a single JSON-RPC request and measure its latency.

        Every failure is recovered here and reported as a failed outcome.

        Args:
            client: Async HTTP client.
            endpoint: JSON-RPC endpoint URL.
            timeout: Hard deadline for the whole round trip, in seconds.
            sequence: Dispatch position of this probe within its endpoint.

        Returns:
            ProbeOutcome with latency and block number, or with an error message.
        """
        payload = self.request_builder.build()

        start_time = time.perf_counter()
        try:
            block_number = await asyncio.wait_for(self._round_trip(client, endpoint, payload), timeout=timeout)
        except asyncio.TimeoutError:
            error: ProbeError = ProbeTimeoutError(BenchmarkConstants.TIMEOUT_MESSAGE)
        except ProbeError as e:
            error = e
        else:
            end_time = time.perf_counter()
            return ProbeOutcome.success(end_time - start_time, block_number, sequence)

        logger.debug(f"Probe {sequence} to {endpoint} failed ({error.kind.value}): {error}")
        return ProbeOutcome.failure(error.kind, str(error), sequence)

    async def _round_trip(self, client: httpx.AsyncClient, endpoint: str, payload: Dict[str, Any]) -> str:
        """Post the payload and return the block number from a valid response."""
        try:
            response = await client.post(endpoint, json=payload)
        except httpx.TimeoutException as e:
            raise ProbeTimeoutError(BenchmarkConstants.TIMEOUT_MESSAGE) from e
        except httpx.ConnectError as e:
            raise ProbeTransportError(self._describe("Connection failed", e)) from e
        except (httpx.TransportError, httpx.InvalidURL) as e:
            raise ProbeTransportError(self._describe("Transport error", e)) from e
        except httpx.DecodingError as e:
            raise RpcError(self._describe("Undecodable response body", e)) from e
        except httpx.HTTPError as e:
            raise ProbeTransportError(self._describe("Transport error", e)) from e

        if not response.is_success:
            raise HttpStatusError(f"HTTP Error: {response.status_code} {response.reason_phrase}".rstrip())

        try:
            body = response.json()
        except ValueError as e:
            raise RpcError(f"Invalid JSON response: {e}") from e

        return self._extract_block_number(body, payload["id"])

    @staticmethod
    def _extract_block_number(body: Any, request_id: Any) -> str:
        if not isinstance(body, dict):
            raise RpcError("Invalid JSON-RPC response: expected an object")

        error = body.get("error")
        if error is not None:
            message = error.get("message", error) if isinstance(error, dict) else error
            raise RpcError(f"JSON-RPC error: {message}")

        if "id" in body and body["id"] != request_id:
            raise RpcError(f"Mismatched response id: expected {request_id}, got {body['id']}")

        result = body.get("result")
        if result is None:
            raise RpcError(BenchmarkConstants.MISSING_RESULT_MESSAGE)
        if not isinstance(result, str):
            raise RpcError(f"Invalid 'result' field in response: {result!r}")
        return result

    @staticmethod
    def _describe(prefix: str, error: Exception) -> str:
        detail = str(error)
        return f"{prefix}: {detail}" if detail else prefix
