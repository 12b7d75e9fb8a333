"""Builds JSON-RPC probe payloads."""
import itertools
from typing import Any, Dict, Iterator, Optional

from .constants import BenchmarkConstants


class ProbeRequestBuilder:
    """Builds ``eth_blockNumber`` requests, each with a fresh id."""

    def __init__(self, ids: Optional[Iterator[int]] = None):
        self._ids = ids if ids is not None else itertools.count(1)

    def build(self) -> Dict[str, Any]:
        """
        Build one JSON-RPC request payload.

        Returns:
            Payload dict ready to be sent as the JSON body of a POST.
        """
        return {
            "jsonrpc": BenchmarkConstants.JSONRPC_VERSION,
            "method": BenchmarkConstants.BLOCK_NUMBER_METHOD,
            "params": [],
            "id": next(self._ids),
        }
