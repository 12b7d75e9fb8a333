"""Constants for the probing engine."""
from chain_ping.const import DEFAULT_PINGS, DEFAULT_TIMEOUT_SEC


class BenchmarkConstants:
    """Centralized constants for probe configuration."""
    DEFAULT_PINGS = DEFAULT_PINGS
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT_SEC  # seconds, per probe
    JSONRPC_VERSION = "2.0"
    BLOCK_NUMBER_METHOD = "eth_blockNumber"
    TIMEOUT_MESSAGE = "timeout"
    MISSING_RESULT_MESSAGE = "Missing 'result' field in response"
    MS_PER_SECOND = 1000
