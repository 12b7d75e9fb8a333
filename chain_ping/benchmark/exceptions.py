"""Custom exceptions for the probing engine."""
from .models import ProbeErrorKind


class BenchmarkExecutionError(Exception):
    """Custom exception for benchmark execution failures."""
    pass


class InvalidBenchmarkConfigError(BenchmarkExecutionError):
    """Exception raised when pings or timeout are not positive."""
    pass


class ProbeError(Exception):
    """Base class for failures scoped to a single probe."""
    kind = ProbeErrorKind.TRANSPORT


class ProbeTimeoutError(ProbeError):
    """Exception raised when a probe misses its deadline."""
    kind = ProbeErrorKind.TIMEOUT


class ProbeTransportError(ProbeError):
    """Exception raised on connection, DNS, TLS or other network faults."""
    kind = ProbeErrorKind.TRANSPORT


class HttpStatusError(ProbeError):
    """Exception raised when the endpoint answers with a non-2xx status."""
    kind = ProbeErrorKind.HTTP


class RpcError(ProbeError):
    """Exception raised when the body is not a valid JSON-RPC success."""
    kind = ProbeErrorKind.RPC
