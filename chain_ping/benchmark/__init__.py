"""Benchmark package initialization."""
from .models import BenchmarkConfig, EndpointResult, PingStatus, ProbeErrorKind, ProbeOutcome
from .constants import BenchmarkConstants
from .exceptions import (
    BenchmarkExecutionError,
    HttpStatusError,
    InvalidBenchmarkConfigError,
    ProbeError,
    ProbeTimeoutError,
    ProbeTransportError,
    RpcError,
)
from .request_builder import ProbeRequestBuilder
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .concurrency_manager import ConcurrencyManager
from .latency_analyzer import LatencyAnalyzer
from .result_exporter import ResultExporter
from .table_renderer import TableRenderer
from .chain_ping_benchmark import ChainPingBenchmark
from .runner import BenchmarkRunner

__all__ = [
    'BenchmarkConfig',
    'EndpointResult',
    'PingStatus',
    'ProbeErrorKind',
    'ProbeOutcome',
    'BenchmarkConstants',
    'BenchmarkExecutionError',
    'HttpStatusError',
    'InvalidBenchmarkConfigError',
    'ProbeError',
    'ProbeTimeoutError',
    'ProbeTransportError',
    'RpcError',
    'ProbeRequestBuilder',
    'RequestSessionManager',
    'RequestExecutor',
    'ConcurrencyManager',
    'LatencyAnalyzer',
    'ResultExporter',
    'TableRenderer',
    'ChainPingBenchmark',
    'BenchmarkRunner'
]
