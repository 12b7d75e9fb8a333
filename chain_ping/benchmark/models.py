"""Data models for the probing engine."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .constants import BenchmarkConstants


class PingStatus(str, Enum):
    """Overall outcome for one endpoint."""
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class ProbeErrorKind(str, Enum):
    """Why a single probe failed."""
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    HTTP = "http"
    RPC = "rpc"


@dataclass
class BenchmarkConfig:
    """Configuration for one benchmark run."""
    endpoints: List[str] = field(default_factory=list)
    pings: int = BenchmarkConstants.DEFAULT_PINGS
    timeout: float = BenchmarkConstants.DEFAULT_TIMEOUT
    concurrent_pings: bool = False


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of one timed request.

    ``latency`` and ``block_number`` are set only on success; ``error_message``
    and ``error_kind`` only on failure. ``sequence`` is the dispatch position
    within the endpoint and ``completion_index`` the position in the order the
    endpoint's probes finished.
    """
    succeeded: bool
    latency: Optional[float] = None
    block_number: Optional[str] = None
    error_message: Optional[str] = None
    error_kind: Optional[ProbeErrorKind] = None
    sequence: int = 0
    completion_index: Optional[int] = None

    @classmethod
    def success(cls, latency: float, block_number: str, sequence: int = 0) -> "ProbeOutcome":
        return cls(succeeded=True, latency=latency, block_number=block_number, sequence=sequence)

    @classmethod
    def failure(cls, kind: ProbeErrorKind, message: str, sequence: int = 0) -> "ProbeOutcome":
        return cls(succeeded=False, error_message=message, error_kind=kind, sequence=sequence)

    @property
    def latency_ms(self) -> Optional[float]:
        if self.latency is None:
            return None
        return self.latency * BenchmarkConstants.MS_PER_SECOND


@dataclass
class EndpointResult:
    """Aggregated statistics for one endpoint."""
    endpoint: str
    status: PingStatus
    success_count: int
    ping_count: int
    avg_latency_ms: Optional[int] = None
    min_latency_ms: Optional[int] = None
    max_latency_ms: Optional[int] = None
    block_number: Optional[str] = None
    last_error: Optional[str] = None
