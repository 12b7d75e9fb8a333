"""Benchmark runner to orchestrate probing and output."""
import asyncio
import logging
from typing import List, Optional

from rich.console import Console

from chain_ping.const import FORMAT_JSON, FORMAT_TABLE
from .chain_ping_benchmark import ChainPingBenchmark
from .models import BenchmarkConfig, EndpointResult
from .request_session_manager import RequestSessionManager
from .result_exporter import ResultExporter
from .table_renderer import TableRenderer


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Orchestrates the execution of a benchmark and renders its results."""

    def __init__(self, config: BenchmarkConfig, output_format: str = FORMAT_TABLE,
                 request_session_manager: Optional[RequestSessionManager] = None,
                 console: Optional[Console] = None):
        if output_format not in (FORMAT_TABLE, FORMAT_JSON):
            raise ValueError(f"Unknown format '{output_format}'. Use '{FORMAT_TABLE}' or '{FORMAT_JSON}'.")
        self.config = config
        self.output_format = output_format
        self.benchmark = ChainPingBenchmark(config, request_session_manager)
        self.console = console or Console()
        self.table_renderer = TableRenderer()

    async def execute(self) -> List[EndpointResult]:
        """Run the benchmark and return the ordered results."""
        return await self.benchmark.run_benchmarks()

    def render(self, results: List[EndpointResult]) -> None:
        if self.output_format == FORMAT_JSON:
            # Written raw so Rich never highlights or wraps the JSON
            self.console.file.write(ResultExporter.to_json(results) + "\n")
        else:
            self.table_renderer.render(results, self.console)

    def run(self) -> List[EndpointResult]:
        """Run the complete benchmarking process."""
        try:
            results = asyncio.run(self.execute())
        except Exception as e:
            logger.error(f"Benchmark failed: {e}")
            raise
        self.render(results)
        return results
