"""Renders benchmark results as a terminal table."""
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from chain_ping.const import MISSING_VALUE_PLACEHOLDER
from .models import EndpointResult, PingStatus


class TableRenderer:
    """Builds a Rich table of per-endpoint statistics."""

    HEADERS = ("Endpoint", "Status", "Avg (ms)", "Min/Max (ms)", "Success", "Block", "Error")
    STATUS_STYLES = {
        PingStatus.SUCCESS: "green",
        PingStatus.FAILURE: "red",
    }

    def build_table(self, results: Sequence[EndpointResult]) -> Table:
        table = Table(box=box.ROUNDED, show_lines=False)
        for header in self.HEADERS:
            table.add_column(header, overflow="fold")

        for result in results:
            table.add_row(
                Text(result.endpoint),
                Text(result.status.value, style=self.STATUS_STYLES[result.status]),
                self._format(result.avg_latency_ms),
                self._format_range(result.min_latency_ms, result.max_latency_ms),
                f"{result.success_count}/{result.ping_count}",
                self._format(result.block_number),
                self._format(result.last_error),
            )
        return table

    def render(self, results: Sequence[EndpointResult], console: Optional[Console] = None) -> None:
        """Print the table to the given console (stdout by default)."""
        console = console or Console()
        console.print(self.build_table(results))

    @staticmethod
    def _format(value) -> Text:
        # Plain text so brackets in error messages are not read as markup
        return Text(MISSING_VALUE_PLACEHOLDER if value is None else str(value))

    @staticmethod
    def _format_range(low: Optional[int], high: Optional[int]) -> str:
        if low is None or high is None:
            return MISSING_VALUE_PLACEHOLDER
        return f"{low}/{high}"
