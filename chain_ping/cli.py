"""
chain-ping command-line interface.

Usage:
    chain-ping https://rpc.one https://rpc.two --pings 4 --format json
"""
import json
from enum import Enum
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from chain_ping.benchmark import (
    BenchmarkConfig,
    BenchmarkRunner,
    ChainPingBenchmark,
    InvalidBenchmarkConfigError,
    RequestSessionManager,
)
from chain_ping.const import APP_DESCRIPTION, APP_NAME, APP_VERSION, EXIT_ERROR, EXIT_INTERRUPTED
from chain_ping.shared.config import Config
from chain_ping.shared.logging import LoggingManager


app = typer.Typer(
    name=APP_NAME,
    help=APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    table = "table"
    json = "json"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=EXIT_ERROR)


@app.command()
def main(
    endpoints: Optional[List[str]] = typer.Argument(
        None,
        help="JSON-RPC endpoint URLs (one or more)",
        show_default=False,
    ),
    pings: Optional[int] = typer.Option(
        None,
        "--pings",
        "-p",
        help="Number of pings per endpoint [default: 4]",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Deadline for each ping, in seconds [default: 5.0]",
    ),
    output_format: Optional[OutputFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: table or json [default: table]",
        case_sensitive=False,
    ),
    concurrent: Optional[bool] = typer.Option(
        None,
        "--concurrent/--sequential",
        help="Send the pings for one endpoint concurrently [default: sequential]",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for diagnostics on stderr [default: WARNING]",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Ping JSON-RPC endpoints and report latency and liveness for each."""
    try:
        config = Config()
    except (ValidationError, json.JSONDecodeError) as e:
        _fail(f"Invalid configuration: {e}")
    LoggingManager.setup_logging(log_level or config.log_level, config)
    logger = LoggingManager.get_logger(__name__)

    if not endpoints:
        _fail("At least one endpoint is required")

    pings = pings if pings is not None else config.pings
    timeout = timeout if timeout is not None else config.timeout
    concurrent = concurrent if concurrent is not None else config.concurrent_pings
    if output_format is None:
        try:
            output_format = OutputFormat(config.output_format.lower())
        except ValueError:
            _fail(f"Unknown format '{config.output_format}'. Use 'table' or 'json'.")

    try:
        ChainPingBenchmark.validate(pings, timeout)
    except InvalidBenchmarkConfigError as e:
        _fail(str(e))

    benchmark_config = BenchmarkConfig(
        endpoints=list(endpoints),
        pings=pings,
        timeout=timeout,
        concurrent_pings=concurrent,
    )
    runner = BenchmarkRunner(
        benchmark_config,
        output_format=output_format.value,
        request_session_manager=RequestSessionManager(user_agent=config.user_agent),
        console=console,
    )

    if output_format is OutputFormat.table:
        err_console.print(f"Pinging {len(endpoints)} endpoints {pings} times each...", highlight=False)

    logger.debug(f"Settings: pings={pings} timeout={timeout} format={output_format.value} concurrent={concurrent}")
    try:
        runner.run()
    except KeyboardInterrupt:
        logger.warning("Benchmark interrupted")
        typer.echo("Interrupted", err=True)
        raise typer.Exit(code=EXIT_INTERRUPTED)


if __name__ == "__main__":
    app()
