"""Main entry point for chain-ping."""

from chain_ping.cli import app


if __name__ == "__main__":
    app(prog_name="chain-ping")
