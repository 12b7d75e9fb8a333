from chain_ping.cli import app

app(prog_name="chain-ping")
