"""Constants for chain-ping."""

# Application
APP_NAME = "chain-ping"
APP_DESCRIPTION = "Measure latency and liveness of JSON-RPC blockchain endpoints"
APP_VERSION = "0.1.0"

# Default configuration values
DEFAULT_PINGS = 4
DEFAULT_TIMEOUT_SEC = 5.0
DEFAULT_OUTPUT_FORMAT = "table"
DEFAULT_USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

# Logging configuration
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

# Output formats
FORMAT_TABLE = "table"
FORMAT_JSON = "json"

# HTTP headers
CONTENT_TYPE_HEADER = "content-type"
CONTENT_TYPE_JSON = "application/json"
USER_AGENT_HEADER = "user-agent"

# File names
CONFIG_FILE_NAME = "chain_ping.json"

# Placeholders for absent values in table output
MISSING_VALUE_PLACEHOLDER = "-"

# Exit codes
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130
