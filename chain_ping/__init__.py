"""chain-ping: latency and liveness probing for JSON-RPC endpoints."""
from .const import APP_VERSION

__version__ = APP_VERSION
