"""Manages HTTP client sessions for probing."""
import logging
from typing import Optional

import httpx

from chain_ping.const import CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON, DEFAULT_USER_AGENT, USER_AGENT_HEADER


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Creates the async HTTP clients used by endpoint runners.

    Clients never retry: a failed probe is one failed sample.
    """

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.user_agent = user_agent
        self.transport = transport

    def create_client(self, timeout: float) -> httpx.AsyncClient:
        """Create an async client whose own timeouts match the probe deadline."""
        client_timeout = httpx.Timeout(
            connect=timeout,
            read=timeout,
            write=timeout,
            pool=timeout
        )
        headers = {
            CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON,
            USER_AGENT_HEADER: self.user_agent,
        }
        logger.debug(f"Creating HTTP client with timeout {timeout}s")
        # Unbounded pool so concurrent pings never queue for a connection inside the timed window
        limits = httpx.Limits(max_connections=None)
        return httpx.AsyncClient(timeout=client_timeout, headers=headers, limits=limits, transport=self.transport)
