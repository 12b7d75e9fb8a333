"""Shared test configuration and fixtures for all tests."""

import asyncio
import inspect
import json
import logging
import os
from collections import defaultdict

import httpx
import pytest

from chain_ping.benchmark.request_session_manager import RequestSessionManager
from chain_ping.shared.logging import LoggingManager
from .test_const import HANG_SECONDS, RPC_ERROR_MESSAGE, TEST_BLOCK_NUMBER


def _request_id(request: httpx.Request):
    return json.loads(request.content)["id"]


def ok(block_number: str = TEST_BLOCK_NUMBER, delay: float = 0.0):
    """Behaviour answering with a valid JSON-RPC result after ``delay`` seconds."""
    async def behaviour(request, call_number):
        if delay:
            await asyncio.sleep(delay)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": _request_id(request), "result": block_number})
    return behaviour


def hang(seconds: float = HANG_SECONDS):
    """Behaviour that never answers within any reasonable probe deadline."""
    async def behaviour(request, call_number):
        await asyncio.sleep(seconds)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": _request_id(request), "result": TEST_BLOCK_NUMBER})
    return behaviour


def status(code: int, delay: float = 0.0):
    async def behaviour(request, call_number):
        if delay:
            await asyncio.sleep(delay)
        return httpx.Response(code, text="upstream unavailable")
    return behaviour


def rpc_error(message: str = RPC_ERROR_MESSAGE, delay: float = 0.0):
    async def behaviour(request, call_number):
        if delay:
            await asyncio.sleep(delay)
        return httpx.Response(200, json={
            "jsonrpc": "2.0",
            "id": _request_id(request),
            "error": {"code": -32000, "message": message},
        })
    return behaviour


def sequence(*behaviours):
    """Behaviour that uses the n-th behaviour for the n-th call."""
    def behaviour(request, call_number):
        return behaviours[call_number - 1](request, call_number)
    return behaviour


class MockRpcNetwork:
    """Routes requests by host to per-endpoint behaviours."""

    def __init__(self):
        self.behaviours = {}
        self.calls = defaultdict(int)
        self.requests = []

    def add(self, url: str, behaviour) -> "MockRpcNetwork":
        self.behaviours[httpx.URL(url).host] = behaviour
        return self

    async def handle(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        self.calls[host] += 1
        self.requests.append(request)
        response = self.behaviours[host](request, self.calls[host])
        if inspect.isawaitable(response):
            response = await response
        return response

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def session_manager(self, user_agent: str = "chain-ping-test") -> RequestSessionManager:
        return RequestSessionManager(user_agent=user_agent, transport=self.transport())


@pytest.fixture
def rpc_network():
    """Mock JSON-RPC network fixture."""
    return MockRpcNetwork()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory without CHAIN_PING_ environment overrides."""
    for key in list(os.environ):
        if key.startswith("CHAIN_PING_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handler installed by LoggingManager after each test."""
    yield
    if LoggingManager._handler is not None:
        logging.getLogger().removeHandler(LoggingManager._handler)
        LoggingManager._handler = None
