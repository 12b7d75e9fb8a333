"""Unit tests for single probe execution and classification."""

import json
import time

import httpx
import pytest

from chain_ping.benchmark.models import ProbeErrorKind
from chain_ping.benchmark.request_executor import RequestExecutor
from ..conftest import hang, ok, rpc_error, status
from ..test_const import ENDPOINT_A, RPC_ERROR_MESSAGE, SHORT_TIMEOUT, TEST_BLOCK_NUMBER, TEST_TIMEOUT


async def _probe(rpc_network, timeout=TEST_TIMEOUT, sequence=0):
    async with httpx.AsyncClient(transport=rpc_network.transport()) as client:
        return await RequestExecutor().probe(client, ENDPOINT_A, timeout, sequence)


def _raw(handler):
    """Behaviour wrapping a plain request -> response function."""
    def behaviour(request, call_number):
        return handler(request)
    return behaviour


class TestRequestExecutor:
    """Test RequestExecutor.probe outcomes."""

    @pytest.mark.asyncio
    async def test_success(self, rpc_network):
        """Test a valid JSON-RPC response is a success with latency and block number."""
        rpc_network.add(ENDPOINT_A, ok(TEST_BLOCK_NUMBER))

        outcome = await _probe(rpc_network, sequence=3)

        assert outcome.succeeded is True
        assert outcome.block_number == TEST_BLOCK_NUMBER
        assert outcome.latency is not None and outcome.latency >= 0
        assert outcome.error_message is None
        assert outcome.error_kind is None
        assert outcome.sequence == 3

    @pytest.mark.asyncio
    async def test_sends_jsonrpc_post(self, rpc_network):
        """Test the request is a JSON POST of eth_blockNumber."""
        rpc_network.add(ENDPOINT_A, ok())

        await _probe(rpc_network)

        request = rpc_network.requests[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/json"
        body = json.loads(request.content)
        assert body["method"] == "eth_blockNumber"
        assert body["jsonrpc"] == "2.0"

    @pytest.mark.asyncio
    async def test_latency_includes_response_time(self, rpc_network):
        """Test the measured latency covers the server delay."""
        rpc_network.add(ENDPOINT_A, ok(delay=0.05))

        outcome = await _probe(rpc_network)

        assert outcome.latency >= 0.05

    @pytest.mark.asyncio
    async def test_timeout(self, rpc_network):
        """Test a hung endpoint fails with 'timeout' once the deadline passes."""
        rpc_network.add(ENDPOINT_A, hang())

        start = time.perf_counter()
        outcome = await _probe(rpc_network, timeout=SHORT_TIMEOUT)
        elapsed = time.perf_counter() - start

        assert outcome.succeeded is False
        assert outcome.error_message == "timeout"
        assert outcome.error_kind == ProbeErrorKind.TIMEOUT
        assert outcome.latency is None
        assert elapsed < 2

    @pytest.mark.asyncio
    async def test_transport_timeout_is_timeout(self, rpc_network):
        """Test an httpx timeout is reported the same way as the deadline."""
        def handler(request):
            raise httpx.ReadTimeout("read timed out", request=request)
        rpc_network.add(ENDPOINT_A, _raw(handler))

        outcome = await _probe(rpc_network)

        assert outcome.error_message == "timeout"
        assert outcome.error_kind == ProbeErrorKind.TIMEOUT

    @pytest.mark.asyncio
    async def test_connection_refused(self, rpc_network):
        """Test connection failures are transport errors."""
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)
        rpc_network.add(ENDPOINT_A, _raw(handler))

        outcome = await _probe(rpc_network)

        assert outcome.succeeded is False
        assert outcome.error_kind == ProbeErrorKind.TRANSPORT
        assert outcome.error_message == "Connection failed: Connection refused"
        assert outcome.latency is None

    @pytest.mark.asyncio
    async def test_other_transport_error(self, rpc_network):
        """Test other network faults are transport errors."""
        def handler(request):
            raise httpx.RemoteProtocolError("peer closed connection", request=request)
        rpc_network.add(ENDPOINT_A, _raw(handler))

        outcome = await _probe(rpc_network)

        assert outcome.error_kind == ProbeErrorKind.TRANSPORT
        assert outcome.error_message.startswith("Transport error")

    @pytest.mark.asyncio
    async def test_http_500(self, rpc_network):
        """Test a non-2xx status is an HTTP error naming the status."""
        rpc_network.add(ENDPOINT_A, status(500))

        outcome = await _probe(rpc_network)

        assert outcome.succeeded is False
        assert outcome.error_kind == ProbeErrorKind.HTTP
        assert outcome.error_message == "HTTP Error: 500 Internal Server Error"
        assert outcome.latency is None

    @pytest.mark.asyncio
    async def test_jsonrpc_error_envelope(self, rpc_network):
        """Test a JSON-RPC error object is an RPC failure with its message."""
        rpc_network.add(ENDPOINT_A, rpc_error())

        outcome = await _probe(rpc_network)

        assert outcome.succeeded is False
        assert outcome.error_kind == ProbeErrorKind.RPC
        assert outcome.error_message == f"JSON-RPC error: {RPC_ERROR_MESSAGE}"
        assert outcome.block_number is None

    @pytest.mark.asyncio
    async def test_malformed_json(self, rpc_network):
        """Test a non-JSON body is an RPC failure with no latency credited."""
        rpc_network.add(ENDPOINT_A, _raw(lambda request: httpx.Response(200, text="<html>oops</html>")))

        outcome = await _probe(rpc_network)

        assert outcome.succeeded is False
        assert outcome.error_kind == ProbeErrorKind.RPC
        assert outcome.error_message.startswith("Invalid JSON response")
        assert outcome.latency is None

    @pytest.mark.asyncio
    async def test_missing_result(self, rpc_network):
        """Test a body without 'result' is an RPC failure."""
        def handler(request):
            request_id = json.loads(request.content)["id"]
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": request_id})
        rpc_network.add(ENDPOINT_A, _raw(handler))

        outcome = await _probe(rpc_network)

        assert outcome.error_kind == ProbeErrorKind.RPC
        assert outcome.error_message == "Missing 'result' field in response"

    @pytest.mark.asyncio
    async def test_non_string_result(self, rpc_network):
        """Test a result that is not a hex string is rejected."""
        def handler(request):
            request_id = json.loads(request.content)["id"]
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": request_id, "result": {"height": 1}})
        rpc_network.add(ENDPOINT_A, _raw(handler))

        outcome = await _probe(rpc_network)

        assert outcome.error_kind == ProbeErrorKind.RPC
        assert "Invalid 'result'" in outcome.error_message

    @pytest.mark.asyncio
    async def test_mismatched_id(self, rpc_network):
        """Test a response for another request id is rejected."""
        rpc_network.add(ENDPOINT_A, _raw(lambda request: httpx.Response(
            200, json={"jsonrpc": "2.0", "id": "someone-else", "result": TEST_BLOCK_NUMBER})))

        outcome = await _probe(rpc_network)

        assert outcome.error_kind == ProbeErrorKind.RPC
        assert "Mismatched response id" in outcome.error_message

    @pytest.mark.asyncio
    async def test_batch_body_rejected(self, rpc_network):
        """Test a JSON array body is not a valid single response."""
        rpc_network.add(ENDPOINT_A, _raw(lambda request: httpx.Response(200, json=[])))

        outcome = await _probe(rpc_network)

        assert outcome.error_kind == ProbeErrorKind.RPC

    @pytest.mark.asyncio
    async def test_undecodable_body(self, rpc_network):
        """Test a body that fails its declared content encoding is an RPC failure."""
        rpc_network.add(ENDPOINT_A, _raw(lambda request: httpx.Response(
            200, headers={"content-encoding": "gzip"}, content=b"not gzip at all")))

        outcome = await _probe(rpc_network)

        assert outcome.succeeded is False
        assert outcome.error_kind == ProbeErrorKind.RPC
        assert outcome.error_message.startswith("Undecodable response body")
        assert outcome.latency is None
