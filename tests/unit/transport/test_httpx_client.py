"""Tests for the httpx transport."""

import asyncio
import json

import httpx
import pytest

from parts_sdk.errors.exceptions import DecodeError, NetworkError, RequestCancelledError, RequestTimeoutError
from parts_sdk.testing import RecordingHandler, create_json_response
from parts_sdk.transport.base import HttpMethod, HttpRequest
from parts_sdk.transport.cancellation import CancellationToken
from parts_sdk.transport.httpx_client import HttpxHttpClient

URL = "https://api.example.com/v1/parts/1"


def transport_for(*outcomes):
    handler = RecordingHandler(outcomes)
    return HttpxHttpClient(transport=httpx.MockTransport(handler)), handler


class TestRequestEncoding:
    """Headers and body sent on the wire."""

    @pytest.mark.unit
    async def test_get_sends_accept_without_content_type(self):
        http_client, handler = transport_for(create_json_response(200, {"ok": True}))

        await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL, headers={"Authorization": "Bearer t"}))

        sent = handler.requests[0]
        assert sent.method == "GET"
        assert str(sent.url) == URL
        assert sent.headers["accept"] == "application/json"
        assert sent.headers["authorization"] == "Bearer t"
        assert "content-type" not in sent.headers
        assert sent.content == b""

    @pytest.mark.unit
    async def test_body_is_sent_as_json(self):
        http_client, handler = transport_for(create_json_response(201, {"id": "1"}))

        await http_client.request(HttpRequest(method=HttpMethod.POST, url=URL, body={"name": "Brake", "price": 10.5}))

        sent = handler.requests[0]
        assert sent.headers["content-type"] == "application/json"
        assert json.loads(sent.content) == {"name": "Brake", "price": 10.5}


class TestResponseDecoding:
    """Response descriptor contents."""

    @pytest.mark.unit
    async def test_json_body_decoded(self):
        http_client, _ = transport_for(create_json_response(200, {"id": "1", "name": "Brake"}))

        response = await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL))

        assert response.status_code == 200
        assert response.status_text == "OK"
        assert response.body == {"id": "1", "name": "Brake"}
        assert response.is_json

    @pytest.mark.unit
    async def test_empty_204_has_no_body(self):
        http_client, _ = transport_for(httpx.Response(204))

        response = await http_client.request(HttpRequest(method=HttpMethod.DELETE, url=URL))

        assert response.status_code == 204
        assert response.body is None
        assert response.is_success

    @pytest.mark.unit
    async def test_non_json_success_body_is_dropped(self):
        http_client, _ = transport_for(httpx.Response(200, text="<html>hi</html>", headers={"content-type": "text/html"}))

        response = await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL))

        assert response.body is None
        assert not response.is_json

    @pytest.mark.unit
    async def test_plain_text_error_body_is_kept(self):
        http_client, _ = transport_for(httpx.Response(503, text="maintenance"))

        response = await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL))

        assert response.status_code == 503
        assert response.status_text == "Service Unavailable"
        assert response.body == "maintenance"

    @pytest.mark.unit
    async def test_malformed_json_raises_decode_error(self):
        http_client, _ = transport_for(
            httpx.Response(200, content=b'{"id": "1"', headers={"content-type": "application/json"})
        )

        with pytest.raises(DecodeError):
            await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL))

    @pytest.mark.unit
    @pytest.mark.parametrize("status_code", [404, 503])
    async def test_malformed_json_error_body_kept_as_text(self, status_code):
        http_client, _ = transport_for(
            httpx.Response(status_code, content=b"<html>gateway</html>", headers={"content-type": "application/json"})
        )

        response = await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL))

        assert response.status_code == status_code
        assert response.body == "<html>gateway</html>"


class TestTransportFailures:
    """httpx exceptions mapped onto NetworkError."""

    @pytest.mark.unit
    async def test_connect_error_becomes_network_error(self):
        http_client, _ = transport_for(httpx.ConnectError("connection refused"))

        with pytest.raises(NetworkError) as exc_info:
            await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL))

        assert exc_info.value.url == URL
        assert not isinstance(exc_info.value, RequestTimeoutError)

    @pytest.mark.unit
    async def test_timeout_becomes_request_timeout_error(self):
        http_client, _ = transport_for(httpx.ReadTimeout("read timed out"))

        with pytest.raises(RequestTimeoutError):
            await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL, timeout=0.5))

    @pytest.mark.unit
    async def test_timeout_is_passed_to_httpx(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.extensions["timeout"])
            return httpx.Response(200, json={})

        http_client = HttpxHttpClient(transport=httpx.MockTransport(handler))

        await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL, timeout=2.5))

        assert seen["read"] == 2.5
        assert seen["connect"] == 2.5


class TestCancellation:
    """In-flight requests abort when the token fires."""

    @pytest.mark.unit
    async def test_cancel_aborts_in_flight_request(self):
        started = asyncio.Event()

        async def slow_handler(request: httpx.Request) -> httpx.Response:
            started.set()
            await asyncio.Event().wait()
            return httpx.Response(200, json={})

        http_client = HttpxHttpClient(transport=httpx.MockTransport(slow_handler))
        token = CancellationToken()

        pending = asyncio.create_task(
            http_client.request(HttpRequest(method=HttpMethod.GET, url=URL), cancel_token=token)
        )
        await started.wait()
        token.cancel("user navigated away")

        with pytest.raises(RequestCancelledError, match="user navigated away"):
            await pending

    @pytest.mark.unit
    async def test_already_cancelled_token_sends_nothing(self):
        http_client, handler = transport_for(create_json_response(200, {}))
        token = CancellationToken()
        token.cancel()

        with pytest.raises(RequestCancelledError):
            await http_client.request(HttpRequest(method=HttpMethod.GET, url=URL), cancel_token=token)

        assert handler.call_count == 0


class TestLifecycle:
    """Owned vs injected httpx clients."""

    @pytest.mark.unit
    async def test_owned_client_closed(self):
        http_client, _ = transport_for(create_json_response(200, {}))

        async with http_client:
            pass

        assert http_client._client.is_closed

    @pytest.mark.unit
    async def test_injected_client_left_open(self):
        shared = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        http_client = HttpxHttpClient(client=shared)

        await http_client.aclose()

        assert not shared.is_closed
        await shared.aclose()

    @pytest.mark.unit
    def test_client_and_transport_are_exclusive(self):
        with pytest.raises(ValueError):
            HttpxHttpClient(client=httpx.AsyncClient(), transport=httpx.MockTransport(lambda r: httpx.Response(200)))
