"""
Tests for RequestGateway failure classification.
"""

import asyncio

import httpx
import pytest

from conftest import json_response, make_gateway
from matchwatch.core.errors import (
    FetchTimeoutError,
    GatewayError,
    HttpError,
    ParseError,
    TransportError,
)


@pytest.mark.asyncio
async def test_returns_decoded_json():
    gw = make_gateway(lambda request: json_response({"matches": []}))
    assert await gw.fetch_json("http://feed.test/scrape") == {"matches": []}


@pytest.mark.asyncio
async def test_http_error_carries_server_text():
    gw = make_gateway(lambda request: httpx.Response(503, text="scraper busy"))
    with pytest.raises(HttpError) as exc_info:
        await gw.fetch_json("http://feed.test/scrape")
    assert exc_info.value.status_code == 503
    assert str(exc_info.value) == "scraper busy"


@pytest.mark.asyncio
async def test_http_error_generic_message_without_body():
    gw = make_gateway(lambda request: httpx.Response(500))
    with pytest.raises(HttpError, match="HTTP 500"):
        await gw.fetch_json("http://feed.test/scrape")


@pytest.mark.asyncio
async def test_invalid_json_is_parse_error():
    gw = make_gateway(lambda request: httpx.Response(200, text="<html>nope</html>"))
    with pytest.raises(ParseError, match="Invalid JSON"):
        await gw.fetch_json("http://feed.test/scrape")


@pytest.mark.asyncio
async def test_slow_response_times_out():
    cancelled = asyncio.Event()

    async def slow(request):
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return json_response([])

    gw = make_gateway(slow, timeout_seconds=0.05)
    with pytest.raises(FetchTimeoutError) as exc_info:
        await gw.fetch_json("http://feed.test/scrape")
    assert isinstance(exc_info.value, TimeoutError)
    # the in-flight request was aborted, not left running
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_connection_failure_is_transport_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    gw = make_gateway(refuse)
    with pytest.raises(TransportError):
        await gw.fetch_json("http://feed.test/scrape")


@pytest.mark.asyncio
async def test_all_failures_share_base_class():
    gw = make_gateway(lambda request: httpx.Response(404))
    with pytest.raises(GatewayError):
        await gw.fetch_json("http://feed.test/stream")


@pytest.mark.asyncio
async def test_no_retries():
    calls = []

    def failing(request):
        calls.append(request)
        return httpx.Response(500)

    gw = make_gateway(failing)
    with pytest.raises(HttpError):
        await gw.fetch_json("http://feed.test/scrape")
    assert len(calls) == 1


def redirect_loop(request):
    return httpx.Response(302, headers={"location": str(request.url)})


@pytest.mark.asyncio
async def test_redirect_loop_is_transport_error():
    gw = make_gateway(redirect_loop)
    with pytest.raises(TransportError):
        await gw.fetch_json("http://feed.test/scrape")


@pytest.mark.asyncio
async def test_undecodable_body_is_transport_error():
    gw = make_gateway(
        lambda request: httpx.Response(200, headers={"content-encoding": "gzip"}, content=b"not gzip")
    )
    with pytest.raises(TransportError):
        await gw.fetch_json("http://feed.test/scrape")
