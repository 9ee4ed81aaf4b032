"""Testes do UpstreamHttpClient com httpx.MockTransport."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.gateway import Timeout, TransportError, UpstreamReply
from app.infra.http import HttpClientConfig, UpstreamHttpClient, create_upstream_http_client


class TestSend:
    @pytest.mark.asyncio
    async def test_json_reply(self) -> None:
        captured: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"ok": True})

        client = UpstreamHttpClient(
            config=HttpClientConfig(default_headers={"x-default": "1"}),
            transport=httpx.MockTransport(_handler),
        )
        outcome = await client.send(
            "POST",
            "https://upstream.example.com/x",
            headers={"apikey": "k"},
            json={"numbers": ["1"]},
        )

        assert isinstance(outcome, UpstreamReply)
        assert outcome.ok
        assert outcome.body == {"ok": True}
        request = captured[0]
        assert request.headers["apikey"] == "k"
        assert request.headers["x-default"] == "1"
        assert json.loads(request.content) == {"numbers": ["1"]}

    @pytest.mark.asyncio
    async def test_query_params_are_sent(self) -> None:
        captured: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=[])

        client = UpstreamHttpClient(transport=httpx.MockTransport(_handler))
        await client.send("GET", "https://upstream.example.com/locations", params={"q": "Rio", "limit": 25})

        assert captured[0].url.params["q"] == "Rio"
        assert captured[0].url.params["limit"] == "25"

    @pytest.mark.asyncio
    async def test_non_json_body_falls_back_to_text(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway", headers={"content-type": "text/plain"})

        client = UpstreamHttpClient(transport=httpx.MockTransport(_handler))
        outcome = await client.send("GET", "https://upstream.example.com")

        assert isinstance(outcome, UpstreamReply)
        assert not outcome.ok
        assert outcome.body == "Bad Gateway"
        assert outcome.raw == b"Bad Gateway"
        assert outcome.content_type == "text/plain"

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        client = UpstreamHttpClient(transport=httpx.MockTransport(_handler))
        outcome = await client.send("DELETE", "https://upstream.example.com")

        assert isinstance(outcome, UpstreamReply)
        assert outcome.body is None

    @pytest.mark.asyncio
    async def test_connect_error_is_transport_error(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = UpstreamHttpClient(transport=httpx.MockTransport(_handler))
        outcome = await client.send("GET", "https://upstream.example.com")

        assert outcome == TransportError(message="connection refused")

    @pytest.mark.asyncio
    async def test_httpx_timeout_is_timeout(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        client = create_upstream_http_client(timeout_seconds=4.0, transport=httpx.MockTransport(_handler))
        outcome = await client.send("GET", "https://upstream.example.com")

        assert outcome == Timeout(timeout_seconds=4.0)

    @pytest.mark.asyncio
    async def test_connect_timeout_reports_connect_cap(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("connect timed out", request=request)

        client = UpstreamHttpClient(
            config=HttpClientConfig(timeout_seconds=10.0, connect_timeout_seconds=5.0),
            transport=httpx.MockTransport(_handler),
        )
        outcome = await client.send("GET", "https://upstream.example.com")

        assert outcome == Timeout(timeout_seconds=5.0)

    @pytest.mark.asyncio
    async def test_deadline_cancels_request(self) -> None:
        cancelled = asyncio.Event()

        async def _handler(request: httpx.Request) -> httpx.Response:
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return httpx.Response(200)

        client = UpstreamHttpClient(transport=httpx.MockTransport(_handler))
        outcome = await client.send("GET", "https://upstream.example.com", timeout_seconds=0.05)

        assert outcome == Timeout(timeout_seconds=0.05)
        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_redirects_are_not_followed(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"location": "https://elsewhere.example.com"})

        client = UpstreamHttpClient(transport=httpx.MockTransport(_handler))
        outcome = await client.send("GET", "https://upstream.example.com")

        assert isinstance(outcome, UpstreamReply)
        assert outcome.status_code == 302
