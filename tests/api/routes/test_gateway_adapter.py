"""Testes do adapter Starlette <-> ForwardingGateway."""

from __future__ import annotations

import pytest
from starlette.requests import Request

from api.routes.gateway_adapter import dispatch, to_inbound_request, to_response
from app.gateway import InboundRequest, OutboundResponse
from app.observability import get_correlation_id


def _build_request(
    *,
    method: str,
    path: str = "/",
    query_string: str = "",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


class RecordingGateway:
    def __init__(self) -> None:
        self.requests: list[InboundRequest] = []
        self.correlation_ids: list[str] = []

    async def handle(self, request: InboundRequest) -> OutboundResponse:
        self.requests.append(request)
        self.correlation_ids.append(get_correlation_id())
        return OutboundResponse(
            status_code=202,
            headers={"Content-Type": "application/json", "Access-Control-Allow-Origin": "*"},
            body=b'{"ok": true}',
        )


@pytest.mark.asyncio
async def test_to_inbound_request_splits_path_and_query() -> None:
    request = _build_request(
        method="GET",
        path="/atualizar-webhook/inst1/",
        query_string="q=Rio&limit=5",
    )

    inbound = await to_inbound_request(request)

    assert inbound.method == "GET"
    assert inbound.path_segments == ("atualizar-webhook", "inst1")
    assert inbound.query == {"q": "Rio", "limit": "5"}
    assert inbound.body is None


def test_to_response_copies_status_headers_and_body() -> None:
    response = to_response(
        OutboundResponse(status_code=408, headers={"X-Test": "1"}, body=b"{}")
    )
    assert response.status_code == 408
    assert response.headers["x-test"] == "1"
    assert response.body == b"{}"


@pytest.mark.asyncio
async def test_dispatch_propagates_correlation_id() -> None:
    gateway = RecordingGateway()
    request = _build_request(
        method="POST",
        path="/verificar-whatsapp",
        body=b'{"numeros": ["1"]}',
        headers={"x-correlation-id": "corr-42"},
    )

    response = await dispatch(request, gateway)  # type: ignore[arg-type]

    assert response.status_code == 202
    assert response.headers["x-correlation-id"] == "corr-42"
    assert gateway.correlation_ids == ["corr-42"]
    assert gateway.requests[0].body == b'{"numeros": ["1"]}'
    # Escopo restaurado após a requisição
    assert get_correlation_id() == ""


@pytest.mark.asyncio
async def test_dispatch_generates_correlation_id() -> None:
    gateway = RecordingGateway()
    response = await dispatch(_build_request(method="POST"), gateway)  # type: ignore[arg-type]
    assert gateway.correlation_ids[0]
    assert response.headers["x-correlation-id"] == gateway.correlation_ids[0]
