"""Adapter entre Starlette e o ForwardingGateway.

Converte a Request em InboundRequest, executa o gateway dentro de um
escopo de correlation_id e devolve a OutboundResponse como Response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request, Response

from app.gateway import InboundRequest, OutboundResponse
from app.observability import CORRELATION_HEADER, correlation_scope

if TYPE_CHECKING:
    from app.gateway import ForwardingGateway

# OPTIONS entra para o preflight ser respondido pelo próprio gateway
GATEWAY_METHODS: list[str] = ["GET", "POST", "DELETE", "OPTIONS"]


async def to_inbound_request(request: Request) -> InboundRequest:
    segments = tuple(segment for segment in request.url.path.split("/") if segment)
    body = await request.body()
    return InboundRequest(
        method=request.method,
        path_segments=segments,
        query=dict(request.query_params),
        body=body or None,
    )


def to_response(outbound: OutboundResponse) -> Response:
    return Response(
        content=outbound.body,
        status_code=outbound.status_code,
        headers=dict(outbound.headers),
    )


async def dispatch(request: Request, gateway: ForwardingGateway) -> Response:
    """Executa o gateway para a requisição HTTP recebida."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        inbound = await to_inbound_request(request)
        outbound = await gateway.handle(inbound)
        response = to_response(outbound)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
