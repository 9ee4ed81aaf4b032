"""Gateway de encaminhamento HTTP reutilizável.

Uma instância por endpoint, parametrizada por ForwardSpec:

    gateway = ForwardingGateway(spec, client)
    response = await gateway.handle(inbound_request)
"""

from app.gateway.gateway import ForwardingGateway
from app.gateway.models import (
    ErrorFormat,
    ErrorPolicy,
    ForwardSpec,
    InboundRequest,
    UpstreamCall,
)
from app.gateway.responses import OutboundResponse, build_response, preflight_response
from app.gateway.results import (
    InternalError,
    NormalizedResult,
    Success,
    Timeout,
    TransportError,
    UpstreamError,
    UpstreamReply,
    ValidationError,
)

__all__ = [
    "ErrorFormat",
    "ErrorPolicy",
    "ForwardSpec",
    "ForwardingGateway",
    "InboundRequest",
    "InternalError",
    "NormalizedResult",
    "OutboundResponse",
    "Success",
    "Timeout",
    "TransportError",
    "UpstreamCall",
    "UpstreamError",
    "UpstreamReply",
    "ValidationError",
    "build_response",
    "preflight_response",
]
