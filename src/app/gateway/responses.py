"""Construção da resposta HTTP a partir do resultado normalizado."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.gateway.models import ErrorFormat, ErrorPolicy, ForwardSpec
from app.gateway.results import (
    InternalError,
    NormalizedResult,
    Success,
    Timeout,
    TransportError,
    UpstreamError,
    ValidationError,
)

JSON_CONTENT_TYPE = "application/json"
TIMEOUT_ERROR_MESSAGE = "Timeout na requisição"


@dataclass(frozen=True, slots=True)
class OutboundResponse:
    """Resposta pronta para o chamador, independente de framework."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


def preflight_response(cors_headers: Mapping[str, str]) -> OutboundResponse:
    """Resposta ao preflight CORS: 200, sem corpo, apenas headers CORS."""
    return OutboundResponse(status_code=200, headers=dict(cors_headers))


def json_response(
    status_code: int,
    payload: Any,
    cors_headers: Mapping[str, str],
) -> OutboundResponse:
    headers = {**cors_headers, "Content-Type": JSON_CONTENT_TYPE}
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    return OutboundResponse(status_code=status_code, headers=headers, body=body)


def raw_response(
    status_code: int,
    raw: bytes,
    content_type: str | None,
    cors_headers: Mapping[str, str],
) -> OutboundResponse:
    headers = {**cors_headers, "Content-Type": content_type or JSON_CONTENT_TYPE}
    return OutboundResponse(status_code=status_code, headers=headers, body=raw)


def build_response(
    result: NormalizedResult,
    spec: ForwardSpec,
    cors_headers: Mapping[str, str],
) -> OutboundResponse:
    """Converte o resultado normalizado na resposta final.

    Tabela de status:
        Success         -> status do resultado (200 ou repasse do upstream)
        ValidationError -> 400 (ou 405 para método)
        Timeout         -> 408
        UpstreamError   -> status do upstream (repasse) ou 500 (sanitize)
        TransportError  -> 500
        InternalError   -> 500
    """
    if isinstance(result, Success):
        if result.raw is not None:
            return raw_response(result.status_code, result.raw, result.content_type, cors_headers)
        return json_response(result.status_code, result.body, cors_headers)

    if isinstance(result, ValidationError):
        return json_response(result.status_code, _error_body(spec, result.reason), cors_headers)

    if isinstance(result, Timeout):
        body = _error_body(
            spec,
            TIMEOUT_ERROR_MESSAGE,
            details=f"A requisição demorou mais de {result.timeout_seconds:g} segundos",
        )
        return json_response(408, body, cors_headers)

    if isinstance(result, UpstreamError):
        return _upstream_error_response(result, spec, cors_headers)

    if isinstance(result, TransportError):
        if spec.error_policy is ErrorPolicy.SANITIZE:
            return json_response(500, _sanitized_body(spec), cors_headers)
        body = _error_body(spec, spec.error_message, details=result.message)
        return json_response(500, body, cors_headers)

    if isinstance(result, InternalError):
        body = _error_body(spec, spec.error_message, details=result.message)
        return json_response(500, body, cors_headers)

    raise TypeError(f"Resultado desconhecido: {type(result).__name__}")


def _upstream_error_response(
    result: UpstreamError,
    spec: ForwardSpec,
    cors_headers: Mapping[str, str],
) -> OutboundResponse:
    if spec.error_policy is ErrorPolicy.SANITIZE:
        return json_response(500, _sanitized_body(spec), cors_headers)

    if spec.relay_raw and result.raw is not None:
        return raw_response(result.status_code, result.raw, result.content_type, cors_headers)

    body = _error_body(spec, spec.upstream_error_message)
    body["status"] = result.status_code
    body["details"] = result.body
    return json_response(result.status_code, body, cors_headers)


def _sanitized_body(spec: ForwardSpec) -> dict[str, Any]:
    # Nunca inclui status ou corpo do upstream
    return {"success": False, "error": spec.error_message}


def _error_body(spec: ForwardSpec, error: str, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if spec.error_format is ErrorFormat.ENVELOPE:
        body["success"] = False
    body["error"] = error
    if details is not None:
        body["details"] = details
    return body
