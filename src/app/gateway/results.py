"""Resultados normalizados de uma requisição tratada pelo gateway.

Todo caminho (sucesso, validação, timeout, erro de transporte, erro do
upstream, exceção inesperada) termina em exatamente um destes valores,
que depois vira a resposta HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class UpstreamReply:
    """Resposta bruta do upstream (qualquer status HTTP)."""

    status_code: int
    body: Any = None
    raw: bytes = b""
    content_type: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class Success:
    """Resposta de sucesso.

    `raw` preenchido indica repasse literal do corpo do upstream.
    """

    status_code: int = 200
    body: Any = None
    content_type: str | None = None
    raw: bytes | None = None


@dataclass(frozen=True, slots=True)
class UpstreamError:
    """Upstream alcançável que respondeu com status fora de 2xx."""

    status_code: int
    body: Any = None
    content_type: str | None = None
    raw: bytes | None = None


@dataclass(frozen=True, slots=True)
class Timeout:
    """Upstream não respondeu dentro do prazo; chamada cancelada."""

    timeout_seconds: float


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Requisição de entrada malformada; upstream nunca é chamado."""

    reason: str
    status_code: int = 400


@dataclass(frozen=True, slots=True)
class TransportError:
    """Upstream inalcançável (DNS, conexão recusada, TLS...)."""

    message: str


@dataclass(frozen=True, slots=True)
class InternalError:
    """Exceção inesperada durante o tratamento."""

    message: str


NormalizedResult = (
    Success | UpstreamError | Timeout | ValidationError | TransportError | InternalError
)

# Resultado possível de uma chamada ao upstream
UpstreamOutcome = UpstreamReply | Timeout | TransportError


def outcome_name(result: NormalizedResult) -> str:
    """Nome curto do resultado para logs e métricas."""
    names: dict[type, str] = {
        Success: "success",
        UpstreamError: "upstream_error",
        Timeout: "timeout",
        ValidationError: "validation_error",
        TransportError: "transport_error",
        InternalError: "internal_error",
    }
    return names[type(result)]
