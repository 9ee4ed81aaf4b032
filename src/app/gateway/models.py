"""Modelos do gateway: requisição de entrada, chamada ao upstream e spec.

O ForwardSpec é a configuração imutável de uma instância do gateway:
para onde encaminhar, com quais headers, em quanto tempo, como extrair
os campos da requisição e como tratar erros do upstream.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

from app.gateway.results import Success, UpstreamReply
from utils.errors import InvalidRequestError

DEFAULT_TIMEOUT_SECONDS = 10.0
GENERIC_ERROR_MESSAGE = "Erro interno do servidor"


class ErrorPolicy(str, Enum):
    """Como erros do upstream chegam ao chamador."""

    PASS_THROUGH = "pass_through"  # status e corpo do upstream repassados
    SANITIZE = "sanitize"  # mensagem genérica, status 500


class ErrorFormat(str, Enum):
    """Formato do corpo de erro."""

    ENVELOPE = "envelope"  # {"success": false, "error": ...}
    PLAIN = "plain"  # {"error": ...}


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """Requisição recebida do frontend, independente de framework."""

    method: str
    path_segments: tuple[str, ...] = ()
    query: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def last_segment(self) -> str:
        return self.path_segments[-1] if self.path_segments else ""

    def json(self) -> Any:
        """Decodifica o corpo como JSON.

        Raises:
            InvalidRequestError: Se corpo vazio ou JSON inválido.
        """
        if not self.body or not self.body.strip():
            raise InvalidRequestError("Body vazio")
        try:
            return json.loads(self.body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidRequestError("JSON inválido") from exc


@dataclass(frozen=True, slots=True)
class UpstreamCall:
    """Chamada derivada da requisição de entrada.

    Attributes:
        path_params: Valores para os placeholders da URL do upstream
        params: Query string enviada ao upstream
        json: Corpo JSON enviado ao upstream
        context: Dados extraídos repassados ao formatador de sucesso
    """

    path_params: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)
    json: Any = None
    context: Mapping[str, Any] = field(default_factory=dict)


# Extrai a chamada ao upstream, ou resolve localmente com um Success
Extractor = Callable[[InboundRequest], "UpstreamCall | Success"]
SuccessShaper = Callable[[UpstreamReply, UpstreamCall], Success]


@dataclass(frozen=True)
class ForwardSpec:
    """Configuração imutável de uma instância do gateway.

    Attributes:
        name: Identificador do gateway em logs e métricas
        upstream_url: URL do upstream, com placeholders `{nome}` opcionais
        extractor: Regra de extração de campos da requisição
        method: Método HTTP da chamada ao upstream
        headers: Headers estáticos (inclui credenciais injetadas)
        timeout_seconds: Prazo máximo da chamada ao upstream
        allowed_methods: Métodos aceitos na entrada (OPTIONS é sempre aceito)
        error_policy: Repasse ou sanitização de erros do upstream
        error_format: Formato do corpo de erro
        shape_success: Formatador opcional da resposta de sucesso
        relay_raw: Repassa bytes e content-type do upstream sem reprocessar
        error_message: Mensagem genérica para falhas
        upstream_error_message: Rótulo do erro repassado do upstream
    """

    name: str
    upstream_url: str
    extractor: Extractor
    method: str = "POST"
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    allowed_methods: frozenset[str] = frozenset({"POST"})
    error_policy: ErrorPolicy = ErrorPolicy.SANITIZE
    error_format: ErrorFormat = ErrorFormat.ENVELOPE
    shape_success: SuccessShaper | None = None
    relay_raw: bool = False
    error_message: str = GENERIC_ERROR_MESSAGE
    upstream_error_message: str = "Erro na API upstream"

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds deve ser > 0")
        if not self.upstream_url:
            raise ValueError(f"upstream_url não configurada para {self.name}")

    def build_url(self, call: UpstreamCall) -> str:
        """Preenche os placeholders da URL com valores escapados."""
        if not call.path_params:
            return self.upstream_url
        escaped = {key: quote(str(value), safe="") for key, value in call.path_params.items()}
        return self.upstream_url.format(**escaped)
