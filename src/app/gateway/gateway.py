"""Gateway de encaminhamento: valida, encaminha, normaliza.

Fluxo de `handle`:
1. OPTIONS -> preflight CORS, antes de qualquer validação
2. Método fora de `allowed_methods` -> 405
3. Extração de campos (erros viram ValidationError sem chamar o upstream)
4. Uma única chamada ao upstream, com prazo e cancelamento
5. Mapeamento do desfecho para a resposta (tabela em responses.py)

Nenhum estado é compartilhado entre requisições.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING

from app.gateway.models import ErrorPolicy, ForwardSpec, InboundRequest, UpstreamCall
from app.gateway.responses import OutboundResponse, build_response, preflight_response
from app.gateway.results import (
    InternalError,
    NormalizedResult,
    Success,
    UpstreamError,
    UpstreamReply,
    ValidationError,
    outcome_name,
)
from app.observability import get_correlation_id, record_gateway_result, record_latency
from config.logging import log_upstream_outcome
from config.settings import DEFAULT_ALLOWED_HEADERS
from utils.errors import InvalidRequestError

if TYPE_CHECKING:
    from app.protocols.http_client import UpstreamClientProtocol

logger = logging.getLogger(__name__)

PREFLIGHT_METHOD = "OPTIONS"

DEFAULT_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": DEFAULT_ALLOWED_HEADERS,
}


class ForwardingGateway:
    """Instância do gateway parametrizada por um ForwardSpec.

    Args:
        spec: Configuração imutável do endpoint
        client: Cliente que executa a chamada ao upstream
        cors_headers: Headers CORS aplicados a toda resposta
    """

    def __init__(
        self,
        spec: ForwardSpec,
        client: UpstreamClientProtocol,
        cors_headers: Mapping[str, str] | None = None,
    ) -> None:
        self._spec = spec
        self._client = client
        self._cors_headers = dict(cors_headers or DEFAULT_CORS_HEADERS)

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def spec(self) -> ForwardSpec:
        return self._spec

    async def handle(self, request: InboundRequest) -> OutboundResponse:
        """Trata uma requisição e produz exatamente uma resposta."""
        if request.method.upper() == PREFLIGHT_METHOD:
            return preflight_response(self._cors_headers)

        started_at = time.perf_counter()
        result = await self._resolve(request)
        response = build_response(result, self._spec, self._cors_headers)

        outcome = outcome_name(result)
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        log_upstream_outcome(logger, self.name, outcome, response.status_code, elapsed_ms)
        record_gateway_result(self.name, outcome, response.status_code)
        return response

    async def _resolve(self, request: InboundRequest) -> NormalizedResult:
        try:
            method = request.method.upper()
            if method not in self._spec.allowed_methods:
                allowed = ", ".join(sorted(self._spec.allowed_methods))
                return ValidationError(f"Método não permitido. Use {allowed}.", status_code=405)

            try:
                extracted = self._spec.extractor(request)
            except InvalidRequestError as exc:
                logger.info(
                    "request_rejected",
                    extra={"gateway": self.name, "reason": exc.reason},
                )
                return ValidationError(exc.reason, status_code=exc.status_code)

            if isinstance(extracted, Success):
                # Resolvido localmente, sem chamada ao upstream
                return extracted

            return await self._forward(extracted)
        except Exception as exc:
            logger.exception("gateway_unhandled_error", extra={"gateway": self.name})
            return InternalError(message=str(exc) or type(exc).__name__)

    async def _forward(self, call: UpstreamCall) -> NormalizedResult:
        url = self._spec.build_url(call)
        started_at = time.perf_counter()
        outcome = await self._client.send(
            self._spec.method,
            url,
            headers=self._spec.headers,
            params=call.params or None,
            json=call.json,
            timeout_seconds=self._spec.timeout_seconds,
        )
        record_latency(
            self.name,
            "upstream_call",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )

        if not isinstance(outcome, UpstreamReply):
            return outcome

        if not outcome.ok:
            return UpstreamError(
                status_code=outcome.status_code,
                body=outcome.body,
                content_type=outcome.content_type,
                raw=outcome.raw,
            )

        if self._spec.relay_raw:
            return Success(
                status_code=outcome.status_code,
                body=outcome.body,
                content_type=outcome.content_type,
                raw=outcome.raw,
            )

        if self._spec.shape_success is not None:
            return self._spec.shape_success(outcome, call)

        status_code = (
            outcome.status_code if self._spec.error_policy is ErrorPolicy.PASS_THROUGH else 200
        )
        return Success(status_code=status_code, body=outcome.body)
