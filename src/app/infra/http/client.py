"""Cliente HTTP para chamadas aos upstreams.

Uma requisição por chamada, sem retries: o gateway garante exatamente uma
tentativa por requisição de entrada. O prazo é imposto por
`asyncio.wait_for`, que cancela a requisição em andamento (e fecha o
cliente) quando expira, em vez de apenas parar de esperar.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from app.gateway.results import Timeout, TransportError, UpstreamOutcome, UpstreamReply

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    connect_timeout_seconds: float = 5.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class UpstreamHttpClient:
    """Executa uma chamada ao upstream e classifica o desfecho.

    Args:
        config: Configuração HTTP base
        transport: Transport httpx opcional (testes usam httpx.MockTransport)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        timeout_seconds: float | None = None,
    ) -> UpstreamOutcome:
        """Envia a requisição e devolve resposta, Timeout ou TransportError.

        Respostas fora de 2xx não são exceções aqui; quem decide o que
        fazer com elas é o gateway.
        """
        timeout = timeout_seconds or self._config.timeout_seconds
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            return await asyncio.wait_for(
                self._request(method, url, merged_headers, params, json, timeout),
                timeout=timeout,
            )
        except TimeoutError:
            logger.warning(
                "upstream_timeout",
                extra={"method": method, "timeout_seconds": timeout},
            )
            return Timeout(timeout_seconds=timeout)
        except httpx.TimeoutException as exc:
            expired = timeout
            if isinstance(exc, httpx.ConnectTimeout):
                expired = self._connect_timeout(timeout)
            logger.warning(
                "upstream_timeout",
                extra={"method": method, "timeout_seconds": expired, "source": "httpx"},
            )
            return Timeout(timeout_seconds=expired)
        except httpx.HTTPError as exc:
            logger.warning(
                "upstream_transport_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            return TransportError(message=str(exc) or type(exc).__name__)

    def _connect_timeout(self, timeout: float) -> float:
        return min(self._config.connect_timeout_seconds, timeout)

    async def _request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: Mapping[str, Any] | None,
        json: Any,
        timeout: float,
    ) -> UpstreamReply:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
            timeout=httpx.Timeout(
                timeout,
                connect=self._connect_timeout(timeout),
            ),
            follow_redirects=False,
        ) as client:
            response = await client.request(
                method,
                url,
                headers=headers,
                params=dict(params) if params else None,
                json=json,
            )
        return _to_reply(response)


def _to_reply(response: httpx.Response) -> UpstreamReply:
    content_type = response.headers.get("content-type")
    raw = response.content
    return UpstreamReply(
        status_code=response.status_code,
        body=_decode_body(response),
        raw=raw,
        content_type=content_type,
    )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def create_upstream_http_client(
    timeout_seconds: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UpstreamHttpClient:
    """Factory para criar cliente com config padrão."""
    return UpstreamHttpClient(
        config=HttpClientConfig(timeout_seconds=timeout_seconds),
        transport=transport,
    )
