"""Protocolos HTTP usados pelo app.

Evita dependência direta do gateway em httpx.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.gateway.results import UpstreamOutcome


class UpstreamClientProtocol(Protocol):
    """Contrato mínimo para o cliente que fala com o upstream."""

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        timeout_seconds: float | None = None,
    ) -> UpstreamOutcome: ...
