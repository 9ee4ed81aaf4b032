"""Settings do gateway de encaminhamento.

Cabeçalhos CORS devolvidos em toda resposta, inclusive erros e preflight.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_ALLOWED_HEADERS: str = "authorization, x-client-info, apikey, content-type"


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações do gateway.

    Attributes:
        allow_origin: Valor de Access-Control-Allow-Origin
        allowed_headers: Valor de Access-Control-Allow-Headers
    """

    allow_origin: str = "*"
    allowed_headers: str = DEFAULT_ALLOWED_HEADERS

    @property
    def cors_headers(self) -> dict[str, str]:
        """Cabeçalhos CORS permissivos aplicados a toda resposta."""
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Headers": self.allowed_headers,
        }

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.allow_origin:
            errors.append("GATEWAY_ALLOW_ORIGIN não pode ser vazio")

        if not self.allowed_headers:
            errors.append("GATEWAY_ALLOWED_HEADERS não pode ser vazio")

        return errors


def _load_from_env() -> GatewaySettings:
    """Carrega GatewaySettings a partir de variáveis de ambiente."""
    return GatewaySettings(
        allow_origin=os.getenv("GATEWAY_ALLOW_ORIGIN", "*"),
        allowed_headers=os.getenv("GATEWAY_ALLOWED_HEADERS", DEFAULT_ALLOWED_HEADERS),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_from_env()
