"""Settings do Serper (busca de localizações e estabelecimentos).

Chave e endpoints vêm sempre do ambiente; nenhuma URL ou credencial
fica no código.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SerperSettings:
    """Configurações do Serper.

    Attributes:
        api_key: Chave enviada no header X-API-KEY
        locations_url: Endpoint de sugestão de localizações
        places_url: Endpoint de busca de estabelecimentos
        request_timeout_seconds: Timeout para requisições HTTP
    """

    api_key: str = ""
    locations_url: str = ""
    places_url: str = ""
    request_timeout_seconds: float = 10.0

    @property
    def headers(self) -> dict[str, str]:
        """Headers estáticos com a chave de API."""
        return {"X-API-KEY": self.api_key, "Content-Type": "application/json"}

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.api_key:
            errors.append("SERPER_API_KEY não configurado")

        if not self.locations_url:
            errors.append("SERPER_LOCATIONS_URL não configurado")

        if not self.places_url:
            errors.append("SERPER_PLACES_URL não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("SERPER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SerperSettings:
    """Carrega SerperSettings a partir de variáveis de ambiente."""
    return SerperSettings(
        api_key=os.getenv("SERPER_API_KEY", ""),
        locations_url=os.getenv("SERPER_LOCATIONS_URL", ""),
        places_url=os.getenv("SERPER_PLACES_URL", ""),
        request_timeout_seconds=float(os.getenv("SERPER_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_serper_settings() -> SerperSettings:
    """Retorna instância cacheada de SerperSettings."""
    return _load_from_env()
