"""Settings da Evolution API (gateway de mensagens WhatsApp).

URLs, chave de API e dados do webhook são sempre injetados via ambiente;
nenhuma credencial fica no código.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from urllib.parse import quote

# Evento assinado no webhook de mensagens
DEFAULT_WEBHOOK_EVENTS: tuple[str, ...] = ("MESSAGES_UPSERT",)


@dataclass(frozen=True)
class EvolutionSettings:
    """Configurações da Evolution API.

    Attributes:
        base_url: URL base da Evolution API (sem barra final)
        api_key: Chave global enviada no header `apikey` (opcional)
        default_instance: Instância usada na consulta de números
        webhook_target_url: URL que a Evolution chama com novas mensagens
        webhook_auth_token: Bearer repassado no header do webhook
        webhook_events: Eventos assinados no webhook
        request_timeout_seconds: Timeout para requisições HTTP
    """

    base_url: str = ""
    api_key: str = ""
    default_instance: str = ""

    # Webhook de mensagens
    webhook_target_url: str = ""
    webhook_auth_token: str = ""
    webhook_events: tuple[str, ...] = field(default=DEFAULT_WEBHOOK_EVENTS)

    request_timeout_seconds: float = 10.0

    @property
    def headers(self) -> dict[str, str]:
        """Headers estáticos para toda chamada à Evolution API."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
        return headers

    def endpoint(self, path: str) -> str:
        """Monta URL completa a partir de um path relativo.

        Args:
            path: Path relativo (ex: "instance/create")

        Returns:
            URL no formato: {base_url}/{path}

        Raises:
            ValueError: Se base_url não configurada.
        """
        if not self.base_url:
            raise ValueError("EVOLUTION_API_BASE_URL é obrigatório")
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def get_numbers_endpoint(self, instance: str | None = None) -> str:
        """Retorna URL de consulta de números WhatsApp.

        Args:
            instance: Nome da instância. Usa self.default_instance se None.

        Raises:
            ValueError: Se instância não informada e não configurada.
        """
        name = instance or self.default_instance
        if not name:
            raise ValueError("EVOLUTION_DEFAULT_INSTANCE é obrigatório")
        return self.endpoint(f"chat/whatsappNumbers/{quote(name, safe='')}")

    def webhook_config(self) -> dict[str, object]:
        """Payload de configuração do webhook de mensagens."""
        headers = {"Content-Type": "application/json"}
        if self.webhook_auth_token:
            headers["authorization"] = f"Bearer {self.webhook_auth_token}"
        return {
            "webhook": {
                "enabled": True,
                "url": self.webhook_target_url,
                "headers": headers,
                "byEvents": False,
                "base64": False,
                "events": list(self.webhook_events),
            }
        }

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Evolution API.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("EVOLUTION_API_BASE_URL não configurado")

        if not self.default_instance:
            errors.append("EVOLUTION_DEFAULT_INSTANCE não configurado")

        if not self.webhook_target_url:
            errors.append("EVOLUTION_WEBHOOK_TARGET_URL não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("EVOLUTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_events(raw: str) -> tuple[str, ...]:
    events = tuple(item.strip() for item in raw.split(",") if item.strip())
    return events or DEFAULT_WEBHOOK_EVENTS


def _load_from_env() -> EvolutionSettings:
    """Carrega EvolutionSettings a partir de variáveis de ambiente."""
    return EvolutionSettings(
        base_url=os.getenv("EVOLUTION_API_BASE_URL", ""),
        api_key=os.getenv("EVOLUTION_API_KEY", ""),
        default_instance=os.getenv("EVOLUTION_DEFAULT_INSTANCE", ""),
        webhook_target_url=os.getenv("EVOLUTION_WEBHOOK_TARGET_URL", ""),
        webhook_auth_token=os.getenv("EVOLUTION_WEBHOOK_AUTH_TOKEN", ""),
        webhook_events=_parse_events(os.getenv("EVOLUTION_WEBHOOK_EVENTS", "")),
        request_timeout_seconds=float(
            os.getenv("EVOLUTION_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_evolution_settings() -> EvolutionSettings:
    """Retorna instância cacheada de EvolutionSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
