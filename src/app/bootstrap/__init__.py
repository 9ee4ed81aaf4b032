"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e expõe as factories dos gateways.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_evolution_settings,
    get_gateway_settings,
    get_serper_settings,
)

# Nome do serviço para logs e métricas
SERVICE_NAME = "conecta_edge"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def _configured_secrets() -> tuple[str, ...]:
    """Credenciais que nunca podem aparecer em logs."""
    evolution = get_evolution_settings()
    serper = get_serper_settings()
    candidates = (evolution.api_key, evolution.webhook_auth_token, serper.api_key)
    return tuple(secret for secret in candidates if secret)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com correlation_id (LOG_FORMAT=text para texto)
    - Mascaramento das credenciais dos upstreams
    - Nível DEBUG quando DEBUG=true e LOG_LEVEL não definido
    """
    default_level = "DEBUG" if get_base_settings().debug else DEFAULT_LOG_LEVEL
    log_level = os.getenv("LOG_LEVEL", default_level).upper()
    log_format = os.getenv("LOG_FORMAT", "json").lower()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        json_output=log_format != "text",
        secrets=_configured_secrets(),
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = base.is_production or environment == "staging"
    errors: list[str] = [f"base: {error}" for error in base.validate()]

    gateway_errors = get_gateway_settings().validate()
    errors.extend(f"gateway: {error}" for error in gateway_errors)

    evolution_errors = get_evolution_settings().validate()
    errors.extend(f"evolution: {error}" for error in evolution_errors)

    serper_errors = get_serper_settings().validate()
    errors.extend(f"serper: {error}" for error in serper_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
