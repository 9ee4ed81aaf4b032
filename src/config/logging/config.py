"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="conecta_edge")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("upstream_call_completed", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "conecta_edge"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    json_output: bool = True,
    secrets: Iterable[str] = (),
) -> None:
    """Configura logging estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
        json_output: False usa formatter de texto (desenvolvimento/testes).
        secrets: Credenciais a mascarar em qualquer mensagem.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter() if json_output else create_text_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretRedactionFilter(secrets))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_upstream_outcome(
    logger: logging.Logger,
    gateway: str,
    outcome: str,
    status_code: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log observável do desfecho de uma chamada ao upstream (sem PII).

    Args:
        logger: Logger instance.
        gateway: Nome do gateway (ex: "verificar_whatsapp").
        outcome: Classificação do resultado (success, upstream_error, timeout...).
        status_code: Status HTTP devolvido ao chamador.
        elapsed_ms: Tempo decorrido em ms (quando aplicável).
    """
    extra: dict[str, object] = {
        "gateway": gateway,
        "outcome": outcome,
    }
    if status_code is not None:
        extra["status_code"] = status_code
    if elapsed_ms is not None:
        extra["elapsed_ms"] = round(elapsed_ms, 2)

    level = logging.INFO if outcome == "success" else logging.WARNING
    logger.log(level, "Upstream outcome for %s: %s", gateway, outcome, extra=extra)
